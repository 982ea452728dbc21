"""CLI command for the free-text engineering assessment."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from dgs_thermal.analysis.summarizer import ExternalServiceError, get_summarizer, summarize
from dgs_thermal.cli.common import (
    compute_or_exit,
    resolve_case,
    results_table,
    seal_input_options,
)


@click.command("analyze")
@click.option(
    "--engine",
    type=click.Choice(["rule", "anthropic"], case_sensitive=False),
    default="rule",
    show_default=True,
    help="Assessment generator (anthropic needs ANTHROPIC_API_KEY).",
)
@seal_input_options
@click.pass_context
def analyze(
    ctx: click.Context,
    engine: str,
    case_path: str | None,
    gas: str | None,
    **kwargs: Any,
) -> None:
    """Compute a case and print an engineering assessment of it."""
    console: Console = ctx.obj.get("console", Console())

    case = resolve_case(console, case_path, gas, kwargs)
    results = compute_or_exit(console, case.inputs)
    console.print(results_table(results))

    try:
        text = summarize(case.inputs, results, get_summarizer(engine))
    except ExternalServiceError as e:
        # Results above stay valid; only the assessment is missing
        console.print(f"\n[red]Assessment failed:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(Panel(escape(text), title=f"Assessment ({engine})", border_style="blue"))
