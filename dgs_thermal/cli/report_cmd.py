"""CLI commands for report generation."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from dgs_thermal.analysis.summarizer import ExternalServiceError, get_summarizer, summarize
from dgs_thermal.cli.common import compute_or_exit, report_validation
from dgs_thermal.core.config import load_case_json
from dgs_thermal.core.heat_transfer import InvalidInputError
from dgs_thermal.reports.summary import (
    generate_text_report,
    save_html_report,
    save_text_report,
)


@click.command("report")
@click.option(
    "--case",
    "case_path",
    type=click.Path(exists=True),
    required=True,
    help="Input case JSON.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "html", "both"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Report format.",
)
@click.option(
    "--assessment",
    type=click.Choice(["none", "rule", "anthropic"], case_sensitive=False),
    default="none",
    show_default=True,
    help="Append an engineering assessment.",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Output file path (auto-generated if not specified).",
)
@click.pass_context
def report(
    ctx: click.Context,
    case_path: str,
    fmt: str,
    assessment: str,
    output: str | None,
) -> None:
    """Generate a calculation report from a case file."""
    console: Console = ctx.obj.get("console", Console())

    try:
        case = load_case_json(case_path)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)
    report_validation(console, case)

    # Reports always reflect the stored inputs
    case.results = compute_or_exit(console, case.inputs)

    text = None
    if assessment != "none":
        try:
            text = summarize(case.inputs, case.results, get_summarizer(assessment))
        except ExternalServiceError as e:
            console.print(f"[yellow]Assessment unavailable:[/yellow] {escape(str(e))}")

    if fmt == "text" or fmt == "both":
        out_txt = output or "report.txt"
        if fmt == "both" and output:
            out_txt = output.rsplit(".", 1)[0] + ".txt"
        save_text_report(case, out_txt, text)
        console.print(f"[green]Text report saved:[/green] {out_txt}")

    if fmt == "html" or fmt == "both":
        out_html = output or "report.html"
        if fmt == "both" and output:
            out_html = output.rsplit(".", 1)[0] + ".html"
        save_html_report(case, out_html, text)
        console.print(f"[green]HTML report saved:[/green] {out_html}")

    if fmt == "text" and not output:
        # Print to console as well
        console.print(f"\n{generate_text_report(case, text)}")
