"""CLI command for a single seal heat transfer calculation."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console

from dgs_thermal.cli.common import (
    compute_or_exit,
    inputs_table,
    resolve_case,
    results_table,
    seal_input_options,
)
from dgs_thermal.core.config import save_case_json


@click.command("compute")
@seal_input_options
@click.option("--name", type=str, default=None, help="Case name stored in the output file.")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output case file (JSON).")
@click.pass_context
def compute_cmd(
    ctx: click.Context,
    case_path: str | None,
    gas: str | None,
    name: str | None,
    output: str | None,
    **kwargs: Any,
) -> None:
    """Compute Reynolds, Nusselt and heat transfer coefficients."""
    console: Console = ctx.obj.get("console", Console())

    case = resolve_case(console, case_path, gas, kwargs)
    case.results = compute_or_exit(console, case.inputs)
    if name:
        case.meta.name = name

    console.print("\n[bold]DGS Thermal — Seal Heat Transfer[/bold]\n")
    console.print(inputs_table(case))
    console.print(results_table(case.results))

    if output:
        save_case_json(case, output)
        console.print(f"\n[dim]Saved to {output}[/dim]")
