"""CLI command for single-parameter sweeps."""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dgs_thermal.analysis.sweep import linspace_sweep
from dgs_thermal.cli.common import resolve_case, seal_input_options
from dgs_thermal.core.config import save_case_json
from dgs_thermal.core.heat_transfer import InvalidInputError, input_field_names
from dgs_thermal.reports.summary import format_value


@click.command("sweep")
@click.option(
    "--param",
    type=click.Choice(list(input_field_names())),
    required=True,
    help="Input to vary.",
)
@click.option("--start", type=float, required=True, help="First value (SI units; rpm for n_rpm).")
@click.option("--stop", type=float, required=True, help="Last value (SI units; rpm for n_rpm).")
@click.option("--points", "-n", type=int, default=11, show_default=True, help="Number of points.")
@seal_input_options
@click.option("--output", "-o", type=click.Path(), default=None, help="Output case file (JSON).")
@click.pass_context
def sweep_cmd(
    ctx: click.Context,
    param: str,
    start: float,
    stop: float,
    points: int,
    case_path: str | None,
    gas: str | None,
    output: str | None,
    **kwargs: Any,
) -> None:
    """Recompute the heat transfer coefficients while one input varies."""
    console: Console = ctx.obj.get("console", Console())

    case = resolve_case(console, case_path, gas, kwargs)

    try:
        result = linspace_sweep(case.inputs, param, start, stop, points)
    except (InvalidInputError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    console.print(f"\n[bold]DGS Thermal — Sweep of {param} ({len(result)} points)[/bold]\n")

    table = Table(title="Sweep Results")
    table.add_column(param, style="cyan", justify="right")
    for key in result.outputs:
        table.add_column(key, style="green", justify="right")
    for row in result.rows():
        table.add_row(*(format_value(v) for v in row.values()))
    console.print(table)

    if output:
        case.sweep = {
            "parameter": param,
            "start": start,
            "stop": stop,
            "points": points,
            "rows": result.rows(),
        }
        case._array_data = result.as_arrays()
        save_case_json(case, output)
        console.print(f"\n[dim]Saved to {output}[/dim]")

