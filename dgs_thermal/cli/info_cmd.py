"""CLI command for inspecting case files and listing available gases."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from dgs_thermal.core.config import load_case_json
from dgs_thermal.core.fluids import FluidPropertyError, gas_properties, get_gas_info, list_gases
from dgs_thermal.core.heat_transfer import InvalidInputError
from dgs_thermal.reports.summary import INPUT_FIELDS, RESULT_FIELDS, format_value
from dgs_thermal.utils.constants import P_ATM, T_ATM


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect case files and gases."""
    pass


@info.command("case")
@click.argument("path", type=click.Path(exists=True))
@click.pass_context
def info_case(ctx: click.Context, path: str) -> None:
    """Display summary of a case file."""
    console: Console = ctx.obj.get("console", Console())
    try:
        case = load_case_json(path)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    tree = Tree(f"[bold]{escape(case.meta.name)}[/bold]")
    meta = tree.add("[cyan]Metadata[/cyan]")
    meta.add(f"Author: {escape(case.meta.author) or '—'}")
    meta.add(f"Version: {escape(case.meta.version)}")
    meta.add(f"Modified: {case.meta.modified or '—'}")

    inp = tree.add("[cyan]Inputs[/cyan]")
    for key, label, unit in INPUT_FIELDS:
        inp.add(f"{label}: {format_value(getattr(case.inputs, key))} {unit}")

    if case.results is not None:
        res = tree.add("[cyan]Stored Results[/cyan]")
        for key, label, unit in RESULT_FIELDS:
            res.add(f"{label}: {format_value(getattr(case.results, key))} {unit}")

    if case.sweep:
        sw = tree.add("[cyan]Sweep[/cyan]")
        for k, v in case.sweep.items():
            if k == "rows" and isinstance(v, list):
                sw.add(f"points stored: {len(v)}")
                continue
            sw.add(escape(f"{k}: {v}"))

    console.print(tree)


@info.command("gases")
@click.option("--temperature", type=float, default=T_ATM, show_default=True, help="Temperature [K].")
@click.option("--pressure", type=float, default=P_ATM, show_default=True, help="Pressure [Pa].")
@click.pass_context
def info_gases(ctx: click.Context, temperature: float, pressure: float) -> None:
    """List available gases with their properties at one state."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title=f"Available Gases at {temperature:.1f} K, {pressure / 1e5:.3f} bar")
    table.add_column("Name", style="cyan")
    table.add_column("Formula", style="green")
    table.add_column("rho [kg/m³]", justify="right")
    table.add_column("mu [Pa·s]", justify="right")
    table.add_column("lambda [W/(m·K)]", justify="right")
    table.add_column("Pr", justify="right")

    for name in list_gases():
        gas_info = get_gas_info(name)
        try:
            props = gas_properties(name, temperature, pressure)
        except FluidPropertyError as e:
            table.add_row(name, gas_info.get("formula", "—"), "—", "—", "—", "—")
            console.print(f"[yellow]Warning:[/yellow] {escape(str(e))}")
            continue
        table.add_row(
            name,
            gas_info.get("formula", "—"),
            format_value(props.rho),
            format_value(props.mu),
            format_value(props.lambda_gas),
            format_value(props.Pr),
        )
    console.print(table)
