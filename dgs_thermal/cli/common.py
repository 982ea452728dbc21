"""Shared options and helpers for the DGS Thermal CLI commands."""

from __future__ import annotations

import logging
from typing import Any, Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dgs_thermal.core.config import SealCase, load_case_json, parse_inputs
from dgs_thermal.core.fluids import FluidPropertyError, apply_gas, list_gases
from dgs_thermal.core.heat_transfer import (
    DEFAULT_INPUTS,
    InvalidInputError,
    SealInputs,
    SealResults,
    compute,
)
from dgs_thermal.reports.summary import INPUT_FIELDS, RESULT_FIELDS, format_value, htc_ratio
from dgs_thermal.utils.constants import P_ATM, T_ATM
from dgs_thermal.utils.units import pressure_to_si, temperature_to_si
from dgs_thermal.utils.validation import validate_seal_inputs

logger = logging.getLogger(__name__)

# (option name, field, help)
_INPUT_OPTIONS = [
    ("--d-outer", "d_outer", "Outer diameter of the rotating ring [m]."),
    ("--n-rpm", "n_rpm", "Rotational speed [rpm]."),
    ("--rho", "rho", "Gas density [kg/m³]."),
    ("--mu", "mu", "Dynamic viscosity [Pa·s]."),
    ("--lambda-gas", "lambda_gas", "Gas thermal conductivity [W/(m·K)]."),
    ("--pr", "Pr", "Prandtl number."),
    ("--u-axial", "u_axial", "Axial flow velocity [m/s]."),
    ("--delta-gap", "delta_gap", "Seal gap thickness [m]."),
    ("--d-hyd", "d_hyd", "Hydraulic diameter [m]."),
    ("--b", "B", "Empirical correction factor B."),
]


def seal_input_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add one option per seal input plus --case/--gas/--temperature/--pressure.

    Input options take SI numbers or quoted values with units ("150 mm").
    """
    for opt, field_name, help_text in reversed(_INPUT_OPTIONS):
        default = getattr(DEFAULT_INPUTS, field_name)
        func = click.option(
            opt,
            field_name,
            type=str,
            default=None,
            help=f"{help_text} [default: {default:g}]",
        )(func)
    func = click.option(
        "--pressure-unit",
        type=click.Choice(["Pa", "kPa", "bar", "MPa", "psi"]),
        default="Pa",
        show_default=True,
        help="Unit of --pressure.",
    )(func)
    func = click.option(
        "--pressure",
        type=float,
        default=None,
        help=f"Gas pressure for --gas, in --pressure-unit [default: {P_ATM:g} Pa].",
    )(func)
    func = click.option(
        "--temperature-unit",
        type=click.Choice(["K", "degC", "degF"]),
        default="K",
        show_default=True,
        help="Unit of --temperature.",
    )(func)
    func = click.option(
        "--temperature",
        type=float,
        default=None,
        help=f"Gas temperature for --gas, in --temperature-unit [default: {T_ATM:g} K].",
    )(func)
    func = click.option(
        "--gas",
        type=click.Choice(list_gases(), case_sensitive=False),
        default=None,
        help="Take rho, mu, lambda_gas and Pr from CoolProp for this gas.",
    )(func)
    func = click.option(
        "--case",
        "case_path",
        type=click.Path(exists=True),
        default=None,
        help="Load inputs from a case JSON file.",
    )(func)
    return func


def gas_state(options: dict[str, Any]) -> tuple[float, float]:
    """Return (T [K], P [Pa]) from the --temperature/--pressure options.

    Units only apply to values given on the command line; absent values
    fall back to the reference atmosphere.
    """
    T = options.get("temperature")
    P = options.get("pressure")
    T = T_ATM if T is None else temperature_to_si(T, options.get("temperature_unit") or "K")
    P = P_ATM if P is None else pressure_to_si(P, options.get("pressure_unit") or "Pa")
    return T, P


def resolve_case(
    console: Console,
    case_path: str | None,
    gas: str | None,
    options: dict[str, Any],
) -> SealCase:
    """Build a case from a file, a gas state and explicit options (in that order).

    *options* are the keyword arguments collected by ``seal_input_options``.
    Prints the error and exits with status 1 on invalid input.
    """
    try:
        case = load_case_json(case_path) if case_path else SealCase()
        inputs = case.inputs
        if gas:
            T, P = gas_state(options)
            inputs = apply_gas(inputs, gas, T, P)
        given = {
            name: options[name]
            for _, name, _ in _INPUT_OPTIONS
            if options.get(name) is not None
        }
        case.inputs = parse_inputs(given, defaults=inputs)
    except (InvalidInputError, FluidPropertyError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    case.results = None
    report_validation(console, case)
    return case


def report_validation(console: Console, case: SealCase) -> None:
    """Print validation errors (and exit) or warnings for the case inputs."""
    result = validate_seal_inputs(case.inputs)
    for msg in result.warnings:
        logger.warning("%s", msg.message)
        console.print(f"[yellow]Warning:[/yellow] {escape(msg.message)}")
    if not result.is_valid:
        for msg in result.errors:
            console.print(f"[red]Error:[/red] {escape(msg.message)}")
        raise SystemExit(1)


def inputs_table(case: SealCase) -> Table:
    table = Table(title="Inputs")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    for key, label, unit in INPUT_FIELDS:
        table.add_row(label, format_value(getattr(case.inputs, key)), unit)
    return table


def results_table(results: SealResults) -> Table:
    table = Table(title="Heat Transfer Results")
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")
    for key, label, unit in RESULT_FIELDS:
        table.add_row(label, format_value(getattr(results, key)), unit)
    ratio = htc_ratio(results)
    table.add_row("", "", "")
    table.add_row("H_r / H_s", format_value(ratio) if ratio is not None else "—", "—")
    return table


def compute_or_exit(console: Console, inputs: SealInputs) -> SealResults:
    """Run the calculation, printing the error and exiting 1 if it overflows."""
    try:
        return compute(inputs)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)
