"""Unit conversion utilities for DGS Thermal.

Provides a lightweight unit conversion system built on top of pint,
with convenience functions for the quantities a seal case is made of.
"""

from __future__ import annotations

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.formatter.default_format = "~P"  # short pretty format

Q_ = _ureg.Quantity


# SI target unit for every seal input field
SI_UNITS: dict[str, str] = {
    "d_outer": "m",
    "n_rpm": "rpm",
    "rho": "kg/m**3",
    "mu": "Pa*s",
    "lambda_gas": "W/(m*K)",
    "Pr": "dimensionless",
    "u_axial": "m/s",
    "delta_gap": "m",
    "d_hyd": "m",
    "B": "dimensionless",
}


def pressure_to_si(value: float, unit: str) -> float:
    """Convert pressure value to Pascals.

    Args:
        value: Numeric pressure value.
        unit: Source unit string (e.g. "bar", "psi", "MPa", "atm").

    Returns:
        Pressure in Pa.
    """
    return Q_(value, unit).to("Pa").magnitude


def temperature_to_si(value: float, unit: str) -> float:
    """Convert temperature to Kelvin.

    Args:
        value: Numeric temperature value.
        unit: Source unit string (e.g. "degC", "degF", "K").

    Returns:
        Temperature in K.
    """
    return Q_(value, unit).to("K").magnitude


def quantity_to_si(field_name: str, value: float | int | str) -> float:
    """Convert a seal input given as a number or a "value unit" string.

    Plain numbers are taken to be in the field's SI unit already.
    Strings such as ``"150 mm"`` or ``"5 um"`` are parsed with pint.

    Raises:
        KeyError: If *field_name* is not a seal input.
        ValueError: If the value is not a number or string (None and bools are
            rejected), or if the string cannot be parsed or has the wrong dimension.
    """
    target = SI_UNITS[field_name]
    if value is None or isinstance(value, bool):
        raise ValueError(f"{field_name} must be a number or a quantity string, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a number or a quantity string, got {value!r}")
    try:
        return float(value)
    except ValueError:
        pass
    try:
        qty = _ureg.Quantity(value)
        return float(qty.to(target).magnitude)
    except (pint.errors.PintError, ValueError, TypeError) as e:
        raise ValueError(f"Cannot convert {field_name}={value!r} to {target}: {e}") from e
