"""Heat transfer module for DGS Thermal.

Implements the empirical correlations for the convective heat transfer
coefficients of the stationary (static) and rotating (dynamic) rings of a
dry gas seal:

    Re_rot = rho · omega · d_outer · d_hyd / (2 · mu)
    Re_ax  = 2 · rho · u_axial · delta_gap / mu

    Nu_s = 0.023 · B · Re_ax^0.8 · Pr^0.4             H_s = Nu_s · lambda / (2 · delta)
    Nu_r = 0.135 · [(0.5 · Re_rot² + Re_ax²) · Pr]^(1/3)   H_r = Nu_r · lambda / d_hyd
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any

from dgs_thermal.utils.constants import (
    NU_ROTATING_COEFF,
    NU_ROTATING_EXP,
    NU_ROTATING_ROT_WEIGHT,
    NU_STATIC_COEFF,
    NU_STATIC_PR_EXP,
    NU_STATIC_RE_EXP,
    RPM_TO_RAD_S,
)
from dgs_thermal.utils.validation import validate_seal_inputs

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a seal input violates its domain constraint.

    Attributes:
        field: Name of the offending input.
        value: The rejected value.
    """

    def __init__(self, field: str, value: Any, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid value for {field}: {value!r}")


# --- Data model ---


@dataclass(frozen=True)
class SealInputs:
    """Geometric, operating and fluid-property inputs of a seal calculation.

    All values in SI units except the rotational speed (rev/min).
    """

    d_outer: float  # m — outer diameter of the rotating ring
    n_rpm: float  # rev/min — rotational speed
    rho: float  # kg/m³ — gas density
    mu: float  # Pa·s — dynamic viscosity
    lambda_gas: float  # W/(m·K) — gas thermal conductivity
    Pr: float  # Prandtl number
    u_axial: float  # m/s — axial flow velocity
    delta_gap: float  # m — seal gap thickness
    d_hyd: float  # m — hydraulic diameter
    B: float  # empirical correction factor

    def replace(self, **changes: float) -> SealInputs:
        """Return a copy with the given fields changed."""
        unknown = set(changes) - set(input_field_names())
        if unknown:
            name = sorted(unknown)[0]
            raise InvalidInputError(name, changes[name], f"Unknown seal input '{name}'")
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: SealInputs | None = None) -> SealInputs:
        """Build inputs from a mapping; missing fields come from *defaults*.

        Raises:
            InvalidInputError: If the mapping holds a key that is not a seal input.
        """
        base = defaults if defaults is not None else DEFAULT_INPUTS
        return base.replace(**data)


@dataclass(frozen=True)
class SealResults:
    """Derived dimensionless groups and heat transfer coefficients."""

    Re_rot: float  # rotational Reynolds number
    Re_ax: float  # axial Reynolds number
    Nu_s: float  # static-ring Nusselt number
    H_s: float  # W/(m²·K) — static-ring heat transfer coefficient
    Nu_r: float  # rotating-ring Nusselt number
    H_r: float  # W/(m²·K) — rotating-ring heat transfer coefficient

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def input_field_names() -> tuple[str, ...]:
    """Names of the SealInputs fields, in declaration order."""
    return tuple(f.name for f in fields(SealInputs))


def result_field_names() -> tuple[str, ...]:
    """Names of the SealResults fields, in declaration order."""
    return tuple(f.name for f in fields(SealResults))


# Reference case: air seal at 10300 rpm with a 5 µm gap
DEFAULT_INPUTS = SealInputs(
    d_outer=0.150,
    n_rpm=10300.0,
    rho=1.225,
    mu=1.81e-5,
    lambda_gas=0.026,
    Pr=0.71,
    u_axial=5.0,
    delta_gap=5.0e-6,
    d_hyd=1.0e-5,
    B=2.0,
)


# --- Reynolds numbers ---


def angular_velocity(n_rpm: float) -> float:
    """Angular velocity [rad/s] from rotational speed [rev/min]."""
    return n_rpm * RPM_TO_RAD_S


def rotational_reynolds(rho: float, omega: float, d_outer: float, d_hyd: float, mu: float) -> float:
    """Rotational Reynolds number.

    Re_rot = rho · omega · d_outer · d_hyd / (2 · mu)
    """
    return (rho * omega * d_outer * d_hyd) / (2.0 * mu)


def axial_reynolds(rho: float, u_axial: float, delta_gap: float, mu: float) -> float:
    """Axial Reynolds number based on twice the gap height.

    Re_ax = 2 · rho · u_axial · delta_gap / mu
    """
    return (2.0 * rho * u_axial * delta_gap) / mu


# --- Static (stationary) ring ---


def static_ring_nusselt(Re_ax: float, Pr: float, B: float) -> float:
    """Static-ring Nusselt number (Dittus-Boelter form with correction B).

    Nu_s = 0.023 · B · Re_ax^0.8 · Pr^0.4
    """
    return NU_STATIC_COEFF * B * Re_ax**NU_STATIC_RE_EXP * Pr**NU_STATIC_PR_EXP


def static_ring_htc(Nu_s: float, lambda_gas: float, delta_gap: float) -> float:
    """Static-ring heat transfer coefficient [W/(m²·K)].

    The characteristic length is the gap hydraulic diameter 2·delta.
    """
    return (Nu_s * lambda_gas) / (2.0 * delta_gap)


# --- Rotating (dynamic) ring ---


def rotating_ring_nusselt(Re_rot: float, Re_ax: float, Pr: float) -> float:
    """Rotating-ring Nusselt number for combined rotational and axial flow.

    Nu_r = 0.135 · [(0.5 · Re_rot² + Re_ax²) · Pr]^(1/3)
    """
    term = (NU_ROTATING_ROT_WEIGHT * Re_rot * Re_rot + Re_ax * Re_ax) * Pr
    return NU_ROTATING_COEFF * term**NU_ROTATING_EXP


def rotating_ring_htc(Nu_r: float, lambda_gas: float, d_hyd: float) -> float:
    """Rotating-ring heat transfer coefficient [W/(m²·K)]."""
    return (Nu_r * lambda_gas) / d_hyd


# --- Full calculation ---


def check_inputs(inputs: SealInputs) -> None:
    """Raise InvalidInputError for the first domain violation in *inputs*."""
    result = validate_seal_inputs(inputs)
    if not result.is_valid:
        first = result.errors[0]
        raise InvalidInputError(first.parameter, first.value, first.message)


# Inputs each output depends on, used to name the culprit of an overflow
_RESULT_DRIVERS: dict[str, tuple[str, ...]] = {
    "Re_rot": ("rho", "n_rpm", "d_outer", "d_hyd", "mu"),
    "Re_ax": ("rho", "u_axial", "delta_gap", "mu"),
    "Nu_s": ("rho", "u_axial", "delta_gap", "mu", "Pr", "B"),
    "H_s": ("rho", "u_axial", "delta_gap", "mu", "Pr", "B", "lambda_gas"),
    "Nu_r": ("rho", "n_rpm", "d_outer", "d_hyd", "mu", "u_axial", "delta_gap", "Pr"),
    "H_r": (
        "rho", "n_rpm", "d_outer", "d_hyd", "mu", "u_axial", "delta_gap", "Pr", "lambda_gas",
    ),
}


def check_results(inputs: SealInputs, results: SealResults) -> None:
    """Raise InvalidInputError if any output overflowed to a non-finite value.

    The blamed input is the driver of the first non-finite output whose
    magnitude is furthest from unity.
    """
    for name in result_field_names():
        value = getattr(results, name)
        if math.isfinite(value):
            continue
        drivers = [d for d in _RESULT_DRIVERS[name] if getattr(inputs, d) > 0]
        field = max(drivers, key=lambda d: abs(math.log10(getattr(inputs, d))))
        raise InvalidInputError(
            field,
            getattr(inputs, field),
            f"{name} is not finite ({value}); {field}={getattr(inputs, field)!r} "
            f"is outside the numerically representable range",
        )


def compute(inputs: SealInputs) -> SealResults:
    """Compute Reynolds numbers, Nusselt numbers and heat transfer coefficients.

    Inputs are validated before any arithmetic, so a failed call never
    yields a partial result.

    Args:
        inputs: Seal geometry, operating point and gas properties.

    Returns:
        A new SealResults.

    Raises:
        InvalidInputError: If any input violates its domain constraint, or if
            the inputs are so extreme that an output is not finite.
    """
    check_inputs(inputs)

    omega = angular_velocity(inputs.n_rpm)
    Re_rot = rotational_reynolds(inputs.rho, omega, inputs.d_outer, inputs.d_hyd, inputs.mu)
    Re_ax = axial_reynolds(inputs.rho, inputs.u_axial, inputs.delta_gap, inputs.mu)

    Nu_s = static_ring_nusselt(Re_ax, inputs.Pr, inputs.B)
    H_s = static_ring_htc(Nu_s, inputs.lambda_gas, inputs.delta_gap)

    Nu_r = rotating_ring_nusselt(Re_rot, Re_ax, inputs.Pr)
    H_r = rotating_ring_htc(Nu_r, inputs.lambda_gas, inputs.d_hyd)

    logger.debug(
        "Re_rot=%.6g Re_ax=%.6g Nu_s=%.6g H_s=%.6g Nu_r=%.6g H_r=%.6g",
        Re_rot, Re_ax, Nu_s, H_s, Nu_r, H_r,
    )

    results = SealResults(Re_rot=Re_rot, Re_ax=Re_ax, Nu_s=Nu_s, H_s=H_s, Nu_r=Nu_r, H_r=H_r)
    check_results(inputs, results)
    return results
