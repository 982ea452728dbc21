"""Input validation and design rule checking for DGS Thermal."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from dgs_thermal.utils.constants import GAP_RANGE_TYPICAL, M_TO_UM, PR_RANGE_DITTUS_BOELTER

if TYPE_CHECKING:
    from dgs_thermal.core.heat_transfer import SealInputs


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)


# --- Common validators ---


def validate_finite(name: str, value: float, result: ValidationResult) -> bool:
    """Validate that a value is a finite real number. Returns False on failure."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        result.error(name, f"{name} must be a real number, got {value!r}", value=value)
        return False
    if not math.isfinite(value):
        result.error(name, f"{name} must be finite, got {value}", value=value)
        return False
    return True


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}", value=value, limit=0.0)


def validate_non_negative(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is zero or positive."""
    if value < 0:
        result.error(name, f"{name} must be non-negative, got {value}", value=value, limit=0.0)


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within the correlation range [low, high]."""
    if value < low or value > high:
        result.add(
            severity, name, f"{name} = {value} is outside the correlation range [{low}, {high}]",
            value=value, limit=(low, high),
        )


# Domain constraints of the seal inputs
POSITIVE_FIELDS = ("d_outer", "rho", "mu", "lambda_gas", "Pr", "delta_gap", "d_hyd", "B")
NON_NEGATIVE_FIELDS = ("n_rpm", "u_axial")


def validate_seal_inputs(inputs: SealInputs) -> ValidationResult:
    """Run domain and plausibility checks on a set of seal inputs.

    Errors mark values outside the domain of the correlations (division
    by zero, negative speeds, non-finite numbers). Warnings flag values
    outside the range the correlations were fitted for; they never block
    a calculation.
    """
    result = ValidationResult()

    for name in POSITIVE_FIELDS:
        value = getattr(inputs, name)
        if validate_finite(name, value, result):
            validate_positive(name, value, result)

    for name in NON_NEGATIVE_FIELDS:
        value = getattr(inputs, name)
        if validate_finite(name, value, result):
            validate_non_negative(name, value, result)

    if not result.is_valid:
        return result

    low, high = PR_RANGE_DITTUS_BOELTER
    validate_range("Pr", inputs.Pr, low, high, result, Severity.WARNING)

    low, high = GAP_RANGE_TYPICAL
    if not low <= inputs.delta_gap <= high:
        result.warning(
            "delta_gap",
            f"Seal gap {inputs.delta_gap * M_TO_UM:.2f} µm is outside the typical "
            f"dry gas seal range [{low * M_TO_UM:.0f}, {high * M_TO_UM:.0f}] µm",
            value=inputs.delta_gap,
            limit=GAP_RANGE_TYPICAL,
        )

    if inputs.n_rpm == 0 and inputs.u_axial == 0:
        result.info("n_rpm", "Both rotational speed and axial velocity are zero; no convection")

    return result
