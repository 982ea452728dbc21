"""Single-parameter sweeps of the seal heat transfer calculation.

Recomputes the full correlation set while one input varies over a range,
collecting every output into numpy arrays for tabulation or export.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from dgs_thermal.core.heat_transfer import (
    InvalidInputError,
    SealInputs,
    check_inputs,
    compute,
    input_field_names,
    result_field_names,
)

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Outputs of a sweep, one array entry per parameter value."""

    parameter: str
    values: np.ndarray
    outputs: dict[str, np.ndarray] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.values)

    def as_arrays(self) -> dict[str, np.ndarray]:
        """All arrays keyed by name, suitable for HDF5 export."""
        arrays = {self.parameter: self.values}
        arrays.update(self.outputs)
        return arrays

    def rows(self) -> list[dict[str, float]]:
        """One dict per sweep point with the parameter value and all outputs."""
        rows = []
        for i, value in enumerate(self.values):
            row = {self.parameter: float(value)}
            row.update({key: float(arr[i]) for key, arr in self.outputs.items()})
            rows.append(row)
        return rows


def sweep(base: SealInputs, parameter: str, values: np.ndarray | list[float]) -> SweepResult:
    """Evaluate the calculation for each value of one input.

    Every point is validated before any is computed, so an invalid value
    anywhere in the range raises without returning partial results.

    Args:
        base: Inputs held fixed during the sweep.
        parameter: Name of the SealInputs field to vary.
        values: Values for that field.

    Raises:
        InvalidInputError: If *parameter* is not an input or a value is invalid.
    """
    if parameter not in input_field_names():
        raise InvalidInputError(parameter, None, f"Unknown sweep parameter '{parameter}'")

    values = np.asarray(values, dtype=float)
    points = [base.replace(**{parameter: float(v)}) for v in values]
    for point in points:
        check_inputs(point)

    outputs = {key: np.empty(len(points)) for key in result_field_names()}
    for i, point in enumerate(points):
        res = compute(point)
        for key in outputs:
            outputs[key][i] = getattr(res, key)

    logger.info("Swept %s over %d points", parameter, len(points))
    return SweepResult(parameter=parameter, values=values, outputs=outputs)


def linspace_sweep(
    base: SealInputs,
    parameter: str,
    start: float,
    stop: float,
    n_points: int = 11,
) -> SweepResult:
    """Sweep *parameter* over evenly spaced values from start to stop (inclusive)."""
    if n_points < 2:
        raise ValueError("A sweep needs at least 2 points")
    return sweep(base, parameter, np.linspace(start, stop, n_points))
