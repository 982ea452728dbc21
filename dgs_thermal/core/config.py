"""Calculation case management and project I/O for DGS Thermal.

Handles saving/loading seal calculation cases in JSON (metadata, inputs,
results) and HDF5 (sweep arrays).
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np

from dgs_thermal import __version__
from dgs_thermal.core.heat_transfer import (
    DEFAULT_INPUTS,
    InvalidInputError,
    SealInputs,
    SealResults,
    input_field_names,
    result_field_names,
)
from dgs_thermal.utils.units import quantity_to_si

logger = logging.getLogger(__name__)

# Attempt HDF5 import; gracefully degrade if not installed
try:
    import h5py

    _HAS_H5PY = True
except ImportError:
    _HAS_H5PY = False
    logger.info("h5py not available — HDF5 features disabled")


# --- Case metadata ---


@dataclass
class CaseMeta:
    """Top-level case metadata."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    version: str = __version__
    created: str = ""
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        self.modified = datetime.now(timezone.utc).isoformat()
        if not self.created:
            self.created = self.modified


@dataclass
class SealCase:
    """A seal calculation case: inputs, last computed results and sweep data."""

    meta: CaseMeta = field(default_factory=CaseMeta)
    inputs: SealInputs = DEFAULT_INPUTS
    results: SealResults | None = None

    # Sweep summary (parameter name, range); arrays are kept separately
    sweep: dict[str, Any] = field(default_factory=dict)

    # Array data stored separately in HDF5
    _array_data: dict[str, np.ndarray] = field(default_factory=dict, repr=False)


# --- Input parsing ---


def parse_inputs(data: dict[str, Any], defaults: SealInputs = DEFAULT_INPUTS) -> SealInputs:
    """Build SealInputs from a mapping of numbers or "value unit" strings.

    Raises:
        InvalidInputError: On unknown keys or values that cannot be converted.
    """
    known = set(input_field_names())
    converted: dict[str, float] = {}
    for key, raw in data.items():
        if key not in known:
            raise InvalidInputError(key, raw, f"Unknown seal input '{key}'")
        try:
            converted[key] = quantity_to_si(key, raw)
        except ValueError as e:
            raise InvalidInputError(key, raw, str(e)) from e
    return SealInputs.from_dict(converted, defaults=defaults)


# --- JSON serialization ---


class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        return super().default(obj)


def save_case_json(case: SealCase, path: str | Path) -> None:
    """Save a case to a JSON file (excludes large arrays).

    Arrays stored in _array_data are written to a companion HDF5 file
    if h5py is available.
    """
    path = Path(path)
    case.meta.touch()

    data = {
        "meta": asdict(case.meta),
        "inputs": case.inputs.to_dict(),
        "results": case.results.to_dict() if case.results is not None else None,
        "sweep": case.sweep,
    }

    with open(path, "w") as f:
        json.dump(data, f, indent=2, cls=_NumpyEncoder)

    logger.info("Saved case to %s", path)

    # Optionally write arrays to HDF5
    if _HAS_H5PY and case._array_data:
        h5_path = path.with_suffix(".h5")
        save_arrays_hdf5(case._array_data, h5_path)


def _section(data: dict[str, Any], name: str, default: Any) -> Any:
    """Return a top-level section of a case file, which must be an object or null."""
    value = data.get(name)
    if value is None:
        return default
    if not isinstance(value, dict):
        raise InvalidInputError(name, value, f"Case section '{name}' must be an object")
    return value


def _parse_meta(raw: dict[str, Any]) -> CaseMeta:
    known = {f.name for f in fields(CaseMeta)}
    for key, value in raw.items():
        if key not in known:
            raise InvalidInputError(f"meta.{key}", value, f"Unknown case metadata '{key}'")
        if not isinstance(value, str):
            raise InvalidInputError(f"meta.{key}", value, f"Case metadata '{key}' must be a string")
    return CaseMeta(**raw)


def _parse_results(raw: dict[str, Any]) -> SealResults:
    expected = result_field_names()
    missing = [name for name in expected if name not in raw]
    unknown = [key for key in raw if key not in expected]
    if missing or unknown:
        raise InvalidInputError(
            "results",
            raw,
            f"Stored results must hold exactly {', '.join(expected)} "
            f"(missing: {missing or 'none'}, unknown: {unknown or 'none'})",
        )
    for name in expected:
        value = raw[name]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(
                name, value, f"Stored result {name} must be a number, got {value!r}"
            )
    return SealResults(**{name: float(raw[name]) for name in expected})


def load_case_json(path: str | Path) -> SealCase:
    """Load a case from a JSON file.

    Input values may be plain SI numbers or strings with units. Stored
    results are loaded as-is; nothing is recomputed. If a companion .h5
    file exists, array data is also loaded.

    Raises:
        InvalidInputError: If the file is not valid JSON or any section holds
            unknown, missing or unparsable values.
    """
    path = Path(path)
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError("case", str(path), f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInputError("case", str(path), f"{path} must hold a JSON object")

    meta = _parse_meta(_section(data, "meta", {}))
    inputs = parse_inputs(_section(data, "inputs", {}))
    raw_results = _section(data, "results", None)
    results = _parse_results(raw_results) if raw_results is not None else None
    case = SealCase(meta=meta, inputs=inputs, results=results, sweep=_section(data, "sweep", {}))

    h5_path = path.with_suffix(".h5")
    if _HAS_H5PY and h5_path.exists():
        case._array_data = load_arrays_hdf5(h5_path)

    return case


# --- HDF5 helpers ---


def save_arrays_hdf5(arrays: dict[str, np.ndarray], path: str | Path) -> None:
    """Save a dictionary of numpy arrays to HDF5."""
    if not _HAS_H5PY:
        logger.warning("h5py not available, skipping HDF5 save")
        return
    path = Path(path)
    with h5py.File(path, "w") as f:
        for key, arr in arrays.items():
            f.create_dataset(key, data=arr)
        f.attrs["created"] = datetime.now(timezone.utc).isoformat()
    logger.info("Saved %d arrays to %s", len(arrays), path)


def load_arrays_hdf5(path: str | Path) -> dict[str, np.ndarray]:
    """Load all datasets from an HDF5 file into a dictionary."""
    if not _HAS_H5PY:
        logger.warning("h5py not available, skipping HDF5 load")
        return {}
    path = Path(path)
    arrays: dict[str, np.ndarray] = {}
    with h5py.File(path, "r") as f:
        for key in f.keys():
            arrays[key] = f[key][:]
    return arrays
