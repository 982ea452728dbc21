"""Core calculation modules for DGS Thermal.

This package contains the primary engineering calculations:
- heat_transfer: Reynolds/Nusselt correlations for the static and rotating rings
- fluids: CoolProp-based gas property lookup
- config: Calculation case persistence (JSON + HDF5)
"""

from dgs_thermal.core.heat_transfer import (
    DEFAULT_INPUTS,
    InvalidInputError,
    SealInputs,
    SealResults,
    compute,
)

__all__ = ["DEFAULT_INPUTS", "InvalidInputError", "SealInputs", "SealResults", "compute"]
