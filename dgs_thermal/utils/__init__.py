"""Utility modules for DGS Thermal."""

from dgs_thermal.utils.constants import P_ATM, RPM_TO_RAD_S, T_ATM
from dgs_thermal.utils.units import pressure_to_si, quantity_to_si, temperature_to_si

__all__ = [
    "P_ATM",
    "RPM_TO_RAD_S",
    "T_ATM",
    "pressure_to_si",
    "quantity_to_si",
    "temperature_to_si",
]
