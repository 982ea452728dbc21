"""Gas property interface wrapping CoolProp.

Supplies the fluid-property inputs of a seal calculation (density,
viscosity, thermal conductivity, Prandtl number) for a named gas at a given
temperature and pressure.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from CoolProp.CoolProp import PropsSI

from dgs_thermal.core.heat_transfer import SealInputs
from dgs_thermal.utils.constants import P_ATM, T_ATM

logger = logging.getLogger(__name__)

# Path to bundled gas database
_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
_GAS_DB_PATH = _DATA_DIR / "gases.json"


class FluidPropertyError(Exception):
    """Raised when a fluid property calculation fails."""


@dataclass(frozen=True)
class GasProperties:
    """Transport properties of a gas at one state point."""

    gas: str
    T: float  # K
    P: float  # Pa
    rho: float  # kg/m³
    mu: float  # Pa·s
    lambda_gas: float  # W/(m·K)
    cp: float  # J/(kg·K)
    Pr: float

    def as_seal_fields(self) -> dict[str, float]:
        """Property values keyed by the matching SealInputs field names."""
        return {"rho": self.rho, "mu": self.mu, "lambda_gas": self.lambda_gas, "Pr": self.Pr}


# --- Gas database ---


@lru_cache(maxsize=1)
def _load_gas_db() -> dict[str, Any]:
    """Load the gas database JSON file."""
    if not _GAS_DB_PATH.exists():
        logger.warning("Gas database not found at %s", _GAS_DB_PATH)
        return {}
    with open(_GAS_DB_PATH) as f:
        return json.load(f)


def list_gases() -> list[str]:
    """Return names of all gases in the database."""
    return list(_load_gas_db().keys())


def get_gas_info(name: str) -> dict[str, Any]:
    """Get gas metadata from the database.

    Args:
        name: Gas name (case-insensitive lookup).

    Raises:
        KeyError: If the gas is not found.
    """
    db = _load_gas_db()
    for key, val in db.items():
        if key.lower() == name.lower():
            return val
    raise KeyError(f"Gas '{name}' not found. Available: {list(db.keys())}")


# --- Property lookup ---


@lru_cache(maxsize=128)
def gas_properties(gas: str, T: float = T_ATM, P: float = P_ATM) -> GasProperties:
    """Evaluate density, viscosity, conductivity and Prandtl number of a gas.

    Args:
        gas: Gas name from the bundled database (e.g. "air", "nitrogen").
        T: Temperature [K].
        P: Pressure [Pa].

    Raises:
        KeyError: If the gas is unknown.
        FluidPropertyError: If CoolProp cannot evaluate the state.
    """
    coolprop_name = get_gas_info(gas)["coolprop_name"]
    try:
        rho = PropsSI("D", "T", T, "P", P, coolprop_name)
        mu = PropsSI("V", "T", T, "P", P, coolprop_name)
        k = PropsSI("L", "T", T, "P", P, coolprop_name)
        cp = PropsSI("C", "T", T, "P", P, coolprop_name)
    except ValueError as exc:
        raise FluidPropertyError(
            f"Property lookup failed for {gas} at T={T} K, P={P} Pa: {exc}"
        ) from exc

    props = GasProperties(
        gas=gas, T=T, P=P, rho=rho, mu=mu, lambda_gas=k, cp=cp, Pr=cp * mu / k,
    )
    logger.debug("Gas properties %s", props)
    return props


def apply_gas(inputs: SealInputs, gas: str, T: float = T_ATM, P: float = P_ATM) -> SealInputs:
    """Return new inputs with rho, mu, lambda_gas and Pr taken from a gas state."""
    return inputs.replace(**gas_properties(gas, T, P).as_seal_fields())
