"""DGS Thermal command-line interface package.

Supports ``python -m dgs_thermal.cli`` as an alternative to the ``dgs`` entry point.
"""

from dgs_thermal.cli.main import cli, main

__all__ = ["cli", "main"]
