"""DGS Thermal command-line interface.

Entry point for the ``dgs`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from dgs_thermal import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", count=True, help="Increase log output (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """DGS Thermal — dry gas seal heat transfer coefficients.

    Computes rotational/axial Reynolds numbers, Nusselt numbers and the
    convective heat transfer coefficients of the static and rotating rings.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Import and register sub-commands
from dgs_thermal.cli.compute_cmd import compute_cmd  # noqa: E402
from dgs_thermal.cli.sweep_cmd import sweep_cmd  # noqa: E402
from dgs_thermal.cli.report_cmd import report  # noqa: E402
from dgs_thermal.cli.analyze_cmd import analyze  # noqa: E402
from dgs_thermal.cli.info_cmd import info  # noqa: E402

cli.add_command(compute_cmd)
cli.add_command(sweep_cmd)
cli.add_command(report)
cli.add_command(analyze)
cli.add_command(info)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
