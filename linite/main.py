"""
Linite — CLI entrypoint.

Usage:
    python -m linite.main --help
    python -m linite.main install ubuntu firefox vlc
    python -m linite.main uninstall ubuntu firefox --deps
    python -m linite.main catalog check
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from linite import __version__
from linite.core.observability.logging_config import (
    FILE_ENV_VAR,
    FILE_LEVEL_ENV_VAR,
    cli_log_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="linite")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--catalog",
    "-c",
    "catalog_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to catalog.yml (default: $LINITE_CATALOG or auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    catalog_path: str | None,
) -> None:
    """Linite — generate install/uninstall commands for Linux and Windows apps."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["catalog_path"] = Path(catalog_path) if catalog_path else None

    setup_logging(
        level=cli_log_level(debug=debug, verbose=verbose, quiet=quiet, env=os.environ),
        log_file=os.environ.get(FILE_ENV_VAR),
        log_file_level=os.environ.get(FILE_LEVEL_ENV_VAR),
    )


# ── Register sub-command groups from linite/ui/cli/ ───────────────

from linite.ui.cli.catalog import catalog
from linite.ui.cli.generate import install, uninstall

cli.add_command(install)
cli.add_command(uninstall)
cli.add_command(catalog)


if __name__ == "__main__":
    cli()
