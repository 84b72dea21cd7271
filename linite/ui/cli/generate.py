"""
CLI commands for install/uninstall command generation.

Thin wrappers over ``linite.core.services.command_gen``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from linite.core.models.request import GenerateRequest

_NIX_METHODS = click.Choice(["nix-shell", "nix-env", "nix-flakes"])


def _fail(message: str, as_json: bool) -> None:
    """Report an error the way the rest of the CLI does, then exit 1."""
    if as_json:
        click.echo(json.dumps({"error": message}, indent=2))
    else:
        click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


def _validation_message(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}"
        for err in e.errors()
    )


def _run(ctx: click.Context, direction: str, params: dict, as_json: bool, script: str | None):
    """Build the request, run the generator, and print or save the result."""
    from linite.core.config.loader import CatalogError, load_catalog
    from linite.core.services.command_gen import CommandGenerationError, Direction, generate_commands
    from linite.core.services.generators.install_script import render_script

    try:
        request = GenerateRequest.model_validate(params)
    except ValidationError as e:
        _fail(_validation_message(e), as_json)
        return

    try:
        catalog = load_catalog(ctx.obj.get("catalog_path"))
        result = generate_commands(request, catalog, Direction(direction))
    except (CatalogError, CommandGenerationError) as e:
        _fail(str(e), as_json)
        return

    if script:
        generated = render_script(result, request.distro_slug)
        Path(script).write_text(generated.content, encoding="utf-8")

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    _print_result(result.to_dict(), direction, request.distro_slug, ctx.obj.get("quiet", False))
    if script:
        click.secho(f"📝 Script written to {script}", fg="green")


def _print_block(title: str, commands: list[str], color: str = "white") -> None:
    if not commands:
        return
    click.secho(f"   {title}:", fg=color, bold=True)
    for cmd in commands:
        click.echo(f"     $ {cmd}")


def _print_result(data: dict, direction: str, distro_slug: str, quiet: bool) -> None:
    """Human-readable rendering of a result dict."""
    if not quiet:
        icon = "📦" if direction == "install" else "🗑️ "
        click.secho(f"\n{icon} {direction.capitalize()} commands for {distro_slug}", fg="cyan", bold=True)

    if direction == "install":
        _print_block("Setup", data["setupCommands"], "yellow")
        _print_block("Commands", data["commands"], "green")
    else:
        _print_block("Cleanup", data["cleanupCommands"], "yellow")
        _print_block("Commands", data["commands"], "green")
        _print_block("Dependency cleanup", data["dependencyCleanupCommands"], "yellow")

    if not data["commands"] and not quiet:
        click.echo("   (no commands)")

    if data["breakdown"] and not quiet:
        click.secho("   Breakdown:", fg="white", bold=True)
        for entry in data["breakdown"]:
            click.echo(f"     • {entry['source']}: {', '.join(entry['packages'])}")

    for step in data.get("manualSteps", []):
        click.secho(f"   ✋ {step['appName']}: {step['instructions']}", fg="magenta")

    if data["warnings"]:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in data["warnings"]:
            click.echo(f"   • {warn}")

    click.echo()


@click.command()
@click.argument("distro")
@click.argument("app_ids", nargs=-1, required=True)
@click.option("--prefer", "source_preference", default=None, help="Preferred source slug.")
@click.option("--nix-method", type=_NIX_METHODS, default=None, help="Nix install method.")
@click.option("--no-setup", is_flag=True, help="Don't emit setup commands.")
@click.option("--script", type=click.Path(dir_okay=False), default=None, help="Also write a runnable script.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(
    ctx: click.Context,
    distro: str,
    app_ids: tuple[str, ...],
    source_preference: str | None,
    nix_method: str | None,
    no_setup: bool,
    script: str | None,
    as_json: bool,
) -> None:
    """Generate commands that install APP_IDS on DISTRO."""
    params = {
        "distro_slug": distro,
        "app_ids": list(app_ids),
        "source_preference": source_preference,
        "nixos_install_method": nix_method,
        "include_setup_cleanup": False if no_setup else None,
    }
    _run(ctx, "install", params, as_json, script)


@click.command()
@click.argument("distro")
@click.argument("app_ids", nargs=-1, required=True)
@click.option("--prefer", "source_preference", default=None, help="Preferred source slug.")
@click.option("--nix-method", type=_NIX_METHODS, default=None, help="Nix install method.")
@click.option("--deps", "include_dependency_cleanup", is_flag=True, help="Also remove orphaned dependencies.")
@click.option("--setup-cleanup", is_flag=True, help="Also undo repository/setup changes.")
@click.option("--script", type=click.Path(dir_okay=False), default=None, help="Also write a runnable script.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def uninstall(
    ctx: click.Context,
    distro: str,
    app_ids: tuple[str, ...],
    source_preference: str | None,
    nix_method: str | None,
    include_dependency_cleanup: bool,
    setup_cleanup: bool,
    script: str | None,
    as_json: bool,
) -> None:
    """Generate commands that uninstall APP_IDS from DISTRO."""
    params = {
        "distro_slug": distro,
        "app_ids": list(app_ids),
        "source_preference": source_preference,
        "nixos_install_method": nix_method,
        "include_dependency_cleanup": include_dependency_cleanup,
        "include_setup_cleanup": setup_cleanup,
    }
    _run(ctx, "uninstall", params, as_json, script)
