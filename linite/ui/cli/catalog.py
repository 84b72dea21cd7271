"""
CLI commands for inspecting the catalog file.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def catalog() -> None:
    """Catalog — validate and inspect catalog.yml."""


@catalog.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def catalog_check(ctx: click.Context, as_json: bool) -> None:
    """Validate the catalog file."""
    from linite.core.config.loader import CatalogError, load_catalog, resolve_catalog_path

    path = resolve_catalog_path(ctx.obj.get("catalog_path"))
    try:
        cat = load_catalog(path)
    except CatalogError as e:
        if as_json:
            click.echo(json.dumps({"valid": False, "errors": [str(e)]}, indent=2))
        else:
            click.secho("❌ Catalog errors:", fg="red", bold=True)
            click.echo(f"   • {e}")
        sys.exit(1)

    warnings = [
        f"Distro '{d.slug}' has no sources configured"
        for d in cat.distros if not d.bindings
    ]
    warnings += [
        f"App '{a.id}' has no packages"
        for a in cat.apps if not a.packages
    ]

    if as_json:
        click.echo(json.dumps({
            "valid": True,
            "catalog_path": str(path) if path else None,
            "distro_count": len(cat.distros),
            "app_count": len(cat.apps),
            "warnings": warnings,
        }, indent=2))
        return

    click.secho("✅ Catalog is valid", fg="green", bold=True)
    click.echo(f"   Distros: {len(cat.distros)}")
    click.echo(f"   Apps: {len(cat.apps)}")
    if warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in warnings:
            click.echo(f"   • {warn}")
    click.echo()


@catalog.command("distros")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def catalog_distros(ctx: click.Context, as_json: bool) -> None:
    """List distros and their bound sources, highest priority first."""
    from linite.core.config.loader import CatalogError, load_catalog

    try:
        cat = load_catalog(ctx.obj.get("catalog_path"))
    except CatalogError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    rows = []
    for d in cat.distros:
        bindings = sorted(d.bindings, key=lambda b: b.priority, reverse=True)
        rows.append({
            "slug": d.slug,
            "name": d.name,
            "family": d.family,
            "sources": [
                {"slug": b.source.slug, "priority": b.priority, "default": b.is_default}
                for b in bindings
            ],
        })

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    for row in rows:
        click.secho(f"🐧 {row['name']} ({row['slug']}, {row['family']})", fg="cyan", bold=True)
        for src in row["sources"]:
            default = " (default)" if src["default"] else ""
            click.echo(f"     • {src['slug']:<12} priority {src['priority']}{default}")
    click.echo()
