"""
L3 Compiler — Command compilation.

Turns selected packages into shell commands: one command per source
group for templated sources, one command per package for script
sources, and nothing at all for ephemeral nix-shell environments.

Group order is the order sources are first seen in the selection, and
package order inside a group is app order. The breakdown mirrors both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from linite.core.models.catalog import Distro
from linite.core.models.command_template import CommandTemplate, LiteralCommand
from linite.core.services.command_gen.compiler.cleanup import CleanupAssembler
from linite.core.services.command_gen.data.constants import NIX_SOURCE_SLUG, SCRIPT_SOURCE_SLUG
from linite.core.services.command_gen.data.nix_templates import NixTemplate, get_nix_template
from linite.core.services.command_gen.domain.collector import WarningCollector
from linite.core.services.command_gen.domain.direction import Direction
from linite.core.services.command_gen.domain.os_rules import (
    OsName,
    build_script_command,
    detect_os,
    with_sudo,
)
from linite.core.services.command_gen.domain.results import PackageBreakdown, SelectedPackage

logger = logging.getLogger(__name__)


@dataclass
class CompiledCommands:
    """Main commands plus the per-source breakdown."""

    commands: list[str] = field(default_factory=list)
    breakdown: list[PackageBreakdown] = field(default_factory=list)


def group_by_source(selected: list[SelectedPackage]) -> dict[str, list[SelectedPackage]]:
    """Group packages by source slug, keeping first-seen order."""
    groups: dict[str, list[SelectedPackage]] = {}
    for pkg in selected:
        groups.setdefault(pkg.source_slug, []).append(pkg)
    return groups


def _compile_script_group(
    group: list[SelectedPackage],
    direction: Direction,
    os_name: OsName,
    collector: WarningCollector,
    out: CompiledCommands,
) -> None:
    """Emit one command per script package, or a manual step, or a warning."""
    for pkg in group:
        if direction.is_uninstall:
            meta = pkg.uninstall_metadata
            script = meta.script_for(os_name) if meta else None
            if script:
                out.commands.append(script)
            elif meta and meta.manual_instructions:
                collector.add_manual_step(pkg.app_name, meta.manual_instructions)
            else:
                collector.missing_script(pkg.app_name, os_name)
        else:
            url = pkg.metadata.script_url_for(os_name)
            if url:
                out.commands.append(build_script_command(url, os_name))
            else:
                collector.missing_script(pkg.app_name, os_name)

    out.breakdown.append(PackageBreakdown(
        source=group[0].source_name,
        packages=[p.package_identifier for p in group],
    ))


def _compile_templated_group(
    source_slug: str,
    group: list[SelectedPackage],
    direction: Direction,
    os_name: OsName,
    nix_template: NixTemplate | None,
    collector: WarningCollector,
    assembler: CleanupAssembler,
    out: CompiledCommands,
) -> None:
    """Emit the single batched command for a templated source group."""
    source = group[0].source
    template = direction.command_template(source)
    aux_template: CommandTemplate | None = direction.source_aux_template(source)
    attr_prefix = ""

    if nix_template is not None:
        template = direction.nix_command(nix_template)
        nix_aux = direction.nix_aux_command(nix_template)
        aux_template = LiteralCommand(command=nix_aux) if nix_aux else None
        attr_prefix = direction.nix_attr_prefix(nix_template)

    if not template:
        # No partial commands: the whole group is dropped
        for pkg in group:
            collector.unsupported_source(pkg.app_name, source.name)
        return

    for pkg in group:
        assembler.add_package_aux(direction.package_aux_template(pkg))
    assembler.add_source_aux(source_slug, aux_template)

    identifiers = " ".join(f"{attr_prefix}{p.package_identifier}" for p in group)
    out.commands.append(with_sudo(f"{template} {identifiers}", source.require_sudo, os_name))

    if direction.is_uninstall:
        assembler.add_dependency_cleanup(source)

    out.breakdown.append(PackageBreakdown(
        source=source.name,
        packages=[p.package_identifier for p in group],
    ))


def compile_commands(
    selected: list[SelectedPackage],
    distro: Distro,
    direction: Direction,
    collector: WarningCollector,
    assembler: CleanupAssembler,
    nix_method: str | None = None,
) -> CompiledCommands:
    """Compile selected packages into commands for one direction.

    Args:
        selected: Resolver output, in app order.
        distro: Target distro (slug decides the OS, family is used by
            the assembler).
        direction: Install or uninstall.
        collector: Receives warnings and manual steps.
        assembler: Receives setup/cleanup and dependency-cleanup input.
        nix_method: Optional Nix install method overriding the nix
            source's templates.

    Returns:
        CompiledCommands with commands and breakdown in group order.
    """
    out = CompiledCommands()
    os_name = detect_os(distro.slug)

    for source_slug, group in group_by_source(selected).items():
        nix_template = get_nix_template(nix_method) if source_slug == NIX_SOURCE_SLUG else None

        if nix_template is not None and nix_template.ephemeral:
            collector.ephemeral_skip([p.package_identifier for p in group])
            continue

        if source_slug == SCRIPT_SOURCE_SLUG:
            _compile_script_group(group, direction, os_name, collector, out)
            continue

        _compile_templated_group(
            source_slug, group, direction, os_name, nix_template,
            collector, assembler, out,
        )

    logger.info(
        "Compiled %d %s command(s) across %d source group(s)",
        len(out.commands), direction.value, len(out.breakdown),
    )
    return out
