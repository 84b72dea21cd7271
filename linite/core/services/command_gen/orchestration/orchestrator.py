"""
L4 Orchestration — Top-level coordinators.

These functions tie everything together: fetch catalog data, check
preconditions, resolve packages, compile commands, and assemble the
install or uninstall result.
"""

from __future__ import annotations

import concurrent.futures
import logging

from linite.adapters.catalog.base import CatalogAdapter
from linite.core.models.catalog import AppWithPackages, Distro
from linite.core.models.request import GenerateRequest
from linite.core.services.command_gen.compiler.cleanup import CleanupAssembler
from linite.core.services.command_gen.compiler.command_compiler import compile_commands
from linite.core.services.command_gen.domain.collector import WarningCollector
from linite.core.services.command_gen.domain.direction import Direction
from linite.core.services.command_gen.domain.errors import (
    DistroNotFound,
    NoAppsFound,
    NoSourcesConfigured,
)
from linite.core.services.command_gen.domain.os_rules import detect_os
from linite.core.services.command_gen.domain.results import (
    GenerationResult,
    InstallResult,
    UninstallResult,
)
from linite.core.services.command_gen.resolver.package_selection import resolve_packages

logger = logging.getLogger(__name__)


def fetch_catalog_data(
    request: GenerateRequest,
    catalog: CatalogAdapter,
) -> tuple[Distro, list[AppWithPackages]]:
    """Fetch the distro and the apps concurrently, then check preconditions.

    The two lookups do not depend on each other, so they run on a
    two-worker thread pool. Catalog exceptions propagate unchanged.

    Raises:
        DistroNotFound: No distro for ``request.distro_slug``.
        NoSourcesConfigured: The distro has no bound sources.
        NoAppsFound: None of ``request.app_ids`` exist.
    """
    with concurrent.futures.ThreadPoolExecutor(max_workers=2) as pool:
        distro_future = pool.submit(
            catalog.get_distro_with_bound_sources, request.distro_slug,
        )
        apps_future = pool.submit(
            catalog.get_apps_with_available_packages, list(request.app_ids),
        )

        distro = distro_future.result()
        if distro is None:
            raise DistroNotFound(request.distro_slug)
        if not distro.bindings:
            raise NoSourcesConfigured(distro.name)

        apps = apps_future.result()
        if not apps:
            raise NoAppsFound(request.app_ids)

    logger.debug(
        "Catalog: distro %s (%s) with %d source(s), %d/%d app(s) found",
        distro.slug, distro.family, len(distro.bindings), len(apps), len(request.app_ids),
    )
    return distro, apps


def generate_commands(
    request: GenerateRequest,
    catalog: CatalogAdapter,
    direction: Direction,
) -> GenerationResult:
    """Generate install or uninstall commands for a request.

    Args:
        request: Validated generate request.
        catalog: Where distros and apps come from.
        direction: ``Direction.INSTALL`` or ``Direction.UNINSTALL``.

    Returns:
        ``InstallResult`` or ``UninstallResult``, matching ``direction``.

    Raises:
        CommandGenerationError: One of the three fatal preconditions
            failed (see ``fetch_catalog_data``).
    """
    distro, apps = fetch_catalog_data(request, catalog)

    include_aux = request.include_setup_cleanup
    if include_aux is None:
        include_aux = direction.collects_aux_by_default

    # Request-local state: never hoist these out of this function
    collector = WarningCollector(direction)
    assembler = CleanupAssembler(
        distro.family,
        detect_os(distro.slug),
        include_aux=include_aux,
        include_dependency_cleanup=direction.is_uninstall and request.include_dependency_cleanup,
    )

    selected = resolve_packages(distro, apps, collector, request.source_preference)
    compiled = compile_commands(
        selected, distro, direction, collector, assembler,
        nix_method=request.nixos_install_method,
    )

    logger.info(
        "%s for %s: %d app(s) resolved, %d command(s), %d warning(s)",
        direction.label, distro.slug, len(selected),
        len(compiled.commands), len(collector.warnings),
    )

    if direction.is_uninstall:
        return UninstallResult(
            commands=compiled.commands,
            cleanup_commands=assembler.aux_commands,
            dependency_cleanup_commands=assembler.dependency_cleanup_commands,
            warnings=collector.warnings,
            breakdown=compiled.breakdown,
            manual_steps=collector.manual_steps,
        )
    return InstallResult(
        commands=compiled.commands,
        setup_commands=assembler.aux_commands,
        warnings=collector.warnings,
        breakdown=compiled.breakdown,
    )


def generate_install_commands(
    request: GenerateRequest,
    catalog: CatalogAdapter,
) -> InstallResult:
    """Generate install commands (setup commands included by default)."""
    result = generate_commands(request, catalog, Direction.INSTALL)
    assert isinstance(result, InstallResult)
    return result


def generate_uninstall_commands(
    request: GenerateRequest,
    catalog: CatalogAdapter,
) -> UninstallResult:
    """Generate uninstall commands, cleanup and manual steps."""
    result = generate_commands(request, catalog, Direction.UNINSTALL)
    assert isinstance(result, UninstallResult)
    return result
