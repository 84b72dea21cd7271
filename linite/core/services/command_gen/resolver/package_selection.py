"""
L2 Resolver — Package selection.

Picks one package per app from the competing sources that can serve
it on the target distro.

Scoring:
    score = binding priority
          + 100 if the source is the caller's preferred source
          + 5   if the binding is the distro's default source

Ties go to the candidate that comes first in catalog order, so the
result depends on how the catalog orders an app's packages.
"""

from __future__ import annotations

import logging

from linite.core.models.catalog import (
    AppWithPackages,
    Distro,
    DistroSourceBinding,
    PackageForResolution,
)
from linite.core.services.command_gen.data.constants import (
    DEFAULT_SOURCE_BOOST,
    PREFERENCE_BOOST,
)
from linite.core.services.command_gen.domain.collector import WarningCollector
from linite.core.services.command_gen.domain.results import SelectedPackage

logger = logging.getLogger(__name__)


def build_binding_map(distro: Distro) -> dict[str, DistroSourceBinding]:
    """Index the distro's bindings by source slug.

    A slug bound twice keeps its first binding.
    """
    bindings: dict[str, DistroSourceBinding] = {}
    for binding in distro.bindings:
        bindings.setdefault(binding.source.slug, binding)
    return bindings


def calculate_package_score(
    binding: DistroSourceBinding,
    source_slug: str,
    source_preference: str | None = None,
) -> int:
    """Score one candidate package against its binding."""
    score = binding.priority
    if source_preference and source_slug == source_preference:
        score += PREFERENCE_BOOST
    if binding.is_default:
        score += DEFAULT_SOURCE_BOOST
    return score


def select_best_package(
    candidates: list[PackageForResolution],
    binding_map: dict[str, DistroSourceBinding],
    source_preference: str | None = None,
) -> tuple[PackageForResolution, int] | None:
    """Return the highest-scoring candidate and its score.

    Every candidate must already be bound to the distro. The strict
    ``>`` comparison keeps the first candidate on equal scores.

    Returns:
        ``(package, score)``, or ``None`` when there are no candidates.
    """
    best: tuple[PackageForResolution, int] | None = None
    for pkg in candidates:
        score = calculate_package_score(
            binding_map[pkg.source.slug], pkg.source.slug, source_preference,
        )
        if best is None or score > best[1]:
            best = (pkg, score)
    return best


def resolve_packages(
    distro: Distro,
    apps: list[AppWithPackages],
    collector: WarningCollector,
    source_preference: str | None = None,
) -> list[SelectedPackage]:
    """Select one package per resolvable app, in app order.

    Apps with no package on any bound source get a warning and are
    left out of the result.
    """
    binding_map = build_binding_map(distro)
    selected: list[SelectedPackage] = []

    for app in apps:
        candidates = [pkg for pkg in app.packages if pkg.source.slug in binding_map]
        best = select_best_package(candidates, binding_map, source_preference)
        if best is None:
            collector.no_package(app.display_name, distro.name)
            continue

        pkg, score = best
        binding = binding_map[pkg.source.slug]
        logger.debug(
            "%s → %s via %s (score %d, %d candidate(s))",
            app.display_name, pkg.identifier, binding.source.slug, score, len(candidates),
        )
        selected.append(SelectedPackage(
            app_id=app.id,
            app_name=app.display_name,
            package_id=pkg.id,
            package_identifier=pkg.identifier,
            source=binding.source,
            score=score,
            package_setup_cmd=pkg.package_setup_cmd,
            package_cleanup_cmd=pkg.package_cleanup_cmd,
            uninstall_metadata=pkg.uninstall_metadata,
            metadata=pkg.metadata,
        ))

    return selected
