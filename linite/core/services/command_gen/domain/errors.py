"""
L1 Domain — Fatal generation errors.

Only the three precondition failures below abort a request. Every
other problem (unresolvable app, unsupported source, missing script
metadata, ephemeral Nix method) degrades to a warning or manual step.

The messages are part of the public contract and stay verbatim.
"""

from __future__ import annotations


class CommandGenerationError(Exception):
    """Raised when a request cannot produce any result at all."""


class DistroNotFound(CommandGenerationError):
    """No distro exists for the requested slug."""

    def __init__(self, slug: str = "") -> None:
        self.slug = slug
        super().__init__("Distribution not found. Please select a valid Linux distribution.")


class NoSourcesConfigured(CommandGenerationError):
    """The distro exists but has no source bindings."""

    def __init__(self, distro_name: str) -> None:
        self.distro_name = distro_name
        super().__init__(f'No sources configured for distro "{distro_name}"')


class NoAppsFound(CommandGenerationError):
    """None of the requested app IDs exist in the catalog."""

    def __init__(self, app_ids: list[str] | None = None) -> None:
        self.app_ids = list(app_ids or [])
        super().__init__("No apps found for the provided IDs")
