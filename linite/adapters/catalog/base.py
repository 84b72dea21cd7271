"""
Catalog base — the contract between the command generator and its data.

The generator never reads storage directly. It asks a catalog for two
things, and the two lookups are independent of each other:

    - a distro with its bound sources
    - apps with their currently-available packages

Catalog failures (I/O, connection errors) propagate to the caller
unchanged. "Not found" is not a failure: it is ``None`` or an empty
list, and the orchestrator turns it into a typed domain error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from linite.core.models.catalog import AppWithPackages, Distro


class CatalogAdapter(ABC):
    """Abstract base class for catalog backends.

    To create a new catalog:
        1. Subclass CatalogAdapter
        2. Implement name, get_distro_with_bound_sources,
           get_apps_with_available_packages
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The catalog identifier (e.g., 'memory', 'file')."""

    @abstractmethod
    def get_distro_with_bound_sources(self, slug: str) -> Distro | None:
        """Return the distro for ``slug`` with its bindings, or ``None``."""

    @abstractmethod
    def get_apps_with_available_packages(self, app_ids: list[str]) -> list[AppWithPackages]:
        """Return the requested apps that exist, each with only its
        available packages. Unknown IDs are skipped."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
