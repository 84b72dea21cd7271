"""
In-memory catalog — a catalog backed by already-validated models.

Used by the YAML catalog loader and directly by tests. Keeps a call
log so tests can assert which lookups the orchestrator made.
"""

from __future__ import annotations

from linite.adapters.catalog.base import CatalogAdapter
from linite.core.models.catalog import AppWithPackages, Distro


class InMemoryCatalog(CatalogAdapter):
    """Catalog over lists of ``Distro`` and ``AppWithPackages``.

    Apps are returned in catalog order (the order they were given
    here), not request order. Package order inside an app is kept as
    well, since the resolver breaks score ties by it.
    """

    def __init__(
        self,
        distros: list[Distro] | None = None,
        apps: list[AppWithPackages] | None = None,
        catalog_name: str = "memory",
    ):
        self._name = catalog_name
        self._distros: dict[str, Distro] = {d.slug: d for d in (distros or [])}
        self._apps: list[AppWithPackages] = list(apps or [])
        self._call_log: list[tuple[str, object]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[tuple[str, object]]:
        """All lookups this catalog has served, as ``(method, argument)``."""
        return self._call_log

    @property
    def distros(self) -> list[Distro]:
        return list(self._distros.values())

    @property
    def apps(self) -> list[AppWithPackages]:
        return list(self._apps)

    def get_distro_with_bound_sources(self, slug: str) -> Distro | None:
        self._call_log.append(("get_distro_with_bound_sources", slug))
        return self._distros.get(slug)

    def get_apps_with_available_packages(self, app_ids: list[str]) -> list[AppWithPackages]:
        self._call_log.append(("get_apps_with_available_packages", list(app_ids)))
        wanted = set(app_ids)
        return [
            app.model_copy(update={
                "packages": [p for p in app.packages if p.is_available],
            })
            for app in self._apps
            if app.id in wanted
        ]
