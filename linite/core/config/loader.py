"""
Catalog loader — reads catalog.yml into an in-memory catalog.

This is the primary entry point for file-backed catalog data. It reads
YAML, resolves source references by slug, validates against the
Pydantic catalog models, and returns a ready-to-query catalog.

Expected layout::

    sources:
      - slug: apt
        name: APT
        install_cmd: apt install -y
        remove_cmd: apt remove -y
        require_sudo: true
    distros:
      - slug: ubuntu
        name: Ubuntu
        family: debian
        sources:
          - source: apt
            priority: 10
            is_default: true
    apps:
      - id: firefox
        display_name: Firefox
        packages:
          - source: apt
            identifier: firefox
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from linite.adapters.catalog.memory import InMemoryCatalog
from linite.core.models.catalog import AppWithPackages, Distro, Source

logger = logging.getLogger(__name__)

# Default catalog filename
CATALOG_FILE = "catalog.yml"

# Environment variable pointing at a catalog file
CATALOG_ENV_VAR = "LINITE_CATALOG"


class CatalogError(Exception):
    """Raised when the catalog file is missing or invalid."""


def find_catalog_file(start_dir: Path | None = None) -> Path | None:
    """Search for catalog.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to catalog.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CATALOG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def resolve_catalog_path(explicit: Path | None = None) -> Path | None:
    """Pick the catalog file: explicit path > LINITE_CATALOG > walk up from cwd."""
    if explicit is not None:
        return explicit
    env_path = os.environ.get(CATALOG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return find_catalog_file()


def _index_sources(raw_sources: list[Any]) -> dict[str, Source]:
    sources: dict[str, Source] = {}
    for i, entry in enumerate(raw_sources):
        if not isinstance(entry, dict):
            raise CatalogError(f"sources[{i}]: expected a mapping")
        data = dict(entry)
        data.setdefault("id", data.get("slug", ""))
        try:
            source = Source.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"sources[{i}]: {e}") from e
        if source.slug in sources:
            raise CatalogError(f"Duplicate source slug: {source.slug}")
        sources[source.slug] = source
    return sources


def _lookup_source(sources: dict[str, Source], slug: Any, where: str) -> Source:
    source = sources.get(str(slug)) if slug is not None else None
    if source is None:
        raise CatalogError(f"{where}: unknown source '{slug}'")
    return source


def _build_distros(raw_distros: list[Any], sources: dict[str, Source]) -> list[Distro]:
    distros: list[Distro] = []
    seen: set[str] = set()
    for i, entry in enumerate(raw_distros):
        if not isinstance(entry, dict):
            raise CatalogError(f"distros[{i}]: expected a mapping")
        data = dict(entry)
        bindings = []
        for j, ref in enumerate(data.pop("sources", None) or []):
            if not isinstance(ref, dict):
                raise CatalogError(f"distros[{i}].sources[{j}]: expected a mapping")
            binding = {k: v for k, v in ref.items() if k != "source"}
            binding["source"] = _lookup_source(
                sources, ref.get("source"), f"distros[{i}].sources[{j}]",
            )
            bindings.append(binding)
        data["bindings"] = bindings
        data.setdefault("id", data.get("slug", ""))
        try:
            distro = Distro.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"distros[{i}]: {e}") from e
        if distro.slug in seen:
            raise CatalogError(f"Duplicate distro slug: {distro.slug}")
        seen.add(distro.slug)
        distros.append(distro)
    return distros


def _build_apps(raw_apps: list[Any], sources: dict[str, Source]) -> list[AppWithPackages]:
    apps: list[AppWithPackages] = []
    for i, entry in enumerate(raw_apps):
        if not isinstance(entry, dict):
            raise CatalogError(f"apps[{i}]: expected a mapping")
        data = dict(entry)
        app_id = data.get("id", "")
        packages = []
        for j, pkg in enumerate(data.pop("packages", None) or []):
            if not isinstance(pkg, dict):
                raise CatalogError(f"apps[{i}].packages[{j}]: expected a mapping")
            pkg_data = dict(pkg)
            source = _lookup_source(sources, pkg_data.get("source"), f"apps[{i}].packages[{j}]")
            pkg_data["source"] = source
            pkg_data.setdefault("id", f"{app_id}:{source.slug}")
            packages.append(pkg_data)
        data["packages"] = packages
        try:
            apps.append(AppWithPackages.model_validate(data))
        except ValidationError as e:
            raise CatalogError(f"apps[{i}]: {e}") from e
    return apps


def build_catalog(data: dict[str, Any], name: str = "file") -> InMemoryCatalog:
    """Build a catalog from an already-parsed mapping.

    Raises:
        CatalogError: If a section is malformed or references an
            unknown source.
    """
    for key in ("sources", "distros", "apps"):
        if key in data and not isinstance(data[key], list):
            raise CatalogError(f"'{key}' must be a list, got {type(data[key]).__name__}")

    sources = _index_sources(data.get("sources") or [])
    distros = _build_distros(data.get("distros") or [], sources)
    apps = _build_apps(data.get("apps") or [], sources)

    logger.info(
        "Catalog '%s': %d source(s), %d distro(s), %d app(s)",
        name, len(sources), len(distros), len(apps),
    )
    return InMemoryCatalog(distros=distros, apps=apps, catalog_name=name)


def load_catalog(path: Path | None = None) -> InMemoryCatalog:
    """Load and validate a catalog file.

    Args:
        path: Explicit path to catalog.yml. If None, uses LINITE_CATALOG
            or searches upward from the cwd.

    Returns:
        An in-memory catalog over the file's contents.

    Raises:
        CatalogError: If the file is missing or invalid.
    """
    path = resolve_catalog_path(path)

    if path is None:
        raise CatalogError(
            f"No {CATALOG_FILE} found. Set {CATALOG_ENV_VAR} or pass --catalog."
        )

    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    logger.debug("Loading catalog from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    return build_catalog(data, name=path.name)
