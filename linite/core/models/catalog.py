"""
Catalog models — sources, distros, apps and their packages.

These are the shapes the catalog hands to the command generator.
Field names are snake_case; camelCase aliases are accepted so rows
exported from the web catalog (``installCmd``, ``requireSudo``, ...)
validate without translation.

Stored values that may arrive as raw JSON text (per-package setup and
cleanup commands, uninstall metadata, package metadata) are parsed here
and nowhere else. Parsing never raises.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from linite.core.models.command_template import CommandTemplate, parse_command_template

logger = logging.getLogger(__name__)

OsName = Literal["linux", "windows"]


class CatalogModel(BaseModel):
    """Base for catalog models: camelCase aliases, snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _decode_json_object(raw: Any) -> dict | None:
    """Return a mapping from a dict or JSON text, else ``None``."""
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str) and raw.strip():
        try:
            decoded = json.loads(raw)
        except ValueError:
            return None
        return decoded if isinstance(decoded, dict) else None
    return None


# ── Sources ─────────────────────────────────────────────────────


class Source(CatalogModel):
    """A distribution channel for packages (apt, flatpak, script, ...)."""

    id: str = ""
    slug: str
    name: str
    install_cmd: str | None = None
    remove_cmd: str | None = None
    setup_cmd: CommandTemplate | None = None
    cleanup_cmd: CommandTemplate | None = None
    require_sudo: bool = False
    supports_dependency_cleanup: bool = False
    dependency_cleanup_cmd: str | None = None

    @field_validator("install_cmd", "remove_cmd", "dependency_cleanup_cmd", mode="before")
    @classmethod
    def _blank_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("setup_cmd", "cleanup_cmd", mode="before")
    @classmethod
    def _parse_template(cls, v: Any) -> Any:
        return parse_command_template(v)

    @field_validator("require_sudo", "supports_dependency_cleanup", mode="before")
    @classmethod
    def _null_is_false(cls, v: Any) -> Any:
        return False if v is None else v


# ── Distros ─────────────────────────────────────────────────────


class DistroSourceBinding(CatalogModel):
    """A source bound to a distro, with the distro-local ranking."""

    priority: int = 0
    is_default: bool = False
    source: Source

    @field_validator("priority", mode="before")
    @classmethod
    def _null_priority(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("is_default", mode="before")
    @classmethod
    def _null_default(cls, v: Any) -> Any:
        return False if v is None else v


class Distro(CatalogModel):
    """A target operating environment and its bound sources."""

    id: str = ""
    name: str
    slug: str
    family: str
    bindings: list[DistroSourceBinding] = Field(
        default_factory=list,
        validation_alias=AliasChoices("bindings", "distroSources", "distro_sources"),
    )

    def get_binding(self, source_slug: str) -> DistroSourceBinding | None:
        """Look up the binding for a source slug."""
        for binding in self.bindings:
            if binding.source.slug == source_slug:
                return binding
        return None

    @property
    def source_slugs(self) -> list[str]:
        return [b.source.slug for b in self.bindings]


# ── Packages ────────────────────────────────────────────────────


class UninstallMetadata(CatalogModel):
    """How to remove a script-installed app."""

    linux: str | None = None
    windows: str | None = None
    manual_instructions: str | None = None

    def script_for(self, os_name: OsName) -> str | None:
        script = self.windows if os_name == "windows" else self.linux
        return script or None


class ScriptUrls(CatalogModel):
    """Install script locations per operating system."""

    linux: str | None = None
    windows: str | None = None
    macos: str | None = None


class PackageMetadata(CatalogModel):
    """Free-form package metadata; only ``script_url`` is used here."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    script_url: ScriptUrls | None = None

    def script_url_for(self, os_name: OsName) -> str | None:
        if self.script_url is None:
            return None
        url = self.script_url.windows if os_name == "windows" else self.script_url.linux
        return url or None


class PackageForResolution(CatalogModel):
    """An available package of an app, as seen by the resolver."""

    id: str = ""
    identifier: str
    source: Source
    is_available: bool = True
    package_setup_cmd: CommandTemplate | None = None
    package_cleanup_cmd: CommandTemplate | None = None
    uninstall_metadata: UninstallMetadata | None = None
    metadata: PackageMetadata = Field(default_factory=PackageMetadata)

    @field_validator("package_setup_cmd", "package_cleanup_cmd", mode="before")
    @classmethod
    def _parse_template(cls, v: Any) -> Any:
        return parse_command_template(v)

    @field_validator("uninstall_metadata", mode="before")
    @classmethod
    def _parse_uninstall_metadata(cls, v: Any) -> Any:
        if v is None or isinstance(v, UninstallMetadata):
            return v
        data = _decode_json_object(v)
        if data is None:
            logger.debug("Unparseable uninstall metadata treated as absent")
            return None
        try:
            return UninstallMetadata.model_validate(data)
        except ValidationError:
            logger.debug("Malformed uninstall metadata treated as absent")
            return None

    @field_validator("metadata", mode="before")
    @classmethod
    def _parse_metadata(cls, v: Any) -> Any:
        if isinstance(v, PackageMetadata):
            return v
        data = _decode_json_object(v)
        if data is None:
            return PackageMetadata()
        try:
            return PackageMetadata.model_validate(data)
        except ValidationError:
            logger.debug("Malformed package metadata treated as empty")
            return PackageMetadata()


class AppWithPackages(CatalogModel):
    """An app and its currently-available packages."""

    id: str
    display_name: str
    packages: list[PackageForResolution] = Field(default_factory=list)
