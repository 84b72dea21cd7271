"""
L1 Domain — Resolver output and engine result shapes.

Nothing here is persisted. A ``SelectedPackage`` lives for one call,
between the resolver and the compiler; the result objects are what the
orchestrator returns. ``to_dict()`` produces the camelCase wire shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from linite.core.models.catalog import PackageMetadata, Source, UninstallMetadata
from linite.core.models.command_template import CommandTemplate


@dataclass(frozen=True)
class SelectedPackage:
    """The winning package for one app.

    ``source`` comes from the distro binding, so a selected package can
    only ever point at a source bound to the target distro.
    """

    app_id: str
    app_name: str
    package_id: str
    package_identifier: str
    source: Source
    score: int
    package_setup_cmd: CommandTemplate | None = None
    package_cleanup_cmd: CommandTemplate | None = None
    uninstall_metadata: UninstallMetadata | None = None
    metadata: PackageMetadata = field(default_factory=PackageMetadata)

    @property
    def source_slug(self) -> str:
        return self.source.slug

    @property
    def source_name(self) -> str:
        return self.source.name


@dataclass(frozen=True)
class ManualStep:
    """An instruction the user has to carry out by hand."""

    app_name: str
    instructions: str

    def to_dict(self) -> dict[str, str]:
        return {"appName": self.app_name, "instructions": self.instructions}


@dataclass
class PackageBreakdown:
    """Package identifiers handled by one source, in app order."""

    source: str
    packages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "packages": list(self.packages)}


@dataclass
class InstallResult:
    """Commands that install the requested apps."""

    direction: ClassVar[str] = "install"

    commands: list[str] = field(default_factory=list)
    setup_commands: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    breakdown: list[PackageBreakdown] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "commands": list(self.commands),
            "setupCommands": list(self.setup_commands),
            "warnings": list(self.warnings),
            "breakdown": [b.to_dict() for b in self.breakdown],
        }


@dataclass
class UninstallResult:
    """Commands that remove the requested apps."""

    direction: ClassVar[str] = "uninstall"

    commands: list[str] = field(default_factory=list)
    cleanup_commands: list[str] = field(default_factory=list)
    dependency_cleanup_commands: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    breakdown: list[PackageBreakdown] = field(default_factory=list)
    manual_steps: list[ManualStep] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "commands": list(self.commands),
            "cleanupCommands": list(self.cleanup_commands),
            "dependencyCleanupCommands": list(self.dependency_cleanup_commands),
            "warnings": list(self.warnings),
            "breakdown": [b.to_dict() for b in self.breakdown],
            "manualSteps": [s.to_dict() for s in self.manual_steps],
        }


GenerationResult = InstallResult | UninstallResult
