"""
L1 Domain — Install / uninstall direction.

Install and uninstall run the same pipeline. The direction picks which
source template builds the main command, which setup-or-cleanup field
feeds the auxiliary list, and whether dependency cleanup and manual
steps exist at all.
"""

from __future__ import annotations

from enum import Enum

from linite.core.models.catalog import Source
from linite.core.models.command_template import CommandTemplate
from linite.core.services.command_gen.data.nix_templates import NixTemplate
from linite.core.services.command_gen.domain.results import SelectedPackage


class Direction(str, Enum):
    """Which way the generated commands go."""

    INSTALL = "install"
    UNINSTALL = "uninstall"

    @property
    def label(self) -> str:
        """Capitalized verb used in warnings (``Install``/``Uninstall``)."""
        return self.value.capitalize()

    @property
    def is_uninstall(self) -> bool:
        return self is Direction.UNINSTALL

    @property
    def collects_aux_by_default(self) -> bool:
        """Install emits setup commands unless told not to; uninstall
        emits cleanup commands only when asked."""
        return self is Direction.INSTALL

    # ── Template selection ──────────────────────────────────────

    def command_template(self, source: Source) -> str | None:
        return source.install_cmd if self is Direction.INSTALL else source.remove_cmd

    def source_aux_template(self, source: Source) -> CommandTemplate | None:
        return source.setup_cmd if self is Direction.INSTALL else source.cleanup_cmd

    def package_aux_template(self, pkg: SelectedPackage) -> CommandTemplate | None:
        if self is Direction.INSTALL:
            return pkg.package_setup_cmd
        return pkg.package_cleanup_cmd

    def nix_command(self, template: NixTemplate) -> str | None:
        return template.install_cmd if self is Direction.INSTALL else template.remove_cmd

    def nix_aux_command(self, template: NixTemplate) -> str | None:
        return template.setup_cmd if self is Direction.INSTALL else template.cleanup_cmd

    def nix_attr_prefix(self, template: NixTemplate) -> str:
        # nix-env -e and nix profile remove take bare names
        return template.install_attr_prefix if self is Direction.INSTALL else ""
