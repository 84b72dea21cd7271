"""
L3 Compiler — Setup/cleanup and dependency-cleanup assembly.

Collects the auxiliary command lists that go around the main
commands: setup commands before an install, cleanup commands after an
uninstall, and dependency-cleanup commands that remove orphaned
dependencies.

An assembler holds its dedup state for exactly one request. Build a
new one per call; reusing one would suppress legitimate commands in
the next request.
"""

from __future__ import annotations

import logging

from linite.core.models.catalog import Source
from linite.core.models.command_template import CommandTemplate, resolve_for_family
from linite.core.services.command_gen.domain.os_rules import OsName, with_sudo

logger = logging.getLogger(__name__)


class CleanupAssembler:
    """Deduplicating collector for auxiliary command lists.

    Args:
        family: Distro family used to resolve per-family templates.
        os_name: Target OS, for the sudo rule on dependency cleanup.
        include_aux: Collect setup (install) or cleanup (uninstall) commands.
        include_dependency_cleanup: Collect dependency-cleanup commands.
    """

    def __init__(
        self,
        family: str,
        os_name: OsName,
        *,
        include_aux: bool,
        include_dependency_cleanup: bool = False,
    ) -> None:
        self.family = family
        self.os_name = os_name
        self.include_aux = include_aux
        self.include_dependency_cleanup = include_dependency_cleanup

        self.aux_commands: list[str] = []
        self.dependency_cleanup_commands: list[str] = []
        self._seen_aux_commands: set[str] = set()
        self._seen_aux_sources: set[str] = set()
        self._seen_dependency_commands: set[str] = set()

    def add_package_aux(self, template: CommandTemplate | None) -> None:
        """Add a per-package setup/cleanup override, once per resolved string."""
        if not self.include_aux:
            return
        command = resolve_for_family(template, self.family)
        if command and command not in self._seen_aux_commands:
            self._seen_aux_commands.add(command)
            self.aux_commands.append(command)

    def add_source_aux(self, source_slug: str, template: CommandTemplate | None) -> None:
        """Add a source's one-time setup/cleanup command, once per source."""
        if not self.include_aux or source_slug in self._seen_aux_sources:
            return
        self._seen_aux_sources.add(source_slug)
        command = resolve_for_family(template, self.family)
        if command:
            self.aux_commands.append(command)
        else:
            logger.debug("No %s aux command for family %s", source_slug, self.family)

    def add_dependency_cleanup(self, source: Source) -> None:
        """Add the source's dependency-cleanup command when it has one."""
        if not self.include_dependency_cleanup:
            return
        if not source.supports_dependency_cleanup or not source.dependency_cleanup_cmd:
            return
        command = with_sudo(source.dependency_cleanup_cmd, source.require_sudo, self.os_name)
        if command not in self._seen_dependency_commands:
            self._seen_dependency_commands.add(command)
            self.dependency_cleanup_commands.append(command)
