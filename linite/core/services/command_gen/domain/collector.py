"""
L1 Domain — Warning and manual-step collector.

One collector per request. It gathers the non-fatal degradations that
let the rest of a batch resolve normally. Manual steps are kept apart
from warnings so callers can render them as a checklist.
"""

from __future__ import annotations

import logging

from linite.core.services.command_gen.domain.direction import Direction
from linite.core.services.command_gen.domain.os_rules import OsName
from linite.core.services.command_gen.domain.results import ManualStep

logger = logging.getLogger(__name__)


class WarningCollector:
    """Accumulates warnings and manual steps for a single generation."""

    def __init__(self, direction: Direction) -> None:
        self.direction = direction
        self.warnings: list[str] = []
        self.manual_steps: list[ManualStep] = []

    def warn(self, message: str) -> None:
        logger.info("%s warning: %s", self.direction.value, message)
        self.warnings.append(message)

    def add_manual_step(self, app_name: str, instructions: str) -> None:
        logger.info("Manual %s step recorded for %s", self.direction.value, app_name)
        self.manual_steps.append(ManualStep(app_name=app_name, instructions=instructions))

    # ── Typed degradations ──────────────────────────────────────

    def no_package(self, app_name: str, distro_name: str) -> None:
        self.warn(f"{app_name}: No package available for {distro_name}")

    def unsupported_source(self, app_name: str, source_name: str) -> None:
        self.warn(f"{app_name}: {self.direction.label} not supported for {source_name} source")

    def missing_script(self, app_name: str, os_name: OsName) -> None:
        if self.direction.is_uninstall:
            self.warn(f"{app_name}: No uninstall metadata available for script-based installation")
        else:
            self.warn(f"{app_name}: No install script available for {os_name}")

    def ephemeral_skip(self, identifiers: list[str]) -> None:
        if self.direction.is_uninstall:
            self.warn("nix-shell environments are ephemeral - no uninstall needed")
        else:
            self.warn(
                "nix-shell environments are ephemeral - no install needed; "
                f"run 'nix-shell -p {' '.join(identifiers)}' for a temporary shell"
            )
