"""
Install/uninstall script generator.

Wraps a generation result into a single runnable script: bash for
Linux distros, PowerShell for Windows. Section order follows the order
commands must run in:

    install:    setup commands → install commands
    uninstall:  cleanup commands → uninstall commands → dependency cleanup

Manual steps cannot be scripted, so they are listed as comments.
"""

from __future__ import annotations

from linite.core.models.template import GeneratedFile
from linite.core.services.command_gen.domain.os_rules import detect_os
from linite.core.services.command_gen.domain.results import GenerationResult, UninstallResult

_BASH_SHEBANG = "#!/bin/bash"
_NIXOS_SHEBANG = "#!/run/current-system/sw/bin/bash"

_TITLES = {
    "install": "Bulk Package Installer",
    "uninstall": "Bulk Package Uninstaller",
}


def _bash_banner(title: str) -> list[str]:
    return [
        "echo",
        'echo -e "\\033[1;36m LINITE\\033[0m"',
        f'echo -e "\\033[1;32m {title}\\033[0m"',
        "echo",
    ]


def _powershell_banner(title: str) -> list[str]:
    return [
        'Write-Host ""',
        'Write-Host " LINITE" -ForegroundColor Cyan',
        f'Write-Host " {title}" -ForegroundColor Green',
        'Write-Host ""',
    ]


def _sections(result: GenerationResult) -> list[list[str]]:
    """Command blocks in execution order, empty blocks dropped."""
    if isinstance(result, UninstallResult):
        blocks = [
            result.cleanup_commands,
            result.commands,
            result.dependency_cleanup_commands,
        ]
    else:
        blocks = [result.setup_commands, result.commands]
    return [list(b) for b in blocks if b]


def _manual_step_comments(result: GenerationResult) -> list[str]:
    if not isinstance(result, UninstallResult) or not result.manual_steps:
        return []
    lines = ["# Manual steps (not automated):"]
    for step in result.manual_steps:
        lines.append(f"#   {step.app_name}: {step.instructions}")
    return lines


def render_script(result: GenerationResult, distro_slug: str) -> GeneratedFile:
    """Render a result as a bash or PowerShell script.

    Args:
        result: An ``InstallResult`` or ``UninstallResult``.
        distro_slug: Target distro; ``windows`` selects PowerShell and
            ``nixos`` selects the NixOS bash path.

    Returns:
        GeneratedFile named ``linite-<direction>.sh`` or ``.ps1``.
    """
    direction = result.direction
    title = _TITLES[direction]
    is_windows = detect_os(distro_slug) == "windows"

    if is_windows:
        header = [f"# Linite - {title}", ""] + _powershell_banner(title)
        extension, shell = "ps1", "powershell"
    else:
        shebang = _NIXOS_SHEBANG if distro_slug == "nixos" else _BASH_SHEBANG
        header = [shebang, ""] + _bash_banner(title)
        extension, shell = "sh", "bash"

    lines = list(header)
    for block in _sections(result):
        lines.append("")
        lines.extend(block)

    manual = _manual_step_comments(result)
    if manual:
        lines.append("")
        lines.extend(manual)

    return GeneratedFile(
        path=f"linite-{direction}.{extension}",
        content="\n".join(lines) + "\n",
        shell=shell,
        reason=f"{direction} script for {distro_slug}",
    )
