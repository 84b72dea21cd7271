"""
L1 Domain — OS detection and sudo rules (pure).

The target OS is derived from the distro slug alone: ``windows`` is
Windows, everything else is treated as Linux.
"""

from __future__ import annotations

from typing import Literal

from linite.core.services.command_gen.data.constants import SUDO_PREFIX, WINDOWS_DISTRO_SLUG

OsName = Literal["linux", "windows"]


def detect_os(distro_slug: str) -> OsName:
    """Map a distro slug to the OS its commands run on."""
    return "windows" if distro_slug == WINDOWS_DISTRO_SLUG else "linux"


def should_use_sudo(require_sudo: bool, os_name: OsName) -> bool:
    """Windows never gets sudo, regardless of the source flag."""
    return require_sudo and os_name != "windows"


def with_sudo(command: str, require_sudo: bool, os_name: OsName) -> str:
    """Prefix ``command`` with ``sudo`` when the sudo rule applies."""
    if should_use_sudo(require_sudo, os_name):
        return f"{SUDO_PREFIX}{command}"
    return command


def build_script_command(script_url: str, os_name: OsName) -> str:
    """Wrap an install script URL into a fetch-and-run command.

    Linux pipes the script into bash. Windows uses PowerShell's
    ``irm``: executables are downloaded and launched, anything else is
    piped into ``iex``.
    """
    if os_name == "windows":
        if script_url.endswith(".exe"):
            return f"irm {script_url} -OutFile installer.exe; .\\installer.exe"
        return f"irm {script_url} | iex"
    return f"curl -fsSL {script_url} | bash"
