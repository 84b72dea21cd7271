"""
L0 Data — Module-level constants for command generation.

Pure data. No logic. No imports beyond stdlib.
"""

from __future__ import annotations

# Source slugs with special handling in the compiler
NIX_SOURCE_SLUG = "nix"
SCRIPT_SOURCE_SLUG = "script"

# The only distro slug that maps to the Windows OS
WINDOWS_DISTRO_SLUG = "windows"

# Prefix applied to commands of sources that require root
SUDO_PREFIX = "sudo "

# Score boosts on top of the distro-local binding priority
PREFERENCE_BOOST = 100
DEFAULT_SOURCE_BOOST = 5
