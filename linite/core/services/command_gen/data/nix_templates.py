"""
L0 Data — Command templates for each Nix install method.

When the caller picks a Nix install method, these replace the nix
source's own catalog templates. ``attr_prefix`` is prepended to each
package identifier (``nixpkgs.firefox``, ``nixpkgs#firefox``).
``nix-shell`` has no templates: its environments are ephemeral.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NixTemplate:
    """Install/uninstall command set for one Nix install method."""

    method: str
    install_cmd: str | None = None
    remove_cmd: str | None = None
    setup_cmd: str | None = None
    cleanup_cmd: str | None = None
    install_attr_prefix: str = ""
    ephemeral: bool = False


NIX_TEMPLATES: dict[str, NixTemplate] = {
    "nix-env": NixTemplate(
        method="nix-env",
        install_cmd="nix-env -iA",
        install_attr_prefix="nixpkgs.",
        remove_cmd="nix-env -e",
        setup_cmd="nix-channel --update",
        cleanup_cmd="nix-collect-garbage -d",
    ),
    "nix-flakes": NixTemplate(
        method="nix-flakes",
        install_cmd="nix profile install",
        install_attr_prefix="nixpkgs#",
        remove_cmd="nix profile remove",
        setup_cmd=(
            "nix-channel --update && echo \"experimental-features = "
            "nix-command flakes\" >> ~/.config/nix/nix.conf"
        ),
        cleanup_cmd="nix-collect-garbage -d",
    ),
    "nix-shell": NixTemplate(
        method="nix-shell",
        ephemeral=True,
    ),
}


def get_nix_template(method: str | None) -> NixTemplate | None:
    """Look up the template for a Nix install method (``None`` if unset)."""
    if not method:
        return None
    return NIX_TEMPLATES.get(method)
