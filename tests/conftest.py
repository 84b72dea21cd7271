"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from linite.adapters.catalog.memory import InMemoryCatalog
from linite.core.models.catalog import (
    AppWithPackages,
    Distro,
    DistroSourceBinding,
    PackageForResolution,
    Source,
)

# ── Sources ─────────────────────────────────────────────────────


@pytest.fixture
def apt() -> Source:
    return Source(
        id="src-apt",
        slug="apt",
        name="APT",
        install_cmd="apt install -y",
        remove_cmd="apt remove -y",
        setup_cmd={"debian": "apt-get update", "*": "echo 'no apt here'"},
        require_sudo=True,
        supports_dependency_cleanup=True,
        dependency_cleanup_cmd="apt autoremove -y",
    )


@pytest.fixture
def flatpak() -> Source:
    return Source(
        id="src-flatpak",
        slug="flatpak",
        name="Flatpak",
        install_cmd="flatpak install -y flathub",
        remove_cmd="flatpak uninstall -y",
        setup_cmd="flatpak remote-add --if-not-exists flathub https://flathub.org/repo/flathub.flatpakrepo",
        cleanup_cmd="flatpak uninstall --unused -y",
        supports_dependency_cleanup=True,
        dependency_cleanup_cmd="flatpak uninstall --unused -y",
    )


@pytest.fixture
def script() -> Source:
    return Source(id="src-script", slug="script", name="Script")


@pytest.fixture
def nix() -> Source:
    return Source(
        id="src-nix",
        slug="nix",
        name="Nix",
        install_cmd="nix-env -i",
        remove_cmd="nix-env -e",
    )


# ── Distros ─────────────────────────────────────────────────────


@pytest.fixture
def ubuntu(apt: Source, flatpak: Source, script: Source) -> Distro:
    return Distro(
        id="d-ubuntu",
        name="Ubuntu",
        slug="ubuntu",
        family="debian",
        bindings=[
            DistroSourceBinding(priority=10, is_default=True, source=apt),
            DistroSourceBinding(priority=5, source=flatpak),
            DistroSourceBinding(priority=1, source=script),
        ],
    )


@pytest.fixture
def nixos(nix: Source) -> Distro:
    return Distro(
        id="d-nixos",
        name="NixOS",
        slug="nixos",
        family="nix",
        bindings=[DistroSourceBinding(priority=10, is_default=True, source=nix)],
    )


@pytest.fixture
def windows(script: Source) -> Distro:
    winget = Source(
        slug="winget",
        name="Winget",
        install_cmd="winget install --silent",
        remove_cmd="winget uninstall --silent",
        require_sudo=True,
    )
    return Distro(
        id="d-windows",
        name="Windows",
        slug="windows",
        family="windows",
        bindings=[
            DistroSourceBinding(priority=10, is_default=True, source=winget),
            DistroSourceBinding(priority=1, source=script),
        ],
    )


# ── Apps ────────────────────────────────────────────────────────


def _make_app(app_id: str, name: str, *packages: tuple[Source, str], **extra) -> AppWithPackages:
    return AppWithPackages(
        id=app_id,
        display_name=name,
        packages=[
            PackageForResolution(
                id=f"{app_id}:{source.slug}",
                identifier=identifier,
                source=source,
                **extra,
            )
            for source, identifier in packages
        ],
    )


@pytest.fixture
def app_factory():
    """Build an app with one package per ``(source, identifier)`` pair."""
    return _make_app


@pytest.fixture
def ubuntu_apps(apt: Source, flatpak: Source) -> list[AppWithPackages]:
    """Firefox (APT + Flatpak), Git (APT), VLC (Flatpak)."""
    return [
        _make_app("firefox", "Firefox", (apt, "firefox"), (flatpak, "org.mozilla.firefox")),
        _make_app("git", "Git", (apt, "git")),
        _make_app("vlc", "VLC", (flatpak, "org.videolan.VLC")),
    ]


@pytest.fixture
def catalog(ubuntu: Distro, nixos: Distro, windows: Distro, ubuntu_apps, nix: Source):
    apps = list(ubuntu_apps) + [
        _make_app("htop", "htop", (nix, "htop")),
    ]
    return InMemoryCatalog(distros=[ubuntu, nixos, windows], apps=apps)


# ── Catalog file ────────────────────────────────────────────────

@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


CATALOG_YAML = textwrap.dedent("""\
    sources:
      - slug: apt
        name: APT
        install_cmd: apt install -y
        remove_cmd: apt remove -y
        setup_cmd:
          debian: apt-get update
        require_sudo: true
        supports_dependency_cleanup: true
        dependency_cleanup_cmd: apt autoremove -y
      - slug: flatpak
        name: Flatpak
        install_cmd: flatpak install -y flathub
        remove_cmd: flatpak uninstall -y
      - slug: nix
        name: Nix
        install_cmd: nix-env -iA
        remove_cmd: nix-env -e
    distros:
      - slug: ubuntu
        name: Ubuntu
        family: debian
        sources:
          - source: apt
            priority: 10
            is_default: true
          - source: flatpak
            priority: 5
      - slug: lonely
        name: Lonely Linux
        family: arch
    apps:
      - id: firefox
        display_name: Firefox
        packages:
          - source: apt
            identifier: firefox
          - source: flatpak
            identifier: org.mozilla.firefox
      - id: git
        display_name: Git
        packages:
          - source: apt
            identifier: git
      - id: vlc
        display_name: VLC
        packages:
          - source: flatpak
            identifier: org.videolan.VLC
      - id: htop
        display_name: htop
        packages:
          - source: nix
            identifier: htop
""")


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a small ubuntu catalog to ``tmp_path/catalog.yml``."""
    path = tmp_path / "catalog.yml"
    path.write_text(CATALOG_YAML, encoding="utf-8")
    return path
