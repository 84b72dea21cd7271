"""
Tests for the generation orchestrator — preconditions, end-to-end
results in both directions, and per-request state.
"""

import pytest

from linite.adapters.catalog.base import CatalogAdapter
from linite.adapters.catalog.memory import InMemoryCatalog
from linite.core.models.catalog import Distro, PackageForResolution
from linite.core.models.request import GenerateRequest
from linite.core.services.command_gen import (
    CommandGenerationError,
    Direction,
    DistroNotFound,
    InstallResult,
    NoAppsFound,
    NoSourcesConfigured,
    UninstallResult,
    generate_commands,
    generate_install_commands,
    generate_uninstall_commands,
)
from linite.core.services.command_gen.compiler.cleanup import CleanupAssembler


def _request(distro: str = "ubuntu", *app_ids: str, **kwargs) -> GenerateRequest:
    return GenerateRequest(distro_slug=distro, app_ids=list(app_ids) or ["firefox"], **kwargs)


# ── Preconditions ───────────────────────────────────────────────


class TestPreconditions:
    def test_distro_not_found(self, catalog):
        with pytest.raises(DistroNotFound) as exc:
            generate_install_commands(_request("gentoo"), catalog)
        assert str(exc.value) == "Distribution not found. Please select a valid Linux distribution."

    def test_no_sources_configured(self, ubuntu_apps):
        bare = Distro(name="Bare Linux", slug="bare", family="debian")
        catalog = InMemoryCatalog(distros=[bare], apps=ubuntu_apps)
        with pytest.raises(NoSourcesConfigured) as exc:
            generate_uninstall_commands(_request("bare"), catalog)
        assert str(exc.value) == 'No sources configured for distro "Bare Linux"'

    def test_no_apps_found(self, catalog):
        with pytest.raises(NoAppsFound) as exc:
            generate_install_commands(_request("ubuntu", "nope", "missing"), catalog)
        assert str(exc.value) == "No apps found for the provided IDs"

    def test_distro_checked_before_apps(self, catalog):
        with pytest.raises(DistroNotFound):
            generate_install_commands(_request("gentoo", "nope"), catalog)

    def test_errors_share_a_base(self):
        assert issubclass(DistroNotFound, CommandGenerationError)
        assert issubclass(NoSourcesConfigured, CommandGenerationError)
        assert issubclass(NoAppsFound, CommandGenerationError)

    def test_catalog_exceptions_propagate(self):
        class BrokenCatalog(CatalogAdapter):
            @property
            def name(self) -> str:
                return "broken"

            def get_distro_with_bound_sources(self, slug):
                raise ConnectionError("catalog unreachable")

            def get_apps_with_available_packages(self, app_ids):
                return []

        with pytest.raises(ConnectionError, match="catalog unreachable"):
            generate_install_commands(_request(), BrokenCatalog())

    def test_both_lookups_made(self, catalog):
        generate_install_commands(_request("ubuntu", "git"), catalog)
        assert sorted(call[0] for call in catalog.call_log) == [
            "get_apps_with_available_packages",
            "get_distro_with_bound_sources",
        ]


# ── Uninstall ───────────────────────────────────────────────────


class TestUninstall:
    def test_end_to_end_ubuntu(self, catalog):
        result = generate_uninstall_commands(_request("ubuntu", "firefox", "git", "vlc"), catalog)
        assert result.commands == [
            "sudo apt remove -y firefox git",
            "flatpak uninstall -y org.videolan.VLC",
        ]
        assert [b.to_dict() for b in result.breakdown] == [
            {"source": "APT", "packages": ["firefox", "git"]},
            {"source": "Flatpak", "packages": ["org.videolan.VLC"]},
        ]
        assert result.warnings == []
        assert result.cleanup_commands == []
        assert result.dependency_cleanup_commands == []
        assert result.manual_steps == []

    def test_wire_shape(self, catalog):
        data = generate_uninstall_commands(_request("ubuntu", "git"), catalog).to_dict()
        assert set(data) == {
            "commands",
            "cleanupCommands",
            "dependencyCleanupCommands",
            "warnings",
            "breakdown",
            "manualSteps",
        }

    def test_dependency_cleanup_opt_in(self, catalog):
        result = generate_uninstall_commands(
            _request("ubuntu", "firefox", "git", "vlc", include_dependency_cleanup=True), catalog,
        )
        assert result.dependency_cleanup_commands == [
            "sudo apt autoremove -y",
            "flatpak uninstall --unused -y",
        ]

    def test_setup_cleanup_opt_in(self, catalog):
        result = generate_uninstall_commands(
            _request("ubuntu", "vlc", include_setup_cleanup=True), catalog,
        )
        assert result.cleanup_commands == ["flatpak uninstall --unused -y"]

    def test_nix_shell_uninstall(self, catalog):
        result = generate_uninstall_commands(
            _request("nixos", "htop", nixos_install_method="nix-shell"), catalog,
        )
        assert result.commands == []
        assert result.warnings == ["nix-shell environments are ephemeral - no uninstall needed"]

    def test_partial_resolution_keeps_batch(self, catalog):
        # htop is only packaged for nix, which ubuntu does not bind
        result = generate_uninstall_commands(_request("ubuntu", "git", "htop"), catalog)
        assert result.commands == ["sudo apt remove -y git"]
        assert result.warnings == ["htop: No package available for Ubuntu"]


# ── Install ─────────────────────────────────────────────────────


class TestInstall:
    def test_end_to_end_ubuntu(self, catalog):
        result = generate_install_commands(_request("ubuntu", "firefox", "git", "vlc"), catalog)
        assert result.commands == [
            "sudo apt install -y firefox git",
            "flatpak install -y flathub org.videolan.VLC",
        ]
        assert result.setup_commands == [
            "apt-get update",
            "flatpak remote-add --if-not-exists flathub https://flathub.org/repo/flathub.flatpakrepo",
        ]
        assert result.warnings == []

    def test_dependency_cleanup_flag_ignored(self, catalog, monkeypatch):
        built: list[CleanupAssembler] = []

        def recording_assembler(*args, **kwargs):
            assembler = CleanupAssembler(*args, **kwargs)
            built.append(assembler)
            return assembler

        monkeypatch.setattr(
            "linite.core.services.command_gen.orchestration.orchestrator.CleanupAssembler",
            recording_assembler,
        )
        result = generate_install_commands(
            _request("ubuntu", "firefox", "git", "vlc", include_dependency_cleanup=True), catalog,
        )
        data = result.to_dict()
        assert "dependencyCleanupCommands" not in data
        assert result.commands == [
            "sudo apt install -y firefox git",
            "flatpak install -y flathub org.videolan.VLC",
        ]
        flattened = data["commands"] + data["setupCommands"]
        assert "sudo apt autoremove -y" not in flattened
        assert "flatpak uninstall --unused -y" not in flattened
        assert len(built) == 1
        assert built[0].include_dependency_cleanup is False
        assert built[0].dependency_cleanup_commands == []

    def test_setup_opt_out(self, catalog):
        result = generate_install_commands(
            _request("ubuntu", "git", include_setup_cleanup=False), catalog,
        )
        assert result.setup_commands == []

    def test_preference(self, catalog):
        result = generate_install_commands(
            _request("ubuntu", "firefox", source_preference="flatpak"), catalog,
        )
        assert result.commands == ["flatpak install -y flathub org.mozilla.firefox"]

    def test_wire_shape(self, catalog):
        data = generate_install_commands(_request("ubuntu", "git"), catalog).to_dict()
        assert set(data) == {"commands", "setupCommands", "warnings", "breakdown"}

    def test_nix_env(self, catalog):
        result = generate_install_commands(
            _request("nixos", "htop", nixos_install_method="nix-env"), catalog,
        )
        assert result.commands == ["nix-env -iA nixpkgs.htop"]
        assert result.setup_commands == ["nix-channel --update"]


# ── Direction & state ───────────────────────────────────────────


class TestGenerateCommands:
    def test_direction_selects_result_type(self, catalog):
        req = _request("ubuntu", "git")
        assert isinstance(generate_commands(req, catalog, Direction.INSTALL), InstallResult)
        assert isinstance(generate_commands(req, catalog, Direction.UNINSTALL), UninstallResult)

    def test_repeated_requests_are_independent(self, catalog):
        req = _request("ubuntu", "firefox", "vlc")
        first = generate_install_commands(req, catalog)
        second = generate_install_commands(req, catalog)
        assert first.to_dict() == second.to_dict()
        assert second.setup_commands != []

    def test_unavailable_packages_ignored(self, ubuntu, apt, flatpak, app_factory):
        app = app_factory("firefox", "Firefox", (apt, "firefox"), (flatpak, "org.mozilla.firefox"))
        app.packages[0] = PackageForResolution(
            id="firefox:apt", identifier="firefox", source=apt, is_available=False,
        )
        catalog = InMemoryCatalog(distros=[ubuntu], apps=[app])
        result = generate_install_commands(_request("ubuntu", "firefox"), catalog)
        assert result.commands == ["flatpak install -y flathub org.mozilla.firefox"]

    def test_apps_in_catalog_order(self, catalog):
        result = generate_uninstall_commands(_request("ubuntu", "vlc", "git"), catalog)
        assert result.commands == [
            "sudo apt remove -y git",
            "flatpak uninstall -y org.videolan.VLC",
        ]
