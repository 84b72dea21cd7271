"""
Tests for the install/uninstall script renderer.
"""

from linite.core.services.command_gen.domain.results import (
    InstallResult,
    ManualStep,
    UninstallResult,
)
from linite.core.services.generators.install_script import render_script


class TestRenderBash:
    def test_install_script(self):
        result = InstallResult(
            commands=["sudo apt install -y git"],
            setup_commands=["apt-get update"],
        )
        generated = render_script(result, "ubuntu")
        assert generated.path == "linite-install.sh"
        assert generated.shell == "bash"
        lines = generated.content.splitlines()
        assert lines[0] == "#!/bin/bash"
        assert lines.index("apt-get update") < lines.index("sudo apt install -y git")
        assert generated.content.endswith("\n")

    def test_uninstall_section_order(self):
        result = UninstallResult(
            commands=["sudo apt remove -y git"],
            cleanup_commands=["sudo add-apt-repository -r -y ppa:git-core/ppa"],
            dependency_cleanup_commands=["sudo apt autoremove -y"],
        )
        lines = render_script(result, "ubuntu").content.splitlines()
        cleanup = lines.index("sudo add-apt-repository -r -y ppa:git-core/ppa")
        remove = lines.index("sudo apt remove -y git")
        deps = lines.index("sudo apt autoremove -y")
        assert cleanup < remove < deps

    def test_manual_steps_as_comments(self):
        result = UninstallResult(manual_steps=[ManualStep("Toolbox", "Delete ~/.toolbox")])
        generated = render_script(result, "fedora")
        assert generated.path == "linite-uninstall.sh"
        assert "#   Toolbox: Delete ~/.toolbox" in generated.content

    def test_nixos_shebang(self):
        generated = render_script(InstallResult(commands=["nix-env -iA nixpkgs.htop"]), "nixos")
        assert generated.content.startswith("#!/run/current-system/sw/bin/bash\n")


class TestRenderPowerShell:
    def test_windows_install(self):
        result = InstallResult(commands=["winget install --silent Git.Git"])
        generated = render_script(result, "windows")
        assert generated.path == "linite-install.ps1"
        assert generated.shell == "powershell"
        assert "#!/bin/bash" not in generated.content
        assert "Write-Host" in generated.content
        assert "winget install --silent Git.Git" in generated.content
