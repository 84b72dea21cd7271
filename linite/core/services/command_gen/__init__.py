"""
Command generation service — package re-exports.

This ``__init__.py`` re-exports every public symbol so callers can
write::

    from linite.core.services.command_gen import generate_install_commands

Each symbol lives in its single-responsibility module inside the
appropriate layer (data → domain → resolver → compiler →
orchestration).
"""

# ── L0: Data ──
from linite.core.services.command_gen.data.nix_templates import NIX_TEMPLATES  # noqa: F401

# ── L1: Domain ──
from linite.core.services.command_gen.domain.direction import Direction  # noqa: F401
from linite.core.services.command_gen.domain.errors import (  # noqa: F401
    CommandGenerationError,
    DistroNotFound,
    NoAppsFound,
    NoSourcesConfigured,
)
from linite.core.services.command_gen.domain.results import (  # noqa: F401
    GenerationResult,
    InstallResult,
    ManualStep,
    PackageBreakdown,
    SelectedPackage,
    UninstallResult,
)

# ── L2: Resolver ──
from linite.core.services.command_gen.resolver.package_selection import (  # noqa: F401
    resolve_packages,
)

# ── L3: Compiler ──
from linite.core.services.command_gen.compiler.command_compiler import (  # noqa: F401
    compile_commands,
)

# ── L4: Orchestration ──
from linite.core.services.command_gen.orchestration.orchestrator import (  # noqa: F401
    generate_commands,
    generate_install_commands,
    generate_uninstall_commands,
)
