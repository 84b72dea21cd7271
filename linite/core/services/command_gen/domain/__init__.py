"""
L1 Domain — pure rules and shapes shared by the resolver and compiler.
"""

from linite.core.services.command_gen.domain.collector import WarningCollector  # noqa: F401
from linite.core.services.command_gen.domain.direction import Direction  # noqa: F401
from linite.core.services.command_gen.domain.errors import (  # noqa: F401
    CommandGenerationError,
    DistroNotFound,
    NoAppsFound,
    NoSourcesConfigured,
)
from linite.core.services.command_gen.domain.os_rules import (  # noqa: F401
    OsName,
    build_script_command,
    detect_os,
    should_use_sudo,
    with_sudo,
)
from linite.core.services.command_gen.domain.results import (  # noqa: F401
    GenerationResult,
    InstallResult,
    ManualStep,
    PackageBreakdown,
    SelectedPackage,
    UninstallResult,
)
