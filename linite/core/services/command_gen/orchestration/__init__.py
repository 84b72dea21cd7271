"""
L4 Orchestration — ``__init__.py`` re-exports the coordinators.
"""

from linite.core.services.command_gen.orchestration.orchestrator import (  # noqa: F401
    fetch_catalog_data,
    generate_commands,
    generate_install_commands,
    generate_uninstall_commands,
)
