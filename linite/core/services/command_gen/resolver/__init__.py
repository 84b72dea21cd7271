"""
L2 Resolver — ``__init__.py`` re-exports the package selection functions.
"""

from linite.core.services.command_gen.resolver.package_selection import (  # noqa: F401
    build_binding_map,
    calculate_package_score,
    resolve_packages,
    select_best_package,
)
