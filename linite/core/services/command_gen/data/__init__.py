"""
L0 Data — constants and Nix method templates.
"""

from linite.core.services.command_gen.data.constants import (  # noqa: F401
    DEFAULT_SOURCE_BOOST,
    NIX_SOURCE_SLUG,
    PREFERENCE_BOOST,
    SCRIPT_SOURCE_SLUG,
    SUDO_PREFIX,
    WINDOWS_DISTRO_SLUG,
)
from linite.core.services.command_gen.data.nix_templates import (  # noqa: F401
    NIX_TEMPLATES,
    NixTemplate,
    get_nix_template,
)
