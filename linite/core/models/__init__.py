"""
Domain models — Pydantic types for the command generator.

All models are re-exported here for convenient access:

    from linite.core.models import Distro, Source, GenerateRequest
"""

from linite.core.models.catalog import (
    AppWithPackages,
    Distro,
    DistroSourceBinding,
    PackageForResolution,
    PackageMetadata,
    ScriptUrls,
    Source,
    UninstallMetadata,
)
from linite.core.models.command_template import (
    CommandTemplate,
    LiteralCommand,
    PerFamilyCommand,
    parse_command_template,
    resolve_for_family,
)
from linite.core.models.request import GenerateRequest, NixInstallMethod
from linite.core.models.template import GeneratedFile

__all__ = [
    # catalog.py
    "AppWithPackages",
    # command_template.py
    "CommandTemplate",
    "Distro",
    "DistroSourceBinding",
    # request.py
    "GenerateRequest",
    # template.py
    "GeneratedFile",
    "LiteralCommand",
    "NixInstallMethod",
    "PackageForResolution",
    "PackageMetadata",
    "PerFamilyCommand",
    "ScriptUrls",
    "Source",
    "UninstallMetadata",
    "parse_command_template",
    "resolve_for_family",
]
