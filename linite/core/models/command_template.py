"""
Command template model — a command that is either universal or
keyed by distro family.

Sources and packages store setup/cleanup commands in one of two shapes:

    "sudo add-apt-repository -y ppa:obsproject/obs-studio"     # literal
    {"debian": "sudo apt-get update", "*": "echo skip"}       # per family

Catalog rows exported from the database sometimes hold the per-family
mapping as raw JSON text. ``parse_command_template`` normalizes all of
these into the tagged union below, once, at the catalog boundary.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

WILDCARD_FAMILY = "*"


class LiteralCommand(BaseModel):
    """A single command that applies to every distro family."""

    kind: Literal["literal"] = "literal"
    command: str

    def resolve(self, family: str) -> str | None:
        return self.command or None


class PerFamilyCommand(BaseModel):
    """Commands keyed by distro family, with an optional ``*`` fallback."""

    kind: Literal["per_family"] = "per_family"
    commands: dict[str, str] = Field(default_factory=dict)

    def resolve(self, family: str) -> str | None:
        """Exact family key, then ``*``, then nothing.

        Empty strings count as missing so a blank family entry falls
        through to the wildcard.
        """
        return self.commands.get(family) or self.commands.get(WILDCARD_FAMILY) or None


CommandTemplate = Annotated[
    Union[LiteralCommand, PerFamilyCommand],
    Field(discriminator="kind"),
]


def _from_mapping(raw: dict) -> LiteralCommand | PerFamilyCommand | None:
    # Already-normalized payload (e.g. a model_dump round trip)
    kind = raw.get("kind")
    if kind == "literal":
        command = raw.get("command")
        if isinstance(command, str) and command.strip():
            return LiteralCommand(command=command)
        return None
    if kind == "per_family":
        raw = raw.get("commands")
        if not isinstance(raw, dict):
            return None

    commands = {
        str(family): cmd
        for family, cmd in raw.items()
        if isinstance(cmd, str) and cmd
    }
    if not commands:
        return None
    return PerFamilyCommand(commands=commands)


def parse_command_template(raw: Any) -> LiteralCommand | PerFamilyCommand | None:
    """Coerce a stored command value into a ``CommandTemplate``.

    Accepts model instances, plain strings, mappings, and JSON text
    holding either. Never raises: text that is not valid JSON is kept
    as a literal command when it is non-blank.

    Returns:
        The normalized template, or ``None`` when the value is absent.
    """
    if raw is None:
        return None
    if isinstance(raw, (LiteralCommand, PerFamilyCommand)):
        return raw
    if isinstance(raw, dict):
        return _from_mapping(raw)
    if not isinstance(raw, str):
        logger.debug("Ignoring command template of type %s", type(raw).__name__)
        return None

    text = raw.strip()
    if not text:
        return None

    try:
        decoded = json.loads(text)
    except ValueError:
        return LiteralCommand(command=raw)

    if decoded is None:
        return None
    if isinstance(decoded, dict):
        return _from_mapping(decoded)
    if isinstance(decoded, str):
        return LiteralCommand(command=decoded) if decoded.strip() else None
    # Numbers, lists, booleans: keep the original text
    return LiteralCommand(command=raw)


def resolve_for_family(
    template: LiteralCommand | PerFamilyCommand | None,
    family: str,
) -> str | None:
    """Resolve an optional template against a distro family."""
    if template is None:
        return None
    return template.resolve(family)
