"""
Generate request — what the caller asks the command generator for.

Validated at the boundary (CLI, or whatever transport wraps the
engine); the engine itself trusts a constructed ``GenerateRequest``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MAX_APPS_PER_REQUEST = 100

NixInstallMethod = Literal["nix-shell", "nix-env", "nix-flakes"]


class GenerateRequest(BaseModel):
    """Parameters for one install or uninstall generation.

    ``include_setup_cleanup`` is tri-state: ``None`` lets the direction
    decide (install collects setup commands, uninstall does not collect
    cleanup commands unless asked).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    distro_slug: str = Field(min_length=1)
    app_ids: list[str]
    source_preference: str | None = None
    nixos_install_method: NixInstallMethod | None = None
    include_dependency_cleanup: bool = False
    include_setup_cleanup: bool | None = None

    @field_validator("app_ids")
    @classmethod
    def _check_app_count(cls, v: list[str]) -> list[str]:
        if len(v) < 1:
            raise ValueError("At least one app ID is required")
        if len(v) > MAX_APPS_PER_REQUEST:
            raise ValueError(
                f"Cannot request more than {MAX_APPS_PER_REQUEST} apps at once"
            )
        return v

    @field_validator("source_preference", mode="before")
    @classmethod
    def _blank_preference(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v
