"""
Generated file model — used by the script renderer.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced from a generation result.

    Attributes:
        path:      Suggested filename (e.g. ``linite-install.sh``).
        content:   Full file content.
        shell:     Interpreter the content targets (``bash`` or ``powershell``).
        reason:    Why this file was generated.
    """

    path: str
    content: str
    shell: str = "bash"
    reason: str = ""
