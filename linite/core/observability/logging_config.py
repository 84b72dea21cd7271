"""
Logging for the linite CLI.

Only the ``linite`` logger tree is configured. The root logger and
library loggers are left as they are, so embedding the engine in
another program never changes that program's logging.

Engine degradations (unresolvable apps, unsupported sources, Nix
ephemeral skips) are logged at INFO: ``linite -v install ...`` shows
them on stderr next to the generated commands, the default run does not.

Level names come from CLI flags first, then ``LINITE_LOG_LEVEL``.
``LINITE_LOG_FILE`` adds a file log with its own level
(``LINITE_LOG_FILE_LEVEL``, default: same as the console).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

LOGGER_NAME = "linite"

LEVEL_ENV_VAR = "LINITE_LOG_LEVEL"
FILE_ENV_VAR = "LINITE_LOG_FILE"
FILE_LEVEL_ENV_VAR = "LINITE_LOG_FILE_LEVEL"

# Console: prefixed like a CLI message at the default level, with the
# emitting module once -v or --debug is given
_CONSOLE_PLAIN = "linite: %(levelname)s: %(message)s"
_CONSOLE_VERBOSE = "linite [%(name)s] %(message)s"
_CONSOLE_DEBUG = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s:%(lineno)d %(message)s"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Attribute set on handlers installed here, so reconfiguring replaces them
_OWNED = "_linite_owned"


def cli_log_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name: ``--debug`` > ``-v`` > ``-q`` > env > WARNING."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return (env or {}).get(LEVEL_ENV_VAR) or "WARNING"


def level_from_name(name: str | None, default: int = logging.WARNING) -> int:
    """``"info"`` → ``logging.INFO``; unknown or empty names give ``default``."""
    if not name:
        return default
    value = logging.getLevelName(name.strip().upper())
    return value if isinstance(value, int) else default


def _console_formatter(level: int) -> logging.Formatter:
    if level <= logging.DEBUG:
        return logging.Formatter(_CONSOLE_DEBUG, datefmt="%H:%M:%S")
    if level <= logging.INFO:
        return logging.Formatter(_CONSOLE_VERBOSE)
    return logging.Formatter(_CONSOLE_PLAIN)


def _owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED, True)
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``linite`` logger.

    Safe to call more than once: handlers from an earlier call are
    closed and replaced.

    Returns:
        The configured ``linite`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    console_level = level_from_name(level)
    console = _owned(logging.StreamHandler(sys.stderr))
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))
    logger.addHandler(console)

    threshold = console_level
    if log_file:
        file_level = level_from_name(log_file_level, default=console_level)
        file_handler = _owned(logging.FileHandler(log_file, encoding="utf-8"))
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
        threshold = min(threshold, file_level)

    logger.setLevel(threshold)
    logger.propagate = False
    return logger
