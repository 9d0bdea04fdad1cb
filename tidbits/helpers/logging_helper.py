"""
Logging helpers shared by every tidbits module.

This module provides one-call logging setup for applications and scripts,
plus a bounded value renderer so debug lines never dump huge structures.
"""

from __future__ import annotations

import logging
import reprlib
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: int | str | None = None) -> None:
    """
    Configure root logging with the project format.

    Args:
        level: Logging level name or number. When None, the configured
            ``log_level`` is used (WARNING unless overridden).

    Raises:
        InvalidArgumentError: If ``level`` is not a known logging level name

    Example:
        >>> configure_logging("DEBUG")
        >>> flatten([1, [2]])  # now emits "flatten: strategy=worklist ..." lines
    """
    if level is None:
        from tidbits.config import get

        level = get("log_level", "WARNING")

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            from tidbits.helpers.exceptions import InvalidArgumentError

            logger.debug("configure_logging: rejected level %r", level)
            msg = f"Unknown log level: {level!r}"
            raise InvalidArgumentError(msg)
        level = resolved

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tidbits").setLevel(level)
    logger.debug("Logging configured at %s", logging.getLevelName(level))


def summarize_value(value: Any, limit: int = 80) -> str:
    """
    Render a bounded repr of ``value`` for log messages.

    Args:
        value: Any Python value
        limit: Maximum length of the returned string

    Returns:
        repr of the value, shortened with "..." when longer than ``limit``
    """
    short = reprlib.Repr()
    short.maxlist = 6
    short.maxdict = 6
    short.maxstring = limit
    short.maxother = limit
    text = short.repr(value)
    if len(text) > limit:
        text = text[: max(limit - 3, 0)] + "..."
    return text
