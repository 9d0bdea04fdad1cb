"""Strategy name resolution shared by helpers with alternative algorithms."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from tidbits.helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def resolve_strategy(
    strategy: str,
    helper: str,
    registry: Mapping[str, Callable[..., Any]],
) -> Callable[..., Any]:
    """
    Pick the implementation for a strategy name.

    Args:
        strategy: Requested name
        helper: Name of the calling helper, used in the error message
        registry: Known strategy names mapped to their implementations

    Returns:
        The implementation registered under ``strategy``

    Raises:
        InvalidArgumentError: If the name is unknown
    """
    try:
        return registry[strategy]
    except (KeyError, TypeError):
        known = ", ".join(sorted(registry))
        logger.debug("%s: rejected strategy %r", helper, strategy)
        msg = f"Unknown strategy {strategy!r} for {helper}() (expected one of: {known})"
        raise InvalidArgumentError(msg) from None
