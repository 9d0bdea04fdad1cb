"""Round-robin value source."""

from __future__ import annotations

import logging
from typing import Any

from tidbits.helpers.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class Cycle:
    """
    Endless round-robin over a fixed tuple of values.

    Calling the instance (or ``next()`` on it) returns the current value and
    advances a private cursor, wrapping back to the first value after the last.
    The cursor is unsynchronised: share an instance across threads only behind
    a lock.

    Example:
        >>> on_off = Cycle("on", "off")
        >>> on_off(), on_off(), on_off()
        ('on', 'off', 'on')
    """

    def __init__(self, *values: Any) -> None:
        if not values:
            logger.debug("cycle: rejected empty value list")
            msg = "cycle() requires at least one value"
            raise InvalidArgumentError(msg)
        self._values = values
        self._index = 0

    @property
    def values(self) -> tuple[Any, ...]:
        """The values being cycled, in order."""
        return self._values

    def next(self) -> Any:
        """Return the current value and advance the cursor."""
        current = self._values[self._index]
        self._index = (self._index + 1) % len(self._values)
        return current

    def reset(self) -> None:
        """Rewind so the next call returns the first value again."""
        self._index = 0

    def __call__(self) -> Any:
        return self.next()

    def __iter__(self) -> Cycle:
        return self

    def __next__(self) -> Any:
        return self.next()

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Cycle(values={self._values!r}, index={self._index})"


def cycle(*values: Any) -> Cycle:
    """
    Build a zero-argument source yielding ``values`` round-robin forever.

    Args:
        *values: One or more values to cycle through

    Returns:
        Callable Cycle instance

    Raises:
        InvalidArgumentError: If no values are given
    """
    source = Cycle(*values)
    logger.debug("cycle: created over %d values", len(source))
    return source
