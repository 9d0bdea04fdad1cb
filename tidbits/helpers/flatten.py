"""Flattening of arbitrarily nested lists and tuples.

Only ``list`` and ``tuple`` count as nested sequences. Strings, bytes,
mappings and every other value are leaves and are kept as they are.

Three interchangeable strategies produce the same result:

- ``"worklist"``: iterative; expands the head of a work deque in place. O(n).
- ``"recursive"``: depth-first recursion concatenating child results. O(n).
- ``"concat"``: removes one nesting level per pass until none remain. O(n*d).
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence
from typing import Any

from tidbits.helpers.exceptions import InvalidArgumentError, TypeMismatchError
from tidbits.helpers.strategy_helper import resolve_strategy

logger = logging.getLogger(__name__)

NESTED_TYPES = (list, tuple)


def _is_nested(item: Any) -> bool:
    return isinstance(item, NESTED_TYPES)


def _flatten_worklist(value: Sequence[Any]) -> list[Any]:
    pending = deque(value)
    result: list[Any] = []
    while pending:
        item = pending.popleft()
        if _is_nested(item):
            pending.extendleft(reversed(item))
        else:
            result.append(item)
    return result


def _flatten_recursive(value: Sequence[Any]) -> list[Any]:
    result: list[Any] = []
    for item in value:
        if _is_nested(item):
            result.extend(_flatten_recursive(item))
        else:
            result.append(item)
    return result


def _flatten_concat(value: Sequence[Any]) -> list[Any]:
    result = list(value)
    while any(_is_nested(item) for item in result):
        result = [leaf for item in result for leaf in (item if _is_nested(item) else (item,))]
    return result


def _flatten_to_depth(value: Sequence[Any], depth: int) -> list[Any]:
    result: list[Any] = []
    for item in value:
        if depth > 0 and _is_nested(item):
            result.extend(_flatten_to_depth(item, depth - 1))
        else:
            result.append(item)
    return result


FLATTEN_STRATEGIES = {
    "worklist": _flatten_worklist,
    "recursive": _flatten_recursive,
    "concat": _flatten_concat,
}


def flatten(
    value: Sequence[Any],
    strategy: str = "worklist",
    depth: int | None = None,
) -> list[Any]:
    """
    Flatten nested lists/tuples into one list, preserving left-to-right order.

    Args:
        value: List or tuple whose items may be lists/tuples to any depth
        strategy: "worklist", "recursive" or "concat"
        depth: Number of nesting levels to remove; None removes all of them

    Returns:
        New flat list; the input is never modified

    Raises:
        TypeMismatchError: If value is not a list/tuple, or depth is not an int
        InvalidArgumentError: If the strategy is unknown or depth is negative

    Example:
        >>> flatten([1, [2, [3, [4]], 5]])
        [1, 2, 3, 4, 5]
        >>> flatten([1, [2, [3, [4]], 5]], depth=1)
        [1, 2, [3, [4]], 5]
    """
    if not _is_nested(value):
        logger.debug("flatten: rejected input of type %s", type(value).__name__)
        msg = f"flatten() expects a list or tuple, got {type(value).__name__}"
        raise TypeMismatchError(msg)

    impl = resolve_strategy(strategy, "flatten", FLATTEN_STRATEGIES)

    if depth is not None:
        if isinstance(depth, bool) or not isinstance(depth, int):
            logger.debug("flatten: rejected depth %r", depth)
            msg = f"depth must be an int or None, got {type(depth).__name__}"
            raise TypeMismatchError(msg)
        if depth < 0:
            logger.debug("flatten: rejected depth %r", depth)
            msg = f"depth must be non-negative, got {depth}"
            raise InvalidArgumentError(msg)
        logger.debug("flatten: depth=%d over %d items", depth, len(value))
        return _flatten_to_depth(value, depth)

    logger.debug("flatten: strategy=%s over %d items", strategy, len(value))
    return impl(value)
