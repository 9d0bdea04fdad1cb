"""Deep copy of plain nested data.

Two strategies are available:

- ``"recursive"`` (default) walks the structure and rebuilds every list,
  tuple, set and mapping. Mappings keep their type, so a ``defaultdict`` keeps
  its factory and a ``UserDict`` stays a ``UserDict``. Any other value is a
  leaf and is shared with the copy, so leaves are expected to be immutable
  (numbers, strings, None, ...).
- ``"json"`` round-trips the value through the json module. Tuples come back
  as lists and non-string keys as strings.

Cyclic structures are not supported by either strategy: there is no cycle
detection, so a self-referencing value overflows the recursion limit under
``"recursive"`` and fails with TypeMismatchError under ``"json"``.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from tidbits.helpers.exceptions import TypeMismatchError
from tidbits.helpers.logging_helper import summarize_value
from tidbits.helpers.strategy_helper import resolve_strategy

logger = logging.getLogger(__name__)


def _clone_mapping(value: Mapping[Any, Any]) -> Mapping[Any, Any]:
    items = {key: _clone_recursive(item) for key, item in value.items()}
    if type(value) is dict:
        return items

    if isinstance(value, dict):
        # copy.copy keeps subclass state such as a defaultdict's factory
        clone = copy.copy(value)
        for key, item in items.items():
            clone[key] = item
        return clone

    try:
        if isinstance(value, MutableMapping):
            clone = type(value)()
            for key, item in items.items():
                clone[key] = item
            return clone
        return type(value)(items)
    except TypeError as e:
        logger.debug("deep_clone: cannot rebuild mapping type %s", type(value).__name__)
        msg = f"Cannot rebuild mapping of type {type(value).__name__}"
        raise TypeMismatchError(msg) from e


def _clone_recursive(value: Any) -> Any:
    if isinstance(value, list):
        return [_clone_recursive(item) for item in value]
    if isinstance(value, tuple):
        items = [_clone_recursive(item) for item in value]
        if hasattr(value, "_fields"):
            return type(value)(*items)
        return tuple(items)
    if isinstance(value, Mapping):
        return _clone_mapping(value)
    if isinstance(value, set):
        return set(value)
    return value


def _clone_json(value: Any) -> Any:
    try:
        return json.loads(json.dumps(value))
    except (TypeError, ValueError) as e:
        # ValueError covers circular references
        logger.debug("deep_clone: json round-trip failed for %s", summarize_value(value))
        msg = f"Value cannot be cloned through JSON: {e}"
        raise TypeMismatchError(msg) from e


CLONE_STRATEGIES = {
    "recursive": _clone_recursive,
    "json": _clone_json,
}


def deep_clone(value: Any, strategy: str = "recursive") -> Any:
    """
    Return a structural copy of ``value`` sharing no mutable containers.

    Args:
        value: Leaf, list/tuple, mapping or set, nested to any depth (acyclic)
        strategy: "recursive" or "json"

    Returns:
        Copy sharing no containers with ``value``; value-equal under
        "recursive", JSON-normalised under "json"

    Raises:
        InvalidArgumentError: If the strategy name is unknown
        TypeMismatchError: If a value cannot be rebuilt or JSON-encoded

    Example:
        >>> original = {"user": {"role": "admin"}}
        >>> copy = deep_clone(original)
        >>> copy["user"]["role"] = "guest"
        >>> original["user"]["role"]
        'admin'
    """
    clone = resolve_strategy(strategy, "deep_clone", CLONE_STRATEGIES)
    logger.debug("deep_clone: strategy=%s value=%s", strategy, summarize_value(value))
    return clone(value)
