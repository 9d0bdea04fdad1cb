"""Grouped counting helper.

Pure utility functions for:
- Normalising a classification rule (callable or field name) into a KeyExtractor
- Counting elements per classification key in a single pass

These are stateless helpers that only depend on the standard library.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from tidbits.helpers.exceptions import TypeMismatchError

logger = logging.getLogger(__name__)


class KeyExtractor(ABC):
    """Derives the classification key of one element."""

    @abstractmethod
    def extract(self, element: Any) -> Any:
        """Return the classification key for ``element``."""


class CallableKey(KeyExtractor):
    """Key extractor wrapping a plain function, e.g. ``math.floor`` or ``len``."""

    def __init__(self, func: Callable[[Any], Any]) -> None:
        self.func = func

    def extract(self, element: Any) -> Any:
        return self.func(element)

    def __repr__(self) -> str:
        return f"CallableKey({self.func!r})"


class FieldKey(KeyExtractor):
    """
    Key extractor reading a named field.

    Mappings are read with ``.get(field)``; any other object with
    ``getattr(element, field, None)``. A missing field yields ``None``,
    which is a valid bucket of its own.
    """

    def __init__(self, field: str) -> None:
        self.field = field

    def extract(self, element: Any) -> Any:
        if isinstance(element, Mapping):
            return element.get(self.field)
        return getattr(element, self.field, None)

    def __repr__(self) -> str:
        return f"FieldKey({self.field!r})"


def as_key_extractor(rule: KeyExtractor | Callable[[Any], Any] | str) -> KeyExtractor:
    """Normalise a classification rule into a KeyExtractor.

    Args:
        rule: A KeyExtractor, a callable ``element -> key`` or a field name

    Returns:
        KeyExtractor wrapping the rule

    Raises:
        TypeMismatchError: If the rule is none of the accepted kinds

    """
    if isinstance(rule, KeyExtractor):
        return rule
    if isinstance(rule, str):
        return FieldKey(rule)
    if callable(rule):
        return CallableKey(rule)
    msg = f"Classification rule must be callable or a field name, got {type(rule).__name__}"
    raise TypeMismatchError(msg)


def count_by(
    items: Iterable[Any],
    rule: KeyExtractor | Callable[[Any], Any] | str,
) -> dict[Hashable, int]:
    """Count elements per classification key.

    Args:
        items: Elements to classify (any iterable, consumed once)
        rule: Function, field name or KeyExtractor producing each element's key

    Returns:
        Frequency table mapping each distinct key to its occurrence count

    Raises:
        TypeMismatchError: If the rule is invalid or produces an unhashable key

    Example:
        >>> import math
        >>> count_by([6.1, 4.2, 6.3], math.floor)
        {6: 2, 4: 1}
        >>> count_by([{"role": "admin"}, {"role": "guest"}, {}], "role")
        {'admin': 1, 'guest': 1, None: 1}

    """
    extractor = as_key_extractor(rule)
    result: dict[Hashable, int] = {}

    for element in items:
        key = extractor.extract(element)
        try:
            result[key] = result.get(key, 0) + 1
        except TypeError as e:
            logger.debug("count_by: unhashable key from %r", extractor)
            msg = f"Classification key {key!r} is not hashable"
            raise TypeMismatchError(msg) from e

    logger.debug("count_by: %d distinct keys via %r", len(result), extractor)
    return result
