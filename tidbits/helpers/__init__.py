"""
Helpers package.
"""

from .count_by import CallableKey, FieldKey, KeyExtractor, as_key_extractor, count_by
from .cycle import Cycle, cycle
from .deep_clone import CLONE_STRATEGIES, deep_clone
from .exceptions import InvalidArgumentError, TidbitsError, TypeMismatchError
from .flatten import FLATTEN_STRATEGIES, flatten
from .logging_helper import configure_logging, summarize_value
from .stack import EMPTY, Stack

__all__ = [
    "CLONE_STRATEGIES",
    "EMPTY",
    "FLATTEN_STRATEGIES",
    "CallableKey",
    "Cycle",
    "FieldKey",
    "InvalidArgumentError",
    "KeyExtractor",
    "Stack",
    "TidbitsError",
    "TypeMismatchError",
    "as_key_extractor",
    "configure_logging",
    "count_by",
    "cycle",
    "deep_clone",
    "flatten",
    "summarize_value",
]
