"""
tidbits - small, independent helpers for in-memory data.

count_by, cycle, deep_clone, flatten and a LIFO Stack.
"""

import logging

from .__version__ import __version__
from .helpers import (
    EMPTY,
    Cycle,
    InvalidArgumentError,
    Stack,
    TidbitsError,
    TypeMismatchError,
    configure_logging,
    count_by,
    cycle,
    deep_clone,
    flatten,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EMPTY",
    "Cycle",
    "InvalidArgumentError",
    "Stack",
    "TidbitsError",
    "TypeMismatchError",
    "__version__",
    "configure_logging",
    "count_by",
    "cycle",
    "deep_clone",
    "flatten",
]
