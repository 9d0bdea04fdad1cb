"""Custom exceptions raised by the helpers.

Rules:
- Only put exceptions here if callers are expected to catch them.
- Each exception also subclasses the builtin it refines, so plain
  ``except ValueError`` / ``except TypeError`` handlers keep working.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class TidbitsError(Exception):
    """Base class for every error raised by tidbits."""


class InvalidArgumentError(TidbitsError, ValueError):
    """Raised when a structural precondition on an argument is violated.

    Examples: a cycle built from zero values, an unknown strategy name,
    a negative flatten depth.
    """


class TypeMismatchError(TidbitsError, TypeError):
    """Raised when a helper meets a value it cannot process.

    Examples: an unhashable classification key, a flatten input that is not
    a sequence, a value the JSON clone strategy cannot encode.
    """
