"""
Minimal LIFO stack.

The stack wraps a Python list: ``append`` and ``pop`` on the end of a list are
O(1), and the method names match the stack operations closely. Popping or
peeking an empty stack is a normal outcome and returns the ``EMPTY`` sentinel
instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Final


class _Empty(Enum):
    """Type of the EMPTY sentinel (an enum keeps it a picklable singleton)."""

    EMPTY = "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY: Final = _Empty.EMPTY


class Stack:
    """
    Last-in-first-out container.

    Not synchronised: guard shared instances with an external lock.

    Example:
        >>> stack = Stack()
        >>> stack.push(1), stack.push(2)
        (1, 2)
        >>> stack.pop(), stack.pop(), stack.pop()
        (2, 1, EMPTY)
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        """
        Create a stack, optionally seeded from ``items``.

        Args:
            items: Initial items pushed in order; the last one ends up on top
        """
        self._items: list[Any] = list(items) if items is not None else []

    def push(self, item: Any) -> int:
        """
        Push an item onto the top of the stack.

        Args:
            item: The item to push

        Returns:
            The new size of the stack
        """
        self._items.append(item)
        return len(self._items)

    def pop(self) -> Any:
        """
        Remove the item at the top of the stack.

        Returns:
            The removed item, or EMPTY if the stack has no items
        """
        if not self._items:
            return EMPTY
        return self._items.pop()

    def peek(self) -> Any:
        """
        Return the item at the top of the stack without removing it.

        Returns:
            The top item, or EMPTY if the stack has no items
        """
        if not self._items:
            return EMPTY
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack has no items."""
        return not self._items

    def size(self) -> int:
        """Return the number of items in the stack."""
        return len(self._items)

    length = size

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack(size={len(self._items)}, top={self.peek()!r})"
