"""
Unit tests for tidbits.helpers.stack module.

Tests LIFO ordering and the EMPTY sentinel.
"""

import pytest

from tidbits.helpers.stack import EMPTY, Stack


class TestStack:
    """Tests for Stack class."""

    @pytest.mark.unit
    def test_fresh_stack_is_empty(self) -> None:
        """A new stack has no items and signals EMPTY."""
        stack = Stack()
        assert stack.is_empty()
        assert stack.size() == 0
        assert stack.pop() is EMPTY
        assert stack.peek() is EMPTY

    @pytest.mark.unit
    def test_push_returns_new_size(self) -> None:
        """push() should report the size after the push."""
        stack = Stack()
        assert stack.push("a") == 1
        assert stack.push("b") == 2

    @pytest.mark.unit
    def test_scenario(self) -> None:
        """push 1,2,3 then pop/peek follow LIFO order down to EMPTY."""
        stack = Stack()
        stack.push(1)
        stack.push(2)
        stack.push(3)
        assert stack.pop() == 3
        assert stack.peek() == 2
        assert stack.pop() == 2
        assert stack.pop() == 1
        assert stack.pop() is EMPTY

    @pytest.mark.unit
    def test_peek_does_not_remove(self) -> None:
        """peek() leaves the size unchanged."""
        stack = Stack()
        stack.push("x")
        assert stack.peek() == "x"
        assert stack.size() == 1

    @pytest.mark.unit
    def test_pop_order_is_reverse_of_push(self) -> None:
        """Draining the stack yields items in reverse push order."""
        stack = Stack()
        for item in range(5):
            stack.push(item)
        drained = []
        while not stack.is_empty():
            drained.append(stack.pop())
        assert drained == [4, 3, 2, 1, 0]

    @pytest.mark.unit
    def test_size_tracks_pushes_minus_pops(self) -> None:
        """Size equals successful pushes minus successful pops."""
        stack = Stack()
        pushes = pops = 0
        for step in ["push", "push", "pop", "pop", "pop", "push", "peek", "push", "pop"]:
            if step == "push":
                stack.push(step)
                pushes += 1
            elif step == "pop":
                if stack.pop() is not EMPTY:
                    pops += 1
            else:
                stack.peek()
            assert stack.size() == pushes - pops
            assert len(stack) == stack.size()

    @pytest.mark.unit
    def test_none_is_a_regular_item(self) -> None:
        """None can be pushed and is distinguishable from EMPTY."""
        stack = Stack()
        stack.push(None)
        assert stack.peek() is None
        assert stack.pop() is None
        assert stack.pop() is EMPTY

    @pytest.mark.unit
    def test_seeded_stack(self) -> None:
        """Initial items are pushed in order, last on top."""
        stack = Stack([1, 2, 3])
        assert stack.length() == 3
        assert stack.pop() == 3

    @pytest.mark.unit
    def test_empty_sentinel_is_falsy(self) -> None:
        """EMPTY is falsy and has a readable repr."""
        assert not EMPTY
        assert repr(EMPTY) == "EMPTY"
        assert repr(Stack()) == "Stack(size=0, top=EMPTY)"
