"""
Unit tests for tidbits.helpers.cycle module.

Tests the round-robin value source.
"""

import itertools
import logging

import pytest

from tidbits.helpers.cycle import Cycle, cycle
from tidbits.helpers.exceptions import InvalidArgumentError


class TestCycle:
    """Tests for cycle function and Cycle class."""

    @pytest.mark.unit
    def test_single_value_repeats(self) -> None:
        """A one-value source should return that value forever."""
        hello = cycle("hello")
        assert [hello() for _ in range(3)] == ["hello", "hello", "hello"]

    @pytest.mark.unit
    def test_two_values_alternate(self) -> None:
        """Values should alternate and wrap around."""
        on_off = cycle("on", "off")
        assert [on_off() for _ in range(5)] == ["on", "off", "on", "off", "on"]

    @pytest.mark.unit
    def test_no_values_raises(self) -> None:
        """Building a cycle from zero values is invalid."""
        with pytest.raises(InvalidArgumentError, match="at least one value"):
            cycle()

    @pytest.mark.unit
    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgumentError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            Cycle()

    @pytest.mark.unit
    @pytest.mark.parametrize("k", [0, 1, 4])
    def test_position_after_many_calls(self, k: int) -> None:
        """After len*k + j + 1 calls the last result should be values[j]."""
        values = ["a", "b", "c"]
        for j in range(len(values)):
            source = cycle(*values)
            result = None
            for _ in range(len(values) * k + j + 1):
                result = source()
            assert result == values[j]

    @pytest.mark.unit
    def test_independent_sources_do_not_share_cursor(self) -> None:
        """Each cycle() call should own its own cursor."""
        first = cycle(1, 2)
        second = cycle(1, 2)
        first()
        assert second() == 1
        assert first() == 2

    @pytest.mark.unit
    def test_iterator_protocol(self) -> None:
        """Cycle should work with next() and itertools."""
        source = cycle(1, 2, 3)
        assert next(source) == 1
        assert list(itertools.islice(source, 4)) == [2, 3, 1, 2]

    @pytest.mark.unit
    def test_next_method_matches_call(self) -> None:
        """next() method and calling the instance share the cursor."""
        source = cycle("x", "y")
        assert source.next() == "x"
        assert source() == "y"

    @pytest.mark.unit
    def test_reset_rewinds(self) -> None:
        """reset() should make the next call return the first value."""
        source = cycle("a", "b", "c")
        source()
        source()
        source.reset()
        assert source() == "a"

    @pytest.mark.unit
    def test_values_and_len(self) -> None:
        """values property and len() should reflect the fixed list."""
        source = cycle("a", "b")
        assert source.values == ("a", "b")
        assert len(source) == 2

    @pytest.mark.unit
    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """An empty value list is logged at debug before raising."""
        with caplog.at_level(logging.DEBUG, logger="tidbits"):
            with pytest.raises(InvalidArgumentError):
                cycle()
        assert "rejected empty value list" in caplog.text
