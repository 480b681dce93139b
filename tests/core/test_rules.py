"""Tests for the transition rule."""

import pytest
from conway.core.cell import CellState
from conway.core.rules import next_state, TRANSITIONS


class TestNextState:
    """Test cases for next_state."""

    def test_underpopulation(self):
        """Live cells with fewer than two neighbors die."""
        assert next_state(CellState.ALIVE, 0) is CellState.DEAD
        assert next_state(CellState.ALIVE, 1) is CellState.DEAD

    def test_survival(self):
        """Live cells with two or three neighbors live on."""
        assert next_state(CellState.ALIVE, 2) is CellState.ALIVE
        assert next_state(CellState.ALIVE, 3) is CellState.ALIVE

    @pytest.mark.parametrize("count", [4, 5, 6, 7, 8])
    def test_overpopulation(self, count):
        """Live cells with more than three neighbors die."""
        assert next_state(CellState.ALIVE, count) is CellState.DEAD

    def test_reproduction(self):
        """Dead cells with exactly three neighbors come alive."""
        assert next_state(CellState.DEAD, 3) is CellState.ALIVE

    @pytest.mark.parametrize("count", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_dead_stays_dead(self, count):
        """Dead cells without exactly three neighbors stay dead."""
        assert next_state(CellState.DEAD, count) is CellState.DEAD


class TestTransitions:
    """Test the vectorised transition table."""

    def test_shape(self):
        """Table covers both states and counts 0-8."""
        assert TRANSITIONS.shape == (2, 9)

    def test_matches_next_state(self):
        """Every entry agrees with next_state."""
        for state in CellState:
            for count in range(9):
                assert TRANSITIONS[state.value, count] == next_state(state, count).value

    def test_read_only(self):
        """Table cannot be modified."""
        with pytest.raises(ValueError):
            TRANSITIONS[0, 3] = 0
