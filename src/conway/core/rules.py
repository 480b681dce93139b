"""Conway's transition rule."""

import numpy as np

from .cell import CellState

MAX_NEIGHBORS = 8


def next_state(current: CellState, live_neighbors: int) -> CellState:
    """Return the state of a cell in the next generation.

    Rules, first match wins:
    - 0 or 1 live neighbors: dies (underpopulation)
    - 4 or more live neighbors: dies (overpopulation)
    - exactly 3 live neighbors: lives (survival or birth)
    - exactly 2 live neighbors: keeps its current state

    Args:
        current: Current state of the cell
        live_neighbors: Number of live cells in its Moore neighbourhood (0-8)

    Returns:
        State of the cell in the next generation
    """
    if live_neighbors <= 1 or live_neighbors >= 4:
        return CellState.DEAD
    if live_neighbors == 3:
        return CellState.ALIVE
    return current


def _build_transitions() -> np.ndarray:
    table = np.zeros((len(CellState), MAX_NEIGHBORS + 1), dtype=np.int8)
    for state in CellState:
        for count in range(MAX_NEIGHBORS + 1):
            table[state.value, count] = next_state(state, count).value
    table.flags.writeable = False
    return table


# TRANSITIONS[state_value, live_neighbors] -> next state value
TRANSITIONS = _build_transitions()
