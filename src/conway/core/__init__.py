"""Core cellular automaton logic."""

from .cell import CellState, Coordinate, NEIGHBOR_OFFSETS
from .rules import next_state, TRANSITIONS
from .grid import Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary, broken_line

__all__ = [
    "CellState",
    "Coordinate",
    "NEIGHBOR_OFFSETS",
    "next_state",
    "TRANSITIONS",
    "Grid",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
    "broken_line",
]
