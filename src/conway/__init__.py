"""Conway's Game of Life on a bounded square grid."""

__version__ = "0.1.0"

from .core.cell import CellState, Coordinate
from .core.rules import next_state
from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary, broken_line

__all__ = [
    "CellState",
    "Coordinate",
    "next_state",
    "Grid",
    "GameOfLife",
    "Pattern",
    "PatternLibrary",
    "broken_line",
]
