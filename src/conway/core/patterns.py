"""Seed patterns for the Game of Life."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .cell import CellState, Coordinate
from .grid import Grid


@dataclass
class Pattern:
    """A named set of live cells, given as (x, y) offsets."""

    name: str
    cells: List[Tuple[int, int]]
    description: str = ""

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Bring this pattern's cells to life on a grid.

        Cells that land outside the grid are dropped.

        Args:
            grid: Target grid
            offset_x: Offset along the first axis
            offset_y: Offset along the second axis
        """
        offset = Coordinate(offset_x, offset_y)
        for x, y in self.cells:
            grid.set_state(Coordinate(x, y) + offset, CellState.ALIVE)

    def get_size(self) -> Tuple[int, int]:
        """Extent of the pattern as (along x, along y); (0, 0) when empty."""
        if not self.cells:
            return (0, 0)

        xs, ys = zip(*self.cells)
        return (max(xs) - min(xs) + 1, max(ys) - min(ys) + 1)


def broken_line(length: int, gap: Optional[int] = None) -> Pattern:
    """A horizontal line along x with a single missing cell.

    Args:
        length: Number of positions in the line, including the gap
        gap: Index of the missing cell (defaults to length // 2)

    Returns:
        Pattern with length - 1 cells on y = 0
    """
    if gap is None:
        gap = length // 2
    cells = [(x, 0) for x in range(length) if x != gap]
    return Pattern("Broken Line", cells, f"Line of {length} with a gap at {gap}")


def _pulsar_cells() -> List[Tuple[int, int]]:
    """Pulsar cells, built from one quadrant mirrored across both axes."""
    quadrant = [(2, 0), (3, 0), (4, 0), (0, 2), (0, 3), (0, 4), (5, 2), (5, 3), (5, 4), (2, 5), (3, 5), (4, 5)]
    cells = set()
    for x, y in quadrant:
        for cx in (x, 12 - x):
            for cy in (y, 12 - y):
                cells.add((cx, cy))
    return sorted(cells)


BUILTIN_PATTERNS: Dict[str, List[Pattern]] = {
    "Still Life": [
        Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"),
        Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life"),
        Pattern("Loaf", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)], "Loaf still life"),
    ],
    "Oscillators": [
        Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"),
        Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator"),
        Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator"),
        Pattern("Pulsar", _pulsar_cells(), "Period-3 oscillator"),
    ],
    "Spaceships": [
        Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4"),
        Pattern(
            "Lightweight Spaceship",
            [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
            "LWSS - Period-4 spaceship",
        ),
    ],
    "Methuselahs": [
        Pattern("R-pentomino", [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)], "Stabilizes after 1103 generations"),
        Pattern("Diehard", [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)], "Dies after 130 generations"),
        Pattern("Acorn", [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)], "Stabilizes after 5206 generations"),
    ],
    "Lines": [broken_line(10)],
}


class PatternLibrary:
    """Named seed patterns, grouped by category.

    Starts with the built-in patterns; anything added later is listed
    under "Custom".
    """

    def __init__(self) -> None:
        self._category_of: Dict[str, str] = {}
        self._patterns: Dict[str, Pattern] = {}
        for category, patterns in BUILTIN_PATTERNS.items():
            for pattern in patterns:
                self._category_of[pattern.name] = category
                self._patterns[pattern.name] = pattern

    def add_pattern(self, pattern: Pattern) -> None:
        self._category_of.setdefault(pattern.name, "Custom")
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Look up a pattern by name, None if unknown."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns)

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Pattern names per category, omitting empty categories."""
        grouped: Dict[str, List[str]] = {}
        for name in self._patterns:
            grouped.setdefault(self._category_of[name], []).append(name)
        return grouped
