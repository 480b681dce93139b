"""Cell coordinates and states."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Coordinate:
    """Position of a cell on the grid.

    Coordinates are plain values: they compare and hash by their
    components and may lie outside any particular grid.
    """

    x: int
    y: int

    def __add__(self, other: "Coordinate") -> "Coordinate":
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def neighbors(self) -> Iterator["Coordinate"]:
        """Yield the 8 coordinates of the Moore neighbourhood."""
        for offset in NEIGHBOR_OFFSETS:
            yield self + offset


class CellState(Enum):
    """State of a single cell.

    The value is the encoding used by the grid's cell array.
    """

    DEAD = 0
    ALIVE = 1

    @property
    def glyph(self) -> str:
        """Single character used when rendering a grid."""
        return "x" if self is CellState.ALIVE else " "

    def __str__(self) -> str:
        return self.glyph


NEIGHBOR_OFFSETS: Tuple[Coordinate, ...] = tuple(
    Coordinate(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
