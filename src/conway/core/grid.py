"""Grid data structure for Conway's Game of Life."""

from typing import Iterator, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import CellState, Coordinate
from .rules import TRANSITIONS


class Grid:
    """A square snapshot of the universe at one generation.

    Cells are stored in a dense numpy array indexed ``[x, y]``. Every
    coordinate in ``[0, length)`` x ``[0, length)`` has exactly one state;
    everything outside that square is permanently dead.

    A grid is seeded by calling :meth:`set_state` on a freshly constructed
    instance. :meth:`next_generation` never modifies the grid it is called
    on, it always returns a new one.
    """

    # 3x3 Moore kernel, centre excluded
    _KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

    def __init__(self, length: int) -> None:
        """Initialize an all-dead grid.

        Args:
            length: Side length of the square grid (0 gives an empty grid)

        Raises:
            ValueError: If length is negative
        """
        if length < 0:
            raise ValueError(f"Grid length must be non-negative, got {length}")

        self._length = length
        self._cells = np.zeros((length, length), dtype=np.int8)

    @property
    def length(self) -> int:
        """Side length of the grid."""
        return self._length

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array (0 dead, 1 alive)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (length, length)."""
        return (self._length, self._length)

    def in_bounds(self, coordinate: Coordinate) -> bool:
        """Whether the coordinate lies inside the grid; everything outside is dead."""
        return 0 <= coordinate.x < self._length and 0 <= coordinate.y < self._length

    def get_state(self, coordinate: Coordinate) -> Optional[CellState]:
        """Get the state of a cell.

        Args:
            coordinate: Cell position

        Returns:
            The cell's state, or None if the coordinate lies outside the grid
        """
        if not self.in_bounds(coordinate):
            return None
        return CellState(int(self._cells[coordinate.x, coordinate.y]))

    def set_state(self, coordinate: Coordinate, state: CellState) -> None:
        """Set the state of a cell.

        Coordinates outside the grid are ignored; the grid never grows.

        Args:
            coordinate: Cell position
            state: New state for the cell
        """
        if self.in_bounds(coordinate):
            self._cells[coordinate.x, coordinate.y] = state.value

    def live_neighbor_count(self, coordinate: Coordinate) -> int:
        """Count living neighbors of a cell.

        Neighbors outside the grid count as dead.

        Args:
            coordinate: Cell position

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for neighbor in coordinate.neighbors():
            if self.get_state(neighbor) is CellState.ALIVE:
                count += 1
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding makes every off-grid neighbor dead.

        Returns:
            Array of shape (length, length) with the neighbor count of each cell
        """
        if self._length == 0:
            return np.zeros((0, 0), dtype=np.int8)

        # The kernel is symmetric, so the [x, y] layout needs no transpose
        source = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(source, self._KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def next_generation(self) -> "Grid":
        """Compute the next generation.

        Every cell is updated from the current generation only, so all
        cells are computed at once: one convolution for the neighbor counts
        and one lookup into the transition table.

        Returns:
            A new grid of the same length; this grid is left untouched
        """
        result = Grid(self._length)
        if self._length:
            result._cells[:] = TRANSITIONS[self._cells, self.count_all_neighbors()]
        return result

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate of the grid, x major."""
        for x in range(self._length):
            for y in range(self._length):
                yield Coordinate(x, y)

    def live_cells(self) -> Iterator[Coordinate]:
        """Yield the coordinates of living cells, x major."""
        for x, y in zip(*np.nonzero(self._cells)):
            yield Coordinate(int(x), int(y))

    def copy(self) -> "Grid":
        """Return an independent grid with the same cell states."""
        duplicate = Grid(self._length)
        duplicate._cells[:] = self._cells
        return duplicate

    def randomize(self, probability: float = 0.1, seed: Optional[int] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            seed: Optional seed for reproducible layouts

        Raises:
            ValueError: If probability is outside [0, 1]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        rng = np.random.default_rng(seed)
        mask = rng.random((self._length, self._length)) < probability
        self._cells[:] = mask.astype(np.int8)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        xs, ys = np.nonzero(self._cells)
        if len(xs) == 0:
            return None
        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def to_display_text(self) -> str:
        """Render the grid, one line per x and one character per y.

        Living cells are drawn as 'x' and dead cells as ' '; every line,
        including the last, ends with a newline.
        """
        glyphs = {state.value: state.glyph for state in CellState}
        lines = []
        for row in self._cells:
            lines.append("".join(glyphs[int(value)] for value in row) + "\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self._length == other._length and np.array_equal(self._cells, other._cells)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_display_text()

    def __repr__(self) -> str:
        return f"Grid(length={self._length}, population={self.population})"
