"""Conway's Game of Life simulation driver."""

from typing import Callable, Deque, Dict, Optional, Tuple
from collections import deque
import numpy as np

from .grid import Grid


GenerationCallback = Callable[[int, Grid], None]


class GameOfLife:
    """Advances a grid generation by generation.

    Each step replaces the current grid with ``grid.next_generation()``;
    earlier generations are never modified. The driver watches for a grid
    that equals its predecessor (stable), an empty grid (extinction) and a
    repeat of any earlier generation (cycle).
    """

    def __init__(self, grid: Grid, history_size: int = 100) -> None:
        """Initialize the game with a seeded grid.

        Args:
            grid: Generation 0
            history_size: Number of population counts to keep
        """
        self._grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=history_size)
        self._seen_states: Dict[bytes, int] = {}
        self._stable = False
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._record(grid)

    @property
    def grid(self) -> Grid:
        """The current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> int:
        return self._grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def is_stable(self) -> bool:
        """Whether the last step produced a grid equal to its predecessor."""
        return self._stable

    @property
    def cycle_detected(self) -> bool:
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> Grid:
        """Advance the simulation by one generation.

        Returns:
            The new current grid
        """
        previous = self._grid
        self._grid = previous.next_generation()
        self._generation += 1
        self._stable = self._grid == previous
        self._record(self._grid)
        return self._grid

    def _record(self, grid: Grid) -> None:
        """Track population and check whether this state was seen before."""
        self._population_history.append(grid.population)

        if self._cycle_detected:
            return

        state = grid.cells.tobytes()
        first_occurrence = self._seen_states.get(state)
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        self._seen_states[state] = self._generation

    def run(
        self,
        max_generations: int = 1000,
        on_generation: Optional[GenerationCallback] = None,
    ) -> Tuple[int, str]:
        """Run simulation until it becomes stable, dies out or cycles.

        Args:
            max_generations: Maximum generations to run
            on_generation: Called with (generation, grid) for the starting
                grid and after every step

        Returns:
            Tuple of (final_generation, reason) where reason is one of
            'stable', 'extinction', 'cycle', 'max_generations'

        Raises:
            ValueError: If max_generations is negative
        """
        if max_generations < 0:
            raise ValueError(f"max_generations must be non-negative, got {max_generations}")

        if on_generation is not None:
            on_generation(self._generation, self._grid)

        for _ in range(max_generations):
            self.step()

            if on_generation is not None:
                on_generation(self._generation, self._grid)

            if self._stable:
                return self._generation, "stable"

            if self.population == 0:
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def reset(self, grid: Optional[Grid] = None) -> None:
        """Reset the simulation.

        Args:
            grid: New generation 0 (defaults to the current grid)
        """
        if grid is not None:
            self._grid = grid

        self._generation = 0
        self._population_history.clear()
        self._seen_states.clear()
        self._stable = False
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._record(self._grid)

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        return float(np.mean(np.diff(recent_history)))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self._grid.get_bounding_box()
        area = self._grid.length * self._grid.length

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "stable": self._stable,
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "grid_size": self._grid.shape,
            "population_density": self.population / area if area else 0.0,
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_width = bbox[2] - bbox[0] + 1
            box_height = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_width, box_height)
            stats["bounding_box_area"] = box_width * box_height
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)
            stats["bounding_box_area"] = 0

        return stats
