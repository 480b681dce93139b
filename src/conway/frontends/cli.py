"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Optional, Tuple

from ..core.grid import Grid
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary, broken_line


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def seed_grid(
        self,
        size: int,
        population_rate: float = 0.0,
        seed: Optional[int] = None,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        verbose: bool = False,
    ) -> Grid:
        """Build generation 0.

        A named pattern wins over a random population; with neither, a
        broken line is drawn across the middle of the grid.

        Args:
            size: Grid side length
            population_rate: Random population rate (0.0-1.0)
            seed: Random seed for reproducible layouts
            pattern: Optional pattern name to load
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            verbose: Print what is being seeded

        Returns:
            Seeded grid
        """
        grid = Grid(size)

        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern:
                if verbose:
                    print(f"Loading pattern '{pattern}' at ({pattern_x}, {pattern_y})")
                loaded_pattern.apply_to_grid(grid, pattern_x, pattern_y)
                return grid
            print(f"Warning: Pattern '{pattern}' not found, using default seed")

        if population_rate > 0:
            if verbose:
                print(f"Generating random population (rate: {population_rate:.2%})")
            grid.randomize(population_rate, seed=seed)
        else:
            if verbose:
                print(f"Drawing broken line on row {size // 2}")
            broken_line(size).apply_to_grid(grid, 0, size // 2)

        return grid

    def run_simulation(
        self,
        size: int,
        max_generations: int,
        population_rate: float = 0.0,
        seed: Optional[int] = None,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        verbose: bool = False,
        show_grid: bool = False,
        delay: float = 0.0,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation.

        Args:
            size: Grid side length
            max_generations: Maximum generations to run
            population_rate: Random population rate used when no pattern is given
            seed: Random seed for reproducible layouts
            pattern: Optional pattern name to load
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            verbose: Print progress updates
            show_grid: Print every generation
            delay: Seconds to pause after printing each generation

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        if verbose:
            print(f"Initializing {size}x{size} grid")

        grid = self.seed_grid(size, population_rate, seed, pattern, pattern_x, pattern_y, verbose)
        game = GameOfLife(grid)
        initial_population = game.population

        if verbose:
            print(f"Initial population: {initial_population} cells")
            print(f"\nRunning simulation (max {max_generations} generations)...")

        def show(generation: int, current: Grid) -> None:
            print(f"Game Field Iteration {generation}")
            print(self._format_grid(current))
            if delay > 0:
                time.sleep(delay)

        start_time = time.time()
        final_generation, reason = game.run(max_generations, on_generation=show if show_grid else None)
        if verbose:
            print(f"Finished in {time.time() - start_time:.3f} seconds")

        stats = game.get_statistics()
        stats["initial_population"] = initial_population

        return final_generation, reason, stats

    def _format_grid(self, grid: Grid, max_size: int = 50) -> str:
        """Format grid for display, truncating if too large.

        Args:
            grid: Grid to format
            max_size: Maximum side length to display

        Returns:
            Formatted grid string
        """
        if grid.length > max_size:
            return f"Grid too large to display ({grid.length}x{grid.length})"

        return grid.to_display_text()

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a bounded square grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Broken line on a 10x10 grid, printing every generation
  conway-cli --show-grid

  # Glider on a 20x20 grid, one frame every 0.3 seconds
  conway-cli -s 20 --pattern Glider --show-grid --delay 0.3

  # Reproducible random soup
  conway-cli -s 40 --population 0.2 --seed 7 --verbose

  # List available patterns
  conway-cli --list-patterns
        """,
    )

    parser.add_argument("-s", "--size", type=int, default=10, help="Grid side length (default: 10)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.0,
        help="Initial random population rate 0.0-1.0 (default: 0.0, broken line)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible populations",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of the default seed",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        help="X offset for pattern placement (default: centred)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        help="Y offset for pattern placement (default: centred)",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=100,
        help="Maximum generations to simulate (default: 100)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to pause between printed generations (default: 0)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Print every generation (small grids only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


FINISH_REASONS = {
    "stable": "Stable, the grid stopped changing",
    "extinction": "Extinct, every cell died",
    "cycle": "Cycle of length {cycle_length} entered at generation {cycle_start_generation}",
    "max_generations": "Generation limit of {generation} reached",
}

# (argument, check, message); pattern offsets are None until main centres them
ARGUMENT_CHECKS = [
    ("size", lambda value: value > 0, "--size must be positive"),
    ("population", lambda value: 0.0 <= value <= 1.0, "--population must be between 0.0 and 1.0"),
    ("max_generations", lambda value: value >= 0, "--max-generations must be non-negative"),
    ("delay", lambda value: value >= 0, "--delay must be non-negative"),
    ("pattern_x", lambda value: value is None or value >= 0, "--pattern-x must be non-negative"),
    ("pattern_y", lambda value: value is None or value >= 0, "--pattern-y must be non-negative"),
]


def format_finish_reason(reason: str, stats: dict) -> str:
    """Describe why a run stopped, filling in details from its statistics."""
    template = FINISH_REASONS.get(reason)
    if template is None:
        return f"Unknown reason: {reason}"
    return template.format_map({"generation": 0, "cycle_length": 0, "cycle_start_generation": 0, **stats})


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool = False) -> None:
    """Print the generation, reason, population and cycle of a finished run.

    Args:
        final_generation: Generation the run stopped at
        reason: Finish reason from GameOfLife.run
        stats: Statistics dictionary from CLIGameOfLife.run_simulation
        verbose: Also show the population the run started from
    """
    population = f"{stats['population']}"
    if verbose and "initial_population" in stats:
        population += f" (started with {stats['initial_population']})"

    cycle = "none"
    if stats.get("cycle_detected"):
        cycle = f"length {stats['cycle_length']} from generation {stats['cycle_start_generation']}"

    print()
    print(f"Generation: {final_generation}")
    print(f"Reason: {format_finish_reason(reason, stats)}")
    print(f"Population: {population}")
    print(f"Cycle: {cycle}")


def validate_args(args: argparse.Namespace) -> bool:
    """Print an error for every argument that fails its check.

    Returns:
        True if all arguments are usable
    """
    problems = [message for name, check, message in ARGUMENT_CHECKS if not check(getattr(args, name))]
    for problem in problems:
        print(f"Error: {problem}")
    return not problems


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern:
        pattern = cli.pattern_library.get_pattern(args.pattern)
        if not pattern:
            available = cli.pattern_library.list_patterns()
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(available)}")
            print("Use --list-patterns to see detailed information")
            return 1

        # Centre the pattern along any axis without an explicit offset
        pattern_width, pattern_height = pattern.get_size()
        if args.pattern_x is None:
            args.pattern_x = max(0, (args.size - pattern_width) // 2)
        if args.pattern_y is None:
            args.pattern_y = max(0, (args.size - pattern_height) // 2)
        if args.verbose:
            print(f"Placing pattern at ({args.pattern_x}, {args.pattern_y})")

    try:
        final_generation, reason, stats = cli.run_simulation(
            size=args.size,
            max_generations=args.max_generations,
            population_rate=args.population,
            seed=args.seed,
            pattern=args.pattern,
            pattern_x=args.pattern_x or 0,
            pattern_y=args.pattern_y or 0,
            verbose=args.verbose,
            show_grid=args.show_grid,
            delay=args.delay,
        )

        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
