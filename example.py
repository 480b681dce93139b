#!/usr/bin/env python3
"""
Example usage of the conway package.
"""

from conway import Grid, GameOfLife, broken_line


def main():
    """Run the broken line until it stops changing."""
    grid = Grid(10)
    broken_line(10).apply_to_grid(grid, offset_x=0, offset_y=5)

    game = GameOfLife(grid)

    def show(generation, current):
        print(f"Game Field Iteration {generation}")
        print(current)

    final_generation, reason = game.run(max_generations=10, on_generation=show)

    if reason == "stable":
        print("No more changes")
    elif reason == "cycle":
        print(f"Cycle detected! Length: {game.cycle_length}")

    stats = game.get_statistics()
    print(f"Finished after {final_generation} generations ({reason})")
    print(f"Population: {stats['population']}")


if __name__ == "__main__":
    main()
