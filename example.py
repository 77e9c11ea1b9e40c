#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GameOfLife, PatternLibrary
from lifegrid.frontends.terminal import render


def main():
    """Seed a glider and print a few generations."""
    game = GameOfLife.create(12, 8)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    glider.apply_to_grid(game.grid, offset_x=1, offset_y=1)

    print(render(game.grid), end="")
    print(f"Generation #{game.generation}, population {game.population}")

    for _ in range(8):
        game.step()
        print()
        print(render(game.grid), end="")
        print(f"Generation #{game.generation}, population {game.population}")


if __name__ == "__main__":
    main()
