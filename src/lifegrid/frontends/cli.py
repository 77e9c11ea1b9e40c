"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
from typing import List, Optional

from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import Pattern, PatternLibrary
from .terminal import DEFAULT_ALIVE_GLYPH, DEFAULT_DEAD_GLYPH, TerminalRunner


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_game(
        self,
        width: int,
        height: int,
        pattern: Pattern,
        pattern_x: Optional[int] = None,
        pattern_y: Optional[int] = None,
        verbose: bool = False,
    ) -> GameOfLife:
        """Create a game and seed it with a pattern.

        When no offset is given the pattern is placed in the bottom-right
        corner of the grid.

        Args:
            width: Grid width
            height: Grid height
            pattern: Seed pattern
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            verbose: Print setup details

        Returns:
            Game at generation 0 holding the seeded grid
        """
        seed = pattern.normalize()
        size_x, size_y = seed.get_size()
        if pattern_x is None:
            pattern_x = max(width - size_x, 0)
        if pattern_y is None:
            pattern_y = max(height - size_y, 0)

        if verbose:
            print(f"Initializing {width}x{height} grid")
            print(f"Loading pattern '{pattern.name}' at ({pattern_x}, {pattern_y})")

        grid = Grid(width, height)
        placed = seed.apply_to_grid(grid, pattern_x, pattern_y)

        if verbose:
            if placed < len(seed.cells):
                print(f"Warning: {len(seed.cells) - placed} pattern cells fell outside the grid")
            print(f"Initial population: {grid.population} cells")

        return GameOfLife(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for pattern_name in names:
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
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Block still life in the corner of an 80x24 grid
  lifegrid

  # Glider on a 20x20 grid, 40 generations, 100ms per frame
  lifegrid -W 20 -H 20 --pattern Glider --pattern-x 1 --pattern-y 1 -n 40 -d 100

  # Run until interrupted
  lifegrid --pattern R-pentomino --pattern-x 38 --pattern-y 10 -n 0

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=80, help="Grid width (default: 80)")

    parser.add_argument("-H", "--height", type=int, default=24, help="Grid height (default: 24)")

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        default="Block",
        help="Seed pattern name (default: Block)",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        help="X offset for pattern placement (default: right edge)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        help="Y offset for pattern placement (default: bottom edge)",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Generations to run, 0 to run until interrupted (default: 10)",
    )

    # Output configuration
    parser.add_argument(
        "-d",
        "--delay",
        type=int,
        default=1000,
        help="Pause between frames in milliseconds (default: 1000)",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Print frames one after another instead of clearing the screen",
    )

    parser.add_argument(
        "--alive-glyph",
        type=str,
        default=DEFAULT_ALIVE_GLYPH,
        help=f"Character for living cells (default: '{DEFAULT_ALIVE_GLYPH}')",
    )

    parser.add_argument(
        "--dead-glyph",
        type=str,
        default=DEFAULT_DEAD_GLYPH,
        help=f"Character for dead cells (default: '{DEFAULT_DEAD_GLYPH}')",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup details and a final summary",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if len(args.alive_glyph) != 1 or len(args.dead_glyph) != 1:
        errors.append("Glyphs must be single characters")
    elif args.alive_glyph == args.dead_glyph:
        errors.append("Alive and dead glyphs must differ")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    pattern = cli.pattern_library.get_pattern(args.pattern)
    if pattern is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.pattern_library.list_patterns())}")
        return 1

    try:
        game = cli.build_game(
            width=args.width,
            height=args.height,
            pattern=pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
            verbose=args.verbose,
        )

        runner = TerminalRunner(
            game,
            delay_ms=args.delay,
            clear=not args.no_clear,
            alive_glyph=args.alive_glyph,
            dead_glyph=args.dead_glyph,
        )
        final_generation = runner.run(args.generations or None)

        if args.verbose:
            print(f"\nSimulation completed after {final_generation} generations")
            print(f"Final population: {game.population}")

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
