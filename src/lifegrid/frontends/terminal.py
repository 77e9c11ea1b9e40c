"""Text rendering and frame pacing for terminal output."""

import sys
import time
from typing import Optional, TextIO

from ..core.cell import CellState
from ..core.game import GameOfLife
from ..core.grid import Grid

DEFAULT_ALIVE_GLYPH = "#"
DEFAULT_DEAD_GLYPH = "."

# Erase display, then move the cursor to row 1, column 1
CLEAR_SEQUENCE = "\x1b[2J\x1b[1;1H"


def _check_glyphs(alive_glyph: str, dead_glyph: str) -> None:
    if len(alive_glyph) != 1 or len(dead_glyph) != 1:
        raise ValueError("Glyphs must be single characters")
    if alive_glyph == dead_glyph:
        raise ValueError(f"Alive and dead glyphs must differ, both are {alive_glyph!r}")
    if alive_glyph in "\r\n" or dead_glyph in "\r\n":
        raise ValueError("Glyphs cannot be line terminators")


def render(grid: Grid, alive_glyph: str = DEFAULT_ALIVE_GLYPH, dead_glyph: str = DEFAULT_DEAD_GLYPH) -> str:
    """Render a grid as text.

    Produces one line per row, one glyph per column, with every row
    terminated by a newline.

    Args:
        grid: Grid to render
        alive_glyph: Character for living cells
        dead_glyph: Character for dead cells

    Returns:
        The rendered frame
    """
    _check_glyphs(alive_glyph, dead_glyph)

    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            row.append(alive_glyph if grid.at(x, y) is CellState.ALIVE else dead_glyph)
        lines.append("".join(row) + "\n")
    return "".join(lines)


def parse(text: str, alive_glyph: str = DEFAULT_ALIVE_GLYPH, dead_glyph: str = DEFAULT_DEAD_GLYPH) -> Grid:
    """Build a grid from text produced by render().

    Args:
        text: Rendered frame
        alive_glyph: Character for living cells
        dead_glyph: Character for dead cells

    Returns:
        New grid with the parsed cell states

    Raises:
        ValueError: If the text is empty, ragged, or contains unknown glyphs
    """
    _check_glyphs(alive_glyph, dead_glyph)

    # Only "\n" terminates a row; other separators are ordinary glyphs
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    if not rows or not rows[0]:
        raise ValueError("Cannot parse an empty frame")

    width = len(rows[0])
    grid = Grid(width, len(rows))
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")
        for x, glyph in enumerate(row):
            if glyph == alive_glyph:
                grid.set(x, y, CellState.ALIVE)
            elif glyph != dead_glyph:
                raise ValueError(f"Unknown glyph {glyph!r} at ({x}, {y})")
    return grid


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and home the cursor."""
    stream = stream or sys.stdout
    stream.write(CLEAR_SEQUENCE)
    stream.flush()


def sleep_ms(ms: int) -> None:
    """Pause for the given number of milliseconds."""
    if ms < 0:
        raise ValueError(f"Delay must be non-negative, got {ms}")
    time.sleep(ms / 1000.0)


class TerminalRunner:
    """Drives a game in a render-step-pause loop on a text stream."""

    def __init__(
        self,
        game: GameOfLife,
        stream: Optional[TextIO] = None,
        delay_ms: int = 1000,
        clear: bool = True,
        alive_glyph: str = DEFAULT_ALIVE_GLYPH,
        dead_glyph: str = DEFAULT_DEAD_GLYPH,
    ) -> None:
        """Initialize the runner.

        Args:
            game: Game to display and advance
            stream: Output stream (defaults to stdout)
            delay_ms: Pause between frames in milliseconds
            clear: Whether to clear the screen before each frame
            alive_glyph: Character for living cells
            dead_glyph: Character for dead cells
        """
        if delay_ms < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_ms}")
        _check_glyphs(alive_glyph, dead_glyph)

        self.game = game
        self.stream = stream or sys.stdout
        self.delay_ms = delay_ms
        self.clear = clear
        self.alive_glyph = alive_glyph
        self.dead_glyph = dead_glyph
        self._frames_shown = 0

    def show(self) -> None:
        """Write the current grid and generation footer."""
        if self.clear:
            clear_screen(self.stream)
        elif self._frames_shown:
            self.stream.write("\n")

        self.stream.write(render(self.game.grid, self.alive_glyph, self.dead_glyph))
        self.stream.write(f"Generation #{self.game.generation}\n")
        self.stream.flush()
        self._frames_shown += 1

    def run(self, frames: Optional[int] = None) -> int:
        """Show the grid, then step and show it again for each frame.

        Args:
            frames: Number of generations to advance, or None to run until interrupted

        Returns:
            The generation reached
        """
        self.show()

        advanced = 0
        while frames is None or advanced < frames:
            if self.delay_ms:
                sleep_ms(self.delay_ms)
            self.game.step()
            self.show()
            advanced += 1

        return self.game.generation
