"""Conway's Game of Life on a bounded grid with terminal output."""

__version__ = "0.1.0"

from .core.cell import CellState
from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["CellState", "Grid", "GameOfLife", "Pattern", "PatternLibrary"]
