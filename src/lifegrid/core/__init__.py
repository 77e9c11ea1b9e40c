"""Core cellular automata logic."""

from .cell import CellState
from .grid import Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = ["CellState", "Grid", "GameOfLife", "Pattern", "PatternLibrary"]
