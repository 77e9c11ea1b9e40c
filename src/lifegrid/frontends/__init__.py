"""Frontend interfaces for the Game of Life."""

from .terminal import TerminalRunner, render, parse
from .cli import CLIGameOfLife

__all__ = ["TerminalRunner", "render", "parse", "CLIGameOfLife"]
