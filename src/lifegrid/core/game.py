"""Conway's Game of Life implementation."""

from typing import Deque, List
from collections import deque
import numpy as np

from .cell import CellState
from .grid import Grid


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Implements the classic rules on a bounded grid:
    - Live cell with fewer than 2 or more than 3 neighbors dies
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells keep their state
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._update_population_history()

    @classmethod
    def create(cls, width: int, height: int) -> "GameOfLife":
        """Create a game wrapping a fresh, all-dead grid."""
        return cls(Grid(width, height))

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> List[int]:
        """Population counts of the most recent generations."""
        return list(self._population_history)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.replace_cells(self._next_cells())

        self._generation += 1
        self._update_population_history()

    def _next_cells(self) -> np.ndarray:
        """Compute the next generation from the current grid.

        Every count is taken from the same pre-step snapshot and written to a
        new array, so the grid is left untouched until the swap in step().
        """
        neighbor_counts = self.grid.count_all_neighbors()
        cells = self.grid.cells

        alive = cells == CellState.ALIVE

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = ~alive & (neighbor_counts == 3)

        # Survival: live cell with 2 or 3 neighbors
        survive_mask = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))

        next_cells = np.zeros_like(cells)
        next_cells[birth_mask | survive_mask] = CellState.ALIVE
        return next_cells

    def run(self, generations: int) -> int:
        """Step the simulation a fixed number of times.

        Args:
            generations: Number of steps to take

        Returns:
            The generation reached

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()

        return self._generation

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history.clear()
        self._update_population_history()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)
