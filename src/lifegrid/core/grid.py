"""Grid data structure for the Game of Life."""

from typing import List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import CellState


class Grid:
    """Represents a fixed-size, bounded 2D grid of cells.

    Cells are stored in a numpy array indexed ``[x, y]``. Edges do not wrap:
    cells on an edge or corner simply have fewer neighbors, and any access
    outside the grid raises ``IndexError``.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise ValueError(f"Grid {name} must be a positive integer, got {value!r}")

        self._width = int(width)
        self._height = int(height)
        self._cells = np.zeros((self._width, self._height), dtype=np.int8)

        # Reused input tensor and 3x3 Moore kernel for bulk neighbor counting
        self._torch_input = torch.zeros(1, 1, self._height, self._width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

    def at(self, x: int, y: int) -> CellState:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            The cell's CellState

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return CellState(int(self._cells[x, y]))

    def set(self, x: int, y: int, state: CellState) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._cells[x, y] = CellState(state)

    def get_cell(self, x: int, y: int) -> bool:
        """Return True if the cell at (x, y) is alive."""
        return self.at(x, y) is CellState.ALIVE

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the cell at (x, y) alive or dead."""
        self.set(x, y, CellState.from_bool(alive))

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(CellState.DEAD)

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """Get the Moore neighborhood of a cell, clipped to the grid.

        Interior cells have 8 neighbors, edge cells 5 and corner cells 3.
        The order of the returned coordinates is not significant.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            List of in-bounds (x, y) neighbor coordinates

        Raises:
            IndexError: If (x, y) itself is out of bounds
        """
        self._check_bounds(x, y)

        points = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    points.append((nx, ny))

        return points

    def alive_neighbors(self, x: int, y: int) -> int:
        """Count living cells in the neighborhood of (x, y)."""
        return sum(1 for nx, ny in self.neighbors(x, y) if self._cells[nx, ny])

    def count_all_neighbors(self) -> np.ndarray:
        """Count living neighbors for all cells using a PyTorch convolution.

        Zero padding keeps the edges bounded, so the result matches
        ``alive_neighbors`` at every coordinate.

        Returns:
            int8 array of shape (width, height) with neighbor counts
        """
        # Grid uses (width, height) but PyTorch expects (height, width), so transpose
        self._torch_input[0, 0] = torch.from_numpy(self._cells.T.astype(np.float32))
        counts = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return counts[0, 0].numpy().astype(np.int8).T

    def replace_cells(self, cells: np.ndarray) -> None:
        """Replace the entire grid state in one assignment.

        Args:
            cells: Array of shape (width, height) holding 0 (dead) or 1 (alive)

        Raises:
            ValueError: If the shape or cell values are invalid
        """
        raw = np.asarray(cells)
        if raw.shape != self.shape:
            raise ValueError(f"Data shape {raw.shape} doesn't match grid {self.shape}")
        # Validate before the int8 cast, which wraps large ints and truncates floats
        if not np.all(np.isin(raw, (CellState.DEAD, CellState.ALIVE))):
            raise ValueError("Cell values must be 0 (dead) or 1 (alive)")

        self._cells = np.array(raw, dtype=np.int8)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        other = Grid(self._width, self._height)
        other.replace_cells(self._cells)
        return other

    def living_cells(self) -> List[Tuple[int, int]]:
        """Coordinates of all living cells, ordered by x then y."""
        return [(int(x), int(y)) for x, y in np.argwhere(self._cells)]

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        living_coords = np.nonzero(self._cells)
        if len(living_coords[0]) == 0:
            return None

        min_x, max_x = int(living_coords[0].min()), int(living_coords[0].max())
        min_y, max_y = int(living_coords[1].min()), int(living_coords[1].max())

        return (min_x, min_y, max_x, max_y)

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '#' and dead as '.'."""
        result = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                row.append("#" if self._cells[x, y] else ".")
            result.append("".join(row))
        return "\n".join(result)
