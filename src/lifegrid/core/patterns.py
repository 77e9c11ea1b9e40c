"""Common Conway's Game of Life seed patterns."""

from typing import Dict, List, Tuple, Optional

from .grid import Grid


class Pattern:
    """A named set of live cells, in coordinates relative to the pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = list(cells)
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0, clear: bool = True) -> int:
        """Stamp this pattern onto a grid.

        Cells that land outside the grid are skipped rather than wrapped.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset
            clear: Whether to clear the grid first

        Returns:
            Number of cells actually placed
        """
        if clear:
            grid.clear()

        placed = 0
        for x, y in self.cells:
            if grid.in_bounds(x + offset_x, y + offset_y):
                grid.set_cell(x + offset_x, y + offset_y, True)
                placed += 1
        return placed

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_x, min_y, _, _ = self.get_bounding_box()
        normalized_cells = [(x - min_x, y - min_y) for x, y in self.cells]

        return Pattern(self.name, normalized_cells, self.description)

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create a pattern from the living cells of a grid."""
        return cls(name, grid.living_cells(), description)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Manages a collection of in-memory patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)],
                "Loaf still life",
            )
        )

        self.add_pattern(Pattern("Boat", [(0, 0), (1, 0), (0, 1), (2, 1), (1, 2)], "Boat still life"))

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
                "Smallest spaceship, moves (1, 1) every 4 generations",
            )
        )

        # Glider rotated 180 degrees, heads for the top-left corner
        self.add_pattern(
            Pattern(
                "Glider NW",
                [(1, 2), (0, 1), (2, 0), (1, 0), (0, 0)],
                "Glider moving (-1, -1) every 4 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Diehard",
                [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
                "Dies after exactly 130 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Acorn",
                [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf", "Boat"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider", "Glider NW", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
            "Custom": [],
        }

        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
