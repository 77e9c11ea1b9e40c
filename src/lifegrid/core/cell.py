"""Cell states for the Game of Life."""

from enum import IntEnum


class CellState(IntEnum):
    """State of a single grid cell.

    Values match the int8 encoding used by the grid's backing array.
    """

    DEAD = 0
    ALIVE = 1

    @classmethod
    def from_bool(cls, alive: bool) -> "CellState":
        """Map True to ALIVE and False to DEAD."""
        return cls.ALIVE if alive else cls.DEAD
