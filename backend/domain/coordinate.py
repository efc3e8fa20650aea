"""
Coordinate value type for cells on the board.
"""

from typing import NamedTuple

from .constants import Direction


class Coordinate(NamedTuple):
    """A board cell addressed by (row, column). Row 0 is the top edge."""

    row: int
    column: int

    def in_bounds(self, rows: int, columns: int) -> bool:
        return 0 <= self.row < rows and 0 <= self.column < columns

    def neighbor(self, direction: Direction) -> "Coordinate":
        """Return the adjacent cell one step away in ``direction``."""
        row, column = self
        if direction == Direction.UP:
            row -= 1
        elif direction == Direction.DOWN:
            row += 1
        elif direction == Direction.LEFT:
            column -= 1
        elif direction == Direction.RIGHT:
            column += 1
        else:
            raise ValueError(f"Unknown direction: {direction!r}")
        return Coordinate(row, column)
