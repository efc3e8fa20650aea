"""
BoardState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import Direction
from .coordinate import Coordinate


class InvalidDimensions(ValueError):
    """Raised when a board is requested with a non-positive size."""

    def __init__(self, rows: int, columns: int):
        super().__init__(
            f"Board dimensions must be positive, got rows={rows}, columns={columns}."
        )
        self.rows = rows
        self.columns = columns


def validate_dimensions(rows: int, columns: int) -> None:
    if rows <= 0 or columns <= 0:
        raise InvalidDimensions(rows, columns)


@dataclass(frozen=True)
class BoardState:
    """
    A read-only snapshot of the game at a specific point in time.

    Attributes:
        rows, columns: board dimensions
        food: position of the food, or None once the board is full
        snake: tuple of Coordinate, head first
        direction: direction the next tick will move in
        game_over: True once the snake hit a wall or itself (or filled the board)
        score: food eaten since the last restart
        tick_number: ticks that moved the snake since the last restart
        won: True when the game ended because no free cell was left
        death_reason: 'wall', 'self' or None
    """

    rows: int
    columns: int
    food: Optional[Coordinate]
    snake: Tuple[Coordinate, ...]
    direction: Direction
    game_over: bool = False
    score: int = 0
    tick_number: int = 0
    won: bool = False
    death_reason: Optional[str] = None

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        S = snake body
        Row 0 is printed first, column labels at the bottom.
        """
        board = [['.' for _ in range(self.columns)] for _ in range(self.rows)]

        if self.food is not None:
            board[self.food.row][self.food.column] = 'F'

        for idx, (row, column) in enumerate(self.snake):
            board[row][column] = 'H' if idx == 0 else 'S'

        result = [f"{row:2d} {' '.join(cells)}" for row, cells in enumerate(board)]
        result.append("   " + " ".join(str(c % 10) for c in range(self.columns)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON friendly representation; coordinates become [row, column] lists."""
        return {
            "rows": self.rows,
            "columns": self.columns,
            "food": list(self.food) if self.food is not None else None,
            "snake": [list(cell) for cell in self.snake],
            "direction": self.direction.value,
            "game_over": self.game_over,
            "score": self.score,
            "tick_number": self.tick_number,
            "won": self.won,
            "death_reason": self.death_reason,
        }

    def __repr__(self):
        return (
            f"<BoardState tick={self.tick_number}, head={self.head}, "
            f"length={len(self.snake)}, food={self.food}, score={self.score}, "
            f"game_over={self.game_over}>"
        )
