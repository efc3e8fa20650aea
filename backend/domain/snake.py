"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, Optional

from .coordinate import Coordinate


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Coordinate from head at index 0 to tail at the end
        death_reason: 'wall' or 'self' once the snake has crashed, else None
    """

    def __init__(self, positions: Iterable[Coordinate]):
        self.positions = deque(Coordinate(*p) for p in positions)
        if not self.positions:
            raise ValueError("Snake needs at least one position.")
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.positions)

    def kill(self, reason: str) -> None:
        self.death_reason = reason
