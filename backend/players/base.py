"""
Base player interface for driving the snake.
"""

from typing import Optional

from domain import BoardState, Direction


class Player:
    """
    Base class/interface for input sources.

    A player looks at the current snapshot and returns the direction it
    wants the snake to take next, or None to keep the current one.
    """

    name = "player"

    def get_move(self, game_state: BoardState) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current snapshot of the board

        Returns:
            One of the Direction members, or None for no change
        """
        raise NotImplementedError
