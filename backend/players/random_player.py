"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain import VALID_MOVES, BoardState, Direction
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding walls and the body.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: BoardState) -> Direction:
        head = game_state.head
        body = set(game_state.snake)
        # Reversing is ignored by the engine, so it is never a real option.
        candidates = sorted(VALID_MOVES - {game_state.direction.opposite}, key=lambda d: d.value)

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit the body, tail included (it only counts as free once vacated)
        safe_moves: List[Direction] = []
        for move in candidates:
            cell = head.neighbor(move)
            if not cell.in_bounds(game_state.rows, game_state.columns):
                continue
            if cell in body:
                continue
            safe_moves.append(move)

        # If no safe moves, any move will do (we'll die anyway)
        if not safe_moves:
            return self._rng.choice(candidates)

        return self._rng.choice(safe_moves)
