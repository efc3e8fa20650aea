"""
Domain entities for the grid snake engine.

This module contains the board and snake definitions that are independent
of drivers, input sources and rendering.
"""

from .constants import (
    Direction,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DEFAULT_DIRECTION, START_ROW, START_COLUMN,
)
from .coordinate import Coordinate
from .snake import Snake
from .game_state import BoardState, InvalidDimensions, validate_dimensions

__all__ = [
    'Direction',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DEFAULT_DIRECTION', 'START_ROW', 'START_COLUMN',
    'Coordinate',
    'Snake',
    'BoardState',
    'InvalidDimensions',
    'validate_dimensions',
]
