"""
Tests for the player implementations.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import BoardState, Coordinate, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import Player, RandomPlayer


def make_state(snake, direction, rows=10, columns=10, food=(9, 9)):
    return BoardState(
        rows=rows,
        columns=columns,
        food=Coordinate(*food),
        snake=tuple(Coordinate(*cell) for cell in snake),
        direction=direction,
    )


class TestPlayer:
    """Tests for the Player base class."""

    def test_get_move_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(0, 0)], RIGHT))


class TestRandomPlayer:
    """Tests for the RandomPlayer autopilot."""

    def test_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(0))
        move = player.get_move(make_state([(5, 5)], RIGHT))
        assert move in VALID_MOVES

    def test_never_reverses(self):
        state = make_state([(5, 5)], RIGHT)
        for seed in range(30):
            assert RandomPlayer(rng=random.Random(seed)).get_move(state) != LEFT

    def test_avoids_walls_when_possible(self):
        """From the top-left corner heading right only DOWN and RIGHT are safe."""
        state = make_state([(0, 0)], RIGHT)
        moves = {RandomPlayer(rng=random.Random(seed)).get_move(state) for seed in range(50)}
        assert moves <= {DOWN, RIGHT}

    def test_avoids_body_including_tail(self):
        state = make_state([(5, 5), (4, 5), (4, 6), (5, 6)], DOWN)
        moves = {RandomPlayer(rng=random.Random(seed)).get_move(state) for seed in range(50)}
        assert moves <= {DOWN, LEFT}

    def test_trapped_snake_still_moves(self):
        """With no safe move it picks any non-reverse direction."""
        state = make_state([(0, 0), (1, 0), (1, 1), (0, 1)], UP, rows=2, columns=2, food=(0, 0))
        move = RandomPlayer(rng=random.Random(1)).get_move(state)
        assert move in {UP, LEFT, RIGHT}

    def test_same_seed_same_moves(self):
        state = make_state([(5, 5)], RIGHT)
        a = RandomPlayer(rng=random.Random(42))
        b = RandomPlayer(rng=random.Random(42))
        assert [a.get_move(state) for _ in range(10)] == [b.get_move(state) for _ in range(10)]
