"""
Single-player grid snake engine.

SnakeGame owns the board state and exposes the only transitions allowed on
it: set_direction, tick and restart. It never starts timers or does I/O;
a driver calls tick() at a fixed cadence and an input source calls
set_direction() between ticks.
"""

import logging
import random
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

import config
from domain import (
    DEFAULT_DIRECTION,
    START_COLUMN,
    START_ROW,
    BoardState,
    Coordinate,
    Direction,
    Snake,
    validate_dimensions,
)

logger = logging.getLogger(__name__)

Observer = Callable[[BoardState], None]


class TickStatus(str, Enum):
    MOVED = "moved"
    ATE_FOOD = "ate_food"
    GAME_OVER = "game_over"
    WON = "won"


@dataclass(frozen=True)
class TickResult:
    """Outcome of one tick together with the snapshot it produced."""

    status: TickStatus
    state: BoardState


class SnakeGame:
    """
    Manages:
      - Board (rows, columns)
      - The snake and its pending direction
      - Food placement
      - Score
      - Observers notified with a fresh snapshot after every change
    """

    def __init__(
        self,
        rows: int = config.BOARD_ROWS,
        columns: int = config.BOARD_COLUMNS,
        initial_food: Optional[Tuple[int, int]] = None,
        rng: Optional[random.Random] = None,
    ):
        validate_dimensions(rows, columns)
        self.rows = rows
        self.columns = columns
        self.start = Coordinate(START_ROW, START_COLUMN)

        if initial_food is not None:
            initial_food = Coordinate(*initial_food)
            if not initial_food.in_bounds(rows, columns):
                raise ValueError(f"Food out of bounds at {tuple(initial_food)}.")
            if initial_food == self.start:
                raise ValueError(f"Food cannot start on the snake at {tuple(initial_food)}.")

        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.RLock()
        self._observers: List[Observer] = []

        self._reset(initial_food)
        logger.info(
            "New game on a %dx%d board, snake at %s, food at %s",
            rows, columns, self.start, self.food,
        )

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def add_observer(self, callback: Observer) -> None:
        with self._lock:
            if callback not in self._observers:
                self._observers.append(callback)

    def remove_observer(self, callback: Observer) -> None:
        with self._lock:
            if callback in self._observers:
                self._observers.remove(callback)

    def _notify(self, state: BoardState) -> None:
        for callback in list(self._observers):
            try:
                callback(state)
            except Exception:
                logger.exception("Observer %r failed on tick %d", callback, state.tick_number)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def set_direction(self, requested: Union[Direction, str]) -> BoardState:
        """
        Request the direction for the next tick.

        The request is ignored when the game is over or when it is the exact
        opposite of the current direction.
        """
        direction = self._coerce_direction(requested)

        with self._lock:
            if self.game_over:
                logger.debug("Ignoring direction %s: game is over", direction.value)
                return self.get_current_state()
            if direction == self.direction.opposite:
                logger.debug(
                    "Ignoring direction %s: opposite of %s",
                    direction.value, self.direction.value,
                )
                return self.get_current_state()
            if direction == self.direction:
                return self.get_current_state()

            self.direction = direction
            state = self.get_current_state()
            self._notify(state)
            return state

    def tick(self) -> TickResult:
        """
        Advance the simulation by exactly one step:
          1) If the game is over, do nothing
          2) Compute the new head from the pending direction
          3) Wall, then self collision against the whole current body
          4) Prepend the head; on food grow and place new food, else drop the tail
        """
        with self._lock:
            if self.game_over:
                status = TickStatus.WON if self.won else TickStatus.GAME_OVER
                return TickResult(status, self.get_current_state())

            new_head = self.snake.head.neighbor(self.direction)

            reason = self._collision_reason(new_head)
            if reason is not None:
                self.snake.kill(reason)
                self.game_over = True
                logger.info(
                    "Game over: %s collision at %s after %d ticks, score %d",
                    reason, new_head, self.tick_number, self.score,
                )
                state = self.get_current_state()
                self._notify(state)
                return TickResult(TickStatus.GAME_OVER, state)

            self.snake.positions.appendleft(new_head)
            self.tick_number += 1

            if new_head == self.food:
                self.score += 1
                self.food = self._random_free_cell()
                if self.food is None:
                    self.game_over = True
                    self.won = True
                    status = TickStatus.WON
                    logger.info("Board full after %d ticks, score %d", self.tick_number, self.score)
                else:
                    status = TickStatus.ATE_FOOD
            else:
                self.snake.positions.pop()
                status = TickStatus.MOVED

            state = self.get_current_state()
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Tick %d (%s):\n%s", self.tick_number, status.value, state.print_board())
            self._notify(state)
            return TickResult(status, state)

    def restart(self) -> BoardState:
        """Throw the current game away and start over with freshly placed food."""
        with self._lock:
            self._reset(None)
            logger.info("Game restarted, food at %s", self.food)
            state = self.get_current_state()
            self._notify(state)
            return state

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def get_current_state(self) -> BoardState:
        """
        Return a snapshot of the current board as a BoardState.
        """
        with self._lock:
            return BoardState(
                rows=self.rows,
                columns=self.columns,
                food=self.food,
                snake=tuple(self.snake.positions),
                direction=self.direction,
                game_over=self.game_over,
                score=self.score,
                tick_number=self.tick_number,
                won=self.won,
                death_reason=self.snake.death_reason,
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _reset(self, food: Optional[Coordinate]) -> None:
        self.snake = Snake([self.start])
        self.direction = DEFAULT_DIRECTION
        self.score = 0
        self.tick_number = 0
        self.game_over = False
        self.won = False
        self.food = food if food is not None else self._random_free_cell()

    def _collision_reason(self, cell: Coordinate) -> Optional[str]:
        if not cell.in_bounds(self.rows, self.columns):
            return "wall"
        # The tail cell still counts even though it would be vacated this tick.
        if cell in self.snake:
            return "self"
        return None

    def _random_free_cell(self) -> Optional[Coordinate]:
        """
        Return a random cell not occupied by the snake, or None when the
        snake covers the whole board. Tries rejection sampling first and
        falls back to picking from the full list of free cells.
        """
        occupied = set(self.snake.positions)
        if len(occupied) >= self.rows * self.columns:
            return None

        for _ in range(config.FOOD_PLACEMENT_ATTEMPTS):
            cell = Coordinate(self._rng.randrange(self.rows), self._rng.randrange(self.columns))
            if cell not in occupied:
                return cell

        free_cells = [
            Coordinate(row, column)
            for row in range(self.rows)
            for column in range(self.columns)
            if (row, column) not in occupied
        ]
        return self._rng.choice(free_cells)

    @staticmethod
    def _coerce_direction(requested: Union[Direction, str]) -> Direction:
        if isinstance(requested, str):
            requested = requested.upper()
        try:
            return Direction(requested)
        except ValueError:
            raise ValueError(f"Invalid direction: {requested!r}") from None
