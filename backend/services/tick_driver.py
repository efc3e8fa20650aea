"""
Fixed-cadence driver for the snake engine.

The engine holds no timer state; this module owns the clock. TickDriver
runs tick() on a background thread, and run_headless() plays a whole game
synchronously with an autopilot, which is handy for demos and smoke tests.
"""

import logging
import random
import threading
import time
from typing import Optional

import config
from domain import BoardState
from players import Player, RandomPlayer
from snake_game import SnakeGame, TickResult

logger = logging.getLogger(__name__)


class TickDriver:
    """
    Calls ``game.tick()`` every ``interval`` seconds on a daemon thread.

    When a player is given it is asked for a move before each tick, which
    goes through ``set_direction`` like any other input.
    """

    def __init__(
        self,
        game: SnakeGame,
        interval: float = config.TICK_INTERVAL_SECONDS,
        player: Optional[Player] = None,
        stop_on_game_over: bool = True,
    ):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.game = game
        self.interval = interval
        self.player = player
        self.stop_on_game_over = stop_on_game_over
        self.ticks = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="snake-tick-driver", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def join(self, timeout: Optional[float] = None) -> None:
        """Wait for the driver thread to finish on its own (e.g. at game over)."""
        if self._thread is not None:
            self._thread.join(timeout)

    def step(self) -> TickResult:
        """One driver iteration: ask the player for a move, then tick."""
        if self.player is not None:
            state = self.game.get_current_state()
            if not state.game_over:
                try:
                    move = self.player.get_move(state)
                except Exception as exc:
                    logger.warning(
                        "Player %s failed on tick %d: %s. Keeping direction %s.",
                        self.player.name, state.tick_number, exc, state.direction.value,
                    )
                    move = None
                if move is not None:
                    self.game.set_direction(move)

        result = self.game.tick()
        self.ticks += 1
        return result

    def _run(self) -> None:
        logger.info("Tick driver started (interval %.3fs)", self.interval)
        deadline = time.monotonic()
        while not self._stop_event.is_set():
            result = self.step()
            if result.state.game_over and self.stop_on_game_over:
                logger.info("Game over after %d ticks, stopping driver", self.ticks)
                break
            deadline = self._next_deadline(deadline)
            self._stop_event.wait(max(0.0, deadline - time.monotonic()))
        logger.info("Tick driver stopped after %d ticks", self.ticks)

    def _next_deadline(self, deadline: float) -> float:
        """One interval after ``deadline``, but never earlier than now."""
        return max(deadline + self.interval, time.monotonic())


def run_headless(
    rows: int = config.BOARD_ROWS,
    columns: int = config.BOARD_COLUMNS,
    player: Optional[Player] = None,
    max_ticks: int = 1000,
    seed: Optional[int] = None,
) -> BoardState:
    """
    Plays one game as fast as possible, without sleeping between ticks.

    Args:
        rows, columns: board dimensions
        player: input source; defaults to a RandomPlayer
        max_ticks: upper limit on driver iterations
        seed: seeds both food placement and the default player

    Returns:
        The final BoardState.
    """
    rng = random.Random(seed)
    game = SnakeGame(rows=rows, columns=columns, rng=rng)
    if player is None:
        player = RandomPlayer(rng=random.Random(seed))

    driver = TickDriver(game, player=player)
    result = None
    while driver.ticks < max_ticks:
        result = driver.step()
        if result.state.game_over:
            break

    state = result.state if result is not None else game.get_current_state()
    logger.info(
        "Headless game finished after %d ticks: score %d, game_over=%s, won=%s",
        driver.ticks, state.score, state.game_over, state.won,
    )
    return state


if __name__ == "__main__":
    config.configure_logging()
    final_state = run_headless()
    print(final_state.print_board())
