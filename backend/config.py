"""
Runtime configuration for the snake engine and its drivers.

Values come from the environment (a local .env file is loaded first) and
fall back to the defaults of the classic 20x20 board ticking every 150 ms.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

BOARD_ROWS = int(os.getenv("SNAKE_BOARD_ROWS", "20"))
BOARD_COLUMNS = int(os.getenv("SNAKE_BOARD_COLUMNS", "20"))
TICK_INTERVAL_SECONDS = float(os.getenv("SNAKE_TICK_INTERVAL_SECONDS", "0.15"))
LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()

# Rejection sampling attempts before food placement scans every free cell.
FOOD_PLACEMENT_ATTEMPTS = 64


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging for entry points. Library code only gets loggers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
