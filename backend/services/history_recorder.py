"""
In-memory replay history built from engine notifications.
"""

from collections import deque
from typing import Any, Deque, Dict, List, Optional

from domain import BoardState


class HistoryRecorder:
    """
    Observer that keeps every snapshot the engine publishes.

    Register it with ``game.add_observer(recorder)``. ``max_states`` caps the
    history; the oldest snapshots are dropped first.
    """

    def __init__(self, max_states: Optional[int] = None):
        if max_states is not None and max_states <= 0:
            raise ValueError("max_states must be positive.")
        self.max_states = max_states
        self.history: Deque[BoardState] = deque(maxlen=max_states)

    def __call__(self, state: BoardState) -> None:
        self.record(state)

    def record(self, state: BoardState) -> None:
        self.history.append(state)

    def clear(self) -> None:
        self.history.clear()

    def serialize_history(self) -> List[Dict[str, Any]]:
        """
        Convert the recorded snapshots to a JSON-serializable list of dicts.
        """
        return [state.to_dict() for state in self.history]

    def __len__(self) -> int:
        return len(self.history)
