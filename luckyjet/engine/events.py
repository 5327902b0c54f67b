"""Game events — what the engine tells the presentation layer.

The engine never touches the UI.  After each mutating operation it emits
one of the events below on an :class:`EventBus`; the view layer either
subscribes to the bus or drains the pending queue once per frame.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Union

logger = logging.getLogger(__name__)


class RoundOutcome(Enum):
    """How a round ended."""

    SAVED = auto()       # jumped before the explosion
    CRASHED = auto()     # jumped, but not before the explosion time
    EXPLODED = auto()    # never jumped (explosion or max flight time)


@dataclass(frozen=True)
class RoundStarted:
    level_id: str | None
    max_flight_time: float


@dataclass(frozen=True)
class RoundEnded:
    outcome: RoundOutcome
    score: int
    flight_time: float
    explosion_time: float
    level_id: str | None


@dataclass(frozen=True)
class AchievementUnlocked:
    achievement_id: str


@dataclass(frozen=True)
class LevelUnlocked:
    level_id: str


GameEvent = Union[RoundStarted, RoundEnded, AchievementUnlocked, LevelUnlocked]
Listener = Callable[[GameEvent], None]


class EventBus:
    """Fan-out channel for game events, with a pending queue for pollers."""

    def __init__(self, max_pending: int = 256) -> None:
        self._listeners: list[Listener] = []
        self._pending: deque[GameEvent] = deque(maxlen=max_pending)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``.  Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def emit(self, event: GameEvent) -> None:
        self._pending.append(event)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                # Listener failures never propagate into the engine
                logger.exception("Event listener failed on %r", event)

    def drain(self) -> list[GameEvent]:
        """Return and clear every event emitted since the last drain."""
        events = list(self._pending)
        self._pending.clear()
        return events
