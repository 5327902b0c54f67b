"""Game state — single source of truth for the current round."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Protocol

from luckyjet.data.levels import LevelDef


class Phase(Enum):
    """Which screen of the game the player is on."""

    MENU = auto()
    LEVEL_SELECTION = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class SessionState:
    """Complete mutable state for one round.  Never persisted."""

    game_state: Phase = Phase.MENU
    score: int = 0
    flight_time: float = 0.0
    is_flying: bool = False
    explosion_time: float = 0.0     # sampled once per round, hidden from the player
    jump_pressed: bool = False
    current_level: LevelDef | None = None
    max_flight_time: float = 0.0
    ticks: int = 0                  # flight_time is derived from this counter

    def clear(self) -> None:
        """Back to the idle menu values (keeps the phase untouched)."""
        self.score = 0
        self.flight_time = 0.0
        self.is_flying = False
        self.explosion_time = 0.0
        self.jump_pressed = False
        self.current_level = None
        self.max_flight_time = 0.0
        self.ticks = 0


class TickDriver(Protocol):
    """Something that calls ``callback`` every ``interval`` seconds until stopped."""

    def start(self, callback: Callable[[], None], interval: float) -> None: ...

    def stop(self) -> None: ...


class NullTickDriver:
    """Driver that never fires; the caller ticks the engine by hand."""

    def __init__(self) -> None:
        self.running = False
        self.interval = 0.0

    def start(self, callback: Callable[[], None], interval: float) -> None:
        self.running = True
        self.interval = interval

    def stop(self) -> None:
        self.running = False
