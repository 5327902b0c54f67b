"""Shared fixtures: in-memory store, pinned explosion times, manual ticking."""

from __future__ import annotations

import pytest

from luckyjet.engine.events import EventBus
from luckyjet.engine.game_state import NullTickDriver
from luckyjet.engine.session import GameEngine
from luckyjet.engine.store import MemoryStore


class FixedRandom:
    """Random source whose ``uniform`` always returns the same value (clamped to range)."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return min(max(self.value, a), b)


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def rng() -> FixedRandom:
    return FixedRandom(9.0)


@pytest.fixture()
def driver() -> NullTickDriver:
    return NullTickDriver()


@pytest.fixture()
def engine(store: MemoryStore, bus: EventBus, rng: FixedRandom, driver: NullTickDriver) -> GameEngine:
    return GameEngine(store=store, events=bus, rng=rng, driver=driver)


def fly(engine: GameEngine, ticks: int) -> None:
    """Advance the current round by ``ticks`` tick periods."""
    for _ in range(ticks):
        engine.tick()
