"""Lifetime statistics — counters that persist across launches."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from luckyjet.engine.store import PersistentStore, StoreError

logger = logging.getLogger(__name__)

# Store keys for the integer counters: attribute → key
INT_KEYS: dict[str, str] = {
    "total_jumps": "totalJumps",
    "best_score": "bestScore",
    "total_games": "totalGames",
    "total_successful_jumps": "totalSuccessfulJumps",
    "total_explosions": "totalExplosions",
    "perfect_timing_count": "perfectTimingCount",
    "last_second_jumps": "lastSecondJumps",
    "early_jumps": "earlyJumps",
    "late_jumps": "lateJumps",
    "consecutive_explosions": "consecutiveExplosions",
    "consecutive_perfect_timing": "consecutivePerfectTiming",
}
FLOAT_KEYS: dict[str, str] = {
    "longest_flight": "longestFlight",
}


@dataclass
class LifetimeStats:
    """Aggregate counters used by the achievement and level engines."""

    total_jumps: int = 0
    longest_flight: float = 0.0
    best_score: int = 0
    total_games: int = 0
    total_successful_jumps: int = 0
    total_explosions: int = 0
    perfect_timing_count: int = 0
    last_second_jumps: int = 0
    early_jumps: int = 0
    late_jumps: int = 0
    consecutive_explosions: int = 0
    consecutive_perfect_timing: int = 0

    # In-process only: a relaunch starts the success streak from zero
    consecutive_successful_jumps: int = 0

    def record_flight(self, flight_time: float, score: int) -> None:
        """Raise the longest-flight / best-score records if beaten."""
        if flight_time > self.longest_flight:
            self.longest_flight = flight_time
        if score > self.best_score:
            self.best_score = score

    def reset(self) -> None:
        """Zero every counter, including the in-process streak."""
        for f in fields(self):
            setattr(self, f.name, f.default)


def load_stats(store: PersistentStore) -> LifetimeStats:
    """Read the persisted counters.  Absent keys read as zero."""
    stats = LifetimeStats()
    for attr, key in INT_KEYS.items():
        setattr(stats, attr, max(0, store.get_int(key, 0)))
    for attr, key in FLOAT_KEYS.items():
        setattr(stats, attr, max(0.0, store.get_float(key, 0.0)))
    return stats


def save_stats(store: PersistentStore, stats: LifetimeStats) -> bool:
    """Write every persisted counter.  Failures are logged, never raised."""
    try:
        for attr, key in INT_KEYS.items():
            store.set_int(key, getattr(stats, attr))
        for attr, key in FLOAT_KEYS.items():
            store.set_float(key, getattr(stats, attr))
        store.synchronize()
    except StoreError as e:
        logger.warning("Could not persist statistics: %s", e)
        return False
    return True
