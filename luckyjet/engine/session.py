"""Game session — the round state machine and the engine aggregate.

``GameEngine`` is constructed explicitly with its collaborators (store,
event bus, random source, tick driver) and owns the round state, the
lifetime counters and the achievement / level / leaderboard engines.

Round lifecycle::

    MENU ──start──▶ PLAYING ──jump / explosion──▶ GAME_OVER ──reset──▶ MENU
      │  ▲                                          │
      ▼  │                                          └──start (play again)──▶ PLAYING
    LEVEL_SELECTION ──start_level──▶ PLAYING

Operations called in the wrong phase are silent no-ops.  Every mutating
entry point holds ``self._lock`` so a tick can never interleave with a jump.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Protocol

from luckyjet.data.balance import BALANCE
from luckyjet.data.levels import LevelDef
from luckyjet.engine.achievements import AchievementEngine
from luckyjet.engine.events import EventBus, RoundEnded, RoundOutcome, RoundStarted
from luckyjet.engine.game_state import NullTickDriver, Phase, SessionState, TickDriver
from luckyjet.engine.leaderboard import HighScoreEntry, Leaderboard
from luckyjet.engine.progression import LevelProgression
from luckyjet.engine.scoring import compute_score, is_success
from luckyjet.engine.stats import LifetimeStats, load_stats, save_stats
from luckyjet.engine.store import MemoryStore, PersistentStore

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


class GameEngine:
    """Everything the presentation layer talks to."""

    def __init__(
        self,
        store: PersistentStore | None = None,
        events: EventBus | None = None,
        rng: RandomSource | None = None,
        driver: TickDriver | None = None,
    ) -> None:
        self.store: PersistentStore = store if store is not None else MemoryStore()
        self.events = events if events is not None else EventBus()
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._driver: TickDriver = driver if driver is not None else NullTickDriver()
        self._lock = threading.RLock()

        self.state = SessionState()
        self.stats: LifetimeStats = load_stats(self.store)
        self.achievements = AchievementEngine(self.store, self.events)
        self.levels = LevelProgression(self.store, self.events)
        self.leaderboard = Leaderboard(self.store)

    # ── Derived ──────────────────────────────────────────────────

    @property
    def tick_period(self) -> float:
        return BALANCE.flight.tick_period_s

    @property
    def is_success(self) -> bool:
        """Did the finished round save the astronaut?"""
        s = self.state
        return s.jump_pressed and is_success(s.flight_time, s.explosion_time)

    # ── Menu navigation ──────────────────────────────────────────

    def open_level_selection(self) -> None:
        with self._lock:
            if self.state.game_state == Phase.MENU:
                self.state.game_state = Phase.LEVEL_SELECTION

    def close_level_selection(self) -> None:
        with self._lock:
            if self.state.game_state == Phase.LEVEL_SELECTION:
                self.state.game_state = Phase.MENU

    # ── Round control ────────────────────────────────────────────

    def start_game(self) -> None:
        """Start a round on the hardest unlocked level (or a level-less round)."""
        with self._lock:
            level = self.levels.max_unlocked_level()
            if level is None:
                self._begin_round(None)
            else:
                self.start_level(level)

    def start_level(self, level: LevelDef) -> None:
        """Start a round on ``level``.  Locked levels are ignored."""
        with self._lock:
            if not self.levels.is_unlocked(level.id):
                logger.debug("Ignoring start of locked level %s", level.id)
                return
            self._begin_round(level)

    def _begin_round(self, level: LevelDef | None) -> None:
        if self.state.game_state == Phase.PLAYING:
            return

        flight = BALANCE.flight
        if level is not None:
            lo, hi = level.explosion_time_range
            max_flight = level.max_flight_time
        else:
            lo, hi = flight.default_explosion_range
            max_flight = flight.default_max_flight_time

        s = self.state
        s.clear()
        s.current_level = level
        s.max_flight_time = max_flight
        s.explosion_time = self._rng.uniform(lo, hi)
        s.is_flying = True
        s.game_state = Phase.PLAYING

        self.stats.total_games += 1
        save_stats(self.store, self.stats)

        self._driver.start(self.tick, flight.tick_period_s)
        level_id = level.id if level is not None else None
        logger.debug("Round started on %s", level_id or "default range")
        self.events.emit(RoundStarted(level_id=level_id, max_flight_time=max_flight))

    def tick(self) -> None:
        """Advance flight by one period; ends the round on explosion or max time."""
        with self._lock:
            s = self.state
            if s.game_state != Phase.PLAYING or not s.is_flying:
                return

            s.ticks += 1
            s.flight_time = round(s.ticks * self.tick_period, BALANCE.flight.time_precision)

            if s.flight_time >= s.explosion_time or s.flight_time >= s.max_flight_time:
                s.is_flying = False
                self._end_game()

    def jump(self) -> None:
        """Bail out of the rocket.  Only valid mid-flight."""
        with self._lock:
            s = self.state
            if s.game_state != Phase.PLAYING or not s.is_flying:
                return

            s.jump_pressed = True
            s.is_flying = False
            self.stats.total_jumps += 1

            s.score += compute_score(s.flight_time)
            self.stats.record_flight(s.flight_time, s.score)

            success = is_success(s.flight_time, s.explosion_time)
            self.achievements.check_jump_achievements(
                self.stats, s.flight_time, s.explosion_time, success
            )
            self._check_unlocks()

            save_stats(self.store, self.stats)
            self._end_game()

    def _end_game(self) -> None:
        s = self.state
        s.game_state = Phase.GAME_OVER
        self._driver.stop()

        if not s.jump_pressed:
            self.stats.total_explosions += 1
            self.stats.consecutive_explosions += 1
            self.stats.consecutive_successful_jumps = 0
            self.stats.consecutive_perfect_timing = 0
            self._check_unlocks()
            outcome = RoundOutcome.EXPLODED
        else:
            # Any jump breaks the explosion streak, successful or not
            self.stats.consecutive_explosions = 0
            outcome = RoundOutcome.SAVED if self.is_success else RoundOutcome.CRASHED

        save_stats(self.store, self.stats)
        level_id = s.current_level.id if s.current_level is not None else None
        logger.debug("Round ended: %s after %.1fs", outcome.name, s.flight_time)
        self.events.emit(
            RoundEnded(
                outcome=outcome,
                score=s.score,
                flight_time=s.flight_time,
                explosion_time=s.explosion_time,
                level_id=level_id,
            )
        )

    def reset_game(self) -> None:
        """Leave the game-over screen for the menu."""
        with self._lock:
            if self.state.game_state != Phase.GAME_OVER:
                return
            self.state.clear()
            self.state.game_state = Phase.MENU

    def _check_unlocks(self) -> None:
        self.achievements.check_achievements(self.stats)
        self.levels.check_level_unlocks(self.stats.best_score)

    # ── Leaderboard ──────────────────────────────────────────────

    def can_save_score(self) -> bool:
        """True on the game-over screen when the round's score makes the top 10."""
        s = self.state
        return s.game_state == Phase.GAME_OVER and self.leaderboard.is_top_ten(s.score)

    def save_high_score(self, player_name: str) -> HighScoreEntry | None:
        """Record the finished round on the leaderboard.  None if rejected."""
        with self._lock:
            s = self.state
            if s.game_state != Phase.GAME_OVER:
                return None
            level_title = s.current_level.title if s.current_level is not None else "Classic"
            return self.leaderboard.add_entry(player_name, s.score, s.flight_time, level_title)

    # ── Statistics ───────────────────────────────────────────────

    def reset_statistics(self) -> None:
        """Zero the lifetime counters.  Unlocked achievements and levels stay."""
        with self._lock:
            self.stats.reset()
            save_stats(self.store, self.stats)
