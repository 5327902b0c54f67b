"""Achievement engine — evaluates unlock predicates after every round.

Two passes run per jump:

* :meth:`AchievementEngine.check_jump_achievements` looks at the jump that
  just happened (timing windows, success streak) and bumps the matching
  counters.
* :meth:`AchievementEngine.check_achievements` re-evaluates every
  threshold-style predicate against the lifetime counters.  Unlocking is
  idempotent, so running it repeatedly is harmless.

The unlocked-id set is the only thing persisted; the catalog itself is
immutable and :meth:`AchievementEngine.achievements` merges the two for
display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from luckyjet.data.achievements import ALL_ACHIEVEMENTS, AchievementDef
from luckyjet.data.balance import BALANCE
from luckyjet.engine.events import AchievementUnlocked, EventBus
from luckyjet.engine.stats import LifetimeStats
from luckyjet.engine.store import PersistentStore, load_id_set, save_id_set

logger = logging.getLogger(__name__)

UNLOCKED_KEY = "unlockedAchievements"


@dataclass(frozen=True)
class AchievementView:
    """Read-model: a catalog entry plus its unlock flag."""

    definition: AchievementDef
    unlocked: bool

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def title(self) -> str:
        return self.definition.title


class AchievementEngine:
    """Tracks which achievements are unlocked and decides when to unlock more."""

    def __init__(
        self,
        store: PersistentStore,
        events: EventBus,
        catalog: dict[str, AchievementDef] | None = None,
    ) -> None:
        self._store = store
        self._events = events
        self._catalog = catalog if catalog is not None else ALL_ACHIEVEMENTS
        self._unlocked: set[str] = {
            aid for aid in load_id_set(store, UNLOCKED_KEY) if aid in self._catalog
        }

    # ── Queries ──────────────────────────────────────────────────

    @property
    def unlocked_ids(self) -> frozenset[str]:
        return frozenset(self._unlocked)

    def is_unlocked(self, achievement_id: str) -> bool:
        return achievement_id in self._unlocked

    def achievements(self) -> list[AchievementView]:
        """Catalog order, each entry flagged with its unlock state."""
        return [
            AchievementView(definition=a, unlocked=a.id in self._unlocked)
            for a in self._catalog.values()
        ]

    def progress(self) -> tuple[int, int]:
        """(unlocked, total)."""
        return len(self._unlocked), len(self._catalog)

    # ── Mutation ─────────────────────────────────────────────────

    def unlock(self, achievement_id: str) -> bool:
        """Unlock an achievement.  Returns True only the first time."""
        if achievement_id in self._unlocked:
            return False
        if achievement_id not in self._catalog:
            logger.warning("Ignoring unknown achievement id %r", achievement_id)
            return False

        self._unlocked.add(achievement_id)
        save_id_set(self._store, UNLOCKED_KEY, self._unlocked)
        logger.info("Achievement unlocked: %s", achievement_id)
        self._events.emit(AchievementUnlocked(achievement_id))
        return True

    def _unlock_first_time(self, achievement_id: str, condition: bool) -> bool:
        """Unlock when ``condition`` holds and it's not unlocked yet."""
        if not condition or achievement_id in self._unlocked:
            return False
        return self.unlock(achievement_id)

    # ── Per-jump checks ──────────────────────────────────────────

    def check_jump_achievements(
        self,
        stats: LifetimeStats,
        flight_time: float,
        explosion_time: float,
        is_success: bool,
    ) -> None:
        """Evaluate the jump that just happened.  Mutates ``stats`` counters.

        The timing counters (``last_second_jumps``, ``perfect_timing_count``,
        ``early_jumps``, ``late_jumps``) only move on the jump that first
        unlocks their achievement.  The perfect-timing streak is the
        exception: any jump outside the perfect window resets it.
        """
        timing = BALANCE.timing

        if is_success:
            stats.total_successful_jumps += 1

        if self._unlock_first_time(
            "quick_reflex", flight_time >= explosion_time - timing.quick_reflex_window
        ):
            stats.last_second_jumps += 1

        if self._unlock_first_time(
            "perfect_timing", abs(flight_time - explosion_time) <= timing.perfect_window
        ):
            stats.perfect_timing_count += 1
            stats.consecutive_perfect_timing += 1
        else:
            stats.consecutive_perfect_timing = 0

        if self._unlock_first_time("speed_demon", flight_time <= timing.speed_demon_max):
            stats.early_jumps += 1

        if self._unlock_first_time("patience", flight_time >= timing.patience_min):
            stats.late_jumps += 1

        self._unlock_first_time(
            "last_moment", flight_time >= explosion_time - timing.last_moment_window
        )
        self._unlock_first_time("early_bird", flight_time <= timing.early_bird_max)

        # Success streak
        if is_success:
            stats.consecutive_successful_jumps += 1
            for threshold, aid in BALANCE.achievements.success_streaks:
                self._unlock_first_time(aid, stats.consecutive_successful_jumps >= threshold)
        else:
            stats.consecutive_successful_jumps = 0

    # ── Lifetime checks ──────────────────────────────────────────

    def check_achievements(self, stats: LifetimeStats) -> list[str]:
        """Re-evaluate every threshold predicate.  Returns newly unlocked ids."""
        bal = BALANCE.achievements
        rules: list[tuple[str, bool]] = [
            ("first_jump", stats.total_jumps >= 1),
            ("first_success", stats.total_successful_jumps >= 1),
            ("first_explosion", stats.total_explosions >= 1),
        ]
        rules += [(aid, stats.longest_flight >= t) for t, aid in bal.flight_bests]
        rules.append(
            ("short_flight", 0 < stats.longest_flight <= bal.short_flight_max)
        )
        rules += [(aid, stats.best_score >= t) for t, aid in bal.score_bests]
        rules += [
            (aid, stats.total_successful_jumps >= t) for t, aid in bal.successful_jump_totals
        ]
        rules += [
            ("lucky_one", stats.consecutive_explosions >= bal.lucky_one_explosions),
            ("risk_taker", stats.last_second_jumps >= bal.risk_taker_jumps),
            ("conservative", stats.late_jumps >= bal.conservative_jumps),
            ("perfectionist", stats.consecutive_perfect_timing >= bal.perfectionist_streak),
        ]
        rules += [(aid, stats.total_games >= t) for t, aid in bal.game_milestones]

        return [aid for aid, condition in rules if self._unlock_first_time(aid, condition)]
