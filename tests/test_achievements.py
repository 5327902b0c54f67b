"""Tests for the achievement engine."""

import pytest

from luckyjet.data.achievements import ALL_ACHIEVEMENTS
from luckyjet.engine.achievements import UNLOCKED_KEY, AchievementEngine
from luckyjet.engine.events import AchievementUnlocked
from luckyjet.engine.stats import LifetimeStats
from luckyjet.engine.store import decode_json, encode_json


@pytest.fixture()
def achievements(store, bus) -> AchievementEngine:
    return AchievementEngine(store, bus)


# ── Catalog ──────────────────────────────────────────────────────────────────

def test_catalog_has_unique_ids():
    assert len(ALL_ACHIEVEMENTS) == 33
    assert all(aid == a.id for aid, a in ALL_ACHIEVEMENTS.items())


def test_everything_starts_locked(achievements):
    assert achievements.progress() == (0, len(ALL_ACHIEVEMENTS))
    assert not any(view.unlocked for view in achievements.achievements())


# ── unlock() ─────────────────────────────────────────────────────────────────

def test_unlock_is_idempotent(achievements, bus):
    assert achievements.unlock("first_jump")
    assert not achievements.unlock("first_jump")
    assert bus.drain() == [AchievementUnlocked("first_jump")]


def test_unlock_persists_whole_set(achievements, store):
    achievements.unlock("first_jump")
    achievements.unlock("astronaut")
    assert decode_json(store.get_blob(UNLOCKED_KEY)) == ["astronaut", "first_jump"]


def test_unlock_unknown_id_is_ignored(achievements, bus):
    assert not achievements.unlock("no_such_thing")
    assert achievements.progress()[0] == 0
    assert bus.drain() == []


def test_read_model_reflects_unlock(achievements):
    achievements.unlock("patience")
    views = {v.id: v for v in achievements.achievements()}
    assert views["patience"].unlocked
    assert not views["first_jump"].unlocked


def test_unlocks_survive_reload(achievements, store, bus):
    achievements.unlock("veteran")
    reloaded = AchievementEngine(store, bus)
    assert reloaded.is_unlocked("veteran")


def test_reload_drops_ids_no_longer_in_catalog(store, bus):
    store.set_blob(UNLOCKED_KEY, encode_json(["first_jump", "retired_badge"]))
    engine = AchievementEngine(store, bus)
    assert engine.unlocked_ids == {"first_jump"}


def test_corrupt_blob_loads_empty(store, bus):
    store.set_blob(UNLOCKED_KEY, b"\xff not json")
    engine = AchievementEngine(store, bus)
    assert engine.unlocked_ids == frozenset()


# ── check_jump_achievements() ────────────────────────────────────────────────

def test_success_counts_successful_jump(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 5.0, 9.0, True)
    assert stats.total_successful_jumps == 1
    achievements.check_jump_achievements(stats, 9.5, 9.0, False)
    assert stats.total_successful_jumps == 1


def test_quick_reflex_bumps_counter_only_on_first_unlock(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 8.2, 9.0, True)
    assert achievements.is_unlocked("quick_reflex")
    assert stats.last_second_jumps == 1

    achievements.check_jump_achievements(stats, 8.5, 9.0, True)
    assert stats.last_second_jumps == 1


def test_perfect_timing_window(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 8.5, 9.0, True)
    assert achievements.is_unlocked("perfect_timing")
    assert stats.perfect_timing_count == 1
    assert stats.consecutive_perfect_timing == 1


def test_perfect_streak_resets_once_already_unlocked(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 8.8, 9.0, True)
    assert stats.consecutive_perfect_timing == 1

    # Still inside the window, but the achievement is already unlocked
    achievements.check_jump_achievements(stats, 8.8, 9.0, True)
    assert stats.consecutive_perfect_timing == 0


def test_perfect_streak_resets_outside_window(achievements):
    stats = LifetimeStats(consecutive_perfect_timing=3)
    achievements.check_jump_achievements(stats, 4.0, 9.0, True)
    assert stats.consecutive_perfect_timing == 0


def test_speed_demon_and_early_bird(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 0.8, 9.0, True)
    assert achievements.is_unlocked("speed_demon")
    assert achievements.is_unlocked("early_bird")
    assert stats.early_jumps == 1


def test_early_bird_without_speed_demon(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 1.5, 9.0, True)
    assert achievements.is_unlocked("early_bird")
    assert not achievements.is_unlocked("speed_demon")
    assert stats.early_jumps == 0


def test_patience_bumps_late_jumps(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 7.0, 9.5, True)
    assert achievements.is_unlocked("patience")
    assert stats.late_jumps == 1


def test_last_moment(achievements):
    stats = LifetimeStats()
    achievements.check_jump_achievements(stats, 8.9, 9.0, True)
    assert achievements.is_unlocked("last_moment")


def test_last_moment_needs_point_two_seconds(store, bus):
    engine = AchievementEngine(store, bus)
    engine.check_jump_achievements(LifetimeStats(), 8.7, 9.0, True)
    assert not engine.is_unlocked("last_moment")
    assert engine.is_unlocked("quick_reflex")


def test_success_streak_thresholds(achievements):
    stats = LifetimeStats()
    for _ in range(2):
        achievements.check_jump_achievements(stats, 5.0, 9.0, True)
    assert not achievements.is_unlocked("streak_3")

    achievements.check_jump_achievements(stats, 5.0, 9.0, True)
    assert achievements.is_unlocked("streak_3")

    for _ in range(7):
        achievements.check_jump_achievements(stats, 5.0, 9.0, True)
    assert stats.consecutive_successful_jumps == 10
    assert achievements.is_unlocked("streak_5")
    assert achievements.is_unlocked("streak_10")
    assert not achievements.is_unlocked("streak_20")


def test_failed_jump_resets_success_streak(achievements):
    stats = LifetimeStats(consecutive_successful_jumps=2)
    achievements.check_jump_achievements(stats, 9.5, 9.0, False)
    assert stats.consecutive_successful_jumps == 0
    achievements.check_jump_achievements(stats, 5.0, 9.0, True)
    assert not achievements.is_unlocked("streak_3")


# ── check_achievements() ─────────────────────────────────────────────────────

def test_basic_achievements(achievements):
    stats = LifetimeStats(total_jumps=1, total_successful_jumps=1, total_explosions=1)
    unlocked = achievements.check_achievements(stats)
    assert set(unlocked) == {"first_jump", "first_success", "first_explosion"}


def test_flight_time_bests(achievements):
    achievements.check_achievements(LifetimeStats(longest_flight=9.5))
    assert achievements.is_unlocked("astronaut")
    assert achievements.is_unlocked("space_explorer")
    assert achievements.is_unlocked("cosmic_traveler")
    assert not achievements.is_unlocked("time_master")


def test_short_flight_needs_a_flight(achievements):
    achievements.check_achievements(LifetimeStats(longest_flight=0.0))
    assert not achievements.is_unlocked("short_flight")
    achievements.check_achievements(LifetimeStats(longest_flight=2.5))
    assert achievements.is_unlocked("short_flight")


def test_score_bests(achievements):
    achievements.check_achievements(LifetimeStats(best_score=1000))
    assert achievements.is_unlocked("score_100")
    assert achievements.is_unlocked("score_500")
    assert achievements.is_unlocked("score_1000")
    assert not achievements.is_unlocked("high_scorer")


def test_lifetime_totals(achievements):
    achievements.check_achievements(LifetimeStats(total_successful_jumps=50))
    assert achievements.is_unlocked("survivor")
    assert achievements.is_unlocked("veteran")
    assert not achievements.is_unlocked("master")


def test_special_achievements(achievements):
    stats = LifetimeStats(
        consecutive_explosions=5,
        last_second_jumps=10,
        late_jumps=10,
        consecutive_perfect_timing=5,
    )
    achievements.check_achievements(stats)
    for aid in ("lucky_one", "risk_taker", "conservative", "perfectionist"):
        assert achievements.is_unlocked(aid)


def test_milestones(achievements):
    achievements.check_achievements(LifetimeStats(total_games=500))
    assert achievements.is_unlocked("milestone_100")
    assert achievements.is_unlocked("milestone_500")
    assert not achievements.is_unlocked("milestone_1000")


def test_check_achievements_twice_has_no_duplicate_effects(achievements, bus, store):
    stats = LifetimeStats(total_jumps=3, best_score=150)
    first = achievements.check_achievements(stats)
    blob = store.get_blob(UNLOCKED_KEY)
    events = bus.drain()

    second = achievements.check_achievements(stats)

    assert first
    assert second == []
    assert bus.drain() == []
    assert store.get_blob(UNLOCKED_KEY) == blob
    assert len(events) == len(first)


def test_unlocks_never_revert(achievements):
    achievements.check_achievements(LifetimeStats(best_score=500))
    achievements.check_achievements(LifetimeStats())
    assert achievements.is_unlocked("score_500")
