"""Balance constants — all tuning knobs in one place.

Tweak these to adjust round pacing, scoring and achievement thresholds.
Times are in seconds of flight (one tick = ``FlightBalance.tick_period_s``).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FlightBalance:
    """Tuning for a single round of flight."""

    # Nominal period of the tick driver
    tick_period_s: float = 0.1
    # Explosion range used when no level is selected
    default_explosion_range: tuple[float, float] = (5.0, 10.0)
    # Hard cap on flight when no level is selected
    default_max_flight_time: float = 10.0
    # Decimal places kept when deriving flight time from the tick counter
    time_precision: int = 6


@dataclass(frozen=True)
class ScoringBalance:
    """Tuning for the round score."""

    # Points per second of flight
    points_per_second: int = 10
    # Surviving past this flight time earns the survival bonus
    explosion_threshold: float = 8.0
    survival_bonus: int = 100


@dataclass(frozen=True)
class TimingBalance:
    """Windows (seconds) used by the jump-timing achievements."""

    quick_reflex_window: float = 1.0     # jump within the last second
    perfect_window: float = 0.5          # |flight - explosion| <= window
    last_moment_window: float = 0.2
    speed_demon_max: float = 1.0         # jump within 1s of takeoff
    early_bird_max: float = 2.0
    patience_min: float = 7.0


@dataclass(frozen=True)
class AchievementBalance:
    """Thresholds for the lifetime achievements: (threshold, achievement id)."""

    flight_bests: tuple[tuple[float, str], ...] = (
        (8.0, "astronaut"),
        (9.0, "space_explorer"),
        (9.5, "cosmic_traveler"),
        (10.0, "time_master"),
    )
    short_flight_max: float = 3.0

    score_bests: tuple[tuple[int, str], ...] = (
        (100, "score_100"),
        (500, "score_500"),
        (1000, "score_1000"),
        (2000, "high_scorer"),
    )
    successful_jump_totals: tuple[tuple[int, str], ...] = (
        (10, "survivor"),
        (50, "veteran"),
        (100, "master"),
        (500, "grandmaster"),
    )
    success_streaks: tuple[tuple[int, str], ...] = (
        (3, "streak_3"),
        (5, "streak_5"),
        (10, "streak_10"),
        (20, "streak_20"),
    )
    game_milestones: tuple[tuple[int, str], ...] = (
        (100, "milestone_100"),
        (500, "milestone_500"),
        (1000, "milestone_1000"),
    )

    lucky_one_explosions: int = 5
    risk_taker_jumps: int = 10
    conservative_jumps: int = 10
    perfectionist_streak: int = 5


@dataclass(frozen=True)
class LeaderboardBalance:
    """Tuning for the high-score table."""

    max_entries: int = 10


@dataclass(frozen=True)
class GameBalance:
    """Top-level container for all balance constants."""

    flight: FlightBalance = field(default_factory=FlightBalance)
    scoring: ScoringBalance = field(default_factory=ScoringBalance)
    timing: TimingBalance = field(default_factory=TimingBalance)
    achievements: AchievementBalance = field(default_factory=AchievementBalance)
    leaderboard: LeaderboardBalance = field(default_factory=LeaderboardBalance)


# Singleton, import this everywhere
BALANCE = GameBalance()
