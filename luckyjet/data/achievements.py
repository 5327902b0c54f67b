"""Achievement definitions — the static catalog shown on the achievements screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AchievementDef:
    """Definition of a single achievement (unlock state is tracked separately)."""

    id: str
    title: str
    description: str
    icon: str


ALL_ACHIEVEMENTS: dict[str, AchievementDef] = {}


def _register(*achievements: AchievementDef) -> None:
    for a in achievements:
        ALL_ACHIEVEMENTS[a.id] = a


# ── Basic ────────────────────────────────────────────────────────
_register(
    AchievementDef("first_jump", "First Jump", "Make your first jump", "🚀"),
    AchievementDef("first_success", "First Success", "Successfully complete your first jump", "✨"),
    AchievementDef("first_explosion", "First Explosion", "Experience your first explosion", "💥"),
)

# ── Timing ───────────────────────────────────────────────────────
_register(
    AchievementDef("quick_reflex", "Quick Reflex", "Jump in the last second before explosion", "⚡"),
    AchievementDef(
        "perfect_timing",
        "Perfect Timing",
        "Jump at the perfect moment (within 0.5s of explosion)",
        "🎯",
    ),
    AchievementDef("speed_demon", "Speed Demon", "Jump within 1 second of takeoff", "💨"),
    AchievementDef("patience", "Patience", "Wait more than 7 seconds before jumping", "⏰"),
    AchievementDef("last_moment", "Last Moment", "Jump within 0.2 seconds of explosion", "⏱️"),
    AchievementDef("early_bird", "Early Bird", "Jump within 2 seconds of takeoff", "🐦"),
)

# ── Flight time ──────────────────────────────────────────────────
_register(
    AchievementDef("astronaut", "Astronaut", "Fly for more than 8 seconds", "👨‍🚀"),
    AchievementDef("space_explorer", "Space Explorer", "Fly for more than 9 seconds", "🛸"),
    AchievementDef("cosmic_traveler", "Cosmic Traveler", "Fly for more than 9.5 seconds", "🌌"),
    AchievementDef("time_master", "Time Master", "Fly for exactly 10 seconds", "⏰"),
    AchievementDef("short_flight", "Short Flight", "Fly for less than 3 seconds", "🪶"),
)

# ── Score ────────────────────────────────────────────────────────
_register(
    AchievementDef("score_100", "Century", "Score 100 points in a single game", "💯"),
    AchievementDef("score_500", "Half Thousand", "Score 500 points in a single game", "🎯"),
    AchievementDef("score_1000", "Thousand", "Score 1000 points in a single game", "🏆"),
    AchievementDef("high_scorer", "High Scorer", "Score more than 2000 points in a single game", "⭐"),
)

# ── Streaks ──────────────────────────────────────────────────────
_register(
    AchievementDef("streak_3", "Triple", "Make 3 successful jumps in a row", "🔥"),
    AchievementDef("streak_5", "Hot Streak", "Make 5 successful jumps in a row", "🔥"),
    AchievementDef("streak_10", "Unstoppable", "Make 10 successful jumps in a row", "🚀"),
    AchievementDef("streak_20", "Legendary", "Make 20 successful jumps in a row", "👑"),
)

# ── Lifetime totals ──────────────────────────────────────────────
_register(
    AchievementDef("survivor", "Survivor", "Make 10 successful jumps total", "🏆"),
    AchievementDef("veteran", "Veteran", "Make 50 successful jumps total", "🎖️"),
    AchievementDef("master", "Master", "Make 100 successful jumps total", "🏅"),
    AchievementDef("grandmaster", "Grandmaster", "Make 500 successful jumps total", "👑"),
)

# ── Special ──────────────────────────────────────────────────────
_register(
    AchievementDef("lucky_one", "Lucky One", "Survive 5 explosions in a row", "🍀"),
    AchievementDef("risk_taker", "Risk Taker", "Jump 10 times in the last second", "🎲"),
    AchievementDef("conservative", "Conservative", "Jump 10 times after 7 seconds", "🛡️"),
    AchievementDef("perfectionist", "Perfectionist", "Get perfect timing 5 times in a row", "💎"),
)

# ── Milestones ───────────────────────────────────────────────────
_register(
    AchievementDef("milestone_100", "Century Club", "Play 100 games total", "💯"),
    AchievementDef("milestone_500", "Half Thousand Club", "Play 500 games total", "🎯"),
    AchievementDef("milestone_1000", "Thousand Club", "Play 1000 games total", "🏆"),
)
