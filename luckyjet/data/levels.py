"""Level definitions — difficulty-tiered rounds unlocked by best score.

Harder tiers sample the explosion earlier and cap the flight sooner.  The
score needed to unlock a level is compared against the lifetime best single
round score, which tops out just under 200 (99 for flight + 100 survival
bonus), so thresholds climb steeply toward that ceiling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@total_ordering
class Difficulty(Enum):
    """Level tier.  Ordered: EASY < MEDIUM < HARD < EXPERT < MASTER."""

    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4
    MASTER = 5

    def __lt__(self, other: "Difficulty") -> bool:
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.value < other.value

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class LevelDef:
    """Definition of a single level (unlock state is tracked separately)."""

    id: str
    title: str
    description: str
    icon: str
    difficulty: Difficulty
    required_score: int
    # (min, max) seconds, explosion time is sampled uniformly from this range
    explosion_time_range: tuple[float, float]
    max_flight_time: float


ALL_LEVELS: list[LevelDef] = []


def _register(*levels: LevelDef) -> None:
    for lv in levels:
        lo, hi = lv.explosion_time_range
        if lo < 0 or lo > hi:
            raise ValueError(f"{lv.id}: invalid explosion range {lv.explosion_time_range}")
        ALL_LEVELS.append(lv)


def get_level(level_id: str) -> LevelDef | None:
    """Look up a level by id."""
    for lv in ALL_LEVELS:
        if lv.id == level_id:
            return lv
    return None


_register(
    # ── Easy ─────────────────────────────────────────────────────
    LevelDef("easy_1", "Easy 1", "First launch. Plenty of time.", "🌱",
             Difficulty.EASY, 0, (5.0, 10.0), 10.0),
    LevelDef("easy_2", "Easy 2", "The fuse is a little shorter.", "🌿",
             Difficulty.EASY, 25, (5.0, 9.5), 10.0),
    LevelDef("easy_3", "Easy 3", "Keep an eye on the gauge.", "🍀",
             Difficulty.EASY, 50, (4.5, 9.5), 10.0),
    LevelDef("easy_4", "Easy 4", "Last stop before the real sky.", "🌳",
             Difficulty.EASY, 75, (4.5, 9.0), 10.0),
    # ── Medium ───────────────────────────────────────────────────
    LevelDef("medium_1", "Medium 1", "The rocket gets restless.", "🌙",
             Difficulty.MEDIUM, 100, (4.0, 9.0), 9.5),
    LevelDef("medium_2", "Medium 2", "Engines run hotter.", "🌗",
             Difficulty.MEDIUM, 110, (4.0, 8.5), 9.5),
    LevelDef("medium_3", "Medium 3", "Less margin, same nerve.", "🌖",
             Difficulty.MEDIUM, 120, (3.5, 8.5), 9.5),
    LevelDef("medium_4", "Medium 4", "Half the crew already bailed.", "🌕",
             Difficulty.MEDIUM, 130, (3.5, 8.0), 9.5),
    # ── Hard ─────────────────────────────────────────────────────
    LevelDef("hard_1", "Hard 1", "Unstable fuel mix.", "🔥",
             Difficulty.HARD, 140, (3.0, 8.0), 9.0),
    LevelDef("hard_2", "Hard 2", "Warning lights everywhere.", "🧨",
             Difficulty.HARD, 150, (3.0, 7.5), 9.0),
    LevelDef("hard_3", "Hard 3", "The hull is groaning.", "☄️",
             Difficulty.HARD, 160, (2.5, 7.5), 9.0),
    LevelDef("hard_4", "Hard 4", "Don't blink.", "🌋",
             Difficulty.HARD, 170, (2.5, 7.0), 9.0),
    # ── Expert ───────────────────────────────────────────────────
    LevelDef("expert_1", "Expert 1", "Only veterans fly this one.", "⚡",
             Difficulty.EXPERT, 175, (2.0, 7.0), 8.5),
    LevelDef("expert_2", "Expert 2", "Every tenth of a second counts.", "🌪️",
             Difficulty.EXPERT, 180, (2.0, 6.5), 8.5),
    LevelDef("expert_3", "Expert 3", "The countdown lies.", "🛰️",
             Difficulty.EXPERT, 185, (1.5, 6.5), 8.5),
    LevelDef("expert_4", "Expert 4", "Nerves of steel required.", "🚨",
             Difficulty.EXPERT, 190, (1.5, 6.0), 8.5),
    # ── Master ───────────────────────────────────────────────────
    LevelDef("master_1", "Master 1", "A rocket held together by luck.", "👑",
             Difficulty.MASTER, 193, (1.0, 6.0), 8.0),
    LevelDef("master_2", "Master 2", "Launch and pray.", "💎",
             Difficulty.MASTER, 196, (1.0, 5.5), 8.0),
    LevelDef("master_3", "Master 3", "The final countdown.", "🌌",
             Difficulty.MASTER, 199, (0.5, 5.0), 8.0),
)
