"""Level progression — unlocks levels as the lifetime best score climbs."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from luckyjet.data.levels import ALL_LEVELS, Difficulty, LevelDef
from luckyjet.engine.events import EventBus, LevelUnlocked
from luckyjet.engine.store import PersistentStore, load_id_set, save_id_set

logger = logging.getLogger(__name__)

UNLOCKED_KEY = "unlockedLevels"


@dataclass(frozen=True)
class LevelView:
    """Read-model: a level definition plus its unlock flag."""

    definition: LevelDef
    unlocked: bool

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def title(self) -> str:
        return self.definition.title


class LevelProgression:
    """Owns the unlocked-level set.  Unlocks never revert."""

    def __init__(
        self,
        store: PersistentStore,
        events: EventBus,
        catalog: list[LevelDef] | None = None,
    ) -> None:
        self._store = store
        self._events = events
        self._catalog = list(catalog) if catalog is not None else list(ALL_LEVELS)
        known = {lv.id for lv in self._catalog}
        self._unlocked: set[str] = {
            lid for lid in load_id_set(store, UNLOCKED_KEY) if lid in known
        }
        # The entry level is always playable
        if self._catalog and self._catalog[0].id not in self._unlocked:
            self._unlocked.add(self._catalog[0].id)
            save_id_set(self._store, UNLOCKED_KEY, self._unlocked)

    @property
    def unlocked_ids(self) -> frozenset[str]:
        return frozenset(self._unlocked)

    def is_unlocked(self, level_id: str) -> bool:
        return level_id in self._unlocked

    def get(self, level_id: str) -> LevelDef | None:
        for lv in self._catalog:
            if lv.id == level_id:
                return lv
        return None

    def levels(self) -> list[LevelView]:
        return [LevelView(definition=lv, unlocked=lv.id in self._unlocked) for lv in self._catalog]

    def unlocked_by_difficulty(self) -> dict[Difficulty, int]:
        """How many levels of each tier are unlocked (every tier present)."""
        counts = {d: 0 for d in Difficulty}
        for lv in self._catalog:
            if lv.id in self._unlocked:
                counts[lv.difficulty] += 1
        return counts

    def check_level_unlocks(self, best_score: int) -> list[str]:
        """Unlock every level whose required score is met.  Returns new ids."""
        newly: list[str] = []
        for lv in self._catalog:
            if lv.id in self._unlocked or best_score < lv.required_score:
                continue
            self._unlocked.add(lv.id)
            save_id_set(self._store, UNLOCKED_KEY, self._unlocked)
            logger.info("Level unlocked: %s", lv.id)
            self._events.emit(LevelUnlocked(lv.id))
            newly.append(lv.id)
        return newly

    def max_unlocked_level(self) -> LevelDef | None:
        """Hardest unlocked level: highest tier, then highest required score."""
        unlocked = [lv for lv in self._catalog if lv.id in self._unlocked]
        if not unlocked:
            return None
        return max(unlocked, key=lambda lv: (lv.difficulty.value, lv.required_score))
