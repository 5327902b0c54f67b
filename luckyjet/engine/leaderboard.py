"""Leaderboard — the persisted top-10 table."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import asdict, dataclass, field

from luckyjet.data.balance import BALANCE
from luckyjet.engine.store import PersistentStore, StoreError, decode_json, encode_json

logger = logging.getLogger(__name__)

HIGH_SCORES_KEY = "highScores"


@dataclass(frozen=True)
class HighScoreEntry:
    player_name: str
    score: int
    flight_time: float
    level_title: str
    timestamp: float = field(default_factory=time.time)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


def _entry_from_dict(d: dict) -> HighScoreEntry:
    return HighScoreEntry(
        player_name=str(d["player_name"]),
        score=max(0, int(d["score"])),
        flight_time=max(0.0, float(d.get("flight_time", 0.0))),
        level_title=str(d.get("level_title", "")),
        timestamp=float(d.get("timestamp", 0.0)),
        id=str(d.get("id") or uuid.uuid4().hex),
    )


class Leaderboard:
    """Sorted (descending by score), bounded list of high scores."""

    def __init__(self, store: PersistentStore, max_entries: int | None = None) -> None:
        self._store = store
        self._max_entries = max_entries if max_entries is not None else BALANCE.leaderboard.max_entries
        self._entries: list[HighScoreEntry] = self._load()

    def entries(self) -> list[HighScoreEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_top_ten(self, score: int) -> bool:
        """Would ``score`` make it onto the board?"""
        if len(self._entries) < self._max_entries:
            return True
        return score > self._entries[-1].score

    def add_entry(
        self,
        player_name: str,
        score: int,
        flight_time: float,
        level_title: str,
    ) -> HighScoreEntry | None:
        """Record a score.  Returns None (and changes nothing) for a blank name."""
        name = player_name.strip()
        if not name:
            logger.info("Rejected high score %d: empty player name", score)
            return None

        entry = HighScoreEntry(
            player_name=name,
            score=max(0, int(score)),
            flight_time=max(0.0, float(flight_time)),
            level_title=level_title,
        )
        entries = self._entries + [entry]
        entries.sort(key=lambda e: e.score, reverse=True)
        self._entries = entries[: self._max_entries]
        self._save()
        return entry

    def clear(self) -> None:
        self._entries = []
        self._save()

    # ── Summary (high-score screen header) ───────────────────────

    def best_score(self) -> int:
        return self._entries[0].score if self._entries else 0

    def average_score(self) -> int:
        if not self._entries:
            return 0
        return sum(e.score for e in self._entries) // len(self._entries)

    # ── Persistence ──────────────────────────────────────────────

    def _save(self) -> None:
        try:
            self._store.set_blob(HIGH_SCORES_KEY, encode_json([asdict(e) for e in self._entries]))
            self._store.synchronize()
        except (StoreError, TypeError, ValueError) as e:
            logger.warning("Could not persist high scores: %s", e)

    def _load(self) -> list[HighScoreEntry]:
        data = decode_json(self._store.get_blob(HIGH_SCORES_KEY))
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Ignoring malformed %s blob", HIGH_SCORES_KEY)
            return []

        entries: list[HighScoreEntry] = []
        for item in data:
            try:
                entries.append(_entry_from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping unreadable high score %r: %s", item, e)
        entries.sort(key=lambda e: e.score, reverse=True)
        return entries[: self._max_entries]
