"""Tests for the top-10 leaderboard."""

import pytest

from luckyjet.engine.leaderboard import HIGH_SCORES_KEY, Leaderboard
from luckyjet.engine.store import decode_json, encode_json


@pytest.fixture()
def board(store) -> Leaderboard:
    return Leaderboard(store)


def test_empty_board_accepts_any_score(board):
    assert board.is_top_ten(1)
    assert board.is_top_ten(0)


def test_add_entry_trims_name(board):
    entry = board.add_entry("  Neil  ", 120, 9.2, "Easy 1")
    assert entry is not None
    assert entry.player_name == "Neil"
    assert board.entries() == [entry]


def test_blank_name_is_rejected(board, store):
    assert board.add_entry("", 500, 3.0, "Easy 1") is None
    assert board.add_entry("   ", 500, 3.0, "Easy 1") is None
    assert board.entries() == []
    assert store.get_blob(HIGH_SCORES_KEY) is None


def test_board_is_sorted_and_bounded(board):
    scores = [40, 190, 5, 77, 120, 60, 90, 150, 33, 12, 101, 88]
    for i, score in enumerate(scores):
        board.add_entry(f"p{i}", score, score / 10, "Easy 1")

    entries = board.entries()
    assert len(entries) == 10
    assert [e.score for e in entries] == sorted(scores, reverse=True)[:10]


def test_is_top_ten_when_full(board):
    for score in range(10, 110, 10):
        board.add_entry("p", score, 1.0, "Easy 1")
    assert not board.is_top_ten(10)
    assert not board.is_top_ten(5)
    assert board.is_top_ten(11)


def test_low_score_falls_off_full_board(board):
    for score in range(10, 110, 10):
        board.add_entry("p", score, 1.0, "Easy 1")
    board.add_entry("late", 1, 0.1, "Easy 1")
    assert len(board) == 10
    assert all(e.player_name != "late" for e in board.entries())


def test_equal_scores_keep_insertion_order(board):
    a = board.add_entry("first", 50, 5.0, "Easy 1")
    b = board.add_entry("second", 50, 5.0, "Easy 1")
    assert [e.id for e in board.entries()] == [a.id, b.id]


def test_entries_survive_reload(board, store):
    board.add_entry("Ada", 80, 8.0, "Easy 2")
    board.add_entry("Bob", 150, 9.1, "Medium 1")

    reloaded = Leaderboard(store)

    assert [(e.player_name, e.score, e.flight_time, e.level_title) for e in reloaded.entries()] == [
        ("Bob", 150, 9.1, "Medium 1"),
        ("Ada", 80, 8.0, "Easy 2"),
    ]
    assert [e.id for e in reloaded.entries()] == [e.id for e in board.entries()]


def test_persisted_blob_is_truncated(board, store):
    for i in range(12):
        board.add_entry(f"p{i}", i, 1.0, "Easy 1")
    assert len(decode_json(store.get_blob(HIGH_SCORES_KEY))) == 10


def test_corrupt_entries_are_skipped(store):
    store.set_blob(
        HIGH_SCORES_KEY,
        encode_json([{"player_name": "ok", "score": 10}, {"score": "lots"}]),
    )
    board = Leaderboard(store)
    assert [e.player_name for e in board.entries()] == ["ok"]


def test_summary(board):
    assert board.best_score() == 0
    assert board.average_score() == 0
    board.add_entry("a", 100, 1.0, "Easy 1")
    board.add_entry("b", 51, 1.0, "Easy 1")
    assert board.best_score() == 100
    assert board.average_score() == 75


def test_clear(board, store):
    board.add_entry("a", 100, 1.0, "Easy 1")
    board.clear()
    assert board.entries() == []
    assert Leaderboard(store).entries() == []
