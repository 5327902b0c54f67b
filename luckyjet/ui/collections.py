"""Collections UI — Achievements and High Scores."""

from __future__ import annotations

import time

from rich.text import Text
from textual.screen import Screen
from textual.widgets import Static, Header, Footer
from textual.containers import Vertical
from textual.binding import Binding

from luckyjet.engine.achievements import AchievementEngine
from luckyjet.engine.leaderboard import Leaderboard


_COLLECTION_CSS = """
    #collections-container {
        padding: 2;
        height: 100%;
        overflow-y: auto;
    }

    .collection-item {
        padding: 0 2;
    }
"""


class AchievementsScreen(Screen):
    """Screen listing every achievement, locked ones greyed out."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("q", "back", "Back"),
    ]

    DEFAULT_CSS = "AchievementsScreen { background: $surface; }" + _COLLECTION_CSS

    def __init__(self, achievements: AchievementEngine, **kwargs) -> None:
        super().__init__(**kwargs)
        self._achievements = achievements

    def action_back(self) -> None:
        self.app.pop_screen()

    def compose(self):
        yield Header()
        with Vertical(id="collections-container"):
            yield Static(self._render_achievements(), classes="collection-item")
        yield Footer()

    def _render_achievements(self) -> Text:
        text = Text()
        unlocked, total = self._achievements.progress()
        text.append(f"\n  ═══ 🏆 Achievements ({unlocked}/{total}) ═══\n\n", style="bold magenta")

        for view in self._achievements.achievements():
            a = view.definition
            if view.unlocked:
                text.append(f"  {a.icon} {a.title}\n", style="bold green")
                text.append(f"    {a.description}\n\n", style="dim")
            else:
                text.append(f"  🔒 {a.title}\n", style="dim")
                text.append(f"    {a.description}\n\n", style="dim italic")
        return text


class HighScoresScreen(Screen):
    """Top-10 table with the summary header (records / best / average)."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("q", "back", "Back"),
    ]

    DEFAULT_CSS = "HighScoresScreen { background: $surface; }" + _COLLECTION_CSS

    _RANK_ICONS = {1: "🥇", 2: "🥈", 3: "🥉"}

    def __init__(self, leaderboard: Leaderboard, **kwargs) -> None:
        super().__init__(**kwargs)
        self._leaderboard = leaderboard

    def action_back(self) -> None:
        self.app.pop_screen()

    def compose(self):
        yield Header()
        with Vertical(id="collections-container"):
            yield Static(self._render_scores(), classes="collection-item")
        yield Footer()

    def _render_scores(self) -> Text:
        lb = self._leaderboard
        text = Text()
        text.append("\n  ═══ 🏆 High Scores ═══\n\n", style="bold yellow")
        text.append(
            f"  Records: {len(lb)}   Best: {lb.best_score()}   Average: {lb.average_score()}\n\n",
            style="cyan",
        )

        entries = lb.entries()
        if not entries:
            text.append("  🎯 No High Scores Yet\n", style="bold")
            text.append("  Play the game and achieve great scores to appear here!\n", style="dim")
            return text

        for rank, entry in enumerate(entries, start=1):
            icon = self._RANK_ICONS.get(rank, f"#{rank}")
            when = time.strftime("%Y-%m-%d %H:%M", time.localtime(entry.timestamp))
            text.append(f"  {icon:>3} ", style="bold")
            text.append(f"{entry.player_name:<16}", style="bold white")
            text.append(f"{entry.score:>6}", style="bold yellow")
            text.append(f"  {entry.flight_time:4.1f}s", style="yellow")
            text.append(f"  {entry.level_title:<10} {when}\n", style="dim")
        return text
