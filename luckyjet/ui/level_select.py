"""Level selection screen — pick an unlocked level to launch."""

from __future__ import annotations

from rich.text import Text
from textual.screen import Screen
from textual.widgets import Static, Footer
from textual.containers import Vertical
from textual.binding import Binding

from luckyjet.data.levels import Difficulty, LevelDef
from luckyjet.engine.progression import LevelProgression


_TIER_STYLES = {
    Difficulty.EASY: "green",
    Difficulty.MEDIUM: "yellow",
    Difficulty.HARD: "dark_orange",
    Difficulty.EXPERT: "magenta",
    Difficulty.MASTER: "bright_magenta",
}


class LevelSelectionScreen(Screen[LevelDef | None]):
    """Dismisses with the chosen level, or None when backed out."""

    BINDINGS = [
        Binding("escape", "cancel", "Back"),
        Binding("up", "move(-1)", "Up", show=False),
        Binding("down", "move(1)", "Down", show=False),
        Binding("enter", "choose", "Launch"),
        Binding("space", "choose", "Launch", show=False),
    ]

    DEFAULT_CSS = """
    LevelSelectionScreen {
        background: $surface;
        padding: 1 4;
    }

    #level-list {
        height: 100%;
        overflow-y: auto;
    }
    """

    def __init__(self, progression: LevelProgression, **kwargs) -> None:
        super().__init__(**kwargs)
        self._progression = progression
        self._cursor = 0

    def compose(self):
        with Vertical(id="level-list"):
            yield Static(id="level-rows")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_display()

    def action_move(self, delta: int) -> None:
        count = len(self._progression.levels())
        self._cursor = (self._cursor + delta) % count
        self._refresh_display()

    def action_choose(self) -> None:
        view = self._progression.levels()[self._cursor]
        if not view.unlocked:
            self.app.notify(
                f"🔒 Reach a best score of {view.definition.required_score} to unlock.",
                severity="error",
                timeout=2,
            )
            return
        self.dismiss(view.definition)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _refresh_display(self) -> None:
        self.query_one("#level-rows", Static).update(self._render_levels())

    def _render_levels(self) -> Text:
        views = self._progression.levels()
        counts = self._progression.unlocked_by_difficulty()
        unlocked = sum(counts.values())

        text = Text()
        text.append("  🎮 Levels\n\n", style="bold cyan")
        text.append(f"  Progress: {unlocked} / {len(views)}\n  ", style="bold")
        for tier in Difficulty:
            text.append(f"{tier.label}: {counts[tier]}  ", style=_TIER_STYLES[tier])
        text.append("\n\n")

        for i, view in enumerate(views):
            lv = view.definition
            pointer = "▶" if i == self._cursor else " "
            style = _TIER_STYLES[lv.difficulty] if view.unlocked else "dim"
            icon = lv.icon if view.unlocked else "🔒"
            text.append(f" {pointer} {icon} {lv.title:<10}", style=f"bold {style}")
            text.append(f" {lv.difficulty.label:<7} score {lv.required_score:>3}", style=style)
            text.append(f"  {lv.description}\n", style="dim")
        return text
