"""LuckyJet — Main Textual Application.

Wires the game engine to the terminal UI.  The engine's round ticks are
driven by a textual interval timer; a second, faster timer drains engine
events into notifications and repaints the widgets.
"""

from __future__ import annotations

from typing import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Header, Footer
from textual.timer import Timer

from luckyjet.data.achievements import ALL_ACHIEVEMENTS
from luckyjet.data.levels import LevelDef
from luckyjet.engine.events import AchievementUnlocked, GameEvent, LevelUnlocked, RoundEnded, RoundOutcome
from luckyjet.engine.game_state import Phase
from luckyjet.engine.session import GameEngine

from luckyjet.ui.collections import AchievementsScreen, HighScoresScreen
from luckyjet.ui.flight_display import FlightDisplay
from luckyjet.ui.hud import HUD
from luckyjet.ui.level_select import LevelSelectionScreen
from luckyjet.ui.name_prompt import NamePromptScreen


class TextualTickDriver:
    """Tick driver backed by ``App.set_interval``."""

    def __init__(self, app: App) -> None:
        self._app = app
        self._timer: Timer | None = None

    def start(self, callback: Callable[[], None], interval: float) -> None:
        self.stop()
        self._timer = self._app.set_interval(interval, callback)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None


class LuckyJetApp(App):
    """The LuckyJet TUI game application."""

    TITLE = "LuckyJet"
    SUB_TITLE = "Jump before it blows."

    BINDINGS = [
        Binding("space", "launch_or_jump", "Launch / Jump", show=True),
        Binding("l", "select_level", "Levels", show=True),
        Binding("a", "show_achievements", "Achievements", show=True),
        Binding("h", "show_high_scores", "High Scores", show=True),
        Binding("m", "main_menu", "Menu", show=True),
        Binding("ctrl+r", "reset_statistics", "Reset Stats", show=False),
        Binding("q", "quit_game", "Quit", show=True),
    ]

    # UI refresh rate, independent of the engine tick period
    _UI_REFRESH_HZ: float = 30.0

    def __init__(self, engine_factory: Callable[[TextualTickDriver], GameEngine]) -> None:
        super().__init__()
        self._driver = TextualTickDriver(self)
        self._engine: GameEngine = engine_factory(self._driver)
        self._ui_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="game-container"):
            yield FlightDisplay(id="flight-display")
            yield HUD(id="hud-panel")
        yield Footer()

    def on_mount(self) -> None:
        self._ui_timer = self.set_interval(1.0 / self._UI_REFRESH_HZ, self._sync_ui)
        self._sync_ui()

    # ── Event handling ───────────────────────────────────

    def _sync_ui(self) -> None:
        """Drain engine events and push state to the widgets."""
        for event in self._engine.events.drain():
            self._handle_event(event)

        display = self.query_one("#flight-display", FlightDisplay)
        display.update_from_state(self._engine.state, self._engine.is_success)
        self.query_one("#hud-panel", HUD).update_from_engine(self._engine)

    def _handle_event(self, event: GameEvent) -> None:
        if isinstance(event, AchievementUnlocked):
            a = ALL_ACHIEVEMENTS.get(event.achievement_id)
            if a is not None:
                self.notify(f"{a.icon} Achievement unlocked: {a.title}", severity="warning", timeout=3)
        elif isinstance(event, LevelUnlocked):
            level = self._engine.levels.get(event.level_id)
            if level is not None:
                self.notify(f"🔓 New level: {level.title}", severity="information", timeout=3)
        elif isinstance(event, RoundEnded):
            if event.outcome == RoundOutcome.EXPLODED:
                self.notify("💥 The rocket exploded!", severity="error", timeout=2)
            if event.score > 0 and self._engine.can_save_score():
                self._prompt_for_name()

    def _prompt_for_name(self) -> None:
        self.push_screen(NamePromptScreen(self._engine.state.score), self._on_name_entered)

    def _on_name_entered(self, name: str | None) -> None:
        if name is None:
            return
        if self._engine.save_high_score(name) is None:
            self.notify("Please enter your name", severity="error", timeout=2)
            self._prompt_for_name()
            return
        self.notify("🏆 Score saved!", severity="information", timeout=2)

    # ── Actions ──────────────────────────────────────

    def action_launch_or_jump(self) -> None:
        phase = self._engine.state.game_state
        if phase == Phase.PLAYING:
            self._engine.jump()
        else:
            self._engine.start_game()
        self._sync_ui()

    def action_select_level(self) -> None:
        if self._engine.state.game_state == Phase.GAME_OVER:
            self._engine.reset_game()
        self._engine.open_level_selection()
        if self._engine.state.game_state != Phase.LEVEL_SELECTION:
            return
        self.push_screen(LevelSelectionScreen(self._engine.levels), self._on_level_chosen)

    def _on_level_chosen(self, level: LevelDef | None) -> None:
        if level is None:
            self._engine.close_level_selection()
        else:
            self._engine.start_level(level)
        self._sync_ui()

    def action_show_achievements(self) -> None:
        self.push_screen(AchievementsScreen(self._engine.achievements))

    def action_show_high_scores(self) -> None:
        self.push_screen(HighScoresScreen(self._engine.leaderboard))

    def action_main_menu(self) -> None:
        self._engine.reset_game()
        self._sync_ui()

    def action_reset_statistics(self) -> None:
        self._engine.reset_statistics()
        self.notify("Statistics reset.", severity="information", timeout=2)

    def action_quit_game(self) -> None:
        self._driver.stop()
        self.exit()
