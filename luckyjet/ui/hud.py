"""HUD widget — lifetime stats and progress counters."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from luckyjet.engine.session import GameEngine


class HUD(Widget):
    """Side panel showing lifetime statistics."""

    DEFAULT_CSS = """
    HUD {
        width: 34;
        height: 100%;
        padding: 1;
        border-left: solid $primary;
    }
    """

    total_games: reactive[int] = reactive(0)
    best_score: reactive[int] = reactive(0)
    longest_flight: reactive[float] = reactive(0.0)
    total_jumps: reactive[int] = reactive(0)
    explosions: reactive[int] = reactive(0)
    streak: reactive[int] = reactive(0)
    achievements: reactive[str] = reactive("0/0")
    levels: reactive[str] = reactive("0/0")
    current_level: reactive[str] = reactive("Classic")

    def render(self) -> Text:
        text = Text()
        text.append("  === 📊 Statistics ===\n\n", style="bold cyan")

        rows = [
            ("Total Games", str(self.total_games), "green"),
            ("Best Score", str(self.best_score), "bold yellow"),
            ("Longest Flight", f"{self.longest_flight:.1f}s", "yellow"),
            ("Jumps", str(self.total_jumps), "green"),
            ("Explosions", str(self.explosions), "red"),
            ("Success Streak", str(self.streak), "magenta"),
        ]
        for label, value, style in rows:
            text.append(f"  {label}: ", style="dim")
            text.append(f"{value}\n", style=style)

        text.append("\n")
        text.append("  Achievements: ", style="dim")
        text.append(f"{self.achievements}\n", style="bold magenta")
        text.append("  Levels: ", style="dim")
        text.append(f"{self.levels}\n", style="bold blue")
        text.append("  Next launch: ", style="dim")
        text.append(f"{self.current_level}\n", style="blue")
        return text

    def update_from_engine(self, engine: GameEngine) -> None:
        stats = engine.stats
        self.total_games = stats.total_games
        self.best_score = stats.best_score
        self.longest_flight = stats.longest_flight
        self.total_jumps = stats.total_jumps
        self.explosions = stats.total_explosions
        self.streak = stats.consecutive_successful_jumps

        unlocked, total = engine.achievements.progress()
        self.achievements = f"{unlocked}/{total}"
        self.levels = f"{len(engine.levels.unlocked_ids)}/{len(engine.levels.levels())}"
        level = engine.levels.max_unlocked_level()
        self.current_level = level.title if level is not None else "Classic"
