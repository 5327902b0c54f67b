"""Flight display widget — the rocket, the altitude gauge and round results."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from luckyjet.data.balance import BALANCE
from luckyjet.engine.game_state import Phase, SessionState


ROCKET = [
    "     /\\     ",
    "    /  \\    ",
    "   | 👨‍🚀 |   ",
    "   |    |   ",
    "  /|____|\\  ",
    "    /\\/\\    ",
]

EXPLOSION = [
    "   \\  |  /   ",
    "  -- 💥💥 --  ",
    "   /  |  \\   ",
]

PARACHUTE = [
    "   .-\"\"-.   ",
    "  /      \\  ",
    "  \\  🪂  /  ",
    "    \\  /    ",
]

_GAUGE_WIDTH = 30


class FlightDisplay(Widget):
    """Renders the current round from a :class:`SessionState` snapshot."""

    DEFAULT_CSS = """
    FlightDisplay {
        width: 100%;
        height: 100%;
        content-align: center middle;
        padding: 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state: SessionState | None = None
        self._success = False

    def render(self) -> Text:
        text = Text(justify="center")
        state = self._state
        if state is None or state.game_state in (Phase.MENU, Phase.LEVEL_SELECTION):
            text.append("\n🚀 LUCKY JET 🚀\n\n", style="bold cyan")
            text.append("Jump before the rocket explodes.\n", style="dim")
            text.append("Wait longer for more points.\n\n", style="dim")
            text.append("[space] launch   [l] levels   [a] achievements   [h] high scores\n", style="bold")
            return text

        level = state.current_level
        title = level.title if level is not None else "Classic"
        text.append(f"── {title} ──\n\n", style="bold magenta")

        if state.game_state == Phase.PLAYING:
            for line in ROCKET:
                text.append(line + "\n", style="bold white")
            text.append("\n")
            text.append(self._gauge(state), style="cyan")
            text.append(f"\n\n  {state.flight_time:.1f}s\n", style="bold yellow")
            text.append("\n[space] JUMP!\n", style="bold green blink")
            return text

        # Game over
        art = PARACHUTE if self._success else EXPLOSION
        for line in art:
            text.append(line + "\n", style="bold white")
        if self._success:
            text.append("\n🎉 Saved! Astronaut saved!\n", style="bold green")
        else:
            text.append("\n💥 Exploded! Rocket exploded!\n", style="bold red")
        text.append(f"\nScore: {state.score}\n", style="bold yellow")
        text.append(f"Flight time: {state.flight_time:.1f}s\n", style="yellow")
        text.append(f"Explosion was at {state.explosion_time:.1f}s\n\n", style="dim")
        text.append("[space] play again   [m] main menu\n", style="bold")
        return text

    def _gauge(self, state: SessionState) -> str:
        cap = state.max_flight_time or BALANCE.flight.default_max_flight_time
        filled = int(_GAUGE_WIDTH * min(1.0, state.flight_time / cap))
        return "[" + "█" * filled + "·" * (_GAUGE_WIDTH - filled) + "]"

    def update_from_state(self, state: SessionState, success: bool) -> None:
        self._state = state
        self._success = success
        self.refresh()
