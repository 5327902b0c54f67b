"""Name prompt — asks for a player name when a round makes the top 10."""

from __future__ import annotations

from textual.screen import ModalScreen
from textual.widgets import Input, Static
from textual.containers import Vertical
from textual.binding import Binding


class NamePromptScreen(ModalScreen[str | None]):
    """Dismisses with the typed name, or None when skipped."""

    BINDINGS = [
        Binding("escape", "skip", "Skip"),
    ]

    DEFAULT_CSS = """
    NamePromptScreen {
        align: center middle;
    }

    #prompt-box {
        width: 50;
        height: auto;
        padding: 1 2;
        border: thick $warning;
        background: $surface;
    }

    #prompt-error {
        color: $error;
        height: auto;
    }
    """

    def __init__(self, score: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self._score = score

    def compose(self):
        with Vertical(id="prompt-box"):
            yield Static(f"🏆 New Top 10 score: {self._score}!\nEnter your name:")
            yield Input(placeholder="Player Name", max_length=24, id="prompt-input")
            yield Static("", id="prompt-error")

    def on_mount(self) -> None:
        self.query_one("#prompt-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not event.value.strip():
            self.show_error("Please enter your name")
            return
        self.dismiss(event.value)

    def show_error(self, message: str) -> None:
        self.query_one("#prompt-error", Static).update(message)

    def action_skip(self) -> None:
        self.dismiss(None)
