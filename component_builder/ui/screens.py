"""Modal screens for the builder TUI."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from .models import FRAMEWORKS, STYLES


class OptionsMenuScreen(ModalScreen[tuple[str, str] | None]):
    """Framework / styling picker.

    Dismisses with ``("framework", name)`` or ``("styling", name)`` on the
    first selection, or None when closed with escape.
    """

    CSS = """
    OptionsMenuScreen {
        align: center middle;
        background: $background 70%;
    }

    #options-dialog {
        width: 40;
        height: auto;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    .options-heading {
        color: $text-muted;
        text-style: bold;
        margin-top: 1;
    }

    #options-dialog Button {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close", show=False),
    ]

    def __init__(self, framework: str, styling: str) -> None:
        super().__init__()
        self._framework = framework
        self._styling = styling

    def compose(self) -> ComposeResult:
        with Vertical(id="options-dialog"):
            yield Static("FRAMEWORK", classes="options-heading")
            for name in FRAMEWORKS:
                yield Button(
                    name,
                    id=f"framework-{name}",
                    variant="primary" if name == self._framework else "default",
                )
            yield Static("STYLE", classes="options-heading")
            for name in STYLES:
                yield Button(
                    name,
                    id=f"styling-{name}",
                    variant="primary" if name == self._styling else "default",
                )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        kind, _, name = (event.button.id or "").partition("-")
        if kind in ("framework", "styling") and name:
            self.dismiss((kind, name))

    def action_close(self) -> None:
        self.dismiss(None)
