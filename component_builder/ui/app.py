"""Main Textual TUI application.

Renders the ComponentBuilder state and routes user input to it.
"""

from pathlib import Path

from rich.syntax import Syntax
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Static, TextArea

from ..core.config import settings, setup_file_logging
from .builder import ChatSender, ComponentBuilder
from .client import ChatClient
from .models import MAX_PROMPT_LENGTH, SUGGESTED_PROMPTS, Notification
from .screens import OptionsMenuScreen
from .styles import APP_CSS


class ComponentBuilderApp(App):
    """Textual TUI for describing and generating UI components."""

    CSS = APP_CSS
    TITLE = "Component Builder"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+enter,ctrl+g", "generate", "Generate", priority=True),
        Binding("ctrl+o", "options", "Options"),
        Binding("ctrl+y", "copy", "Copy"),
        Binding("ctrl+s", "download", "Download"),
        Binding("ctrl+k", "clear", "Clear"),
        Binding("escape", "discard_pending", "Cancel"),
    ]

    def __init__(
        self,
        client: ChatSender | None = None,
        download_dir: Path | None = None,
    ) -> None:
        super().__init__()
        self._client = client or ChatClient(
            settings.PROXY_BASE_URL, timeout=settings.COMPLETION_TIMEOUT
        )
        self._download_dir = download_dir or settings.DOWNLOAD_DIR
        self._builder = ComponentBuilder(
            self._client,
            on_change=self._refresh_view,
            on_notify=self._show_notification,
        )
        self._view_ready = False
        self._rendered_result_id: int | None = None

    @property
    def builder(self) -> ComponentBuilder:
        return self._builder

    def compose(self) -> ComposeResult:
        yield Header()

        with VerticalScroll(id="main"):
            yield Static("Hi there, [b]User![/b]", id="greeting")
            yield Static("What would you like to build?", id="headline")
            yield Static(
                "Use one of the most common prompts below or use your own to begin",
                id="hint",
            )

            with Horizontal(id="prompt-cards"):
                for idx, prompt in enumerate(SUGGESTED_PROMPTS):
                    yield Button(prompt, id=f"prompt-{idx}", classes="prompt-card")

            with Vertical(id="composer"):
                yield TextArea(id="prompt-input", soft_wrap=True)
                with Horizontal(id="toolbar"):
                    yield Button(self._options_label(), id="options-button")
                    yield Static(f"0/{MAX_PROMPT_LENGTH}", id="char-count")
                    yield Button("→", id="generate-button", variant="primary", disabled=True)

            with Vertical(id="result"):
                with Horizontal(id="result-header"):
                    with Vertical(id="result-meta"):
                        yield Static("", id="result-description")
                        yield Static("", id="result-details")
                    yield Button("Copy", id="copy-button")
                    yield Button("Download", id="download-button")
                yield Static("", id="result-code")
                with Horizontal(id="result-footer"):
                    yield Button("Clear", id="clear-button")

        yield Footer()

    def on_mount(self) -> None:
        self._view_ready = True
        self._refresh_view()
        self.query_one("#prompt-input", TextArea).focus()

    def _options_label(self) -> str:
        return f"{self._builder.framework} / {self._builder.styling}"

    def _refresh_view(self) -> None:
        """Sync every widget with the builder state."""
        if not self._view_ready:
            return
        builder = self._builder

        text_area = self.query_one("#prompt-input", TextArea)
        if text_area.text != builder.draft:
            text_area.text = builder.draft
            text_area.move_cursor(text_area.document.end)
        text_area.disabled = builder.is_generating

        self.query_one("#char-count", Static).update(
            f"{builder.char_count}/{MAX_PROMPT_LENGTH}"
        )
        self.query_one("#options-button", Button).label = self._options_label()

        generate_button = self.query_one("#generate-button", Button)
        generate_button.disabled = not builder.can_generate
        generate_button.label = "…" if builder.is_generating else "→"

        result = self.query_one("#result", Vertical)
        latest = builder.latest
        result.display = latest is not None
        if latest is None:
            self._rendered_result_id = None
            return
        if latest.id == self._rendered_result_id:
            return

        self._rendered_result_id = latest.id
        self.query_one("#result-description", Static).update(latest.description)
        self.query_one("#result-details", Static).update(
            f"{latest.framework} • {latest.styling} • {latest.timestamp}"
        )
        self.query_one("#result-code", Static).update(
            Syntax(latest.code, latest.extension, word_wrap=True)
        )
        result.scroll_visible()

    def _show_notification(self, notification: Notification) -> None:
        self.notify(notification.message, timeout=notification.timeout)
        self.set_timer(
            notification.timeout,
            lambda: self._builder.dismiss_notification(notification),
        )

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id != "prompt-input":
            return
        if not self._builder.set_draft(event.text_area.text):
            # over the length cap: put the accepted draft back
            self._refresh_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("prompt-"):
            index = int(button_id[len("prompt-"):])
            self._builder.use_prompt(SUGGESTED_PROMPTS[index])
            self.query_one("#prompt-input", TextArea).focus()
        elif button_id == "generate-button":
            self.action_generate()
        elif button_id == "options-button":
            self.action_options()
        elif button_id == "copy-button":
            self.action_copy()
        elif button_id == "download-button":
            self.action_download()
        elif button_id == "clear-button":
            self.action_clear()

    def action_generate(self) -> None:
        """Start a generation from the current draft."""
        if self._builder.can_generate:
            self._run_generation()

    @work(group="generation")
    async def _run_generation(self) -> None:
        await self._builder.generate()

    def action_discard_pending(self) -> None:
        """Drop the in-flight generation."""
        self._builder.discard_pending()

    def action_options(self) -> None:
        """Open the framework / styling menu."""
        self._builder.open_menu()
        self.push_screen(
            OptionsMenuScreen(self._builder.framework, self._builder.styling),
            self._on_menu_closed,
        )

    def _on_menu_closed(self, choice: tuple[str, str] | None) -> None:
        if choice is None:
            self._builder.close_menu()
            return
        kind, name = choice
        if kind == "framework":
            self._builder.select_framework(name)
        else:
            self._builder.select_styling(name)

    def action_copy(self) -> None:
        """Copy the generated code to the clipboard."""
        if not self._builder.copy_result(self.copy_to_clipboard):
            if not self._builder.has_result:
                self.notify("Nothing to copy", severity="warning", timeout=2)

    def action_download(self) -> None:
        """Save the generated code next to the working directory."""
        if not self._builder.has_result:
            self.notify("Nothing to download", severity="warning", timeout=2)
            return
        self._builder.download_result(self._download_dir)

    def action_clear(self) -> None:
        """Clear the result panel."""
        self._builder.clear_result()


def run() -> None:
    setup_file_logging(settings.UI_LOG_FILE)
    ComponentBuilderApp().run()
