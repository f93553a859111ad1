from pathlib import Path

from textual.widgets import Button, TextArea

from component_builder.ui.app import ComponentBuilderApp
from component_builder.ui.models import MAX_PROMPT_LENGTH, SUGGESTED_PROMPTS
from component_builder.ui.screens import OptionsMenuScreen


class StubChatClient:
    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.messages = []

    async def send(self, message: str) -> str:
        self.messages.append(message)
        return self.reply


class TestComponentBuilderApp:
    async def test_suggested_prompt_fills_input(self, tmp_path: Path) -> None:
        # Given
        app = ComponentBuilderApp(client=StubChatClient("x"), download_dir=tmp_path)

        async with app.run_test() as pilot:
            # When
            app.query_one("#prompt-1", Button).press()
            await pilot.pause()

            # Then
            assert app.builder.draft == SUGGESTED_PROMPTS[1]
            assert app.query_one("#prompt-input", TextArea).text == SUGGESTED_PROMPTS[1]
            assert not app.query_one("#generate-button", Button).disabled

    async def test_generate_renders_result(self, tmp_path: Path) -> None:
        # Given
        client = StubChatClient("```tsx\nexport default function Card() {}\n```")
        app = ComponentBuilderApp(client=client, download_dir=tmp_path)

        async with app.run_test() as pilot:
            assert app.query_one("#result").display is False
            app.builder.set_draft("a profile card")
            await pilot.pause()

            # When
            app.action_generate()
            await app.workers.wait_for_complete()
            await pilot.pause()

            # Then
            assert len(client.messages) == 1
            assert app.builder.latest.code == "export default function Card() {}"
            assert app.query_one("#result").display is True
            assert app.query_one("#prompt-input", TextArea).text == ""

            app.action_download()
            assert (tmp_path / "Component.tsx").read_text(encoding="utf-8") == (
                "export default function Card() {}"
            )

            app.action_clear()
            await pilot.pause()
            assert app.query_one("#result").display is False

    async def test_options_menu_updates_selection(self, tmp_path: Path) -> None:
        app = ComponentBuilderApp(client=StubChatClient("x"), download_dir=tmp_path)

        async with app.run_test() as pilot:
            app.action_options()
            await pilot.pause()
            assert isinstance(app.screen, OptionsMenuScreen)
            assert app.builder.menu_open

            app.screen.query_one("#framework-Svelte", Button).press()
            await pilot.pause()

            assert not isinstance(app.screen, OptionsMenuScreen)
            assert app.builder.framework == "Svelte"
            assert not app.builder.menu_open

    async def test_empty_draft_does_not_generate(self, tmp_path: Path) -> None:
        client = StubChatClient("x")
        app = ComponentBuilderApp(client=client, download_dir=tmp_path)

        async with app.run_test() as pilot:
            await pilot.press("ctrl+g")
            await pilot.pause()

            assert client.messages == []
            assert app.builder.latest is None

    async def test_mount_renders_initial_state(self, tmp_path: Path) -> None:
        app = ComponentBuilderApp(client=StubChatClient("x"), download_dir=tmp_path)

        async with app.run_test() as pilot:
            await pilot.pause()

            assert app.builder.char_count == 0
            assert app.query_one("#generate-button", Button).disabled
            assert app.query_one("#result").display is False

    async def test_typing_past_cap_reverts_input(self, tmp_path: Path) -> None:
        # Given
        app = ComponentBuilderApp(client=StubChatClient("x"), download_dir=tmp_path)

        async with app.run_test() as pilot:
            app.builder.set_draft("a" * MAX_PROMPT_LENGTH)
            await pilot.pause()
            text_area = app.query_one("#prompt-input", TextArea)
            assert text_area.text == "a" * MAX_PROMPT_LENGTH

            # When
            await pilot.press("b")
            await pilot.pause()

            # Then
            assert app.builder.draft == "a" * MAX_PROMPT_LENGTH
            assert text_area.text == "a" * MAX_PROMPT_LENGTH
            assert app.builder.char_count == MAX_PROMPT_LENGTH

    async def test_notification_closes_after_timeout(self, tmp_path: Path) -> None:
        # Given
        app = ComponentBuilderApp(client=StubChatClient("code"), download_dir=tmp_path)

        async with app.run_test() as pilot:
            app.builder.set_draft("a card")
            await pilot.pause()

            # When
            app.action_generate()
            await app.workers.wait_for_complete()
            await pilot.pause()
            notification = app.builder.notification
            assert notification.open is True

            await pilot.pause(notification.timeout + 0.5)

            # Then
            assert app.builder.notification.open is False
            assert app.builder.notification.message == "Component generated successfully!"
