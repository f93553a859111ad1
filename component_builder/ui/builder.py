"""UI state for the component builder.

Owns the draft prompt, the framework/styling selection, the latest result
and the current notification. Front ends call the operations below and
re-render from the properties when a change callback fires.

Only one generation runs at a time. Every generation gets a sequence
number; a response that arrives after ``discard_pending`` (or after a newer
generation started) is dropped rather than applied.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

from .models import (
    DEFAULT_FRAMEWORK,
    DEFAULT_STYLING,
    FRAMEWORKS,
    MAX_PROMPT_LENGTH,
    STYLES,
    GeneratedComponent,
    GenerationRequest,
    Notification,
)
from .prompts import build_instruction, strip_code_fences

logger = logging.getLogger("component_builder.ui")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ChatSender(Protocol):
    async def send(self, message: str) -> str: ...


class BuilderStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"


class ComponentBuilder:
    """State machine behind the builder screen."""

    def __init__(
        self,
        client: ChatSender,
        on_change: Callable[[], None] | None = None,
        on_notify: Callable[[Notification], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._client = client
        self._on_change = on_change
        self._on_notify = on_notify
        self._clock = clock

        self._draft = ""
        self._framework = DEFAULT_FRAMEWORK
        self._styling = DEFAULT_STYLING
        self._latest: GeneratedComponent | None = None
        self._status = BuilderStatus.IDLE
        self._notification: Notification | None = None
        self._menu_open = False
        self._sequence = 0

    # -- state -------------------------------------------------------------

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def char_count(self) -> int:
        return len(self._draft)

    @property
    def framework(self) -> str:
        return self._framework

    @property
    def styling(self) -> str:
        return self._styling

    @property
    def latest(self) -> GeneratedComponent | None:
        return self._latest

    @property
    def has_result(self) -> bool:
        return self._latest is not None

    @property
    def status(self) -> BuilderStatus:
        return self._status

    @property
    def is_generating(self) -> bool:
        return self._status is BuilderStatus.GENERATING

    @property
    def can_generate(self) -> bool:
        return bool(self._draft.strip()) and not self.is_generating

    @property
    def notification(self) -> Notification | None:
        return self._notification

    @property
    def menu_open(self) -> bool:
        return self._menu_open

    # -- input -------------------------------------------------------------

    def set_draft(self, value: str) -> bool:
        """Replace the draft. Values over the length cap are rejected."""
        if len(value) > MAX_PROMPT_LENGTH:
            return False
        if value != self._draft:
            self._draft = value
            self._changed()
        return True

    def use_prompt(self, prompt: str) -> None:
        self.set_draft(prompt)

    def open_menu(self) -> None:
        self._menu_open = True
        self._changed()

    def close_menu(self) -> None:
        self._menu_open = False
        self._changed()

    def select_framework(self, framework: str) -> None:
        if framework not in FRAMEWORKS:
            raise ValueError(f"Unknown framework: {framework}")
        self._framework = framework
        self.close_menu()

    def select_styling(self, styling: str) -> None:
        if styling not in STYLES:
            raise ValueError(f"Unknown styling: {styling}")
        self._styling = styling
        self.close_menu()

    # -- generation --------------------------------------------------------

    async def generate(self) -> GeneratedComponent | None:
        """Run one generation from the current draft.

        Returns the new component, or None when nothing was triggered, the
        call failed, or the response was discarded as stale.
        """
        if self.is_generating:
            return None
        description = self._draft.strip()
        if not description:
            return None

        request = GenerationRequest(
            description=description,
            framework=self._framework,
            styling=self._styling,
        )
        self._sequence += 1
        sequence = self._sequence
        self._draft = ""
        self._status = BuilderStatus.GENERATING
        self._changed()

        try:
            raw = await self._client.send(build_instruction(request))
            code = strip_code_fences(raw)
        except asyncio.CancelledError:
            if sequence == self._sequence:
                self._status = BuilderStatus.IDLE
                self._changed()
            raise
        except Exception as e:
            logger.error(f"Generation failed: {e}")
            if sequence == self._sequence:
                self._status = BuilderStatus.IDLE
                self._notify("Failed to generate component")
            return None

        if sequence != self._sequence:
            logger.info(f"Discarding stale response for generation #{sequence}")
            return None

        created = self._clock()
        component = GeneratedComponent(
            id=int(created.timestamp() * 1000),
            description=request.description,
            framework=request.framework,
            styling=request.styling,
            code=code,
            timestamp=created.strftime(TIMESTAMP_FORMAT),
        )
        self._latest = component
        self._status = BuilderStatus.IDLE
        self._notify("Component generated successfully!")
        return component

    def discard_pending(self) -> bool:
        """Stop waiting for the in-flight generation; its response will be dropped."""
        if not self.is_generating:
            return False
        self._sequence += 1
        self._status = BuilderStatus.IDLE
        self._notify("Generation discarded")
        return True

    def clear_result(self) -> None:
        self._latest = None
        self._changed()

    # -- result actions ----------------------------------------------------

    def copy_result(self, clipboard: Callable[[str], Any]) -> bool:
        if self._latest is None:
            return False
        try:
            clipboard(self._latest.code)
        except Exception as e:
            logger.error(f"Copy failed: {e}")
            self._notify("Failed to copy")
            return False
        self._notify("Copied to clipboard!")
        return True

    def download_result(self, directory: Path) -> Path | None:
        """Write the latest code to ``Component.<ext>`` inside ``directory``."""
        if self._latest is None:
            return None
        target = Path(directory) / self._latest.filename
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self._latest.code, encoding="utf-8")
        except OSError as e:
            logger.error(f"Download failed: {e}")
            self._notify("Failed to download")
            return None
        self._notify("Download started")
        return target

    # -- notifications -----------------------------------------------------

    def dismiss_notification(self, notification: Notification | None = None) -> None:
        """Close the current notification.

        When ``notification`` is given, only close it if it is still the current one.
        """
        if notification is not None and notification is not self._notification:
            return
        if self._notification is not None and self._notification.open:
            self._notification = Notification(self._notification.message, open=False)
            self._changed()

    def _notify(self, message: str) -> None:
        self._notification = Notification(message)
        if self._on_notify is not None:
            self._on_notify(self._notification)
        self._changed()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
