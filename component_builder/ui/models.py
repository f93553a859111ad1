"""Data models for the builder UI.

Hides the representation of requests, results and notifications.
"""

from dataclasses import dataclass

FRAMEWORKS: tuple[str, ...] = ("React", "Vue", "Svelte")
STYLES: tuple[str, ...] = ("Tailwind", "CSS", "Styled-components")

DEFAULT_FRAMEWORK = "React"
DEFAULT_STYLING = "Tailwind"

SUGGESTED_PROMPTS: tuple[str, ...] = (
    "Create a responsive search bar with keyboard navigation",
    "Design a compact profile card with avatar and actions",
    "Build an accessible modal with focus trap and close on Esc",
)

MAX_PROMPT_LENGTH = 1000
NOTIFICATION_TIMEOUT = 2.5  # seconds

FILE_EXTENSIONS = {
    "React": "tsx",
    "Vue": "vue",
    "Svelte": "svelte",
}


@dataclass(frozen=True)
class GenerationRequest:
    """One generation action: what to build and how."""

    description: str
    framework: str
    styling: str


@dataclass(frozen=True)
class GeneratedComponent:
    """The latest generation result."""

    id: int  # creation time in milliseconds
    description: str
    framework: str
    styling: str
    code: str
    timestamp: str

    @property
    def extension(self) -> str:
        return FILE_EXTENSIONS.get(self.framework, "svelte")

    @property
    def filename(self) -> str:
        return f"Component.{self.extension}"


@dataclass(frozen=True)
class Notification:
    """A short-lived status message."""

    message: str
    open: bool = True
    timeout: float = NOTIFICATION_TIMEOUT
