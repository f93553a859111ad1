"""Terminal UI for the component builder.

Module structure:
- models.py: requests, results, notifications and the fixed option lists
- prompts.py: instruction synthesis and code-fence stripping
- client.py: HTTP client for the chat proxy
- builder.py: UI state machine (no Textual dependency)
- screens.py / styles.py / app.py: Textual rendering
"""

from .builder import BuilderStatus, ComponentBuilder
from .client import ChatClient, GenerationError
from .models import GeneratedComponent, GenerationRequest, Notification

__all__ = [
    "BuilderStatus",
    "ChatClient",
    "ComponentBuilder",
    "GeneratedComponent",
    "GenerationError",
    "GenerationRequest",
    "Notification",
]
