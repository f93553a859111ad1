from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import Depends

from ..core.config import Settings, get_settings
from ..core.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger("component_builder.completion")

COMPLETION_URL = "https://router.huggingface.co/v1/chat/completions"
COMPLETION_MODEL = "Qwen/Qwen2.5-Coder-32B-Instruct"
MAX_TOKENS = 2000
TEMPERATURE = 0.3
NO_RESPONSE_PLACEHOLDER = "No response generated"

SYSTEM_PERSONA = (
    "You are an expert frontend developer specializing in React, Vue, and Svelte. "
    "Generate clean, production-ready, well-documented code. "
    "Always include proper TypeScript types, accessibility features, and best practices."
)


def build_payload(message: str) -> Dict[str, Any]:
    return {
        "model": COMPLETION_MODEL,
        "messages": [
            {"role": "system", "content": SYSTEM_PERSONA},
            {"role": "user", "content": message},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
        "stream": False,
    }


def extract_content(data: Any) -> str:
    """Return the first choice's text, or the placeholder when the shape is off."""
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        return NO_RESPONSE_PLACEHOLDER
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content:
        return NO_RESPONSE_PLACEHOLDER
    return content


class CompletionService:
    """Single-shot relay to the hosted chat-completions endpoint.

    Holds no state between calls and never retries; every call to
    ``complete`` is one outbound request.
    """

    def __init__(
        self,
        api_key: str,
        url: str = COMPLETION_URL,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def complete(self, message: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.post(self.url, headers=headers, json=build_payload(message))
            if not r.is_success:
                logger.error(f"Hugging Face API error: {r.text}")
                raise UpstreamError(status_code=r.status_code, details=r.text)

            data = r.json()

        return extract_content(data)


def get_completion_service(settings: Settings = Depends(get_settings)) -> CompletionService:
    api_key = settings.HUGGINGFACE_API_KEY
    if not api_key:
        raise ConfigurationError("Hugging Face API key not configured")
    return CompletionService(api_key=api_key, timeout=settings.COMPLETION_TIMEOUT)
