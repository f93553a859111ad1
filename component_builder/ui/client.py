from __future__ import annotations

import logging
from typing import Optional

import httpx

logger = logging.getLogger("component_builder.ui")


class GenerationError(Exception):
    """The proxy call failed or the proxy reported an error."""


class ChatClient:
    """Posts synthesized instructions to the completion proxy."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/api/chat"

    async def send(self, message: str) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.post(self.endpoint, json={"message": message})

        if not r.is_success:
            logger.error(f"API error: {r.text}")
            raise GenerationError("Generation failed")

        data = r.json()
        if not isinstance(data, dict):
            raise GenerationError("Unexpected proxy response")
        if data.get("error"):
            logger.error(f"Proxy reported an error: {data['error']}")
            raise GenerationError(str(data["error"]))
        response = data.get("response") or ""
        if not isinstance(response, str):
            logger.error(f"Proxy returned a non-text response: {response!r}")
            raise GenerationError("Unexpected proxy response")
        return response
