from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class ProxyError(Exception):
    """Base for every error the chat proxy turns into a JSON error response."""

    status_code: int = 500

    def __init__(self, error: str, details: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(error)
        self.error = error
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> dict:
        payload = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(ProxyError):
    """Missing or malformed client input."""

    status_code = 400


class ConfigurationError(ProxyError):
    """The server is missing something it needs, e.g. the API credential."""

    status_code = 500


class UpstreamError(ProxyError):
    """The completion API answered with a non-success status."""

    def __init__(self, status_code: int, details: str):
        super().__init__("Failed to get AI response", details=details, status_code=status_code)


class UnexpectedError(ProxyError):
    status_code = 500

    def __init__(self, details: Optional[str] = None):
        super().__init__("Internal server error", details=details)


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProxyError, proxy_error_handler)
