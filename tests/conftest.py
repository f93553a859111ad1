from typing import Callable, Iterator, List

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from component_builder.core.config import Settings, get_settings
from component_builder.main import create_app
from component_builder.services.completion_service import (
    CompletionService,
    get_completion_service,
)


@pytest.fixture
def app() -> Iterator[FastAPI]:
    test_app = create_app()
    test_app.dependency_overrides[get_settings] = lambda: Settings(
        HUGGINGFACE_API_KEY="test-key", _env_file=None
    )
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def upstream(app: FastAPI) -> Callable[[Callable[[httpx.Request], httpx.Response]], List[httpx.Request]]:
    """Point the proxy's outbound call at a handler the test controls.

    Returns the list that captures every outbound request.
    """

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> List[httpx.Request]:
        seen: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording_handler)
        app.dependency_overrides[get_completion_service] = lambda: CompletionService(
            api_key="test-key", transport=transport
        )
        return seen

    return install
