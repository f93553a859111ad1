import json
from unittest.mock import patch

import httpx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from component_builder.core.config import Settings, get_settings
from component_builder.services.completion_service import (
    COMPLETION_MODEL,
    SYSTEM_PERSONA,
)


def make_completion(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


class TestChatProxyE2E:
    def test_chat_relays_completion_content(self, client: TestClient, upstream) -> None:
        # Given
        seen = upstream(lambda request: httpx.Response(200, json=make_completion("const X = 1;")))

        # When
        response = client.post("/api/chat", json={"message": "Build a button"})

        # Then
        assert response.status_code == 200
        assert response.json() == {"response": "const X = 1;"}

        assert len(seen) == 1
        sent = json.loads(seen[0].content)
        assert seen[0].headers["Authorization"] == "Bearer test-key"
        assert sent["model"] == COMPLETION_MODEL
        assert sent["messages"] == [
            {"role": "system", "content": SYSTEM_PERSONA},
            {"role": "user", "content": "Build a button"},
        ]
        assert sent["max_tokens"] == 2000
        assert sent["temperature"] == 0.3
        assert sent["stream"] is False

    def test_chat_with_mocked_service(self, client: TestClient) -> None:
        # Given / When
        with patch(
            "component_builder.services.completion_service.CompletionService.complete",
            return_value="mock-code",
        ):
            response = client.post("/api/chat", json={"message": "Hello"})

        # Then
        assert response.status_code == 200
        assert response.json() == {"response": "mock-code"}

    def test_missing_message_is_bad_request(self, client: TestClient, upstream) -> None:
        # Given
        seen = upstream(lambda request: httpx.Response(200, json=make_completion("unused")))

        # When
        response = client.post("/api/chat", json={})

        # Then
        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}
        assert seen == []

    def test_empty_message_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/api/chat", json={"message": ""})

        assert response.status_code == 400
        assert response.json()["error"] == "Message is required"

    def test_malformed_body_is_bad_request(self, client: TestClient) -> None:
        response = client.post(
            "/api/chat",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"

    def test_missing_credential_is_configuration_error(self, app: FastAPI, client: TestClient) -> None:
        # Given
        app.dependency_overrides[get_settings] = lambda: Settings(
            HUGGINGFACE_API_KEY=None, _env_file=None
        )

        # When
        valid = client.post("/api/chat", json={"message": "Build a card"})
        invalid = client.post("/api/chat", json={})

        # Then
        for response in (valid, invalid):
            assert response.status_code == 500
            assert response.json() == {"error": "Hugging Face API key not configured"}

    def test_upstream_error_keeps_status_and_body(self, client: TestClient, upstream) -> None:
        # Given
        upstream(lambda request: httpx.Response(429, text="rate limited"))

        # When
        response = client.post("/api/chat", json={"message": "Build a card"})

        # Then
        assert response.status_code == 429
        assert response.json() == {
            "error": "Failed to get AI response",
            "details": "rate limited",
        }

    def test_missing_choices_uses_placeholder(self, client: TestClient, upstream) -> None:
        upstream(lambda request: httpx.Response(200, json={"id": "abc"}))

        response = client.post("/api/chat", json={"message": "Build a card"})

        assert response.status_code == 200
        assert response.json() == {"response": "No response generated"}

    def test_transport_failure_is_internal_error(self, client: TestClient, upstream) -> None:
        # Given
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        upstream(fail)

        # When
        response = client.post("/api/chat", json={"message": "Build a card"})

        # Then
        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "details": "connection refused",
        }
