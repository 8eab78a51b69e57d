"""
Shared fixtures: a simulated chat-completion provider and an app wired to it.
"""
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from vitalsuggest.app import create_app
from vitalsuggest.config.settings import get_settings

TEST_API_KEY = "test-key"


class StubProvider:
    """Simulated chat-completion provider that records every call it receives."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = {"choices": [{"message": {"content": "Readings look fine."}}]}
        self.raw_body = None
        self.error = None

    def reply_with(self, content: str):
        self.payload = {"choices": [{"message": {"content": content}}]}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error("simulated transport failure", request=request)
        if self.raw_body is not None:
            return httpx.Response(
                self.status_code,
                content=self.raw_body,
                headers={"content-type": "text/plain"},
            )
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def env(monkeypatch):
    """Configure the environment and reset the cached settings around a test."""
    monkeypatch.setenv("OPENAI_API_KEY", TEST_API_KEY)
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
    monkeypatch.delenv("SUGGESTION_MODEL", raising=False)
    monkeypatch.delenv("CLEAN_SUGGESTION_TEXT", raising=False)
    monkeypatch.delenv("SUGGESTION_TIMEOUT", raising=False)
    monkeypatch.delenv("ENABLE_REQUEST_LOGGING", raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def client(env, provider):
    app = create_app(http_client=provider.http_client())
    with TestClient(app) as test_client:
        yield test_client
