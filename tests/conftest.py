"""Shared fixtures: a fake Claude client wired into the app through dependency overrides."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from cryptochat.core.config import Settings, get_settings
from cryptochat.main import app
from cryptochat.routes.deps import get_llm_factory
from cryptochat.services.llm.base import Completion, ContentBlock, LLMClient, TokenUsage


class FakeLLM(LLMClient):
    """Records every call; returns a canned completion or raises a canned error."""

    def __init__(self, completion: Completion | None = None, error: Exception | None = None):
        self.completion = completion or Completion(
            content=[ContentBlock(type="text", text="Bitcoin is...")],
            usage=TokenUsage(input_tokens=50, output_tokens=20),
        )
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, system_prompt, messages, max_tokens):
        self.calls.append({"system": system_prompt, "messages": messages, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.completion


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def api_key() -> str | None:
    return "test-key"


@pytest.fixture
def client(fake_llm: FakeLLM, api_key):
    app.dependency_overrides[get_settings] = lambda: Settings(ANTHROPIC_API_KEY=api_key)
    app.dependency_overrides[get_llm_factory] = lambda: (lambda key: fake_llm)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
