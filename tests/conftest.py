import pytest
from fastapi.testclient import TestClient

from api.chat.service import get_providers
from app import app
from llm_providers import ProviderAdapter


class StubAdapter(ProviderAdapter):
    def __init__(self, name: str, reply: str = "Hi there", error: Exception | None = None, api_key: str | None = "test-key"):
        super().__init__(api_key=api_key)
        self.name = name
        self.api_key_env = f"{name.upper()}_API_KEY"
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def _complete(self, api_key: str, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def stub_providers() -> dict[str, ProviderAdapter]:
    return {
        "openai": StubAdapter("openai", reply="Hi there"),
        "gemini": StubAdapter("gemini", reply="Hello from Gemini"),
    }


@pytest.fixture
def client(stub_providers):
    app.dependency_overrides[get_providers] = lambda: stub_providers
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
