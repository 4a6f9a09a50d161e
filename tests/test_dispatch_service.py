import pytest

from api.chat.schemas import ChatRequest, ChatResponse
from api.chat.service import dispatch_chat
from conftest import StubAdapter
from errors import MissingCredentialError, ProviderCallError, UnsupportedProviderError, ValidationError


def test_dispatch_returns_response(stub_providers):
    result = dispatch_chat(ChatRequest(provider="openai", model="gpt-4o", prompt="Hello"), stub_providers)

    assert result == ChatResponse(response="Hi there")


def test_dispatch_requires_request(stub_providers):
    with pytest.raises(ValidationError) as excinfo:
        dispatch_chat(None, stub_providers)

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Missing required fields"


def test_dispatch_rejects_unknown_provider(stub_providers):
    with pytest.raises(UnsupportedProviderError) as excinfo:
        dispatch_chat(ChatRequest(provider="anthropic", model="claude", prompt="Hello"), stub_providers)

    assert excinfo.value.status_code == 400
    assert excinfo.value.provider == "anthropic"


def test_dispatch_wraps_vendor_errors(stub_providers):
    original = ConnectionError("Connection reset by peer")
    stub_providers["gemini"].error = original

    with pytest.raises(ProviderCallError) as excinfo:
        dispatch_chat(ChatRequest(provider="gemini", model="gemini-pro", prompt="Hello"), stub_providers)

    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "Connection reset by peer"
    assert excinfo.value.provider == "gemini"
    assert excinfo.value.__cause__ is original


def test_dispatch_keeps_missing_credential_error(stub_providers):
    stub_providers["gemini"] = StubAdapter("gemini", api_key=None)

    with pytest.raises(MissingCredentialError) as excinfo:
        dispatch_chat(ChatRequest(provider="gemini", model="gemini-pro", prompt="Hello"), stub_providers)

    assert excinfo.value.message == "GEMINI_API_KEY is not defined"
    assert stub_providers["gemini"].calls == []


def test_third_provider_is_additive(stub_providers):
    stub_providers["mistral"] = StubAdapter("mistral", reply="Salut")

    result = dispatch_chat(ChatRequest(provider="mistral", model="mistral-small", prompt="Hello"), stub_providers)

    assert result.response == "Salut"
