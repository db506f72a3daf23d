"""Tests for the OpenAI client implementation aligned with ai_client_api contracts."""

from __future__ import annotations

import importlib
from types import SimpleNamespace
from typing import Any

import pytest
from openai_client_impl.models_impl import OpenAIMessage, message_impl
from openai_client_impl.openai_impl import (
    DEFAULT_MODEL,
    OpenAIClient,
    get_client_impl,
    register,
    to_message,
)

import ai_client_api


def _completion(*contents: str | None) -> SimpleNamespace:
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(role="assistant", content=content)) for content in contents],
    )


def _install_stub_sdk(monkeypatch: pytest.MonkeyPatch, response: object) -> dict[str, Any]:
    captured: dict[str, Any] = {}

    class _StubCompletions:
        def create(self, **kwargs: Any) -> object:
            captured["request"] = kwargs
            return response

    class _StubOpenAI:
        def __init__(self, **kwargs: Any) -> None:
            captured["client"] = kwargs
            self.chat = SimpleNamespace(completions=_StubCompletions())

    monkeypatch.setattr("openai_client_impl.openai_impl.openai.OpenAI", _StubOpenAI)
    return captured


def test_generate_response_builds_chat_request(monkeypatch: pytest.MonkeyPatch) -> None:
    """The system prompt leads the turns and sampling controls pass through."""
    # ARRANGE
    captured = _install_stub_sdk(monkeypatch, _completion("  Four.  "))
    client = OpenAIClient("sk-test")

    # ACT
    result = client.generate_response(
        [OpenAIMessage(role="user", text="What is 2+2?")],
        "  Be concise.  ",
        max_tokens=150,
        temperature=0.4,
        stop=("\n", "User:"),
    )

    # ASSERT
    assert isinstance(result, OpenAIMessage)
    assert result.text == "  Four.  "
    assert captured["client"] == {"api_key": "sk-test"}
    assert captured["request"] == {
        "model": DEFAULT_MODEL,
        "messages": [
            {"role": "system", "content": "Be concise."},
            {"role": "user", "content": "What is 2+2?"},
        ],
        "max_tokens": 150,
        "temperature": 0.4,
        "stop": ["\n", "User:"],
    }


def test_generate_response_omits_unset_controls(monkeypatch: pytest.MonkeyPatch) -> None:
    """Optional controls are left out of the request when not provided."""
    captured = _install_stub_sdk(monkeypatch, _completion("ok"))
    client = OpenAIClient("sk-test", model="gpt-4o-mini", timeout=12.0)

    client.generate_response([OpenAIMessage(role="user", text="hi")])

    assert captured["client"] == {"api_key": "sk-test", "timeout": 12.0}
    assert captured["request"] == {
        "model": "gpt-4o-mini",
        "messages": [{"role": "user", "content": "hi"}],
    }


def test_to_message_uses_first_choice() -> None:
    """Only the first choice is returned; missing content becomes empty text."""
    assert to_message(_completion("first", "second")).text == "first"
    assert to_message(_completion(None)).text == ""


def test_to_message_requires_choices() -> None:
    """A completion without choices is treated as a malformed response."""
    with pytest.raises(ValueError, match="no choices"):
        to_message(_completion())


def test_message_serialization() -> None:
    """Messages serialize into Chat Completions dicts."""
    message = message_impl("user", "hello")
    assert (message.role, message.text) == ("user", "hello")
    assert message.to_dict() == {"role": "user", "content": "hello"}


def test_get_client_impl_returns_new_instance(monkeypatch: pytest.MonkeyPatch) -> None:
    """Factory returns a fresh OpenAIClient bound to the given model."""
    _install_stub_sdk(monkeypatch, _completion("ok"))

    first = get_client_impl("sk-test", model="gpt-4o")
    second = get_client_impl("sk-test")

    assert isinstance(first, OpenAIClient)
    assert first is not second


def test_register_binds_factories(monkeypatch: pytest.MonkeyPatch) -> None:
    """Registering replaces ai_client_api.get_client and ai_client_api.message."""
    # ARRANGE
    package = importlib.import_module("openai_client_impl")
    client_protocol = importlib.import_module("ai_client_api.client")
    models_protocol = importlib.import_module("ai_client_api.models")
    monkeypatch.setattr(ai_client_api, "get_client", client_protocol.get_client)
    monkeypatch.setattr(ai_client_api, "message", models_protocol.message)

    # ACT
    register()
    assert ai_client_api.get_client is get_client_impl
    package.register()

    # ASSERT
    assert ai_client_api.message is message_impl
    assert isinstance(ai_client_api.message("user", "hi"), OpenAIMessage)
