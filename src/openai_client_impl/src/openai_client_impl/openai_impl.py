"""OpenAI Client Implementation.

Concrete ai_client_api.Client backed by the OpenAI Chat Completions API. The
SDK sends the key as a bearer token and raises on non-2xx responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

import openai

import ai_client_api
from ai_client_api import Client, Message
from openai_client_impl.models_impl import OpenAIMessage

DEFAULT_MODEL = "gpt-3.5-turbo"

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------


class OpenAIClient(Client):
    """Concrete ai_client_api.Client that forwards prompts to OpenAI chat completions.

    Attributes:
        _client: OpenAI SDK client.
        _model: Model name used for requests.

    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the OpenAI client with an explicit key and optional model/timeout."""
        client_kwargs: dict[str, Any] = {"api_key": api_key}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = openai.OpenAI(**client_kwargs)
        self._model = model or DEFAULT_MODEL

    def generate_response(  # noqa: PLR0913
        self,
        messages: Sequence[Message],
        system: str | None = None,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
        stop: Sequence[str] | None = None,
    ) -> Message:
        """Request one chat completion and return the first choice.

        Args:
            messages: Conversation turns, ending with the latest user input.
            system: Optional system prompt, sent as the leading ``system`` turn.
            max_tokens: Optional token cap.
            temperature: Optional sampling temperature.
            stop: Optional stop sequences.

        Returns:
            Provider-agnostic Message for the first choice.

        """
        serialized_messages = [message.to_dict() for message in messages]
        if system:
            serialized_messages.insert(0, {"role": "system", "content": system.strip()})
        request_kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": serialized_messages,
        }
        if max_tokens is not None:
            request_kwargs["max_tokens"] = max_tokens
        if temperature is not None:
            request_kwargs["temperature"] = temperature
        if stop:
            request_kwargs["stop"] = list(stop)

        completion = self._client.chat.completions.create(**request_kwargs)
        return to_message(completion)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def get_client_impl(
    api_key: str,
    *,
    model: str | None = None,
    timeout: float | None = None,
) -> OpenAIClient:
    """Return a new OpenAIClient."""
    return OpenAIClient(api_key, model=model, timeout=timeout)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def to_message(completion: Any) -> OpenAIMessage:  # noqa: ANN401
    """Convert a chat completion into an OpenAIMessage for its first choice."""
    if not completion.choices:
        msg = "Completion returned no choices"
        raise ValueError(msg)
    choice_message = completion.choices[0].message
    return OpenAIMessage(role=choice_message.role, text=choice_message.content or "")


# ---------------------------------------------------------------------------
# Factory registration
# ---------------------------------------------------------------------------


def register() -> None:
    """Bind the OpenAI client factory into ai_client_api.get_client."""
    ai_client_api.get_client = get_client_impl
