"""Claude Client Implementation.

Concrete ai_client_api.Client backed by Anthropic's Claude Messages API. Converts
Anthropic responses into the plain-text ai_client_api models used by the bot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

import anthropic

import ai_client_api
from ai_client_api import Client, Message
from claude_client_impl.models_impl import ClaudeMessage

DEFAULT_MODEL = "claude-haiku-4-5-20251001"
DEFAULT_MAX_TOKENS = 1024

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------


class ClaudeClient(Client):
    """Concrete ai_client_api.Client that forwards prompts to Anthropic's Claude Messages API.

    Attributes:
        _client: Anthropic SDK client.
        _model: Model name used for requests.
        _max_tokens: Token cap used when the caller does not pass one.

    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the Claude client with an explicit key and optional model/timeout."""
        client_kwargs: dict[str, Any] = {"api_key": api_key}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._client = anthropic.Anthropic(**client_kwargs)
        self._model = model or DEFAULT_MODEL
        self._max_tokens = DEFAULT_MAX_TOKENS

    def generate_response(  # noqa: PLR0913
        self,
        messages: Sequence[Message],
        system: str | None = None,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
        stop: Sequence[str] | None = None,
    ) -> Message:
        """Invoke Claude and return the assistant turn.

        Args:
            messages: Conversation turns, ending with the latest user input.
            system: Optional system prompt to steer the model.
            max_tokens: Optional token cap; defaults to ``DEFAULT_MAX_TOKENS``.
            temperature: Optional sampling temperature.
            stop: Optional stop sequences. Whitespace-only sequences are not sent
                because the Messages API rejects them; the reply is cut at the
                first stop sequence it contains instead.

        Returns:
            Provider-agnostic Message with the concatenated text blocks.

        """
        request_kwargs: dict[str, Any] = {
            "model": self._model,
            "max_tokens": max_tokens or self._max_tokens,
            "messages": [message.to_dict() for message in messages],
        }
        if system:
            request_kwargs["system"] = system.strip()
        if temperature is not None:
            request_kwargs["temperature"] = temperature
        stop_sequences = [sequence for sequence in stop or [] if sequence.strip()]
        if stop_sequences:
            request_kwargs["stop_sequences"] = stop_sequences

        api_response = self._client.messages.create(**request_kwargs)
        return to_message(api_response, stop=stop)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def get_client_impl(
    api_key: str,
    *,
    model: str | None = None,
    timeout: float | None = None,
) -> ClaudeClient:
    """Return a new ClaudeClient."""
    return ClaudeClient(api_key, model=model, timeout=timeout)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def to_message(api_response: Any, *, stop: Sequence[str] | None = None) -> ClaudeMessage:  # noqa: ANN401
    """Convert an Anthropic Messages API response into a ClaudeMessage.

    The text is truncated at the earliest occurrence of any ``stop`` sequence.
    """
    text = "".join(block.text for block in api_response.content if block.type == "text")
    cuts = [index for index in (text.find(sequence) for sequence in stop or [] if sequence) if index >= 0]
    if cuts:
        text = text[: min(cuts)]
    return ClaudeMessage(role="assistant", text=text)


# ---------------------------------------------------------------------------
# Factory registration
# ---------------------------------------------------------------------------


def register() -> None:
    """Bind the Claude client factory into ai_client_api.get_client."""
    ai_client_api.get_client = get_client_impl
