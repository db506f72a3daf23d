"""Abstract interfaces for text completion APIs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ai_client_api.models import Message

__all__ = ["Client", "get_client"]


class Client(ABC):
    """The contract for completion services."""

    @abstractmethod
    def generate_response(  # noqa: PLR0913
        self,
        messages: Sequence[Message],
        system: str | None = None,
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
        stop: Sequence[str] | None = None,
    ) -> Message:
        """Generate a single completion.

        Args:
            messages: Conversation turns, ending with the latest user input.
            system: Optional instruction constraining tone and length.
            max_tokens: Optional cap on generated tokens.
            temperature: Optional sampling temperature.
            stop: Optional stop sequences that end generation.

        Returns:
            Message containing the assistant reply.

        """
        raise NotImplementedError


def get_client(
    api_key: str,
    *,
    model: str | None = None,
    timeout: float | None = None,
) -> Client:
    """Return the active completion client implementation.

    Args:
        api_key: Provider API key. Not validated here; a bad key fails at call time.
        model: Optional model identifier overriding the implementation default.
        timeout: Optional request timeout in seconds. ``None`` keeps the SDK default.

    Returns:
        Client implementation.

    """
    raise NotImplementedError
