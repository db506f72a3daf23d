"""OpenAI message implementation colocated with the OpenAI client."""

from __future__ import annotations

from typing import Any

import ai_client_api
from ai_client_api import models


class OpenAIMessage(models.Message):
    """Plain-text turn in the Chat Completions format."""

    def __init__(self, role: str, text: str) -> None:
        """Create an OpenAI chat message."""
        self._role = role
        self._text = text

    @property
    def role(self) -> str:
        """Get the message role (system, user or assistant)."""
        return self._role

    @property
    def text(self) -> str:
        """Get the text of the turn."""
        return self._text

    def to_dict(self) -> dict[str, Any]:
        """Return this message as a Chat Completions dict."""
        return {"role": self._role, "content": self._text}


def message_impl(role: str, text: str) -> OpenAIMessage:
    """Build an OpenAIMessage."""
    return OpenAIMessage(role=role, text=text)


def register() -> None:
    """Register OpenAI factory helpers with the abstract API."""
    ai_client_api.message = message_impl
    models.message = message_impl
