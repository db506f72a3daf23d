"""Claude message implementation colocated with the Claude client."""

from __future__ import annotations

from typing import Any

import ai_client_api
from ai_client_api import models

# ---------------------------------------------------------------------------
# Claude models
# ---------------------------------------------------------------------------


class ClaudeMessage(models.Message):
    """Plain-text turn in the Anthropic Messages format."""

    def __init__(self, role: str, text: str) -> None:
        """Create a Claude message."""
        self._role = role
        self._text = text

    @property
    def role(self) -> str:
        """Get the message role (user or assistant)."""
        return self._role

    @property
    def text(self) -> str:
        """Get the text of the turn."""
        return self._text

    def to_dict(self) -> dict[str, Any]:
        """Return this message as a Messages API dict."""
        return {"role": self._role, "content": self._text}


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def message_impl(role: str, text: str) -> ClaudeMessage:
    """Build a ClaudeMessage."""
    return ClaudeMessage(role=role, text=text)


# ---------------------------------------------------------------------------
# Factory registration
# ---------------------------------------------------------------------------


def register() -> None:
    """Register Claude factory helpers with the abstract API."""
    ai_client_api.message = message_impl
    models.message = message_impl
