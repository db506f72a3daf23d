"""Abstract message schema for completion requests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["Message", "message"]


class Message(ABC):
    """Abstract chat turn carrying plain text."""

    @property
    @abstractmethod
    def role(self) -> str:
        """Return the message role (system, user or assistant)."""
        raise NotImplementedError

    @property
    @abstractmethod
    def text(self) -> str:
        """Return the text content of the turn."""
        raise NotImplementedError

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the message."""
        raise NotImplementedError


def message(role: str, text: str) -> Message:
    """Construct a concrete Message instance.

    Args:
        role: Message role, typically "user" or "assistant".
        text: Text of the turn.

    Returns:
        Concrete Message instance bound by the active implementation.

    """
    raise NotImplementedError
