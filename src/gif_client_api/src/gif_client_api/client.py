"""Abstract interfaces for GIF search APIs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gif_client_api.gif import Gif

__all__ = ["Client", "get_client"]


class Client(ABC):
    """The contract for GIF search services."""

    @abstractmethod
    def search(self, query: str, *, limit: int = 10, rating: str = "g") -> list[Gif]:
        """Search for GIFs matching a term.

        Args:
            query: Free-form search term.
            limit: Maximum number of results to return.
            rating: Content rating filter (e.g., "g" for general audiences).

        Returns:
            Matching GIFs in provider order. Empty when nothing matched.

        """
        raise NotImplementedError


def get_client(api_key: str, *, timeout: float | None = None) -> Client:
    """Return the active GIF search client implementation.

    Args:
        api_key: Provider API key. Not validated here; a bad key fails at call time.
        timeout: Optional request timeout in seconds. ``None`` waits indefinitely.

    Returns:
        Client implementation.

    """
    raise NotImplementedError
