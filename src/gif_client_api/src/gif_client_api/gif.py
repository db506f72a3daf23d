"""Abstract schema for a GIF search result."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Gif"]


class Gif(ABC):
    """A single search hit."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Return the provider identifier of the GIF."""
        raise NotImplementedError

    @property
    @abstractmethod
    def url(self) -> str:
        """Return a shareable URL for the GIF."""
        raise NotImplementedError

    @property
    @abstractmethod
    def title(self) -> str | None:
        """Return the GIF title, if any."""
        raise NotImplementedError
