"""Giphy payload schemas and GIF implementation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from gif_client_api import Gif

# ---------------------------------------------------------------------------
# Payload schemas
# ---------------------------------------------------------------------------


class GifObject(BaseModel):
    """One entry of the search ``data`` array."""

    id: str = ""
    url: str
    title: str | None = None


class SearchPayload(BaseModel):
    """Subset of the search response the bot relies on."""

    data: list[GifObject]


# ---------------------------------------------------------------------------
# GIF implementation
# ---------------------------------------------------------------------------


class GiphyGif(Gif):
    """Gif backed by a validated Giphy GIF object."""

    def __init__(self, payload: GifObject) -> None:
        """Wrap a validated GIF object."""
        self._payload = payload

    @property
    def id(self) -> str:
        """Get the Giphy identifier."""
        return self._payload.id

    @property
    def url(self) -> str:
        """Get the giphy.com page URL."""
        return self._payload.url

    @property
    def title(self) -> str | None:
        """Get the GIF title."""
        return self._payload.title or None


def to_gifs(data: Any) -> list[GiphyGif]:  # noqa: ANN401
    """Validate a decoded JSON body into GiphyGif results.

    Raises:
        pydantic.ValidationError: When the ``data`` array or its URLs are missing.

    """
    payload = SearchPayload.model_validate(data)
    return [GiphyGif(item) for item in payload.data]
