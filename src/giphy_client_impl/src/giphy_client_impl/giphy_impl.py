"""Giphy Client Implementation.

Concrete gif_client_api.Client backed by the Giphy search endpoint.
"""

from __future__ import annotations

import requests

import gif_client_api
from gif_client_api import Client
from giphy_client_impl.models_impl import GiphyGif, to_gifs

GIPHY_SEARCH_URL = "https://api.giphy.com/v1/gifs/search"

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------


class GiphyClient(Client):
    """Concrete gif_client_api.Client for Giphy search.

    Attributes:
        _api_key: Giphy API key.
        _timeout: Request timeout in seconds, or None for no timeout.

    """

    def __init__(self, api_key: str, *, timeout: float | None = None) -> None:
        """Store credentials; the key is only checked by the provider."""
        self._api_key = api_key
        self._timeout = timeout

    def search(self, query: str, *, limit: int = 10, rating: str = "g") -> list[GiphyGif]:
        """Search Giphy for ``query``.

        Raises:
            requests.RequestException: On network failures or non-2xx responses.
            pydantic.ValidationError: When the body lacks the expected fields.

        """
        response = requests.get(
            GIPHY_SEARCH_URL,
            params={"api_key": self._api_key, "q": query, "limit": limit, "rating": rating},
            timeout=self._timeout,
        )
        response.raise_for_status()
        return to_gifs(response.json())


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def get_client_impl(api_key: str, *, timeout: float | None = None) -> GiphyClient:
    """Return a new GiphyClient."""
    return GiphyClient(api_key, timeout=timeout)


# ---------------------------------------------------------------------------
# Factory registration
# ---------------------------------------------------------------------------


def register() -> None:
    """Bind the Giphy client factory into gif_client_api.get_client."""
    gif_client_api.get_client = get_client_impl
