"""Public export surface for ``gif_client_api``."""

from gif_client_api.client import Client, get_client
from gif_client_api.gif import Gif

__all__ = ["Client", "Gif", "get_client"]
