"""Public export surface for ``ai_client_api``."""

from ai_client_api.client import Client, get_client
from ai_client_api.models import Message, message

__all__ = [
    "Client",
    "Message",
    "get_client",
    "message",
]
