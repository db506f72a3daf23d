"""Public exports for the OpenAI client implementation package."""

from openai_client_impl.models_impl import register as _register_models
from openai_client_impl.openai_impl import register as _register_client


def register() -> None:
    """Register the OpenAI client and message implementations."""
    _register_client()
    _register_models()


register()
