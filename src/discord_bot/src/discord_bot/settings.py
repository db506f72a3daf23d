"""Process configuration for the Discord utility bot."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, field_validator

CompletionProvider = Literal["openai", "claude"]


class Settings(BaseModel):
    """Secrets and provider options, read once at startup.

    API keys may be empty; a missing key surfaces as an authentication
    failure from the provider when the command runs.
    """

    discord_token: str = ""
    openweather_api_key: str = ""
    openai_api_key: str = ""
    giphy_api_key: str = ""
    completion_provider: CompletionProvider = "openai"
    openai_model: str = "gpt-3.5-turbo"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-haiku-4-5-20251001"
    http_timeout_seconds: float | None = None

    @field_validator("completion_provider", mode="before")
    @classmethod
    def normalize_provider(cls, value: object) -> object:
        """Strip and lowercase the provider name."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("http_timeout_seconds", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, value: object) -> object:
        """Treat an empty timeout value as no timeout."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (used by tests).

        Returns:
            Validated settings.

        """
        env = os.environ if environ is None else environ
        return cls(
            discord_token=env.get("DISCORD_TOKEN", ""),
            openweather_api_key=env.get("OPENWEATHER_API_KEY", ""),
            openai_api_key=env.get("OPENAI_API_KEY", ""),
            giphy_api_key=env.get("GIPHY_API_KEY", ""),
            completion_provider=env.get("COMPLETION_PROVIDER", "openai"),
            openai_model=env.get("OPENAI_MODEL", "gpt-3.5-turbo"),
            anthropic_api_key=env.get("ANTHROPIC_API_KEY", ""),
            anthropic_model=env.get("ANTHROPIC_MODEL", "claude-haiku-4-5-20251001"),
            http_timeout_seconds=env.get("HTTP_TIMEOUT_SECONDS"),
        )

    @property
    def completion_api_key(self) -> str:
        """Return the API key for the selected completion provider."""
        if self.completion_provider == "claude":
            return self.anthropic_api_key
        return self.openai_api_key

    @property
    def completion_model(self) -> str:
        """Return the model identifier for the selected completion provider."""
        if self.completion_provider == "claude":
            return self.anthropic_model
        return self.openai_model
