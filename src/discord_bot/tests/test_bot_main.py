"""Unit tests for the Discord gateway wiring and entry point."""

from __future__ import annotations

import logging
import runpy
import sys
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import discord
import pytest
from claude_client_impl.claude_impl import ClaudeClient
from discord_bot import main as main_module
from discord_bot.handlers import CommandHandlers
from discord_bot.settings import Settings
from giphy_client_impl.giphy_impl import GiphyClient
from openai_client_impl.openai_impl import OpenAIClient
from openweather_client_impl.openweather_impl import OpenWeatherClient

import ai_client_api


@pytest.fixture
def restore_ai_factories(monkeypatch: pytest.MonkeyPatch) -> None:
    """Undo completion provider registration after the test."""
    monkeypatch.setattr(ai_client_api, "get_client", ai_client_api.get_client)
    monkeypatch.setattr(ai_client_api, "message", ai_client_api.message)


class TestBuildHandlers:
    """Provider wiring from settings."""

    @pytest.mark.usefixtures("restore_ai_factories")
    def test_default_providers(self) -> None:
        """OpenWeatherMap, OpenAI and Giphy clients are bound by default."""
        settings = Settings(
            openweather_api_key="weather",
            openai_api_key="openai",
            giphy_api_key="giphy",
            http_timeout_seconds=4.0,
        )

        handlers = main_module.build_handlers(settings)

        assert isinstance(handlers, CommandHandlers)
        assert isinstance(handlers._weather, OpenWeatherClient)
        assert handlers._weather._api_key == "weather"
        assert handlers._weather._timeout == 4.0
        assert isinstance(handlers._ai, OpenAIClient)
        assert handlers._ai._model == "gpt-3.5-turbo"
        assert isinstance(handlers._gifs, GiphyClient)
        assert handlers._gifs._api_key == "giphy"

    @pytest.mark.usefixtures("restore_ai_factories")
    def test_claude_provider(self) -> None:
        """Selecting claude binds the Anthropic implementation."""
        settings = Settings(completion_provider="claude", anthropic_api_key="anthropic")

        handlers = main_module.build_handlers(settings)

        assert isinstance(handlers._ai, ClaudeClient)
        assert handlers._ai._model == "claude-haiku-4-5-20251001"

    def test_unknown_provider_raises(self) -> None:
        """Providers outside the known set are rejected."""
        with pytest.raises(ValueError, match="Unsupported completion provider"):
            main_module._use_completion_provider("gemini")


class TestGatewayClient:
    """Event handlers attached to the discord.Client."""

    @pytest.mark.asyncio
    async def test_client_enables_message_content(self) -> None:
        """The client requests the message content intent."""
        client = main_module.create_client(Mock(spec=CommandHandlers))

        assert isinstance(client, discord.Client)
        assert client.intents.message_content is True

    @pytest.mark.asyncio
    async def test_on_message_forwards_to_handlers(self) -> None:
        """Every message event is handed to the dispatcher."""
        handlers = Mock(spec=CommandHandlers)
        handlers.handle_message = AsyncMock()
        client = main_module.create_client(handlers)
        message = SimpleNamespace(content="!ping", author=SimpleNamespace(bot=False))

        await client.on_message(message)

        handlers.handle_message.assert_awaited_once_with(message)

    @pytest.mark.asyncio
    async def test_on_ready_logs_identity(self, caplog: pytest.LogCaptureFixture) -> None:
        """on_ready logs the bot identity."""
        client = main_module.create_client(Mock(spec=CommandHandlers))

        with caplog.at_level(logging.INFO, logger="discord_bot"):
            await client.on_ready()

        assert "Logged in as" in caplog.text


@pytest.mark.usefixtures("restore_ai_factories")
def test_main_runs_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """Main builds settings from the environment and delegates to client.run."""
    monkeypatch.setattr(main_module, "load_dotenv", lambda: None)
    monkeypatch.setenv("DISCORD_TOKEN", "test-token")
    monkeypatch.setenv("COMPLETION_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("HTTP_TIMEOUT_SECONDS", raising=False)
    run_mock = Mock()
    monkeypatch.setattr(discord.Client, "run", run_mock)

    main_module.main()

    run_mock.assert_called_once_with("test-token", log_handler=None)


@pytest.mark.usefixtures("restore_ai_factories")
def test_main_runs_when_invoked_as_script(monkeypatch: pytest.MonkeyPatch) -> None:
    """Module executes main when run as __main__."""
    monkeypatch.setenv("DISCORD_TOKEN", "token")
    monkeypatch.setenv("COMPLETION_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("HTTP_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delitem(sys.modules, "discord_bot.main", raising=False)

    run_mock = Mock()

    def fake_run(self: discord.Client, token: str, **kwargs: object) -> None:
        run_mock(token, **kwargs)

    monkeypatch.setattr(discord.Client, "run", fake_run)

    runpy.run_module("discord_bot.main", run_name="__main__")
    run_mock.assert_called_once_with("token", log_handler=None)
