"""Discord gateway client that answers !ping, !weather, !ask and !gif commands."""

from __future__ import annotations

import importlib
import logging

import discord
from dotenv import load_dotenv

import ai_client_api
import gif_client_api
import giphy_client_impl  # noqa: F401  # ensure GIF implementation registers itself
import openweather_client_impl  # noqa: F401  # ensure weather implementation registers itself
import weather_client_api
from discord_bot.handlers import CommandHandlers
from discord_bot.settings import Settings

logger = logging.getLogger("discord_bot")

COMPLETION_IMPLEMENTATIONS = {
    "openai": "openai_client_impl",
    "claude": "claude_client_impl",
}


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------


def _use_completion_provider(name: str) -> None:
    """Import the completion implementation for ``name`` and bind it into ai_client_api."""
    module_name = COMPLETION_IMPLEMENTATIONS.get(name)
    if module_name is None:
        raise ValueError(f"Unsupported completion provider: {name}")  # noqa: TRY003, EM102
    module = importlib.import_module(module_name)
    module.register()


def build_handlers(settings: Settings) -> CommandHandlers:
    """Create provider clients from settings and bind them to the command handlers.

    Args:
        settings: Startup configuration.

    Returns:
        CommandHandlers ready to receive messages.

    """
    _use_completion_provider(settings.completion_provider)
    timeout = settings.http_timeout_seconds
    return CommandHandlers(
        weather=weather_client_api.get_client(settings.openweather_api_key, timeout=timeout),
        ai=ai_client_api.get_client(
            settings.completion_api_key,
            model=settings.completion_model,
            timeout=timeout,
        ),
        gifs=gif_client_api.get_client(settings.giphy_api_key, timeout=timeout),
    )


def create_client(handlers: CommandHandlers) -> discord.Client:
    """Build the gateway client and attach event handlers.

    Args:
        handlers: Command handlers that receive every message.

    Returns:
        Configured discord.Client (not yet connected).

    """
    intents = discord.Intents.default()
    intents.message_content = True
    client = discord.Client(intents=intents)

    @client.event
    async def on_ready() -> None:
        """Log the bot identity once connected."""
        logger.info("Logged in as %s", client.user)

    @client.event
    async def on_message(message: discord.Message) -> None:
        """Hand every message to the command dispatcher."""
        await handlers.handle_message(message)

    return client


def main() -> None:
    """Load configuration and run the Discord gateway client."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO)
    settings = Settings.from_env()
    client = create_client(build_handlers(settings))
    client.run(settings.discord_token, log_handler=None)


if __name__ == "__main__":
    main()
