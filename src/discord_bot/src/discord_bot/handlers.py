"""Command handlers: validate, call one provider, reply.

Each provider call runs in a worker thread so the event loop keeps serving
other messages while a request is in flight. Provider failures are logged and
turned into a fixed apology; the error detail never reaches the channel.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import ai_client_api
from discord_bot.commands import CommandInvocation, CommandName, parse_command

if TYPE_CHECKING:
    import gif_client_api
    import weather_client_api

logger = logging.getLogger("discord_bot.handlers")

WEATHER_USAGE = "⚠️ Please provide a city name. Example: `!weather London`"
WEATHER_FAILED = "❌ Could not find weather data. Please check the city name."
ASK_USAGE = "❓ Please ask a question. Example: `!ask What is the capital of France?`"
ASK_FAILED = "❌ Sorry, I couldn’t process that. Please try again later."
GIF_USAGE = "❓ Please enter a search term. Example: `!gif cats`"
GIF_NOT_FOUND = "❌ No GIFs found for that search term."
GIF_FAILED = "❌ Could not fetch GIFs. Please try again later."

ASK_SYSTEM_PROMPT = "Be concise. Limit responses to under 100 words unless specified otherwise."
ASK_MAX_TOKENS = 150
ASK_TEMPERATURE = 0.4
ASK_STOP_SEQUENCES = ("\n", "User:")

GIF_SEARCH_LIMIT = 10
GIF_RATING = "g"

Handler = Callable[[Any, str], Awaitable[None]]


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def latency_ms(created_at: datetime, now: datetime) -> int:
    """Return the non-negative delay between message creation and ``now`` in ms."""
    return max(0, int((now - created_at).total_seconds() * 1000))


def format_weather(report: weather_client_api.WeatherReport) -> str:
    """Render a weather report as a multi-line chat message."""
    return "\n".join(
        [
            f"🌍 **Weather in {report.location}**:",
            f"☁️ Description: {report.description}",
            f"🌡️ Temperature: {report.temperature}°F",
            f"💧 Humidity: {report.humidity}%",
            f"🌬️ Wind Speed: {report.wind_speed} mph",
        ]
    )


def _error_detail(exc: BaseException) -> str:
    """Prefer the provider's response body over the exception text."""
    response = getattr(exc, "response", None)
    body = getattr(response, "text", None)
    if isinstance(body, str) and body:
        return body
    return str(exc)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class CommandHandlers:
    """Dispatches chat messages to the ping/weather/ask/gif handlers.

    Attributes:
        _weather: Weather provider client.
        _ai: Completion provider client.
        _gifs: GIF search provider client.
        _clock: Returns the current timezone-aware time.
        _handlers: One handler per CommandName.

    """

    def __init__(
        self,
        *,
        weather: weather_client_api.Client,
        ai: ai_client_api.Client,
        gifs: gif_client_api.Client,
        clock: Callable[[], datetime] = _utcnow,
        rng: random.Random | None = None,
    ) -> None:
        """Bind provider clients; nothing is read from the environment here."""
        self._weather = weather
        self._ai = ai
        self._gifs = gifs
        self._clock = clock
        self._rng = rng or random.Random()  # noqa: S311
        self._handlers: dict[CommandName, Handler] = {
            CommandName.PING: self.handle_ping,
            CommandName.WEATHER: self.handle_weather,
            CommandName.ASK: self.handle_ask,
            CommandName.GIF: self.handle_gif,
        }

    async def handle_message(self, message: Any) -> None:  # noqa: ANN401
        """Run the matching handler for a message, if any.

        Args:
            message: Incoming Discord message event payload.

        Returns:
            None.

        """
        if message.author.bot:
            return
        invocation = parse_command(message.content or "")
        if invocation is None:
            return
        await self.dispatch(invocation, message)

    async def dispatch(self, invocation: CommandInvocation, message: Any) -> None:  # noqa: ANN401
        """Run exactly one handler for an already-parsed invocation."""
        logger.info("Command %s from %s", invocation.name.value, getattr(message.author, "id", "?"))
        await self._handlers[invocation.name](message, invocation.argument)

    # -----------------------------------------------------------------------
    # Handlers
    # -----------------------------------------------------------------------

    async def handle_ping(self, message: Any, _argument: str = "") -> None:  # noqa: ANN401
        """Reply with the delay since the message was created."""
        elapsed = latency_ms(message.created_at, self._clock())
        await message.reply(f"🏓 Pong! Latency: {elapsed}ms")

    async def handle_weather(self, message: Any, city: str) -> None:  # noqa: ANN401
        """Look up current weather for a city and post it to the channel."""
        if not city:
            await message.reply(WEATHER_USAGE)
            return
        try:
            report = await asyncio.to_thread(self._weather.get_current_weather, city)
        except Exception as exc:
            logger.exception("Weather lookup failed for %r: %s", city, _error_detail(exc))
            await message.reply(WEATHER_FAILED)
            return
        await message.channel.send(format_weather(report))

    async def handle_ask(self, message: Any, question: str) -> None:  # noqa: ANN401
        """Send a question to the completion provider and reply with the answer."""
        if not question:
            await message.reply(ASK_USAGE)
            return
        try:
            completion = await asyncio.to_thread(
                self._ai.generate_response,
                [ai_client_api.message(role="user", text=question)],
                ASK_SYSTEM_PROMPT,
                max_tokens=ASK_MAX_TOKENS,
                temperature=ASK_TEMPERATURE,
                stop=list(ASK_STOP_SEQUENCES),
            )
        except Exception as exc:
            logger.exception("Completion failed: %s", _error_detail(exc))
            await message.reply(ASK_FAILED)
            return
        answer = completion.text.strip()
        if not answer:
            logger.error("Completion returned no text for %r", question)
            await message.reply(ASK_FAILED)
            return
        await message.reply(answer)

    async def handle_gif(self, message: Any, query: str) -> None:  # noqa: ANN401
        """Search for GIFs and post one result chosen at random."""
        if not query:
            await message.reply(GIF_USAGE)
            return
        try:
            gifs = await asyncio.to_thread(
                self._gifs.search,
                query,
                limit=GIF_SEARCH_LIMIT,
                rating=GIF_RATING,
            )
        except Exception as exc:
            logger.exception("GIF search failed for %r: %s", query, _error_detail(exc))
            await message.reply(GIF_FAILED)
            return
        logger.info("Total gif results: %d", len(gifs))
        if not gifs:
            await message.reply(GIF_NOT_FOUND)
            return
        await message.channel.send(self._rng.choice(gifs).url)
