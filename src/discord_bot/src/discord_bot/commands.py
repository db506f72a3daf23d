"""Command parsing for chat messages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Leading token, then optional whitespace-separated argument text.
_COMMAND_RE = re.compile(r"(?P<token>\S+)(?:\s+(?P<argument>.*))?", re.DOTALL)


class CommandName(str, Enum):
    """Recognized commands, keyed by their literal token."""

    PING = "!ping"
    WEATHER = "!weather"
    ASK = "!ask"
    GIF = "!gif"


@dataclass(frozen=True)
class CommandInvocation:
    """A recognized command and its raw argument text."""

    name: CommandName
    argument: str = ""


def parse_command(text: str) -> CommandInvocation | None:
    """Classify message text into a command invocation.

    Only a leading token that equals a command literal is recognized, and only
    that token is stripped: ``"!ask !ask what"`` yields ``ask`` with the
    argument ``"!ask what"``. ``!ping`` must be the entire message.

    Args:
        text: Raw message content.

    Returns:
        The invocation, or None when the text is not a command.

    """
    match = _COMMAND_RE.fullmatch(text)
    if match is None:
        return None
    try:
        name = CommandName(match.group("token"))
    except ValueError:
        return None
    if name is CommandName.PING:
        return CommandInvocation(name) if text == CommandName.PING.value else None
    argument = (match.group("argument") or "").strip()
    return CommandInvocation(name, argument)
