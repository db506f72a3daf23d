"""Abstract interfaces for weather data APIs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weather_client_api.report import WeatherReport

__all__ = ["Client", "get_client"]


class Client(ABC):
    """The contract for current-weather lookups."""

    @abstractmethod
    def get_current_weather(self, city: str) -> WeatherReport:
        """Fetch current conditions for a city.

        Args:
            city: Free-form city name, may contain spaces.

        Returns:
            WeatherReport with temperature in degrees Fahrenheit and wind speed in mph.

        """
        raise NotImplementedError


def get_client(api_key: str, *, timeout: float | None = None) -> Client:
    """Return the active weather client implementation.

    Args:
        api_key: Provider API key. Not validated here; a bad key fails at call time.
        timeout: Optional request timeout in seconds. ``None`` waits indefinitely.

    Returns:
        Client implementation.

    """
    raise NotImplementedError
