"""Abstract schema for a current-weather report."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["WeatherReport"]


class WeatherReport(ABC):
    """Current conditions for one location."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Return the location name reported by the provider."""
        raise NotImplementedError

    @property
    @abstractmethod
    def description(self) -> str:
        """Return the textual description of the conditions."""
        raise NotImplementedError

    @property
    @abstractmethod
    def temperature(self) -> float:
        """Return the temperature in degrees Fahrenheit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def humidity(self) -> float:
        """Return the relative humidity in percent."""
        raise NotImplementedError

    @property
    @abstractmethod
    def wind_speed(self) -> float:
        """Return the wind speed in miles per hour."""
        raise NotImplementedError
