"""OpenWeatherMap payload schemas and report implementation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from weather_client_api import WeatherReport

# ---------------------------------------------------------------------------
# Payload schemas
# ---------------------------------------------------------------------------


class WeatherCondition(BaseModel):
    """One entry of the ``weather`` array."""

    description: str


class MainReadings(BaseModel):
    """The ``main`` block with temperature and humidity."""

    temp: int | float
    humidity: int | float


class WindReadings(BaseModel):
    """The ``wind`` block."""

    speed: int | float


class CurrentWeatherPayload(BaseModel):
    """Subset of the current-weather response the bot relies on."""

    name: str
    weather: list[WeatherCondition] = Field(min_length=1)
    main: MainReadings
    wind: WindReadings


# ---------------------------------------------------------------------------
# Report implementation
# ---------------------------------------------------------------------------


class OpenWeatherReport(WeatherReport):
    """WeatherReport backed by a validated OpenWeatherMap payload."""

    def __init__(self, payload: CurrentWeatherPayload) -> None:
        """Wrap a validated payload."""
        self._payload = payload

    @property
    def location(self) -> str:
        """Get the city name."""
        return self._payload.name

    @property
    def description(self) -> str:
        """Get the first condition's description."""
        return self._payload.weather[0].description

    @property
    def temperature(self) -> float:
        """Get the temperature as reported."""
        return self._payload.main.temp

    @property
    def humidity(self) -> float:
        """Get the humidity as reported."""
        return self._payload.main.humidity

    @property
    def wind_speed(self) -> float:
        """Get the wind speed as reported."""
        return self._payload.wind.speed


def to_report(data: Any) -> OpenWeatherReport:  # noqa: ANN401
    """Validate a decoded JSON body into an OpenWeatherReport.

    Raises:
        pydantic.ValidationError: When required fields are missing or mistyped.

    """
    return OpenWeatherReport(CurrentWeatherPayload.model_validate(data))
