"""OpenWeatherMap Client Implementation.

Concrete weather_client_api.Client backed by the OpenWeatherMap current-weather
endpoint. Requests imperial units so temperatures arrive in Fahrenheit and wind
speed in mph.
"""

from __future__ import annotations

import requests

import weather_client_api
from openweather_client_impl.models_impl import OpenWeatherReport, to_report
from weather_client_api import Client

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
UNITS = "imperial"

# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------


class OpenWeatherClient(Client):
    """Concrete weather_client_api.Client for OpenWeatherMap.

    Attributes:
        _api_key: OpenWeatherMap ``appid``.
        _timeout: Request timeout in seconds, or None for no timeout.

    """

    def __init__(self, api_key: str, *, timeout: float | None = None) -> None:
        """Store credentials; the key is only checked by the provider."""
        self._api_key = api_key
        self._timeout = timeout

    def get_current_weather(self, city: str) -> OpenWeatherReport:
        """Fetch current conditions for ``city``.

        Raises:
            requests.RequestException: On network failures or non-2xx responses.
            pydantic.ValidationError: When the body lacks the expected fields.

        """
        response = requests.get(
            OPENWEATHER_URL,
            params={"q": city, "appid": self._api_key, "units": UNITS},
            timeout=self._timeout,
        )
        response.raise_for_status()
        return to_report(response.json())


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


def get_client_impl(api_key: str, *, timeout: float | None = None) -> OpenWeatherClient:
    """Return a new OpenWeatherClient."""
    return OpenWeatherClient(api_key, timeout=timeout)


# ---------------------------------------------------------------------------
# Factory registration
# ---------------------------------------------------------------------------


def register() -> None:
    """Bind the OpenWeatherMap client factory into weather_client_api.get_client."""
    weather_client_api.get_client = get_client_impl
