"""Public export surface for ``weather_client_api``."""

from weather_client_api.client import Client, get_client
from weather_client_api.report import WeatherReport

__all__ = ["Client", "WeatherReport", "get_client"]
