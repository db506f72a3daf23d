"""Public exports for the OpenWeatherMap client implementation package."""

from openweather_client_impl.openweather_impl import register

register()
