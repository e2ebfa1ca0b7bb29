#!/usr/bin/env python3
# tools/weather_tool.py - Weather tools backed by OpenWeatherMap

import logging
from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field

from api.openweather_client import OpenWeatherClient
from tools.base_tool import BaseTool

City = Annotated[str, Field(description="The city name to get weather for")]
ForecastCity = Annotated[str, Field(description="The city name to get weather forecast for")]
AlertsCity = Annotated[str, Field(description="The city name to get weather alerts for")]
CountryCode = Annotated[Optional[str], Field(description="Optional: Country code (e.g., 'US', 'UK')")]


class WeatherTool(BaseTool):
    """Current weather, forecast and alerts for a city name."""

    def __init__(self, weather_client: OpenWeatherClient, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        if weather_client is None:
            raise ValueError("weather_client is required")
        self.weather_client = weather_client
        self.logger = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return "weather_tool"

    @property
    def description(self) -> str:
        return "Provides current weather, forecasts and weather alerts for a city."

    def get_capabilities(self) -> List[str]:
        return [
            "get_current_weather",
            "get_weather_forecast",
            "get_weather_alerts"
        ]

    @staticmethod
    def _not_found(city: str, country_code: Optional[str]) -> str:
        return f"Could not find coordinates for {city}, {country_code if country_code is not None else 'null'}."

    async def get_current_weather(self, city: City, country_code: CountryCode = None) -> str:
        """Gets current weather conditions for the specified city."""
        try:
            coordinate = await self.weather_client.resolve_coordinates(city, country_code)
            if coordinate is None:
                return self._not_found(city, country_code)

            weather = await self.weather_client.get_current_weather(coordinate.lat, coordinate.lon)
            return weather or "Could not fetch weather."
        except Exception as e:
            self.logger.error(f"get_current_weather failed for {city}, {country_code}: {e}", exc_info=True)
            return "An error occurred while fetching weather."

    async def get_weather_forecast(self, city: ForecastCity, country_code: CountryCode = None) -> str:
        """Gets weather forecast for the specified city."""
        try:
            coordinate = await self.weather_client.resolve_coordinates(city, country_code)
            if coordinate is None:
                return self._not_found(city, country_code)

            forecast = await self.weather_client.get_forecast(coordinate.lat, coordinate.lon)
            return forecast or "Could not fetch weather forecast."
        except Exception as e:
            self.logger.error(f"get_weather_forecast failed for {city}, {country_code}: {e}", exc_info=True)
            return "An error occurred while fetching weather forecast."

    async def get_weather_alerts(self, city: AlertsCity, country_code: CountryCode = None) -> str:
        """Gets weather alerts/warnings for the specified city."""
        try:
            coordinate = await self.weather_client.resolve_coordinates(city, country_code)
            if coordinate is None:
                return self._not_found(city, country_code)

            alerts = await self.weather_client.get_alerts(coordinate.lat, coordinate.lon)
            return alerts or "Could not fetch weather alerts."
        except Exception as e:
            self.logger.error(f"get_weather_alerts failed for {city}, {country_code}: {e}", exc_info=True)
            return "An error occurred while fetching weather alerts."
