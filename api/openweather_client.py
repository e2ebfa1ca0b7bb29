import json
import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import httpx

from cnst.error_kind import ErrorKind
from models.api_result import ApiResult
from models.coordinate import Coordinate
from models.weather import AlertEntry, CurrentWeather, ForecastEntry, format_alerts, format_forecast

DEFAULT_GEO_BASE_URL = "http://api.openweathermap.org/geo/1.0"
DEFAULT_ONECALL_BASE_URL = "https://api.openweathermap.org/data/3.0/onecall"
DEFAULT_FORECAST_BASE_URL = "https://api.openweathermap.org/data/2.5/forecast"

GEOCODING_LIMIT = 5
CURRENT_EXCLUDE = "minutely,hourly,alerts"
ALERTS_EXCLUDE = "minutely,hourly,current,daily"

NO_ALERTS = "No weather alerts for this location."


class OpenWeatherClient:
    """Resolves cities to coordinates and coordinates to formatted weather text.

    Every public operation issues at most one GET against OpenWeatherMap and
    never raises on upstream failures: geocoding and current weather return
    None, forecast and alerts return a fixed fallback sentence.
    """

    def __init__(self, api_key: str, client: Optional[httpx.AsyncClient] = None,
                 geo_base_url: Optional[str] = None, onecall_base_url: Optional[str] = None,
                 forecast_base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key or ""
        self.geo_base_url = (geo_base_url or DEFAULT_GEO_BASE_URL).rstrip("/")
        self.onecall_base_url = onecall_base_url or DEFAULT_ONECALL_BASE_URL
        self.forecast_base_url = forecast_base_url or DEFAULT_FORECAST_BASE_URL
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=httpx.Timeout(timeout)) if timeout else httpx.AsyncClient()
        self.client = client
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Dict[str, Any],
                      client: Optional[httpx.AsyncClient] = None) -> 'OpenWeatherClient':
        return cls(
            api_key=settings.get("api_key", ""),
            client=client,
            geo_base_url=settings.get("geo_base_url"),
            onecall_base_url=settings.get("onecall_base_url"),
            forecast_base_url=settings.get("forecast_base_url"),
            timeout=settings.get("timeout"),
        )

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    def _redact(self, text: str) -> str:
        if self.api_key:
            return text.replace(self.api_key, "***")
        return text

    def _describe_error(self, error: Exception) -> str:
        if isinstance(error, httpx.HTTPStatusError):
            return f"HTTP {error.response.status_code}"
        return self._redact(f"{type(error).__name__}: {error}")

    async def _call_api(self, url: str, params: Dict[str, Any], operation: str) -> ApiResult[Any]:
        query = dict(params)
        query["appid"] = self.api_key
        try:
            async with self.client.stream("GET", url, params=query) as response:
                await response.aread()
                response.raise_for_status()
                document = response.json(parse_float=Decimal)
        except (UnicodeEncodeError, httpx.InvalidURL) as e:
            message = self._redact(f"{type(e).__name__}: {e}")
            self.logger.error("%s: could not build request for URL %s: %s", operation, url, message)
            return ApiResult.failure(ErrorKind.INVALID_INPUT, message)
        except httpx.HTTPError as e:
            message = self._describe_error(e)
            self.logger.error("%s: API call failed for URL %s: %s", operation, url, message)
            return ApiResult.failure(ErrorKind.UPSTREAM_UNAVAILABLE, message)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            message = self._redact(str(e))
            self.logger.error("%s: error parsing JSON for URL %s: %s", operation, url, message)
            return ApiResult.failure(ErrorKind.MALFORMED_RESPONSE, message)
        return ApiResult.success(document)

    async def lookup_coordinates(self, city: str, country_code: Optional[str] = None) -> ApiResult[Coordinate]:
        """Geocode a city, keeping the reason when no coordinate is produced."""
        result = await self._geocode(city, country_code)
        if result.ok:
            self.logger.debug("Resolved %s, %s to %s", city, country_code, result.value)
        else:
            level = logging.ERROR if result.error.is_failure else logging.WARNING
            self.logger.log(level, "No coordinates for city: %s, countryCode: %s (%s): %s",
                            city, country_code, result.error, result.message)
        return result

    async def _geocode(self, city: str, country_code: Optional[str]) -> ApiResult[Coordinate]:
        if not city or not city.strip():
            return ApiResult.failure(ErrorKind.INVALID_INPUT, "City name is null or empty")

        query = f"{city},{country_code}" if country_code else city
        url = f"{self.geo_base_url}/direct"
        result = await self._call_api(url, {"q": query, "limit": GEOCODING_LIMIT}, "geocoding")
        if not result.ok:
            return result

        locations = result.value
        if not isinstance(locations, list) or (locations and not isinstance(locations[0], dict)):
            return ApiResult.failure(ErrorKind.MALFORMED_RESPONSE, "Geocoding response is not a list of locations")

        if not locations:
            return ApiResult.failure(ErrorKind.NOT_FOUND, "No locations returned")

        try:
            coordinate = Coordinate.from_dict(locations[0])
        except (TypeError, ValueError) as e:
            return ApiResult.failure(ErrorKind.MALFORMED_RESPONSE, f"Unreadable lat/lon: {e}")

        if coordinate is None:
            return ApiResult.failure(ErrorKind.NOT_FOUND, "Lat or Lon missing")

        if not coordinate.in_range:
            return ApiResult.failure(ErrorKind.MALFORMED_RESPONSE, f"Coordinates out of range: {coordinate}")

        return ApiResult.success(coordinate)

    async def resolve_coordinates(self, city: str, country_code: Optional[str] = None) -> Optional[Coordinate]:
        result = await self.lookup_coordinates(city, country_code)
        return result.value

    async def get_current_weather(self, lat: float, lon: float) -> Optional[str]:
        if not Coordinate.is_valid(lat, lon):
            self.logger.error("Invalid latitude or longitude: Lat=%s, Lon=%s", lat, lon)
            return None

        params = {"lat": lat, "lon": lon, "exclude": CURRENT_EXCLUDE, "units": "metric"}
        result = await self._call_api(self.onecall_base_url, params, "current weather")
        if not result.ok:
            return None

        try:
            return CurrentWeather.from_dict(result.value).format()
        except (KeyError, IndexError) as e:
            self.logger.error("Key not found in current weather response for Lat=%s, Lon=%s: %r", lat, lon, e)
            return None
        except Exception as e:
            self.logger.error("Error processing weather data for Lat=%s, Lon=%s: %s", lat, lon, e)
            return None

    async def get_forecast(self, lat: float, lon: float) -> str:
        if not Coordinate.is_valid(lat, lon):
            self.logger.error("Invalid latitude or longitude for forecast: Lat=%s, Lon=%s", lat, lon)
            return "Could not fetch weather forecast."

        params = {"lat": lat, "lon": lon, "units": "metric"}
        result = await self._call_api(self.forecast_base_url, params, "forecast")
        if not result.ok:
            return "Could not fetch weather forecast."

        try:
            return format_forecast(ForecastEntry.list_from_dict(result.value))
        except (KeyError, IndexError) as e:
            self.logger.error("Key not found in forecast response for Lat=%s, Lon=%s: %r", lat, lon, e)
            return "Could not parse weather forecast."
        except Exception as e:
            self.logger.error("Error processing weather forecast data for Lat=%s, Lon=%s: %s", lat, lon, e)
            return "Could not process weather forecast."

    async def get_alerts(self, lat: float, lon: float) -> str:
        if not Coordinate.is_valid(lat, lon):
            self.logger.error("Invalid latitude or longitude for alerts: Lat=%s, Lon=%s", lat, lon)
            return "Could not fetch weather alerts."

        params = {"lat": lat, "lon": lon, "exclude": ALERTS_EXCLUDE, "units": "metric"}
        result = await self._call_api(self.onecall_base_url, params, "alerts")
        if not result.ok:
            return "Could not fetch weather alerts."

        try:
            raw_alerts = result.value.get("alerts")
            if not raw_alerts:
                self.logger.info("No weather alerts for Lat=%s, Lon=%s", lat, lon)
                return NO_ALERTS
            return format_alerts([AlertEntry.from_dict(alert) for alert in raw_alerts])
        except (KeyError, IndexError) as e:
            self.logger.error("Key not found in alerts response for Lat=%s, Lon=%s: %r", lat, lon, e)
            return "Could not parse weather alerts."
        except Exception as e:
            self.logger.error("Error processing weather alerts data for Lat=%s, Lon=%s: %s", lat, lon, e)
            return "Could not process weather alerts."
