"""Open-Meteo current weather adapter.

Infrastructure adapter that implements IWeatherProvider using the
Open-Meteo forecast API. Open-Meteo needs no API key and reports in °C;
postal codes and place names are resolved to coordinates first.
"""

import logging
import os
from datetime import datetime
from typing import Any
from urllib.parse import urljoin

import requests
from domain.exceptions import InvalidInputError, WeatherProviderError
from domain.interfaces import ILocationResolver, IWeatherProvider
from domain.value_objects import LocationQuery, OutdoorReading

from .open_meteo_geocoder import OpenMeteoGeocoder

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.open-meteo.com"
CURRENT_VARIABLES = "temperature_2m,relative_humidity_2m,weather_code"

# WMO weather interpretation codes
WMO_WEATHER_CODES: dict[int, str] = {
    0: "clear sky",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog",
    48: "depositing rime fog",
    51: "light drizzle",
    53: "moderate drizzle",
    55: "dense drizzle",
    56: "light freezing drizzle",
    57: "dense freezing drizzle",
    61: "slight rain",
    63: "moderate rain",
    65: "heavy rain",
    66: "light freezing rain",
    67: "heavy freezing rain",
    71: "slight snow fall",
    73: "moderate snow fall",
    75: "heavy snow fall",
    77: "snow grains",
    80: "slight rain showers",
    81: "moderate rain showers",
    82: "violent rain showers",
    85: "slight snow showers",
    86: "heavy snow showers",
    95: "thunderstorm",
    96: "thunderstorm with slight hail",
    99: "thunderstorm with heavy hail",
}


class OpenMeteoProvider(IWeatherProvider):
    """Open-Meteo implementation of the weather provider."""

    def __init__(
        self,
        geocoder: ILocationResolver | None = None,
        base_url: str | None = None,
        timeout: float = 10,
    ) -> None:
        """Initialize the Open-Meteo provider.

        Args:
            geocoder: Resolver for postal codes and place names
                (defaults to OpenMeteoGeocoder)
            base_url: API root (defaults to OPEN_METEO_BASE_URL or the public API)
            timeout: Request timeout in seconds
        """
        self._geocoder = geocoder or OpenMeteoGeocoder(timeout=timeout)
        self._base_url = base_url or os.getenv("OPEN_METEO_BASE_URL", DEFAULT_BASE_URL)
        self._timeout = timeout

        _LOGGER.info("Open-Meteo provider initialized with URL: %s", self._base_url)

    @property
    def name(self) -> str:
        return "open_meteo"

    def _forecast_url(self) -> str:
        base_url = self._base_url if self._base_url.endswith("/") else f"{self._base_url}/"
        return urljoin(base_url, "v1/forecast")

    async def is_available(self) -> bool:
        """Check if the forecast API answers.

        Returns:
            True if a minimal forecast request succeeds
        """
        try:
            response = requests.get(
                self._forecast_url(),
                params={"latitude": 0, "longitude": 0, "current": "temperature_2m"},
                timeout=self._timeout,
            )
            _LOGGER.info("Open-Meteo availability check status: %d", response.status_code)
            return response.status_code == 200
        except requests.RequestException as e:
            _LOGGER.error("Open-Meteo API error: %s", e)
            return False

    async def fetch_current(self, query: LocationQuery) -> OutdoorReading:
        """Fetch current conditions from Open-Meteo.

        Args:
            query: Coordinates, postal code or place name

        Returns:
            OutdoorReading in °C

        Raises:
            WeatherProviderError: If the API is unreachable or the response is malformed
            LocationNotFoundError: If the geocoder cannot resolve the query
        """
        location = await self._geocoder.resolve(query)

        try:
            response = requests.get(
                self._forecast_url(),
                params={
                    "latitude": location.latitude,
                    "longitude": location.longitude,
                    "current": CURRENT_VARIABLES,
                },
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            _LOGGER.error("Failed to fetch weather for %s: %s", location.label, e)
            raise WeatherProviderError(f"Failed to fetch weather data: {e}") from e

        if response.status_code != 200:
            _LOGGER.error(
                "Open-Meteo returned HTTP %d for %s",
                response.status_code,
                location.label,
            )
            raise WeatherProviderError(f"Open-Meteo returned HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise WeatherProviderError("Open-Meteo returned invalid JSON") from e

        return self._parse_reading(payload, location.label)

    def _parse_reading(self, payload: dict[str, Any], label: str) -> OutdoorReading:
        """Convert a forecast payload's "current" block into an OutdoorReading."""
        try:
            current = payload["current"]
            temp_c = float(current["temperature_2m"])
            humidity = float(current["relative_humidity_2m"])

            conditions = None
            code = current.get("weather_code")
            if code is not None:
                conditions = WMO_WEATHER_CODES.get(int(code))

            observed_at = None
            if current.get("time"):
                observed_at = datetime.fromisoformat(current["time"])
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise WeatherProviderError(f"Malformed Open-Meteo response: {e}") from e

        try:
            return OutdoorReading(
                temperature_celsius=temp_c,
                relative_humidity_percent=humidity,
                location_label=label,
                conditions=conditions,
                observed_at=observed_at,
            )
        except InvalidInputError as e:
            raise WeatherProviderError(f"Implausible Open-Meteo reading: {e}") from e
