"""OpenWeatherMap current weather adapter.

Infrastructure adapter that implements IWeatherProvider using the
OpenWeatherMap "current weather data" REST API.

Note: This adapter uses the synchronous requests library. The methods are
declared async to match the interface and run inside the Flask request
(which uses asyncio.run() for async routes).
"""

import logging
import os
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urljoin

import requests
from domain.exceptions import (
    InvalidInputError,
    LocationNotFoundError,
    WeatherProviderError,
)
from domain.interfaces import IWeatherProvider
from domain.services.unit_conversion import kelvin_to_celsius
from domain.value_objects import LocationQuery, OutdoorReading

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org"
PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"


class OpenWeatherMapProvider(IWeatherProvider):
    """OpenWeatherMap implementation of the weather provider.

    The API reports temperatures in Kelvin by default; readings are
    converted to °C before leaving the adapter. Coordinates, postal codes
    and place names are all resolved by the weather endpoint itself.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 10,
    ) -> None:
        """Initialize the OpenWeatherMap provider.

        Args:
            api_key: API key (defaults to OPENWEATHER_API_KEY)
            base_url: API root (defaults to OPENWEATHER_BASE_URL or the public API)
            timeout: Request timeout in seconds
        """
        self._api_key = api_key if api_key is not None else os.getenv("OPENWEATHER_API_KEY", "")
        self._base_url = base_url or os.getenv("OPENWEATHER_BASE_URL", DEFAULT_BASE_URL)
        self._timeout = timeout

        _LOGGER.info(
            "OpenWeatherMap provider initialized with URL: %s (API key configured: %s)",
            self._base_url,
            "YES" if self.has_api_key else "NO",
        )

    @property
    def name(self) -> str:
        return "openweathermap"

    @property
    def has_api_key(self) -> bool:
        """Return True when a real API key is configured."""
        return bool(self._api_key) and self._api_key != PLACEHOLDER_API_KEY

    def _weather_url(self) -> str:
        # Ensure base URL ends with / for proper urljoin behavior
        base_url = self._base_url if self._base_url.endswith("/") else f"{self._base_url}/"
        return urljoin(base_url, "data/2.5/weather")

    def _build_params(self, query: LocationQuery) -> dict[str, Any]:
        """Translate a location query into weather endpoint parameters."""
        params: dict[str, Any] = {"appid": self._api_key}
        if query.has_coordinates:
            params["lat"] = query.latitude
            params["lon"] = query.longitude
        elif query.postal_code is not None:
            params["zip"] = f"{query.postal_code.strip()},{query.country_code}"
        else:
            params["q"] = query.place_name.strip()
        return params

    async def is_available(self) -> bool:
        """Check if the API key is configured and accepted.

        Returns:
            True if a request with the configured key succeeds
        """
        if not self.has_api_key:
            _LOGGER.warning("OpenWeatherMap API key not configured")
            return False
        try:
            response = requests.get(
                self._weather_url(),
                params={"lat": 0, "lon": 0, "appid": self._api_key},
                timeout=self._timeout,
            )
            _LOGGER.info("OpenWeatherMap availability check status: %d", response.status_code)
            return response.status_code == 200
        except requests.RequestException as e:
            _LOGGER.error("OpenWeatherMap API error: %s", e)
            return False

    async def fetch_current(self, query: LocationQuery) -> OutdoorReading:
        """Fetch current conditions from OpenWeatherMap.

        Args:
            query: Coordinates, postal code or place name

        Returns:
            OutdoorReading in °C

        Raises:
            WeatherProviderError: If the key is missing, the API is unreachable,
                or the response is malformed
            LocationNotFoundError: If OpenWeatherMap does not know the location
        """
        if not self.has_api_key:
            raise WeatherProviderError(
                "OpenWeatherMap API key not configured. "
                "Get a free key from openweathermap.org and set OPENWEATHER_API_KEY."
            )

        try:
            response = requests.get(
                self._weather_url(),
                params=self._build_params(query),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            _LOGGER.error("Failed to fetch weather for %s: %s", query.describe(), e)
            raise WeatherProviderError(f"Failed to fetch weather data: {e}") from e

        if response.status_code == 404:
            raise LocationNotFoundError(
                f"Weather data not available for {query.describe()}"
            )
        if response.status_code != 200:
            _LOGGER.error(
                "OpenWeatherMap returned HTTP %d for %s",
                response.status_code,
                query.describe(),
            )
            raise WeatherProviderError(
                f"OpenWeatherMap returned HTTP {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise WeatherProviderError("OpenWeatherMap returned invalid JSON") from e

        return self._parse_reading(payload)

    def _parse_reading(self, payload: dict[str, Any]) -> OutdoorReading:
        """Convert a current weather payload into an OutdoorReading.

        Args:
            payload: Decoded JSON from the weather endpoint

        Returns:
            OutdoorReading with the temperature converted from Kelvin
        """
        try:
            temp_k = float(payload["main"]["temp"])
            humidity = float(payload["main"]["humidity"])

            name = payload.get("name") or ""
            country = (payload.get("sys") or {}).get("country") or ""
            label = f"{name}, {country}" if name and country else name or country

            weather = payload.get("weather") or []
            conditions = None
            if weather and weather[0].get("description"):
                conditions = str(weather[0]["description"])

            observed_at = None
            if payload.get("dt") is not None:
                observed_at = datetime.fromtimestamp(int(payload["dt"]), tz=timezone.utc)
        except (AttributeError, KeyError, TypeError, ValueError, OverflowError, OSError) as e:
            raise WeatherProviderError(f"Malformed OpenWeatherMap response: {e}") from e

        try:
            return OutdoorReading(
                temperature_celsius=kelvin_to_celsius(temp_k),
                relative_humidity_percent=humidity,
                location_label=label,
                conditions=conditions,
                observed_at=observed_at,
            )
        except InvalidInputError as e:
            raise WeatherProviderError(f"Implausible OpenWeatherMap reading: {e}") from e
