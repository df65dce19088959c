"""Open-Meteo geocoding adapter.

Infrastructure adapter that implements ILocationResolver using the
Open-Meteo geocoding search API (no API key required).
"""

import logging
import os
from typing import Any
from urllib.parse import urljoin

import requests
from domain.exceptions import LocationNotFoundError, WeatherProviderError
from domain.interfaces import ILocationResolver
from domain.value_objects import LocationQuery, ResolvedLocation

_LOGGER = logging.getLogger(__name__)

DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com"


class OpenMeteoGeocoder(ILocationResolver):
    """Resolve postal codes and place names to coordinates via Open-Meteo."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10,
        language: str = "en",
    ) -> None:
        """Initialize the geocoder.

        Args:
            base_url: API root (defaults to OPEN_METEO_GEOCODING_URL or the public API)
            timeout: Request timeout in seconds
            language: Language of returned place names
        """
        self._base_url = base_url or os.getenv("OPEN_METEO_GEOCODING_URL", DEFAULT_GEOCODING_URL)
        self._timeout = timeout
        self._language = language

    def _search_url(self) -> str:
        base_url = self._base_url if self._base_url.endswith("/") else f"{self._base_url}/"
        return urljoin(base_url, "v1/search")

    async def resolve(self, query: LocationQuery) -> ResolvedLocation:
        """Resolve a postal code or place name.

        Coordinate queries resolve to themselves without a request.

        Args:
            query: Location query

        Returns:
            ResolvedLocation of the best match

        Raises:
            LocationNotFoundError: If the search returns no match
            WeatherProviderError: If the geocoding API is unreachable
        """
        if query.has_coordinates:
            return ResolvedLocation(
                latitude=query.latitude,
                longitude=query.longitude,
                label=f"{query.latitude:.2f}, {query.longitude:.2f}",
            )

        params: dict[str, Any] = {
            "count": 1,
            "language": self._language,
            "format": "json",
        }
        if query.postal_code is not None:
            params["name"] = query.postal_code.strip()
            params["countryCode"] = query.country_code
        else:
            params["name"] = query.place_name.strip()

        try:
            response = requests.get(
                self._search_url(),
                params=params,
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            _LOGGER.error("Geocoding failed for %s: %s", query.describe(), e)
            raise WeatherProviderError(f"Failed to resolve location: {e}") from e
        except ValueError as e:
            raise WeatherProviderError("Geocoding API returned invalid JSON") from e

        results = payload.get("results") or []
        if not results:
            raise LocationNotFoundError(f"No location found for {query.describe()}")

        best = results[0]
        try:
            location = ResolvedLocation(
                latitude=float(best["latitude"]),
                longitude=float(best["longitude"]),
                label=self._label(best),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise WeatherProviderError(f"Malformed geocoding response: {e}") from e

        _LOGGER.info(
            "Resolved %s to %s (%.4f, %.4f)",
            query.describe(),
            location.label,
            location.latitude,
            location.longitude,
        )
        return location

    @staticmethod
    def _label(result: dict[str, Any]) -> str:
        """Build "<name>, <country code>" from a search result."""
        name = result.get("name") or ""
        country = result.get("country_code") or ""
        if name and country:
            return f"{name}, {country}"
        return name or country
