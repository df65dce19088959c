"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API with an
in-memory weather provider instead of live weather services.
"""

from typing import Any
from unittest.mock import patch

import pytest

from application.services import HumidityApplicationService
from domain.exceptions import LocationNotFoundError, WeatherProviderError
from domain.interfaces import IWeatherProvider
from domain.value_objects import LocationQuery, OutdoorReading

UNKNOWN_PLACE = "Atlantis"
OFFLINE_PLACE = "Offline"


class StubWeatherProvider(IWeatherProvider):
    """Weather provider serving a fixed reading.

    The place names UNKNOWN_PLACE and OFFLINE_PLACE simulate an unknown
    location and an unreachable upstream API respectively.
    """

    def __init__(self, reading: OutdoorReading) -> None:
        self._reading = reading
        self.queries: list[LocationQuery] = []

    @property
    def name(self) -> str:
        return "stub"

    async def fetch_current(self, query: LocationQuery) -> OutdoorReading:
        self.queries.append(query)
        if query.place_name == UNKNOWN_PLACE:
            raise LocationNotFoundError(f"No location found for {query.describe()}")
        if query.place_name == OFFLINE_PLACE:
            raise WeatherProviderError("Failed to fetch weather data: connection refused")
        return self._reading

    async def is_available(self) -> bool:
        return True


@pytest.fixture
def outdoor_reading() -> OutdoorReading:
    """Mild, damp outdoor conditions (10 °C, 80 % RH)."""
    return OutdoorReading(
        temperature_celsius=10.0,
        relative_humidity_percent=80.0,
        location_label="Cambridge, US",
        conditions="light rain",
    )


@pytest.fixture
def stub_provider(outdoor_reading: OutdoorReading) -> StubWeatherProvider:
    return StubWeatherProvider(outdoor_reading)


@pytest.fixture
def humidity_service(stub_provider: StubWeatherProvider) -> HumidityApplicationService:
    """Create a HumidityApplicationService backed by the stub provider."""
    return HumidityApplicationService(stub_provider)


@pytest.fixture
def flask_app(humidity_service: HumidityApplicationService) -> Any:
    """Create a Flask test app with mocked services.

    This fixture patches the global humidity_service in the server module.
    """
    with patch.dict('os.environ', {
        'WEATHER_PROVIDER': 'open_meteo',
        'OPENWEATHER_API_KEY': '',
    }):
        import infrastructure.api.server as server_module

        with patch.object(server_module, 'humidity_service', humidity_service):
            app = server_module.app
            app.config['TESTING'] = True
            yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()
