"""Humidity Application Service.

Main application service that coordinates the psychrometric domain and
the weather provider for the advisory use cases.
"""

import logging

from domain.interfaces import IWeatherProvider
from domain.services import ComfortSweepService, HumidityAdvisoryService, classify
from domain.value_objects import (
    TARGET_TEMPERATURE_BOUNDS,
    ComfortSweep,
    HumidityPrediction,
    LocationQuery,
    OutdoorReading,
    Recommendation,
    TargetTemperature,
    Temperature,
    TemperatureUnit,
)

_LOGGER = logging.getLogger(__name__)


class HumidityApplicationService:
    """Application service for humidity advice.

    This service is the main entry point for all advisory operations.
    It fetches outdoor readings through the configured provider and hands
    them to the domain services.
    """

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        advisory_service: HumidityAdvisoryService | None = None,
        sweep_service: ComfortSweepService | None = None,
    ) -> None:
        """Initialize the humidity application service.

        Args:
            weather_provider: Source of outdoor readings
            advisory_service: Domain advisory service (default instance if None)
            sweep_service: Domain sweep service (default instance if None)
        """
        self._weather_provider = weather_provider
        self._advisory_service = advisory_service or HumidityAdvisoryService()
        self._sweep_service = sweep_service or ComfortSweepService()

    @property
    def provider_name(self) -> str:
        """Name of the configured weather provider."""
        return self._weather_provider.name

    async def fetch_reading(self, query: LocationQuery) -> OutdoorReading:
        """Fetch the current outdoor reading for a location.

        Args:
            query: Where to fetch the weather for

        Returns:
            Current OutdoorReading

        Raises:
            WeatherProviderError: If the provider fails
            LocationNotFoundError: If the location is unknown
        """
        _LOGGER.info(
            "Fetching outdoor conditions for %s from %s",
            query.describe(),
            self._weather_provider.name,
        )
        reading = await self._weather_provider.fetch_current(query)
        _LOGGER.info(
            "Outdoor conditions at %s: %.1f°C, %.0f%% RH",
            reading.location_label or query.describe(),
            reading.temperature_celsius,
            reading.relative_humidity_percent,
        )
        return reading

    async def advise_for_location(
        self,
        query: LocationQuery,
        target: TargetTemperature | Temperature,
    ) -> HumidityPrediction:
        """Fetch current weather for a location and predict indoor humidity.

        Args:
            query: Where to fetch the weather for
            target: Indoor target temperature

        Returns:
            HumidityPrediction for the fetched reading
        """
        reading = await self.fetch_reading(query)
        return await self.advise(reading, target)

    async def advise(
        self,
        reading: OutdoorReading,
        target: TargetTemperature | Temperature,
    ) -> HumidityPrediction:
        """Predict indoor humidity for an explicit reading.

        Args:
            reading: Outdoor conditions
            target: Indoor target temperature

        Returns:
            HumidityPrediction with recommendation
        """
        prediction = self._advisory_service.evaluate(reading, target)
        _LOGGER.debug(
            "Prediction: %.1f%% indoor RH at %.1f°C (%s)",
            prediction.predicted_relative_humidity,
            prediction.indoor_temperature_celsius,
            prediction.recommendation.category.value,
        )
        return prediction

    async def sweep(
        self,
        reading: OutdoorReading,
        unit: TemperatureUnit = TemperatureUnit.CELSIUS,
    ) -> ComfortSweep:
        """Predict indoor humidity across the whole target control.

        Args:
            reading: Outdoor conditions
            unit: Control unit; Kelvin falls back to Celsius

        Returns:
            ComfortSweep over the control range
        """
        if unit not in TARGET_TEMPERATURE_BOUNDS:
            unit = TemperatureUnit.CELSIUS
        return self._sweep_service.sweep(reading, unit)

    def classify(self, indoor_rh: float) -> Recommendation:
        """Classify a predicted indoor relative humidity."""
        return classify(indoor_rh)

    async def is_provider_available(self) -> bool:
        """Check if the weather provider can be used.

        Returns:
            True if the provider is configured and reachable
        """
        return await self._weather_provider.is_available()

    async def get_status(self) -> dict:
        """Get the current status of the advisory service.

        Returns:
            Dictionary with status information
        """
        available = await self.is_provider_available()
        return {
            "provider": self._weather_provider.name,
            "provider_available": available,
            "target_ranges": {
                unit.value: {"min": low, "max": high}
                for unit, (low, high) in TARGET_TEMPERATURE_BOUNDS.items()
            },
        }
