"""Weather provider interface.

Contract for fetching current outdoor conditions.
"""

from abc import ABC, abstractmethod

from domain.value_objects import LocationQuery, OutdoorReading


class IWeatherProvider(ABC):
    """Contract for a source of current outdoor conditions.

    Implementations convert whatever unit their upstream API uses to °C
    before building the OutdoorReading.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the provider, e.g. 'open_meteo'."""
        pass

    @abstractmethod
    async def fetch_current(self, query: LocationQuery) -> OutdoorReading:
        """Fetch the current outdoor conditions for a location.

        Args:
            query: Where to fetch the weather for

        Returns:
            OutdoorReading with temperature in °C and relative humidity

        Raises:
            WeatherProviderError: If the provider is unreachable or misconfigured
            LocationNotFoundError: If the location is unknown to the provider
        """
        pass

    @abstractmethod
    async def is_available(self) -> bool:
        """Check if the provider can currently be used.

        Returns:
            True if the provider is configured and reachable
        """
        pass
