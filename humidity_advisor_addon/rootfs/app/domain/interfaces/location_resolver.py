"""Location resolver interface.

Contract for turning postal codes and place names into coordinates.
"""

from abc import ABC, abstractmethod

from domain.value_objects import LocationQuery, ResolvedLocation


class ILocationResolver(ABC):
    """Contract for resolving a location query to coordinates."""

    @abstractmethod
    async def resolve(self, query: LocationQuery) -> ResolvedLocation:
        """Resolve a location query.

        Args:
            query: Postal code or place name query

        Returns:
            ResolvedLocation with coordinates and a display label

        Raises:
            LocationNotFoundError: If nothing matches the query
            WeatherProviderError: If the resolver service is unreachable
        """
        pass
