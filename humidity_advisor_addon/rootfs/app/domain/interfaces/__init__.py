"""Domain interfaces for external collaborators.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .location_resolver import ILocationResolver
from .weather_provider import IWeatherProvider

__all__ = [
    "ILocationResolver",
    "IWeatherProvider",
]
