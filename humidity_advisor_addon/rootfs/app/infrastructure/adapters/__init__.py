"""Infrastructure adapters for weather and location data.

These adapters implement domain interfaces on top of public weather
and geocoding REST APIs.
"""

from .open_meteo_geocoder import OpenMeteoGeocoder
from .open_meteo_provider import OpenMeteoProvider
from .openweathermap_provider import OpenWeatherMapProvider

__all__ = [
    "OpenMeteoGeocoder",
    "OpenMeteoProvider",
    "OpenWeatherMapProvider",
]
