"""Domain exceptions.

Errors raised by the psychrometric engine and by weather provider
implementations.
"""


class InvalidInputError(ValueError):
    """Raised when an input value is outside its accepted range."""

    pass


class TemperatureDomainError(ValueError):
    """Raised when a temperature is outside the domain of the Magnus formula.

    The saturation vapor pressure approximation has a singularity at
    -237.3 °C; at or below it the result is meaningless.
    """

    pass


class WeatherProviderError(ConnectionError):
    """Raised when a weather provider cannot deliver a reading."""

    pass


class LocationNotFoundError(LookupError, ValueError):
    """Raised when a location query does not resolve to a place."""

    pass
