"""Location query value objects.

Describe where to fetch weather for, and where a query resolved to.
"""

from dataclasses import dataclass

from domain.exceptions import InvalidInputError


@dataclass(frozen=True)
class LocationQuery:
    """A request for weather at a place.

    Exactly one way of locating the place must be given: coordinates,
    a postal code, or a free-form place name.

    Attributes:
        latitude: Latitude in degrees (-90 to 90)
        longitude: Longitude in degrees (-180 to 180)
        postal_code: Postal/ZIP code
        country_code: ISO country code used with postal_code
        place_name: Free-form place name, e.g. "Lyon" or "Portland, OR"
    """

    latitude: float | None = None
    longitude: float | None = None
    postal_code: str | None = None
    country_code: str = "US"
    place_name: str | None = None

    def __post_init__(self) -> None:
        """Validate that exactly one locator is provided."""
        has_coordinates = self.latitude is not None or self.longitude is not None
        locators = [
            has_coordinates,
            self.postal_code is not None,
            self.place_name is not None,
        ]
        if sum(locators) != 1:
            raise InvalidInputError(
                "Provide exactly one of coordinates, postal_code or place_name"
            )
        if has_coordinates:
            if self.latitude is None or self.longitude is None:
                raise InvalidInputError("latitude and longitude must be given together")
            if not -90 <= self.latitude <= 90:
                raise InvalidInputError(
                    f"latitude must be between -90 and 90, got {self.latitude}"
                )
            if not -180 <= self.longitude <= 180:
                raise InvalidInputError(
                    f"longitude must be between -180 and 180, got {self.longitude}"
                )
        for field_name in ("postal_code", "place_name", "country_code"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise InvalidInputError(
                    f"{field_name} must be a string, got {type(value).__name__}"
                )
        if self.postal_code is not None and not self.postal_code.strip():
            raise InvalidInputError("postal_code cannot be empty")
        if self.place_name is not None and not self.place_name.strip():
            raise InvalidInputError("place_name cannot be empty")
        if not self.country_code or not self.country_code.strip():
            raise InvalidInputError("country_code cannot be empty")

    @property
    def has_coordinates(self) -> bool:
        """Return True when the query is a coordinate pair."""
        return self.latitude is not None and self.longitude is not None

    def describe(self) -> str:
        """Return a short description for logging."""
        if self.has_coordinates:
            return f"({self.latitude:.4f}, {self.longitude:.4f})"
        if self.postal_code is not None:
            return f"postal code {self.postal_code.strip()}, {self.country_code}"
        return f"place {self.place_name!r}"


@dataclass(frozen=True)
class ResolvedLocation:
    """Coordinates and display name a location query resolved to."""

    latitude: float
    longitude: float
    label: str
