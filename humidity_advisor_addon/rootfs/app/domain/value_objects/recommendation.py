"""Recommendation value objects."""

from dataclasses import dataclass
from enum import Enum


class RecommendationCategory(str, Enum):
    """Comfort category of a predicted indoor relative humidity."""

    TOO_LOW = "too_low"
    OPTIMAL = "optimal"
    CAUTION = "caution"
    TOO_HIGH = "too_high"


class RecommendationSeverity(str, Enum):
    """How strongly the recommendation argues for or against opening windows."""

    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"


@dataclass(frozen=True)
class Recommendation:
    """Outcome of classifying a predicted indoor relative humidity.

    Attributes:
        category: Comfort band the humidity falls into
        message: Human-readable advice
        severity: good / warning / bad
    """

    category: RecommendationCategory
    message: str
    severity: RecommendationSeverity

    def __post_init__(self) -> None:
        """Validate recommendation values."""
        if not self.message:
            raise ValueError("message cannot be empty")

    @property
    def windows_recommended(self) -> bool:
        """Return True when opening the windows is advised."""
        return self.category is RecommendationCategory.OPTIMAL
