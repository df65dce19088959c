"""Recommendation classifier.

Maps a predicted indoor relative humidity onto a comfort category.
"""

import math

from domain.exceptions import InvalidInputError
from domain.value_objects import (
    Recommendation,
    RecommendationCategory,
    RecommendationSeverity,
)

# Band edges in percent RH. Both ends of the optimal band are inclusive,
# the caution band includes its upper edge.
TOO_LOW_BELOW = 30.0
OPTIMAL_UP_TO = 50.0
CAUTION_UP_TO = 60.0

RECOMMENDATIONS: dict[RecommendationCategory, Recommendation] = {
    RecommendationCategory.TOO_LOW: Recommendation(
        category=RecommendationCategory.TOO_LOW,
        message=(
            "Not recommended. Indoor humidity would be too low, which can cause "
            "dry skin, irritated airways, and static electricity."
        ),
        severity=RecommendationSeverity.BAD,
    ),
    RecommendationCategory.OPTIMAL: Recommendation(
        category=RecommendationCategory.OPTIMAL,
        message=(
            "Great time to open windows! The indoor humidity will be in the "
            "optimal comfort range (30-50%)."
        ),
        severity=RecommendationSeverity.GOOD,
    ),
    RecommendationCategory.CAUTION: Recommendation(
        category=RecommendationCategory.CAUTION,
        message=(
            "Caution. Indoor humidity would be slightly high. You may feel "
            "comfortable, but prolonged exposure could promote mold growth."
        ),
        severity=RecommendationSeverity.WARNING,
    ),
    RecommendationCategory.TOO_HIGH: Recommendation(
        category=RecommendationCategory.TOO_HIGH,
        message=(
            "Not recommended. Indoor humidity would be too high, increasing the "
            "risk of mold growth and discomfort."
        ),
        severity=RecommendationSeverity.BAD,
    ),
}


def categorize(indoor_rh: float) -> RecommendationCategory:
    """Return the comfort category for an indoor relative humidity.

    Args:
        indoor_rh: Indoor relative humidity in percent

    Returns:
        TOO_LOW below 30, OPTIMAL in [30, 50], CAUTION in (50, 60],
        TOO_HIGH above 60

    Raises:
        InvalidInputError: If indoor_rh is NaN
    """
    if math.isnan(indoor_rh):
        raise InvalidInputError("indoor relative humidity cannot be NaN")
    if indoor_rh < TOO_LOW_BELOW:
        return RecommendationCategory.TOO_LOW
    if indoor_rh <= OPTIMAL_UP_TO:
        return RecommendationCategory.OPTIMAL
    if indoor_rh <= CAUTION_UP_TO:
        return RecommendationCategory.CAUTION
    return RecommendationCategory.TOO_HIGH


def classify(indoor_rh: float) -> Recommendation:
    """Classify an indoor relative humidity into a recommendation."""
    return RECOMMENDATIONS[categorize(indoor_rh)]
