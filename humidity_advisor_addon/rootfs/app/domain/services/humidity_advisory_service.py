"""Humidity advisory service.

Domain service that runs the psychrometric engine for one outdoor reading
and one indoor target, and classifies the outcome.
"""

import logging
from datetime import datetime

from domain.value_objects import (
    HumidityPrediction,
    OutdoorReading,
    TargetTemperature,
    Temperature,
)

from . import psychrometrics
from .recommendation_classifier import classify
from .unit_conversion import to_celsius

logger = logging.getLogger(__name__)


class HumidityAdvisoryService:
    """Service for predicting indoor humidity and advising on ventilation.

    The service holds no state: the current outdoor reading is passed in
    on every call, so a changed target is simply another call with the
    same reading.
    """

    def evaluate(
        self,
        reading: OutdoorReading,
        target: TargetTemperature | Temperature,
    ) -> HumidityPrediction:
        """Predict the indoor humidity for a reading and a target.

        Args:
            reading: Current outdoor conditions
            target: Indoor target temperature, in any unit

        Returns:
            HumidityPrediction with the predicted RH and its recommendation

        Raises:
            TemperatureDomainError: If a temperature is outside the formula domain
        """
        indoor_temp_c = to_celsius(target)
        return self.evaluate_celsius(reading, indoor_temp_c)

    def evaluate_celsius(
        self,
        reading: OutdoorReading,
        indoor_temp_c: float,
    ) -> HumidityPrediction:
        """Predict the indoor humidity for a target already in °C."""
        abs_humidity = psychrometrics.absolute_humidity(
            reading.temperature_celsius,
            reading.relative_humidity_percent,
        )
        indoor_rh = psychrometrics.predict_indoor_humidity(
            reading.temperature_celsius,
            reading.relative_humidity_percent,
            indoor_temp_c,
        )
        recommendation = classify(indoor_rh)

        logger.debug(
            "Evaluated %s: outdoor %.1f°C/%.0f%% -> indoor %.1f°C at %.1f%% (%s)",
            reading.location_label or "reading",
            reading.temperature_celsius,
            reading.relative_humidity_percent,
            indoor_temp_c,
            indoor_rh,
            recommendation.category.value,
        )

        return HumidityPrediction(
            outdoor=reading,
            indoor_temperature_celsius=indoor_temp_c,
            absolute_humidity=abs_humidity,
            predicted_relative_humidity=indoor_rh,
            recommendation=recommendation,
            timestamp=datetime.now(),
        )
