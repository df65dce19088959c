"""Flask HTTP API Server.

HTTP API for the Window Humidity Advisor.
Provides endpoints for indoor humidity predictions and recommendations.
"""

import asyncio
import logging
import os
import sys
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Callable

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import HumidityApplicationService
from domain.exceptions import InvalidInputError, LocationNotFoundError
from domain.interfaces import IWeatherProvider
from domain.services.unit_conversion import convert
from domain.value_objects import (
    HumidityPrediction,
    LocationQuery,
    OutdoorReading,
    Recommendation,
    TargetTemperature,
    Temperature,
    TemperatureUnit,
)
from infrastructure.adapters import (
    OpenMeteoGeocoder,
    OpenMeteoProvider,
    OpenWeatherMapProvider,
)

# Configure logging
log_level = os.getenv("LOG_LEVEL", "info").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)

http_timeout = float(os.getenv("HTTP_TIMEOUT", "10"))
default_country_code = os.getenv("DEFAULT_COUNTRY_CODE", "US")


def build_weather_provider(provider_name: str | None = None) -> IWeatherProvider:
    """Create the weather provider selected by WEATHER_PROVIDER.

    Args:
        provider_name: "open_meteo" or "openweathermap"; read from the
            environment when None

    Returns:
        Configured weather provider (Open-Meteo for unknown names)
    """
    name = (provider_name or os.getenv("WEATHER_PROVIDER", "open_meteo")).strip().lower()
    if name == "openweathermap":
        return OpenWeatherMapProvider(timeout=http_timeout)
    if name != "open_meteo":
        _LOGGER.error("Unknown WEATHER_PROVIDER %r, falling back to open_meteo", name)
    return OpenMeteoProvider(
        geocoder=OpenMeteoGeocoder(timeout=http_timeout),
        timeout=http_timeout,
    )


openweather_api_key = os.getenv("OPENWEATHER_API_KEY")

_LOGGER.info("=" * 60)
_LOGGER.info("Window Humidity Advisor Configuration Check")
_LOGGER.info("=" * 60)
_LOGGER.info("WEATHER_PROVIDER: %s", os.getenv("WEATHER_PROVIDER", "open_meteo"))
_LOGGER.info("OPENWEATHER_API_KEY present: %s", "YES" if openweather_api_key else "NO")
if openweather_api_key:
    _LOGGER.info("OPENWEATHER_API_KEY length: %d", len(openweather_api_key))
_LOGGER.info("DEFAULT_COUNTRY_CODE: %s", default_country_code)
_LOGGER.info("HTTP_TIMEOUT: %.1fs", http_timeout)
_LOGGER.info("=" * 60)

weather_provider = build_weather_provider()
humidity_service = HumidityApplicationService(weather_provider)


def async_route(f: Callable) -> Callable:
    """Decorator to run async functions in Flask routes.

    Uses asyncio.run() for proper event loop lifecycle management.
    """
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def _parse_unit(data: dict[str, Any]) -> TemperatureUnit:
    """Read the optional "unit" field (defaults to Celsius)."""
    return TemperatureUnit.parse(data.get("unit") or TemperatureUnit.CELSIUS)


def _parse_target(raw: Any, unit: TemperatureUnit) -> TargetTemperature | Temperature:
    """Parse a target temperature.

    Celsius and Fahrenheit targets must be whole degrees inside the control
    range; Kelvin targets are taken as plain temperatures.
    """
    value = float(raw)
    if unit is TemperatureUnit.KELVIN:
        return Temperature(value, unit)
    if not value.is_integer():
        raise ValueError(f"target_temp must be a whole number, got {raw}")
    return TargetTemperature(int(value), unit)


def _parse_reading(data: dict[str, Any], unit: TemperatureUnit) -> OutdoorReading:
    """Build an outdoor reading from explicit request values."""
    outdoor_temp = Temperature(float(data["outdoor_temp"]), unit)
    return OutdoorReading(
        temperature_celsius=convert(outdoor_temp.value, unit, TemperatureUnit.CELSIUS),
        relative_humidity_percent=float(data["outdoor_humidity"]),
        location_label=str(data.get("location_label") or ""),
    )


def _optional_text(data: dict[str, Any], key: str) -> str | None:
    """Read an optional text field; JSON numbers such as 10001 become "10001"."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list, bool)):
        raise InvalidInputError(f"{key} must be a string or number")
    return str(value)


def _parse_location(data: dict[str, Any]) -> LocationQuery:
    """Build a location query from coordinates, postal code or place name."""
    latitude = data.get("latitude")
    longitude = data.get("longitude")
    return LocationQuery(
        latitude=float(latitude) if latitude is not None else None,
        longitude=float(longitude) if longitude is not None else None,
        postal_code=_optional_text(data, "postal_code"),
        country_code=_optional_text(data, "country_code") or default_country_code,
        place_name=_optional_text(data, "place_name"),
    )


def _recommendation_to_json(recommendation: Recommendation) -> dict[str, Any]:
    return {
        "category": recommendation.category.value,
        "severity": recommendation.severity.value,
        "message": recommendation.message,
        "windows_recommended": recommendation.windows_recommended,
    }


def _prediction_to_json(prediction: HumidityPrediction) -> dict[str, Any]:
    outdoor = prediction.outdoor
    return {
        "success": True,
        "outdoor": {
            "temperature_celsius": outdoor.temperature_celsius,
            "relative_humidity_percent": outdoor.relative_humidity_percent,
            "location_label": outdoor.location_label,
            "conditions": outdoor.conditions,
            "observed_at": outdoor.observed_at.isoformat() if outdoor.observed_at else None,
        },
        "indoor_temperature_celsius": prediction.indoor_temperature_celsius,
        "absolute_humidity": prediction.absolute_humidity,
        "predicted_indoor_humidity": prediction.predicted_relative_humidity,
        "recommendation": _recommendation_to_json(prediction.recommendation),
        "timestamp": prediction.timestamp.isoformat(),
    }


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
@async_route
async def get_status() -> Response:
    """Get advisory service status."""
    try:
        status = await humidity_service.get_status()
        return jsonify(status)
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/humidity/predict", methods=["POST"])
@async_route
async def predict() -> Response:
    """Predict indoor humidity for explicit outdoor conditions.

    Request body:
    {
        "outdoor_temp": float,
        "outdoor_humidity": float (0-100),
        "target_temp": int (60-80 °F or 16-27 °C),
        "unit": "C" | "F" | "K" (optional, default "C", applies to both temperatures),
        "location_label": str (optional)
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        unit = _parse_unit(data)
        reading = _parse_reading(data, unit)
        target = _parse_target(data["target_temp"], unit)

        prediction = await humidity_service.advise(reading, target)
        return jsonify(_prediction_to_json(prediction))

    except KeyError as e:
        return jsonify({"error": f"Missing required field: {e}"}), 400
    except (ValueError, TypeError) as e:
        _LOGGER.warning("Invalid prediction request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error making prediction")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/humidity/advice", methods=["POST"])
@async_route
async def advice() -> Response:
    """Fetch current weather for a location and predict indoor humidity.

    Request body:
    {
        "latitude": float, "longitude": float
          | "postal_code": str, "country_code": str (optional)
          | "place_name": str,
        "target_temp": int,
        "unit": "C" | "F" (optional, default "C")
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        unit = _parse_unit(data)
        if unit is TemperatureUnit.KELVIN:
            raise InvalidInputError("unit must be C or F for advice requests")
        target = _parse_target(data["target_temp"], unit)
        query = _parse_location(data)

        prediction = await humidity_service.advise_for_location(query, target)
        return jsonify(_prediction_to_json(prediction))

    except KeyError as e:
        return jsonify({"error": f"Missing required field: {e}"}), 400
    except LocationNotFoundError as e:
        _LOGGER.warning("Location not found: %s", e)
        return jsonify({"error": str(e)}), 404
    except ConnectionError as e:
        _LOGGER.error("Failed to fetch weather data: %s", e)
        return jsonify({"error": f"Failed to fetch weather data: {e}"}), 503
    except (ValueError, TypeError) as e:
        _LOGGER.warning("Invalid advice request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error producing advice")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/humidity/sweep", methods=["POST"])
@async_route
async def sweep() -> Response:
    """Predict indoor humidity for every target of the control range.

    Request body:
    {
        "outdoor_temp": float,
        "outdoor_humidity": float (0-100),
        "unit": "C" | "F" | "K" (optional, default "C")
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        unit = _parse_unit(data)
        reading = _parse_reading(data, unit)

        result = await humidity_service.sweep(reading, unit)
        return jsonify({
            "success": True,
            "unit": result.unit.value,
            "points": [
                {
                    "target": p.target,
                    "predicted_indoor_humidity": p.predicted_relative_humidity,
                    "category": p.category.value,
                }
                for p in result.points
            ],
            "optimal_targets": result.optimal_targets,
            "best_target": result.best_point.target,
        })

    except KeyError as e:
        return jsonify({"error": f"Missing required field: {e}"}), 400
    except (ValueError, TypeError) as e:
        _LOGGER.warning("Invalid sweep request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error computing sweep")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/humidity/classify", methods=["GET"])
def classify() -> Response:
    """Classify an indoor relative humidity (?indoor_rh=<percent>)."""
    raw = request.args.get("indoor_rh")
    if raw is None:
        return jsonify({"error": "Missing required parameter: indoor_rh"}), 400
    try:
        recommendation = humidity_service.classify(float(raw))
        return jsonify(_recommendation_to_json(recommendation))
    except ValueError as e:
        return jsonify({"error": f"Invalid data: {e}"}), 400


def main() -> None:
    """Main entry point for the server."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "5000"))

    _LOGGER.info("Starting Window Humidity Advisor API server on %s:%d", host, port)
    _LOGGER.info("Weather provider: %s", weather_provider.name)

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
