"""Integration tests for all API endpoints.

This module tests the Flask API endpoints against an in-memory weather
provider and validates the full request/response cycle.
"""

import json
from typing import Any

import pytest


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_check_returns_healthy(self, client: Any) -> None:
        """Health endpoint should return healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["status"] == "healthy"
        assert "timestamp" in data


class TestStatusEndpoint:
    """Tests for the /api/v1/status endpoint."""

    def test_status_returns_service_info(self, client: Any) -> None:
        """Status endpoint should report the provider and control ranges."""
        response = client.get("/api/v1/status")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["provider"] == "stub"
        assert data["provider_available"] is True
        assert data["target_ranges"]["F"] == {"min": 60, "max": 80}
        assert data["target_ranges"]["C"] == {"min": 16, "max": 27}


class TestPredictEndpoint:
    """Tests for the /api/v1/humidity/predict endpoint."""

    def test_predict_celsius(self, client: Any) -> None:
        """Prediction with explicit °C values should succeed."""
        response = client.post(
            "/api/v1/humidity/predict",
            json={"outdoor_temp": 10.0, "outdoor_humidity": 80.0, "target_temp": 22, "unit": "C"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["success"] is True
        assert data["indoor_temperature_celsius"] == 22.0
        assert data["absolute_humidity"] == pytest.approx(7.517, abs=0.005)
        assert data["predicted_indoor_humidity"] == pytest.approx(38.73, abs=0.02)
        assert data["recommendation"]["category"] == "optimal"
        assert data["recommendation"]["severity"] == "good"
        assert data["recommendation"]["windows_recommended"] is True
        assert data["outdoor"]["temperature_celsius"] == 10.0

    def test_predict_defaults_to_celsius(self, client: Any) -> None:
        """Omitting the unit should read temperatures as °C."""
        response = client.post(
            "/api/v1/humidity/predict",
            json={"outdoor_temp": 10.0, "outdoor_humidity": 80.0, "target_temp": 22},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["predicted_indoor_humidity"] == pytest.approx(38.73, abs=0.02)

    def test_predict_fahrenheit(self, client: Any) -> None:
        """°F inputs should be converted before evaluation."""
        response = client.post(
            "/api/v1/humidity/predict",
            json={
                "outdoor_temp": 50.0,
                "outdoor_humidity": 80.0,
                "target_temp": 72,
                "unit": "F",
                "location_label": "Boston, US",
            },
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["outdoor"]["temperature_celsius"] == pytest.approx(10.0)
        assert data["outdoor"]["location_label"] == "Boston, US"
        assert data["indoor_temperature_celsius"] == pytest.approx(22.2222, abs=1e-4)
        assert data["recommendation"]["category"] == "optimal"

    def test_predict_kelvin(self, client: Any) -> None:
        """Kelvin targets are accepted as plain temperatures."""
        response = client.post(
            "/api/v1/humidity/predict",
            json={"outdoor_temp": 283.15, "outdoor_humidity": 80.0, "target_temp": 295.15, "unit": "K"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["predicted_indoor_humidity"] == pytest.approx(38.73, abs=0.02)

    def test_predict_saturated(self, client: Any) -> None:
        """Cooling hot humid air should clamp at 100 %."""
        response = client.post(
            "/api/v1/humidity/predict",
            json={"outdoor_temp": 30.0, "outdoor_humidity": 95.0, "target_temp": 16, "unit": "C"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["predicted_indoor_humidity"] == 100.0
        assert data["recommendation"]["category"] == "too_high"
        assert data["recommendation"]["windows_recommended"] is False

    def test_predict_missing_field(self, client: Any) -> None:
        """Missing fields should return 400."""
        response = client.post(
            "/api/v1/humidity/predict",
            json={"outdoor_temp": 10.0, "target_temp": 22},
        )

        assert response.status_code == 400
        data = json.loads(response.data)
        assert "Missing required field" in data["error"]

    def test_predict_no_data(self, client: Any) -> None:
        """Empty body should return 400."""
        response = client.post("/api/v1/humidity/predict", json={})

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data["error"] == "No data provided"

    @pytest.mark.parametrize(
        "payload",
        [
            {"outdoor_temp": 10.0, "outdoor_humidity": 120.0, "target_temp": 22},
            {"outdoor_temp": 10.0, "outdoor_humidity": -5.0, "target_temp": 22},
            {"outdoor_temp": 10.0, "outdoor_humidity": 80.0, "target_temp": 30},
            {"outdoor_temp": 10.0, "outdoor_humidity": 80.0, "target_temp": 21.5},
            {"outdoor_temp": 10.0, "outdoor_humidity": 80.0, "target_temp": 85, "unit": "F"},
            {"outdoor_temp": 10.0, "outdoor_humidity": 80.0, "target_temp": 22, "unit": "R"},
            {"outdoor_temp": "warm", "outdoor_humidity": 80.0, "target_temp": 22},
        ],
    )
    def test_predict_invalid_data(self, client: Any, payload: dict) -> None:
        """Out-of-range or malformed values should return 400."""
        response = client.post("/api/v1/humidity/predict", json=payload)

        assert response.status_code == 400
        data = json.loads(response.data)
        assert "Invalid data" in data["error"]


class TestAdviceEndpoint:
    """Tests for the /api/v1/humidity/advice endpoint."""

    def test_advice_by_postal_code(self, client: Any, stub_provider: Any) -> None:
        """Advice should fetch the reading for the postal code."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"postal_code": "02139", "target_temp": 72, "unit": "F"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["success"] is True
        assert data["outdoor"]["location_label"] == "Cambridge, US"
        assert data["outdoor"]["conditions"] == "light rain"
        assert data["recommendation"]["category"] == "optimal"

        query = stub_provider.queries[-1]
        assert query.postal_code == "02139"
        assert query.country_code == "US"

    def test_advice_by_coordinates(self, client: Any, stub_provider: Any) -> None:
        """Coordinates should be passed through as a coordinate query."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"latitude": 45.76, "longitude": 4.84, "target_temp": 21, "unit": "C"},
        )

        assert response.status_code == 200
        query = stub_provider.queries[-1]
        assert query.has_coordinates
        assert query.latitude == 45.76

    def test_advice_country_code(self, client: Any, stub_provider: Any) -> None:
        """An explicit country code should override the default."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"postal_code": "69001", "country_code": "FR", "target_temp": 21, "unit": "C"},
        )

        assert response.status_code == 200
        assert stub_provider.queries[-1].country_code == "FR"

    def test_advice_unknown_location(self, client: Any) -> None:
        """Unknown locations should return 404."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"place_name": "Atlantis", "target_temp": 70, "unit": "F"},
        )

        assert response.status_code == 404
        data = json.loads(response.data)
        assert "Atlantis" in data["error"]

    def test_advice_provider_unreachable(self, client: Any) -> None:
        """Provider failures should return 503."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"place_name": "Offline", "target_temp": 70, "unit": "F"},
        )

        assert response.status_code == 503
        data = json.loads(response.data)
        assert "Failed to fetch weather data" in data["error"]

    def test_advice_without_location(self, client: Any) -> None:
        """A request without any locator should return 400."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"target_temp": 70, "unit": "F"},
        )

        assert response.status_code == 400

    def test_advice_missing_target(self, client: Any) -> None:
        """A request without a target should return 400."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"postal_code": "02139"},
        )

        assert response.status_code == 400
        data = json.loads(response.data)
        assert "Missing required field" in data["error"]


class TestSweepEndpoint:
    """Tests for the /api/v1/humidity/sweep endpoint."""

    def test_sweep_celsius(self, client: Any) -> None:
        """Sweep should cover the whole °C control."""
        response = client.post(
            "/api/v1/humidity/sweep",
            json={"outdoor_temp": 10.0, "outdoor_humidity": 80.0, "unit": "C"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["success"] is True
        assert data["unit"] == "C"
        assert [p["target"] for p in data["points"]] == list(range(16, 28))
        assert data["optimal_targets"] == list(range(18, 27))
        assert data["best_target"] == 21

    def test_sweep_fahrenheit(self, client: Any) -> None:
        """Sweep should cover the whole °F control."""
        response = client.post(
            "/api/v1/humidity/sweep",
            json={"outdoor_temp": 50.0, "outdoor_humidity": 80.0, "unit": "F"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["unit"] == "F"
        assert len(data["points"]) == 21
        assert data["points"][0]["target"] == 60

    def test_sweep_kelvin_falls_back_to_celsius(self, client: Any) -> None:
        """Kelvin has no control range and sweeps in °C."""
        response = client.post(
            "/api/v1/humidity/sweep",
            json={"outdoor_temp": 283.15, "outdoor_humidity": 80.0, "unit": "K"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["unit"] == "C"
        assert len(data["points"]) == 12

    def test_sweep_invalid_humidity(self, client: Any) -> None:
        """Out-of-range humidity should return 400."""
        response = client.post(
            "/api/v1/humidity/sweep",
            json={"outdoor_temp": 10.0, "outdoor_humidity": 101.0},
        )

        assert response.status_code == 400


class TestClassifyEndpoint:
    """Tests for the /api/v1/humidity/classify endpoint."""

    @pytest.mark.parametrize(
        ("indoor_rh", "category"),
        [
            ("29.9", "too_low"),
            ("30", "optimal"),
            ("50", "optimal"),
            ("55", "caution"),
            ("60", "caution"),
            ("60.1", "too_high"),
        ],
    )
    def test_classify(self, client: Any, indoor_rh: str, category: str) -> None:
        """Classification should follow the comfort bands."""
        response = client.get(f"/api/v1/humidity/classify?indoor_rh={indoor_rh}")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["category"] == category
        assert data["message"]

    def test_classify_missing_parameter(self, client: Any) -> None:
        """Missing indoor_rh should return 400."""
        response = client.get("/api/v1/humidity/classify")

        assert response.status_code == 400

    @pytest.mark.parametrize("indoor_rh", ["humid", "nan"])
    def test_classify_invalid_value(self, client: Any, indoor_rh: str) -> None:
        """Non-numeric humidity should return 400."""
        response = client.get(f"/api/v1/humidity/classify?indoor_rh={indoor_rh}")

        assert response.status_code == 400


class TestRequestValidation:
    """Malformed request bodies and locator types are client errors."""

    @pytest.mark.parametrize(
        "path",
        ["/api/v1/humidity/predict", "/api/v1/humidity/advice", "/api/v1/humidity/sweep"],
    )
    def test_non_object_body(self, client: Any, path: str) -> None:
        """A JSON array body should return 400."""
        response = client.post(path, json=[1, 2])

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data["error"] == "Request body must be a JSON object"

    @pytest.mark.parametrize(
        "path",
        ["/api/v1/humidity/predict", "/api/v1/humidity/advice", "/api/v1/humidity/sweep"],
    )
    def test_invalid_json_body(self, client: Any, path: str) -> None:
        """A body that is not JSON should return 400."""
        response = client.post(path, data="not json", content_type="application/json")

        assert response.status_code == 400

    def test_numeric_postal_code(self, client: Any, stub_provider: Any) -> None:
        """A JSON number postal code is read as text."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"postal_code": 10001, "target_temp": 72, "unit": "F"},
        )

        assert response.status_code == 200
        assert stub_provider.queries[-1].postal_code == "10001"

    def test_numeric_place_name(self, client: Any, stub_provider: Any) -> None:
        """A JSON number place name is read as text."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"place_name": 42, "target_temp": 72, "unit": "F"},
        )

        assert response.status_code == 200
        assert stub_provider.queries[-1].place_name == "42"

    @pytest.mark.parametrize(
        "payload",
        [
            {"postal_code": ["10001"], "target_temp": 72, "unit": "F"},
            {"place_name": {"name": "Lyon"}, "target_temp": 72, "unit": "F"},
            {"postal_code": "69001", "country_code": True, "target_temp": 21, "unit": "C"},
        ],
    )
    def test_structured_locator(self, client: Any, payload: dict) -> None:
        """Objects, arrays and booleans as locators should return 400."""
        response = client.post("/api/v1/humidity/advice", json=payload)

        assert response.status_code == 400
        data = json.loads(response.data)
        assert "Invalid data" in data["error"]

    def test_advice_rejects_kelvin(self, client: Any, stub_provider: Any) -> None:
        """Advice targets live on the °C or °F control only."""
        response = client.post(
            "/api/v1/humidity/advice",
            json={"postal_code": "02139", "target_temp": 295, "unit": "K"},
        )

        assert response.status_code == 400
        data = json.loads(response.data)
        assert "C or F" in data["error"]
        assert stub_provider.queries == []
