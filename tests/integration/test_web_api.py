"""Integration tests for the REST API.

These tests verify:
- POST /api/v1/calculate returns lower and upper configurations
- Malformed requests are rejected with 400
- Domain rejections are reported with 422
- GET /api/v1/catalog and GET /health
"""

import pytest
from fastapi.testclient import TestClient

from videowall.web import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh application."""
    return TestClient(create_app())


class TestCalculateEndpoint:
    """Tests for POST /api/v1/calculate."""

    def test_square_cabinet(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "1:1", "inputs": {"aspectRatio": 1, "height": 500}, "unit": "mm"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "lower": {
                "label": "lower",
                "cols": 1,
                "rows": 1,
                "totalCabinets": 1,
                "width": 500.0,
                "height": 500.0,
                "diagonal": 707.1068,
                "aspectRatio": 1.0,
            },
            "upper": {
                "label": "upper",
                "cols": 2,
                "rows": 2,
                "totalCabinets": 4,
                "width": 1000.0,
                "height": 1000.0,
                "diagonal": 1414.2136,
                "aspectRatio": 1.0,
            },
        }

    def test_unit_defaults_to_millimeters(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "16:9", "inputs": {"width": 600, "height": 337.5}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["lower"]["diagonal"] == 688.4085
        assert (body["upper"]["cols"], body["upper"]["rows"]) == (1, 2)

    def test_aspect_ratio_string(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "16:9", "inputs": {"aspectRatio": "16:9", "width": 4.8}, "unit": "m"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["lower"]["width"] == 4.8
        assert body["lower"]["height"] == 2.7

    def test_missing_side_is_null(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "1:1", "inputs": {"aspectRatio": 1, "height": 100}},
        )

        assert response.status_code == 200
        assert response.json()["lower"] is None

    def test_three_inputs_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={
                "cabinetType": "1:1",
                "inputs": {"aspectRatio": 1, "height": 500, "width": 500},
            },
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "validation"
        assert "Exactly 2 input parameters are required" in body["error"]

    def test_unknown_unit_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "1:1", "inputs": {"aspectRatio": 1, "height": 500}, "unit": "yd"},
        )

        assert response.status_code == 400
        assert any(d["path"] == "unit" for d in response.json()["details"])

    def test_unknown_cabinet_type_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "4:3", "inputs": {"aspectRatio": 1, "height": 500}},
        )

        assert response.status_code == 400

    def test_negative_value_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "1:1", "inputs": {"width": -1, "height": 500}},
        )

        assert response.status_code == 400
        assert any(d["path"] == "inputs.width" for d in response.json()["details"])

    def test_geometric_inconsistency(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "1:1", "inputs": {"height": 1000, "diagonal": 900}},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "Diagonal must exceed height."
        assert body["error_type"] == "geometric_inconsistency"

    def test_extreme_finite_values_do_not_fail(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/calculate",
            json={"cabinetType": "1:1", "inputs": {"height": 1e200, "diagonal": 2e200}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["lower"]["cols"] == 1
        assert body["upper"] is None


class TestCatalogEndpoint:
    """Tests for GET /api/v1/catalog."""

    def test_catalog(self, client: TestClient) -> None:
        response = client.get("/api/v1/catalog")

        assert response.status_code == 200
        body = response.json()
        assert body["cabinetTypes"][0] == {
            "id": "16:9",
            "label": "16:9 Cabinet",
            "widthMm": 600.0,
            "heightMm": 337.5,
        }
        assert [u["id"] for u in body["units"]] == ["mm", "m", "ft", "in"]
        assert body["units"][2]["mmPerUnit"] == 304.8
        assert [p["label"] for p in body["aspectRatioPresets"]] == [
            "16:9",
            "4:3",
            "21:9",
            "1:1",
            "9:16",
        ]


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
