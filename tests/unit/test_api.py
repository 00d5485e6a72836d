"""
tests/unit/test_api.py - Layout REST API tests
"""

import pytest

fastapi = pytest.importorskip("fastapi")


@pytest.fixture
def client(config):
    from fastapi.testclient import TestClient
    from habitat.api import create_app
    return TestClient(create_app(config=config))


SLEEP_UNDERSIZED = {"placement_id": "sleep-1", "area_type_id": "sleep", "area_m2": 15.0, "volume_m3": 40.0}


# =============================================================================
# APP
# =============================================================================

class TestApp:
    """Tests for application wiring."""

    def test_health(self, client):
        """Test health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0", "catalog_size": 14}

    def test_custom_catalog_file(self, tmp_path):
        """Test the app serves the configured catalog file."""
        import json
        from fastapi.testclient import TestClient
        from habitat.api import create_app
        from habitat.bootstrap.config import HabitatConfig

        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{
            "id": "bunk",
            "name": "Bunk",
            "category": "crew_support",
            "min_area_per_person": 1.0,
            "min_volume_per_person": 2.0,
            "priority": "high",
            "noise_level": "quiet",
            "privacy": "private",
        }]))
        config = HabitatConfig()
        config.layout.catalog_file = str(path)

        client = TestClient(create_app(config=config))
        assert client.get("/health").json()["catalog_size"] == 1


# =============================================================================
# CATALOG
# =============================================================================

class TestCatalogEndpoints:
    """Tests for catalog endpoints."""

    def test_list(self, client):
        """Test listing all area types."""
        data = client.get("/api/v1/layout/catalog").json()

        assert data["count"] == 14
        assert data["areas"][0]["id"] == "eclss"

    def test_list_by_category(self, client):
        """Test category filter."""
        data = client.get("/api/v1/layout/catalog", params={"category": "life_support"}).json()

        assert [a["id"] for a in data["areas"]] == ["eclss", "waste_management"]

    def test_unknown_category(self, client):
        """Test invalid category is rejected."""
        response = client.get("/api/v1/layout/catalog", params={"category": "lounge"})
        assert response.status_code == 422

    def test_get_one(self, client):
        """Test getting one area type."""
        data = client.get("/api/v1/layout/catalog/sleep").json()

        assert data["name"] == "Sleep Quarters"
        assert data["min_area_per_person"] == 4.0

    def test_get_unknown(self, client):
        """Test unknown area type returns 404."""
        assert client.get("/api/v1/layout/catalog/holodeck").status_code == 404


# =============================================================================
# VALIDATE / METRICS
# =============================================================================

class TestValidateEndpoint:
    """Tests for POST /validate."""

    def test_undersized(self, client):
        """Test undersized sleep quarters."""
        response = client.post("/api/v1/layout/validate", json={
            "crew_size": 4,
            "placements": [SLEEP_UNDERSIZED],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors_count"] == 2
        assert data["constraints"][0]["message"] == (
            "Sleep Quarters is too small. Required: 16.0m², Current: 15.0m²"
        )

    def test_footprint_placements_with_adjacency(self, client):
        """Test footprint placements and opt-in arrangement rules."""
        response = client.post("/api/v1/layout/validate", json={
            "crew_size": 1,
            "enforce_adjacency_rules": True,
            "placements": [
                {"placement_id": "ex", "area_type_id": "exercise", "width_m": 3.0, "length_m": 3.0},
                {"placement_id": "sl", "area_type_id": "sleep", "x_m": 3.0, "width_m": 3.0, "length_m": 3.0},
            ],
        })

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings_count"] == 2

    def test_crew_size_rejected(self, client):
        """Test crew size 0 fails request validation."""
        response = client.post("/api/v1/layout/validate", json={"crew_size": 0, "placements": []})
        assert response.status_code == 422

    def test_placement_without_size(self, client):
        """Test placement with neither totals nor footprint is rejected."""
        response = client.post("/api/v1/layout/validate", json={
            "crew_size": 1,
            "placements": [{"area_type_id": "galley"}],
        })
        assert response.status_code == 422

    def test_totals_and_footprint_without_volume(self, client):
        """Test a placement with area and footprint but no volume is accepted."""
        response = client.post("/api/v1/layout/validate", json={
            "crew_size": 4,
            "placements": [{"area_type_id": "sleep", "area_m2": 20, "width_m": 4, "length_m": 5}],
        })

        assert response.status_code == 200
        assert response.json()["is_valid"] is True

    def test_non_string_area_type(self, client):
        """Test a non-string area type fails request validation."""
        response = client.post("/api/v1/layout/validate", json={
            "crew_size": 1,
            "placements": [{"area_type_id": {"x": 1}, "area_m2": 1.0, "volume_m3": 1.0}],
        })
        assert response.status_code == 422


class TestMetricsEndpoint:
    """Tests for POST /metrics."""

    def test_over_density(self, client):
        """Test utilization over explicit totals."""
        response = client.post("/api/v1/layout/metrics", json={
            "crew_size": 2,
            "habitat": {"volume": 1000.0, "surface_area": 200.0},
            "placements": [{"area_type_id": "storage", "area_m2": 180.0, "volume_m3": 540.0}],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["area_utilization_pct"] == pytest.approx(90.0)
        assert data["recommendations"][0]["kind"] == "over_density"

    def test_shape(self, client):
        """Test habitat given as a shape."""
        response = client.post("/api/v1/layout/metrics", json={
            "crew_size": 1,
            "habitat": {"shape": "cuboid", "dimensions": {"width": 4, "height": 3, "depth": 5}},
            "placements": [],
        })

        assert response.json()["habitat_volume"] == pytest.approx(60.0)

    def test_unknown_shape(self, client):
        """Test unknown shape returns 422 with structured errors."""
        response = client.post("/api/v1/layout/metrics", json={
            "crew_size": 1,
            "habitat": {"shape": "torus"},
            "placements": [],
        })

        assert response.status_code == 422
        assert response.json()["detail"]["errors"][0]["code"] == 4001

    def test_missing_habitat(self, client):
        """Test habitat without shape or totals is rejected."""
        response = client.post("/api/v1/layout/metrics", json={
            "crew_size": 1,
            "habitat": {"volume": 10.0},
        })
        assert response.status_code == 422


# =============================================================================
# ASSESS
# =============================================================================

class TestAssessEndpoint:
    """Tests for POST /assess."""

    def test_complete(self, client):
        """Test combined assessment."""
        response = client.post("/api/v1/layout/assess", json={
            "crew_size": 4,
            "habitat": {"shape": "cylinder", "dimensions": {"radius": 5, "height": 10}},
            "placements": [SLEEP_UNDERSIZED],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert len(data["constraints"]) == 2
        assert data["metrics"]["crew_size"] == 4
        assert data["mission"]["checks"][1]["passed"] is False

    def test_bad_input_in_body(self, client):
        """Test input problems are returned with a 200 status."""
        response = client.post("/api/v1/layout/assess", json={
            "crew_size": "four",
            "habitat": {},
            "placements": [{"area_type_id": "holodeck", "area_m2": 1.0, "volume_m3": 1.0}],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is False
        assert data["unknown_area_types"] == ["holodeck"]
        assert {e["path"] for e in data["errors"]} >= {"crew_size", "habitat"}
