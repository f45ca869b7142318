"""Tests for the ingredient parsing API routes."""

import pytest

from recipeparse.config import Settings

pytestmark = pytest.mark.api


class TestParseIngredientsEndpoint:
    """Tests for POST /api/v1/ingredients/parse."""

    def test_all_lines_parsed(self, client, sample_ingredient_lines):
        response = client.post("/api/v1/ingredients/parse", json={"lines": sample_ingredient_lines})

        assert response.status_code == 200
        data = response.json()
        assert data["parsed"] is True
        assert data["errors"] == []
        assert data["lines"] == sample_ingredient_lines
        assert len(data["ingredients"]) == 4
        assert data["ingredients"][0] == {
            "item": "apples",
            "measurement": {
                "measure": [{"amount": "1", "unit": "c"}],
                "standard": "us-customary",
            },
            "notation": "fraction",
        }

    def test_failed_line_returns_input(self, client, sample_ingredient_lines):
        """Test that a failing line returns the input and the reason."""
        lines = sample_ingredient_lines + ["1 xyz sugar"]

        response = client.post("/api/v1/ingredients/parse", json={"lines": lines})

        assert response.status_code == 200
        data = response.json()
        assert data["parsed"] is False
        assert data["ingredients"] is None
        assert data["lines"] == lines
        assert len(data["errors"]) == 1
        error = data["errors"][0]
        assert error["index"] == 4
        assert error["line"] == "1 xyz sugar"
        assert error["code"] == "UNIT_NOT_RECOGNIZED"
        assert "xyz" in error["message"]

    def test_empty_request_rejected(self, client):
        response = client.post("/api/v1/ingredients/parse", json={"lines": []})
        assert response.status_code == 422

    def test_batch_too_large(self, client, monkeypatch):
        """Test that batches over the configured size are rejected."""
        monkeypatch.setattr(
            "recipeparse.routers.ingredients.get_settings",
            lambda: Settings(max_batch_size=2),
        )

        response = client.post(
            "/api/v1/ingredients/parse",
            json={"lines": ["1 cup apples", "1 cup pears", "1 cup plums"]},
        )

        assert response.status_code == 400
        assert "2 lines" in response.json()["detail"]


class TestParseLineEndpoint:
    """Tests for POST /api/v1/ingredients/parse-line."""

    def test_parse_line(self, client):
        response = client.post("/api/v1/ingredients/parse-line", json={"line": "1 qt 1.5 c milk"})

        assert response.status_code == 200
        data = response.json()
        assert data["item"] == "milk"
        assert data["notation"] == "decimal"
        assert data["measurement"]["measure"] == [
            {"amount": "1", "unit": "qt"},
            {"amount": "1.5", "unit": "c"},
        ]

    def test_parse_line_failure(self, client):
        response = client.post("/api/v1/ingredients/parse-line", json={"line": "2 eggs"})

        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["code"] == "UNKNOWN_NOTATION"
        assert detail["raw"] == "2 eggs"


class TestUnitsEndpoint:
    """Tests for GET /api/v1/units."""

    def test_list_units(self, client):
        response = client.get("/api/v1/units")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 15
        units = {entry["unit"]: entry for entry in data["units"]}
        assert units["tsp"]["system"] == "us-customary"
        assert "t" in units["tsp"]["spellings"]
        assert "T" in units["Tbsp"]["spellings"]
        assert units["kg"]["system"] == "metric"
        assert units["kg"]["spellings"] == []
