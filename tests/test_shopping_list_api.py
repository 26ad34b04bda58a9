"""Tests for the shopping list API routes."""

import pytest
from fastapi.testclient import TestClient

from zettel.main import app

pytestmark = pytest.mark.api

ENDPOINT = "/api/v1/shopping-list"


@pytest.fixture
def client():
    return TestClient(app)


class TestCreateShoppingList:
    """Tests for POST /api/v1/shopping-list."""

    def test_flat_list(self, client, sample_text):
        """Test a request without a catalog."""
        response = client.post(ENDPOINT, json={"text": sample_text})
        assert response.status_code == 200

        data = response.json()
        assert data["plaintext"] == "5 Eier\n2.5l Milch\n500g Zucker\n"
        assert data["partitioned"] is False
        assert data["groups"] == [
            {"name": "Einkaufszettel", "items": ["5 Eier", "2.5l Milch", "500g Zucker"]}
        ]

    def test_with_catalog(self, client, catalog_text):
        """Test a request with a merchant catalog."""
        payload = {"text": "Vollmilch\nBrot\nKäse", "catalog": catalog_text}
        response = client.post(ENDPOINT, json=payload)
        assert response.status_code == 200

        data = response.json()
        assert data["partitioned"] is True
        assert data["groups"] == [
            {"name": "Supermarkt", "items": ["Milch"]},
            {"name": "Bäcker", "items": ["Brot"]},
            {"name": "elsewhere", "items": ["Käse"]},
        ]

    def test_empty_text(self, client):
        """Test that an empty list is a valid request."""
        response = client.post(ENDPOINT, json={"text": ""})
        assert response.status_code == 200
        assert response.json()["plaintext"] == ""

    def test_parse_error(self, client):
        """Test that a bad line is rejected with 422."""
        response = client.post(ENDPOINT, json={"text": "500g"})
        assert response.status_code == 422
        assert "line 1" in response.json()["detail"]

    def test_unit_mismatch(self, client):
        """Test that mixed kinds are rejected with 422."""
        response = client.post(ENDPOINT, json={"text": "1 Milch\n1l Milch"})
        assert response.status_code == 422
        assert "Milch" in response.json()["detail"]

    def test_bad_catalog(self, client):
        """Test that an invalid catalog is rejected with 422."""
        response = client.post(ENDPOINT, json={"text": "Milch", "catalog": "waren: 5"})
        assert response.status_code == 422

    def test_missing_text(self, client):
        """Test request validation."""
        response = client.post(ENDPOINT, json={})
        assert response.status_code == 422
