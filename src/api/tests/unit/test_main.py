"""Unit tests for the FastAPI application wiring."""

from __future__ import annotations

import pytest
from fastapi import status
from fastapi.testclient import TestClient


@pytest.fixture
def client() -> TestClient:
    from main import app

    return TestClient(app)


class TestApplication:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}

    def test_routes_are_mounted_under_admin_prefix(self):
        from main import API_PREFIX, app

        paths = {route.path for route in app.routes}

        assert f"{API_PREFIX}/branches" in paths
        assert f"{API_PREFIX}/products" in paths
        assert f"{API_PREFIX}/customers" in paths
        assert f"{API_PREFIX}/products/{{product_id}}" in paths
        assert f"{API_PREFIX}/customers/{{customer_id}}" in paths
        assert f"{API_PREFIX}/roles/list" in paths

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/v1/admin/nothing-here")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Not Found"}
