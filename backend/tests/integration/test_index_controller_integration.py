"""
Integration tests for the root and health endpoints.
"""

import pytest

from agenda.main import create_app

pytestmark = pytest.mark.api


def test_index(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_json() == {"message": "Welcome to the Agenda API"}


def test_health_on_empty_stores(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy", "users": 0, "appointments": 0}


def test_health_counts_soft_deleted_users(client):
    client.post("/users", json={"name": "John Doe", "email": "john@example.com"})
    client.delete("/users/1")

    response = client.get("/health")

    assert response.get_json()["users"] == 1


def test_create_app_uses_fresh_stores(test_settings):
    first = create_app(test_settings).test_client()
    second = create_app(test_settings).test_client()
    first.post("/users", json={"name": "John Doe", "email": "john@example.com"})

    assert second.get("/health").get_json()["users"] == 0
