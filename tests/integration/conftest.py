"""
Fixtures for API tests: the real application over the in-memory table.
"""
import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(app_container, monkeypatch):
    """Create test client whose global container is the in-memory one."""
    from ton_app.di import container as container_module
    from ton_app.main import app

    monkeypatch.setattr(container_module, "_container", app_container)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def signed_up_user(client):
    response = client.post(
        "/auth/signup",
        json={"name": "Jane Doe", "email": "jane@example.com", "password": "password123"},
    )
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
def auth_headers(client, signed_up_user):
    response = client.post(
        "/auth/login",
        json={"email": "jane@example.com", "password": "password123"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}
