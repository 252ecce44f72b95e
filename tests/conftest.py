from __future__ import annotations

import pytest

from api import create_app
from models import storage

PASSWORD = "correct-horse-battery"


@pytest.fixture()
def app():
    app = create_app("testing")
    yield app
    storage.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def register(client):
    def _register(username: str, email: str | None = None, password: str = PASSWORD):
        return client.post(
            "/api/register",
            json={"username": username, "email": email or f"{username}@example.com", "password": password},
        )

    return _register


@pytest.fixture()
def login(client, register):
    """Register `username` and return Authorization headers for it."""

    def _login(username: str) -> dict[str, str]:
        assert register(username).status_code == 201
        resp = client.post("/api/login", json={"username": username, "password": PASSWORD})
        assert resp.status_code == 200
        return {"Authorization": f"Bearer {resp.get_json()['data']['token']}"}

    return _login
