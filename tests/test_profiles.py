from __future__ import annotations


def test_create_and_get_profile(client, login) -> None:
    headers = login("alice")
    resp = client.post(
        "/api/profiles/me",
        json={"description": "hi there", "profile_picture": "https://example.com/a.png"},
        headers=headers,
    )
    assert resp.status_code == 201
    assert resp.get_json()["data"] == {
        "username": "alice",
        "description": "hi there",
        "profile_picture": "https://example.com/a.png",
    }
    assert client.get("/api/profiles/alice").get_json() == resp.get_json()


def test_create_profile_uses_default_picture(app, client, login) -> None:
    resp = client.post("/api/profiles/me", json={}, headers=login("alice"))
    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["description"] == ""
    assert data["profile_picture"] == app.config["DEFAULT_PROFILE_PICTURE"]


def test_create_profile_twice(client, login) -> None:
    headers = login("alice")
    assert client.post("/api/profiles/me", json={}, headers=headers).status_code == 201
    assert client.post("/api/profiles/me", json={}, headers=headers).status_code == 409


def test_create_profile_rejects_bad_url(client, login) -> None:
    resp = client.post("/api/profiles/me", json={"profile_picture": "not a url"}, headers=login("alice"))
    assert resp.status_code == 422


def test_update_profile_keeps_missing_fields(client, login) -> None:
    headers = login("alice")
    client.post(
        "/api/profiles/me",
        json={"description": "old", "profile_picture": "https://example.com/a.png"},
        headers=headers,
    )
    resp = client.patch("/api/profiles/me", json={"description": "new"}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {
        "username": "alice",
        "description": "new",
        "profile_picture": "https://example.com/a.png",
    }


def test_update_missing_profile(client, login) -> None:
    assert client.patch("/api/profiles/me", json={"description": "x"}, headers=login("alice")).status_code == 404


def test_profile_routes_require_auth(client) -> None:
    assert client.post("/api/profiles/me", json={}).status_code == 401
    assert client.patch("/api/profiles/me", json={}).status_code == 401


def test_get_missing_profile(client) -> None:
    assert client.get("/api/profiles/ghost").status_code == 404
