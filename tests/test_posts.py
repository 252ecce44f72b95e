from __future__ import annotations


def create_post(client, headers, title="Hello", content="First post"):
    return client.post("/api/posts", json={"title": title, "content": content}, headers=headers)


def test_create_post_sets_author_from_token(client, login) -> None:
    resp = create_post(client, login("alice"))
    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["title"] == "Hello"
    assert data["content"] == "First post"
    assert data["author"] == "alice"
    assert isinstance(data["id"], int)


def test_create_post_rejects_author_in_body(client, login) -> None:
    headers = login("alice")
    resp = client.post("/api/posts", json={"title": "t", "content": "c", "author": "bob"}, headers=headers)
    # unknown fields are rejected by the schema
    assert resp.status_code == 422


def test_create_post_requires_auth(client) -> None:
    resp = client.post("/api/posts", json={"title": "Hello", "content": "x"})
    assert resp.status_code == 401


def test_create_post_validation(client, login) -> None:
    headers = login("alice")
    assert create_post(client, headers, title="").status_code == 422
    assert create_post(client, headers, content="   ").status_code == 422
    assert create_post(client, headers, title="x" * 256).status_code == 422


def test_get_post(client, login) -> None:
    post_id = create_post(client, login("alice")).get_json()["data"]["id"]
    resp = client.get(f"/api/posts/{post_id}")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["author"] == "alice"


def test_get_missing_post(client) -> None:
    resp = client.get("/api/posts/999")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "NOT_FOUND"


def test_non_numeric_post_id_is_404(client) -> None:
    assert client.get("/api/posts/abc").status_code == 404


def test_update_post_partially(client, login) -> None:
    headers = login("alice")
    post_id = create_post(client, headers).get_json()["data"]["id"]

    resp = client.patch(f"/api/posts/{post_id}", json={"title": "Edited"}, headers=headers)
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["title"] == "Edited"
    assert data["content"] == "First post"


def test_only_author_can_update(client, login) -> None:
    post_id = create_post(client, login("alice")).get_json()["data"]["id"]
    resp = client.patch(f"/api/posts/{post_id}", json={"title": "Hijacked"}, headers=login("bob"))
    assert resp.status_code == 403
    assert client.get(f"/api/posts/{post_id}").get_json()["data"]["title"] == "Hello"


def test_update_missing_post(client, login) -> None:
    assert client.patch("/api/posts/42", json={"title": "x"}, headers=login("alice")).status_code == 404


def test_delete_post(client, login) -> None:
    headers = login("alice")
    post_id = create_post(client, headers).get_json()["data"]["id"]
    resp = client.delete(f"/api/posts/{post_id}", headers=headers)
    assert resp.status_code == 204
    assert client.get(f"/api/posts/{post_id}").status_code == 404


def test_only_author_can_delete(client, login) -> None:
    post_id = create_post(client, login("alice")).get_json()["data"]["id"]
    assert client.delete(f"/api/posts/{post_id}", headers=login("bob")).status_code == 403
    assert client.get(f"/api/posts/{post_id}").status_code == 200


def test_delete_requires_auth(client, login) -> None:
    post_id = create_post(client, login("alice")).get_json()["data"]["id"]
    assert client.delete(f"/api/posts/{post_id}").status_code == 401
    assert client.get(f"/api/posts/{post_id}").status_code == 200


def test_list_user_posts(client, login) -> None:
    alice = login("alice")
    bob = login("bob")
    create_post(client, alice, title="one")
    create_post(client, bob, title="bob's")
    create_post(client, alice, title="two")

    resp = client.get("/api/users/alice/posts")
    assert resp.status_code == 200
    assert [p["title"] for p in resp.get_json()["data"]] == ["one", "two"]
    assert client.get("/api/users/nobody/posts").get_json() == {"data": []}
