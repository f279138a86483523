"""Tests for session authentication endpoints."""

from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_logs_user_in(client: TestClient) -> None:
    response = client.post(
        "/api/register", json={"username": "alice", "password": "secret"}
    )

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice"
    assert "password_hash" not in body
    assert client.get("/api/user").json() == body


def test_register_duplicate_username(auth_client: TestClient) -> None:
    response = auth_client.post(
        "/api/register", json={"username": "alice", "password": "other"}
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Username already exists"}


def test_create_user_does_not_start_session(client: TestClient) -> None:
    response = client.post("/api/users", json={"username": "bob", "password": "pw"})

    assert response.status_code == 201
    assert set(response.json()) == {"id", "username"}
    assert client.get("/api/user").status_code == 401

    duplicate = client.post("/api/users", json={"username": "bob", "password": "pw"})
    assert duplicate.status_code == 409


def test_login_and_logout(client: TestClient) -> None:
    client.post("/api/users", json={"username": "carol", "password": "pw"})

    bad = client.post("/api/login", json={"username": "carol", "password": "nope"})
    assert bad.status_code == 401
    assert bad.json() == {"message": "Invalid credentials"}

    good = client.post("/api/login", json={"username": "carol", "password": "pw"})
    assert good.status_code == 200
    assert client.get("/api/user").json()["username"] == "carol"

    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/user").status_code == 401


def test_protected_routes_require_session(client: TestClient) -> None:
    for path in ("/api/meals", "/api/user-goals", "/api/ai-meals"):
        response = client.get(path)
        assert response.status_code == 401
        assert response.json() == {"message": "Not authenticated"}


def test_invalid_body_returns_message(client: TestClient) -> None:
    response = client.post("/api/login", json={"username": "alice"})

    assert response.status_code == 400
    assert "password" in response.json()["message"]
