from __future__ import annotations

from typing import TYPE_CHECKING

from webapi_backend.api.dependencies import get_auth_service

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

    from tests.conftest import IdentityStore


def test_register_user_success(client: TestClient) -> None:
    payload = {
        "username": "arifur",
        "password": "Password123",
        "email": "arifur@example.com",
    }
    response = client.post("/auth/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["token"]["token_type"] == "bearer"  # noqa: S105
    assert data["user"]["username"] == payload["username"]
    assert data["user"]["email"] == payload["email"]
    assert data["user"]["roles"] == ["User"]
    assert "access_token" in data["token"]


def test_register_user_conflict(client: TestClient) -> None:
    payload = {"username": "arifur", "password": "Password123"}
    assert client.post("/auth/register", json=payload).status_code == 201

    response = client.post("/auth/register", json=payload)

    assert response.status_code == 409


def test_register_rejects_weak_password(client: TestClient) -> None:
    response = client.post(
        "/auth/register", json={"username": "arifur", "password": "onlyletters"}
    )

    assert response.status_code == 422


def test_login_user_success(client: TestClient) -> None:
    register_payload = {"username": "rahman", "password": "Password123"}
    assert client.post("/auth/register", json=register_payload).status_code == 201

    response = client.post("/auth/login", json=register_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["token"]["token_type"] == "bearer"  # noqa: S105
    assert data["user"]["username"] == register_payload["username"]


def test_login_user_invalid_credentials(client: TestClient) -> None:
    payload = {"username": "unknown", "password": "Password123"}
    response = client.post("/auth/login", json=payload)

    assert response.status_code == 401


def test_login_user_wrong_password(client: TestClient) -> None:
    payload = {"username": "rahman", "password": "Password123"}
    assert client.post("/auth/register", json=payload).status_code == 201

    response = client.post(
        "/auth/login", json={"username": "rahman", "password": "Password999"}
    )

    assert response.status_code == 401


def test_registered_token_reaches_user_endpoint(client: TestClient) -> None:
    payload = {"username": "sazal", "password": "Password123"}
    token = client.post("/auth/register", json=payload).json()["token"]["access_token"]

    response = client.get(
        "/api/values/2", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 200
    assert response.json() == "sazal"


def test_me_returns_identity_with_roles(
    client: TestClient, identity_store: IdentityStore
) -> None:
    user = identity_store.add_user(
        "boss", roles=["User"], claims=[("role", "Admin")]
    )

    response = client.get("/auth/me", headers=identity_store.headers_for(user))

    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == str(user.id)
    assert data["username"] == "boss"
    assert data["roles"] == ["Admin", "User"]


def test_me_requires_credentials(client: TestClient) -> None:
    response = client.get("/auth/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_login_token_roles_match_me(
    client: TestClient, identity_store: IdentityStore
) -> None:
    user = identity_store.add_user("claimed", claims=[("role", "Admin")])
    token = client.post(
        "/auth/login", json={"username": "claimed", "password": "Password123"}
    ).json()["token"]["access_token"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"}).json()
    token_roles = get_auth_service().decode_access_token(token).roles

    assert me["user_id"] == str(user.id)
    assert token_roles == me["roles"] == ["Admin"]
