"""Shared builders for tests: isolated settings and an app bound to in-memory SQLite."""

from typing import Any

from fastapi.testclient import TestClient

from pesca_api.core.config import Settings
from pesca_api.main import create_app

TEST_SECRET = "test-secret-not-for-production-pesca-api"


def make_settings(**overrides: Any) -> Settings:
    """Settings that ignore .env and use a private in-memory database."""
    values: dict[str, Any] = {
        "APP_ENV": "dev",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_SECRET,
        "JWT_EXPIRE_MINUTES": 60,
        "BCRYPT_ROUNDS": 4,
        "AUTO_CREATE_TABLES": True,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_client(**overrides: Any) -> TestClient:
    """TestClient for a fresh app; use as a context manager so tables get created."""
    return TestClient(create_app(make_settings(**overrides)))


def register_payload(username: str = "joao", **kwargs: Any) -> dict[str, Any]:
    payload = {
        "username": username,
        "password": "anzol-secreto-123",
        "first_name": "João",
        "last_name": "Pescador",
        "email": f"{username}@example.com",
    }
    payload.update(kwargs)
    return payload


def register_and_login(client: TestClient, username: str = "joao") -> dict[str, str]:
    """Register a user, log in and return the Authorization header."""
    payload = register_payload(username)
    r = client.post("/auth/register", json=payload)
    assert r.status_code == 201, r.text
    r = client.post(
        "/auth/login",
        json={"username": payload["username"], "password": payload["password"]},
    )
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
