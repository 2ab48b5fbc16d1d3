"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_ready(client: AsyncClient):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "database": "connected"}


@pytest.mark.asyncio
async def test_cors_preflight(client: AsyncClient):
    response = await client.options(
        "/login",
        headers={
            "Origin": "http://localhost:8080",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert response.headers["access-control-allow-credentials"] == "true"


@pytest.mark.asyncio
async def test_cors_unknown_origin(client: AsyncClient):
    response = await client.get("/health", headers={"Origin": "http://evil.example"})

    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_unexpected_error_keeps_cors_headers(client: AsyncClient, monkeypatch):
    from botaniq.services.auth import AuthService

    async def crash(self, email, password):
        raise RuntimeError("connection string leaked")

    monkeypatch.setattr(AuthService, "login", crash)

    response = await client.post(
        "/login",
        json={"email": "rina@example.com", "password": "Monstera1!"},
        headers={"Origin": "http://localhost:8080"},
    )

    assert response.status_code == 500
    assert response.json()["error_code"] == "SYS_001"
    assert "connection string" not in response.text
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert "x-request-id" in response.headers


@pytest.mark.asyncio
async def test_oversized_upload_keeps_cors_headers(client: AsyncClient, test_user, auth_headers):
    from botaniq.api.middleware.body_limit import FORM_OVERHEAD_BYTES
    from botaniq.config import settings

    response = await client.put(
        f"/users/{test_user.id}",
        content=b"x" * (settings.upload_max_bytes + FORM_OVERHEAD_BYTES + 1),
        headers={**auth_headers, "Origin": "http://localhost:8080"},
    )

    assert response.status_code == 413
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
