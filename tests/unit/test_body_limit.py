"""Unit tests for the request body size limit middleware."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from botaniq.api.middleware.body_limit import RequestSizeLimitMiddleware

LIMIT = 100


def _build_app(calls: list) -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=LIMIT, path_prefix="/users/")

    @app.put("/users/me")
    async def upload(request: Request):
        calls.append("users")
        body = await request.body()
        return {"size": len(body)}

    @app.put("/other")
    async def other(request: Request):
        body = await request.body()
        return {"size": len(body)}

    return app


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
async def limited_client(calls):
    transport = ASGITransport(app=_build_app(calls))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _chunks(total: int, size: int = 40):
    sent = 0
    while sent < total:
        step = min(size, total - sent)
        sent += step
        yield b"x" * step


class TestRequestSizeLimit:
    @pytest.mark.asyncio
    async def test_declared_length_over_limit(self, limited_client, calls):
        response = await limited_client.put("/users/me", content=b"x" * (LIMIT + 1))

        assert response.status_code == 413
        assert response.json()["error_code"] == "UPLOAD_001"
        assert calls == []

    @pytest.mark.asyncio
    async def test_streamed_body_over_limit(self, limited_client):
        response = await limited_client.put("/users/me", content=_chunks(LIMIT * 3))

        assert response.status_code == 413
        assert response.json()["error_code"] == "UPLOAD_001"

    @pytest.mark.asyncio
    async def test_streamed_body_within_limit(self, limited_client):
        response = await limited_client.put("/users/me", content=_chunks(LIMIT))

        assert response.status_code == 200
        assert response.json() == {"size": LIMIT}

    @pytest.mark.asyncio
    async def test_body_at_limit_passes(self, limited_client):
        response = await limited_client.put("/users/me", content=b"x" * LIMIT)

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_other_paths_unlimited(self, limited_client):
        response = await limited_client.put("/other", content=b"x" * (LIMIT * 5))

        assert response.status_code == 200
        assert response.json() == {"size": LIMIT * 5}

