"""Integration tests for registration, login and bearer authentication."""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from botaniq.models.user import User
from botaniq.repositories.user import UserRepository


class TestRegister:
    """Test POST /register."""

    @pytest.mark.asyncio
    async def test_register_success(self, client: AsyncClient, session_factory):
        response = await client.post(
            "/register",
            json={"name": "Rina", "email": "rina@example.com", "password": "Monstera1!"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "success"
        assert data["message"] == "Registration successful"
        assert "userId" in data

        async with session_factory() as session:
            user = await UserRepository(session).get_by_email("rina@example.com")
        assert user is not None
        assert str(user.id) == data["userId"]
        assert user.password_hash != "Monstera1!"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "password,expected",
        [
            ("Ab1!", "at least 8 characters"),
            ("Abc defg1!", "whitespace"),
            ("Abcdefgh!", "digit"),
            ("ABCDEFG1!", "lowercase"),
            ("abcdefg1!", "uppercase"),
            ("Abcdefgh1", "symbol"),
        ],
    )
    async def test_register_weak_password(
        self, client: AsyncClient, session_factory, password, expected
    ):
        response = await client.post(
            "/register",
            json={"name": "Rina", "email": "rina@example.com", "password": password},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VAL_001"
        assert data["message"].startswith("password: ")
        assert expected in data["message"]

        async with session_factory() as session:
            assert await UserRepository(session).get_by_email("rina@example.com") is None

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, client: AsyncClient):
        response = await client.post(
            "/register",
            json={"name": "Rina", "email": "not-an-email", "password": "Monstera1!"},
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith("email: ")

    @pytest.mark.asyncio
    async def test_register_missing_name(self, client: AsyncClient):
        response = await client.post(
            "/register",
            json={"email": "rina@example.com", "password": "Monstera1!"},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "VAL_001"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(
        self, client: AsyncClient, test_user, session_factory
    ):
        response = await client.post(
            "/register",
            json={"name": "Copy", "email": "testuser@example.com", "password": "Monstera1!"},
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "USER_002"

        async with session_factory() as session:
            count = await session.scalar(
                select(func.count()).select_from(User).where(User.email == "testuser@example.com")
            )
        assert count == 1

    @pytest.mark.asyncio
    async def test_register_duplicate_email_race(
        self, client: AsyncClient, test_user, session_factory, monkeypatch
    ):
        """The unique constraint still yields 409 when the pre-check misses."""

        async def never_exists(self, email):
            return False

        monkeypatch.setattr(UserRepository, "email_exists", never_exists)

        response = await client.post(
            "/register",
            json={"name": "Copy", "email": "testuser@example.com", "password": "Monstera1!"},
        )

        assert response.status_code == 409
        assert response.json()["error_code"] == "USER_002"

        async with session_factory() as session:
            count = await session.scalar(select(func.count()).select_from(User))
        assert count == 1


class TestLogin:
    """Test POST /login."""

    @pytest.mark.asyncio
    async def test_login_success(self, client: AsyncClient, test_user, token_codec):
        response = await client.post(
            "/login",
            json={"email": "testuser@example.com", "password": "Password123!"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"] == {
            "id": str(test_user.id),
            "name": "Test User",
            "email": "testuser@example.com",
        }

        claims = token_codec.decode(data["token"])
        assert claims["id"] == str(test_user.id)
        assert claims["name"] == "Test User"
        assert claims["email"] == "testuser@example.com"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client: AsyncClient, test_user):
        response = await client.post(
            "/login",
            json={"email": "testuser@example.com", "password": "WrongPass1!"},
        )

        assert response.status_code == 401
        data = response.json()
        assert data["error_code"] == "AUTH_002"
        assert "token" not in data

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/login",
            json={"email": "nobody@example.com", "password": "Password123!"},
        )

        assert response.status_code == 401
        data = response.json()
        assert data["error_code"] == "AUTH_001"
        assert "token" not in data


class TestBearerAuthentication:
    """Test the principal dependency through a protected endpoint."""

    @pytest.mark.asyncio
    async def test_missing_token(self, client: AsyncClient):
        response = await client.get("/profile")

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_003"
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_malformed_token(self, client: AsyncClient):
        response = await client.get(
            "/profile", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.json()["error_code"] == "AUTH_003"

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self, client: AsyncClient, test_user):
        from botaniq.core.security import TokenCodec

        forged = TokenCodec("some-other-secret").encode(
            test_user.id, test_user.name, test_user.email
        )

        response = await client.get(
            "/profile", headers={"Authorization": f"Bearer {forged}"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_id(self, client: AsyncClient, token_codec):
        token = token_codec.encode("42", "Rina", "rina@example.com")

        response = await client.get(
            "/profile", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_response_carries_request_id(self, client: AsyncClient):
        response = await client.get("/health")

        assert "x-request-id" in response.headers
