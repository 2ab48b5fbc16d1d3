import os
import sys
import tempfile
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

sys.path.append(str(Path(__file__).parents[1] / "src"))

ENV_TEST_PATH = Path(__file__).parents[1] / ".env.test"


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key, value)


_load_env_file(ENV_TEST_PATH)

# Settings are read at import time, so these must be set before importing the app.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="botaniq-uploads-")

from botaniq.api.deps import get_token_codec  # noqa: E402
from botaniq.db.session import get_db  # noqa: E402
from botaniq.main import app  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    """File-backed SQLite database, created fresh for every test."""
    from botaniq.models.base import Base
    import botaniq.models  # noqa: F401

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Session for seeding data and for repository/service tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """Test client whose requests each get their own session, like production."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def token_codec():
    return get_token_codec()


async def _create_user(session: AsyncSession, name: str, email: str, password: str):
    from botaniq.core.security import hash_password
    from botaniq.models.user import User
    from botaniq.repositories.user import UserRepository

    repo = UserRepository(session)
    return await repo.create(
        User(name=name, email=email, password_hash=hash_password(password))
    )


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """Create a test user for authentication tests."""
    return await _create_user(db_session, "Test User", "testuser@example.com", "Password123!")


@pytest.fixture
async def another_user(db_session: AsyncSession):
    """Create a second user for ownership tests."""
    return await _create_user(db_session, "Another User", "another@example.com", "Password456!")


@pytest.fixture
def auth_headers(test_user, token_codec):
    """Authentication headers with a valid token for test_user."""
    token = token_codec.encode(test_user.id, test_user.name, test_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(another_user, token_codec):
    """Authentication headers with a valid token for another_user."""
    token = token_codec.encode(another_user.id, another_user.name, another_user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def upload_dir() -> Path:
    from botaniq.config import settings

    return settings.upload_path
