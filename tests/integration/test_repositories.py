"""Repository tests against a real SQLite session."""

import pytest

from botaniq.models.garden import GardenEntry
from botaniq.repositories.garden import GardenRepository
from botaniq.repositories.recommendation import RecommendationRepository
from botaniq.repositories.user import UserRepository


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_email_exists(self, db_session, test_user):
        repo = UserRepository(db_session)

        assert await repo.email_exists("testuser@example.com") is True
        assert await repo.email_exists("nobody@example.com") is False


class TestRecommendationRepository:
    @pytest.mark.asyncio
    async def test_add_family_if_absent(self, db_session):
        repo = RecommendationRepository(db_session)

        assert await repo.add_family_if_absent("Araceae") is True
        assert await repo.add_family_if_absent("Araceae") is False
        await db_session.commit()

        found = await repo.get_by_family("Araceae")
        assert found is not None
        assert found.latin is None


class TestGardenRepository:
    @pytest.mark.asyncio
    async def test_owned_mutations_ignore_other_users(
        self, db_session, test_user, another_user
    ):
        repo = GardenRepository(db_session)
        entry = await repo.create(GardenEntry(user_id=test_user.id, family="Araceae"))

        assert await repo.update_owned(entry.id, another_user.id, {"growth": "x"}) == 0
        assert await repo.delete_owned(entry.id, another_user.id) == 0
        assert await repo.update_owned(entry.id, test_user.id, {"growth": "Mature"}) == 1

        rows = await repo.get_all_by_user(test_user.id)
        assert [row.growth for row in rows] == ["Mature"]
        assert await repo.get_all_by_user(another_user.id) == []

        assert await repo.delete_owned(entry.id, test_user.id) == 1
