"""Integration tests for the read-only plant lists."""

import pytest
from httpx import AsyncClient

from botaniq.models.plant import CleanedPlant, PlantFamily


@pytest.fixture
async def seeded_plants(db_session):
    db_session.add_all(
        [
            CleanedPlant(latin="Aloe vera", family="Asphodelaceae", common_name="Aloe"),
            CleanedPlant(latin="Ficus lyrata", family="Moraceae", temp_min_celsius=12.5),
            PlantFamily(plant_name="Aloe", family="Asphodelaceae"),
        ]
    )
    await db_session.commit()


class TestPlantLists:
    @pytest.mark.asyncio
    async def test_list_plants(self, client: AsyncClient, seeded_plants):
        response = await client.get("/plants")

        assert response.status_code == 200
        rows = response.json()["data"]
        assert [row["latin"] for row in rows] == ["Aloe vera", "Ficus lyrata"]
        assert rows[1]["temp_min_celsius"] == 12.5

    @pytest.mark.asyncio
    async def test_list_families(self, client: AsyncClient, seeded_plants):
        response = await client.get("/plantsandfamily")

        assert response.status_code == 200
        assert response.json()["data"] == [
            {"id": 1, "plant_name": "Aloe", "family": "Asphodelaceae"}
        ]

    @pytest.mark.asyncio
    async def test_empty_tables(self, client: AsyncClient):
        response = await client.get("/plants")

        assert response.status_code == 200
        assert response.json()["data"] == []
