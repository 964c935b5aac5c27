"""Tests for the solar, consumption and storage APIs."""

from __future__ import annotations

import warnings

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


# ======================================================================
# Solar
# ======================================================================


class TestSolar:
    async def test_current_empty(self, client: AsyncClient):
        resp = await client.get("/api/v1/solar/current")
        assert resp.status_code == 200
        assert resp.json() == {"output": 0}

    async def test_current_follows_clock(self, client: AsyncClient, grid):
        await grid.solar(410.0, day=1, hour=8)
        resp = await client.get("/api/v1/solar/current")
        assert resp.json()["output"] == 410.0

    async def test_upsert_creates_then_updates(self, client: AsyncClient):
        body = {"day": 2, "hour": 12, "output": 300.0, "weather": "Sunny"}
        created = await client.post("/api/v1/solar/", json=body)
        assert created.status_code == 201

        body["output"] = 150.0
        updated = await client.post("/api/v1/solar/", json=body)
        assert updated.status_code == 200
        assert updated.json()["id"] == created.json()["id"]
        assert updated.json()["output"] == 150.0

    @pytest.mark.parametrize(
        "body",
        [
            {"day": 0, "hour": 1, "output": 10},
            {"day": 8, "hour": 1, "output": 10},
            {"day": 1, "hour": 24, "output": 10},
            {"day": 1, "hour": 1, "output": -1},
        ],
    )
    async def test_upsert_rejects_out_of_range(self, client: AsyncClient, body):
        resp = await client.post("/api/v1/solar/", json=body)
        assert resp.status_code == 422

    async def test_day_listing_sorted_by_hour(self, client: AsyncClient, grid):
        for hour in (14, 9, 11):
            await grid.solar(100.0 + hour, day=3, hour=hour)
        await grid.solar(50.0, day=4, hour=10)

        resp = await client.get("/api/v1/solar/day/3")
        assert resp.status_code == 200
        assert [r["hour"] for r in resp.json()] == [9, 11, 14]

    async def test_day_out_of_range(self, client: AsyncClient):
        resp = await client.get("/api/v1/solar/day/8")
        assert resp.status_code == 422

    async def test_patch_output(self, client: AsyncClient, grid):
        record = await grid.solar(100.0)
        resp = await client.patch(f"/api/v1/solar/{record['id']}", json={"output": 220.0})
        assert resp.status_code == 200
        assert resp.json()["output"] == 220.0

    async def test_patch_not_found(self, client: AsyncClient):
        resp = await client.patch("/api/v1/solar/999", json={"output": 1.0})
        assert resp.status_code == 404


# ======================================================================
# Consumption
# ======================================================================


class TestConsumption:
    async def test_current_empty(self, client: AsyncClient):
        resp = await client.get("/api/v1/consumption/current")
        assert resp.json() == {"demand": 0}

    async def test_upsert_and_current(self, client: AsyncClient):
        resp = await client.post(
            "/api/v1/consumption/",
            json={"day": 1, "hour": 8, "demand": 610.0, "source": "Production Line"},
        )
        assert resp.status_code == 201
        current = (await client.get("/api/v1/consumption/current")).json()
        assert current["demand"] == 610.0
        assert current["source"] == "Production Line"

    async def test_patch_demand(self, client: AsyncClient, grid):
        record = await grid.demand(300.0, day=5, hour=20)
        resp = await client.patch(f"/api/v1/consumption/{record['id']}", json={"demand": 320.0})
        assert resp.status_code == 200
        assert resp.json()["demand"] == 320.0

    async def test_patch_not_found(self, client: AsyncClient):
        resp = await client.patch("/api/v1/consumption/999", json={"demand": 1.0})
        assert resp.status_code == 404

    async def test_week_ordered(self, client: AsyncClient, grid):
        await grid.demand(1.0, day=2, hour=0)
        await grid.demand(2.0, day=1, hour=23)
        await grid.demand(3.0, day=1, hour=1)
        resp = await client.get("/api/v1/consumption/week")
        assert [(r["day"], r["hour"]) for r in resp.json()] == [(1, 1), (1, 23), (2, 0)]


# ======================================================================
# Storage
# ======================================================================


class TestStorage:
    async def test_missing_storage(self, client: AsyncClient):
        resp = await client.get("/api/v1/storage/")
        assert resp.status_code == 404

    async def test_get_seeded_storage(self, client: AsyncClient, seeded):
        resp = await client.get("/api/v1/storage/")
        assert resp.status_code == 200
        data = resp.json()
        assert data["maxCapacity"] == 600.0
        assert data["currentCharge"] == 450.0
        assert data["level"] == pytest.approx(0.75)

    async def test_update_charge(self, client: AsyncClient, seeded):
        resp = await client.patch("/api/v1/storage/", json={"currentCharge": 300.0})
        assert resp.status_code == 200
        assert resp.json()["level"] == pytest.approx(0.5)

    async def test_charge_above_capacity_rejected(self, client: AsyncClient, seeded):
        resp = await client.patch("/api/v1/storage/", json={"currentCharge": 700.0})
        assert resp.status_code == 422

    async def test_rejection_emits_no_deprecation_warning(self, client: AsyncClient, seeded):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            resp = await client.patch("/api/v1/storage/", json={"currentCharge": 700.0})
        assert resp.status_code == 422
        assert not [w for w in caught if "HTTP_422" in str(w.message)]
