"""API test infrastructure: async httpx client with SQLite test database."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.models import Base
from app.models.database import get_db

# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


# ---------------------------------------------------------------------------
# FastAPI app with overridden dependencies
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app(session_factory, monkeypatch):
    import app.main as main_module

    # /health opens its own session rather than going through get_db.
    monkeypatch.setattr(main_module, "get_session_factory", lambda: session_factory)

    application = main_module.create_app()

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = _override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Data helpers
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def seeded(session_factory) -> None:
    """Sample microgrid with a reproducible week of profiles."""
    from app.services.seed_service import seed_sample_data

    async with session_factory() as session:
        assert await seed_sample_data(session, seed=42)


class GridClient:
    """Shorthand for building a microgrid through the API."""

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def engine(self, **overrides) -> dict:
        body = {
            "name": "Engine A",
            "maxCapacity": 500.0,
            "efficiency": 5.0,
            "optimalThreshold": 150.0,
            "isRunning": True,
        }
        body.update(overrides)
        resp = await self.client.post("/api/v1/engines/", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()

    async def output(self, engine_id: int, output: float) -> dict:
        resp = await self.client.patch(
            f"/api/v1/engines/{engine_id}/output", json={"currentOutput": output}
        )
        assert resp.status_code == 200, resp.text
        return resp.json()

    async def solar(self, output: float, day: int = 1, hour: int = 8) -> dict:
        resp = await self.client.post(
            "/api/v1/solar/", json={"day": day, "hour": hour, "output": output}
        )
        assert resp.status_code in (200, 201), resp.text
        return resp.json()

    async def demand(self, demand: float, day: int = 1, hour: int = 8) -> dict:
        resp = await self.client.post(
            "/api/v1/consumption/", json={"day": day, "hour": hour, "demand": demand}
        )
        assert resp.status_code in (200, 201), resp.text
        return resp.json()


@pytest_asyncio.fixture
async def grid(client: AsyncClient) -> GridClient:
    return GridClient(client)
