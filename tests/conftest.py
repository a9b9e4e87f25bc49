"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without a
database server.  The environment is set before ``src`` is imported so the
application engine itself points at the in-memory database and rate
limiting is off.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from typing import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from src.domain.entities import RideFields  # noqa: E402
from src.infrastructure.database import (  # noqa: E402
    Base,
    async_session_factory,
    engine,
)
from src.infrastructure.models import RideModel  # noqa: E402

SAMPLE_FIELDS = RideFields(11, 22, 33, 44, "Ruiyang Zhang", "Ryon", "Voiture")


async def _create_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def _drop_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # The in-memory database lives on the pooled connection; drop it so the
    # next test (on its own event loop) starts from a fresh connection.
    await engine.dispose()


async def seed_rides(count: int, fields: RideFields = SAMPLE_FIELDS) -> None:
    async with async_session_factory() as session:
        for _ in range(count):
            session.add(RideModel(**fields._asdict()))
        await session.commit()


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield a session, then drop everything."""
    await _create_schema()

    async with async_session_factory() as session:
        yield session

    await _drop_schema()


@pytest_asyncio.fixture
async def app():
    await _create_schema()

    from src.api.app import create_app

    application = create_app()
    yield application

    application.dependency_overrides.clear()
    await _drop_schema()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient over an empty ``Rides`` table."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seeded_client(client: AsyncClient) -> AsyncClient:
    """AsyncClient over ten identical seeded rides (ids 1..10)."""
    await seed_rides(10)
    return client
