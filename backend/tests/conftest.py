"""
Vehicle API - Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── db_engine: In-memory SQLite engine with the schema created
    ├── session_factory: async_sessionmaker bound to db_engine
    ├── db_session: One AsyncSession for store-level tests
    ├── mock_store: AsyncMock DataStore for service unit tests
    ├── sample_vehicle: A detached Vehicle row
    └── test_client: HTTPX AsyncClient on a fresh app using db_engine
"""

import os

# Must run before any vehicle_api import: settings are read at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from vehicle_api import database
from vehicle_api.database import Base, get_db_session
from vehicle_api.models.vehicle import Vehicle
from vehicle_api.services.store_base import DataStore


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# Service Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    AsyncMock standing in for a DataStore.

    Usage:
        mock_store.find_by_id.return_value = sample_vehicle
        service = VehicleService(store_factory=lambda db: mock_store)
    """
    return AsyncMock(spec=DataStore)


@pytest.fixture
def sample_vehicle():
    """A fully populated Vehicle that is not attached to any session."""
    now = datetime.now(timezone.utc)
    return Vehicle(
        id=uuid4(),
        name="Truck",
        info="Flatbed, 2 axles",
        active=True,
        created_at=now,
        updated_at=now,
    )


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory, db_engine, monkeypatch):
    """
    HTTPX AsyncClient talking to a fresh app over ASGITransport.

    get_db_session is overridden with the same commit/rollback contract, but
    on the test engine. The health route reads database.engine, so that is
    pointed at the test engine too.

    Usage:
        async def test_index(test_client):
            response = await test_client.get("/api/vehicles")
            assert response.status_code == 200
    """
    from vehicle_api.main import create_app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    monkeypatch.setattr(database, "engine", db_engine)

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
