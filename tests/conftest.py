"""Shared fixtures — in-memory store + FastAPI test client.

Every test gets a fresh in-memory SQLite database. A StaticPool keeps the
single connection alive so every session sees the same tables.
"""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from api.main import app
from core.database import Database, get_session
from verticals.biblioteca.repository import CatalogStore


@pytest.fixture
async def database():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    db = Database(engine)
    await db.connect()
    yield db
    await db.dispose()


@pytest.fixture
async def store(database):
    async with database.session_factory() as session:
        yield CatalogStore(session)


@pytest.fixture
async def client(database):
    """Test client with the session dependency bound to the test store."""
    async def override_get_session():
        async with database.session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
