"""Async SQLAlchemy database engine and session management.

Provides the process-wide store handle:
- Database wraps one engine and its session factory
- init_db()/close_db() are the startup/shutdown lifecycle hooks
- get_session() is the FastAPI dependency for a per-request session
- connect() creates the schema and fails fast when the store is unreachable
"""

import logging
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.errors import StoreError
from patterns.domain_config import StoreConfig

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Store handle
# ---------------------------------------------------------------------------

class Database:
    """Engine plus session factory, created once per process."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_config(cls, config: StoreConfig) -> "Database":
        kwargs = {"echo": config.echo, "pool_pre_ping": True}
        # SQLite pools do not take sizing arguments
        if not config.database_url.startswith("sqlite"):
            kwargs["pool_size"] = config.pool_size
            kwargs["max_overflow"] = config.max_overflow
        return cls(create_async_engine(config.database_url, **kwargs))

    async def connect(self) -> None:
        """Create tables for every imported model, raising StoreError if unreachable."""
        from core.models.base import Base

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(str(e), "connect") from e

    async def health_check(self) -> bool:
        """Check connectivity (for the /health probe)."""
        try:
            async with self.session_factory() as session:
                await session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Store health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Set by init_db() during application startup
database: Database | None = None


# ---------------------------------------------------------------------------
# Lifecycle hooks
# ---------------------------------------------------------------------------

async def init_db(config: StoreConfig) -> Database:
    """Create the process-wide store handle and its schema."""
    global database
    db = Database.from_config(config)
    try:
        await db.connect()
    except StoreError:
        await db.dispose()
        raise
    database = db
    return db


async def close_db() -> None:
    """Dispose of the connection pool on shutdown."""
    global database
    if database is not None:
        await database.dispose()
        database = None


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to the process-wide store.

    Repositories commit their own writes, so the session is only closed here.
    """
    if database is None:
        raise RuntimeError("Database not initialized")
    async with database.session_factory() as session:
        yield session
