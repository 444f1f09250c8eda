# oauth_dcr/adapters/outbound/persistence/database.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from oauth_dcr.adapters.outbound.persistence.models import Base

# Configure logger
logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for the given database URL.

    SQLite URLs keep the driver's default pool; any other backend
    (e.g. postgresql+asyncpg) gets a sized connection pool.
    """
    logger.info(f"Connecting to database: {database_url.split('@')[-1]}")

    if database_url.startswith("sqlite"):
        if ":memory:" in database_url:
            # A single shared connection keeps the in-memory database alive
            return create_async_engine(database_url, echo=echo, poolclass=StaticPool)
        return create_async_engine(database_url, echo=echo)

    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=20,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Create the async session factory bound to an engine."""
    return async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


@asynccontextmanager
async def get_db_context(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    ensuring the session is closed at the end.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with get_db_context(session_factory) as db:
            result = await db.execute(select(RegisteredClient))
            clients = result.scalars().all()
        ```
    """
    session = session_factory()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
