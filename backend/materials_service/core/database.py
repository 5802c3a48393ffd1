# backend/materials_service/core/database.py
"""Database engine and session management.

Supports PostgreSQL (asyncpg) and SQLite (aiosqlite); the driver is picked
from the scheme of DATABASE_URL.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import NullPool
from materials_service.core.config import settings
import logging

logger = logging.getLogger(__name__)


def create_engine_from_url(
    db_url: str,
    pool_size: int = settings.DB_POOL_SIZE,
    max_overflow: int = settings.DB_MAX_OVERFLOW,
) -> AsyncEngine:
    """Create an async engine for the given database URL.

    Raises:
        ValueError: If the URL scheme is neither PostgreSQL nor SQLite
    """
    if db_url.startswith("postgresql://") or db_url.startswith("postgresql+asyncpg://"):
        if not db_url.startswith("postgresql+asyncpg://"):
            db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)

        logger.info(f"Using PostgreSQL database: {db_url.split('@')[-1]}")
        return create_async_engine(
            db_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            echo=False,
        )

    elif db_url.startswith("sqlite://") or db_url.startswith("sqlite+aiosqlite://"):
        # SQLite is for development and tests, no pool needed
        if not db_url.startswith("sqlite+aiosqlite://"):
            db_url = db_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        logger.info(f"Using SQLite database: {db_url}")
        return create_async_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,
        )

    else:
        raise ValueError(f"Unsupported database URL scheme: {db_url}")


engine = create_engine_from_url(settings.effective_database_url)
async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncSession:
    async with async_session() as session:
        yield session
