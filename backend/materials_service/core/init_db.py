# backend/materials_service/core/init_db.py
import asyncio
import logging
from sqlalchemy.ext.asyncio import AsyncEngine
from materials_service.core.database import engine as default_engine, Base
# Import all models to register them with Base
import materials_service.models  # noqa: F401

logger = logging.getLogger(__name__)


async def init_db(engine: AsyncEngine | None = None):
    """Create the materials table if it does not exist yet."""
    engine = engine or default_engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")


if __name__ == "__main__":
    asyncio.run(init_db())
