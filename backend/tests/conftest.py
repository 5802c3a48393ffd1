"""Shared fixtures: in-memory database and reference tables."""

import json

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from materials_service.core.database import Base
from materials_service.core.reference_data import ReferenceData
import materials_service.models  # noqa: F401


# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

VALID_UNIT_ID = 1
VALID_TAX_RATE_ID = 2


@pytest.fixture
async def test_engine():
    """Create a test database engine with the materials table."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as session:
        yield session


@pytest.fixture
def reference_data():
    return ReferenceData(
        unit_ids=frozenset({1, 2, 3}),
        tax_rate_ids=frozenset({1, 2}),
    )


@pytest.fixture
def reference_files(tmp_path):
    """Write units.json / taxRates.json and return their paths."""
    units_path = tmp_path / "units.json"
    tax_rates_path = tmp_path / "taxRates.json"
    units_path.write_text(json.dumps([
        {"id": 1, "name": "Piece", "symbol": "pcs"},
        {"id": 2, "name": "Kilogram", "symbol": "kg"},
    ]))
    tax_rates_path.write_text(json.dumps([
        {"id": 1, "name": "Exempt", "rate": 0},
        {"id": 2, "name": "GST 5%", "rate": 5},
        {"id": 3, "name": "GST 18%", "rate": 18},
    ]))
    return units_path, tax_rates_path
