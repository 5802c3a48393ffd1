"""Fixtures for API tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from materials_service.core.database import create_engine_from_url, get_db
from materials_service.core.init_db import init_db
from materials_service.main import app


def _override_db(engine):
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def get_test_db():
        async with async_session() as session:
            yield session

    app.dependency_overrides[get_db] = get_test_db


@pytest.fixture
def client(tmp_path, reference_data):
    """Test client backed by a fresh SQLite file with the materials table."""
    engine = create_engine_from_url(f"sqlite+aiosqlite:///{tmp_path / 'materials.db'}")
    asyncio.run(init_db(engine))

    _override_db(engine)
    app.state.reference_data = reference_data

    yield TestClient(app)

    app.dependency_overrides = {}
    app.state.reference_data = None
    asyncio.run(engine.dispose())


@pytest.fixture
def broken_client(tmp_path, reference_data):
    """Test client whose database has no materials table."""
    engine = create_engine_from_url(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")

    _override_db(engine)
    app.state.reference_data = reference_data

    yield TestClient(app)

    app.dependency_overrides = {}
    app.state.reference_data = None
    asyncio.run(engine.dispose())


@pytest.fixture
def steel():
    """Sample create body."""
    return {
        "batchNumber": "B1",
        "materialName": "Steel",
        "alertQuantity": 10,
        "unitId": 1,
        "taxRateId": 2,
    }
