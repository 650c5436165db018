import os

# Must be set before availability_api.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from availability_api.api import deps
from availability_api.core.database import Base
from availability_api.main import app
from availability_api.models import availability  # noqa: F401


def _override_db(db_file):
    # NullPool: TestClient runs every request on a fresh event loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}", poolclass=NullPool)
    TestingSession = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with TestingSession() as session:
            yield session

    return override_get_db


@pytest.fixture
def client(tmp_path):
    """Client backed by a fresh SQLite store with the availability table."""
    db_file = tmp_path / "availability.db"
    sync_engine = create_engine(f"sqlite:///{db_file}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    app.dependency_overrides[deps.get_db] = _override_db(db_file)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(tmp_path):
    """Client whose store has no availability table, so every query fails."""
    db_file = tmp_path / "empty.db"

    app.dependency_overrides[deps.get_db] = _override_db(db_file)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def save_day(client):
    def _save(date, status="available", message=None, time_slots=None):
        response = client.post(
            "/api/availability",
            json={
                "date": date,
                "status": status,
                "message": message,
                "timeSlots": time_slots if time_slots is not None else [],
            },
        )
        assert response.status_code == 200
        return response.json()

    return _save
