"""Root conftest - shared fixtures: per-test SQLite database + FastAPI test client.

Invariants:
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - The app under test receives its DatabaseSessionManager through app.state,
      the same seam the lifespan uses in production

Design Decisions:
    - File-backed SQLite over :memory:: every pooled connection sees the same data
    - ASGITransport does not run the lifespan, so fixtures install the manager directly
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Importing championship_api.main builds the module-level app from the environment
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from championship_api.config import Settings  # noqa: E402
from championship_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from championship_api.main import create_app  # noqa: E402


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        log_format="text",
    )


@pytest.fixture
async def db_manager(settings):
    manager = DatabaseSessionManager(settings.database_url)
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def app(settings, db_manager):
    application = create_app(settings)
    application.state.db_manager = db_manager
    return application


@pytest.fixture
async def client(app):
    """HTTP client bound to the app under test."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def make_user(client):
    """POST a record and return the response body."""
    async def _make(university="Alabama", point_differential=10, championship_year=2020):
        res = await client.post("/users", json={
            "university": university,
            "pointDifferential": point_differential,
            "championshipYear": championship_year,
        })
        assert res.status_code == 201, res.text
        return res.json()
    return _make
