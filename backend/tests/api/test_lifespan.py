"""Application Lifespan — database initialized and seeded before serving.

Invariants:
    - With seeding enabled, an empty database holds the three samples once startup completes
    - With seeding disabled, startup leaves the database empty
    - db_manager is torn down on shutdown
"""

import pytest

import scholartrack.infrastructure.database as db_module
from scholartrack.config import get_settings
from scholartrack.infrastructure.scholarship_repository import (
    SqlScholarshipRepository,
)
from scholartrack.main import app, lifespan


@pytest.fixture
def configure(monkeypatch, tmp_path):
    """Point settings at a throwaway SQLite file; returns a setter for env overrides."""
    monkeypatch.setenv(
        "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'lifespan.db'}",
    )
    monkeypatch.setenv("DATABASE_AUTO_CREATE", "true")
    monkeypatch.setenv("LOG_FORMAT", "text")

    def _set(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


async def _count_rows() -> int:
    async with db_module.db_manager.session() as db:
        return await SqlScholarshipRepository(db).count()


async def test_startup_seeds_empty_database(configure):
    configure(SEED_ON_STARTUP="true")

    async with lifespan(app):
        assert await _count_rows() == 3

    assert db_module.db_manager is None


async def test_startup_without_seeding_leaves_database_empty(configure):
    configure(SEED_ON_STARTUP="false")

    async with lifespan(app):
        assert await _count_rows() == 0


async def test_restart_does_not_seed_twice(configure):
    configure(SEED_ON_STARTUP="true")

    async with lifespan(app):
        pass
    async with lifespan(app):
        assert await _count_rows() == 3
