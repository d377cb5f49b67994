"""API test fixtures — FastAPI test client over the per-test SQLite database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness probes and seeding see the test engine

Design Decisions:
    - httpx ASGITransport does not run the lifespan, so no startup seeding
      happens unless a test asks for it
"""

import pytest
from httpx import ASGITransport, AsyncClient

from scholartrack.infrastructure.database import get_db, DatabaseSessionManager
import scholartrack.infrastructure.database as db_module
from scholartrack.main import app


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_session_factory, fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
