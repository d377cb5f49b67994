"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Env defaults set before any scholartrack module reads settings
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from scholartrack.db.base import Base  # noqa: E402
import scholartrack.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def valid_payload():
    """A complete creation body, camelCase as a client would send it."""
    return {
        "scholarshipName": "Test",
        "universityName": "X",
        "country": "Y",
        "fundingType": "Full",
        "professorEmail": "a@b.com",
        "requiredDocuments": [],
        "deadline": "2027-03-01T12:00:00Z",
        "status": "Applied",
    }
