"""Scholarship Seeder — inserts samples only into an empty store, never raises.

Invariants:
    - Empty store → exactly three rows inserted
    - Non-empty store → nothing inserted, existing rows untouched
    - run_startup_seed swallows and logs failures
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from scholartrack.core.errors import DatabaseError
from scholartrack.infrastructure.database import DatabaseSessionManager
from scholartrack.infrastructure.scholarship_repository import (
    SqlScholarshipRepository,
)
from scholartrack.services.seed_scholarships import (
    run_startup_seed, seed_scholarships,
)

NOW = datetime(2026, 10, 19, tzinfo=timezone.utc)


def _manager(test_engine, test_session_factory) -> DatabaseSessionManager:
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


async def test_seed_inserts_three_into_empty_store(test_db):
    repo = SqlScholarshipRepository(test_db)

    inserted = await seed_scholarships(repo, now=NOW)

    assert inserted == 3
    names = [s.scholarship_name for s in await repo.list_all()]
    assert names == [
        "Knight-Hennessy Scholarship",
        "Gates Cambridge Scholarship",
        "ETH Excellence Scholarship",
    ]


async def test_seed_skips_non_empty_store(test_db):
    repo = SqlScholarshipRepository(test_db)
    await repo.create({
        "scholarship_name": "Existing",
        "university_name": "Oxford",
        "country": "UK",
        "funding_type": "Partial",
        "professor_email": "office@ox.ac.uk",
        "required_documents": [],
        "deadline": NOW,
        "status": "Preparing",
    })

    inserted = await seed_scholarships(repo, now=NOW)

    assert inserted == 0
    assert [s.scholarship_name for s in await repo.list_all()] == ["Existing"]


async def test_seed_twice_is_a_noop_the_second_time(test_db):
    repo = SqlScholarshipRepository(test_db)
    await seed_scholarships(repo, now=NOW)

    assert await seed_scholarships(repo, now=NOW) == 0
    assert await repo.count() == 3


async def test_run_startup_seed_uses_its_own_session(test_engine, test_session_factory):
    manager = _manager(test_engine, test_session_factory)

    assert await run_startup_seed(manager) == 3

    async with test_session_factory() as db:
        assert await SqlScholarshipRepository(db).count() == 3


async def test_run_startup_seed_logs_and_swallows_failures(caplog):
    class _FailingManager:
        @asynccontextmanager
        async def session(self):
            raise DatabaseError("Connection or operational error", "execute")
            yield  # pragma: no cover

    with caplog.at_level(logging.ERROR):
        inserted = await run_startup_seed(_FailingManager())

    assert inserted == 0
    assert "Scholarship seeding failed" in caplog.text
