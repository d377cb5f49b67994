"""Scholarship Seeder — populates an empty store with sample records at startup.

Invariants:
    - Inserts only when the store is empty; never touches existing data
    - Empty-check and inserts share one DB session; inserts commit together
    - run_startup_seed never raises; failures are logged, not retried

Design Decisions:
    - Awaited in the app lifespan before requests are served, so seeding
      cannot interleave with client writes
"""

import logging
from datetime import datetime, timezone

from scholartrack.core.repository_protocols import ScholarshipRepository
from scholartrack.core.seed_data import build_sample_scholarships
from scholartrack.infrastructure.database import DatabaseSessionManager
from scholartrack.infrastructure.scholarship_repository import (
    SqlScholarshipRepository,
)

logger = logging.getLogger(__name__)


async def seed_scholarships(
    repo: ScholarshipRepository, now: datetime | None = None,
) -> int:
    """Insert the sample scholarships if storage is empty. Returns rows inserted."""
    if await repo.count() > 0:
        return 0
    records = build_sample_scholarships(now or datetime.now(timezone.utc))
    created = await repo.create_many(records)
    return len(created)


async def run_startup_seed(manager: DatabaseSessionManager) -> int:
    """Seed inside a fresh session. Errors end the seeding task only."""
    try:
        async with manager.session() as db:
            inserted = await seed_scholarships(SqlScholarshipRepository(db))
    except Exception as e:
        logger.error(f"Scholarship seeding failed: {e}", exc_info=True)
        return 0
    if inserted:
        logger.info(
            f"Seeded {inserted} sample scholarships",
            extra={"inserted": inserted},
        )
    else:
        logger.info("Scholarships already present, skipping seed")
    return inserted
