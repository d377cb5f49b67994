"""Scholarship Repository — SQLAlchemy implementation of the ScholarshipRepository protocol.

Invariants:
    - Every write commits before returning; callers never see uncommitted rows
    - list_all() is ordered by id ascending (insertion order)
    - update() merges only the supplied keys and never creates a row
    - delete() is idempotent; a missing row is not an error

Design Decisions:
    - One repository per request, bound to the request's AsyncSession
    - create_many() commits once so seeding is all-or-nothing
    - SQLAlchemy errors are left to DatabaseSessionManager, which maps them to DatabaseError
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from scholartrack.core.domain_types import ScholarshipId
from scholartrack.models.scholarship import Scholarship

logger = logging.getLogger(__name__)

_IMMUTABLE = frozenset({"id"})


class SqlScholarshipRepository:
    """Scholarship persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Scholarship]:
        result = await self._db.execute(
            select(Scholarship).order_by(Scholarship.id),
        )
        return list(result.scalars().all())

    async def get_by_id(
        self, scholarship_id: ScholarshipId,
    ) -> Scholarship | None:
        return await self._db.get(Scholarship, scholarship_id)

    async def count(self) -> int:
        result = await self._db.execute(
            select(func.count()).select_from(Scholarship),
        )
        return result.scalar_one()

    async def create(self, data: dict) -> Scholarship:
        item = Scholarship(**_writable(data))
        self._db.add(item)
        await self._db.commit()
        await self._db.refresh(item)
        logger.info(
            f"Created scholarship {item.id}",
            extra={"scholarship_id": item.id},
        )
        return item

    async def create_many(self, items: list[dict]) -> list[Scholarship]:
        rows = [Scholarship(**_writable(data)) for data in items]
        self._db.add_all(rows)
        await self._db.commit()
        for row in rows:
            await self._db.refresh(row)
        return rows

    async def update(
        self, scholarship_id: ScholarshipId, changes: dict,
    ) -> Scholarship | None:
        item = await self._db.get(Scholarship, scholarship_id)
        if item is None:
            return None
        for key, value in _writable(changes).items():
            setattr(item, key, value)
        await self._db.commit()
        await self._db.refresh(item)
        logger.info(
            f"Updated scholarship {item.id}: {sorted(changes)}",
            extra={"scholarship_id": item.id},
        )
        return item

    async def delete(self, scholarship_id: ScholarshipId) -> bool:
        result = await self._db.execute(
            delete(Scholarship).where(Scholarship.id == scholarship_id),
        )
        await self._db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(
                f"Deleted scholarship {scholarship_id}",
                extra={"scholarship_id": scholarship_id},
            )
        return deleted


def _writable(data: dict) -> dict:
    """Drop keys storage owns (id is assigned once and never reassigned)."""
    return {k: v for k, v in data.items() if k not in _IMMUTABLE}
