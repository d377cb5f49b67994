"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Records cross the boundary as plain dicts keyed by snake_case column names
"""

from datetime import datetime
from typing import Protocol

from scholartrack.core.domain_types import ScholarshipId


class ScholarshipLike(Protocol):
    """Structural contract for persisted scholarship objects returned by storage.

    Avoids coupling the route layer to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: int
    scholarship_name: str
    university_name: str
    country: str
    funding_type: str
    professor_email: str
    required_documents: list
    deadline: datetime
    status: str
    apply_link: str | None
    notes: str | None


class ScholarshipRepository(Protocol):
    """Contract for scholarship persistence — implemented by shell."""
    async def list_all(self) -> list[ScholarshipLike]: ...
    async def get_by_id(
        self, scholarship_id: ScholarshipId,
    ) -> ScholarshipLike | None: ...
    async def count(self) -> int: ...
    async def create(self, data: dict) -> ScholarshipLike: ...
    async def create_many(self, items: list[dict]) -> list[ScholarshipLike]: ...
    async def update(
        self, scholarship_id: ScholarshipId, changes: dict,
    ) -> ScholarshipLike | None: ...
    async def delete(self, scholarship_id: ScholarshipId) -> bool: ...
