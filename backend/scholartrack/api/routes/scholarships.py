"""Scholarship Routes — list, get, create, update and delete tracked scholarships.

Invariants:
    - Paths, success status codes and response schemas come from the
      shared route contract (api/contract.py)
    - Request bodies are validated by Pydantic before reaching the handler;
      failures surface as 400 {"message", "field"} via the global handler
    - Missing records raise ScholarshipNotFoundError → 404 {"message"}
    - DELETE is idempotent: 204 whether or not the record existed
    - Handlers never cache or mutate records themselves

Design Decisions:
    - Repository injected per request via Depends, bound to the request session
    - PUT is a partial merge: only fields present in the body change
"""

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from scholartrack.api.contract import api
from scholartrack.core.domain_types import ScholarshipId
from scholartrack.core.errors import ScholarshipNotFoundError
from scholartrack.core.repository_protocols import ScholarshipRepository
from scholartrack.infrastructure.database import get_db
from scholartrack.infrastructure.scholarship_repository import (
    SqlScholarshipRepository,
)
from scholartrack.schemas.scholarship import (
    ScholarshipCreate, ScholarshipResponse, ScholarshipUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["scholarships"])
routes = api.scholarships


async def get_scholarship_repository(
    db: AsyncSession = Depends(get_db),
) -> ScholarshipRepository:
    return SqlScholarshipRepository(db)


@router.get(
    routes.list.path, response_model=routes.list.success_model,
    status_code=routes.list.success_status,
)
async def list_scholarships(
    repo: ScholarshipRepository = Depends(get_scholarship_repository),
):
    """Every tracked scholarship, oldest first."""
    items = await repo.list_all()
    return [ScholarshipResponse.model_validate(item) for item in items]


@router.get(
    routes.get.path, response_model=routes.get.success_model,
    status_code=routes.get.success_status,
)
async def get_scholarship(
    id: int,
    repo: ScholarshipRepository = Depends(get_scholarship_repository),
):
    item = await repo.get_by_id(ScholarshipId(id))
    if item is None:
        raise ScholarshipNotFoundError(id)
    return ScholarshipResponse.model_validate(item)


@router.post(
    routes.create.path, response_model=routes.create.success_model,
    status_code=routes.create.success_status,
)
async def create_scholarship(
    body: ScholarshipCreate,
    repo: ScholarshipRepository = Depends(get_scholarship_repository),
):
    item = await repo.create(body.to_record())
    return ScholarshipResponse.model_validate(item)


@router.put(
    routes.update.path, response_model=routes.update.success_model,
    status_code=routes.update.success_status,
)
async def update_scholarship(
    id: int,
    body: ScholarshipUpdate,
    repo: ScholarshipRepository = Depends(get_scholarship_repository),
):
    """Merge the supplied fields into an existing scholarship."""
    item = await repo.update(ScholarshipId(id), body.to_record())
    if item is None:
        raise ScholarshipNotFoundError(id)
    return ScholarshipResponse.model_validate(item)


@router.delete(
    routes.delete.path, status_code=routes.delete.success_status,
    response_class=Response,
)
async def delete_scholarship(
    id: int,
    repo: ScholarshipRepository = Depends(get_scholarship_repository),
):
    """Delete without an existence check. Unknown ids still get 204."""
    await repo.delete(ScholarshipId(id))
    return Response(status_code=routes.delete.success_status)
