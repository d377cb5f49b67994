"""Route Contract — shared method/path/schema descriptors for every endpoint.

Invariants:
    - Routers take paths, success status codes and response schemas from here;
      no path literals or status constants in route modules
    - Item paths use FastAPI placeholder syntax ({id})
    - build_url() is the only way clients/tests turn a descriptor into a URL

Design Decisions:
    - Frozen dataclasses: one importable source of truth for server and clients
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from scholartrack.schemas.scholarship import (
    ScholarshipCreate, ScholarshipResponse, ScholarshipUpdate,
)

API_PREFIX = "/api"


@dataclass(frozen=True)
class RouteDescriptor:
    """One endpoint: HTTP method, path pattern, request and response schemas."""
    method: str
    path: str
    input: type[BaseModel] | None = None
    responses: dict[int, Any] = field(default_factory=dict)

    @property
    def success_status(self) -> int:
        return min(code for code in self.responses if code < 300)

    @property
    def success_model(self) -> Any:
        """Response schema for success_status (None when there is no body)."""
        return self.responses[self.success_status]


@dataclass(frozen=True)
class ScholarshipRoutes:
    list: RouteDescriptor
    get: RouteDescriptor
    create: RouteDescriptor
    update: RouteDescriptor
    delete: RouteDescriptor


@dataclass(frozen=True)
class ApiContract:
    scholarships: ScholarshipRoutes


_COLLECTION = f"{API_PREFIX}/scholarships"
_ITEM = f"{_COLLECTION}/{{id}}"

api = ApiContract(
    scholarships=ScholarshipRoutes(
        list=RouteDescriptor(
            "GET", _COLLECTION, responses={200: list[ScholarshipResponse]},
        ),
        get=RouteDescriptor(
            "GET", _ITEM, responses={200: ScholarshipResponse, 404: None},
        ),
        create=RouteDescriptor(
            "POST", _COLLECTION, input=ScholarshipCreate,
            responses={201: ScholarshipResponse, 400: None},
        ),
        update=RouteDescriptor(
            "PUT", _ITEM, input=ScholarshipUpdate,
            responses={200: ScholarshipResponse, 400: None, 404: None},
        ),
        delete=RouteDescriptor(
            "DELETE", _ITEM, responses={204: None},
        ),
    ),
)


def build_url(path: str, **params: object) -> str:
    """Substitute {name} placeholders in a descriptor path."""
    url = path
    for key, value in params.items():
        url = url.replace(f"{{{key}}}", str(value))
    return url
