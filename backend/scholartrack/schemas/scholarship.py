"""Scholarship Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Wire names are camelCase (alias generator); Python names stay snake_case
    - ScholarshipCreate requires every field except applyLink/notes; id is never accepted
    - ScholarshipUpdate is a partial merge: omitted fields are untouched,
      null is rejected for required fields and clears optional ones
    - deadline is always normalized to UTC (naive input is taken as UTC)

Design Decisions:
    - Errors keep field order, so the first error of an empty body names scholarshipName
    - to_record() emits snake_case dicts for the repository, never ORM objects
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, EmailStr, Field, HttpUrl,
    TypeAdapter, ValidationError, field_validator,
)
from pydantic.alias_generators import to_camel

from scholartrack.core.domain_types import ApplicationStatus, FundingType

_REQUIRED_FIELDS = (
    "scholarship_name", "university_name", "country", "funding_type",
    "professor_email", "required_documents", "deadline", "status",
)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _checked_by(adapter: TypeAdapter):
    """Validate with `adapter` but hand back the caller's string unchanged."""
    def check(value: str) -> str:
        try:
            adapter.validate_python(value)
        except ValidationError as e:
            raise ValueError(e.errors()[0]["msg"]) from None
        return value
    return check


# Stored as sent: EmailStr lowercases the domain, HttpUrl appends a slash to bare hosts.
EmailText = Annotated[str, AfterValidator(_checked_by(TypeAdapter(EmailStr)))]
LinkText = Annotated[str, AfterValidator(_checked_by(TypeAdapter(HttpUrl)))]


class CamelModel(BaseModel):
    """Base for all API schemas: camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class ScholarshipCreate(CamelModel):
    """Scholarship creation — every required attribute must be present."""
    scholarship_name: str = Field(min_length=1, max_length=500)
    university_name: str = Field(min_length=1, max_length=500)
    country: str = Field(min_length=1, max_length=200)
    funding_type: FundingType
    professor_email: EmailText
    required_documents: list[str]
    deadline: datetime
    status: ApplicationStatus
    apply_link: LinkText | None = None
    notes: str | None = Field(None, max_length=5000)

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: datetime) -> datetime:
        return _as_utc(v)

    def to_record(self) -> dict:
        return self.model_dump()


class ScholarshipUpdate(CamelModel):
    """Scholarship update — any subset of the creation fields."""
    scholarship_name: str | None = Field(None, min_length=1, max_length=500)
    university_name: str | None = Field(None, min_length=1, max_length=500)
    country: str | None = Field(None, min_length=1, max_length=200)
    funding_type: FundingType | None = None
    professor_email: EmailText | None = None
    required_documents: list[str] | None = None
    deadline: datetime | None = None
    status: ApplicationStatus | None = None
    apply_link: LinkText | None = None
    notes: str | None = Field(None, max_length=5000)

    @field_validator(*_REQUIRED_FIELDS)
    @classmethod
    def reject_null_for_required(cls, v):
        # Runs only for supplied values; omitted fields keep their defaults.
        if v is None:
            raise ValueError("field is required and cannot be null")
        return v

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    def to_record(self) -> dict:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


class ScholarshipResponse(CamelModel):
    """Scholarship response — the persisted record as seen by clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    scholarship_name: str
    university_name: str
    country: str
    funding_type: FundingType
    professor_email: str
    required_documents: list[str]
    deadline: datetime
    status: ApplicationStatus
    apply_link: str | None = None
    notes: str | None = None

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: datetime) -> datetime:
        return _as_utc(v)
