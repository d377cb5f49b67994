"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ScholarshipId wraps the storage-assigned integer key
    - All valid enumerated values encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders, stored as plain strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ScholarshipId = NewType("ScholarshipId", int)


# ─── Enums ───────────────────────────────────────────────────────

class FundingType(str, Enum):
    """How much of the cost the scholarship covers."""
    FULL = "Full"
    PARTIAL = "Partial"


class ApplicationStatus(str, Enum):
    """Where the applicant is in the application process."""
    PREPARING = "Preparing"
    APPLIED = "Applied"
    SUBMITTED = "Submitted"
    INTERVIEW = "Interview"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
