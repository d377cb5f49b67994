"""Seed Data — the three sample scholarships inserted into an empty store.

Invariants:
    - Pure: deadlines computed from the caller-supplied `now`, never the clock
    - Exactly three records, in a fixed order, each satisfying ScholarshipCreate
    - Deadlines: +1 calendar month, +45 days, +10 days

Design Decisions:
    - add_months rolls day overflow forward (Jan 31 + 1 month -> early March)
      instead of clamping, matching calendar-date arithmetic in browsers
"""

from datetime import datetime, timedelta

from scholartrack.core.domain_types import ApplicationStatus, FundingType

SAMPLE_SCHOLARSHIP_NAMES = (
    "Knight-Hennessy Scholarship",
    "Gates Cambridge Scholarship",
    "ETH Excellence Scholarship",
)


def add_months(value: datetime, months: int) -> datetime:
    """Shift by whole calendar months, keeping day-of-month and time."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    first_of_month = value.replace(year=year, month=month, day=1)
    return first_of_month + timedelta(days=value.day - 1)


def build_sample_scholarships(now: datetime) -> list[dict]:
    """Return snake_case records ready for ScholarshipRepository.create_many."""
    return [
        {
            "scholarship_name": SAMPLE_SCHOLARSHIP_NAMES[0],
            "university_name": "Stanford University",
            "country": "USA",
            "funding_type": FundingType.FULL.value,
            "professor_email": "admissions@stanford.edu",
            "required_documents": [
                "CV", "Statement of Purpose", "3 Letters of Recommendation",
            ],
            "deadline": add_months(now, 1),
            "status": ApplicationStatus.APPLIED.value,
            "apply_link": "https://stanford.edu/apply",
            "notes": "High priority application",
        },
        {
            "scholarship_name": SAMPLE_SCHOLARSHIP_NAMES[1],
            "university_name": "University of Cambridge",
            "country": "UK",
            "funding_type": FundingType.PARTIAL.value,
            "professor_email": "contact@cam.ac.uk",
            "required_documents": ["CV", "Research Proposal"],
            "deadline": now + timedelta(days=45),
            "status": ApplicationStatus.PREPARING.value,
            "apply_link": "https://cam.ac.uk/apply",
            "notes": "Need to finish research proposal",
        },
        {
            "scholarship_name": SAMPLE_SCHOLARSHIP_NAMES[2],
            "university_name": "ETH Zurich",
            "country": "Switzerland",
            "funding_type": FundingType.FULL.value,
            "professor_email": "info@ethz.ch",
            "required_documents": ["Transcripts", "CV"],
            "deadline": now + timedelta(days=10),
            "status": ApplicationStatus.SUBMITTED.value,
            "apply_link": "https://ethz.ch/en.html",
            "notes": "Waiting for interview call",
        },
    ]
