"""Scholarship ORM — persists one tracked scholarship application.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database
    - Every required field is non-nullable; apply_link and notes are optional
    - required_documents keeps the caller's order

Design Decisions:
    - JSON column for required_documents: portable across PostgreSQL and SQLite
    - funding_type/status stored as short strings, validated at the schema layer
"""

from datetime import datetime

from sqlalchemy import String, Text, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from scholartrack.db.base import Base


class Scholarship(Base):
    """A scholarship the user is tracking an application for."""
    __tablename__ = "scholarships"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    scholarship_name: Mapped[str] = mapped_column(Text, nullable=False)
    university_name: Mapped[str] = mapped_column(Text, nullable=False)
    country: Mapped[str] = mapped_column(Text, nullable=False)
    funding_type: Mapped[str] = mapped_column(String(20), nullable=False)
    professor_email: Mapped[str] = mapped_column(Text, nullable=False)
    required_documents: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    deadline: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    apply_link: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
