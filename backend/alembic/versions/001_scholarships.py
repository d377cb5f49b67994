"""Initial schema — scholarships.

Revision ID: 001_scholarships
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_scholarships"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "scholarships",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("scholarship_name", sa.Text, nullable=False),
        sa.Column("university_name", sa.Text, nullable=False),
        sa.Column("country", sa.Text, nullable=False),
        sa.Column("funding_type", sa.String(20), nullable=False),
        sa.Column("professor_email", sa.Text, nullable=False),
        sa.Column("required_documents", sa.JSON, nullable=False),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("apply_link", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("scholarships")
