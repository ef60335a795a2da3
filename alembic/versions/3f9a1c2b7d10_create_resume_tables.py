"""Create resume tables

Revision ID: 3f9a1c2b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f9a1c2b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CHILD_TABLES = (
    "resume_sections",
    "education",
    "experience",
    "projects",
    "skills",
    "certifications",
)


def _child_columns(with_timestamps: bool) -> list[sa.Column]:
    columns = [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("resume_id", sa.Uuid(), nullable=False),
        sa.Column("order_index", sa.Integer(), nullable=False),
    ]
    if with_timestamps:
        columns += [
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        ]
    return columns


def _child_constraints(table: str) -> list:
    return [
        sa.ForeignKeyConstraint(["resume_id"], ["resumes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id", name=f"pk_{table}"),
    ]


def upgrade() -> None:
    """Create the resumes table and the tables of its sections and entries."""
    op.create_table(
        "resumes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=100), nullable=False),
        sa.Column("theme", sa.String(length=20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_resumes_user_id"), "resumes", ["user_id"], unique=False)

    op.create_table(
        "resume_sections",
        *_child_columns(with_timestamps=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("display_name", sa.String(length=100), nullable=True),
        sa.Column("is_visible", sa.Boolean(), nullable=False),
        *_child_constraints("resume_sections"),
    )
    op.create_table(
        "education",
        *_child_columns(with_timestamps=True),
        sa.Column("institution", sa.String(length=200), nullable=True),
        sa.Column("degree", sa.String(length=100), nullable=True),
        sa.Column("field_of_study", sa.String(length=100), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("grade", sa.String(length=50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_child_constraints("education"),
    )
    op.create_table(
        "experience",
        *_child_columns(with_timestamps=True),
        sa.Column("company", sa.String(length=200), nullable=True),
        sa.Column("position", sa.String(length=200), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        *_child_constraints("experience"),
    )
    op.create_table(
        "projects",
        *_child_columns(with_timestamps=True),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("role", sa.String(length=200), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("link", sa.String(), nullable=True),
        sa.Column(
            "technologies",
            postgresql.JSONB(astext_type=sa.Text()).with_variant(sa.JSON(), "sqlite"),
            nullable=False,
        ),
        *_child_constraints("projects"),
    )
    op.create_table(
        "skills",
        *_child_columns(with_timestamps=False),
        sa.Column("name", sa.String(length=100), nullable=True),
        sa.Column("level", sa.String(length=20), nullable=True),
        sa.Column("category", sa.String(length=50), nullable=True),
        *_child_constraints("skills"),
    )
    op.create_table(
        "certifications",
        *_child_columns(with_timestamps=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("organization", sa.String(length=200), nullable=True),
        sa.Column("issue_date", sa.Date(), nullable=True),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("credential_id", sa.String(length=100), nullable=True),
        sa.Column("credential_url", sa.String(), nullable=True),
        *_child_constraints("certifications"),
    )

    for table in CHILD_TABLES:
        op.create_index(op.f(f"ix_{table}_resume_id"), table, ["resume_id"], unique=False)


def downgrade() -> None:
    """Drop every resume table."""
    for table in reversed(CHILD_TABLES):
        op.drop_index(op.f(f"ix_{table}_resume_id"), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f("ix_resumes_user_id"), table_name="resumes")
    op.drop_table("resumes")
