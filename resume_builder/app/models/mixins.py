import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Uuid
from sqlalchemy.orm import declared_attr


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Adds `created_at` / `updated_at` columns maintained on insert and update."""

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )


class ResumeChildMixin:
    """Columns shared by every row that hangs off a resume.

    Attributes:
        id (uuid.UUID): Primary key.
        resume_id (uuid.UUID): Owning resume; rows are removed with their resume.
        order_index (int): Position of the row among its siblings.

    """

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_index = Column(Integer, nullable=False, default=0)

    @declared_attr
    def resume_id(cls):
        return Column(
            Uuid,
            ForeignKey("resumes.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
