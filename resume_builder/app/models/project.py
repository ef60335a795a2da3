import logging

from sqlalchemy import JSON, Column, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base
from resume_builder.app.models.mixins import ResumeChildMixin, TimestampMixin

log = logging.getLogger(__name__)


class Project(ResumeChildMixin, TimestampMixin, Base):
    """A project entry; its name is unique per resume.

    Attributes:
        technologies (list[str]): Stored as JSONB on PostgreSQL and JSON on SQLite.

    """

    __tablename__ = "projects"

    name = Column(String(200), nullable=True)
    role = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    link = Column(String, nullable=True)
    technologies = Column(
        JSONB().with_variant(JSON, "sqlite"),
        nullable=False,
        default=list,
    )

    resume = relationship("Resume", back_populates="projects")
