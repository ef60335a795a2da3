import logging

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base
from resume_builder.app.models.mixins import ResumeChildMixin, TimestampMixin

log = logging.getLogger(__name__)


class ResumeSection(ResumeChildMixin, TimestampMixin, Base):
    """A named, orderable block of a resume.

    Attributes:
        name (str): Section kind; one of the names in `SECTION_DISPLAY_NAMES`, unique per resume.
        display_name (str | None): Heading shown to readers.
        is_visible (bool): Whether the section is rendered.

    """

    __tablename__ = "resume_sections"

    name = Column(String(50), nullable=False)
    display_name = Column(String(100), nullable=True)
    is_visible = Column(Boolean, nullable=False, default=True)

    resume = relationship("Resume", back_populates="sections")
