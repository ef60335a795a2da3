import logging

from sqlalchemy import Column, Date, String, Text
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base
from resume_builder.app.models.mixins import ResumeChildMixin, TimestampMixin

log = logging.getLogger(__name__)


class Education(ResumeChildMixin, TimestampMixin, Base):
    """An education entry; (institution, degree) is unique per resume."""

    __tablename__ = "education"

    institution = Column(String(200), nullable=True)
    degree = Column(String(100), nullable=True)
    field_of_study = Column(String(100), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    grade = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)

    resume = relationship("Resume", back_populates="education")
