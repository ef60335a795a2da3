import logging

from sqlalchemy import Column, Date, String, Text
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base
from resume_builder.app.models.mixins import ResumeChildMixin, TimestampMixin

log = logging.getLogger(__name__)


class Experience(ResumeChildMixin, TimestampMixin, Base):
    """A work experience entry; (company, position) is unique per resume."""

    __tablename__ = "experience"

    company = Column(String(200), nullable=True)
    position = Column(String(200), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    location = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)

    resume = relationship("Resume", back_populates="experience")
