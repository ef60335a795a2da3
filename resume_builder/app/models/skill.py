import logging

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base
from resume_builder.app.models.mixins import ResumeChildMixin

log = logging.getLogger(__name__)


class Skill(ResumeChildMixin, Base):
    """A skill entry. Skills carry no timestamps.

    Attributes:
        name (str | None): Skill name, unique per resume.
        level (str | None): One of Beginner, Intermediate, Advanced, Expert.
        category (str | None): Free-form grouping label.

    """

    __tablename__ = "skills"

    name = Column(String(100), nullable=True)
    level = Column(String(20), nullable=True)
    category = Column(String(50), nullable=True)

    resume = relationship("Resume", back_populates="skills")
