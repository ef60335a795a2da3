import logging

from sqlalchemy import Column, Date, String
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base
from resume_builder.app.models.mixins import ResumeChildMixin

log = logging.getLogger(__name__)


class Certification(ResumeChildMixin, Base):
    """A certification entry; (name, organization) is unique per resume."""

    __tablename__ = "certifications"

    name = Column(String(200), nullable=True)
    organization = Column(String(200), nullable=True)
    issue_date = Column(Date, nullable=True)
    expiry_date = Column(Date, nullable=True)
    credential_id = Column(String(100), nullable=True)
    credential_url = Column(String, nullable=True)

    resume = relationship("Resume", back_populates="certifications")
