import logging
import uuid
from dataclasses import dataclass

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from resume_builder.app.models import Base
from resume_builder.app.models.mixins import TimestampMixin

log = logging.getLogger(__name__)

DEFAULT_THEME = "default"


@dataclass
class ResumeData:
    """Dataclass to hold data for Resume initialization."""

    user_id: str
    title: str
    theme: str = DEFAULT_THEME


def _child_relationship(class_name: str):
    return relationship(
        class_name,
        back_populates="resume",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=f"{class_name}.order_index",
    )


class Resume(TimestampMixin, Base):
    """Resume model, the root aggregate of every section and entry.

    Attributes:
        id (uuid.UUID): Unique identifier for the resume.
        user_id (str): Identifier of the owning user, as issued by the external identity provider.
        title (str): User-assigned title for the resume.
        theme (str): Rendering theme, one of default, modern, classic, professional.
        created_at (datetime): Timestamp when the resume was created.
        updated_at (datetime): Timestamp when the resume was last updated.
        sections, education, experience, projects, skills, certifications:
            Child rows ordered by `order_index`; deleted together with the resume.

    """

    __tablename__ = "resumes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String, nullable=False, index=True)
    title = Column(String(100), nullable=False)
    theme = Column(String(20), nullable=False, default=DEFAULT_THEME)

    sections = _child_relationship("ResumeSection")
    education = _child_relationship("Education")
    experience = _child_relationship("Experience")
    projects = _child_relationship("Project")
    skills = _child_relationship("Skill")
    certifications = _child_relationship("Certification")

    def __init__(self, data: ResumeData):
        """Initialize a Resume instance.

        Args:
            data (ResumeData): An object containing the data for the new resume.

        Returns:
            None

        Notes:
            1. Assigns attributes from the `data` object to the `Resume` instance.
            2. This constructor does not perform validation; request models and route logic do.
            3. This function does not perform disk, network, or database access.

        """
        _msg = f"Initializing Resume with title: {data.title}"
        log.debug(_msg)

        self.user_id = data.user_id
        self.title = data.title
        self.theme = data.theme
