import logging
from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator

from resume_builder.app.schemas.certification import CertificationResponse
from resume_builder.app.schemas.common import ApiModel, TimestampedResponse
from resume_builder.app.schemas.education import EducationResponse
from resume_builder.app.schemas.experience import ExperienceResponse
from resume_builder.app.schemas.project import ProjectResponse
from resume_builder.app.schemas.section import SectionResponse
from resume_builder.app.schemas.skill import SkillResponse

log = logging.getLogger(__name__)


class Theme(str, Enum):
    """Rendering themes a resume may use."""

    DEFAULT = "default"
    MODERN = "modern"
    CLASSIC = "classic"
    PROFESSIONAL = "professional"


def _validate_title(v: str | None) -> str | None:
    if v is None:
        return v
    if not v.strip():
        raise ValueError("title must not be empty")
    return v.strip()


class ResumeCreateRequest(ApiModel):
    """Request model for creating a resume.

    Attributes:
        title (str): The resume title, 1 to 100 characters.
        theme (Theme | None): The theme; "default" when omitted.

    """

    title: str = Field(min_length=1, max_length=100)
    theme: Theme | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str):
        """Strip the title and reject a blank one.

        Args:
            v (str): The title value to validate.

        Returns:
            str: The title without leading/trailing whitespace.

        Raises:
            ValueError: If the title contains only whitespace.

        """
        return _validate_title(v)


class ResumeUpdateRequest(ApiModel):
    """Request model for a partial resume update; omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=100)
    theme: Theme | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None):
        return _validate_title(v)


class ResumeResponse(TimestampedResponse):
    """Response model for a single resume.

    Attributes:
        id (UUID): The resume identifier.
        user_id (str): The owning user's identifier.
        title (str): The resume title.
        theme (str): The resume theme.

    """

    id: UUID
    user_id: str
    title: str
    theme: str


class ResumeSummaryResponse(TimestampedResponse):
    """Resume entry in a list; omits the owner."""

    id: UUID
    title: str
    theme: str


class ResumeWithSectionsResponse(ResumeResponse):
    """A resume together with every section and entry it owns, each ordered by `orderIndex`."""

    sections: list[SectionResponse] = []
    education: list[EducationResponse] = []
    experience: list[ExperienceResponse] = []
    projects: list[ProjectResponse] = []
    skills: list[SkillResponse] = []
    certifications: list[CertificationResponse] = []
