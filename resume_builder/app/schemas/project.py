import logging
from uuid import UUID

from pydantic import Field

from resume_builder.app.schemas.common import ApiModel, OrderUpdate, TimestampedResponse

log = logging.getLogger(__name__)

MAX_TECHNOLOGIES = 20


class ProjectCreateRequest(ApiModel):
    """Request model for creating a project entry.

    Attributes:
        resume_id (UUID): The resume the entry belongs to.
        name (str | None): Project name, unique within the resume.
        role (str | None): The author's role on the project.
        description (str | None): Free-form description.
        link (str | None): Absolute URL; checked for well-formedness by route logic.
        technologies (list[str] | None): Up to 20 technology names.
        order_index (int | None): Position; defaults to the sibling count + 1 when omitted.

    """

    resume_id: UUID
    name: str | None = Field(default=None, max_length=200)
    role: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    link: str | None = None
    technologies: list[str] | None = Field(default=None, max_length=MAX_TECHNOLOGIES)
    order_index: int | None = Field(default=None, ge=0)


class ProjectUpdateRequest(ApiModel):
    name: str | None = Field(default=None, max_length=200)
    role: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    link: str | None = None
    technologies: list[str] | None = Field(default=None, max_length=MAX_TECHNOLOGIES)
    order_index: int | None = Field(default=None, ge=0)


class ProjectResponse(TimestampedResponse):
    id: UUID
    resume_id: UUID
    name: str | None = None
    role: str | None = None
    description: str | None = None
    link: str | None = None
    technologies: list[str] = []
    order_index: int


class BulkUpdateProjectsRequest(ApiModel):
    projects: list[OrderUpdate] = Field(min_length=1)
