import logging
from uuid import UUID

from pydantic import Field

from resume_builder.app.schemas.common import ApiModel, OrderUpdate

log = logging.getLogger(__name__)


class SkillCreateRequest(ApiModel):
    """Request model for creating a skill entry.

    Attributes:
        resume_id (UUID): The resume the entry belongs to.
        name (str | None): Skill name, unique within the resume.
        level (str | None): One of Beginner, Intermediate, Advanced, Expert (any case).
        category (str | None): Grouping label; "Other" when omitted or empty.
        order_index (int | None): Position; defaults to the sibling count + 1 when omitted.

    """

    resume_id: UUID
    name: str | None = Field(default=None, max_length=100)
    level: str | None = None
    category: str | None = Field(default=None, max_length=50)
    order_index: int | None = Field(default=None, ge=0)


class SkillUpdateRequest(ApiModel):
    name: str | None = Field(default=None, max_length=100)
    level: str | None = None
    category: str | None = Field(default=None, max_length=50)
    order_index: int | None = Field(default=None, ge=0)


class SkillResponse(ApiModel):
    id: UUID
    resume_id: UUID
    name: str | None = None
    level: str | None = None
    category: str | None = None
    order_index: int


class SkillsByCategoryResponse(ApiModel):
    """Skills of one category, ordered by `orderIndex`."""

    category: str
    skills: list[SkillResponse]


class BulkUpdateSkillsRequest(ApiModel):
    skills: list[OrderUpdate] = Field(min_length=1)
