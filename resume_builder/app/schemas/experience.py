import logging
from datetime import date
from uuid import UUID

from pydantic import Field

from resume_builder.app.schemas.common import ApiModel, OrderUpdate, TimestampedResponse

log = logging.getLogger(__name__)


class ExperienceCreateRequest(ApiModel):
    """Request model for creating a work experience entry.

    (company, position) must be unique within the resume.

    """

    resume_id: UUID
    company: str | None = Field(default=None, max_length=200)
    position: str | None = Field(default=None, max_length=200)
    start_date: date | None = None
    end_date: date | None = None
    location: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    order_index: int | None = Field(default=None, ge=0)


class ExperienceUpdateRequest(ApiModel):
    company: str | None = Field(default=None, max_length=200)
    position: str | None = Field(default=None, max_length=200)
    start_date: date | None = None
    end_date: date | None = None
    location: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    order_index: int | None = Field(default=None, ge=0)


class ExperienceResponse(TimestampedResponse):
    id: UUID
    resume_id: UUID
    company: str | None = None
    position: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    location: str | None = None
    description: str | None = None
    order_index: int


class BulkUpdateExperienceRequest(ApiModel):
    experience: list[OrderUpdate] = Field(min_length=1)
