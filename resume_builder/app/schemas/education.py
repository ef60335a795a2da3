import logging
from datetime import date
from uuid import UUID

from pydantic import Field

from resume_builder.app.schemas.common import ApiModel, OrderUpdate, TimestampedResponse

log = logging.getLogger(__name__)


class EducationCreateRequest(ApiModel):
    """Request model for creating an education entry.

    Attributes:
        resume_id (UUID): The resume the entry belongs to.
        institution (str | None): School name; part of the per-resume unique key.
        degree (str | None): Degree title; part of the per-resume unique key.
        field_of_study (str | None): Major or subject.
        start_date (date | None): Must not be after `end_date`.
        end_date (date | None): Must not be before `start_date`.
        grade (str | None): Grade or GPA as free text.
        description (str | None): Free-form notes.
        order_index (int | None): Position; defaults to the sibling count + 1 when omitted.

    """

    resume_id: UUID
    institution: str | None = Field(default=None, max_length=200)
    degree: str | None = Field(default=None, max_length=100)
    field_of_study: str | None = Field(default=None, max_length=100)
    start_date: date | None = None
    end_date: date | None = None
    grade: str | None = Field(default=None, max_length=50)
    description: str | None = Field(default=None, max_length=1000)
    order_index: int | None = Field(default=None, ge=0)


class EducationUpdateRequest(ApiModel):
    institution: str | None = Field(default=None, max_length=200)
    degree: str | None = Field(default=None, max_length=100)
    field_of_study: str | None = Field(default=None, max_length=100)
    start_date: date | None = None
    end_date: date | None = None
    grade: str | None = Field(default=None, max_length=50)
    description: str | None = Field(default=None, max_length=1000)
    order_index: int | None = Field(default=None, ge=0)


class EducationResponse(TimestampedResponse):
    id: UUID
    resume_id: UUID
    institution: str | None = None
    degree: str | None = None
    field_of_study: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    grade: str | None = None
    description: str | None = None
    order_index: int


class BulkUpdateEducationRequest(ApiModel):
    education: list[OrderUpdate] = Field(min_length=1)
