import logging
from uuid import UUID

from pydantic import Field

from resume_builder.app.schemas.common import ApiModel, OrderUpdate, TimestampedResponse

log = logging.getLogger(__name__)


class SectionCreateRequest(ApiModel):
    """Request model for creating a resume section.

    Attributes:
        resume_id (UUID): The resume the section belongs to.
        name (str): Section kind; checked against the allowed section names.
        display_name (str | None): Heading; defaults from the section name when omitted or empty.
        is_visible (bool): Whether the section is rendered.
        order_index (int | None): Position; defaults to the sibling count + 1 when omitted.

    """

    resume_id: UUID
    name: str = Field(min_length=1, max_length=50)
    display_name: str | None = Field(default=None, max_length=100)
    is_visible: bool = True
    order_index: int | None = Field(default=None, ge=0)


class SectionUpdateRequest(ApiModel):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    display_name: str | None = Field(default=None, max_length=100)
    is_visible: bool | None = None
    order_index: int | None = Field(default=None, ge=0)


class SectionResponse(TimestampedResponse):
    id: UUID
    resume_id: UUID
    name: str
    display_name: str | None = None
    is_visible: bool
    order_index: int


class BulkUpdateSectionsRequest(ApiModel):
    sections: list[OrderUpdate] = Field(min_length=1)
