import logging
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from resume_builder.app.utils import format_timestamp

log = logging.getLogger(__name__)

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for every API model.

    Notes:
        1. Field names are exposed in camelCase (`order_index` -> `orderIndex`).
        2. `populate_by_name` lets route logic build models with snake_case names.
        3. `from_attributes` allows validation straight from ORM rows.

    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class TimestampedResponse(ApiModel):
    """Response mixin exposing row timestamps as RFC 3339 strings.

    Attributes:
        created_at (str): Creation time, e.g. "2024-05-01T12:30:00Z".
        updated_at (str): Last modification time.

    """

    created_at: str
    updated_at: str

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def format_datetime(cls, v):
        if isinstance(v, datetime):
            return format_timestamp(v)
        return v


class OrderUpdate(ApiModel):
    """One item of a bulk reorder request.

    Attributes:
        id (str): Identifier of the row to move. Parsed as a UUID by route logic
            so a malformed value is reported as a bad request for that entity.
        order_index (int): New non-negative position.

    """

    id: str = Field(min_length=1)
    order_index: int = Field(ge=0)


class PaginatedResponse(ApiModel, Generic[T]):
    """A page of results.

    Attributes:
        data (list[T]): Items on this page.
        page (int): 1-based page number actually served.
        limit (int): Page size actually applied.
        total (int): Number of items across all pages.
        total_pages (int): ceil(total / limit); 0 when there are no items.

    """

    data: list[T]
    page: int
    limit: int
    total: int
    total_pages: int
