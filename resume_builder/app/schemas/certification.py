import logging
from datetime import date
from uuid import UUID

from pydantic import Field

from resume_builder.app.schemas.common import ApiModel, OrderUpdate

log = logging.getLogger(__name__)


class CertificationCreateRequest(ApiModel):
    """Request model for creating a certification entry.

    Attributes:
        resume_id (UUID): The resume the entry belongs to.
        name (str | None): Certification name; part of the per-resume unique key.
        organization (str | None): Issuing body; part of the per-resume unique key.
        issue_date (date | None): Must not be after `expiry_date`.
        expiry_date (date | None): Must not be before `issue_date`.
        credential_id (str | None): Identifier printed on the credential.
        credential_url (str | None): Absolute URL for verification.
        order_index (int | None): Position; defaults to the sibling count + 1 when omitted.

    """

    resume_id: UUID
    name: str | None = Field(default=None, max_length=200)
    organization: str | None = Field(default=None, max_length=200)
    issue_date: date | None = None
    expiry_date: date | None = None
    credential_id: str | None = Field(default=None, max_length=100)
    credential_url: str | None = None
    order_index: int | None = Field(default=None, ge=0)


class CertificationUpdateRequest(ApiModel):
    name: str | None = Field(default=None, max_length=200)
    organization: str | None = Field(default=None, max_length=200)
    issue_date: date | None = None
    expiry_date: date | None = None
    credential_id: str | None = Field(default=None, max_length=100)
    credential_url: str | None = None
    order_index: int | None = Field(default=None, ge=0)


class CertificationResponse(ApiModel):
    id: UUID
    resume_id: UUID
    name: str | None = None
    organization: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    credential_id: str | None = None
    credential_url: str | None = None
    order_index: int


class BulkUpdateCertificationsRequest(ApiModel):
    certifications: list[OrderUpdate] = Field(min_length=1)
