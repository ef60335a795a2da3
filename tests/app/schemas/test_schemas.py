import uuid
from datetime import datetime

import pytest
from pydantic import ValidationError

from resume_builder.app.schemas.common import OrderUpdate
from resume_builder.app.schemas.project import ProjectCreateRequest
from resume_builder.app.schemas.resume import ResumeCreateRequest, ResumeResponse, Theme
from resume_builder.app.schemas.section import SectionCreateRequest


def test_requests_accept_camel_case_keys():
    resume_id = uuid.uuid4()

    section = SectionCreateRequest.model_validate(
        {"resumeId": str(resume_id), "name": "summary", "displayName": "About", "orderIndex": 3},
    )

    assert section.resume_id == resume_id
    assert section.display_name == "About"
    assert section.order_index == 3
    assert section.is_visible is True


def test_resume_create_request_strips_title_and_parses_theme():
    request = ResumeCreateRequest.model_validate({"title": "  Data  ", "theme": "classic"})

    assert request.title == "Data"
    assert request.theme is Theme.CLASSIC


def test_order_update_rejects_negative_index():
    with pytest.raises(ValidationError):
        OrderUpdate.model_validate({"id": "x", "orderIndex": -1})


def test_project_technologies_limit():
    resume_id = str(uuid.uuid4())
    ProjectCreateRequest.model_validate({"resumeId": resume_id, "technologies": ["a"] * 20})

    with pytest.raises(ValidationError):
        ProjectCreateRequest.model_validate({"resumeId": resume_id, "technologies": ["a"] * 21})


def test_response_serialises_camel_case_and_timestamps():
    response = ResumeResponse(
        id=uuid.uuid4(),
        user_id="user-1",
        title="T",
        theme="default",
        created_at=datetime(2024, 1, 2, 3, 4, 5),
        updated_at=datetime(2024, 1, 2, 3, 4, 5),
    )

    dumped = response.model_dump(by_alias=True)

    assert dumped["userId"] == "user-1"
    assert dumped["createdAt"] == "2024-01-02T03:04:05Z"
