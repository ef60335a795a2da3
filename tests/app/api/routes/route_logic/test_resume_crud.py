import datetime
import uuid
from unittest.mock import Mock

import pytest
from fastapi import HTTPException
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.resume_crud import (
    count_user_resumes,
    create_resume,
    delete_resume,
    duplicate_resume,
    get_resume_by_id_and_user,
    get_user_resumes_page,
    normalize_pagination,
    total_pages,
    update_resume,
)
from resume_builder.app.models import Certification, Project, ResumeSection, Skill
from resume_builder.app.models.resume_model import Resume as DatabaseResume


def test_get_resume_by_id_and_user_found(db_session, resume):
    assert get_resume_by_id_and_user(db_session, resume.id, "user-1") is resume


def test_get_resume_by_id_and_user_hides_other_users_resume(db_session, other_resume):
    with pytest.raises(HTTPException) as exc_info:
        get_resume_by_id_and_user(db_session, other_resume.id, "user-1")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Resume not found"


def test_get_resume_by_id_and_user_not_found():
    """Test get_resume_by_id_and_user when resume is not found."""
    mock_db = Mock(spec=Session)
    mock_db.query.return_value.filter.return_value.first.return_value = None

    with pytest.raises(HTTPException) as exc_info:
        get_resume_by_id_and_user(db=mock_db, resume_id=uuid.uuid4(), user_id="user-1")

    assert exc_info.value.status_code == 404
    mock_db.query.assert_called_once_with(DatabaseResume)


@pytest.mark.parametrize(
    ("page", "limit", "expected"),
    [
        (None, None, (1, 20)),
        (0, 5, (1, 5)),
        (-3, 100, (1, 100)),
        (2, 0, (2, 20)),
        (3, 101, (3, 20)),
    ],
)
def test_normalize_pagination(page, limit, expected):
    assert normalize_pagination(page, limit, default_limit=20, max_limit=100) == expected


def test_total_pages():
    assert total_pages(0, 20) == 0
    assert total_pages(7, 5) == 2
    assert total_pages(10, 5) == 2


def test_get_user_resumes_page_newest_first(db_session, resume_factory):
    base = datetime.datetime(2024, 1, 1, tzinfo=datetime.UTC)
    for day in range(7):
        resume_factory(title=f"Resume {day}", created_at=base + datetime.timedelta(days=day))
    resume_factory(user_id="user-2", title="Other")

    first_page, total = get_user_resumes_page(db_session, "user-1", page=1, limit=5)
    second_page, _ = get_user_resumes_page(db_session, "user-1", page=2, limit=5)

    assert total == 7
    assert [r.title for r in first_page] == [f"Resume {day}" for day in (6, 5, 4, 3, 2)]
    assert [r.title for r in second_page] == ["Resume 1", "Resume 0"]


def test_create_resume_defaults_theme(db_session):
    resume = create_resume(db_session, "user-1", "Backend", None, max_resumes=10)

    assert resume.theme == "default"
    assert resume.user_id == "user-1"
    assert count_user_resumes(db_session, "user-1") == 1


def test_create_resume_enforces_cap(db_session, resume_factory):
    for i in range(3):
        resume_factory(title=f"Resume {i}")

    with pytest.raises(HTTPException) as exc_info:
        create_resume(db_session, "user-1", "One too many", "modern", max_resumes=3)

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "maximum number of resumes (3) reached"


def test_create_resume_cap_is_per_user(db_session, resume_factory):
    for i in range(3):
        resume_factory(user_id="user-2", title=f"Resume {i}")

    resume = create_resume(db_session, "user-1", "Mine", None, max_resumes=3)

    assert resume.title == "Mine"


def test_update_resume_title_and_theme(db_session, resume):
    updated = update_resume(db_session, resume, title="Renamed", theme="modern")

    assert updated.title == "Renamed"
    assert updated.theme == "modern"


def test_update_resume_same_theme_is_allowed(db_session, resume_factory):
    resume = resume_factory(theme="classic")

    assert update_resume(db_session, resume, theme="classic").theme == "classic"


def test_update_resume_rejects_invalid_theme_transition(db_session, resume_factory):
    resume = resume_factory(theme="modern")

    with pytest.raises(HTTPException) as exc_info:
        update_resume(db_session, resume, title="Ignored", theme="classic")

    assert exc_info.value.detail == "invalid theme transition"
    db_session.refresh(resume)
    assert resume.title == "My Resume"


def test_delete_resume_removes_children(db_session, resume):
    db_session.add(Skill(resume_id=resume.id, name="Go", order_index=1))
    db_session.commit()

    delete_resume(db_session, resume)

    assert db_session.query(DatabaseResume).count() == 0
    assert db_session.query(Skill).count() == 0


def test_duplicate_resume_copies_children(db_session, resume_factory):
    source = resume_factory(title="Backend", theme="professional")
    db_session.add_all(
        [
            ResumeSection(resume_id=source.id, name="skills", display_name="Skills", order_index=1),
            Skill(resume_id=source.id, name="Go", level="Expert", category="Languages", order_index=2),
            Project(resume_id=source.id, name="Site", technologies=["htmx"], order_index=1),
            Certification(resume_id=source.id, name="CKA", organization="CNCF", order_index=1),
        ],
    )
    db_session.commit()
    db_session.refresh(source)

    copy = duplicate_resume(db_session, source, max_resumes=10)

    assert copy.id != source.id
    assert copy.title == "Backend (Copy)"
    assert copy.theme == "professional"
    assert copy.user_id == source.user_id
    assert [s.name for s in copy.sections] == ["skills"]
    assert [(s.name, s.level, s.category, s.order_index) for s in copy.skills] == [
        ("Go", "Expert", "Languages", 2),
    ]
    assert copy.projects[0].technologies == ["htmx"]
    assert copy.certifications[0].organization == "CNCF"
    assert copy.skills[0].id != source.skills[0].id
    assert db_session.query(Skill).count() == 2


def test_duplicate_resume_shortens_long_title(db_session, resume_factory):
    source = resume_factory(title="x" * 100)

    copy = duplicate_resume(db_session, source, max_resumes=10)

    assert len(copy.title) == 100
    assert copy.title.endswith(" (Copy)")


def test_duplicate_resume_enforces_cap(db_session, resume):
    with pytest.raises(HTTPException) as exc_info:
        duplicate_resume(db_session, resume, max_resumes=1)

    assert exc_info.value.detail == "maximum number of resumes (1) reached"
