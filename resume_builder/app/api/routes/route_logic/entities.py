import logging
import uuid
from typing import Any

from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.business_rules import (
    DEFAULT_SKILL_CATEGORY,
    canonical_skill_level,
    default_display_name,
    validate_section_name,
)
from resume_builder.app.api.routes.route_logic.entity_crud import (
    EntitySchema,
    EntityService,
)
from resume_builder.app.models import (
    Certification,
    Education,
    Experience,
    Project,
    ResumeSection,
    Skill,
)
from resume_builder.app.schemas.certification import CertificationResponse
from resume_builder.app.schemas.education import EducationResponse
from resume_builder.app.schemas.experience import ExperienceResponse
from resume_builder.app.schemas.project import ProjectResponse
from resume_builder.app.schemas.section import SectionResponse
from resume_builder.app.schemas.skill import SkillResponse, SkillsByCategoryResponse

log = logging.getLogger(__name__)


def prepare_section(values: dict[str, Any], stored: Any) -> None:
    """Check the section name and fill in its default heading.

    Args:
        values (dict[str, Any]): Supplied fields, changed in place.
        stored: The current row on update, None for a new section.

    Raises:
        HTTPException: 400 when the name is not an allowed section name.

    Notes:
        1. The name is checked whenever it is supplied.
        2. A new section without a display name gets the default heading for its name.
        3. An update that blanks the display name gets the default heading for the
           new name, or for the stored one when the name is unchanged.

    """
    if "name" in values:
        validate_section_name(values["name"])
    if stored is None:
        if not (values.get("display_name") or "").strip():
            values["display_name"] = default_display_name(values["name"])
    elif "display_name" in values and not values["display_name"].strip():
        values["display_name"] = default_display_name(values.get("name", stored.name))


def prepare_skill(values: dict[str, Any], stored: Any) -> None:
    """Store the level in canonical case and default the category.

    Args:
        values (dict[str, Any]): Supplied fields, changed in place.
        stored: The current row on update, None for a new skill.

    Raises:
        HTTPException: 400 when a supplied level, blank included, is not one of the allowed levels.

    """
    if "level" in values:
        values["level"] = canonical_skill_level(values["level"])
    if "category" in values and not values["category"].strip():
        values["category"] = DEFAULT_SKILL_CATEGORY
    if stored is None and "category" not in values:
        values["category"] = DEFAULT_SKILL_CATEGORY


def prepare_project(values: dict[str, Any], stored: Any) -> None:
    if stored is None and "technologies" not in values:
        values["technologies"] = []


certifications = EntityService(
    EntitySchema(
        entity="certification",
        label="Certification",
        model=Certification,
        response_model=CertificationResponse,
        unique_fields=("name", "organization"),
        duplicate_message="certification with same name and organization already exists",
        date_range=("issue_date", "expiry_date"),
        date_range_message="issue date cannot be after expiry date",
        url_fields=("credential_url",),
        url_message="invalid credential URL",
    ),
)

education = EntityService(
    EntitySchema(
        entity="education",
        label="Education",
        model=Education,
        response_model=EducationResponse,
        unique_fields=("institution", "degree"),
        duplicate_message="education entry with same institution and degree already exists",
        date_range=("start_date", "end_date"),
        date_range_message="start date cannot be after end date",
    ),
)

experience = EntityService(
    EntitySchema(
        entity="experience",
        label="Experience",
        model=Experience,
        response_model=ExperienceResponse,
        unique_fields=("company", "position"),
        duplicate_message="experience entry with same company and position already exists",
        date_range=("start_date", "end_date"),
        date_range_message="start date cannot be after end date",
    ),
)

projects = EntityService(
    EntitySchema(
        entity="project",
        label="Project",
        model=Project,
        response_model=ProjectResponse,
        unique_fields=("name",),
        duplicate_message="project with same name already exists",
        url_fields=("link",),
        url_message="invalid project URL",
        prepare=prepare_project,
    ),
)

skills = EntityService(
    EntitySchema(
        entity="skill",
        label="Skill",
        model=Skill,
        response_model=SkillResponse,
        unique_fields=("name",),
        duplicate_message="skill with same name already exists",
        prepare=prepare_skill,
    ),
)

sections = EntityService(
    EntitySchema(
        entity="section",
        label="Section",
        model=ResumeSection,
        response_model=SectionResponse,
        unique_fields=("name",),
        duplicate_message="section with same name already exists",
        prepare=prepare_section,
    ),
)


def get_skills_by_category(
    db: Session,
    user_id: str,
    resume_id: uuid.UUID,
) -> list[SkillsByCategoryResponse]:
    """Group a resume's skills by category.

    Args:
        db (Session): The database session.
        user_id (str): The requesting user.
        resume_id (uuid.UUID): The resume whose skills are grouped.

    Returns:
        list[SkillsByCategoryResponse]: One group per category, sorted by category name;
            skills inside a group keep their `orderIndex` order.

    Raises:
        HTTPException: 404 if the resume is not the user's.

    Notes:
        1. Skills without a category are grouped under "Other".

    """
    grouped: dict[str, list[SkillResponse]] = {}
    for skill in skills.get_by_resume_id(db, user_id, resume_id):
        grouped.setdefault(skill.category or DEFAULT_SKILL_CATEGORY, []).append(skill)

    return [
        SkillsByCategoryResponse(category=category, skills=grouped[category])
        for category in sorted(grouped)
    ]
