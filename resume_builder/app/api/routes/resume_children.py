import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.entity_router import build_entity_router
from resume_builder.app.api.routes.route_logic import entities
from resume_builder.app.api.routes.route_logic.business_rules import parse_uuid
from resume_builder.app.core.auth import get_current_user_id
from resume_builder.app.database.database import get_db
from resume_builder.app.schemas.certification import (
    BulkUpdateCertificationsRequest,
    CertificationCreateRequest,
    CertificationUpdateRequest,
)
from resume_builder.app.schemas.education import (
    BulkUpdateEducationRequest,
    EducationCreateRequest,
    EducationUpdateRequest,
)
from resume_builder.app.schemas.experience import (
    BulkUpdateExperienceRequest,
    ExperienceCreateRequest,
    ExperienceUpdateRequest,
)
from resume_builder.app.schemas.project import (
    BulkUpdateProjectsRequest,
    ProjectCreateRequest,
    ProjectUpdateRequest,
)
from resume_builder.app.schemas.section import (
    BulkUpdateSectionsRequest,
    SectionCreateRequest,
    SectionUpdateRequest,
)
from resume_builder.app.schemas.skill import (
    BulkUpdateSkillsRequest,
    SkillCreateRequest,
    SkillsByCategoryResponse,
    SkillUpdateRequest,
)

log = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/resumes/{resume_id}/skills/category",
    response_model=list[SkillsByCategoryResponse],
    tags=["skills"],
)
def get_skills_by_category(
    resume_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Return a resume's skills grouped by category.

    Args:
        resume_id (str): The resume identifier.
        db (Session): The database session dependency.
        user_id (str): The authenticated user's identifier.

    Returns:
        list[SkillsByCategoryResponse]: Groups sorted by category name.

    """
    return entities.get_skills_by_category(db, user_id, parse_uuid(resume_id, "resume"))


router.include_router(
    build_entity_router(
        service=entities.education,
        segment="educations",
        create_model=EducationCreateRequest,
        update_model=EducationUpdateRequest,
        bulk_model=BulkUpdateEducationRequest,
        bulk_field="education",
        tag="education",
    ),
)
router.include_router(
    build_entity_router(
        service=entities.experience,
        segment="experiences",
        create_model=ExperienceCreateRequest,
        update_model=ExperienceUpdateRequest,
        bulk_model=BulkUpdateExperienceRequest,
        bulk_field="experience",
        tag="experience",
    ),
)
router.include_router(
    build_entity_router(
        service=entities.projects,
        segment="projects",
        create_model=ProjectCreateRequest,
        update_model=ProjectUpdateRequest,
        bulk_model=BulkUpdateProjectsRequest,
        bulk_field="projects",
        tag="projects",
    ),
)
router.include_router(
    build_entity_router(
        service=entities.skills,
        segment="skills",
        create_model=SkillCreateRequest,
        update_model=SkillUpdateRequest,
        bulk_model=BulkUpdateSkillsRequest,
        bulk_field="skills",
        tag="skills",
    ),
)
router.include_router(
    build_entity_router(
        service=entities.certifications,
        segment="certifications",
        create_model=CertificationCreateRequest,
        update_model=CertificationUpdateRequest,
        bulk_model=BulkUpdateCertificationsRequest,
        bulk_field="certifications",
        tag="certifications",
    ),
)
router.include_router(
    build_entity_router(
        service=entities.sections,
        segment="sections",
        create_model=SectionCreateRequest,
        update_model=SectionUpdateRequest,
        bulk_model=BulkUpdateSectionsRequest,
        bulk_field="sections",
        tag="sections",
    ),
)
