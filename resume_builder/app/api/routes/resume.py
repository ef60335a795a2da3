import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from resume_builder.app.api.dependencies import get_resume_for_user
from resume_builder.app.api.routes.route_logic.business_rules import (
    bad_request,
    parse_uuid,
)
from resume_builder.app.api.routes.route_logic.resume_crud import (
    create_resume as create_resume_db,
)
from resume_builder.app.api.routes.route_logic.resume_crud import (
    delete_resume as delete_resume_db,
)
from resume_builder.app.api.routes.route_logic.resume_crud import (
    duplicate_resume as duplicate_resume_db,
)
from resume_builder.app.api.routes.route_logic.resume_crud import (
    get_resume_by_id_and_user,
    get_user_resumes_page,
    normalize_pagination,
    total_pages,
)
from resume_builder.app.api.routes.route_logic.resume_crud import (
    update_resume as update_resume_db,
)
from resume_builder.app.core.auth import get_current_user_id
from resume_builder.app.core.config import Settings, get_settings
from resume_builder.app.database.database import get_db
from resume_builder.app.models.resume_model import Resume as DatabaseResume
from resume_builder.app.schemas.common import PaginatedResponse
from resume_builder.app.schemas.resume import (
    ResumeCreateRequest,
    ResumeResponse,
    ResumeSummaryResponse,
    ResumeUpdateRequest,
    ResumeWithSectionsResponse,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.post("", response_model=ResumeResponse, status_code=status.HTTP_201_CREATED)
def create_resume(
    request: ResumeCreateRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
):
    """
    Create a resume for the current user.

    Args:
        request (ResumeCreateRequest): The title and optional theme.
        db (Session): The database session dependency.
        user_id (str): The authenticated user's identifier.
        settings (Settings): Application settings, for the per-user resume cap.

    Returns:
        ResumeResponse: The created resume.

    Raises:
        HTTPException: 400 if the user already has the maximum number of resumes.

    Notes:
        1. The theme defaults to "default" when omitted.

    """
    theme = request.theme.value if request.theme is not None else None
    resume = create_resume_db(
        db=db,
        user_id=user_id,
        title=request.title,
        theme=theme,
        max_resumes=settings.max_resumes_per_user,
    )
    return ResumeResponse.model_validate(resume)


@router.get("", response_model=PaginatedResponse[ResumeSummaryResponse])
def list_resumes(
    page: int | None = None,
    limit: int | None = None,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
):
    """
    List the current user's resumes, newest first.

    Args:
        page (int | None): 1-based page number; 1 when missing or below 1.
        limit (int | None): Page size; the configured default when missing or out of range.
        db (Session): The database session dependency.
        user_id (str): The authenticated user's identifier.
        settings (Settings): Application settings, for page size bounds.

    Returns:
        PaginatedResponse[ResumeSummaryResponse]: The page with paging metadata.

    """
    page, limit = normalize_pagination(
        page,
        limit,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )
    resumes, total = get_user_resumes_page(db, user_id, page=page, limit=limit)
    return PaginatedResponse[ResumeSummaryResponse](
        data=[ResumeSummaryResponse.model_validate(resume) for resume in resumes],
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages(total, limit),
    )


@router.get("/{resume_id}", response_model=ResumeResponse)
def get_resume(resume: DatabaseResume = Depends(get_resume_for_user)):
    return ResumeResponse.model_validate(resume)


@router.put("/{resume_id}", response_model=ResumeResponse)
def update_resume(
    resume_id: str,
    request: ResumeUpdateRequest,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Update a resume's title and/or theme.

    Args:
        resume_id (str): The resume identifier.
        request (ResumeUpdateRequest): The fields to change.
        db (Session): The database session dependency.
        user_id (str): The authenticated user's identifier.

    Returns:
        ResumeResponse: The updated resume.

    Raises:
        HTTPException: 400 "no fields to update" when the body changes nothing,
            400 on an invalid theme transition, 404 if the resume is not the user's.

    Notes:
        1. The empty-body check runs before the resume is loaded.

    """
    if request.title is None and request.theme is None:
        raise bad_request("no fields to update")

    resume = get_resume_by_id_and_user(db, parse_uuid(resume_id, "resume"), user_id)
    updated = update_resume_db(
        db,
        resume,
        title=request.title,
        theme=request.theme.value if request.theme is not None else None,
    )
    return ResumeResponse.model_validate(updated)


@router.delete("/{resume_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume(
    db: Session = Depends(get_db),
    resume: DatabaseResume = Depends(get_resume_for_user),
):
    """Delete a resume and everything it contains."""
    delete_resume_db(db, resume)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{resume_id}/duplicate",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
)
def duplicate_resume(
    db: Session = Depends(get_db),
    resume: DatabaseResume = Depends(get_resume_for_user),
    settings: Settings = Depends(get_settings),
):
    """
    Copy a resume, with all of its sections and entries, as "<title> (Copy)".

    Args:
        db (Session): The database session dependency.
        resume (DatabaseResume): The resume to copy.
        settings (Settings): Application settings, for the per-user resume cap.

    Returns:
        ResumeResponse: The new resume.

    """
    copy = duplicate_resume_db(db, resume, max_resumes=settings.max_resumes_per_user)
    return ResumeResponse.model_validate(copy)


@router.get("/{resume_id}/full", response_model=ResumeWithSectionsResponse)
def get_resume_with_sections(resume: DatabaseResume = Depends(get_resume_for_user)):
    """Return a resume with every section and entry list, each ordered by `orderIndex`."""
    return ResumeWithSectionsResponse.model_validate(resume)
