import logging
import math
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.business_rules import (
    bad_request,
    is_valid_theme_transition,
    not_found,
)
from resume_builder.app.core.exceptions import persistence_errors
from resume_builder.app.models.resume_model import DEFAULT_THEME, ResumeData
from resume_builder.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)

COPY_SUFFIX = " (Copy)"
TITLE_MAX_LENGTH = 100

# Columns that identify or timestamp a row and are never copied.
_NON_COPIED_COLUMNS = frozenset({"id", "resume_id", "created_at", "updated_at"})


def get_resume_by_id_and_user(
    db: Session,
    resume_id: uuid.UUID,
    user_id: str,
) -> DatabaseResume:
    """Retrieve a resume by its ID and verify it belongs to the specified user.

    Args:
        db (Session): The SQLAlchemy database session used to query the database.
        resume_id (uuid.UUID): The unique identifier for the resume to retrieve.
        user_id (str): The identifier of the user who must own the resume.

    Returns:
        DatabaseResume: The resume object matching the provided ID and user ID.

    Raises:
        HTTPException: 404 "Resume not found" when no resume matches both identifiers.
        PersistenceError: If the query fails.

    Notes:
        1. Query the resumes table for a record matching both resume_id and user_id.
        2. A resume owned by another user is reported exactly like a missing one.
        3. This function performs a single database query.

    """
    with persistence_errors(db, "get resume by id", resume_id=resume_id, user_id=user_id):
        resume = (
            db.query(DatabaseResume)
            .filter(
                DatabaseResume.id == resume_id,
                DatabaseResume.user_id == user_id,
            )
            .first()
        )

    if not resume:
        raise not_found("Resume")

    return resume


def normalize_pagination(
    page: int | None,
    limit: int | None,
    default_limit: int,
    max_limit: int,
) -> tuple[int, int]:
    """Clamp list paging parameters to usable values.

    Args:
        page (int | None): Requested 1-based page; values below 1 become 1.
        limit (int | None): Requested page size; values outside 1..max_limit become `default_limit`.
        default_limit (int): Page size used when `limit` is missing or out of range.
        max_limit (int): Largest accepted page size.

    Returns:
        tuple[int, int]: The page and limit to apply.

    """
    if page is None or page < 1:
        page = 1
    if limit is None or limit < 1 or limit > max_limit:
        limit = default_limit
    return page, limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def count_user_resumes(db: Session, user_id: str) -> int:
    with persistence_errors(db, "count resumes", user_id=user_id):
        return (
            db.query(func.count(DatabaseResume.id))
            .filter(DatabaseResume.user_id == user_id)
            .scalar()
        )


def get_user_resumes_page(
    db: Session,
    user_id: str,
    page: int,
    limit: int,
) -> tuple[list[DatabaseResume], int]:
    """Retrieve one page of a user's resumes, newest first.

    Args:
        db (Session): The database session.
        user_id (str): The owning user.
        page (int): 1-based page number, already normalized.
        limit (int): Page size, already normalized.

    Returns:
        tuple[list[DatabaseResume], int]: The resumes on the page and the total count.

    Notes:
        1. Count every resume the user owns.
        2. Fetch the requested slice ordered by `created_at` descending.
        3. A page past the end yields an empty list with the real total.

    """
    total = count_user_resumes(db, user_id)
    with persistence_errors(db, "list resumes", user_id=user_id, page=page, limit=limit):
        resumes = (
            db.query(DatabaseResume)
            .filter(DatabaseResume.user_id == user_id)
            .order_by(DatabaseResume.created_at.desc(), DatabaseResume.id)
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
    return resumes, total


def _check_resume_cap(db: Session, user_id: str, max_resumes: int) -> None:
    if count_user_resumes(db, user_id) >= max_resumes:
        _msg = f"User {user_id} is at the resume cap of {max_resumes}"
        log.info(_msg)
        raise bad_request(f"maximum number of resumes ({max_resumes}) reached")


def create_resume(
    db: Session,
    user_id: str,
    title: str,
    theme: str | None,
    max_resumes: int,
) -> DatabaseResume:
    """Create and save a new resume.

    Args:
        db (Session): The database session.
        user_id (str): The owning user.
        title (str): The validated title.
        theme (str | None): The theme; "default" when None.
        max_resumes (int): Per-user resume cap.

    Returns:
        DatabaseResume: The newly created resume object.

    Raises:
        HTTPException: 400 when the user already owns `max_resumes` resumes.
        PersistenceError: If the count or the insert fails.

    Notes:
        1. Count the user's resumes and enforce the cap.
        2. Create, commit and refresh the new resume.
        3. The count and the insert are separate statements; concurrent creates may overshoot the cap.

    """
    _check_resume_cap(db, user_id, max_resumes)

    resume = DatabaseResume(
        data=ResumeData(user_id=user_id, title=title, theme=theme or DEFAULT_THEME),
    )
    with persistence_errors(db, "create resume", user_id=user_id):
        db.add(resume)
        db.commit()
        db.refresh(resume)

    _msg = f"Created resume {resume.id} for user {user_id}"
    log.debug(_msg)
    return resume


def update_resume(
    db: Session,
    resume: DatabaseResume,
    title: str | None = None,
    theme: str | None = None,
) -> DatabaseResume:
    """Update a resume's title and/or theme.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to update, already ownership-checked.
        title (str | None): New title, or None to keep the current one.
        theme (str | None): New theme, or None to keep the current one.

    Returns:
        DatabaseResume: The updated resume object.

    Raises:
        HTTPException: 400 "invalid theme transition" when the theme change is not allowed.
        PersistenceError: If the commit fails.

    Notes:
        1. Check the theme transition against the current theme before touching the row.
        2. Assign only the supplied fields, then commit and refresh.

    """
    if theme is not None and not is_valid_theme_transition(resume.theme, theme):
        raise bad_request("invalid theme transition")

    if title is not None:
        resume.title = title
    if theme is not None:
        resume.theme = theme

    with persistence_errors(db, "update resume", resume_id=resume.id, user_id=resume.user_id):
        db.commit()
        db.refresh(resume)
    return resume


def delete_resume(db: Session, resume: DatabaseResume) -> None:
    """Delete a resume together with all of its sections and entries.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to delete.

    Returns:
        None

    Notes:
        1. Child rows go with the resume through the ORM cascade and the `ON DELETE CASCADE` keys.
        2. This function performs a database write operation.

    """
    with persistence_errors(db, "delete resume", resume_id=resume.id, user_id=resume.user_id):
        db.delete(resume)
        db.commit()


def _copy_title(title: str) -> str:
    room = TITLE_MAX_LENGTH - len(COPY_SUFFIX)
    return f"{title[:room]}{COPY_SUFFIX}"


def _copy_row(row):
    model = type(row)
    values = {
        column.key: getattr(row, column.key)
        for column in model.__table__.columns
        if column.key not in _NON_COPIED_COLUMNS
    }
    if isinstance(values.get("technologies"), list):
        values["technologies"] = list(values["technologies"])
    return model(**values)


def duplicate_resume(db: Session, resume: DatabaseResume, max_resumes: int) -> DatabaseResume:
    """Copy a resume with every section and entry it owns.

    Args:
        db (Session): The database session.
        resume (DatabaseResume): The resume to copy, already ownership-checked.
        max_resumes (int): Per-user resume cap.

    Returns:
        DatabaseResume: The new resume, titled "<title> (Copy)".

    Raises:
        HTTPException: 400 when the user is at the resume cap.
        PersistenceError: If the copy fails; nothing is kept.

    Notes:
        1. Enforce the resume cap.
        2. Build the copy with the same theme; the title is shortened if the suffix would overflow it.
        3. Copy every child row, keeping its fields and order index, under the new resume.
        4. Commit once, so the copy appears complete or not at all.

    """
    _check_resume_cap(db, resume.user_id, max_resumes)

    copy = DatabaseResume(
        data=ResumeData(
            user_id=resume.user_id,
            title=_copy_title(resume.title),
            theme=resume.theme,
        ),
    )
    with persistence_errors(db, "duplicate resume", resume_id=resume.id, user_id=resume.user_id):
        copy.sections = [_copy_row(row) for row in resume.sections]
        copy.education = [_copy_row(row) for row in resume.education]
        copy.experience = [_copy_row(row) for row in resume.experience]
        copy.projects = [_copy_row(row) for row in resume.projects]
        copy.skills = [_copy_row(row) for row in resume.skills]
        copy.certifications = [_copy_row(row) for row in resume.certifications]
        db.add(copy)
        db.commit()
        db.refresh(copy)

    _msg = f"Duplicated resume {resume.id} as {copy.id}"
    log.debug(_msg)
    return copy
