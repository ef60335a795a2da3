import logging

from fastapi import Depends
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.business_rules import parse_uuid
from resume_builder.app.api.routes.route_logic.resume_crud import (
    get_resume_by_id_and_user,
)
from resume_builder.app.core.auth import get_current_user_id
from resume_builder.app.database.database import get_db
from resume_builder.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)


def get_resume_for_user(
    resume_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> DatabaseResume:
    """
    Dependency to get a specific resume for the current user.

    Args:
        resume_id (str): The resume identifier taken from the path.
        db (Session): The database session dependency.
        user_id (str): The authenticated user's identifier.

    Returns:
        DatabaseResume: The resume object if found and owned by the user.

    Raises:
        HTTPException: 400 if the identifier is not a UUID, 404 if the resume
            is not found or belongs to someone else.

    """
    return get_resume_by_id_and_user(
        db,
        resume_id=parse_uuid(resume_id, "resume"),
        user_id=user_id,
    )
