import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


class PersistenceError(RuntimeError):
    """Raised when a database operation fails unexpectedly.

    The message carries the operation and the identifiers involved, for
    example ``failed to update skill for skill_id=... user_id=...``. The
    original driver exception is chained as ``__cause__``.

    """

    def __init__(self, operation: str, **identifiers: object):
        self.operation = operation
        self.identifiers = identifiers
        context = " ".join(f"{key}={value}" for key, value in identifiers.items())
        message = f"failed to {operation}"
        if context:
            message = f"{message} for {context}"
        super().__init__(message)


@contextmanager
def persistence_errors(db: Session, operation: str, **identifiers: object) -> Iterator[None]:
    """Translate SQLAlchemy failures inside the block into `PersistenceError`.

    Args:
        db (Session): The session used in the block; rolled back on failure.
        operation (str): Short description, e.g. "create skill".
        **identifiers: Values identifying the rows involved, added to the message.

    Raises:
        PersistenceError: When the block raises `SQLAlchemyError`.

    Notes:
        1. Other exceptions, including `HTTPException`, pass through untouched.
        2. The rollback leaves the session usable for the rest of the request.

    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceError(operation, **identifiers) from e
