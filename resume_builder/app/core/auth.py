import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from jose import JWTError, jwt

from resume_builder.app.core.config import get_settings
from resume_builder.app.core.security import oauth2_scheme

log = logging.getLogger(__name__)


def get_current_user_id(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> str:
    """Resolve the requesting user's identifier from the bearer token.

    Identity is owned by an external provider; this dependency only checks the
    token signature and reads the subject claim. Every resume and child row is
    scoped by the returned value.

    Args:
        token: JWT token extracted from the `Authorization: Bearer` header, or None when absent.

    Returns:
        str: The user identifier carried in the token's `sub` claim.

    Raises:
        HTTPException: 401 UNAUTHORIZED with detail "Could not validate credentials"
            when the token is missing, malformed, expired, or has no subject.

    Notes:
        1. Build the 401 exception with a "Bearer" authentication header.
        2. If no token was supplied, raise the credentials exception.
        3. Decode the token with the configured secret key and algorithm.
        4. If decoding fails or the subject is missing or empty, raise the credentials exception.
        5. Return the subject as a string.
        6. No database or network access in this function.

    """
    settings = get_settings()
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        log.debug("get_current_user_id: no bearer token supplied")
        raise credentials_exception

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
    except JWTError as e:
        _msg = f"Rejecting bearer token: {e}"
        log.debug(_msg)
        raise credentials_exception

    user_id = payload.get("sub")
    if not user_id:
        raise credentials_exception

    return str(user_id)
