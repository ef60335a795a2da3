from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from resume_builder.app.core.auth import get_current_user_id
from resume_builder.app.core.config import get_settings
from resume_builder.app.core.security import create_access_token


def test_get_current_user_id_returns_subject():
    token = create_access_token({"sub": "user-42"}, get_settings())

    assert get_current_user_id(token) == "user-42"


@pytest.mark.parametrize(
    "token",
    [
        None,
        "",
        "not-a-jwt",
        jwt.encode({"sub": "user-1"}, "some-other-key", algorithm="HS256"),
    ],
)
def test_get_current_user_id_rejects_bad_tokens(token):
    with pytest.raises(HTTPException) as exc_info:
        get_current_user_id(token)

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Could not validate credentials"
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


def test_get_current_user_id_rejects_missing_subject():
    token = create_access_token({"scope": "resumes"}, get_settings())

    with pytest.raises(HTTPException) as exc_info:
        get_current_user_id(token)

    assert exc_info.value.status_code == 401


def test_get_current_user_id_rejects_expired_token():
    token = create_access_token({"sub": "user-1"}, get_settings(), expires_delta=timedelta(minutes=-5))

    with pytest.raises(HTTPException) as exc_info:
        get_current_user_id(token)

    assert exc_info.value.status_code == 401
