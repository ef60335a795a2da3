from datetime import UTC, datetime, timedelta

from jose import jwt

from resume_builder.app.core.config import get_settings
from resume_builder.app.core.security import create_access_token


def test_create_access_token_default_expiry():
    settings = get_settings()
    before = datetime.now(UTC)

    token = create_access_token({"sub": "user-1"}, settings)

    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    assert payload["sub"] == "user-1"
    expected = before + timedelta(minutes=settings.access_token_expire_minutes)
    assert abs(payload["exp"] - expected.timestamp()) < 5


def test_create_access_token_custom_expiry_does_not_mutate_claims():
    settings = get_settings()
    claims = {"sub": "user-1"}

    token = create_access_token(claims, settings, expires_delta=timedelta(minutes=1))

    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    assert payload["exp"] - datetime.now(UTC).timestamp() <= 61
    assert claims == {"sub": "user-1"}
