"""Lookup tables and checks shared by resume and resume-entry route logic.

Every check raises `HTTPException` with status 400 so callers can let it
propagate straight to the client.

"""

import logging
import uuid
from datetime import date

from fastapi import HTTPException, status
from pydantic import AnyUrl, TypeAdapter, ValidationError

log = logging.getLogger(__name__)

# Allowed theme changes; keeping the current theme is always allowed.
THEME_TRANSITIONS: dict[str, tuple[str, ...]] = {
    "default": ("modern", "classic", "professional"),
    "modern": ("default", "professional"),
    "classic": ("default", "professional"),
    "professional": ("default", "modern", "classic"),
}

SECTION_DISPLAY_NAMES: dict[str, str] = {
    "education": "Education",
    "experience": "Work Experience",
    "projects": "Projects",
    "skills": "Skills",
    "certifications": "Certifications",
    "summary": "Summary",
    "contact": "Contact Information",
}
SECTION_NAMES: tuple[str, ...] = tuple(SECTION_DISPLAY_NAMES)

SKILL_LEVELS: tuple[str, ...] = ("Beginner", "Intermediate", "Advanced", "Expert")
_SKILL_LEVEL_LOOKUP = {level.lower(): level for level in SKILL_LEVELS}

DEFAULT_SKILL_CATEGORY = "Other"

_url_adapter = TypeAdapter(AnyUrl)


def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def not_found(label: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")


def parse_uuid(value: str | uuid.UUID, entity: str) -> uuid.UUID:
    """Parse an identifier taken from a path or request body.

    Args:
        value (str | uuid.UUID): The raw identifier.
        entity (str): Entity name used in the error message, e.g. "skill".

    Returns:
        uuid.UUID: The parsed identifier.

    Raises:
        HTTPException: 400 "invalid <entity> ID" when the value is not a UUID.

    """
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise bad_request(f"invalid {entity} ID")


def validate_date_range(start: date | None, end: date | None, message: str) -> None:
    """Reject a range whose start falls after its end.

    Args:
        start (date | None): Range start; the check is skipped when missing.
        end (date | None): Range end; the check is skipped when missing.
        message (str): Detail for the 400 response.

    Raises:
        HTTPException: 400 when `start` is after `end`. Equal dates are accepted.

    """
    if start is not None and end is not None and start > end:
        raise bad_request(message)


def validate_url(value: str | None, message: str) -> None:
    """Reject a non-empty value that is not an absolute URL.

    Args:
        value (str | None): The candidate URL. None and "" are accepted.
        message (str): Detail for the 400 response.

    Raises:
        HTTPException: 400 when the value does not parse as a URL with a scheme and host.

    Notes:
        1. Parsing uses pydantic's `AnyUrl`, which requires a scheme.
        2. A URL without a host (e.g. "mailto:x") is rejected as well.

    """
    if not value:
        return
    try:
        parsed = _url_adapter.validate_python(value)
    except ValidationError:
        raise bad_request(message)
    if not parsed.host:
        raise bad_request(message)


def validate_section_name(name: str) -> None:
    if name not in SECTION_DISPLAY_NAMES:
        raise bad_request(
            "invalid section name. Must be one of: " + ", ".join(SECTION_NAMES),
        )


def default_display_name(section_name: str) -> str:
    return SECTION_DISPLAY_NAMES.get(section_name, section_name)


def canonical_skill_level(level: str) -> str:
    """Map a skill level to its canonical spelling.

    Args:
        level (str): The level as supplied, in any letter case.

    Returns:
        str: One of `SKILL_LEVELS`.

    Raises:
        HTTPException: 400 when the level is not in the allow-list.

    """
    canonical = _SKILL_LEVEL_LOOKUP.get(level.strip().lower())
    if canonical is None:
        raise bad_request(
            "invalid skill level. Must be one of: " + ", ".join(SKILL_LEVELS),
        )
    return canonical


def is_valid_theme_transition(from_theme: str, to_theme: str) -> bool:
    """Return True when a resume may move from `from_theme` to `to_theme`.

    Args:
        from_theme (str): The resume's current theme.
        to_theme (str): The requested theme.

    Returns:
        bool: True if the pair is listed in `THEME_TRANSITIONS` or the theme is unchanged.

    """
    if from_theme == to_theme:
        return True
    return to_theme in THEME_TRANSITIONS.get(from_theme, ())
