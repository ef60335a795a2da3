from unittest.mock import Mock

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from resume_builder.app.core.exceptions import PersistenceError, persistence_errors


def test_persistence_error_message_includes_context():
    error = PersistenceError("update skill", skill_id="abc", user_id="user-1")

    assert str(error) == "failed to update skill for skill_id=abc user_id=user-1"
    assert error.operation == "update skill"
    assert error.identifiers == {"skill_id": "abc", "user_id": "user-1"}


def test_persistence_error_without_identifiers():
    assert str(PersistenceError("count resumes")) == "failed to count resumes"


def test_persistence_errors_wraps_and_rolls_back():
    db = Mock(spec=Session)
    cause = OperationalError("SELECT 1", {}, Exception("connection lost"))

    with pytest.raises(PersistenceError) as exc_info:
        with persistence_errors(db, "list skills", resume_id="r1"):
            raise cause

    assert exc_info.value.__cause__ is cause
    db.rollback.assert_called_once()


def test_persistence_errors_passes_other_exceptions_through():
    db = Mock(spec=Session)

    with pytest.raises(HTTPException):
        with persistence_errors(db, "get skill"):
            raise HTTPException(status_code=404, detail="Skill not found")

    db.rollback.assert_not_called()
