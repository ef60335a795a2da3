from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from resume_builder.app.core.auth import get_current_user_id
from resume_builder.app.core.config import get_settings
from resume_builder.app.database.database import get_db
from resume_builder.app.main import create_app
from resume_builder.app.models import Base
from resume_builder.app.models.resume_model import Resume as DatabaseResume
from resume_builder.app.models.resume_model import ResumeData

TEST_USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture(autouse=True)
def mock_database_imports(monkeypatch):
    """Auto-used fixture to prevent real database connections and pin the signing key."""
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    get_settings.cache_clear()
    with (
        patch("resume_builder.app.database.database.create_engine"),
        patch("resume_builder.app.database.database.sessionmaker"),
    ):
        yield
    get_settings.cache_clear()


@pytest.fixture
def db_engine():
    """Create an in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Fixture to provide a session bound to the in-memory database."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = SessionLocal()
    yield db
    db.close()


def _make_resume(db, user_id=TEST_USER_ID, title="My Resume", theme="default", created_at=None):
    resume = DatabaseResume(data=ResumeData(user_id=user_id, title=title, theme=theme))
    if created_at is not None:
        resume.created_at = created_at
    db.add(resume)
    db.commit()
    db.refresh(resume)
    return resume


@pytest.fixture
def resume_factory(db_session):
    """Fixture returning a function that stores a resume and returns it."""

    def factory(**kwargs):
        return _make_resume(db_session, **kwargs)

    return factory


@pytest.fixture
def resume(resume_factory):
    """A resume owned by the test user."""
    return resume_factory()


@pytest.fixture
def other_resume(resume_factory):
    """A resume owned by a different user."""
    return resume_factory(user_id=OTHER_USER_ID, title="Not Yours")


@pytest.fixture
def app(db_session) -> FastAPI:
    """Fixture to create a new app for each test, wired to the in-memory database."""
    _app = create_app()

    def override_get_db():
        yield db_session

    _app.dependency_overrides[get_db] = override_get_db
    _app.dependency_overrides[get_current_user_id] = lambda: TEST_USER_ID
    yield _app
    _app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Fixture to create a test client for each test."""
    with TestClient(app) as c:
        yield c
