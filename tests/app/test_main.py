import json
import logging
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from resume_builder.app.core.config import get_settings
from resume_builder.app.core.exceptions import PersistenceError
from resume_builder.app.main import create_app, persistence_exception_handler


def test_create_app_registers_versioned_routes():
    paths = create_app().openapi()["paths"]

    assert "/health" in paths
    assert set(paths["/api/v1/resumes"]) == {"get", "post"}
    assert "get" in paths["/api/v1/resumes/{resume_id}/full"]
    assert "put" in paths["/api/v1/skills/order"]
    assert "get" in paths["/api/v1/resumes/{resume_id}/skills/category"]
    assert set(paths["/api/v1/educations/{item_id}"]) == {"get", "put", "delete"}


def test_api_prefix_is_configurable(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "/api/v2")
    get_settings.cache_clear()

    app = create_app()
    paths = app.openapi()["paths"]
    assert "/api/v2/resumes" in paths
    assert "/api/v1/resumes" not in paths

    with TestClient(app) as client:
        assert client.get("/api/v2/resumes").status_code == 401
        assert client.get("/api/v1/resumes").status_code == 404


def test_health_check():
    with TestClient(create_app()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_missing_token_is_unauthorized():
    with TestClient(create_app()) as client:
        response = client.get("/api/v1/resumes")

    assert response.status_code == 401
    assert response.json() == {"detail": "Could not validate credentials"}
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_persistence_exception_handler_hides_details(caplog):
    request = MagicMock()
    request.method = "PUT"
    request.url.path = "/api/v1/skills/order"
    error = PersistenceError("update skill order", user_id="user-1")

    with caplog.at_level(logging.ERROR):
        response = await persistence_exception_handler(request, error)

    assert response.status_code == 500
    assert json.loads(response.body) == {"detail": "Internal server error"}
    assert "failed to update skill order for user_id=user-1" in caplog.text
