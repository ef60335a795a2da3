"""Database configuration and session management.

Functions:
    get_engine: Returns the lazily created SQLAlchemy engine.
    get_session_local: Returns the lazily created session factory.
    get_db: FastAPI dependency yielding one session per request.

"""

from .database import get_db, get_engine, get_session_local

__all__ = ["get_db", "get_engine", "get_session_local"]
