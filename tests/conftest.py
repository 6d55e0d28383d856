"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database; the API client uses
it through a ``get_db`` override.
"""

import datetime
import os

# Must be set before app.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db.session import get_db
from app.main import app


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_test_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_payload():
    """Factory for a valid session request body (camelCase, as a client sends it)."""

    def _make(date: datetime.date = datetime.date(2026, 1, 26), **overrides) -> dict:
        body = {
            "date": date.isoformat(),
            "types": ["boulder"],
            "intensity": "moderate",
            "performance": "normal",
            "productivity": "normal",
            "durationMinutes": None,
            "notes": None,
            "maxGrade": None,
            "hardAttempts": None,
            "venue": None,
            "injuries": [],
        }
        body.update(overrides)
        return body

    return _make
