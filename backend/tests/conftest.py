"""Pytest configuration and shared fixtures."""

import os

# Must be set before gujlearn is imported: the engine is created at import time
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = os.environ.get("TEST_DATABASE_URL", "sqlite://")

import uuid
from collections.abc import Generator
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

import gujlearn.models  # noqa: F401
from gujlearn.db.base import Base
from gujlearn.db.engine import engine
from gujlearn.db.session import SessionLocal, get_db
from gujlearn.main import app


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Fresh schema per test; application code is free to commit."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def owner_id() -> UUID:
    """Acting content author."""
    return uuid.uuid4()


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    """Test client sharing the test's database session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        # No context manager: skip lifespan so logging config stays untouched
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(owner_id: UUID) -> dict[str, str]:
    """Headers identifying the acting user."""
    return {"X-User-Id": str(owner_id)}
