"""Pytest fixtures: an in-memory SQLite database and a FastAPI test client wired to it."""

import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure project root is on sys.path so that `import api` resolves.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.database import Base, get_db  # noqa: E402
from app.api.deps import get_is_admin  # noqa: E402


MARS = {
    "name": "Mars",
    "size_km": 6779,
    "atmosphere": "CO2",
    "type": "Terrestrial",
    "distance_from_sun_km": 227943824,
}


@pytest.fixture
def mars():
    return dict(MARS)


@pytest.fixture
def db_session():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def app(db_session):
    from api import app as fastapi_app

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Anonymous visitor. Not used as a context manager so startup seeding never runs."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def admin_client(app):
    """Visitor whose session carries the admin flag."""
    app.dependency_overrides[get_is_admin] = lambda: True
    return TestClient(app, follow_redirects=False)
