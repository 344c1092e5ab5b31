"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from domain.models import Base  # noqa: E402
from repositories import InMemoryPlanStore  # noqa: E402


@pytest.fixture
def plan_store():
    """Fresh in-memory plan store per test"""
    return InMemoryPlanStore()


@pytest.fixture
def db_session():
    """SQLite in-memory session with the pantry schema created"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, future=True)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(plan_store, db_session):
    """TestClient wired to the in-memory plan store and SQLite pantry"""
    from fastapi.testclient import TestClient
    from main import app
    from api.dependencies import get_db, get_plan_store

    app.dependency_overrides[get_plan_store] = lambda: plan_store
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
