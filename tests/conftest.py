"""
Pytest fixtures for the test suite.

Every test gets its own in-memory SQLite database. A StaticPool keeps the
single connection shared with the TestClient's worker threads, so rows written
through the API are visible to the test and vice versa.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from employee_service.store import StoreResult


TEST_DB_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    """Create a fresh in-memory SQLite engine for each test."""
    return create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )


@pytest.fixture
def tables(engine):
    """Create all ORM tables on the test engine."""
    from employee_service.db.base import Base
    from employee_service.models import employee  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def session_factory(tables):
    return sessionmaker(bind=tables, autocommit=False, autoflush=False, class_=Session)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def app():
    from employee_service.main import app as fastapi_app

    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app, session_factory):
    """TestClient whose requests run against the per-test database."""
    from employee_service.db.session import get_db

    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    return TestClient(app)


class RecordingStore:
    """
    Store double that records every call and answers with canned results.
    """

    def __init__(self, error: str | None = None, affected: int = 1) -> None:
        self.error = error
        self.affected = affected
        self.calls: list[tuple] = []

    def _result(self, value):
        if self.error is not None:
            return StoreResult.failure(self.error)
        return StoreResult.success(value)

    def list_all(self):
        self.calls.append(("list_all",))
        return self._result([])

    def insert(self, record):
        self.calls.append(("insert", record))
        return self._result([{"id": 1, **record}])

    def update(self, employee_id, record):
        self.calls.append(("update", employee_id, record))
        return self._result(self.affected)

    def delete(self, employee_id):
        self.calls.append(("delete", employee_id))
        return self._result(self.affected)


@pytest.fixture
def fake_store(app):
    """Replace the store dependency with a RecordingStore."""
    from employee_service.store import get_store

    store = RecordingStore()
    app.dependency_overrides[get_store] = lambda: store
    return store


@pytest.fixture
def fake_client(app, fake_store):
    return TestClient(app)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "group_name": "CS-101",
        "role": "student",
        "expected_salary": "4200",
        "expected_date_of_defense": "2025-06-01T12:00:00+02:00",
    }
