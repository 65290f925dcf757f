"""
Central pytest configuration for the architecture showcase tests.

Environment variables are set before any application import so the lazy
engine points at an in-memory SQLite database and rate limiting stays off.
"""

import os

# Test database configuration (set early so import-time settings use it)
TEST_DATABASE_URL = "sqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["TESTING"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "0"
os.environ["LOG_TO_FILE"] = "0"
os.environ.pop("SENTRY_DSN", None)
os.environ.pop("DEFAULT_CURRENCY", None)

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from showcase.db.session import SessionLocal, create_tables, drop_tables  # noqa: E402
from showcase.services.event_publisher import EventPublisher  # noqa: E402
from tests.config.markers import (  # noqa: E402,F401
    pytest_collection_modifyitems,
    pytest_configure,
    response_helper,
)


# =====================================================
# DATABASE FIXTURES
# =====================================================


@pytest.fixture
def db_session():
    """Fresh schema and a real SQLAlchemy session per test."""
    drop_tables()
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def mock_db_session():
    """Create a mock database session for testing."""
    session = Mock()
    session.add = Mock()
    session.commit = Mock()
    session.refresh = Mock()
    session.rollback = Mock()
    session.close = Mock()
    session.query = Mock()
    return session


# =====================================================
# FLASK APPLICATION FIXTURES
# =====================================================


@pytest.fixture
def app():
    """Create the Flask application against an empty database."""
    from showcase.main import create_app

    drop_tables()
    app = create_app({"TESTING": True, "PROPAGATE_EXCEPTIONS": False})
    yield app
    drop_tables()


@pytest.fixture
def client(app):
    """Create a test client for Flask application with proper context."""
    with app.test_client() as client:
        with app.app_context():
            yield client


# =====================================================
# EVENT FIXTURES
# =====================================================


class RecordingObserver:
    """Observer double that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def on_event(self, event):
        self.events.append(event)


@pytest.fixture
def recording_observer():
    return RecordingObserver()


@pytest.fixture
def event_publisher(recording_observer):
    publisher = EventPublisher()
    publisher.subscribe(recording_observer)
    return publisher
