"""Pytest configuration and shared fixtures."""

import pytest
from sqlalchemy.orm import sessionmaker

from cafe_roster.domain.db import history_engine
from cafe_roster.history import HistoryStore


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = history_engine("sqlite:///:memory:")
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def history(db_session):
    """History store over the in-memory database."""
    return HistoryStore(db_session, max_per_shift=2)
