"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import make_test_session_factory


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_session():
    """Session bound to a throwaway in-memory SQLite database."""
    engine, session_factory = make_test_session_factory()
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
