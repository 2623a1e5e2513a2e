#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Skip tests that touch a database
    uv run python -m pytest tests/ -v -m "not db"

    # Using unittest
    uv run python -m unittest discover tests -v

Database tests run against in-memory SQLite, so no external service is needed.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base

TEST_DB_URL = "sqlite://"


def make_test_session_factory():
    """
    Fresh in-memory database with every table created.

    StaticPool keeps a single connection so the schema survives across sessions
    (and across the threads FastAPI's TestClient uses).
    """
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


def consultant_record(**overrides):
    """Registry-shaped consultant record matching the example scenario candidate."""
    record = {
        "id": "c-001",
        "firm_name": "Atelier Pacific",
        "role": "architect",
        "hq_state": "CA",
        "service_areas": ["CA"],
        "specialties": ["Contemporary", "Minimalist"],
        "portfolio": [{"name": "Malibu Residence", "features": ["pool", "wine room"]}],
        "years_experience": 15,
        "avg_rating": 4.5,
        "min_budget": 5_000_000,
        "max_budget": 15_000_000,
        "verification_status": "verified",
        "active": True,
        "status": "active",
    }
    record.update(overrides)
    return record


def project_profile_data(**overrides):
    data = {
        "region": "CA",
        "city": "Malibu",
        "total_budget": 10_000_000,
        "style_tags": ["Contemporary"],
        "required_features": ["pool"],
    }
    data.update(overrides)
    return data
