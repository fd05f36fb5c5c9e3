#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only tests that need no database
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database tests run against an in-memory SQLite database; no server is
needed. The models use portable column types so the same schema is created
on PostgreSQL in production.
"""

import os
from datetime import date

# Must be set before database.database is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.eligibility.models import EligibilityInput, WorkExperience

# Fixed "current date" for every eligibility test
TODAY = date(2025, 6, 1)

# Small rubric: two pillars, weights sum to 1.0, one critical criterion
SAMPLE_RUBRIC = {
    'pillars': [
        {
            'id': 'safety',
            'name': 'Child Safety',
            'weight': 0.6,
            'criteria': [
                {'id': 's_supervision', 'question': 'Supervision plan?', 'weight': 0.5, 'critical': True,
                 'guidance': {1: 'None', 5: 'Thorough'}},
                {'id': 's_first_aid', 'question': 'First aid?', 'weight': 0.3},
                {'id': 's_hygiene', 'question': 'Hygiene?', 'weight': 0.2},
            ],
        },
        {
            'id': 'attitude',
            'name': 'Attitude',
            'weight': 0.4,
            'criteria': [
                {'id': 'a_honesty', 'question': 'Honesty?', 'weight': 0.5},
                {'id': 'a_punctuality', 'question': 'Punctuality?', 'weight': 0.5},
            ],
        },
    ]
}

SAMPLE_CRITERIA = ['s_supervision', 's_first_aid', 's_hygiene', 'a_honesty', 'a_punctuality']


def make_session_factory():
    """
    Fresh in-memory SQLite database with all tables created.

    StaticPool keeps the single connection alive so every session (and the
    FastAPI TestClient thread) sees the same database.

    Returns:
        (engine, sessionmaker)
    """
    from database.models import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    return engine, sessionmaker(bind=engine, autocommit=False, autoflush=False)


def make_application(
    kenya_start: str = "2015-01",
    still_working: bool = True,
    good_conduct_status: str = "Valid Certificate",
    referee_1_name: str = "Jane",
    referee_1_phone: str = "0700000000",
    referee_2_name: str = "",
    date_of_birth: date = date(1990, 1, 1),
    extra_experiences=None
) -> EligibilityInput:
    """Application matching the reference example; override one field at a time."""
    experiences = [
        WorkExperience(
            employer_name="Acme",
            country="Kenya",
            start_date=kenya_start,
            still_working=still_working
        )
    ]
    experiences.extend(extra_experiences or [])
    return EligibilityInput(
        work_experiences=experiences,
        good_conduct_status=good_conduct_status,
        referee_1_name=referee_1_name,
        referee_1_phone=referee_1_phone,
        referee_2_name=referee_2_name,
        referee_2_phone="0711111111" if referee_2_name else "",
        date_of_birth=date_of_birth,
        role="Nanny",
    )


def kenya_start_for(years: int) -> str:
    """Start date giving `years` whole Kenya years as of TODAY when still working."""
    return f"{TODAY.year - years}-01"
