"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import os

# Point the application at SQLite before any module creates an engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def session_factory():
    """In-memory SQLite sessionmaker with all tables created."""
    from tests import make_session_factory

    engine, factory = make_session_factory()
    yield factory
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    """Fresh database session for each test."""
    session = session_factory()
    yield session
    session.close()
