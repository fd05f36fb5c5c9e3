#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from core.eligibility.service import EligibilityService
from core.vetting.service import AssessmentService
from database.database import build_engine
from database.repositories import AssessmentRepository, CandidateRepository
from .config import get_config, get_rubric


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self):
        config = get_config()
        options = {"pool_pre_ping": True}  # Verify connections before using
        if not config.database.url.startswith("sqlite"):
            options.update(pool_size=10, max_overflow=20)
        self.engine = build_engine(config.database.url, **options)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Rolls back anything left uncommitted when the request ends.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


# Global database manager instance
_db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from _db_manager.get_session()


def get_eligibility_service(db: Session = Depends(get_db)) -> EligibilityService:
    return EligibilityService(CandidateRepository(db), get_config().eligibility)


def get_assessment_service(db: Session = Depends(get_db)) -> AssessmentService:
    return AssessmentService(
        AssessmentRepository(db),
        CandidateRepository(db),
        get_rubric(),
        get_config().vetting
    )
