import contextlib
import logging
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import PersistError
from database.database import SessionLocal
from database.repositories import CandidateRepository, AssessmentRepository, RubricRepository

logger = logging.getLogger(__name__)


class VettingRepositories:
    """Repositories sharing one Session (and therefore one transaction)."""

    def __init__(self, session: Session):
        self.session = session
        self.candidates = CandidateRepository(session)
        self.assessments = AssessmentRepository(session)
        self.rubric = RubricRepository(session)


@contextlib.contextmanager
def vetting_uow(session_factory: Optional[Callable[[], Session]] = None):
    """Per-unit-of-work transaction scope.

    Yields VettingRepositories bound to a fresh Session. Commits on success,
    rolls back on exception, always closes. A failed commit surfaces as
    PersistError.

    Usage:
        with vetting_uow() as repos:
            candidate = repos.candidates.get_by_phone(phone)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        yield VettingRepositories(session)
        try:
            session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {e}")
            raise PersistError(f"Could not save changes: {e}") from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
