import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.errors import PersistError

logger = logging.getLogger(__name__)


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Commit failed: {e}")
            raise PersistError(f"Could not save changes: {e}") from e

    def rollback(self) -> None:
        self.db.rollback()

    def flush(self) -> None:
        """Flush pending writes, surfacing database errors as PersistError."""
        try:
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Flush failed: {e}")
            raise PersistError(f"Could not save changes: {e}") from e
