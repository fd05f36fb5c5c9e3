import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from core.errors import PersistError
from core.utils import phone_suffix
from database.models import Candidate, CandidateStatusHistory
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive timestamps; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CandidateRepository(BaseRepository):
    def get_by_id(self, candidate_id: Any) -> Optional[Candidate]:
        stmt = select(Candidate).where(Candidate.id == candidate_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_phone(self, phone: str) -> Optional[Candidate]:
        stmt = select(Candidate).where(Candidate.phone == phone)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_phone_suffix(self, phone: str, digits: int = 9) -> Optional[Candidate]:
        """Match on the trailing digits so 07.., 254.. and +254.. spellings collide."""
        suffix = phone_suffix(phone, digits)
        if len(suffix) < digits:
            return None
        stmt = (
            select(Candidate)
            .where(Candidate.phone.like(f"%{suffix}"))
            .order_by(Candidate.created_at)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def create_candidate(self, fields: Dict[str, Any]) -> Candidate:
        candidate = Candidate(**fields)
        self.db.add(candidate)
        self.flush()
        logger.info(f"Created candidate {candidate.id} ({candidate.phone}) with status {candidate.status!r}")
        return candidate

    def update_candidate(self, candidate: Candidate, fields: Dict[str, Any]) -> Candidate:
        for key, value in fields.items():
            setattr(candidate, key, value)
        self.flush()
        logger.info(f"Updated candidate {candidate.id} ({candidate.phone})")
        return candidate

    def log_status_change(
        self,
        candidate: Candidate,
        old_status: Optional[str],
        new_status: str,
        changed_by_name: str = 'system',
        notes: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> CandidateStatusHistory:
        """
        Append a status transition, recording whole days spent in the old status.

        The previous status started at the last history entry, or at the
        candidate's creation when there is none.
        """
        now = now or datetime.now(timezone.utc)

        try:
            last_change = self.db.execute(
                select(CandidateStatusHistory.changed_at)
                .where(CandidateStatusHistory.candidate_id == candidate.id)
                .order_by(CandidateStatusHistory.changed_at.desc())
                .limit(1)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistError(f"Could not read status history: {e}") from e

        since = last_change or candidate.created_at
        days = 0
        if since is not None:
            days = max(0, (_as_utc(now) - _as_utc(since)).days)

        entry = CandidateStatusHistory(
            candidate_id=candidate.id,
            old_status=old_status,
            new_status=new_status,
            changed_by_name=changed_by_name,
            days_in_previous_status=days,
            notes=notes,
            changed_at=now,
        )
        self.db.add(entry)
        self.flush()
        logger.info(f"Candidate {candidate.id}: {old_status!r} -> {new_status!r} after {days} days")
        return entry

    def get_status_history(self, candidate_id: Any) -> List[CandidateStatusHistory]:
        stmt = (
            select(CandidateStatusHistory)
            .where(CandidateStatusHistory.candidate_id == candidate_id)
            .order_by(CandidateStatusHistory.changed_at)
        )
        return list(self.db.execute(stmt).scalars().all())
