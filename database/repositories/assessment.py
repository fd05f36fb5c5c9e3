import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from core.errors import PersistError, StaleResponseError
from database.models import VettingAssessment, VettingResponse
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class AssessmentRepository(BaseRepository):
    def create_assessment(
        self,
        candidate_id: Any,
        interview_date: Optional[date] = None
    ) -> VettingAssessment:
        assessment = VettingAssessment(
            candidate_id=candidate_id,
            interview_date=interview_date,
            status='draft',
            overall_percentage=0,
            aggregate_score=0,
            onboard_recommendation=False,
            has_critical_failure=False,
            pillar_scores={},
        )
        self.db.add(assessment)
        self.flush()
        logger.info(f"Started assessment {assessment.id} for candidate {candidate_id}")
        return assessment

    def get_assessment(self, assessment_id: Any) -> Optional[VettingAssessment]:
        stmt = select(VettingAssessment).where(VettingAssessment.id == assessment_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_candidate(self, candidate_id: Any) -> List[VettingAssessment]:
        stmt = (
            select(VettingAssessment)
            .where(VettingAssessment.candidate_id == candidate_id)
            .order_by(VettingAssessment.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_responses(self, assessment_id: Any) -> List[VettingResponse]:
        stmt = select(VettingResponse).where(VettingResponse.assessment_id == assessment_id)
        return list(self.db.execute(stmt).scalars().all())

    def get_response(self, assessment_id: Any, criterion_id: str) -> Optional[VettingResponse]:
        stmt = select(VettingResponse).where(
            VettingResponse.assessment_id == assessment_id,
            VettingResponse.criterion_id == criterion_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert_response(
        self,
        assessment_id: Any,
        criterion_id: str,
        score: Optional[int],
        notes: Optional[str] = None,
        red_flags: Optional[str] = None,
        expected_version: Optional[int] = None
    ) -> VettingResponse:
        """
        Insert or update the response for one criterion.

        When expected_version is given it must equal the stored version
        (0 for a response that does not exist yet), otherwise
        StaleResponseError is raised and nothing is written. Without it the
        last write wins.
        """
        try:
            response = self.get_response(assessment_id, criterion_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistError(f"Could not read response: {e}") from e

        current_version = response.version if response is not None else 0
        if expected_version is not None and expected_version != current_version:
            logger.warning(
                f"Stale write to {assessment_id}/{criterion_id}: "
                f"expected version {expected_version}, found {current_version}"
            )
            raise StaleResponseError(
                f"Response for {criterion_id} was changed by someone else "
                f"(expected version {expected_version}, found {current_version})"
            )

        if response is None:
            response = VettingResponse(
                assessment_id=assessment_id,
                criterion_id=criterion_id,
                version=1,
            )
            self.db.add(response)
        else:
            response.version = current_version + 1

        response.score = score
        response.notes = notes
        response.red_flags = red_flags
        self.flush()
        return response

    def save_summary(self, assessment: VettingAssessment, columns: Dict[str, Any]) -> VettingAssessment:
        for key, value in columns.items():
            setattr(assessment, key, value)
        self.flush()
        return assessment

    def set_status(
        self,
        assessment: VettingAssessment,
        status: str,
        completed_at: Optional[datetime] = None
    ) -> VettingAssessment:
        assessment.status = status
        if completed_at is not None:
            assessment.completed_at = completed_at
        self.flush()
        logger.info(f"Assessment {assessment.id} is now {status!r}")
        return assessment
