#!/usr/bin/env python3
"""
Assessment Service - Interview assessment workflow.

Every response edit goes through the same two steps:
1. compute_summary() over the full response set (pure)
2. persist_assessment() for the edited response and summary columns

The live summary returned to callers is always recomputed from stored
responses, so reading an assessment back reproduces the saved scores.
"""

from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Optional, Tuple
import logging

from core.config_loader import VettingConfig
from core.errors import (
    AssessmentNotFoundError, CandidateNotFoundError, PersistError
)
from core.vetting.aggregation import compute_summary
from core.vetting.lifecycle import complete, ensure_editable, validate_score
from core.vetting.models import (
    Assessment, AssessmentStatus, AssessmentSummary, Response, Rubric
)
from core.vetting.persistence import persist_assessment, summary_columns
from database.repositories import AssessmentRepository, CandidateRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _response_from_row(row) -> Response:
    return Response(
        criterion_id=row.criterion_id,
        score=row.score,
        notes=row.notes or "",
        red_flags=row.red_flags or "",
        version=row.version,
    )


class AssessmentService:
    """
    Service for running candidate assessments against the vetting rubric.

    Holds no state between calls; the repositories carry the transaction.
    """

    def __init__(
        self,
        assessments: AssessmentRepository,
        candidates: CandidateRepository,
        rubric: Rubric,
        config: Optional[VettingConfig] = None,
        clock: Callable[[], datetime] = _utcnow
    ):
        self.assessments = assessments
        self.candidates = candidates
        self.rubric = rubric
        self.config = config or VettingConfig()
        self.clock = clock

    def _load(self, assessment_id: Any) -> Assessment:
        row = self.assessments.get_assessment(assessment_id)
        if row is None:
            raise AssessmentNotFoundError(f"Assessment not found: {assessment_id}")
        responses = {
            r.criterion_id: _response_from_row(r)
            for r in self.assessments.get_responses(assessment_id)
        }
        return Assessment(
            id=row.id,
            candidate_id=row.candidate_id,
            interview_date=row.interview_date,
            status=AssessmentStatus(row.status),
            responses=responses,
            completed_at=row.completed_at,
        )

    def start_assessment(self, candidate_id: Any, interview_date: Optional[date] = None) -> Assessment:
        if self.candidates.get_by_id(candidate_id) is None:
            raise CandidateNotFoundError(f"Candidate not found: {candidate_id}")

        row = self.assessments.create_assessment(candidate_id, interview_date)
        self.assessments.commit()
        return Assessment(
            id=row.id,
            candidate_id=row.candidate_id,
            interview_date=row.interview_date,
            status=AssessmentStatus.DRAFT,
        )

    def get_assessment(self, assessment_id: Any) -> Tuple[Assessment, AssessmentSummary]:
        """Assessment with its responses and a live summary."""
        assessment = self._load(assessment_id)
        return assessment, compute_summary(self.rubric, assessment.responses, self.config)

    def record_response(
        self,
        assessment_id: Any,
        criterion_id: str,
        score: Optional[int],
        notes: str = "",
        red_flags: str = "",
        expected_version: Optional[int] = None
    ) -> AssessmentSummary:
        """
        Save one criterion's response and return the recomputed summary.

        Raises:
            AssessmentNotFoundError / CriterionNotFoundError: unknown ids
            InvalidResponseScoreError: score outside 1..5
            AssessmentClosedError: assessment is no longer a draft
            PersistError: computed summary (in `result`) was not saved
        """
        self.rubric.criterion(criterion_id)
        validate_score(score, self.config)

        assessment = self._load(assessment_id)
        ensure_editable(assessment)

        current = assessment.responses.get(criterion_id)
        response = Response(
            criterion_id=criterion_id,
            score=score,
            notes=notes or "",
            red_flags=red_flags or "",
            version=(current.version if current else 0) + 1,
        )
        responses: Dict[str, Response] = dict(assessment.responses)
        responses[criterion_id] = response

        summary = compute_summary(self.rubric, responses, self.config)

        expected = {criterion_id: expected_version} if expected_version is not None else None
        persist_assessment(self.assessments, assessment_id, [response], summary, expected_versions=expected)

        logger.info(
            f"Assessment {assessment_id}: {criterion_id}={score} -> "
            f"overall {summary.overall_percentage:.1f}% ({summary.answered}/{summary.total} answered)"
        )
        return summary

    def complete_assessment(self, assessment_id: Any) -> AssessmentSummary:
        """
        Move a draft to completed once every criterion is answered.

        Raises:
            AssessmentIncompleteError: some criterion is unanswered; status stays draft
            AssessmentClosedError: already completed or locked
        """
        assessment = self._load(assessment_id)
        completed = complete(assessment, self.rubric, self.clock())
        summary = compute_summary(self.rubric, completed.responses, self.config)

        row = self.assessments.get_assessment(assessment_id)
        try:
            self.assessments.save_summary(row, summary_columns(summary))
            self.assessments.set_status(row, completed.status.value, completed_at=completed.completed_at)
            self.assessments.commit()
        except PersistError as e:
            self.assessments.rollback()
            e.result = summary
            raise

        logger.info(
            f"Assessment {assessment_id} completed: overall {summary.overall_percentage:.1f}%, "
            f"onboard={summary.onboard_recommendation}"
        )
        return summary
