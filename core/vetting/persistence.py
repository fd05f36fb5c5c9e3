#!/usr/bin/env python3
"""
Assessment Persistence - Effectful half of the compute -> persist contract.

compute_summary() never touches storage; persist_assessment() writes the
responses and summary columns and commits. A failure raises PersistError
carrying the summary that was computed but not saved.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from core.errors import AssessmentNotFoundError, PersistError
from core.vetting.models import AssessmentSummary, Response
from database.repositories.assessment import AssessmentRepository

logger = logging.getLogger(__name__)


def summary_columns(summary: AssessmentSummary) -> Dict[str, Any]:
    """Assessment row values derived from a summary."""
    return {
        'overall_percentage': round(summary.overall_percentage, 2),
        'aggregate_score': round(summary.aggregate_score, 2),
        'onboard_recommendation': summary.onboard_recommendation,
        'has_critical_failure': summary.has_critical_failure,
        'pillar_scores': {
            ps.pillar_id: {'score': round(ps.score, 2), 'category': ps.category}
            for ps in summary.pillar_scores
        },
    }


def persist_assessment(
    repo: AssessmentRepository,
    assessment_id: Any,
    responses: Iterable[Response],
    summary: AssessmentSummary,
    expected_versions: Optional[Dict[str, int]] = None
):
    """
    Store changed responses and the recomputed summary, then commit.

    Args:
        repo: Assessment repository bound to the current session
        assessment_id: Assessment to update
        responses: Responses to write (usually just the edited one)
        summary: Summary computed from the full response set
        expected_versions: Optional criterion_id -> version read by the caller

    Returns:
        The updated assessment row

    Raises:
        PersistError: (or StaleResponseError) with `result` set to the summary
    """
    expected_versions = expected_versions or {}

    assessment = repo.get_assessment(assessment_id)
    if assessment is None:
        raise AssessmentNotFoundError(f"Assessment not found: {assessment_id}")

    try:
        for response in responses:
            repo.upsert_response(
                assessment_id,
                response.criterion_id,
                response.score,
                notes=response.notes or None,
                red_flags=response.red_flags or None,
                expected_version=expected_versions.get(response.criterion_id),
            )
        repo.save_summary(assessment, summary_columns(summary))
        repo.commit()
    except PersistError as e:
        repo.rollback()
        if e.result is None:
            e.result = summary
        logger.error(f"Assessment {assessment_id} not saved: {e}")
        raise

    logger.debug(
        f"Assessment {assessment_id} saved: overall={summary.overall_percentage:.1f} "
        f"onboard={summary.onboard_recommendation}"
    )
    return assessment
