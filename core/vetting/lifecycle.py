#!/usr/bin/env python3
"""
Assessment Lifecycle - draft -> completed gate.

    draft --(every criterion of every pillar answered)--> completed

`completed` is terminal. `locked` exists in the data model but nothing
here moves an assessment into it.
"""

from dataclasses import replace
from datetime import datetime
from typing import List, Mapping, Optional

from core.config_loader import VettingConfig
from core.errors import AssessmentClosedError, AssessmentIncompleteError, InvalidResponseScoreError
from core.vetting.models import Assessment, AssessmentStatus, Response, Rubric


def validate_score(score: Optional[int], config: Optional[VettingConfig] = None) -> Optional[int]:
    """Accept None (clearing an answer) or an integer on the 1..max scale."""
    config = config or VettingConfig()
    if score is None:
        return None
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidResponseScoreError(f"Score must be an integer, got {score!r}")
    if not 1 <= score <= config.max_response_score:
        raise InvalidResponseScoreError(
            f"Score must be between 1 and {config.max_response_score}, got {score}"
        )
    return score


def unanswered_criteria(rubric: Rubric, responses: Mapping[str, Response]) -> List[str]:
    """Criterion ids, in rubric order, that have no score yet."""
    missing = []
    for pillar in rubric.pillars.values():
        for criterion_id in pillar.criterion_ids:
            response = responses.get(criterion_id)
            if response is None or response.score is None:
                missing.append(criterion_id)
    return missing


def ensure_editable(assessment: Assessment) -> None:
    status = AssessmentStatus(assessment.status)
    if status != AssessmentStatus.DRAFT:
        raise AssessmentClosedError(f"Assessment {assessment.id} is {status.value} and can no longer be edited")


def complete(assessment: Assessment, rubric: Rubric, now: datetime) -> Assessment:
    """
    Return a completed copy of the assessment.

    The given assessment is never modified, so a rejected completion
    leaves it in draft.

    Raises:
        AssessmentClosedError: if the assessment is not a draft
        AssessmentIncompleteError: if any criterion in any pillar is unanswered
    """
    ensure_editable(assessment)

    missing = unanswered_criteria(rubric, assessment.responses)
    if missing:
        raise AssessmentIncompleteError(unanswered=missing)

    return replace(assessment, status=AssessmentStatus.COMPLETED, completed_at=now)
