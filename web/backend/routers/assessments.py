#!/usr/bin/env python3
"""
Assessment endpoints - score interviews against the vetting rubric.
"""

import logging
from fastapi import APIRouter, Depends

from core.vetting.models import AssessmentStatus, AssessmentSummary
from core.vetting.service import AssessmentService
from ..dependencies import get_assessment_service
from ..models.requests import StartAssessmentRequest, ResponseUpdate
from ..models.responses import (
    AssessmentDetailResponse,
    AssessmentSummaryResponse,
    AssessmentResponseItem,
    SummaryResponse
)
from ..utils import parse_uuid, safe_iso

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assessments", tags=["assessments"])


def to_summary_response(summary: AssessmentSummary) -> SummaryResponse:
    return SummaryResponse(**summary.to_dict())


def _detail(service: AssessmentService, assessment_id) -> AssessmentDetailResponse:
    assessment, summary = service.get_assessment(assessment_id)
    return AssessmentDetailResponse(
        id=str(assessment.id),
        candidate_id=str(assessment.candidate_id),
        interview_date=safe_iso(assessment.interview_date),
        status=assessment.status.value,
        completed_at=safe_iso(assessment.completed_at),
        responses=[
            AssessmentResponseItem(
                criterion_id=r.criterion_id,
                score=r.score,
                notes=r.notes,
                red_flags=r.red_flags,
                version=r.version
            )
            for r in assessment.responses.values()
        ],
        summary=to_summary_response(summary)
    )


@router.post("", response_model=AssessmentDetailResponse, status_code=201)
def start_assessment(
    request: StartAssessmentRequest,
    service: AssessmentService = Depends(get_assessment_service)
):
    """Open a draft assessment for a candidate."""
    assessment = service.start_assessment(request.candidate_id, request.interview_date)
    return _detail(service, assessment.id)


@router.get("/{assessment_id}", response_model=AssessmentDetailResponse)
def get_assessment(
    assessment_id: str,
    service: AssessmentService = Depends(get_assessment_service)
):
    """
    Get an assessment with its responses and live summary.

    The summary is recomputed from the stored responses on every read.
    """
    return _detail(service, parse_uuid(assessment_id, "assessment_id"))


@router.put("/{assessment_id}/responses/{criterion_id}", response_model=AssessmentSummaryResponse)
def save_response(
    assessment_id: str,
    criterion_id: str,
    update: ResponseUpdate,
    service: AssessmentService = Depends(get_assessment_service)
):
    """
    Save one criterion's score and notes.

    Returns the recomputed pillar scores, overall percentage and
    onboarding recommendation. Send `expected_version` to refuse the write
    when someone else changed the response first (409).
    """
    uid = parse_uuid(assessment_id, "assessment_id")
    summary = service.record_response(
        uid,
        criterion_id,
        update.score,
        notes=update.notes,
        red_flags=update.red_flags,
        expected_version=update.expected_version
    )
    return AssessmentSummaryResponse(
        assessment_id=str(uid),
        status=AssessmentStatus.DRAFT.value,
        summary=to_summary_response(summary)
    )


@router.post("/{assessment_id}/complete", response_model=AssessmentSummaryResponse)
def complete_assessment(
    assessment_id: str,
    service: AssessmentService = Depends(get_assessment_service)
):
    """
    Complete an assessment.

    Rejected with 400 (and the unanswered criterion ids) until every
    criterion of every pillar has a score.
    """
    uid = parse_uuid(assessment_id, "assessment_id")
    summary = service.complete_assessment(uid)
    return AssessmentSummaryResponse(
        assessment_id=str(uid),
        status=AssessmentStatus.COMPLETED.value,
        summary=to_summary_response(summary)
    )
