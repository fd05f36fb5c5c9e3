#!/usr/bin/env python3
"""
Application endpoints - self-service eligibility check and submission.
"""

import logging
from fastapi import APIRouter, Depends, Query

from core.eligibility.models import EligibilityResult
from core.eligibility.service import EligibilityService
from core.utils import describe_status
from ..dependencies import get_eligibility_service
from ..models.requests import EligibilityRequest, ApplicationRequest
from ..models.responses import (
    EligibilityResponse,
    ApplicationResponse,
    PhoneCheckResponse,
    CandidateSummary
)
from ..utils import safe_str

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])


def to_eligibility_response(result: EligibilityResult) -> EligibilityResponse:
    facts = result.facts
    return EligibilityResponse(
        qualified=result.qualified,
        score=result.score,
        reasons=result.reasons,
        status=result.status,
        status_description=describe_status(result.status),
        kenya_years=facts.kenya_years,
        total_years_experience=facts.total_years_experience,
        age=facts.age,
        has_referees=facts.has_referees,
        referee_count=facts.referee_count,
        has_good_conduct=facts.has_good_conduct
    )


@router.post("/evaluate", response_model=EligibilityResponse)
def evaluate_application(
    request: EligibilityRequest,
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Score an application without storing anything.

    Drives the congratulations / not-a-good-fit screen.
    """
    result = service.evaluate(request.to_input(), today=request.as_of)
    return to_eligibility_response(result)


@router.get("/phone-check", response_model=PhoneCheckResponse)
def check_phone(
    phone: str = Query(..., min_length=1, description="Phone number in any local or international spelling"),
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Look up an existing candidate by phone number.

    A match means a new submission will update that candidate.
    """
    candidate = service.check_phone(phone)
    if candidate is None:
        return PhoneCheckResponse(exists=False)

    return PhoneCheckResponse(
        exists=True,
        candidate=CandidateSummary(
            id=str(candidate.id),
            name=safe_str(candidate.name),
            phone=candidate.phone,
            role=candidate.role,
            status=candidate.status,
            status_description=describe_status(candidate.status)
        )
    )


@router.post("", response_model=ApplicationResponse)
def submit_application(
    request: ApplicationRequest,
    service: EligibilityService = Depends(get_eligibility_service)
):
    """
    Evaluate and store an application.

    Creates the candidate, or updates the one already registered under the
    same phone number, and records the status change.
    """
    outcome = service.submit_application(
        request.to_applicant(),
        request.to_input(),
        today=request.as_of
    )
    return ApplicationResponse(
        candidate_id=str(outcome.candidate.id),
        phone=outcome.candidate.phone,
        created=outcome.created,
        eligibility=to_eligibility_response(outcome.result)
    )
