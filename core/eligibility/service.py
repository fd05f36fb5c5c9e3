#!/usr/bin/env python3
"""
Eligibility Service - Scores self-submitted applications.

evaluate_eligibility() is the single pure evaluation: one set of derived
facts feeds the score, the disqualification reasons and the routing
status. EligibilityService adds the submission workflow around it
(duplicate lookup by phone, create-or-update, status history).
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, Optional
import logging

from core.config_loader import EligibilityConfig
from core.eligibility.facts import derive_facts
from core.eligibility.models import (
    ApplicantDetails, EligibilityInput, EligibilityResult
)
from core.eligibility.rules import disqualification_reasons, route_status
from core.eligibility.scoring import calculate_score
from core.errors import PersistError
from core.utils import normalize_phone
from database.repositories import CandidateRepository

logger = logging.getLogger(__name__)


@dataclass
class SubmissionOutcome:
    candidate: Any
    result: EligibilityResult
    created: bool


def evaluate_eligibility(
    application: EligibilityInput,
    today: date,
    config: Optional[EligibilityConfig] = None
) -> EligibilityResult:
    """
    Evaluate an application against the admission rules.

    Never raises for incomplete input: missing fields simply score zero
    and fail the corresponding rule.

    Args:
        application: Submitted qualification data
        today: Current date (age and still-working years depend on it)
        config: Admission rules; defaults when omitted

    Returns:
        EligibilityResult with qualified flag, score, reasons, status and facts
    """
    config = config or EligibilityConfig()
    facts = derive_facts(application, today, config)

    score, components = calculate_score(facts, application.good_conduct_status, config)
    reasons = disqualification_reasons(facts, config)
    status = route_status(facts, config)

    logger.debug(
        f"Eligibility: kenya_years={facts.kenya_years} age={facts.age} "
        f"components={components} status={status!r}"
    )

    return EligibilityResult(
        qualified=not reasons,
        score=score,
        reasons=reasons,
        status=status,
        facts=facts,
    )


def candidate_fields(
    applicant: ApplicantDetails,
    application: EligibilityInput,
    result: EligibilityResult,
    today: date
) -> Dict[str, Any]:
    """Candidate column values for a scored application."""
    facts = result.facts
    return {
        'name': applicant.name,
        'phone': normalize_phone(applicant.phone),
        'id_number': applicant.id_number or None,
        'role': application.role or None,
        'date_of_birth': application.date_of_birth,
        'age': facts.age,
        'source': applicant.source or None,
        'good_conduct_status': application.good_conduct_status,
        'work_experiences': [
            {
                'employer_name': exp.employer_name,
                'country': exp.country,
                'start_date': exp.start_date,
                'end_date': exp.end_date,
                'still_working': exp.still_working,
            }
            for exp in application.work_experiences if exp.employer_name
        ],
        'kenya_years': facts.kenya_years,
        'total_years_experience': facts.total_years_experience,
        'qualification_score': result.score,
        'qualification_notes': result.qualification_notes,
        'referee_1_name': application.referee_1_name or None,
        'referee_1_phone': application.referee_1_phone or None,
        'referee_2_name': application.referee_2_name or None,
        'referee_2_phone': application.referee_2_phone or None,
        'status': result.status,
        'lost_reason': result.lost_reason,
        'inquiry_date': today,
        'preferred_interview_date': applicant.preferred_interview_date,
        'added_by': 'self',
    }


class EligibilityService:
    """
    Submission workflow for the self-service application form.

    The clock is injected so the same application always scores the same
    way under test.
    """

    def __init__(
        self,
        repo: CandidateRepository,
        config: Optional[EligibilityConfig] = None,
        clock: Callable[[], date] = date.today
    ):
        self.repo = repo
        self.config = config or EligibilityConfig()
        self.clock = clock

    def evaluate(self, application: EligibilityInput, today: Optional[date] = None) -> EligibilityResult:
        return evaluate_eligibility(application, today or self.clock(), self.config)

    def check_phone(self, phone: str):
        """Existing candidate for this phone number, by exact match then by trailing digits."""
        normalized = normalize_phone(phone)
        if not normalized:
            return None

        candidate = self.repo.get_by_phone(normalized)
        if candidate is None:
            candidate = self.repo.find_by_phone_suffix(normalized)

        if candidate is not None:
            logger.info(f"Phone {normalized} matches existing candidate {candidate.id}")
        return candidate

    def submit_application(
        self,
        applicant: ApplicantDetails,
        application: EligibilityInput,
        today: Optional[date] = None
    ) -> SubmissionOutcome:
        """
        Evaluate the application and create or update the candidate record.

        Returns:
            SubmissionOutcome(candidate, result, created)

        Raises:
            PersistError: the candidate could not be saved (result attached)
        """
        today = today or self.clock()
        result = evaluate_eligibility(application, today, self.config)
        fields = candidate_fields(applicant, application, result, today)

        try:
            existing = self.check_phone(applicant.phone)
            if existing is None:
                candidate = self.repo.create_candidate(fields)
                self.repo.log_status_change(candidate, None, result.status, notes="Self-service application")
            else:
                old_status = existing.status
                candidate = self.repo.update_candidate(existing, fields)
                if old_status != result.status:
                    self.repo.log_status_change(candidate, old_status, result.status, notes="Re-submitted application")
            self.repo.commit()
        except PersistError as e:
            self.repo.rollback()
            e.result = result
            logger.error(f"Application for {fields['phone']} not saved: {e}")
            raise

        outcome = "qualified" if result.qualified else f"not qualified ({result.lost_reason})"
        logger.info(f"Application {candidate.id} {outcome}: score={result.score} status={result.status!r}")
        return SubmissionOutcome(candidate=candidate, result=result, created=existing is None)
