#!/usr/bin/env python3
"""
Admission Rules - Hard gates and status routing.

Two decision tables are evaluated over the same EligibilityFacts:
- disqualification_reasons(): the gate that decides `qualified`
- route_status(): the status label persisted on the candidate record

They agree on every input: `qualified` holds exactly when the routed
status is PENDING or "Pending, applying GC".
"""

from typing import List

from core.config_loader import EligibilityConfig
from core.eligibility.models import EligibilityFacts, CandidateStatus


def age_in_band(facts: EligibilityFacts, config: EligibilityConfig) -> bool:
    return facts.age is not None and config.min_age <= facts.age <= config.max_age


def conduct_waived(facts: EligibilityFacts, config: EligibilityConfig) -> bool:
    return facts.kenya_years >= config.conduct_waiver_years


def disqualification_reasons(facts: EligibilityFacts, config: EligibilityConfig) -> List[str]:
    """Human-readable reasons, in rule order. Empty when the applicant qualifies."""
    reasons = []

    if not age_in_band(facts, config):
        age_text = f"{facts.age} years" if facts.age is not None else "unknown"
        reasons.append(
            f"Age requirement not met (must be {config.min_age}-{config.max_age} years, you are {age_text})"
        )

    if facts.kenya_years < config.min_home_years:
        reasons.append(
            f"Minimum {config.min_home_years} years {config.home_country} experience required"
        )

    if not facts.has_referees:
        reasons.append("Professional references required")

    if not facts.has_good_conduct and not conduct_waived(facts, config):
        reasons.append(
            "Valid good conduct certificate or application receipt required "
            f"(unless {config.conduct_waiver_years}+ years experience)"
        )

    return reasons


def route_status(facts: EligibilityFacts, config: EligibilityConfig) -> str:
    """Pick the routing status. First matching rule wins."""
    if not age_in_band(facts, config):
        return CandidateStatus.LOST_AGE
    if facts.kenya_years < config.min_home_years:
        return CandidateStatus.LOST_EXPERIENCE
    if not facts.has_referees:
        return CandidateStatus.LOST_NO_REFERENCES

    # Enough local experience: proceed while the certificate is obtained
    if conduct_waived(facts, config) and not facts.has_good_conduct:
        return CandidateStatus.PENDING_APPLYING_GC

    if not facts.has_good_conduct:
        return CandidateStatus.LOST_NO_GOOD_CONDUCT

    return CandidateStatus.PENDING
