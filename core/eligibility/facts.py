#!/usr/bin/env python3
"""
Eligibility Facts - Derived quantities computed from an application.

Experience is counted in whole calendar years between the start and end
year of each job; months are ignored.
"""

from datetime import date
from typing import Iterable, Optional
import logging

from dateutil.relativedelta import relativedelta

from core.config_loader import EligibilityConfig
from core.eligibility.models import EligibilityInput, EligibilityFacts, WorkExperience
from core.utils import parse_year

logger = logging.getLogger(__name__)


def _experience_years(experience: WorkExperience, today: date) -> int:
    start_year = parse_year(experience.start_date)
    end_year = today.year if experience.still_working else parse_year(experience.end_date)

    if start_year is None or end_year is None:
        logger.warning(
            f"Skipping experience at {experience.employer_name!r}: "
            f"unparseable dates start={experience.start_date!r} end={experience.end_date!r}"
        )
        return 0

    return max(0, end_year - start_year)


def sum_experience_years(
    experiences: Iterable[WorkExperience],
    today: date,
    country: Optional[str] = None
) -> int:
    """
    Sum whole years over experiences that name an employer and a start date.

    Args:
        experiences: Work history entries
        today: Current date (used for still-working entries)
        country: Only count entries in this country, or all when None

    Returns:
        Total whole years
    """
    total = 0
    for exp in experiences:
        if not exp.employer_name or not exp.start_date:
            continue
        if country is not None and exp.country != country:
            continue
        total += _experience_years(exp, today)
    return total


def calculate_age(date_of_birth: Optional[date], today: date) -> Optional[int]:
    """Whole years between birth and today, or None when the birth date is unknown."""
    if date_of_birth is None:
        return None
    return relativedelta(today, date_of_birth).years


def derive_facts(
    application: EligibilityInput,
    today: date,
    config: EligibilityConfig
) -> EligibilityFacts:
    """Compute every derived quantity the rules depend on."""
    referee_count = len([
        name for name in (application.referee_1_name, application.referee_2_name) if name
    ])

    return EligibilityFacts(
        kenya_years=sum_experience_years(application.work_experiences, today, country=config.home_country),
        total_years_experience=sum_experience_years(application.work_experiences, today),
        age=calculate_age(application.date_of_birth, today),
        has_referees=bool(application.referee_1_name and application.referee_1_phone),
        referee_count=referee_count,
        has_good_conduct=application.good_conduct_status in config.accepted_conduct,
    )
