import re

from typing import Optional

STATUS_DESCRIPTIONS = {
    'WON': "We're in the process of finding a job matching your salary and experience.",
    'PENDING': "Your application is pending. Please call our office to provide a few missing details.",
    'INTERVIEW_SCHEDULED': "Your interview has been scheduled. We'll contact you with details.",
    'BLACKLISTED': "Account suspended due to professional misconduct.",
}

LOST_PREFIX = 'Lost, '


def normalize_phone(phone: str) -> str:
    """
    Normalize a Kenyan phone number to +254 international form.

    Numbers already carrying the 254 country code gain a leading '+';
    local 07.../01... numbers have the trunk zero replaced. Anything else
    is returned unchanged.
    """
    if not phone:
        return phone
    cleaned = re.sub(r'\D', '', phone)
    if cleaned.startswith('254'):
        return f"+{cleaned}"
    if cleaned.startswith('07') or cleaned.startswith('01'):
        return f"+254{cleaned[1:]}"
    return phone


def phone_suffix(phone: str, digits: int = 9) -> str:
    """Last `digits` digits of a phone number, used for fuzzy duplicate lookup."""
    return re.sub(r'\D', '', phone or '')[-digits:]


def describe_status(status: str) -> str:
    """Applicant-facing description of a candidate status."""
    if status in STATUS_DESCRIPTIONS:
        return STATUS_DESCRIPTIONS[status]
    if status and status.startswith(LOST_PREFIX):
        reason = status[len(LOST_PREFIX):]
        return f"Application closed: {reason}"
    return status


def parse_year(value: Optional[str]) -> Optional[int]:
    """
    Parse the year out of a 'YYYY-MM' (or 'YYYY-MM-DD') string.

    Returns None for empty or unparseable input.
    """
    if not value:
        return None
    try:
        return int(str(value).strip().split('-')[0])
    except (ValueError, TypeError):
        return None
