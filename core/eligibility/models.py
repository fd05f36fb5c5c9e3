#!/usr/bin/env python3
"""
Eligibility Models - Data structures for application scoring.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Union


class GoodConductStatus(str, Enum):
    """Police clearance (good conduct certificate) status."""
    VALID_CERTIFICATE = "Valid Certificate"
    APPLICATION_RECEIPT = "Application Receipt"
    EXPIRED = "Expired"
    NONE = "None"


class CandidateStatus:
    """Routing labels persisted on the candidate record."""
    PENDING = "PENDING"
    PENDING_APPLYING_GC = "Pending, applying GC"
    LOST_AGE = "Lost, Age"
    LOST_EXPERIENCE = "Lost, Experience"
    LOST_NO_REFERENCES = "Lost, No References"
    LOST_NO_GOOD_CONDUCT = "Lost, No Good Conduct"

    QUALIFYING = (PENDING, PENDING_APPLYING_GC)


ROLE_OPTIONS = ['Nanny', 'House Manager', 'Chef', 'Driver', 'Night Nurse', 'Caregiver', 'Housekeeper']


@dataclass
class WorkExperience:
    """One prior job. Dates are 'YYYY-MM' strings as captured on the form."""
    employer_name: str = ""
    country: str = ""
    start_date: str = ""
    end_date: str = ""
    still_working: bool = False


@dataclass
class EligibilityInput:
    """Everything needed to score one applicant."""
    work_experiences: List[WorkExperience] = field(default_factory=list)
    good_conduct_status: str = GoodConductStatus.NONE.value
    referee_1_name: str = ""
    referee_1_phone: str = ""
    referee_2_name: str = ""
    referee_2_phone: str = ""
    date_of_birth: Optional[date] = None
    role: str = ""


@dataclass
class ApplicantDetails:
    """Contact and pipeline fields stored with the application but not scored."""
    name: str = ""
    phone: str = ""
    id_number: str = ""
    source: str = ""
    preferred_interview_date: Optional[date] = None


@dataclass
class EligibilityFacts:
    """Derived quantities shared by the score, the gate and the status table."""
    kenya_years: int = 0
    total_years_experience: int = 0
    age: Optional[int] = None
    has_referees: bool = False
    referee_count: int = 0
    has_good_conduct: bool = False


@dataclass(frozen=True)
class Qualified:
    status: str


@dataclass(frozen=True)
class Rejected:
    reasons: List[str]
    status: str


Verdict = Union[Qualified, Rejected]


@dataclass
class EligibilityResult:
    """Outcome of scoring one application."""
    qualified: bool
    score: int
    reasons: List[str] = field(default_factory=list)
    status: str = CandidateStatus.PENDING
    facts: EligibilityFacts = field(default_factory=EligibilityFacts)

    @property
    def verdict(self) -> Verdict:
        if self.qualified:
            return Qualified(status=self.status)
        return Rejected(reasons=list(self.reasons), status=self.status)

    @property
    def qualification_notes(self) -> str:
        return 'Qualified candidate' if self.qualified else ', '.join(self.reasons)

    @property
    def lost_reason(self) -> Optional[str]:
        return None if self.qualified else ', '.join(self.reasons)
