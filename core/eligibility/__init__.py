#!/usr/bin/env python3
"""
Eligibility Module - Self-service application scoring.

Public API:
- evaluate_eligibility: Pure evaluation returning score, reasons and status
- EligibilityService: Submission workflow (phone check, create/update, history)

Modules:
- models.py: Input, facts and result structures
- facts.py: Derived quantities (Kenya years, age, referees, conduct)
- scoring.py: Additive 0-100 fit score
- rules.py: Disqualification reasons and status routing
- service.py: evaluate_eligibility and EligibilityService
"""

from core.eligibility.models import (
    ApplicantDetails, CandidateStatus, EligibilityInput, EligibilityResult,
    GoodConductStatus, Qualified, Rejected, WorkExperience
)
from core.eligibility.service import EligibilityService, evaluate_eligibility

__all__ = [
    'ApplicantDetails',
    'CandidateStatus',
    'EligibilityInput',
    'EligibilityResult',
    'GoodConductStatus',
    'Qualified',
    'Rejected',
    'WorkExperience',
    'EligibilityService',
    'evaluate_eligibility',
]
