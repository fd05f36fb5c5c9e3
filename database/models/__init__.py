from .base import Base
from .candidate import Candidate, CandidateStatusHistory
from .vetting import VettingPillar, VettingCriterion, VettingAssessment, VettingResponse

__all__ = [
    'Base',
    'Candidate',
    'CandidateStatusHistory',
    'VettingPillar',
    'VettingCriterion',
    'VettingAssessment',
    'VettingResponse',
]
