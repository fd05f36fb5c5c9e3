from database.repositories.base import BaseRepository
from database.repositories.candidate import CandidateRepository
from database.repositories.rubric import RubricRepository
from database.repositories.assessment import AssessmentRepository

__all__ = [
    'BaseRepository',
    'CandidateRepository',
    'RubricRepository',
    'AssessmentRepository',
]
