#!/usr/bin/env python3
"""
Error taxonomy for the eligibility and vetting services.

Scoring itself never raises; these cover the assessment lifecycle and the
persistence boundary.
"""

from typing import Optional, Any


class VettingError(Exception):
    """Base exception for eligibility and vetting errors."""
    pass


class AssessmentIncompleteError(VettingError):
    """Raised when completing an assessment that still has unanswered criteria."""

    def __init__(self, unanswered: Optional[list] = None):
        self.unanswered = list(unanswered or [])
        super().__init__("Please answer all questions before completing the assessment")


class AssessmentClosedError(VettingError):
    """Raised when editing an assessment that is no longer a draft."""
    pass


class InvalidResponseScoreError(VettingError, ValueError):
    """Raised when a response score is outside the rubric scale."""
    pass


class AssessmentNotFoundError(VettingError):
    pass


class CriterionNotFoundError(VettingError):
    pass


class CandidateNotFoundError(VettingError):
    pass


class PersistError(VettingError):
    """
    Raised when a computed result could not be durably stored.

    Carries the in-memory result (when there is one) so callers can keep
    showing it while reporting that it was not saved.
    """

    def __init__(self, message: str, result: Optional[Any] = None):
        super().__init__(message)
        self.result = result


class StaleResponseError(PersistError):
    """Raised when a response was changed by someone else since it was read."""
    pass


class RubricError(VettingError, ValueError):
    """Raised when a rubric definition cannot be read or is malformed."""
    pass
