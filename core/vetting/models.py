#!/usr/bin/env python3
"""
Vetting Models - Rubric arena, interview responses and assessment summary.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from core.errors import CriterionNotFoundError


class AssessmentStatus(str, Enum):
    DRAFT = "draft"
    COMPLETED = "completed"
    LOCKED = "locked"


@dataclass(frozen=True)
class Criterion:
    """One rubric question. Weight is relative to the other criteria of its pillar."""
    id: str
    pillar_id: str
    question: str
    weight: float
    is_critical: bool = False
    guidance: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Pillar:
    id: str
    name: str
    weight: float
    criterion_ids: Tuple[str, ...] = ()
    description: str = ""


@dataclass
class Rubric:
    """
    Pillars and criteria keyed by id.

    Insertion order of `pillars` is display order; each pillar lists its
    criteria in display order through `criterion_ids`.
    """
    pillars: Dict[str, Pillar] = field(default_factory=dict)
    criteria: Dict[str, Criterion] = field(default_factory=dict)

    def criteria_for(self, pillar_id: str) -> List[Criterion]:
        return [self.criteria[cid] for cid in self.pillars[pillar_id].criterion_ids]

    def criterion(self, criterion_id: str) -> Criterion:
        try:
            return self.criteria[criterion_id]
        except KeyError:
            raise CriterionNotFoundError(f"Unknown criterion: {criterion_id}") from None

    @property
    def weight_sum(self) -> float:
        return sum(p.weight for p in self.pillars.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pillars': [
                {
                    'id': pillar.id,
                    'name': pillar.name,
                    'description': pillar.description,
                    'weight': pillar.weight,
                    'criteria': [
                        {
                            'id': c.id,
                            'question': c.question,
                            'weight': c.weight,
                            'critical': c.is_critical,
                            'guidance': dict(c.guidance),
                        }
                        for c in self.criteria_for(pillar.id)
                    ],
                }
                for pillar in self.pillars.values()
            ]
        }


@dataclass
class Response:
    """Interviewer answer for one criterion. score is 1-5, or None while unanswered."""
    criterion_id: str
    score: Optional[int] = None
    notes: str = ""
    red_flags: str = ""
    version: int = 0


@dataclass
class Assessment:
    id: Any
    candidate_id: Any
    interview_date: Optional[date] = None
    status: AssessmentStatus = AssessmentStatus.DRAFT
    responses: Dict[str, Response] = field(default_factory=dict)
    completed_at: Optional[datetime] = None


@dataclass
class PillarScore:
    pillar_id: str
    name: str
    weight: float
    score: float
    category: str
    answered: int
    total: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pillar_id': self.pillar_id,
            'name': self.name,
            'weight': self.weight,
            'score': round(self.score, 2),
            'category': self.category,
            'answered': self.answered,
            'total': self.total,
        }


@dataclass
class AssessmentSummary:
    """Everything derived from a set of responses; recomputed on every edit."""
    pillar_scores: List[PillarScore]
    overall_percentage: float
    aggregate_score: float
    has_critical_failure: bool
    onboard_recommendation: bool
    answered: int
    total: int
    key_strengths: List[PillarScore] = field(default_factory=list)
    development_needed: Optional[PillarScore] = None
    recommendation_reason: str = ""

    @property
    def is_complete(self) -> bool:
        return self.answered == self.total

    def pillar(self, pillar_id: str) -> PillarScore:
        for ps in self.pillar_scores:
            if ps.pillar_id == pillar_id:
                return ps
        raise KeyError(pillar_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pillars': [ps.to_dict() for ps in self.pillar_scores],
            'overall_percentage': round(self.overall_percentage, 2),
            'aggregate_score': round(self.aggregate_score, 2),
            'has_critical_failure': self.has_critical_failure,
            'onboard_recommendation': self.onboard_recommendation,
            'answered': self.answered,
            'total': self.total,
            'is_complete': self.is_complete,
            'key_strengths': [ps.pillar_id for ps in self.key_strengths],
            'development_needed': self.development_needed.pillar_id if self.development_needed else None,
            'recommendation_reason': self.recommendation_reason,
        }
