#!/usr/bin/env python3
"""
Assessment Aggregation - Weighted pillar and overall scores.

Formulas:
    pillar_score = Σ(score/5 · w) / Σ w · 100   over answered criteria only
    overall      = Σ(pillar_score/100 · pillar_weight) · 100
    aggregate    = overall / 20                  (0-5 star scale)

Unanswered criteria are left out of both numerator and denominator, so a
draft pillar score reflects only what has been answered so far. Pillar
weights are not normalised: a rubric whose weights do not sum to 1.0
scales the overall score accordingly.
"""

from typing import Dict, Iterable, Mapping, Optional, Union

from core.config_loader import VettingConfig
from core.vetting.insights import development_needed, key_strengths, recommendation_reason
from core.vetting.models import AssessmentSummary, Pillar, PillarScore, Response, Rubric

Responses = Union[Mapping[str, Response], Iterable[Response]]


def index_responses(responses: Responses) -> Dict[str, Response]:
    """Responses keyed by criterion id (later entries win)."""
    if isinstance(responses, Mapping):
        return dict(responses)
    return {r.criterion_id: r for r in responses}


def pillar_score(
    rubric: Rubric,
    pillar: Pillar,
    responses: Mapping[str, Response],
    config: Optional[VettingConfig] = None
) -> float:
    config = config or VettingConfig()
    weighted_sum = 0.0
    total_weight = 0.0

    for criterion in rubric.criteria_for(pillar.id):
        response = responses.get(criterion.id)
        if response is None or response.score is None:
            continue
        weighted_sum += (response.score / config.max_response_score) * criterion.weight
        total_weight += criterion.weight

    if total_weight <= 0:
        return 0.0
    return weighted_sum / total_weight * 100


def overall_score(rubric: Rubric, pillar_scores: Mapping[str, float]) -> float:
    return sum(
        pillar_scores.get(pillar.id, 0.0) / 100 * pillar.weight
        for pillar in rubric.pillars.values()
    ) * 100


def category_label(score: float, config: Optional[VettingConfig] = None) -> str:
    config = config or VettingConfig()
    if score >= config.advanced_threshold:
        return "Advanced"
    if score >= config.intermediate_threshold:
        return "Intermediate"
    return "Basic"


def has_critical_failure(
    rubric: Rubric,
    responses: Mapping[str, Response],
    config: Optional[VettingConfig] = None
) -> bool:
    """True if any critical criterion has a score at or below the failure cutoff, regardless of weight."""
    config = config or VettingConfig()
    for criterion in rubric.criteria.values():
        if not criterion.is_critical:
            continue
        response = responses.get(criterion.id)
        if response is not None and response.score is not None \
                and response.score <= config.critical_failure_max_score:
            return True
    return False


def onboard_recommendation(
    overall: float,
    critical_failure: bool,
    config: Optional[VettingConfig] = None
) -> bool:
    config = config or VettingConfig()
    return overall >= config.onboard_threshold and not critical_failure


def compute_summary(
    rubric: Rubric,
    responses: Responses,
    config: Optional[VettingConfig] = None
) -> AssessmentSummary:
    """
    Recompute every derived assessment value from the current responses.

    Pure: same rubric and responses always give the same summary.

    Args:
        rubric: Pillar/criterion definitions
        responses: Current responses (mapping by criterion id, or a list)
        config: Thresholds; defaults when omitted

    Returns:
        AssessmentSummary with pillar scores, overall, recommendation and insights
    """
    config = config or VettingConfig()
    by_criterion = index_responses(responses)

    pillar_scores = []
    for pillar in rubric.pillars.values():
        score = pillar_score(rubric, pillar, by_criterion, config)
        criteria = rubric.criteria_for(pillar.id)
        answered = sum(
            1 for c in criteria
            if c.id in by_criterion and by_criterion[c.id].score is not None
        )
        pillar_scores.append(PillarScore(
            pillar_id=pillar.id,
            name=pillar.name,
            weight=pillar.weight,
            score=score,
            category=category_label(score, config),
            answered=answered,
            total=len(criteria),
        ))

    overall = overall_score(rubric, {ps.pillar_id: ps.score for ps in pillar_scores})
    critical = has_critical_failure(rubric, by_criterion, config)
    onboard = onboard_recommendation(overall, critical, config)

    return AssessmentSummary(
        pillar_scores=pillar_scores,
        overall_percentage=overall,
        aggregate_score=overall / 20,
        has_critical_failure=critical,
        onboard_recommendation=onboard,
        answered=sum(ps.answered for ps in pillar_scores),
        total=sum(ps.total for ps in pillar_scores),
        key_strengths=key_strengths(pillar_scores, config),
        development_needed=development_needed(pillar_scores),
        recommendation_reason=recommendation_reason(overall, critical, config),
    )
