#!/usr/bin/env python3
"""
Assessment Insights - Strengths, development area and recommendation text.
"""

from typing import List, Optional, Sequence

from core.config_loader import VettingConfig
from core.vetting.models import PillarScore


def key_strengths(pillar_scores: Sequence[PillarScore], config: VettingConfig) -> List[PillarScore]:
    """Pillars at or above the strength threshold, highest first."""
    strong = [ps for ps in pillar_scores if ps.score >= config.strength_threshold]
    strong.sort(key=lambda ps: ps.score, reverse=True)
    return strong[:config.max_key_strengths]


def development_needed(pillar_scores: Sequence[PillarScore]) -> Optional[PillarScore]:
    """Lowest-scoring pillar (first one on ties)."""
    if not pillar_scores:
        return None
    return min(pillar_scores, key=lambda ps: ps.score)


def recommendation_reason(overall: float, critical_failure: bool, config: VettingConfig) -> str:
    if critical_failure:
        return "Critical failures detected"
    if overall < config.onboard_threshold:
        return f"Overall score below {config.onboard_threshold:g}% threshold"
    return "Meets all requirements"
