#!/usr/bin/env python3
"""
Fit Score - Additive qualification score (0-100).

Formula: experience band + conduct points + referee points.
"""

from typing import Dict, Tuple

from core.config_loader import EligibilityConfig
from core.eligibility.models import EligibilityFacts


def experience_points(kenya_years: int, config: EligibilityConfig) -> int:
    """Points for the highest experience band reached."""
    for band in sorted(config.experience_bands, key=lambda b: b.min_years, reverse=True):
        if kenya_years >= band.min_years:
            return band.points
    return 0


def conduct_points(good_conduct_status: str, config: EligibilityConfig) -> int:
    return config.conduct_points.get(good_conduct_status, 0)


def referee_points(referee_count: int, config: EligibilityConfig) -> int:
    if referee_count >= 2:
        return config.referee_points_two
    if referee_count == 1:
        return config.referee_points_one
    return 0


def calculate_score(
    facts: EligibilityFacts,
    good_conduct_status: str,
    config: EligibilityConfig
) -> Tuple[int, Dict[str, int]]:
    """
    Calculate the qualification score.

    Returns: (score, components)
    """
    components = {
        'experience': experience_points(facts.kenya_years, config),
        'conduct': conduct_points(good_conduct_status, config),
        'referees': referee_points(facts.referee_count, config),
    }
    return sum(components.values()), components
