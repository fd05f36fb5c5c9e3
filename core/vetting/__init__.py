#!/usr/bin/env python3
"""
Vetting Module - Interview assessment rubric engine.

Public API:
- compute_summary: Pure aggregation of responses into pillar/overall scores
- load_rubric / rubric_from_dict: Build the rubric arena from data
- AssessmentService: Draft -> completed workflow with persistence

Modules:
- models.py: Rubric arena, responses and summary structures
- rubric.py: YAML/dict rubric loading
- aggregation.py: Pillar, overall, category and critical-failure formulas
- insights.py: Key strengths, development area, recommendation text
- lifecycle.py: Score validation and the completion gate
- persistence.py: persist_assessment (effectful half of compute -> persist)
- service.py: AssessmentService orchestrator
"""

from core.vetting.models import (
    Assessment, AssessmentStatus, AssessmentSummary, Criterion, Pillar, PillarScore, Response, Rubric
)
from core.vetting.rubric import load_rubric, rubric_from_dict
from core.vetting.aggregation import compute_summary
from core.vetting.lifecycle import complete
from core.vetting.service import AssessmentService

__all__ = [
    'Assessment',
    'AssessmentStatus',
    'AssessmentSummary',
    'Criterion',
    'Pillar',
    'PillarScore',
    'Response',
    'Rubric',
    'load_rubric',
    'rubric_from_dict',
    'compute_summary',
    'complete',
    'AssessmentService',
]
