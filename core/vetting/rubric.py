#!/usr/bin/env python3
"""
Rubric Loader - Builds the pillar/criterion arena from configuration data.

The rubric is plain data (YAML file or database rows) so the weighting
algorithm never depends on a particular question set.

Expected shape:
    pillars:
      - id: child_care
        name: Child Care & Safety
        weight: 0.3
        criteria:
          - id: cc_supervision
            question: ...
            weight: 0.4
            critical: true
            guidance: {1: ..., 5: ...}
"""

import logging
import math
import os
from typing import Any, Dict

import yaml

from core.errors import RubricError
from core.vetting.models import Criterion, Pillar, Rubric

logger = logging.getLogger(__name__)


def load_rubric_definition(path: str) -> Dict[str, Any]:
    """Read a rubric YAML file, resolving relative paths against the project root."""
    if not os.path.exists(path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        candidate = os.path.join(base_dir, "..", "..", path)
        if os.path.exists(candidate):
            path = candidate

    try:
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}
    except OSError as e:
        raise RubricError(f"Could not read rubric file {path}: {e}") from e


def rubric_from_dict(data: Dict[str, Any]) -> Rubric:
    """
    Build a Rubric from its dict definition.

    Raises:
        RubricError: on missing ids/weights or duplicate ids
    """
    pillars: Dict[str, Pillar] = {}
    criteria: Dict[str, Criterion] = {}

    for pillar_data in data.get('pillars') or []:
        try:
            pillar_id = str(pillar_data['id'])
            pillar_weight = float(pillar_data['weight'])
        except (KeyError, TypeError, ValueError) as e:
            raise RubricError(f"Invalid pillar definition {pillar_data!r}: {e}") from e
        if pillar_id in pillars:
            raise RubricError(f"Duplicate pillar id: {pillar_id}")

        criterion_ids = []
        for criterion_data in pillar_data.get('criteria') or []:
            try:
                criterion_id = str(criterion_data['id'])
                weight = float(criterion_data['weight'])
            except (KeyError, TypeError, ValueError) as e:
                raise RubricError(f"Invalid criterion in pillar {pillar_id}: {e}") from e
            if criterion_id in criteria:
                raise RubricError(f"Duplicate criterion id: {criterion_id}")

            criteria[criterion_id] = Criterion(
                id=criterion_id,
                pillar_id=pillar_id,
                question=criterion_data.get('question', ''),
                weight=weight,
                is_critical=bool(criterion_data.get('critical', False)),
                guidance={str(k): str(v) for k, v in (criterion_data.get('guidance') or {}).items()},
            )
            criterion_ids.append(criterion_id)

        pillars[pillar_id] = Pillar(
            id=pillar_id,
            name=pillar_data.get('name', pillar_id),
            weight=pillar_weight,
            criterion_ids=tuple(criterion_ids),
            description=pillar_data.get('description', '') or '',
        )

    rubric = Rubric(pillars=pillars, criteria=criteria)

    # Overall scales with the weight sum; accepted as configured
    if pillars and not math.isclose(rubric.weight_sum, 1.0, abs_tol=1e-6):
        logger.warning(f"Pillar weights sum to {rubric.weight_sum:.3f}, not 1.0; overall scores will scale accordingly")

    return rubric


def load_rubric(path: str) -> Rubric:
    rubric = rubric_from_dict(load_rubric_definition(path))
    logger.info(f"Loaded rubric from {path}: {len(rubric.pillars)} pillars, {len(rubric.criteria)} criteria")
    return rubric
