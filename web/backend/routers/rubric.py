#!/usr/bin/env python3
"""
Rubric endpoint - pillars and criteria used to score interviews.
"""

from fastapi import APIRouter

from ..config import get_rubric
from ..models.responses import RubricResponse

router = APIRouter(prefix="/api", tags=["rubric"])


@router.get("/rubric", response_model=RubricResponse)
def get_rubric_definition():
    """
    Get the vetting rubric.

    Pillars in display order, each with its weighted criteria, critical
    flags and per-level scoring guidance.
    """
    return RubricResponse(**get_rubric().to_dict())
