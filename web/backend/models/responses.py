#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class EligibilityResponse(BaseModel):
    """Outcome of evaluating an application."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "qualified": True,
                "score": 80,
                "reasons": [],
                "status": "PENDING",
                "status_description": "Your application is pending. Please call our office to provide a few missing details.",
                "kenya_years": 10,
                "total_years_experience": 10,
                "age": 35,
                "has_referees": True,
                "referee_count": 1,
                "has_good_conduct": True
            }
        }
    )

    success: bool = True
    qualified: bool
    score: int = Field(ge=0, le=100)
    reasons: List[str]
    status: str
    status_description: str
    kenya_years: int
    total_years_experience: int
    age: Optional[int]
    has_referees: bool
    referee_count: int
    has_good_conduct: bool


class CandidateSummary(BaseModel):
    id: str
    name: str
    phone: str
    role: Optional[str]
    status: str
    status_description: str


class PhoneCheckResponse(BaseModel):
    success: bool = True
    exists: bool
    candidate: Optional[CandidateSummary] = None


class ApplicationResponse(BaseModel):
    """Stored application with its evaluation."""
    success: bool = True
    candidate_id: str
    phone: str
    created: bool
    eligibility: EligibilityResponse


class CriterionResponse(BaseModel):
    id: str
    question: str
    weight: float
    critical: bool
    guidance: Dict[str, str]


class PillarResponse(BaseModel):
    id: str
    name: str
    description: str
    weight: float
    criteria: List[CriterionResponse]


class RubricResponse(BaseModel):
    success: bool = True
    pillars: List[PillarResponse]


class PillarScoreResponse(BaseModel):
    pillar_id: str
    name: str
    weight: float
    score: float = Field(ge=0)
    category: str
    answered: int
    total: int


class SummaryResponse(BaseModel):
    """Live assessment summary, recomputed from the current responses."""
    pillars: List[PillarScoreResponse]
    overall_percentage: float
    aggregate_score: float
    has_critical_failure: bool
    onboard_recommendation: bool
    answered: int
    total: int
    is_complete: bool
    key_strengths: List[str]
    development_needed: Optional[str]
    recommendation_reason: str


class AssessmentResponseItem(BaseModel):
    criterion_id: str
    score: Optional[int]
    notes: str
    red_flags: str
    version: int


class AssessmentDetailResponse(BaseModel):
    success: bool = True
    id: str
    candidate_id: str
    interview_date: Optional[str]
    status: str
    completed_at: Optional[str]
    responses: List[AssessmentResponseItem]
    summary: SummaryResponse


class AssessmentSummaryResponse(BaseModel):
    success: bool = True
    assessment_id: str
    status: str
    summary: SummaryResponse
