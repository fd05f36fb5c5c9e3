#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

import uuid
from datetime import date
from pydantic import BaseModel, Field
from typing import List, Optional

from core.eligibility.models import ApplicantDetails, EligibilityInput, WorkExperience


class WorkExperienceRequest(BaseModel):
    """One prior job as captured on the application form."""
    employer_name: str = ""
    country: str = "Kenya"
    start_date: str = Field("", description="YYYY-MM")
    end_date: str = Field("", description="YYYY-MM, ignored when still_working")
    still_working: bool = False


class EligibilityRequest(BaseModel):
    """Qualification data scored by the eligibility rules."""
    work_experiences: List[WorkExperienceRequest] = Field(default_factory=list)
    good_conduct_status: str = Field(
        "None",
        description="Valid Certificate, Application Receipt, Expired or None"
    )
    referee_1_name: str = ""
    referee_1_phone: str = ""
    referee_2_name: str = ""
    referee_2_phone: str = ""
    date_of_birth: Optional[date] = None
    role: str = ""
    as_of: Optional[date] = Field(None, description="Evaluate as of this date (defaults to today)")

    def to_input(self) -> EligibilityInput:
        return EligibilityInput(
            work_experiences=[WorkExperience(**exp.model_dump()) for exp in self.work_experiences],
            good_conduct_status=self.good_conduct_status,
            referee_1_name=self.referee_1_name,
            referee_1_phone=self.referee_1_phone,
            referee_2_name=self.referee_2_name,
            referee_2_phone=self.referee_2_phone,
            date_of_birth=self.date_of_birth,
            role=self.role,
        )


class ApplicationRequest(EligibilityRequest):
    """Full self-service application: contact details plus qualification data."""
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    id_number: str = ""
    source: str = ""
    preferred_interview_date: Optional[date] = None

    def to_applicant(self) -> ApplicantDetails:
        return ApplicantDetails(
            name=self.name,
            phone=self.phone,
            id_number=self.id_number,
            source=self.source,
            preferred_interview_date=self.preferred_interview_date,
        )


class StartAssessmentRequest(BaseModel):
    """Request to open a draft assessment for a candidate."""
    candidate_id: uuid.UUID
    interview_date: Optional[date] = None


class ResponseUpdate(BaseModel):
    """Interviewer answer for one criterion. A null score clears the answer."""
    score: Optional[int] = Field(None, description="1-5, or null")
    notes: str = ""
    red_flags: str = ""
    expected_version: Optional[int] = Field(
        None,
        ge=0,
        description="Version the client last read (0 for a new response); omit for last-write-wins"
    )
