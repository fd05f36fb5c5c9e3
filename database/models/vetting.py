import uuid

from sqlalchemy import (
    Column, Text, Integer, Boolean, Numeric, Date, TIMESTAMP, ForeignKey,
    UniqueConstraint, Index, Uuid, func
)
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class VettingPillar(Base):
    """Assessment category of the vetting rubric (configuration data)."""
    __tablename__ = 'vetting_pillars'

    id = Column(Text, primary_key=True)  # slug, e.g. 'child_care'
    name = Column(Text, nullable=False)
    description = Column(Text)
    pillar_weight = Column(Numeric(4, 3), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    criteria = relationship(
        "VettingCriterion",
        back_populates="pillar",
        cascade="all, delete-orphan",
        order_by="VettingCriterion.position"
    )


class VettingCriterion(Base):
    """
    One question of the rubric.

    question/guidance are display-only; weight and is_critical drive scoring.
    """
    __tablename__ = 'vetting_criteria'

    id = Column(Text, primary_key=True)
    pillar_id = Column(Text, ForeignKey('vetting_pillars.id', ondelete='CASCADE'), nullable=False)
    question = Column(Text, nullable=False)
    weight = Column(Numeric(4, 3), nullable=False)
    is_critical = Column(Boolean, nullable=False, default=False)
    guidance = Column(JSONType, default=dict)  # {"1": "...", ..., "5": "..."}
    position = Column(Integer, nullable=False, default=0)

    pillar = relationship("VettingPillar", back_populates="criteria")

    __table_args__ = (
        Index('idx_vetting_criteria_pillar', 'pillar_id'),
    )


class VettingAssessment(Base):
    """
    One candidate's rubric pass.

    Summary columns are recomputed and stored on every response save.
    """
    __tablename__ = 'vetting_assessments'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    candidate_id = Column(Uuid, ForeignKey('candidates.id', ondelete='CASCADE'), nullable=False)
    interview_date = Column(Date)
    status = Column(Text, nullable=False, default='draft')  # draft|completed|locked

    overall_percentage = Column(Numeric(5, 2), default=0)
    aggregate_score = Column(Numeric(3, 2), default=0)
    onboard_recommendation = Column(Boolean, nullable=False, default=False)
    has_critical_failure = Column(Boolean, nullable=False, default=False)
    pillar_scores = Column(JSONType, default=dict)

    completed_at = Column(TIMESTAMP(timezone=True), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    candidate = relationship("Candidate", back_populates="assessments")
    responses = relationship("VettingResponse", back_populates="assessment", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_vetting_assessment_candidate', 'candidate_id'),
        Index('idx_vetting_assessment_status', 'status'),
    )


class VettingResponse(Base):
    """Interviewer answer to one criterion within one assessment."""
    __tablename__ = 'vetting_responses'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    assessment_id = Column(Uuid, ForeignKey('vetting_assessments.id', ondelete='CASCADE'), nullable=False)
    criterion_id = Column(Text, ForeignKey('vetting_criteria.id', ondelete='CASCADE'), nullable=False)
    score = Column(Integer, nullable=True)  # 1-5, NULL while unanswered
    notes = Column(Text)
    red_flags = Column(Text)
    version = Column(Integer, nullable=False, default=1)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    assessment = relationship("VettingAssessment", back_populates="responses")

    __table_args__ = (
        UniqueConstraint('assessment_id', 'criterion_id', name='uq_vetting_response_assessment_criterion'),
        Index('idx_vetting_response_assessment', 'assessment_id'),
    )
