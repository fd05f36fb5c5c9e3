import uuid

from sqlalchemy import Column, Text, Integer, Date, TIMESTAMP, ForeignKey, Index, Uuid, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class Candidate(Base):
    """
    Applicant record created by the self-service application flow.

    Stores the submitted qualification data alongside the derived
    eligibility facts, score and routing status.
    """
    __tablename__ = 'candidates'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False, default='')
    phone = Column(Text, nullable=False, unique=True)  # normalised +254...
    id_number = Column(Text)
    role = Column(Text)
    date_of_birth = Column(Date)
    age = Column(Integer)
    source = Column(Text)

    # Qualification data
    good_conduct_status = Column(Text)
    work_experiences = Column(JSONType, default=list)
    kenya_years = Column(Integer, default=0)
    total_years_experience = Column(Integer, default=0)
    qualification_score = Column(Integer, default=0)
    qualification_notes = Column(Text)
    referee_1_name = Column(Text)
    referee_1_phone = Column(Text)
    referee_2_name = Column(Text)
    referee_2_phone = Column(Text)

    # Pipeline
    status = Column(Text, nullable=False)
    lost_reason = Column(Text)
    inquiry_date = Column(Date)
    preferred_interview_date = Column(Date)
    added_by = Column(Text, default='self')

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    status_history = relationship(
        "CandidateStatusHistory",
        back_populates="candidate",
        cascade="all, delete-orphan",
        order_by="CandidateStatusHistory.changed_at"
    )
    assessments = relationship("VettingAssessment", back_populates="candidate")

    __table_args__ = (
        Index('idx_candidates_status', 'status'),
        Index('idx_candidates_role', 'role'),
    )

    def __repr__(self) -> str:
        return f"<Candidate id={self.id} phone={self.phone!r} status={self.status!r}>"


class CandidateStatusHistory(Base):
    """One status transition of a candidate, with time spent in the previous status."""
    __tablename__ = 'candidate_status_history'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    candidate_id = Column(Uuid, ForeignKey('candidates.id', ondelete='CASCADE'), nullable=False)
    old_status = Column(Text, nullable=True)
    new_status = Column(Text, nullable=False)
    changed_by_name = Column(Text, nullable=False, default='system')
    days_in_previous_status = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    changed_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    candidate = relationship("Candidate", back_populates="status_history")

    __table_args__ = (
        Index('idx_status_history_candidate', 'candidate_id', 'changed_at'),
    )
