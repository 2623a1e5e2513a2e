import uuid

from sqlalchemy import Column, Text, Integer, Float, DateTime, JSON, Uuid, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Engagement(Base):
    """
    A consultant shortlisted for a project, with the scores that put them there.

    Scores are a snapshot from the time of shortlisting; re-scoring updates the row.
    """
    __tablename__ = 'engagement'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project_slug = Column(Text, nullable=False)
    consultant_id = Column(Uuid, ForeignKey('consultant.id', ondelete='CASCADE'), nullable=False)
    discipline = Column(Text, nullable=True)

    client_fit = Column(Float, nullable=False)
    project_fit = Column(Float, nullable=False)
    combined_score = Column(Integer, nullable=False)
    tier = Column(Text, nullable=False)
    breakdown = Column(JSON, default=list)

    status = Column(Text, default='shortlisted', nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    consultant = relationship("Consultant")

    __table_args__ = (
        UniqueConstraint('project_slug', 'consultant_id', name='uq_engagement_project_consultant'),
        Index('idx_engagement_project', 'project_slug'),
        Index('idx_engagement_score', 'combined_score'),
    )
