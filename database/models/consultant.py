import uuid
from typing import Any, Dict

from sqlalchemy import Column, Text, Integer, Float, Boolean, DateTime, JSON, Uuid, Index, func

from .base import Base


class Consultant(Base):
    """
    A firm or individual in the consultant registry.

    Column names follow the registry's intake forms (hq_state, min_budget,
    avg_rating, role); to_record() hands them to the scoring engine as-is.
    """
    __tablename__ = 'consultant'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    firm_name = Column(Text, nullable=False)
    first_name = Column(Text, nullable=True)
    last_name = Column(Text, nullable=True)
    role = Column(Text, nullable=False)

    hq_city = Column(Text, nullable=True)
    hq_state = Column(Text, nullable=True)
    service_areas = Column(JSON, default=list)

    specialties = Column(JSON, default=list)
    portfolio = Column(JSON, default=list)  # [{"name": ..., "features": [...], "budget": ...}]

    years_experience = Column(Integer, nullable=True)
    avg_rating = Column(Float, nullable=True)
    min_budget = Column(Float, nullable=True)
    max_budget = Column(Float, nullable=True)

    verification_status = Column(Text, default='pending')
    active = Column(Boolean, default=True, nullable=False)
    status = Column(Text, default='active', nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_consultant_role', 'role'),
        Index('idx_consultant_status', 'status'),
    )

    def to_record(self) -> Dict[str, Any]:
        return {
            'id': str(self.id),
            'firm_name': self.firm_name,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'role': self.role,
            'hq_city': self.hq_city,
            'hq_state': self.hq_state,
            'service_areas': list(self.service_areas or []),
            'specialties': list(self.specialties or []),
            'portfolio': list(self.portfolio or []),
            'years_experience': self.years_experience,
            'avg_rating': self.avg_rating,
            'min_budget': self.min_budget,
            'max_budget': self.max_budget,
            'verification_status': self.verification_status,
            'active': self.active,
            'status': self.status,
        }
