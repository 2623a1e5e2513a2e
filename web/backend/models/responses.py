#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class ConsultantSummary(BaseModel):
    """A consultant registry entry."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "consultant_id": "550e8400-e29b-41d4-a716-446655440000",
                "firm_name": "Atelier North",
                "role": "architect",
                "role_label": "Architect",
                "hq_city": "Aspen",
                "hq_state": "CO",
                "service_areas": ["CO", "UT"],
                "specialties": ["modern", "mountain"],
                "years_experience": 22,
                "avg_rating": 4.8,
                "min_budget": 5000000.0,
                "max_budget": 25000000.0,
                "verification_status": "verified",
                "active": True,
                "status": "active"
            }
        }
    )

    consultant_id: str
    firm_name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str
    role_label: str
    hq_city: Optional[str] = None
    hq_state: Optional[str] = None
    service_areas: List[str] = Field(default_factory=list)
    specialties: List[str] = Field(default_factory=list)
    portfolio: List[Dict[str, Any]] = Field(default_factory=list)
    years_experience: Optional[int] = None
    avg_rating: Optional[float] = Field(None, ge=0, le=5)
    min_budget: Optional[float] = None
    max_budget: Optional[float] = None
    verification_status: Optional[str] = None
    active: bool
    status: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ConsultantResponse(BaseModel):
    success: bool
    consultant: ConsultantSummary


class ConsultantsResponse(BaseModel):
    success: bool
    count: int
    consultants: List[ConsultantSummary]


class ProjectDocumentResponse(BaseModel):
    """A stored intake document (kyc, fyi, ...) for a project."""
    success: bool
    slug: str
    module: str
    data: Dict[str, Any]
    updated_at: Optional[str] = None


class DimensionBreakdown(BaseModel):
    dimension: str
    label: str
    raw: float = Field(ge=0)
    max: float
    normalized: float = Field(ge=0, le=100)
    client_weight: float
    project_weight: float


class MatchEntry(BaseModel):
    """One ranked consultant with composites and per-dimension breakdown."""
    rank: int
    candidate_id: str
    candidate_name: str
    discipline: Optional[str]
    discipline_label: str
    client_fit: float = Field(ge=0, le=100)
    project_fit: float = Field(ge=0, le=100)
    combined_score: int = Field(ge=0, le=100)
    tier: str
    tier_label: str
    breakdown: List[DimensionBreakdown]


class MatchSummaryCounts(BaseModel):
    considered: int
    returned: int
    below_threshold: int
    excluded: int


class MatchReportResponse(BaseModel):
    """Ranked shortlist for a project."""
    success: bool
    project: Dict[str, Any]
    matches: List[MatchEntry]
    summary: MatchSummaryCounts
    excluded: List[Dict[str, Any]] = Field(default_factory=list)


class GateStatus(BaseModel):
    field: str
    label: str
    source: str
    filled: bool
    required: bool


class PrerequisitesResponse(BaseModel):
    success: bool
    slug: str
    ready: bool
    completeness: int = Field(ge=0, le=100)
    gates: List[GateStatus]
    missing_required: List[str]


class ProgramTotalsResponse(BaseModel):
    """Net, circulation, total and breakdowns for a program."""
    success: bool
    settings: Dict[str, Any]
    totals: Dict[str, Any]
    within_variance: bool


class ProgramSeedResponse(BaseModel):
    """Seeded selections plus the intake-driven adjustments that shaped them."""
    success: bool
    settings: Dict[str, Any]
    selections: Dict[str, Dict[str, Any]]
    adjustments: List[str]
    totals: Dict[str, Any]


class ProgramBriefResponse(BaseModel):
    success: bool
    slug: str
    brief: Dict[str, Any]


class EngagementSummary(BaseModel):
    engagement_id: str
    project_slug: str
    consultant_id: str
    firm_name: Optional[str] = None
    discipline: Optional[str] = None
    client_fit: float
    project_fit: float
    combined_score: int
    tier: str
    tier_label: str
    breakdown: List[Dict[str, Any]] = Field(default_factory=list)
    status: str
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class EngagementResponse(BaseModel):
    success: bool
    engagement: EngagementSummary


class EngagementsResponse(BaseModel):
    success: bool
    slug: str
    count: int
    engagements: List[EngagementSummary]
