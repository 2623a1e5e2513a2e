#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional

from core.registries.consultants import Discipline


def _check_discipline(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    discipline = Discipline.parse(value)
    if discipline is None:
        allowed = ", ".join(d.value for d in Discipline)
        raise ValueError(f"Unknown discipline {value!r}; expected one of: {allowed}")
    return discipline.value


class PortfolioProject(BaseModel):
    """One completed project in a consultant's portfolio."""
    name: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    budget: Optional[float] = Field(None, ge=0)


class ConsultantCreate(BaseModel):
    """Request to add a consultant to the registry."""
    firm_name: str = Field(..., min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str = Field(..., description="Discipline: architect, interior_designer, pm, gc")
    hq_city: Optional[str] = None
    hq_state: Optional[str] = Field(None, description="Two-letter state code")
    service_areas: List[str] = Field(default_factory=list, description="State codes, or NATIONAL")
    specialties: List[str] = Field(default_factory=list)
    portfolio: List[PortfolioProject] = Field(default_factory=list)
    years_experience: Optional[int] = Field(None, ge=0)
    avg_rating: Optional[float] = Field(None, ge=0, le=5)
    min_budget: Optional[float] = Field(None, ge=0)
    max_budget: Optional[float] = Field(None, ge=0)
    verification_status: str = "pending"
    active: bool = True

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: Optional[str]) -> Optional[str]:
        return _check_discipline(value)


class ConsultantUpdate(BaseModel):
    """Partial update; only fields present in the body are changed."""
    firm_name: Optional[str] = Field(None, min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    hq_city: Optional[str] = None
    hq_state: Optional[str] = None
    service_areas: Optional[List[str]] = None
    specialties: Optional[List[str]] = None
    portfolio: Optional[List[PortfolioProject]] = None
    years_experience: Optional[int] = Field(None, ge=0)
    avg_rating: Optional[float] = Field(None, ge=0, le=5)
    min_budget: Optional[float] = Field(None, ge=0)
    max_budget: Optional[float] = Field(None, ge=0)
    verification_status: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: Optional[str]) -> Optional[str]:
        return _check_discipline(value)


class ScoreRequest(BaseModel):
    """Score ad-hoc candidate records against an ad-hoc project profile."""
    candidates: List[Any] = Field(..., description="Candidate records in registry shape")
    profile: Dict[str, Any] = Field(
        default_factory=dict,
        description="region, city, total_budget, style_tags, required_features, target_area, room_count"
    )
    discipline: Optional[str] = None
    include_below_threshold: Optional[bool] = None
    max_results: Optional[int] = Field(None, ge=0, le=500)

    @field_validator("discipline")
    @classmethod
    def validate_discipline(cls, value: Optional[str]) -> Optional[str]:
        return _check_discipline(value)


class ProjectMatchRequest(BaseModel):
    """Rank the consultant registry for a stored project."""
    discipline: Optional[str] = None
    include_below_threshold: Optional[bool] = None
    max_results: Optional[int] = Field(None, ge=0, le=500)

    @field_validator("discipline")
    @classmethod
    def validate_discipline(cls, value: Optional[str]) -> Optional[str]:
        return _check_discipline(value)


class ProgramCalculateRequest(BaseModel):
    """Selections keyed by space code plus program settings."""
    selections: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    settings: Dict[str, Any] = Field(default_factory=dict)


class ProgramSeedRequest(BaseModel):
    """Seed a program from a target area, a KYC intake document, or both."""
    target_area: Optional[float] = Field(None, gt=0)
    kyc: Optional[Dict[str, Any]] = None


class EngagementCreate(BaseModel):
    """Shortlist a consultant for a stored project."""
    project_slug: str
    consultant_id: str
    notes: Optional[str] = None
