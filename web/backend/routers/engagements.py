#!/usr/bin/env python3
"""
Engagement endpoints - project shortlists.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db
from ..services.engagement_service import EngagementService
from ..models.requests import EngagementCreate
from ..models.responses import EngagementResponse, EngagementsResponse
from ..utils import validate_slug, validate_uuid

router = APIRouter(prefix="/api/engagements", tags=["engagements"])


@router.post("", response_model=EngagementResponse, status_code=201)
def create_engagement(
    body: EngagementCreate,
    db: Session = Depends(get_db)
):
    """
    Shortlist a consultant for a project, snapshotting the current scores.
    """
    validate_slug(body.project_slug)
    validate_uuid(body.consultant_id)
    engagement = EngagementService(db, get_config()).shortlist(
        body.project_slug,
        body.consultant_id,
        notes=body.notes
    )
    return EngagementResponse(success=True, engagement=engagement)


@router.get("/{slug}", response_model=EngagementsResponse)
def list_engagements(
    slug: str,
    status: str = Query(default=None, description="Engagement status filter, e.g. shortlisted"),
    db: Session = Depends(get_db)
):
    """Shortlisted consultants for a project, best combined score first."""
    validate_slug(slug)
    engagements = EngagementService(db, get_config()).list_engagements(slug, status=status)
    return EngagementsResponse(success=True, slug=slug, count=len(engagements), engagements=engagements)
