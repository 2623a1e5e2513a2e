#!/usr/bin/env python3
"""
Matching endpoints - score and rank consultants.
"""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db
from ..services.matching_service import MatchingService
from ..models.requests import ScoreRequest, ProjectMatchRequest
from ..models.responses import MatchReportResponse, PrerequisitesResponse
from ..utils import validate_slug

router = APIRouter(prefix="/api/matching", tags=["matching"])


@router.post("/score", response_model=MatchReportResponse)
def score_candidates(body: ScoreRequest):
    """
    Score ad-hoc candidate records against an ad-hoc project profile.

    Nothing is read from or written to the database. Malformed candidate
    records are listed under `excluded` instead of failing the request.
    """
    service = MatchingService(None, get_config())
    return service.score(
        body.candidates,
        body.profile,
        discipline=body.discipline,
        include_below_threshold=body.include_below_threshold,
        max_results=body.max_results
    )


@router.post("/projects/{slug}", response_model=MatchReportResponse)
def match_project(
    slug: str,
    body: Optional[ProjectMatchRequest] = None,
    db: Session = Depends(get_db)
):
    """
    Rank the consultant registry for a stored project.

    - discipline: restrict to one discipline (architect, interior_designer, pm, gc)
    - include_below_threshold: keep results under the minimum combined score
    - max_results: truncate the ranked list
    """
    validate_slug(slug)
    body = body or ProjectMatchRequest()
    service = MatchingService(db, get_config())
    return service.match_project(
        slug,
        discipline=body.discipline,
        include_below_threshold=body.include_below_threshold,
        max_results=body.max_results
    )


@router.get("/projects/{slug}/prerequisites", response_model=PrerequisitesResponse)
def get_prerequisites(
    slug: str,
    db: Session = Depends(get_db)
):
    """Which intake fields are filled, and whether matching can run."""
    validate_slug(slug)
    return MatchingService(db, get_config()).prerequisites(slug)
