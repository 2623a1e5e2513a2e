#!/usr/bin/env python3
"""
Program endpoints - Allocation Calculator.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db
from ..services.program_service import ProgramService
from ..models.requests import ProgramCalculateRequest, ProgramSeedRequest
from ..models.responses import ProgramTotalsResponse, ProgramSeedResponse, ProgramBriefResponse
from ..utils import validate_slug

router = APIRouter(prefix="/api/program", tags=["program"])


@router.post("/calculate", response_model=ProgramTotalsResponse)
def calculate_program(body: ProgramCalculateRequest):
    """
    Net, circulation and total area for posted selections and settings.

    Variance from the target is reported under `totals.warnings`, never as an error.
    """
    return ProgramService(get_config().allocation).calculate(body.selections, body.settings)


@router.post("/seed", response_model=ProgramSeedResponse)
def seed_program(body: ProgramSeedRequest):
    """Starting selections for a target area and/or KYC intake document."""
    return ProgramService(get_config().allocation).seed(target_area=body.target_area, kyc=body.kyc)


@router.get("/projects/{slug}/brief", response_model=ProgramBriefResponse)
def get_program_brief(
    slug: str,
    db: Session = Depends(get_db)
):
    validate_slug(slug)
    return ProgramService(get_config().allocation, db).brief(slug)
