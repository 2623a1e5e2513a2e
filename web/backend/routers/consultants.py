#!/usr/bin/env python3
"""
Consultant endpoints - registry CRUD.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.consultant_service import ConsultantService
from ..models.requests import ConsultantCreate, ConsultantUpdate
from ..models.responses import ConsultantResponse, ConsultantsResponse
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/consultants", tags=["consultants"])


@router.get("", response_model=ConsultantsResponse)
def list_consultants(
    role: str = Query(default=None, description="Discipline filter: architect, interior_designer, pm, gc"),
    include_archived: bool = Query(default=False, description="Include archived consultants"),
    limit: int = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db)
):
    """
    List registry entries ordered by firm name.
    """
    consultants = ConsultantService(db).list_consultants(
        role=role,
        include_archived=include_archived,
        limit=limit,
        offset=offset
    )
    return ConsultantsResponse(success=True, count=len(consultants), consultants=consultants)


@router.post("", response_model=ConsultantResponse, status_code=201)
def create_consultant(
    body: ConsultantCreate,
    db: Session = Depends(get_db)
):
    """Add a consultant to the registry."""
    consultant = ConsultantService(db).create_consultant(body.model_dump())
    return ConsultantResponse(success=True, consultant=consultant)


@router.get("/{consultant_id}", response_model=ConsultantResponse)
def get_consultant(
    consultant_id: str,
    db: Session = Depends(get_db)
):
    validate_uuid(consultant_id)
    return ConsultantResponse(success=True, consultant=ConsultantService(db).get_consultant(consultant_id))


@router.put("/{consultant_id}", response_model=ConsultantResponse)
def update_consultant(
    consultant_id: str,
    body: ConsultantUpdate,
    db: Session = Depends(get_db)
):
    """
    Update the fields present in the body; omitted fields are left unchanged.
    """
    validate_uuid(consultant_id)
    consultant = ConsultantService(db).update_consultant(consultant_id, body.model_dump(exclude_unset=True))
    return ConsultantResponse(success=True, consultant=consultant)


@router.delete("/{consultant_id}", response_model=ConsultantResponse)
def archive_consultant(
    consultant_id: str,
    db: Session = Depends(get_db)
):
    """
    Archive a consultant. Archived consultants are skipped by matching but
    stay attached to existing engagements.
    """
    validate_uuid(consultant_id)
    return ConsultantResponse(success=True, consultant=ConsultantService(db).archive_consultant(consultant_id))
