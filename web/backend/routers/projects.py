#!/usr/bin/env python3
"""
Project endpoints - per-module intake document storage.
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.project_service import ProjectService, PROJECT_MODULES
from ..models.responses import ProjectDocumentResponse
from ..utils import validate_slug

router = APIRouter(prefix="/api/projects", tags=["projects"])


def validate_module(module: str) -> str:
    if module not in PROJECT_MODULES:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown module: {module}. Expected one of: {', '.join(PROJECT_MODULES)}"
        )
    return module


@router.get("/{slug}/{module}", response_model=ProjectDocumentResponse)
def get_document(
    slug: str,
    module: str,
    db: Session = Depends(get_db)
):
    """Fetch the stored KYC or FYI document for a project."""
    validate_slug(slug)
    validate_module(module)
    return ProjectService(db).get_document(slug, module)


@router.put("/{slug}/{module}", response_model=ProjectDocumentResponse)
def save_document(
    slug: str,
    module: str,
    data: Dict[str, Any] = Body(..., description="The full module document; replaces any stored copy"),
    db: Session = Depends(get_db)
):
    """Create or replace the module document for a project."""
    validate_slug(slug)
    validate_module(module)
    return ProjectService(db).save_document(slug, module, data)
