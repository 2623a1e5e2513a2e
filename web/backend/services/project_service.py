#!/usr/bin/env python3
"""
Project service - stores and fetches per-project intake documents.

Each project (keyed by slug) holds one JSON document per module: the KYC
client intake ("kyc") and the FYI space program ("fyi").
"""

import logging
from typing import Any, Dict, Tuple
from sqlalchemy.orm import Session

from database.uow import MatchingRepositories
from ..models.responses import ProjectDocumentResponse
from ..utils import safe_datetime_iso
from ..exceptions import ProjectNotFoundException

logger = logging.getLogger(__name__)

KYC_MODULE = "kyc"
FYI_MODULE = "fyi"
PROJECT_MODULES: Tuple[str, ...] = (KYC_MODULE, FYI_MODULE)


class ProjectService:
    """Service for project document storage."""

    def __init__(self, db: Session):
        self.db = db
        self.repos = MatchingRepositories.for_session(db)

    def get_document(self, slug: str, module: str) -> ProjectDocumentResponse:
        """
        Raises:
            ProjectNotFoundException: If no document is stored for the slug/module.
        """
        record = self.repos.projects.get_record(slug, module)
        if record is None:
            raise ProjectNotFoundException(f"Project {slug} has no {module} document")
        return ProjectDocumentResponse(
            success=True,
            slug=slug,
            module=module,
            data=dict(record.data or {}),
            updated_at=safe_datetime_iso(record.updated_at),
        )

    def save_document(self, slug: str, module: str, data: Dict[str, Any]) -> ProjectDocumentResponse:
        record = self.repos.projects.save_document(slug, module, data)
        self.db.commit()
        self.db.refresh(record)
        return ProjectDocumentResponse(
            success=True,
            slug=slug,
            module=module,
            data=dict(record.data or {}),
            updated_at=safe_datetime_iso(record.updated_at),
        )

    def load_intake(self, slug: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """
        KYC and FYI documents for a project; either may be empty.

        Raises:
            ProjectNotFoundException: If nothing at all is stored for the slug.
        """
        documents = self.repos.projects.get_documents(slug)
        if not documents:
            raise ProjectNotFoundException(f"Project {slug} not found")
        return documents.get(KYC_MODULE, {}), documents.get(FYI_MODULE, {})
