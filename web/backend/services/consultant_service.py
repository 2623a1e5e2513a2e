#!/usr/bin/env python3
"""
Consultant service - business logic for the consultant registry.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from core.registries.labels import LabelConcern, label_for
from database.models import Consultant
from database.uow import MatchingRepositories
from ..models.responses import ConsultantSummary
from ..utils import safe_float, safe_list, safe_datetime_iso
from ..exceptions import ConsultantNotFoundException

logger = logging.getLogger(__name__)


def to_consultant_summary(consultant: Consultant) -> ConsultantSummary:
    return ConsultantSummary(
        consultant_id=str(consultant.id),
        firm_name=consultant.firm_name,
        first_name=consultant.first_name,
        last_name=consultant.last_name,
        role=consultant.role,
        role_label=label_for(LabelConcern.DISCIPLINE, consultant.role),
        hq_city=consultant.hq_city,
        hq_state=consultant.hq_state,
        service_areas=safe_list(consultant.service_areas),
        specialties=safe_list(consultant.specialties),
        portfolio=safe_list(consultant.portfolio),
        years_experience=consultant.years_experience,
        avg_rating=safe_float(consultant.avg_rating),
        min_budget=safe_float(consultant.min_budget),
        max_budget=safe_float(consultant.max_budget),
        verification_status=consultant.verification_status,
        active=bool(consultant.active),
        status=consultant.status,
        created_at=safe_datetime_iso(consultant.created_at),
        updated_at=safe_datetime_iso(consultant.updated_at),
    )


class ConsultantService:
    """Service for managing consultant registry entries."""

    def __init__(self, db: Session):
        self.db = db
        self.repos = MatchingRepositories.for_session(db)

    def _get_or_raise(self, consultant_id: str) -> Consultant:
        consultant = self.repos.consultants.get_by_id(consultant_id)
        if consultant is None:
            raise ConsultantNotFoundException(f"Consultant {consultant_id} not found")
        return consultant

    def list_consultants(
        self,
        role: Optional[str] = None,
        include_archived: bool = False,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[ConsultantSummary]:
        consultants = self.repos.consultants.list_consultants(
            role=role,
            include_archived=include_archived,
            limit=limit,
            offset=offset
        )
        return [to_consultant_summary(c) for c in consultants]

    def get_consultant(self, consultant_id: str) -> ConsultantSummary:
        """
        Raises:
            ConsultantNotFoundException: If the consultant is not in the registry.
        """
        return to_consultant_summary(self._get_or_raise(consultant_id))

    def create_consultant(self, data: Dict[str, Any]) -> ConsultantSummary:
        consultant = self.repos.consultants.create_consultant(data)
        self.db.commit()
        self.db.refresh(consultant)
        return to_consultant_summary(consultant)

    def update_consultant(self, consultant_id: str, changes: Dict[str, Any]) -> ConsultantSummary:
        consultant = self._get_or_raise(consultant_id)
        self.repos.consultants.update_consultant(consultant, changes)
        self.db.commit()
        self.db.refresh(consultant)
        logger.info(f"Updated consultant {consultant_id}: {sorted(changes)}")
        return to_consultant_summary(consultant)

    def archive_consultant(self, consultant_id: str) -> ConsultantSummary:
        """Archive rather than delete so existing engagements keep their consultant."""
        consultant = self._get_or_raise(consultant_id)
        self.repos.consultants.archive_consultant(consultant)
        self.db.commit()
        self.db.refresh(consultant)
        return to_consultant_summary(consultant)
