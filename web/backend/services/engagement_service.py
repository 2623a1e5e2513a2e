#!/usr/bin/env python3
"""
Engagement service - shortlists consultants for projects with a score snapshot.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from core.registries.labels import LabelConcern, label_for
from core.reports import match_result_to_dict
from core.scorer import ScoringService, build_project_profile
from database.models import Engagement
from database.uow import MatchingRepositories
from ..models.responses import EngagementSummary
from ..utils import safe_datetime_iso, safe_list
from ..exceptions import ConsultantNotFoundException
from .project_service import ProjectService

logger = logging.getLogger(__name__)


def to_engagement_summary(engagement: Engagement) -> EngagementSummary:
    consultant = engagement.consultant
    return EngagementSummary(
        engagement_id=str(engagement.id),
        project_slug=engagement.project_slug,
        consultant_id=str(engagement.consultant_id),
        firm_name=consultant.firm_name if consultant is not None else None,
        discipline=engagement.discipline,
        client_fit=engagement.client_fit,
        project_fit=engagement.project_fit,
        combined_score=engagement.combined_score,
        tier=engagement.tier,
        tier_label=label_for(LabelConcern.MATCH_TIER, engagement.tier),
        breakdown=safe_list(engagement.breakdown),
        status=engagement.status,
        notes=engagement.notes,
        created_at=safe_datetime_iso(engagement.created_at),
        updated_at=safe_datetime_iso(engagement.updated_at),
    )


class EngagementService:
    """Service for project shortlists."""

    def __init__(self, db: Session, config: AppConfig):
        self.db = db
        self.repos = MatchingRepositories.for_session(db)
        self.scoring = ScoringService(config=config.matching.scoring, policy=config.matching.result_policy)
        self.config = config

    def shortlist(self, project_slug: str, consultant_id: str, notes: Optional[str] = None) -> EngagementSummary:
        """
        Score a consultant against a stored project and save the result.

        Shortlisting the same consultant again refreshes the scores.

        Raises:
            ProjectNotFoundException: If the project has no stored documents.
            ConsultantNotFoundException: If the consultant is not in the registry.
        """
        kyc, fyi = ProjectService(self.db).load_intake(project_slug)
        consultant = self.repos.consultants.get_by_id(consultant_id)
        if consultant is None:
            raise ConsultantNotFoundException(f"Consultant {consultant_id} not found")

        profile = build_project_profile(kyc, fyi)
        result = self.scoring.score_candidate(consultant.to_record(), profile)
        scores = match_result_to_dict(result, self.config.matching.scoring)
        if notes is not None:
            scores["notes"] = notes

        engagement = self.repos.engagements.save_engagement(project_slug, consultant.id, scores)
        self.db.commit()
        self.db.refresh(engagement)
        return to_engagement_summary(engagement)

    def list_engagements(self, project_slug: str, status: Optional[str] = None) -> List[EngagementSummary]:
        engagements = self.repos.engagements.get_engagements_for_project(project_slug, status=status)
        return [to_engagement_summary(e) for e in engagements]
