#!/usr/bin/env python3
"""
Matching service - runs the Scoring Engine for ad-hoc requests and stored projects.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from core.reports import build_match_report
from core.scorer import ScoringService, ProjectProfile, build_project_profile, check_match_prerequisites
from core.utils import get_section, intake_principal
from database.uow import MatchingRepositories
from ..models.responses import MatchReportResponse, PrerequisitesResponse
from .project_service import ProjectService

logger = logging.getLogger(__name__)


def project_name_from_kyc(kyc: Dict[str, Any], default: Optional[str] = None) -> Optional[str]:
    params = get_section(intake_principal(kyc), "projectParameters")
    return params.get("projectName") or default


class MatchingService:
    """Service for scoring consultants against projects."""

    def __init__(self, db: Optional[Session], config: AppConfig):
        self.db = db
        self.config = config
        self.scoring = ScoringService(
            config=config.matching.scoring,
            policy=config.matching.result_policy,
            skip_inactive=config.matching.skip_inactive,
        )

    def _report(self, profile: ProjectProfile, ranking, project_name: Optional[str]) -> MatchReportResponse:
        report = build_match_report(profile, ranking, self.config.matching.scoring, project_name=project_name)
        return MatchReportResponse(success=True, excluded=ranking.excluded, **report)

    def score(
        self,
        candidates: List[Any],
        profile: Dict[str, Any],
        discipline: Optional[str] = None,
        include_below_threshold: Optional[bool] = None,
        max_results: Optional[int] = None
    ) -> MatchReportResponse:
        """
        Score posted candidate records against a posted profile.

        Malformed records are reported under ``excluded`` instead of failing the request.
        """
        project = ProjectProfile.from_mapping(profile)
        ranking = self.scoring.rank_candidates(
            candidates,
            project,
            discipline=discipline,
            include_below_threshold=include_below_threshold,
            max_results=max_results,
        )
        return self._report(project, ranking, project_name=None)

    def match_project(
        self,
        slug: str,
        discipline: Optional[str] = None,
        include_below_threshold: Optional[bool] = None,
        max_results: Optional[int] = None
    ) -> MatchReportResponse:
        """
        Rank the consultant registry for a stored project.

        Raises:
            ProjectNotFoundException: If the project has no stored documents.
        """
        kyc, fyi = ProjectService(self.db).load_intake(slug)
        profile = build_project_profile(kyc, fyi)

        repos = MatchingRepositories.for_session(self.db)
        records = repos.consultants.get_candidate_records(role=discipline)
        logger.info(f"Matching project {slug}: {len(records)} registry records (discipline={discipline or 'all'})")

        ranking = self.scoring.rank_candidates(
            records,
            profile,
            discipline=discipline,
            include_below_threshold=include_below_threshold,
            max_results=max_results,
        )
        return self._report(profile, ranking, project_name=project_name_from_kyc(kyc, slug))

    def prerequisites(self, slug: str) -> PrerequisitesResponse:
        kyc, fyi = ProjectService(self.db).load_intake(slug)
        report = check_match_prerequisites(kyc, fyi).to_dict()
        return PrerequisitesResponse(success=True, slug=slug, **report)
