import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import Engagement
from database.repositories.base import BaseRepository
from database.repositories.consultant import _as_uuid

logger = logging.getLogger(__name__)


class EngagementRepository(BaseRepository):
    def get_engagement(self, project_slug: str, consultant_id: Any) -> Optional[Engagement]:
        key = _as_uuid(consultant_id)
        if key is None:
            return None
        stmt = select(Engagement).where(
            Engagement.project_slug == project_slug,
            Engagement.consultant_id == key
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_engagements_for_project(
        self,
        project_slug: str,
        status: Optional[str] = None
    ) -> List[Engagement]:
        stmt = select(Engagement).where(Engagement.project_slug == project_slug)
        if status is not None:
            stmt = stmt.where(Engagement.status == status)
        stmt = stmt.order_by(Engagement.combined_score.desc(), Engagement.client_fit.desc())
        return list(self.db.execute(stmt).scalars().all())

    def save_engagement(self, project_slug: str, consultant_id: Any, scores: Dict[str, Any]) -> Engagement:
        """Insert or refresh a shortlisted engagement with its latest scores."""
        engagement = self.get_engagement(project_slug, consultant_id)
        if engagement is None:
            engagement = Engagement(project_slug=project_slug, consultant_id=_as_uuid(consultant_id))
            self.db.add(engagement)

        engagement.discipline = scores.get('discipline')
        engagement.client_fit = scores['client_fit']
        engagement.project_fit = scores['project_fit']
        engagement.combined_score = scores['combined_score']
        engagement.tier = scores['tier']
        engagement.breakdown = scores.get('breakdown', [])
        if 'notes' in scores:
            engagement.notes = scores['notes']
        self.db.flush()
        logger.info(f"Saved engagement {project_slug}/{consultant_id} (combined={engagement.combined_score})")
        return engagement
