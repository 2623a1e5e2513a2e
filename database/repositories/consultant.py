import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import Consultant
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = (
    'firm_name', 'first_name', 'last_name', 'role', 'hq_city', 'hq_state',
    'service_areas', 'specialties', 'portfolio', 'years_experience', 'avg_rating',
    'min_budget', 'max_budget', 'verification_status', 'active', 'status',
)


def _as_uuid(value: Any) -> Optional[uuid.UUID]:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


class ConsultantRepository(BaseRepository):
    def get_by_id(self, consultant_id: Any) -> Optional[Consultant]:
        key = _as_uuid(consultant_id)
        if key is None:
            return None
        stmt = select(Consultant).where(Consultant.id == key)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_consultants(
        self,
        role: Optional[str] = None,
        include_archived: bool = False,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Consultant]:
        stmt = select(Consultant)
        if role:
            stmt = stmt.where(Consultant.role == role)
        if not include_archived:
            stmt = stmt.where(Consultant.status != 'archived')
        stmt = stmt.order_by(Consultant.firm_name, Consultant.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def get_candidate_records(self, role: Optional[str] = None) -> List[Dict[str, Any]]:
        """Registry rows as plain records for the scoring engine."""
        return [c.to_record() for c in self.list_consultants(role=role, include_archived=True)]

    def create_consultant(self, data: Dict[str, Any]) -> Consultant:
        consultant = Consultant(**{k: v for k, v in data.items() if k in EDITABLE_FIELDS})
        self.db.add(consultant)
        self.db.flush()
        logger.info(f"Created consultant {consultant.id} ({consultant.firm_name})")
        return consultant

    def update_consultant(self, consultant: Consultant, changes: Dict[str, Any]) -> Consultant:
        for key, value in changes.items():
            if key in EDITABLE_FIELDS:
                setattr(consultant, key, value)
        self.db.flush()
        return consultant

    def archive_consultant(self, consultant: Consultant) -> Consultant:
        """Soft delete: archived consultants are skipped by matching but kept for engagements."""
        consultant.status = 'archived'
        consultant.active = False
        self.db.flush()
        logger.info(f"Archived consultant {consultant.id}")
        return consultant
