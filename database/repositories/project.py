import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import ProjectRecord
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProjectRepository(BaseRepository):
    def get_record(self, slug: str, module: str) -> Optional[ProjectRecord]:
        stmt = select(ProjectRecord).where(
            ProjectRecord.slug == slug,
            ProjectRecord.module == module
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_document(self, slug: str, module: str) -> Optional[Dict[str, Any]]:
        record = self.get_record(slug, module)
        return dict(record.data or {}) if record is not None else None

    def get_documents(self, slug: str) -> Dict[str, Dict[str, Any]]:
        stmt = select(ProjectRecord).where(ProjectRecord.slug == slug)
        return {r.module: dict(r.data or {}) for r in self.db.execute(stmt).scalars().all()}

    def project_exists(self, slug: str) -> bool:
        stmt = select(ProjectRecord.id).where(ProjectRecord.slug == slug).limit(1)
        return self.db.execute(stmt).first() is not None

    def list_slugs(self) -> List[str]:
        stmt = select(ProjectRecord.slug).distinct().order_by(ProjectRecord.slug)
        return list(self.db.execute(stmt).scalars().all())

    def save_document(self, slug: str, module: str, data: Dict[str, Any]) -> ProjectRecord:
        """Insert or replace the module document for a project."""
        record = self.get_record(slug, module)
        if record is None:
            record = ProjectRecord(slug=slug, module=module, data=data)
            self.db.add(record)
            logger.info(f"Created {module} document for project {slug}")
        else:
            record.data = data
        self.db.flush()
        return record
