from database.repositories.base import BaseRepository
from database.repositories.consultant import ConsultantRepository
from database.repositories.project import ProjectRepository
from database.repositories.engagement import EngagementRepository

__all__ = [
    'BaseRepository',
    'ConsultantRepository',
    'ProjectRepository',
    'EngagementRepository',
]
