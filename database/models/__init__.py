from .base import Base
from .consultant import Consultant
from .project import ProjectRecord
from .engagement import Engagement

__all__ = [
    'Base',
    'Consultant',
    'ProjectRecord',
    'Engagement',
]
