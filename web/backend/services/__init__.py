"""Business logic services."""

from .consultant_service import ConsultantService
from .project_service import ProjectService
from .matching_service import MatchingService
from .program_service import ProgramService
from .engagement_service import EngagementService
