"""API route handlers."""

from .consultants import router as consultants_router
from .projects import router as projects_router
from .matching import router as matching_router
from .program import router as program_router
from .engagements import router as engagements_router
