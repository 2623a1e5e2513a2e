#!/usr/bin/env python3
"""
Estate Advisory API - FastAPI Application

Consultant matching and space-program calculation for luxury residential
projects, with automatic API documentation.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from core.exceptions import EngineError
from .config import get_config
from .dependencies import get_db_manager
from .exceptions import (
    ServiceException,
    service_exception_handler,
    engine_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    consultants_router,
    projects_router,
    matching_router,
    program_router,
    engagements_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_db_manager().create_tables()
    yield


# Create FastAPI app
app = FastAPI(
    title="Estate Advisory API",
    description="Consultant matching and space-program allocation for residential design projects",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(EngineError, engine_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(consultants_router)
app.include_router(projects_router)
app.include_router(matching_router)
app.include_router(program_router)
app.include_router(engagements_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "estate-advisory-api"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Estate Advisory API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
