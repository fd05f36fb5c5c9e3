#!/usr/bin/env python3
"""
Nestara Vetting API - FastAPI Application

Self-service application scoring and interview assessment endpoints with
automatic API documentation.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException

from core.errors import VettingError
from .config import get_config
from .exceptions import (
    vetting_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    applications_router,
    assessments_router,
    rubric_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Nestara Vetting API",
    description="Eligibility scoring for applicants and rubric-based interview assessments",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(VettingError, vetting_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(applications_router)
app.include_router(assessments_router)
app.include_router(rubric_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "nestara-vetting"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Nestara Vetting API on {config.web.host}:{config.web.port}")
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
