#!/usr/bin/env python3
"""
Error handlers for the web application.

Domain errors come from core.errors; this module maps them onto HTTP
status codes with the common {"success": false, "error", "type"} body.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.errors import (
    VettingError,
    AssessmentIncompleteError,
    AssessmentClosedError,
    InvalidResponseScoreError,
    AssessmentNotFoundError,
    CriterionNotFoundError,
    CandidateNotFoundError,
    PersistError,
    StaleResponseError,
)

logger = logging.getLogger(__name__)

# Most specific first
_STATUS_CODES = (
    (StaleResponseError, 409),
    (PersistError, 503),
    (AssessmentIncompleteError, 400),
    (AssessmentClosedError, 409),
    (InvalidResponseScoreError, 422),
    ((AssessmentNotFoundError, CriterionNotFoundError, CandidateNotFoundError), 404),
)


def status_code_for(exc: VettingError) -> int:
    for exc_types, status_code in _STATUS_CODES:
        if isinstance(exc, exc_types):
            return status_code
    return 500


async def vetting_exception_handler(
    request: Request,
    exc: VettingError
) -> JSONResponse:
    """
    Handle domain exceptions.

    Args:
        request: The FastAPI request.
        exc: The domain exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    content = {
        "success": False,
        "error": str(exc),
        "type": exc.__class__.__name__
    }
    if isinstance(exc, AssessmentIncompleteError):
        content["unanswered"] = exc.unanswered
    if isinstance(exc, PersistError) and exc.result is not None and hasattr(exc.result, "to_dict"):
        content["unsaved_summary"] = exc.result.to_dict()

    return JSONResponse(status_code=status_code, content=content)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
