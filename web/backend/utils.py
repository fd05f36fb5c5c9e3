#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import uuid
from typing import Optional, Any
from datetime import date

from fastapi import HTTPException


def parse_uuid(value: str, name: str = "id") -> uuid.UUID:
    """Parse a path parameter as a UUID, rejecting malformed ids with 400."""
    try:
        return uuid.UUID(value)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {name} format: {value}. Must be a valid UUID."
        )


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def safe_iso(value: Optional[date]) -> Optional[str]:
    """
    Safely convert a date or datetime to ISO format string.

    Args:
        value: Date or datetime object.

    Returns:
        ISO format string or None.
    """
    if value is None:
        return None
    return value.isoformat()
