#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import uuid
from decimal import Decimal
from typing import Optional, Any, List
from datetime import datetime

from fastapi import HTTPException

from core.utils import ProjectSlugger


def safe_float(value: Optional[Any], default: Optional[float] = None) -> Optional[float]:
    """
    Safely convert a column value (Decimal, int, float or None) to float.

    Args:
        value: Value to convert.
        default: Returned when the value is None or not numeric.
    """
    if value is None:
        return default

    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_list(value: Optional[Any]) -> List[Any]:
    """JSON list columns may come back as None on rows written before a default existed."""
    if value is None:
        return []
    return list(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.
    """
    if dt is None:
        return None
    return dt.isoformat()


def validate_uuid(value: str, field: str = "consultant_id") -> str:
    """Reject path parameters that are not UUIDs with a 400 instead of a 404."""
    try:
        uuid.UUID(value)
        return value
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {field} format: {value}. Must be a valid UUID."
        )


def validate_slug(slug: str) -> str:
    """Project slugs are lower-case words joined by hyphens."""
    if not ProjectSlugger.is_valid(slug):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid project slug: {slug}. Use lower-case letters, digits and hyphens."
        )
    return slug
