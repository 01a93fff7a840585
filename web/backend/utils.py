#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional
from datetime import datetime

from core.utils import ensure_utc


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string (UTC).

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return ensure_utc(dt).isoformat()
