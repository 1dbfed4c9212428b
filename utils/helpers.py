# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date
from typing import Optional, Union


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%d/%m/%Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string (YYYY-MM-DD)
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None or value == "":
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def get_initials(name: Optional[str]) -> str:
    """
    Initials for an avatar fallback.

    "Sarah Chen" -> "SC", "Harrold" -> "H", "Jason van D" -> "JD"
    """
    if not name:
        return ""
    parts = name.strip().split()
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0][0].upper()
    return f"{parts[0][0]}{parts[-1][0]}".upper()
