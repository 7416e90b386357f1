# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

import re
from datetime import datetime
from typing import Optional, Union


def format_datetime(
    value: Optional[Union[datetime, str]],
    format_str: str = "%d/%m/%Y %H:%M"
) -> str:
    """
    Format a datetime value for display.

    Args:
        value: Datetime or ISO string
        format_str: Output format string

    Returns:
        Formatted datetime string or empty string
    """
    if value is None:
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, datetime):
        return value.strftime(format_str)

    return str(value)


def as_text(value) -> str:
    """Normalize a raw field value to a stripped string ('' for None)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else ""
    return str(value).strip()


def parse_int(value) -> Optional[int]:
    """Parse an integer form value; returns None when not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = as_text(value)
    if not re.fullmatch(r"-?\d+", text):
        return None
    return int(text)


def sanitize_filename(filename: str) -> str:
    """
    Remove characters that are invalid in file names.

    Arabic letters and underscores are kept as-is.
    """
    return re.sub(r'[<>:"/\\|?*\x00-\x1f]', "_", filename).strip()
