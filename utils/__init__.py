# -*- coding: utf-8 -*-
"""
Damage Survey Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_datetime, as_text, parse_int, sanitize_filename

__all__ = [
    "get_logger",
    "setup_logger",
    "format_datetime",
    "as_text",
    "parse_int",
    "sanitize_filename",
]
