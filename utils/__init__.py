# -*- coding: utf-8 -*-
"""
Projects Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_date, get_initials

__all__ = [
    "get_logger",
    "setup_logger",
    "format_date",
    "get_initials",
]
