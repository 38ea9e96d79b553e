"""
Core Utilities Package

This package contains utility functions and helpers used throughout the library.

Modules:
    - time: Date formatting for query parameters
"""

from core.utils.time import format_api_date, parse_api_date

__all__ = ["format_api_date", "parse_api_date"]
