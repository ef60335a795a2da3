"""
Utility functions shared across the resume builder application.

Functions:
    - format_timestamp: Render a datetime as an RFC 3339 string in UTC.
"""

from .timestamps import format_timestamp

__all__ = ["format_timestamp"]
