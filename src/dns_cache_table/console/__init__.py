"""
Console Module

Interactive menu and text reports for the DNS cache table.
"""

from .menu import CacheMenu
from .report import format_all, format_bucket, format_entry, format_statistics

__all__ = [
    "CacheMenu",
    "format_entry",
    "format_bucket",
    "format_all",
    "format_statistics",
]
