"""
Record Input Module

Field parsing, defaulting and synthetic data for building cache entries.
"""

from .builder import build_entry, normalize_domain, parse_ipv4, parse_leading_int
from .generator import EntryGenerator

__all__ = [
    "build_entry",
    "normalize_domain",
    "parse_ipv4",
    "parse_leading_int",
    "EntryGenerator",
]
