"""
DNS Cache Table

In-memory DNS resolution cache stored in a fixed-size chained hash table,
with TTL expiry, hit counting and load statistics.
"""

from .cache import (
    CacheEntry,
    CacheMetadata,
    DNSCacheTable,
    Record,
    RecordType,
    ResolutionStats,
    TableStatistics,
)
from .records import EntryGenerator, build_entry

__version__ = "1.0.0"

__all__ = [
    "DNSCacheTable",
    "CacheEntry",
    "CacheMetadata",
    "Record",
    "RecordType",
    "ResolutionStats",
    "TableStatistics",
    "EntryGenerator",
    "build_entry",
]
