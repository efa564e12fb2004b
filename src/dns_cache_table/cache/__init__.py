"""
DNS Cache Module

Chained hash table of DNS cache entries with TTL expiry, hit counting and
load statistics.
"""

from .engine import DEFAULT_TABLE_SIZE, DNSCacheTable
from .entry import (
    MAX_DOMAIN_LENGTH,
    CacheEntry,
    CacheMetadata,
    Record,
    RecordType,
    ResolutionStats,
    canonicalize_domain,
    djb2_hash,
)
from .exceptions import AllocationFailure, BucketIndexOutOfRange, CacheError
from .stats import CacheStats, CacheStatsManager, TableStatistics

__all__ = [
    # Cache Table
    "DNSCacheTable",
    "DEFAULT_TABLE_SIZE",
    # Entry Model
    "CacheEntry",
    "CacheMetadata",
    "Record",
    "RecordType",
    "ResolutionStats",
    "MAX_DOMAIN_LENGTH",
    "canonicalize_domain",
    "djb2_hash",
    # Errors
    "CacheError",
    "AllocationFailure",
    "BucketIndexOutOfRange",
    # Statistics
    "TableStatistics",
    "CacheStats",
    "CacheStatsManager",
]
