"""
DNS Cache Statistics

Table load statistics and running operation counters for the cache table.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, Sequence


@dataclass(frozen=True)
class TableStatistics:
    """Load snapshot of the bucket array"""

    total_entries: int
    bucket_count: int
    empty_buckets: int
    collision_buckets: int  # buckets holding two or more entries
    max_chain_length: int

    @property
    def load_factor(self) -> float:
        return self.total_entries / self.bucket_count

    @classmethod
    def from_chain_lengths(cls, lengths: Sequence[int]) -> "TableStatistics":
        """Aggregate per-bucket chain lengths into a snapshot"""
        return cls(
            total_entries=sum(lengths),
            bucket_count=len(lengths),
            empty_buckets=sum(1 for n in lengths if n == 0),
            collision_buckets=sum(1 for n in lengths if n >= 2),
            max_chain_length=max(lengths, default=0),
        )

    def to_dict(self) -> Dict:
        return {
            "total_entries": self.total_entries,
            "bucket_count": self.bucket_count,
            "empty_buckets": self.empty_buckets,
            "collision_buckets": self.collision_buckets,
            "load_factor": self.load_factor,
            "max_chain_length": self.max_chain_length,
        }


@dataclass
class CacheStats:
    """Operation counters"""

    # Lookup Statistics
    total_lookups: int = 0
    cache_hits: int = 0
    cache_misses: int = 0

    # Mutation Statistics
    inserts: int = 0
    updates: int = 0
    deletions: int = 0
    ttl_expirations: int = 0
    sweeps: int = 0

    # Size Statistics
    max_entries_reached: int = 0

    # Time-based Statistics
    start_time: float = field(default_factory=time.time)

    def hit_ratio(self) -> float:
        """Calculate cache hit ratio"""
        if self.total_lookups == 0:
            return 0.0
        return self.cache_hits / self.total_lookups

    def miss_ratio(self) -> float:
        """Calculate cache miss ratio"""
        if self.total_lookups == 0:
            return 0.0
        return self.cache_misses / self.total_lookups

    def uptime_seconds(self) -> float:
        return time.time() - self.start_time


class CacheStatsManager:
    """Manager for cache operation counters"""

    def __init__(self):
        self.stats = CacheStats()

    def record_hit(self) -> None:
        self.stats.total_lookups += 1
        self.stats.cache_hits += 1

    def record_miss(self) -> None:
        self.stats.total_lookups += 1
        self.stats.cache_misses += 1

    def record_insert(self, entries: int) -> None:
        self.stats.inserts += 1
        if entries > self.stats.max_entries_reached:
            self.stats.max_entries_reached = entries

    def record_update(self) -> None:
        self.stats.updates += 1

    def record_deletion(self) -> None:
        self.stats.deletions += 1

    def record_sweep(self, expired: int) -> None:
        self.stats.sweeps += 1
        self.stats.ttl_expirations += expired

    def get_stats(self) -> Dict:
        """Get operation counters as a dictionary"""
        return {
            # Lookup Statistics
            "hit_ratio": round(self.stats.hit_ratio(), 4),
            "miss_ratio": round(self.stats.miss_ratio(), 4),
            "total_lookups": self.stats.total_lookups,
            "cache_hits": self.stats.cache_hits,
            "cache_misses": self.stats.cache_misses,
            # Mutation Statistics
            "inserts": self.stats.inserts,
            "updates": self.stats.updates,
            "deletions": self.stats.deletions,
            "ttl_expirations": self.stats.ttl_expirations,
            "sweeps": self.stats.sweeps,
            "max_entries_reached": self.stats.max_entries_reached,
            # Time Statistics
            "uptime_seconds": round(self.stats.uptime_seconds(), 2),
            "start_time": self.stats.start_time,
        }
