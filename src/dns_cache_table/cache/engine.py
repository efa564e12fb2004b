"""
DNS Cache Table Engine

Fixed-size hash table with separate chaining, keyed by canonical domain.
Entries never expire on their own; expired entries stay until a sweep or an
explicit delete removes them.
"""

import copy
import time
from typing import Callable, Dict, List, Optional, Tuple

import structlog

from .entry import CacheEntry, canonicalize_domain, djb2_hash
from .exceptions import AllocationFailure, BucketIndexOutOfRange
from .stats import CacheStatsManager, TableStatistics

DEFAULT_TABLE_SIZE = 50


class DNSCacheTable:
    """Separately chained DNS cache table"""

    def __init__(
        self,
        table_size: int = DEFAULT_TABLE_SIZE,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize an empty cache table

        Args:
            table_size: Number of buckets, fixed for the table's lifetime
            clock: Source of the current epoch time used for expiry checks
        """
        if not isinstance(table_size, int) or table_size <= 0:
            raise ValueError(f"Table size must be a positive integer: {table_size}")

        self._table_size = table_size
        self._buckets: List[List[CacheEntry]] = [[] for _ in range(table_size)]
        self._clock = clock
        self._count = 0

        self.stats = CacheStatsManager()
        self.logger = structlog.get_logger(__name__)

    @property
    def table_size(self) -> int:
        return self._table_size

    def __len__(self) -> int:
        return self._count

    def __contains__(self, domain: str) -> bool:
        return self._find(domain)[1] is not None

    def bucket_index(self, domain: str) -> int:
        """Bucket a domain hashes to"""
        return djb2_hash(domain) % self._table_size

    def _find(self, domain: str) -> Tuple[List[CacheEntry], Optional[int]]:
        """Locate a domain: (its chain, position in chain or None)"""
        key = canonicalize_domain(domain)
        chain = self._buckets[self.bucket_index(key)]
        for position, entry in enumerate(chain):
            if canonicalize_domain(entry.domain) == key:
                return chain, position
        return chain, None

    def upsert(self, entry: CacheEntry) -> None:
        """Insert an entry, or replace the entry cached for the same domain.

        A replaced entry keeps its place in the chain; a new one goes to the
        head. The whole entry is replaced, hit count and cached_at included.

        Raises:
            AllocationFailure: If the entry could not be stored
        """
        chain, position = self._find(entry.domain)
        try:
            stored = copy.deepcopy(entry)
            if position is not None:
                chain[position] = stored
            else:
                chain.insert(0, stored)
        except MemoryError as e:
            self.logger.error("Cache allocation failed", domain=entry.domain)
            raise AllocationFailure(entry.domain) from e

        if position is not None:
            self.stats.record_update()
            self.logger.debug(
                "Cache entry updated", domain=entry.domain, position=position
            )
        else:
            self._count += 1
            self.stats.record_insert(self._count)
            self.logger.debug(
                "Cache entry inserted",
                domain=entry.domain,
                bucket=self.bucket_index(entry.domain),
            )

    def lookup(self, domain: str) -> Optional[CacheEntry]:
        """Get a copy of the entry cached for ``domain``, or None"""
        chain, position = self._find(domain)
        if position is None:
            return None
        return copy.deepcopy(chain[position])

    def record_hit(self, domain: str) -> Optional[CacheEntry]:
        """Count a hit on ``domain`` and return a copy of the updated entry.

        Returns None (and counts a miss) when the domain is not cached.
        Expired entries still count hits; use is_expired to check them.
        """
        chain, position = self._find(domain)
        if position is None:
            self.stats.record_miss()
            return None

        entry = chain[position]
        entry.meta.hit_count += 1
        self.stats.record_hit()
        return copy.deepcopy(entry)

    def is_expired(self, domain: str) -> Optional[bool]:
        """Check expiry of a cached domain now; None if not cached"""
        chain, position = self._find(domain)
        if position is None:
            return None
        return chain[position].is_expired(self._clock())

    def delete(self, domain: str) -> bool:
        """Remove the entry for ``domain``; False if it was not cached"""
        chain, position = self._find(domain)
        if position is None:
            return False

        del chain[position]
        self._count -= 1
        self.stats.record_deletion()
        self.logger.debug("Cache entry deleted", domain=domain)
        return True

    def sweep_expired(self) -> int:
        """Remove every entry expired at the time of the sweep"""
        now = self._clock()
        removed = 0

        for index, chain in enumerate(self._buckets):
            kept = [entry for entry in chain if not entry.is_expired(now)]
            if len(kept) != len(chain):
                removed += len(chain) - len(kept)
                self._buckets[index] = kept

        self._count -= removed
        self.stats.record_sweep(removed)
        if removed:
            self.logger.info("Swept expired cache entries", removed=removed)
        return removed

    def bucket_contents(self, index: int) -> List[CacheEntry]:
        """Copies of the entries in one bucket, head of chain first

        Raises:
            BucketIndexOutOfRange: If index is outside [0, table_size)
        """
        if not 0 <= index < self._table_size:
            raise BucketIndexOutOfRange(index, self._table_size)
        return copy.deepcopy(self._buckets[index])

    def all_entries(self) -> List[Tuple[int, List[CacheEntry]]]:
        """Copies of every non-empty bucket as (index, entries) pairs"""
        return [
            (index, copy.deepcopy(chain))
            for index, chain in enumerate(self._buckets)
            if chain
        ]

    def statistics(self) -> TableStatistics:
        """Compute load statistics over all buckets"""
        return TableStatistics.from_chain_lengths(
            [len(chain) for chain in self._buckets]
        )

    def clear(self) -> int:
        """Drop every entry; returns how many were dropped"""
        count = self._count
        self._buckets = [[] for _ in range(self._table_size)]
        self._count = 0
        self.logger.info("Cache table cleared", entries=count)
        return count

    def get_cache_info(self) -> Dict:
        """Get table statistics together with operation counters"""
        info = self.statistics().to_dict()
        info.update(self.stats.get_stats())
        info["current_entries"] = self._count
        return info
