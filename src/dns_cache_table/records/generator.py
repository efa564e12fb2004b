"""
Synthetic cache entries for exercising the table.

Uses its own seeded random source; the cache table never touches randomness.
"""

import random
import time
from ipaddress import IPv4Address
from typing import Callable, Iterator, Optional, Sequence

from ..cache.engine import DNSCacheTable
from ..cache.entry import CacheEntry, CacheMetadata, Record, RecordType, ResolutionStats

DEFAULT_DOMAINS = (
    "google.com",
    "facebook.com",
    "youtube.com",
    "amazon.com",
    "wikipedia.org",
    "api.servicio.io",
    "cdn.example.com",
    "mail.empresa.com",
    "vpn.empresa.com",
    "blog.example.com",
)
DEFAULT_ORIGIN_SERVERS = ("8.8.8.8", "1.1.1.1", "9.9.9.9")
DEFAULT_TTL_CHOICES = (300, 600, 1800, 3600, 86400)


class EntryGenerator:
    """Random A-record entries drawn from fixed domain and server pools"""

    def __init__(
        self,
        seed: Optional[int] = None,
        domains: Sequence[str] = DEFAULT_DOMAINS,
        origin_servers: Sequence[str] = DEFAULT_ORIGIN_SERVERS,
        ttl_choices: Sequence[int] = DEFAULT_TTL_CHOICES,
        clock: Callable[[], float] = time.time,
    ):
        if not domains or not origin_servers or not ttl_choices:
            raise ValueError("Generator pools must not be empty")

        self.seed = seed
        self.domains = tuple(domains)
        self.origin_servers = tuple(origin_servers)
        self.ttl_choices = tuple(ttl_choices)
        self._clock = clock
        self._random = random.Random(seed)

    def _random_ipv4(self) -> IPv4Address:
        rnd = self._random.randint
        return IPv4Address(
            f"{rnd(1, 223)}.{rnd(0, 255)}.{rnd(0, 255)}.{rnd(0, 255)}"
        )

    def make_entry(self) -> CacheEntry:
        """One random entry, cached somewhere in the first half of its TTL"""
        rnd = self._random
        ttl = rnd.choice(self.ttl_choices)
        return CacheEntry(
            record=Record(
                domain=rnd.choice(self.domains),
                record_type=RecordType.A,
                resolved_ipv4=self._random_ipv4(),
            ),
            meta=CacheMetadata(
                ttl_seconds=ttl,
                cached_at=self._clock() - rnd.randint(0, ttl // 2),
                hit_count=rnd.randint(0, 50),
                origin_server=rnd.choice(self.origin_servers),
            ),
            stats=ResolutionStats(resolution_time_ms=rnd.randint(8, 120)),
        )

    def generate(self, count: int) -> Iterator[CacheEntry]:
        for _ in range(count):
            yield self.make_entry()

    def populate(self, table: DNSCacheTable, count: int) -> int:
        """Upsert ``count`` random entries into ``table``"""
        for entry in self.generate(count):
            table.upsert(entry)
        return count
