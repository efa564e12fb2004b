"""
DNS Cache Entry Model

Record, metadata and statistics groups that make up one cached resolution,
plus the key canonicalization and hashing shared by the cache table.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from ipaddress import IPv4Address
from typing import Optional

MAX_DOMAIN_LENGTH = 99
HASH_KEY_LIMIT = 127  # bytes of the canonical domain fed to the hash

DEFAULT_ORIGIN_SERVER = "8.8.8.8"
DEFAULT_RESOLUTION_TIME_MS = 25
DEFAULT_MX_PRIORITY = 10

_DJB2_SEED = 5381
_HASH_MASK = (1 << 64) - 1


class RecordType(str, Enum):
    """Supported resource record types"""

    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    MX = "MX"

    @classmethod
    def parse(cls, text: str) -> "RecordType":
        """Parse record type text, case-insensitively"""
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Unsupported record type: {text!r}") from None


@dataclass
class Record:
    """The resolved answer itself"""

    domain: str
    record_type: RecordType = RecordType.A
    resolved_ipv4: Optional[IPv4Address] = None
    resolved_ipv6: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.domain:
            raise ValueError("Domain must not be empty")
        if len(self.domain) > MAX_DOMAIN_LENGTH:
            raise ValueError(
                f"Domain exceeds {MAX_DOMAIN_LENGTH} characters: {self.domain[:20]}..."
            )
        if not isinstance(self.record_type, RecordType):
            self.record_type = RecordType.parse(self.record_type)


@dataclass
class CacheMetadata:
    """TTL and usage bookkeeping for a cached record"""

    ttl_seconds: int = 0
    cached_at: float = field(default_factory=time.time)
    hit_count: int = 0
    origin_server: str = DEFAULT_ORIGIN_SERVER

    def __post_init__(self) -> None:
        if self.ttl_seconds < 0:
            self.ttl_seconds = 0

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check TTL expiry; a TTL of zero never expires"""
        if self.ttl_seconds <= 0:
            return False
        if now is None:
            now = time.time()
        return now - self.cached_at > self.ttl_seconds

    def remaining_ttl(self, now: Optional[float] = None) -> Optional[int]:
        """Seconds left before expiry, or None for entries that never expire"""
        if self.ttl_seconds <= 0:
            return None
        if now is None:
            now = time.time()
        return max(0, int(self.ttl_seconds - (now - self.cached_at)))


@dataclass
class ResolutionStats:
    """Resolution timing plus the type-specific fields shown in reports"""

    resolution_time_ms: int = DEFAULT_RESOLUTION_TIME_MS
    priority: int = DEFAULT_MX_PRIORITY
    alias: str = ""

    def __post_init__(self) -> None:
        if self.resolution_time_ms <= 0:
            self.resolution_time_ms = DEFAULT_RESOLUTION_TIME_MS


@dataclass
class CacheEntry:
    """Unit of storage in the cache table, keyed by domain"""

    record: Record
    meta: CacheMetadata = field(default_factory=CacheMetadata)
    stats: ResolutionStats = field(default_factory=ResolutionStats)

    @property
    def domain(self) -> str:
        return self.record.domain

    @property
    def record_type(self) -> RecordType:
        return self.record.record_type

    @property
    def alias(self) -> str:
        return self.stats.alias

    @property
    def priority(self) -> int:
        return self.stats.priority

    @property
    def hit_count(self) -> int:
        return self.meta.hit_count

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check if cache entry has expired at ``now``"""
        return self.meta.is_expired(now)


def canonicalize_domain(domain: str) -> str:
    """Canonical form of a domain key: lowercase"""
    return domain.lower()


def djb2_hash(domain: str) -> int:
    """djb2 over the canonical domain bytes, wrapping at 64 bits"""
    h = _DJB2_SEED
    for byte in canonicalize_domain(domain).encode("utf-8")[:HASH_KEY_LIMIT]:
        h = (h * 33 + byte) & _HASH_MASK
    return h
