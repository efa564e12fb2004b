"""
Cache Entry Builder

Turns raw field text into a CacheEntry, applying the defaults used when a
field is missing or malformed. This is the only place canonicalization and
defaulting happen; the cache table stores whatever it is given.
"""

import re
import time
from ipaddress import IPv4Address
from typing import Optional, Union

from ..cache.entry import (
    DEFAULT_MX_PRIORITY,
    DEFAULT_ORIGIN_SERVER,
    DEFAULT_RESOLUTION_TIME_MS,
    MAX_DOMAIN_LENGTH,
    CacheEntry,
    CacheMetadata,
    Record,
    RecordType,
    ResolutionStats,
    canonicalize_domain,
)

DEFAULT_DOMAIN = "example.com"
DEFAULT_IPV4 = IPv4Address("93.184.216.34")
DEFAULT_IPV6 = "2001:db8::1"
DEFAULT_CNAME_TARGET = "target.example.com"

_IPV4_PATTERN = re.compile(r"\s*([+-]?\d+)\.([+-]?\d+)\.([+-]?\d+)\.([+-]?\d+)")


def parse_ipv4(text: str) -> Optional[IPv4Address]:
    """Parse dotted-quad text; trailing characters after the fourth octet are ignored."""
    match = _IPV4_PATTERN.match(text or "")
    if not match:
        return None

    octets = [int(group) for group in match.groups()]
    if any(octet < 0 or octet > 255 for octet in octets):
        return None
    return IPv4Address(".".join(str(octet) for octet in octets))


def normalize_domain(text: str) -> str:
    """Strip, default, truncate to MAX_DOMAIN_LENGTH and lowercase"""
    domain = (text or "").strip()
    if not domain:
        domain = DEFAULT_DOMAIN
    return canonicalize_domain(domain[:MAX_DOMAIN_LENGTH])


def parse_leading_int(text: Optional[str]) -> Optional[int]:
    """Read the signed integer at the start of text; None if there is none"""
    match = re.match(r"\s*([+-]?\d+)", text or "")
    return int(match.group(1)) if match else None


def _to_int(value: Union[int, str, None]) -> int:
    """Leading-integer conversion; anything unparseable is 0"""
    if isinstance(value, int):
        return value
    parsed = parse_leading_int(value)
    return parsed if parsed is not None else 0


def build_entry(
    domain: str = "",
    record_type: Union[RecordType, str] = "",
    address: str = "",
    ttl_seconds: Union[int, str] = 0,
    origin_server: str = "",
    resolution_time_ms: Union[int, str] = 0,
    alias: str = "",
    priority: Union[int, str] = 0,
    now: Optional[float] = None,
) -> CacheEntry:
    """Build a fresh cache entry from user-supplied fields.

    Args:
        domain: Domain name; empty means ``example.com``
        record_type: A, AAAA, CNAME or MX; empty means A
        address: IPv4 text for A records, IPv6 text for AAAA records
        ttl_seconds: TTL; negative values become 0 (never expires)
        origin_server: Server that answered; empty means 8.8.8.8
        resolution_time_ms: Resolution time; non-positive means 25
        alias: CNAME target, ignored for other types
        priority: MX priority; non-positive means 10
        now: Timestamp to cache the entry at; defaults to the current time

    Returns:
        A CacheEntry with hit count 0

    Raises:
        ValueError: If the record type is not supported
    """
    if isinstance(record_type, RecordType):
        rtype = record_type
    else:
        rtype = RecordType.parse(record_type or RecordType.A.value)

    record = Record(domain=normalize_domain(domain), record_type=rtype)
    stats = ResolutionStats(resolution_time_ms=_to_int(resolution_time_ms))

    if rtype is RecordType.A:
        record.resolved_ipv4 = parse_ipv4(address) or DEFAULT_IPV4
    elif rtype is RecordType.AAAA:
        record.resolved_ipv6 = (address or "").strip() or DEFAULT_IPV6
    elif rtype is RecordType.CNAME:
        stats.alias = (alias or "").strip() or DEFAULT_CNAME_TARGET
    elif rtype is RecordType.MX:
        mx_priority = _to_int(priority)
        stats.priority = mx_priority if mx_priority > 0 else DEFAULT_MX_PRIORITY

    meta = CacheMetadata(
        ttl_seconds=_to_int(ttl_seconds),
        cached_at=time.time() if now is None else now,
        hit_count=0,
        origin_server=(origin_server or "").strip() or DEFAULT_ORIGIN_SERVER,
    )

    return CacheEntry(record=record, meta=meta, stats=stats)
