"""
Text rendering of cache entries, buckets and table statistics.
"""

import time
from typing import List

from ..cache.engine import DNSCacheTable
from ..cache.entry import CacheEntry, RecordType
from ..cache.exceptions import BucketIndexOutOfRange
from ..cache.stats import TableStatistics

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(epoch: float) -> str:
    return time.strftime(TIMESTAMP_FORMAT, time.localtime(epoch))


def format_entry(entry: CacheEntry) -> str:
    """Render one entry, showing only the fields its record type uses"""
    record = entry.record
    lines = [
        f"Domain: {record.domain}",
        f"Type: {record.record_type.value}",
    ]

    if record.record_type is RecordType.A:
        lines.append(f"IP: {record.resolved_ipv4}")
    elif record.record_type is RecordType.AAAA:
        lines.append(f"IPv6: {record.resolved_ipv6}")
    elif record.record_type is RecordType.CNAME and entry.alias:
        lines.append(f"Alias (CNAME): {entry.alias}")
    elif record.record_type is RecordType.MX:
        lines.append(f"Priority (MX): {entry.priority}")

    meta = entry.meta
    lines.append(
        f"TTL: {meta.ttl_seconds} s | Cached: {format_timestamp(meta.cached_at)}"
        f" | Hits: {meta.hit_count} | Origin: {meta.origin_server}"
    )
    lines.append(f"Resolution time: {entry.stats.resolution_time_ms} ms")
    return "\n".join(lines)


def format_bucket(table: DNSCacheTable, index: int) -> str:
    try:
        entries = table.bucket_contents(index)
    except BucketIndexOutOfRange:
        return "Index out of range."

    lines: List[str] = [f"=== Bucket {index} ==="]
    for position, entry in enumerate(entries):
        lines.append(f"- [{position}]")
        lines.append(format_entry(entry))
    if not entries:
        lines.append("(empty)")
    return "\n".join(lines)


def format_all(table: DNSCacheTable) -> str:
    """Render every non-empty bucket"""
    sections = []
    for index, entries in table.all_entries():
        sections.append(f"\n--- Bucket {index} (len={len(entries)}) ---")
        sections.append(format_bucket(table, index))
    if not sections:
        return "(cache is empty)"
    return "\n".join(sections)


def format_statistics(stats: TableStatistics) -> str:
    return "\n".join(
        [
            f"Total entries: {stats.total_entries}",
            f"Buckets: {stats.bucket_count} | Empty: {stats.empty_buckets}"
            f" | Buckets with collisions (>=2): {stats.collision_buckets}",
            f"Load factor: {stats.load_factor:.3f}",
            f"Longest chain: {stats.max_chain_length}",
        ]
    )
