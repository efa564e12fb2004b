"""Tests for the cache entry model, key canonicalization and hashing."""

from ipaddress import IPv4Address

import pytest

from dns_cache_table.cache.entry import (
    MAX_DOMAIN_LENGTH,
    CacheEntry,
    CacheMetadata,
    Record,
    RecordType,
    ResolutionStats,
    canonicalize_domain,
    djb2_hash,
)


class TestRecordType:
    """Test record type parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("A", RecordType.A),
            ("aaaa", RecordType.AAAA),
            (" cname ", RecordType.CNAME),
            ("Mx", RecordType.MX),
        ],
    )
    def test_parse(self, text, expected):
        assert RecordType.parse(text) is expected

    def test_parse_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported record type"):
            RecordType.parse("TXT")


class TestRecord:
    """Test record validation."""

    def test_valid_record(self):
        record = Record(
            domain="example.com",
            record_type=RecordType.A,
            resolved_ipv4=IPv4Address("93.184.216.34"),
        )
        assert record.resolved_ipv6 is None

    def test_record_type_text_is_parsed(self):
        record = Record(domain="example.com", record_type="aaaa")
        assert record.record_type is RecordType.AAAA

    def test_empty_domain_rejected(self):
        with pytest.raises(ValueError):
            Record(domain="")

    def test_domain_length_cap(self):
        Record(domain="a" * MAX_DOMAIN_LENGTH)
        with pytest.raises(ValueError):
            Record(domain="a" * (MAX_DOMAIN_LENGTH + 1))


class TestCacheMetadata:
    """Test TTL handling."""

    def test_negative_ttl_clamped(self):
        assert CacheMetadata(ttl_seconds=-30).ttl_seconds == 0

    def test_defaults(self):
        meta = CacheMetadata()
        assert meta.hit_count == 0
        assert meta.origin_server == "8.8.8.8"

    @pytest.mark.parametrize("elapsed", [0, 1, 50, 99.999, 100])
    def test_not_expired_up_to_ttl(self, elapsed):
        meta = CacheMetadata(ttl_seconds=100, cached_at=5000.0)
        assert meta.is_expired(now=5000.0 + elapsed) is False

    @pytest.mark.parametrize("elapsed", [100.001, 101, 10 ** 6])
    def test_expired_after_ttl(self, elapsed):
        meta = CacheMetadata(ttl_seconds=100, cached_at=5000.0)
        assert meta.is_expired(now=5000.0 + elapsed) is True

    def test_zero_ttl_never_expires(self):
        meta = CacheMetadata(ttl_seconds=0, cached_at=0.0)
        assert meta.is_expired(now=10 ** 12) is False

    def test_remaining_ttl(self):
        meta = CacheMetadata(ttl_seconds=60, cached_at=1000.0)
        assert meta.remaining_ttl(now=1010.0) == 50
        assert meta.remaining_ttl(now=2000.0) == 0
        assert CacheMetadata(ttl_seconds=0).remaining_ttl() is None


class TestResolutionStats:
    """Test resolution statistics defaults."""

    @pytest.mark.parametrize("value", [0, -10])
    def test_non_positive_resolution_time_defaults(self, value):
        assert ResolutionStats(resolution_time_ms=value).resolution_time_ms == 25

    def test_defaults(self):
        stats = ResolutionStats()
        assert stats.priority == 10
        assert stats.alias == ""


class TestCacheEntry:
    """Test the aggregate entry."""

    def test_convenience_properties(self):
        entry = CacheEntry(
            record=Record(domain="mail.example.com", record_type=RecordType.MX),
            meta=CacheMetadata(ttl_seconds=10, hit_count=4),
            stats=ResolutionStats(priority=5, alias=""),
        )
        assert entry.domain == "mail.example.com"
        assert entry.record_type is RecordType.MX
        assert entry.priority == 5
        assert entry.alias == ""
        assert entry.hit_count == 4

    def test_is_expired_delegates_to_metadata(self):
        entry = CacheEntry(
            record=Record(domain="x.com"),
            meta=CacheMetadata(ttl_seconds=1, cached_at=100.0),
        )
        assert entry.is_expired(now=101.0) is False
        assert entry.is_expired(now=102.0) is True


class TestHashing:
    """Test canonicalization and djb2."""

    def test_canonicalize(self):
        assert canonicalize_domain("WWW.Example.COM") == "www.example.com"

    def test_djb2_known_values(self):
        assert djb2_hash("") == 5381
        assert djb2_hash("a") == 177670
        assert djb2_hash("ab") == 5863208

    def test_djb2_case_insensitive(self):
        assert djb2_hash("Example.COM") == djb2_hash("example.com")

    def test_djb2_wraps_at_64_bits(self):
        # 5381 * 33**26 overflows 64 bits many times over
        assert djb2_hash("abcdefghijklmnopqrstuvwxyz") == 18111394293885285892

    def test_djb2_uses_bounded_prefix(self):
        prefix = "x" * 127
        assert djb2_hash(prefix + "tail-one") == djb2_hash(prefix + "tail-two")
