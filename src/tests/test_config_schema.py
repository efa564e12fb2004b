"""Tests for the configuration schema module."""

import pytest

from dns_cache_table.config.schema import (
    CacheConfig,
    DNSCacheConfig,
    GeneratorConfig,
    LoggingConfig,
    create_default_config,
)
from dns_cache_table.config.validators import (
    validate_domain_pool,
    validate_file_path,
    validate_ip_address,
    validate_log_level,
    validate_optional_int,
    validate_positive_int,
    validate_server_pool,
    validate_ttl_choices,
)


class TestValidationFunctions:
    """Test validation utility functions."""

    def test_validate_positive_int(self):
        assert validate_positive_int(1) is True
        assert validate_positive_int(0) is False
        assert validate_positive_int(-1) is False
        assert validate_positive_int(True) is False
        assert validate_positive_int("5") is False

    def test_validate_optional_int(self):
        assert validate_optional_int(None) is True
        assert validate_optional_int(7) is True
        assert validate_optional_int("7") is False

    def test_validate_log_level(self):
        assert validate_log_level("debug") is True
        assert validate_log_level("WARNING") is True
        assert validate_log_level("LOUD") is False

    def test_validate_file_path(self):
        assert validate_file_path(None) is True
        assert validate_file_path("logs/cache.log") is True
        assert validate_file_path("") is False

    def test_validate_ip_address(self):
        assert validate_ip_address("8.8.8.8") is True
        assert validate_ip_address("::1") is True
        assert validate_ip_address("256.1.1.1") is False

    def test_validate_pools(self):
        assert validate_domain_pool(["a.com"], 99) is True
        assert validate_domain_pool([], 99) is False
        assert validate_domain_pool(["x" * 100], 99) is False
        assert validate_server_pool(["1.1.1.1"]) is True
        assert validate_server_pool(["dns.google"]) is False
        assert validate_ttl_choices([0, 300]) is True
        assert validate_ttl_choices([-1]) is False


class TestCacheConfig:
    """Test CacheConfig validation."""

    def test_defaults(self):
        assert CacheConfig().table_size == 50

    @pytest.mark.parametrize("size", [0, -1, "50"])
    def test_invalid_table_size(self, size):
        with pytest.raises(ValueError, match="Table size"):
            CacheConfig(table_size=size)


class TestGeneratorConfig:
    """Test GeneratorConfig validation."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.seed is None
        assert config.default_count == 10
        assert "google.com" in config.domains
        assert config.ttl_choices == [300, 600, 1800, 3600, 86400]

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            GeneratorConfig(seed="abc")
        with pytest.raises(ValueError):
            GeneratorConfig(default_count=0)
        with pytest.raises(ValueError):
            GeneratorConfig(domains=[])
        with pytest.raises(ValueError):
            GeneratorConfig(origin_servers=["not-an-ip"])
        with pytest.raises(ValueError):
            GeneratorConfig(ttl_choices=[-5])


class TestLoggingConfig:
    """Test LoggingConfig validation."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == "WARNING"
        assert config.format == "structured"
        assert config.file is None

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            LoggingConfig(level="VERBOSE")

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="Invalid log format"):
            LoggingConfig(format="xml")


def test_create_default_config():
    config = create_default_config()
    assert isinstance(config, DNSCacheConfig)
    assert config.cache.table_size == 50
    assert config.logging.level == "WARNING"
