"""
DNS Cache Configuration Schema

Configuration sections for the cache table, the synthetic data generator and
logging.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..cache.engine import DEFAULT_TABLE_SIZE
from ..cache.entry import MAX_DOMAIN_LENGTH
from ..records.generator import (
    DEFAULT_DOMAINS,
    DEFAULT_ORIGIN_SERVERS,
    DEFAULT_TTL_CHOICES,
)
from .validators import (
    validate_domain_pool,
    validate_file_path,
    validate_log_level,
    validate_optional_int,
    validate_positive_int,
    validate_server_pool,
    validate_ttl_choices,
)


@dataclass
class CacheConfig:
    """Cache table configuration section."""

    table_size: int = DEFAULT_TABLE_SIZE

    def __post_init__(self) -> None:
        """Validate cache configuration."""
        if not validate_positive_int(self.table_size):
            raise ValueError(f"Table size must be positive: {self.table_size}")


@dataclass
class GeneratorConfig:
    """Synthetic data generator configuration section."""

    seed: Optional[int] = None
    default_count: int = 10
    domains: List[str] = field(default_factory=lambda: list(DEFAULT_DOMAINS))
    origin_servers: List[str] = field(
        default_factory=lambda: list(DEFAULT_ORIGIN_SERVERS)
    )
    ttl_choices: List[int] = field(default_factory=lambda: list(DEFAULT_TTL_CHOICES))

    def __post_init__(self) -> None:
        """Validate generator configuration."""
        if not validate_optional_int(self.seed):
            raise ValueError(f"Seed must be an integer: {self.seed}")

        if not validate_positive_int(self.default_count):
            raise ValueError(
                f"Default count must be positive: {self.default_count}"
            )

        if not validate_domain_pool(self.domains, MAX_DOMAIN_LENGTH):
            raise ValueError(f"Invalid generator domains: {self.domains}")

        if not validate_server_pool(self.origin_servers):
            raise ValueError(f"Invalid origin servers: {self.origin_servers}")

        if not validate_ttl_choices(self.ttl_choices):
            raise ValueError(f"Invalid TTL choices: {self.ttl_choices}")


@dataclass
class LoggingConfig:
    """Logging configuration section."""

    level: str = "WARNING"
    format: str = "structured"
    file: Optional[str] = None
    max_size_mb: int = 10
    backup_count: int = 3

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        if not validate_log_level(self.level):
            raise ValueError(f"Invalid log level: {self.level}")

        if self.format not in ["simple", "structured"]:
            raise ValueError(f"Invalid log format: {self.format}")

        if not validate_file_path(self.file):
            raise ValueError(f"Invalid log file path: {self.file}")

        if not validate_positive_int(self.max_size_mb):
            raise ValueError(f"Max size MB must be positive: {self.max_size_mb}")

        if not validate_positive_int(self.backup_count):
            raise ValueError(f"Backup count must be positive: {self.backup_count}")


@dataclass
class DNSCacheConfig:
    """Main DNS cache configuration."""

    cache: CacheConfig = field(default_factory=CacheConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def create_default_config() -> DNSCacheConfig:
    """Create a default configuration instance."""
    return DNSCacheConfig()
