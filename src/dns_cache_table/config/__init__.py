"""
Configuration Module

Dataclass configuration schema and a YAML/JSON loader with environment
overrides.
"""

from .loader import ConfigLoader, load_config_from_file
from .schema import (
    CacheConfig,
    DNSCacheConfig,
    GeneratorConfig,
    LoggingConfig,
    create_default_config,
)

__all__ = [
    "ConfigLoader",
    "load_config_from_file",
    "CacheConfig",
    "DNSCacheConfig",
    "GeneratorConfig",
    "LoggingConfig",
    "create_default_config",
]
