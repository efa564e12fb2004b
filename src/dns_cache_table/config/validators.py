"""
Configuration Validators

This module provides validation functions for DNS cache configuration parameters.
"""

import ipaddress
from pathlib import Path
from typing import List, Optional


def validate_positive_int(value: int) -> bool:
    """Validate positive integer."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_optional_int(value: Optional[int]) -> bool:
    """Validate an integer or None."""
    return value is None or (isinstance(value, int) and not isinstance(value, bool))


def validate_log_level(level: str) -> bool:
    """Validate log level."""
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    return isinstance(level, str) and level.upper() in valid_levels


def validate_file_path(path: Optional[str]) -> bool:
    """Validate optional file path format."""
    if path is None:
        return True
    if not path:
        return False

    try:
        Path(path)
        return True
    except (TypeError, ValueError):
        return False


def validate_ip_address(address: str) -> bool:
    """Validate IP address format."""
    try:
        ipaddress.ip_address(address)
        return True
    except ValueError:
        return False


def validate_domain_pool(domains: List[str], max_length: int) -> bool:
    """Validate a non-empty list of non-empty domains within the length cap."""
    if not isinstance(domains, list) or not domains:
        return False

    return all(
        isinstance(domain, str) and 0 < len(domain) <= max_length
        for domain in domains
    )


def validate_server_pool(servers: List[str]) -> bool:
    """Validate a non-empty list of origin server addresses."""
    if not isinstance(servers, list) or not servers:
        return False

    return all(validate_ip_address(server) for server in servers)


def validate_ttl_choices(ttls: List[int]) -> bool:
    """Validate a non-empty list of non-negative TTLs."""
    if not isinstance(ttls, list) or not ttls:
        return False

    return all(isinstance(ttl, int) and ttl >= 0 for ttl in ttls)
