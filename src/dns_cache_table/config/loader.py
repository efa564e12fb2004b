"""Configuration loader for the DNS cache.

This module handles loading configuration from files and environment variables,
with validation.
"""

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .schema import (
    CacheConfig,
    DNSCacheConfig,
    GeneratorConfig,
    LoggingConfig,
    create_default_config,
)

ENV_PREFIX = "DNS_CACHE_"


class ConfigLoader:
    """Configuration loader merging defaults, a config file and the environment."""

    def __init__(self, config_file: Optional[str] = None, environ=None):
        """Initialize configuration loader.

        Args:
            config_file: Path to configuration file (YAML or JSON)
            environ: Environment mapping to read overrides from (os.environ by default)
        """
        self.config_file = config_file
        self.environ = os.environ if environ is None else environ
        self._config: Optional[DNSCacheConfig] = None

    def load_config(self) -> DNSCacheConfig:
        """Load configuration from file and environment variables.

        Returns:
            Loaded and validated DNS cache configuration

        Raises:
            FileNotFoundError: If config file is specified but not found
            ValueError: If configuration is invalid
            yaml.YAMLError: If YAML parsing fails
            json.JSONDecodeError: If JSON parsing fails
        """
        config_dict = asdict(create_default_config())

        if self.config_file:
            file_config = self._load_from_file(self.config_file)
            config_dict = self._merge_configs(config_dict, file_config)

        config_dict = self._apply_env_overrides(config_dict)

        self._config = self._dict_to_config(config_dict)

        return self._config

    def get_config(self) -> Optional[DNSCacheConfig]:
        """Get current configuration."""
        return self._config

    def _load_from_file(self, file_path: str) -> Dict[str, Any]:
        """Load configuration from YAML or JSON file.

        Raises:
            FileNotFoundError: If file is not found
            ValueError: If file format is not supported
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        if path.suffix.lower() in [".yaml", ".yml"]:
            result = yaml.safe_load(content)
            return result if isinstance(result, dict) else {}
        elif path.suffix.lower() == ".json":
            json_result = json.loads(content)
            return json_result if isinstance(json_result, dict) else {}
        else:
            # Try YAML first, then JSON
            try:
                result = yaml.safe_load(content)
                return result if isinstance(result, dict) else {}
            except yaml.YAMLError:
                try:
                    json_result = json.loads(content)
                    return json_result if isinstance(json_result, dict) else {}
                except json.JSONDecodeError:
                    raise ValueError(f"Unsupported file format: {file_path}")

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> DNSCacheConfig:
        """Convert dictionary to configuration object.

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            return DNSCacheConfig(
                cache=CacheConfig(**config_dict.get("cache", {})),
                generator=GeneratorConfig(**config_dict.get("generator", {})),
                logging=LoggingConfig(**config_dict.get("logging", {})),
            )
        except TypeError as e:
            raise ValueError(f"Unknown configuration key: {e}") from e

    def _merge_configs(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Merge two configuration dictionaries, recursing into sections."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration.

        Environment variables use the format DNS_CACHE_<SECTION>_<KEY>
        For example: DNS_CACHE_CACHE_TABLE_SIZE=101
        """
        for env_key, env_value in self.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            key_parts = env_key[len(ENV_PREFIX) :].lower().split("_")
            if len(key_parts) < 2:
                continue

            section = key_parts[0]
            config_key = "_".join(key_parts[1:])

            if not isinstance(config_dict.get(section), dict):
                continue

            current = config_dict[section].get(config_key)
            if isinstance(current, list):
                config_dict[section][config_key] = [
                    self._convert_env_value(item.strip())
                    for item in env_value.split(",")
                    if item.strip()
                ]
            else:
                config_dict[section][config_key] = self._convert_env_value(env_value)

        return config_dict

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable value to appropriate Python type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        elif value.lower() in ("false", "no", "off"):
            return False
        elif value.lower() in ("none", "null"):
            return None

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value


def load_config_from_file(config_file: Optional[str] = None) -> DNSCacheConfig:
    """Convenience function to load configuration."""
    return ConfigLoader(config_file).load_config()
