"""
Configuration System for bem-classes.

This module loads resolver, naming and logging settings from a single JSON
or YAML file, with environment variable overrides, and exposes them as
dataclass sections.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass

import yaml

from .constants import (
    CONFIG_ENV_VAR,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MISSING_PLACEHOLDER,
    DEFAULT_STRICT,
    ELEMENT_SEPARATOR,
    FALSE_VALUES,
    MODIFIER_SEPARATOR,
    STRICT_ENV_VAR,
    TRUE_VALUES,
)
from .exceptions import ConfigurationError
from .logging import get_logger, setup_logging

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class ResolverConfig:
    """Resolution behavior."""

    strict: bool = DEFAULT_STRICT
    # Only used when strict is False.
    missing_placeholder: str = DEFAULT_MISSING_PLACEHOLDER


@dataclass
class NamingConfig:
    """Separators used to compose lookup keys."""

    element_separator: str = ELEMENT_SEPARATOR
    modifier_separator: str = MODIFIER_SEPARATOR

    def __post_init__(self):
        if not self.element_separator or not self.modifier_separator:
            raise ConfigurationError("Naming separators must be non-empty")
        if self.element_separator == self.modifier_separator:
            raise ConfigurationError(
                f"Element and modifier separators must differ, both are "
                f"'{self.element_separator}'"
            )
        if self.modifier_separator.startswith(self.element_separator):
            raise ConfigurationError(
                f"Modifier separator '{self.modifier_separator}' must not start with "
                f"element separator '{self.element_separator}'"
            )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = DEFAULT_LOG_LEVEL
    enable_file_logging: bool = False
    log_file: str = DEFAULT_LOG_FILE


class BemClassesConfig:
    """
    Configuration manager for bem-classes.

    Reads one configuration file (JSON, or YAML when the suffix is
    ``.yaml``/``.yml``) and builds the resolver, naming and logging
    sections from it. A missing file yields defaults.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses
                ``$BEM_CLASSES_CONFIG`` or the default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.resolver = self._create_resolver_config()
        self.naming = self._create_naming_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv(CONFIG_ENV_VAR)
        if env_file:
            return Path(env_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent.parent
        yaml_config = config_dir / "bem_classes_config.yaml"
        json_config = config_dir / "bem_classes_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _is_yaml(self) -> bool:
        return self.config_file.suffix.lower() in YAML_SUFFIXES

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self._is_yaml():
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to parse configuration: {e}", str(self.config_file)
            ) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", str(self.config_file)
            )

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _section(self, name: str) -> Dict[str, Any]:
        data = self._config_data.get(name) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration section '{name}' must be a mapping", str(self.config_file)
            )
        return data

    def _parse_flag(self, value: Any, name: str) -> bool:
        """Read a boolean setting written as a bool or as a yes/no string."""
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
        raise ConfigurationError(
            f"Setting '{name}' must be a boolean, got {value!r}", str(self.config_file)
        )

    def _create_resolver_config(self) -> ResolverConfig:
        """Create resolver configuration from loaded data."""
        resolver_data = self._section("resolver")
        strict = self._parse_flag(resolver_data.get("strict", DEFAULT_STRICT), "resolver.strict")

        # Check environment variable override
        env_strict = os.getenv(STRICT_ENV_VAR, "").lower()
        if env_strict in TRUE_VALUES:
            strict = True
        elif env_strict in FALSE_VALUES:
            strict = False

        return ResolverConfig(
            strict=strict,
            missing_placeholder=str(
                resolver_data.get("missing_placeholder", DEFAULT_MISSING_PLACEHOLDER)
            ),
        )

    def _create_naming_config(self) -> NamingConfig:
        """Create naming configuration from loaded data."""
        naming_data = self._section("naming")

        try:
            return NamingConfig(
                element_separator=naming_data.get("element_separator", ELEMENT_SEPARATOR),
                modifier_separator=naming_data.get("modifier_separator", MODIFIER_SEPARATOR),
            )
        except ConfigurationError as e:
            raise ConfigurationError(e.message, str(self.config_file)) from e

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._section("logging")

        return LoggingConfig(
            level=log_data.get("level", DEFAULT_LOG_LEVEL),
            enable_file_logging=self._parse_flag(
                log_data.get("enable_file_logging", False), "logging.enable_file_logging"
            ),
            log_file=log_data.get("log_file", DEFAULT_LOG_FILE),
        )

    def is_strict(self) -> bool:
        """Check if unknown lookup keys raise instead of using the placeholder."""
        return self.resolver.strict

    def configure_logging(self) -> None:
        """Apply the logging section to the package logger."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(level=self.logging.level, log_file=log_file)

    def to_dict(self) -> Dict[str, Any]:
        """Return the current configuration as plain data."""
        return {
            "resolver": {
                "strict": self.resolver.strict,
                "missing_placeholder": self.resolver.missing_placeholder,
            },
            "naming": {
                "element_separator": self.naming.element_separator,
                "modifier_separator": self.naming.modifier_separator,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = self.to_dict()

        with open(self.config_file, "w") as f:
            if self._is_yaml():
                yaml.safe_dump(config_data, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(config_data, f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")


# Global configuration instance
_global_config: Optional[BemClassesConfig] = None


def get_config() -> BemClassesConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = BemClassesConfig()
    return _global_config


def set_config(config: Optional[BemClassesConfig]) -> None:
    """Set the global configuration instance. ``None`` forces a reload on next use."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> BemClassesConfig:
    """Load configuration from a specific file."""
    return BemClassesConfig(config_file)
