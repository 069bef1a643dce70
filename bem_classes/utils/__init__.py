"""
Utils package for bem-classes.

This module provides key composition and naming helpers, the exception
hierarchy, configuration and logging used by the resolver.
"""

from .constants import *
from .exceptions import (
    BemClassesError,
    UnknownClassError,
    InvalidIdentifierError,
    ConfigurationError,
)
from .logging import setup_logging, get_logger
from .config import (
    BemClassesConfig,
    ResolverConfig,
    NamingConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .naming import (
    element_key,
    modifier_key,
    is_absent,
    validate_identifier,
    find_block_names,
    find_element_names,
    find_modifier_names,
)

__all__ = [
    # Exceptions
    "BemClassesError",
    "UnknownClassError",
    "InvalidIdentifierError",
    "ConfigurationError",

    # Logging
    "setup_logging",
    "get_logger",

    # Configuration
    "BemClassesConfig",
    "ResolverConfig",
    "NamingConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Naming
    "element_key",
    "modifier_key",
    "is_absent",
    "validate_identifier",
    "find_block_names",
    "find_element_names",
    "find_modifier_names",
]
