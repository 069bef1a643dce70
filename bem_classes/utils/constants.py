"""
Constants for the bem-classes package.

This module holds the BEM naming-convention separators, identifier kinds,
and the defaults shared by configuration and resolution.
"""

from enum import Enum


# =============================================================================
# Naming Convention Separators
# =============================================================================

ELEMENT_SEPARATOR = "__"  # block__element
MODIFIER_SEPARATOR = "--"  # block--modifier, block__element--modifier
CLASS_NAME_SEPARATOR = " "  # between tokens of the resolved class string


class IdentifierKind(Enum):
    """Positions an identifier can occupy in a lookup key."""

    BLOCK = "block"
    ELEMENT = "element"
    MODIFIER = "modifier"


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_STRICT = True
DEFAULT_MISSING_PLACEHOLDER = "undefined"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "bem_classes.log"

CONFIG_ENV_VAR = "BEM_CLASSES_CONFIG"
STRICT_ENV_VAR = "BEM_CLASSES_STRICT"
LOG_LEVEL_ENV_VAR = "BEM_CLASSES_LOG_LEVEL"

TRUE_VALUES = ("1", "true", "yes")
FALSE_VALUES = ("0", "false", "no")
