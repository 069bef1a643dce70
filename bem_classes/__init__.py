"""
bem-classes: BEM class name generation from class mappings

Builds class attribute strings following the Block-Element-Modifier naming
convention, resolving each name against a mapping such as the one a
CSS-modules build step emits.

Key Features:
- One resolver per block, with block() and element() lookups
- Conditional modifiers: None, False and "" are skipped
- Unknown classes raise UnknownClassError naming the missing key
- Introspection of the element and modifier names a mapping declares

Usage:
    from bem_classes import bem_classes

    cls = bem_classes(css_module, "btn")
    cls.block(class_name, is_primary and "primary")
    cls.element("label")
"""

__version__ = "0.1.0"
__author__ = "bem-classes Team"
__email__ = "bem-classes@example.com"

# Public API exports
from .resolver import (
    BemClasses,
    bem_classes,
    create_resolver,
)

from .utils.config import (
    get_config,
    set_config,
    load_config,
    BemClassesConfig,
)

from .utils.exceptions import (
    BemClassesError,
    UnknownClassError,
    InvalidIdentifierError,
    ConfigurationError,
)

__all__ = [
    "BemClasses",
    "bem_classes",
    "create_resolver",
    "get_config",
    "set_config",
    "load_config",
    "BemClassesConfig",
    "BemClassesError",
    "UnknownClassError",
    "InvalidIdentifierError",
    "ConfigurationError",
]
