"""
Naming Utilities for bem-classes.

This module composes BEM lookup keys from their parts, validates the
identifiers that go into them, and lists the block, element and modifier
names a class mapping actually declares.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .config import NamingConfig
from .constants import IdentifierKind
from .exceptions import InvalidIdentifierError


# =============================================================================
# Key Composition
# =============================================================================

def _naming(config: Optional[NamingConfig]) -> NamingConfig:
    return config if config is not None else NamingConfig()


def element_key(block: str, element: str, config: Optional[NamingConfig] = None) -> str:
    """Compose ``block__element``."""
    return f"{block}{_naming(config).element_separator}{element}"


def modifier_key(prefix: str, modifier: str, config: Optional[NamingConfig] = None) -> str:
    """Compose ``prefix--modifier`` where prefix is a block or element key."""
    return f"{prefix}{_naming(config).modifier_separator}{modifier}"


# =============================================================================
# Identifier Validation
# =============================================================================

def is_absent(value: Any) -> bool:
    """Return True for modifier/external arguments that should be skipped."""
    # Identity checks: 0 == False, but 0 is not an absent marker.
    if value is None or value is False:
        return True
    return isinstance(value, str) and value == ""


def reserved_separators(kind: IdentifierKind, config: Optional[NamingConfig] = None) -> List[str]:
    """Separators an identifier in the given position must not contain."""
    naming = _naming(config)
    if kind is IdentifierKind.MODIFIER:
        return [naming.modifier_separator]
    return [naming.element_separator, naming.modifier_separator]


def validate_identifier(
    identifier: Any, kind: IdentifierKind, config: Optional[NamingConfig] = None
) -> str:
    """
    Check that an identifier can be composed into an unambiguous key.

    Args:
        identifier: Candidate block, element or modifier name
        kind: Position the identifier will occupy
        config: Naming separators; defaults to ``__`` and ``--``

    Returns:
        The identifier, unchanged

    Raises:
        InvalidIdentifierError: If the identifier is not a string, is empty,
            or contains a reserved separator
    """
    if not isinstance(identifier, str):
        raise InvalidIdentifierError(
            identifier, kind.value, f"expected str, got {type(identifier).__name__}"
        )
    if not identifier:
        raise InvalidIdentifierError(identifier, kind.value, "must not be empty")

    for separator in reserved_separators(kind, config):
        if separator in identifier:
            raise InvalidIdentifierError(
                identifier, kind.value, f"must not contain '{separator}'"
            )
    return identifier


# =============================================================================
# Mapping Introspection
# =============================================================================

def find_block_names(mapping: Mapping[str, str], config: Optional[NamingConfig] = None) -> List[str]:
    """Return the keys of ``mapping`` that name a bare block."""
    naming = _naming(config)
    return sorted(
        key for key in mapping
        if naming.element_separator not in key and naming.modifier_separator not in key
    )


def find_element_names(
    mapping: Mapping[str, str], block: str, config: Optional[NamingConfig] = None
) -> List[str]:
    """Return the element names declared for ``block`` in ``mapping``."""
    naming = _naming(config)
    prefix = f"{block}{naming.element_separator}"
    names = set()
    for key in mapping:
        if not key.startswith(prefix):
            continue
        element = key[len(prefix):]
        if element and naming.modifier_separator not in element:
            names.add(element)
    return sorted(names)


def find_modifier_names(
    mapping: Mapping[str, str], prefix: str, config: Optional[NamingConfig] = None
) -> List[str]:
    """
    Return the modifier names declared for a block or element key.

    ``prefix`` is the full base key, e.g. ``"btn"`` or ``"btn__label"``.
    Element modifiers (``btn__label--m``) are not reported for prefix ``btn``.
    """
    naming = _naming(config)
    head = f"{prefix}{naming.modifier_separator}"
    # With separators like "_" and "__", element keys also start with head.
    element_head = f"{prefix}{naming.element_separator}"
    return sorted(
        key[len(head):] for key in mapping
        if key.startswith(head) and len(key) > len(head) and not key.startswith(element_head)
    )
