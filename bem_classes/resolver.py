"""
BEM class name resolver.

Builds class attribute strings for one block of a class mapping, e.g. the
name table a CSS-modules build step emits for a stylesheet:

    cls = bem_classes(css_module, "btn")

    cls.block(class_name, has_icon and "has-icon")
    cls.element("label")
    cls.element("icon", None, "large")
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Union

from .utils.config import BemClassesConfig, get_config
from .utils.constants import CLASS_NAME_SEPARATOR, IdentifierKind
from .utils.exceptions import UnknownClassError
from .utils.logging import get_logger
from .utils.naming import (
    element_key,
    find_element_names,
    find_modifier_names,
    is_absent,
    modifier_key,
    validate_identifier,
)

logger = get_logger(__name__)

ModifierArg = Union[str, None, bool]


class BemClasses:
    """
    Class name generator bound to one block of a class mapping.

    Both lookup operations compose keys from the bound block name, resolve
    them against the mapping and join the results with single spaces:
    external class first, then the base class, then one class per
    modifier in call order. Absent modifiers (None, False, "") are skipped.

    Instances hold no mutable state and may be shared between threads.
    """

    def __init__(
        self,
        mapping: Mapping[str, str],
        block: str,
        config: Optional[BemClassesConfig] = None,
    ):
        """
        Bind a class mapping and block name.

        Args:
            mapping: Identifier to class name table
            block: Block identifier; must itself be a key of ``mapping``
            config: Configuration; defaults to the global instance

        Raises:
            InvalidIdentifierError: If ``block`` is malformed
            UnknownClassError: If ``block`` is not a key of ``mapping`` and
                strict mode is on
        """
        if mapping is None:
            raise TypeError("mapping must not be None")

        config = config if config is not None else get_config()
        self._naming = config.naming
        self._strict = config.resolver.strict
        self._placeholder = config.resolver.missing_placeholder

        self._block = validate_identifier(block, IdentifierKind.BLOCK, self._naming)
        self._mapping = MappingProxyType(dict(mapping))

        # The bare block class is the one key every call needs.
        if self._strict and self._block not in self._mapping:
            raise UnknownClassError(self._block, self._block)

        logger.debug(
            f"Created resolver for block '{self._block}' "
            f"({len(self._mapping)} mapped classes, strict={self._strict})"
        )

    @property
    def block_name(self) -> str:
        """Block identifier this resolver is bound to."""
        return self._block

    @property
    def mapping(self) -> Mapping[str, str]:
        """Read-only view of the bound class mapping."""
        return self._mapping

    def block(self, external: Optional[str] = None, *modifiers: ModifierArg) -> str:
        """
        Return the class string for the block itself.

        Args:
            external: Caller-supplied class names, prepended verbatim when
                non-empty
            *modifiers: Block modifier names or absent markers

        Returns:
            Space-separated class string

        Raises:
            TypeError: If ``external`` is neither a string nor absent
            InvalidIdentifierError: If a modifier is malformed
            UnknownClassError: If a ``block--modifier`` key is not mapped
        """
        return self._resolve(self._block, external, modifiers)

    def element(
        self, element: str, external: Optional[str] = None, *modifiers: ModifierArg
    ) -> str:
        """
        Return the class string for an element of the block.

        Args:
            element: Element name, resolved as ``block__element``
            external: Caller-supplied class names, prepended verbatim when
                non-empty
            *modifiers: Element modifier names or absent markers

        Returns:
            Space-separated class string

        Raises:
            TypeError: If ``external`` is neither a string nor absent
            InvalidIdentifierError: If the element or a modifier is malformed
            UnknownClassError: If the element or a ``block__element--modifier``
                key is not mapped
        """
        validate_identifier(element, IdentifierKind.ELEMENT, self._naming)
        prefix = element_key(self._block, element, self._naming)
        return self._resolve(prefix, external, modifiers)

    def element_names(self) -> List[str]:
        """Element names the mapping declares for this block."""
        return find_element_names(self._mapping, self._block, self._naming)

    def modifier_names(self, element: Optional[str] = None) -> List[str]:
        """Modifier names the mapping declares for the block, or for one of its elements."""
        prefix = self._block
        if element is not None:
            validate_identifier(element, IdentifierKind.ELEMENT, self._naming)
            prefix = element_key(self._block, element, self._naming)
        return find_modifier_names(self._mapping, prefix, self._naming)

    def _resolve(
        self,
        prefix: str,
        external: Optional[str],
        modifiers: Iterable[ModifierArg],
    ) -> str:
        # Tokens are collected first so a failing modifier lookup never
        # yields a partial string.
        tokens = []
        if not is_absent(external):
            if not isinstance(external, str):
                raise TypeError(
                    f"external class must be a string, got {type(external).__name__}"
                )
            tokens.append(external)
        tokens.append(self._lookup(prefix))

        for modifier in modifiers:
            if is_absent(modifier):
                continue
            validate_identifier(modifier, IdentifierKind.MODIFIER, self._naming)
            tokens.append(self._lookup(modifier_key(prefix, modifier, self._naming)))

        return CLASS_NAME_SEPARATOR.join(tokens)

    def _lookup(self, key: str) -> str:
        try:
            return self._mapping[key]
        except KeyError:
            if self._strict:
                raise UnknownClassError(key, self._block) from None
            logger.warning(
                f"No class name mapped for '{key}', using placeholder '{self._placeholder}'"
            )
            return self._placeholder

    def __repr__(self) -> str:
        return f"{type(self).__name__}(block={self._block!r}, classes={len(self._mapping)})"


def bem_classes(
    mapping: Mapping[str, str], block: str, config: Optional[BemClassesConfig] = None
) -> BemClasses:
    """
    Create a BEM class name generator for ``block`` using the names in ``mapping``.

    Usage:

        cls = bem_classes({"btn": "a1", "btn--primary": "a2", "btn__label": "a3"}, "btn")
        cls.block()                       # "a1"
        cls.block("extra", "primary")     # "extra a1 a2"
        cls.element("label")              # "a3"
    """
    return BemClasses(mapping, block, config)


create_resolver = bem_classes
