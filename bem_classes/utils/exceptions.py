"""
Custom exception definitions.

This module defines the exception hierarchy for errors raised while
composing and resolving BEM class names.
"""

from typing import Any, Optional


class BemClassesError(Exception):
    """
    Base exception for all bem_classes errors.

    Carries a human-readable message plus a dictionary of context that is
    appended to the string form.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class UnknownClassError(BemClassesError, KeyError):
    """
    Raised when a composed lookup key has no entry in the class mapping.

    Usually means the mapping was generated from a stylesheet that does not
    declare the requested element or modifier.
    """

    def __init__(self, key: str, block: Optional[str] = None):
        """
        Initialize unknown class error.

        Args:
            key: The composed lookup key that was not found
            block: Block the resolver is bound to, if known
        """
        details = {"key": key}
        if block is not None:
            details["block"] = block

        super().__init__(f"No class name mapped for '{key}'", details)
        self.key = key
        self.block = block


class InvalidIdentifierError(BemClassesError, ValueError):
    """
    Raised when a block, element or modifier identifier is malformed.

    An identifier is malformed when it is not a string, is empty, or contains
    a reserved separator that would make the composed key ambiguous.
    """

    def __init__(self, identifier: Any, kind: str, reason: str = ""):
        """
        Initialize invalid identifier error.

        Args:
            identifier: The offending value
            kind: Identifier position ("block", "element" or "modifier")
            reason: Optional explanation
        """
        message = f"Invalid {kind} identifier {identifier!r}"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"kind": kind})
        self.identifier = identifier
        self.kind = kind
        self.reason = reason


class ConfigurationError(BemClassesError):
    """Raised when a configuration file cannot be parsed or holds invalid values."""

    def __init__(self, message: str, config_file: Optional[str] = None):
        details = {}
        if config_file is not None:
            details["config_file"] = config_file

        super().__init__(message, details)
        self.config_file = config_file
