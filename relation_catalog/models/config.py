"""
Configuration model for the relation catalog.

This module defines the CatalogConfig class and ErrorMode enum, which control
how registries report redefinitions and how the relation resolver handles
tables that are not registered.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorMode(str, Enum):
    """Enumeration of error handling modes.

    Attributes:
        FAIL: Raise an exception immediately.
        WARN: Record and emit a warning, then continue.
        IGNORE: Silently ignore the event and continue; nothing is recorded.

    Example:
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values."""
        return [member.value for member in cls]


@dataclass
class CatalogConfig:
    """Configuration settings for catalogs and the relation resolver.

    Attributes:
        on_redefinition: What a registry does when a registration replaces an
            existing entry. Registration always succeeds (last write wins),
            so only ErrorMode.WARN and ErrorMode.IGNORE are accepted.
            Under ErrorMode.IGNORE redefinitions are not recorded at all.
            Defaults to ErrorMode.IGNORE.
        on_unresolved: What the relation resolver does when a referenced
            table is not registered. Defaults to ErrorMode.FAIL.

    Example:
        >>> config = CatalogConfig(on_redefinition=ErrorMode.WARN)
        >>> config.on_unresolved
        <ErrorMode.FAIL: 'fail'>
    """

    on_redefinition: ErrorMode = ErrorMode.IGNORE
    on_unresolved: ErrorMode = ErrorMode.FAIL

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.on_redefinition, ErrorMode):
            raise TypeError("on_redefinition must be an ErrorMode instance")
        if not isinstance(self.on_unresolved, ErrorMode):
            raise TypeError("on_unresolved must be an ErrorMode instance")
        if self.on_redefinition is ErrorMode.FAIL:
            raise ValueError(
                "on_redefinition cannot be ErrorMode.FAIL: "
                "registering an existing table always replaces it"
            )
