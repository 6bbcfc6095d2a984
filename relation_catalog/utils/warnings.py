"""
Warning system for the relation catalog.

This module defines warning collection for catalogs and the relation
resolver. Registries record table redefinitions here and the resolver records
unresolved table references, so callers can inspect them after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

VALID_LEVELS = ("INFO", "WARNING", "ERROR")


@dataclass
class CatalogWarning:
    """Warning or error message recorded by a catalog component.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Warning or error message text.
        context: Optional context information (e.g., the table key or SQL).

    Example:
        >>> warning = CatalogWarning(level="WARNING", message="Table redefined")
        >>> warning.level
        'WARNING'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        if self.level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {list(VALID_LEVELS)}"
            )


class WarningCollector:
    """Collects warnings and errors raised during catalog operations.

    Attributes:
        warnings: List of CatalogWarning objects in the order they were added.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add("WARNING", "Table 'orders' redefined")
        >>> collector.has_errors()
        False
        >>> len(collector.get_all())
        1
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[CatalogWarning] = []

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Warning or error message text.
            context: Optional context information.
        """
        self.warnings.append(
            CatalogWarning(level=level, message=message, context=context)
        )

    def has_errors(self) -> bool:
        """Return True if any error-level warnings exist."""
        return any(warning.level == "ERROR" for warning in self.warnings)

    def get_all(self) -> list[CatalogWarning]:
        """Return a copy of all collected warnings."""
        return self.warnings.copy()

    def get_by_level(self, level: str) -> list[CatalogWarning]:
        """Return the warnings with the given severity level."""
        return [
            warning for warning in self.warnings if warning.level == level
        ]

    def clear(self) -> None:
        """Remove all collected warnings."""
        self.warnings.clear()

    def add_redefinition_warning(
        self, table_key: str, level: str = "WARNING"
    ) -> None:
        """Record that a registration replaced an existing table.

        Args:
            table_key: Derived key of the replaced table.
            level: Severity level to record the event at.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add_redefinition_warning("sales.orders")
            >>> collector.get_all()[0].context
            'sales.orders'
        """
        message = (
            f"Table '{table_key}' is being redefined. "
            f"The previous plan will be replaced."
        )
        self.add(level, message, table_key)

    def add_unresolved_warning(
        self, table_name: str, context: Optional[str] = None
    ) -> None:
        """Record that a referenced table was not found in the catalog.

        Args:
            table_name: Dotted name of the missing table as written in the SQL.
            context: Optional SQL context for the warning.
        """
        message = (
            f"Table '{table_name}' is not registered in the catalog. "
            f"Skipping the reference."
        )
        self.add("WARNING", message, context)

    def get_summary(self) -> dict[str, int]:
        """Return the number of collected warnings per level.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add("INFO", "Info 1")
            >>> collector.add("WARNING", "Warning 1")
            >>> collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 0}
            True
        """
        summary: dict[str, int] = {level: 0 for level in VALID_LEVELS}
        for warning in self.warnings:
            summary[warning.level] = summary.get(warning.level, 0) + 1
        return summary
