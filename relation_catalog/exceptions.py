"""
Custom exception classes for the relation catalog.

This module defines all custom exceptions used throughout the relation_catalog
package. Lookup failures are recoverable contract errors; unsupported
operations signal a miswired analyzer and are not meant to be handled.
"""

from typing import Optional


class CatalogError(Exception):
    """Base exception class for all catalog errors.

    This exception serves as the base class for all custom exceptions in the
    relation_catalog package and can be used to catch any catalog-related
    error.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a CatalogError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class TableNotFoundError(CatalogError):
    """Exception raised when a relation lookup finds no registered table.

    Absence is deterministic, so callers should surface this error rather
    than retry the lookup.

    Attributes:
        message: Error message, e.g. "Table Not Found: db.orders".
        full_name: The derived dotted name that was looked up.

    Example:
        >>> err = TableNotFoundError("db.orders")
        >>> err.full_name
        'db.orders'
        >>> str(err)
        'Table Not Found: db.orders'
    """

    def __init__(self, full_name: str) -> None:
        """Initialize a TableNotFoundError.

        Args:
            full_name: The derived dotted name that was looked up.
        """
        self.full_name = full_name
        super().__init__(f"Table Not Found: {full_name}")


class UnsupportedOperationError(CatalogError, NotImplementedError):
    """Exception raised when a catalog does not support relation operations.

    Raised by EmptyCatalog for every relation-level call. Seeing this error
    means an analyzer was configured with a catalog that should never have
    been asked to resolve a relation.

    Attributes:
        message: Error message naming the rejected operation.
        operation: Name of the rejected operation, if known.
    """

    def __init__(self, operation: Optional[str] = None) -> None:
        """Initialize an UnsupportedOperationError.

        Args:
            operation: Optional name of the rejected operation.
        """
        self.operation = operation
        if operation:
            message = f"Operation '{operation}' is not supported by this catalog"
        else:
            message = "Operation is not supported by this catalog"
        super().__init__(message)
