"""
Abstract catalog interface.

This module defines the Catalog abstract base class, the contract an analyzer
uses to look up relations by name and a session uses to bind and release
temporary tables.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence

from relation_catalog.models.subquery import Subquery
from relation_catalog.utils.identifier_utils import (
    PairKey,
    TableIdentifier,
    dotted_key,
    normalize_identifier,
    pair_key,
)


class Catalog(ABC):
    """An interface for looking up relations by name.

    Implementations map qualified table identifiers to plans. Identifiers are
    ordered sequences of name segments such as ``["sales", "orders"]``;
    plans are opaque and returned wrapped in a Subquery that qualifies their
    output with the table name (and the alias, when one is given).

    Example:
        >>> catalog = SimpleCatalog(case_sensitive=False)
        >>> catalog.register_table(["sales", "Orders"], plan)
        >>> catalog.table_exists(["SALES", "orders"])
        True
        >>> catalog.lookup_relation(["sales", "orders"], alias="o").qualifier
        'o'
    """

    @property
    @abstractmethod
    def case_sensitive(self) -> bool:
        """Whether identifiers are compared case-sensitively."""

    @abstractmethod
    def table_exists(self, table_identifier: Sequence[str]) -> bool:
        """Return True if a table is registered under the identifier."""

    @abstractmethod
    def lookup_relation(
        self, table_identifier: Sequence[str], alias: Optional[str] = None
    ) -> Any:
        """Return the plan registered under the identifier.

        Args:
            table_identifier: Qualified identifier of the table.
            alias: Optional alias; when given, the result is qualified by it.

        Returns:
            The plan wrapped in a Subquery named after the last identifier
            segment, and wrapped again by the alias if one was supplied.

        Raises:
            TableNotFoundError: If no table is registered under the identifier.
        """

    @abstractmethod
    def register_table(self, table_identifier: Sequence[str], plan: Any) -> None:
        """Bind a plan to the identifier, replacing any existing binding."""

    @abstractmethod
    def unregister_table(self, table_identifier: Sequence[str]) -> None:
        """Remove the binding for the identifier; a no-op if there is none."""

    @abstractmethod
    def unregister_all_tables(self) -> None:
        """Remove every binding owned by this catalog."""

    def table_types(self) -> Dict[str, str]:
        """Return the type name of each plan bound in this catalog itself.

        Keys are dotted table names. Wrapped catalogs are not included.
        """
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Export the catalog contents (for reports and debugging)."""
        return {"case_sensitive": self.case_sensitive, "tables": self.table_types()}

    def _process_table_identifier(
        self, table_identifier: Sequence[str]
    ) -> TableIdentifier:
        return normalize_identifier(table_identifier, self.case_sensitive)

    @staticmethod
    def _get_db_table_name(table_ident: TableIdentifier) -> str:
        return dotted_key(table_ident)

    @staticmethod
    def _get_db_table(table_ident: TableIdentifier) -> PairKey:
        return pair_key(table_ident)

    @staticmethod
    def _with_qualifiers(
        table_ident: TableIdentifier, plan: Any, alias: Optional[str]
    ) -> Subquery:
        table_with_qualifiers = Subquery(table_ident[-1], plan)
        # The alias wrapper must be outermost so attributes are qualified by it
        if alias is not None:
            return Subquery(alias, table_with_qualifiers)
        return table_with_qualifiers
