"""
In-memory catalog.

This module defines the SimpleCatalog class, a flat registry of dotted table
names to plans with a case-sensitivity policy fixed for its lifetime.
"""

import threading
import warnings
from typing import Any, Dict, List, Optional, Sequence

from relation_catalog.exceptions import TableNotFoundError
from relation_catalog.models.config import CatalogConfig, ErrorMode
from relation_catalog.registry.catalog import Catalog
from relation_catalog.utils.warnings import WarningCollector


class SimpleCatalog(Catalog):
    """Catalog backed by a single dictionary.

    Tables are keyed by their dotted name: identifiers with up to two
    segments are joined in full, longer identifiers keep only their last two
    segments. Registering an existing key replaces the previous plan.

    Attributes:
        tables: Mapping of dotted name to plan.
        config: CatalogConfig controlling redefinition reporting.
        warnings: WarningCollector recording redefinitions.

    Usage:
        catalog = SimpleCatalog(case_sensitive=False)

        # Bind a temporary view
        catalog.register_table(["sales", "orders"], plan)

        # Resolve it under an alias
        relation = catalog.lookup_relation(["SALES", "Orders"], alias="o")

        # Release it
        catalog.unregister_table(["sales", "orders"])
    """

    def __init__(
        self, case_sensitive: bool = True, config: Optional[CatalogConfig] = None
    ) -> None:
        """Initialize a SimpleCatalog.

        Args:
            case_sensitive: Whether identifiers are compared case-sensitively.
            config: Optional configuration; defaults to CatalogConfig().
        """
        if not isinstance(case_sensitive, bool):
            raise TypeError("case_sensitive must be a boolean")
        self._case_sensitive = case_sensitive
        self.config = config or CatalogConfig()
        self.tables: Dict[str, Any] = {}
        self.warnings = WarningCollector()
        self._lock = threading.RLock()

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def register_table(self, table_identifier: Sequence[str], plan: Any) -> None:
        """Register a plan under the identifier.

        Args:
            table_identifier: Qualified identifier of the table.
            plan: Plan to bind.
        """
        table_ident = self._process_table_identifier(table_identifier)
        table_name = self._get_db_table_name(table_ident)

        with self._lock:
            if table_name in self.tables:
                self._report_redefinition(table_name)
            self.tables[table_name] = plan

    def unregister_table(self, table_identifier: Sequence[str]) -> None:
        table_ident = self._process_table_identifier(table_identifier)
        with self._lock:
            self.tables.pop(self._get_db_table_name(table_ident), None)

    def unregister_all_tables(self) -> None:
        with self._lock:
            self.tables.clear()

    def table_exists(self, table_identifier: Sequence[str]) -> bool:
        table_ident = self._process_table_identifier(table_identifier)
        with self._lock:
            return self._get_db_table_name(table_ident) in self.tables

    def lookup_relation(
        self, table_identifier: Sequence[str], alias: Optional[str] = None
    ) -> Any:
        """Look up a table and qualify it with its name and optional alias.

        Args:
            table_identifier: Qualified identifier of the table.
            alias: Optional alias used as the outer qualifier.

        Returns:
            Subquery wrapping the registered plan.

        Raises:
            TableNotFoundError: If the table is not registered.
        """
        table_ident = self._process_table_identifier(table_identifier)
        table_full_name = self._get_db_table_name(table_ident)

        with self._lock:
            if table_full_name not in self.tables:
                raise TableNotFoundError(table_full_name)
            table = self.tables[table_full_name]

        return self._with_qualifiers(table_ident, table, alias)

    def table_names(self) -> List[str]:
        """Return the registered dotted names in sorted order."""
        with self._lock:
            return sorted(self.tables)

    def table_types(self) -> Dict[str, str]:
        """Return the type name of each registered plan, by dotted name."""
        with self._lock:
            return {
                name: type(plan).__name__ for name, plan in sorted(self.tables.items())
            }

    def _report_redefinition(self, table_name: str) -> None:
        if self.config.on_redefinition is not ErrorMode.WARN:
            return
        self.warnings.add_redefinition_warning(table_name)
        warnings.warn(
            f"Table '{table_name}' is being redefined. "
            f"The previous plan will be replaced.",
            UserWarning,
        )

    def __repr__(self) -> str:
        return (
            f"SimpleCatalog(case_sensitive={self.case_sensitive}, "
            f"tables={len(self.tables)})"
        )
