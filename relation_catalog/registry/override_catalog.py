"""
Override catalog.

This module defines the OverrideCatalog class, which shadows selected tables
of another catalog with new plans without modifying that catalog.
"""

import threading
import warnings
from typing import Any, Dict, List, Optional, Sequence, Tuple

from relation_catalog.models.config import CatalogConfig, ErrorMode
from relation_catalog.registry.catalog import Catalog
from relation_catalog.utils.identifier_utils import PairKey
from relation_catalog.utils.warnings import WarningCollector


class OverrideCatalog(Catalog):
    """A catalog layered over another catalog.

    Registrations go into a private map of overrides keyed by
    (schema, table). Lookups and existence checks consult the overrides first
    and fall through to the wrapped catalog otherwise. Unregistering only ever
    touches the overrides, so the wrapped catalog's binding becomes visible
    again once an override is removed.

    This can be used to bind query results to virtual tables, or to replace
    tables with cached versions, without affecting other users of the wrapped
    catalog. Overrides can wrap other overrides to any depth: a chain of
    overrides is walked layer by layer in a loop, not by recursion. They live
    in memory only.

    Attributes:
        catalog: The wrapped catalog.
        overrides: Mapping of (schema, table) to plan.
        config: CatalogConfig controlling redefinition reporting.
        warnings: WarningCollector recording redefinitions of overrides.

    Example:
        >>> shared = SimpleCatalog(case_sensitive=False)
        >>> shared.register_table(["sales", "orders"], stored_plan)
        >>> session = OverrideCatalog(shared)
        >>> session.register_table(["sales", "orders"], cached_plan)
        >>> session.lookup_relation(["sales", "orders"]).unwrap() is cached_plan
        True
        >>> shared.lookup_relation(["sales", "orders"]).unwrap() is stored_plan
        True
    """

    def __init__(
        self, catalog: Catalog, config: Optional[CatalogConfig] = None
    ) -> None:
        """Initialize an OverrideCatalog.

        Args:
            catalog: The catalog to wrap. It is never modified.
            config: Optional configuration; defaults to CatalogConfig().

        Raises:
            TypeError: If catalog is not a Catalog.
        """
        if not isinstance(catalog, Catalog):
            raise TypeError("catalog must be a Catalog instance")
        self.catalog = catalog
        self.config = config or CatalogConfig()
        # TODO: overrides are keyed by (schema, table) only, so they do not
        # follow a change of the current database.
        self.overrides: Dict[PairKey, Any] = {}
        self.warnings = WarningCollector()
        self._lock = threading.RLock()

    @property
    def case_sensitive(self) -> bool:
        return self.base_catalog.case_sensitive

    @property
    def base_catalog(self) -> Catalog:
        """The first catalog below this chain that is not an override."""
        wrapped = self.catalog
        while isinstance(wrapped, OverrideCatalog):
            wrapped = wrapped.catalog
        return wrapped

    @property
    def depth(self) -> int:
        """Number of override layers from this one down to the base catalog."""
        depth = 1
        wrapped = self.catalog
        while isinstance(wrapped, OverrideCatalog):
            depth += 1
            wrapped = wrapped.catalog
        return depth

    def table_exists(self, table_identifier: Sequence[str]) -> bool:
        db_table = self._get_db_table(self._process_table_identifier(table_identifier))
        layer: Catalog = self
        while isinstance(layer, OverrideCatalog):
            found, _ = layer._find_override(db_table)
            if found:
                return True
            layer = layer.catalog
        return layer.table_exists(table_identifier)

    def lookup_relation(
        self, table_identifier: Sequence[str], alias: Optional[str] = None
    ) -> Any:
        """Look up a table in the overrides, then in the wrapped catalog.

        An override is qualified with the table name and the alias by the
        layer that holds it. A miss in every layer hands the identifier as
        given, and the alias, to the base catalog, which applies its own
        qualifiers.

        Raises:
            TableNotFoundError: If neither the overrides nor the wrapped
                catalog know the table.
        """
        # Every layer shares the base catalog's case policy
        table_ident = self._process_table_identifier(table_identifier)
        db_table = self._get_db_table(table_ident)
        layer: Catalog = self
        while isinstance(layer, OverrideCatalog):
            found, overridden_table = layer._find_override(db_table)
            if found:
                return layer._with_qualifiers(table_ident, overridden_table, alias)
            layer = layer.catalog
        return layer.lookup_relation(table_identifier, alias)

    def register_table(self, table_identifier: Sequence[str], plan: Any) -> None:
        table_ident = self._process_table_identifier(table_identifier)
        db_table = self._get_db_table(table_ident)
        with self._lock:
            if db_table in self.overrides:
                self._report_redefinition(db_table)
            self.overrides[db_table] = plan

    def unregister_table(self, table_identifier: Sequence[str]) -> None:
        table_ident = self._process_table_identifier(table_identifier)
        with self._lock:
            self.overrides.pop(self._get_db_table(table_ident), None)

    def unregister_all_tables(self) -> None:
        with self._lock:
            self.overrides.clear()

    def table_names(self) -> List[str]:
        """Return the overridden tables as sorted dotted names."""
        with self._lock:
            keys = list(self.overrides)
        return sorted(_pair_key_name(key) for key in keys)

    def table_types(self) -> Dict[str, str]:
        """Return the type name of each override, by dotted name."""
        with self._lock:
            items = list(self.overrides.items())
        tables = {
            _pair_key_name(key): type(plan).__name__ for key, plan in items
        }
        return dict(sorted(tables.items()))

    def to_dict(self) -> Dict[str, Any]:
        """Export the overrides and, under "wrapped", the wrapped catalog."""
        layers: List[OverrideCatalog] = []
        layer: Catalog = self
        while isinstance(layer, OverrideCatalog):
            layers.append(layer)
            layer = layer.catalog

        # Built from the base upwards so nesting needs no recursion
        export = layer.to_dict()
        for override in reversed(layers):
            export = {
                "case_sensitive": export["case_sensitive"],
                "tables": override.table_types(),
                "wrapped": export,
            }
        return export

    def _find_override(self, db_table: PairKey) -> Tuple[bool, Any]:
        with self._lock:
            return db_table in self.overrides, self.overrides.get(db_table)

    def _report_redefinition(self, db_table: PairKey) -> None:
        if self.config.on_redefinition is not ErrorMode.WARN:
            return
        name = _pair_key_name(db_table)
        self.warnings.add_redefinition_warning(name)
        warnings.warn(
            f"Override for table '{name}' is being redefined. "
            f"The previous plan will be replaced.",
            UserWarning,
        )

    def __repr__(self) -> str:
        return (
            f"OverrideCatalog(overrides={len(self.overrides)}, depth={self.depth}, "
            f"base={self.base_catalog!r})"
        )


def _pair_key_name(key: PairKey) -> str:
    schema, table = key
    return f"{schema}.{table}" if schema is not None else table
