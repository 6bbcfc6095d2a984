"""
Empty catalog.

This module defines EmptyCatalog, a catalog that rejects every relation
request. It is used where all relations are already filled in and the
analyzer only needs to resolve attribute references.
"""

from typing import Any, NoReturn, Optional, Sequence

from relation_catalog.exceptions import UnsupportedOperationError
from relation_catalog.registry.catalog import Catalog


class EmptyCatalog(Catalog):
    """A trivial catalog that raises when a relation is requested.

    Every relation-level operation raises UnsupportedOperationError.
    unregister_all_tables() succeeds, since clearing nothing is always valid.
    """

    @property
    def case_sensitive(self) -> bool:
        return True

    def table_exists(self, table_identifier: Sequence[str]) -> NoReturn:
        raise UnsupportedOperationError("table_exists")

    def lookup_relation(
        self, table_identifier: Sequence[str], alias: Optional[str] = None
    ) -> NoReturn:
        raise UnsupportedOperationError("lookup_relation")

    def register_table(self, table_identifier: Sequence[str], plan: Any) -> NoReturn:
        raise UnsupportedOperationError("register_table")

    def unregister_table(self, table_identifier: Sequence[str]) -> NoReturn:
        raise UnsupportedOperationError("unregister_table")

    def unregister_all_tables(self) -> None:
        pass

    def __repr__(self) -> str:
        return "EmptyCatalog()"


EMPTY_CATALOG = EmptyCatalog()
