"""
Catalog report formatting.

This module renders the contents of a catalog chain as a text table, listing
each override layer above the catalogs it wraps.
"""

from typing import Any, List

from tabulate import tabulate

from relation_catalog.registry.catalog import Catalog
from relation_catalog.registry.override_catalog import OverrideCatalog

HEADERS = ["layer", "kind", "table", "plan"]


def catalog_rows(catalog: Catalog) -> List[List[Any]]:
    """Return one row per registered table across a catalog chain.

    Layer 0 is the catalog passed in; each wrapped catalog is one layer
    deeper. Rows within a layer are sorted by table name.

    Example:
        >>> base = SimpleCatalog()
        >>> base.register_table(["orders"], "plan")
        >>> catalog_rows(OverrideCatalog(base))
        [[1, 'SimpleCatalog', 'orders', 'str']]
    """
    rows: List[List[Any]] = []
    layer = 0
    current = catalog
    while True:
        kind = type(current).__name__
        for name, plan_type in sorted(current.table_types().items()):
            rows.append([layer, kind, name, plan_type])
        if not isinstance(current, OverrideCatalog):
            break
        current = current.catalog
        layer += 1
    return rows


def format_catalog(catalog: Catalog, tablefmt: str = "simple") -> str:
    """Render the tables of a catalog chain with tabulate.

    Args:
        catalog: Catalog to describe; overrides are followed down to the
            base catalog.
        tablefmt: Any tabulate table format.

    Returns:
        The rendered table, or a one-line note when nothing is registered.
    """
    rows = catalog_rows(catalog)
    if not rows:
        return f"{type(catalog).__name__}: no tables registered"
    return tabulate(rows, headers=HEADERS, tablefmt=tablefmt)
