"""
Identifier utilities for the relation catalog.

This module normalizes qualified table identifiers according to a
case-sensitivity policy and derives the lookup keys used by the registries.
It also converts SQL table names and sqlglot table nodes into identifiers.
"""

from typing import Optional, Sequence, Tuple

import sqlglot
from sqlglot import expressions

from relation_catalog.exceptions import CatalogError

TableIdentifier = Tuple[str, ...]
PairKey = Tuple[Optional[str], str]


def to_identifier(table_identifier: Sequence[str]) -> TableIdentifier:
    """Validate a qualified identifier and return it as a tuple.

    Args:
        table_identifier: Ordered, non-empty sequence of name segments.

    Returns:
        The segments as a tuple.

    Raises:
        TypeError: If a bare string is passed or a segment is not a string.
        ValueError: If the identifier has no segments.

    Example:
        >>> to_identifier(["db", "orders"])
        ('db', 'orders')
    """
    # A str is a sequence of characters, which is never what the caller meant
    if isinstance(table_identifier, str):
        raise TypeError(
            f"table identifier must be a sequence of segments, not a string: "
            f"{table_identifier!r}. Use parse_table_identifier() for SQL names."
        )
    segments = tuple(table_identifier)
    if not segments:
        raise ValueError("table identifier cannot be empty")
    for segment in segments:
        if not isinstance(segment, str):
            raise TypeError(
                f"table identifier segments must be strings, got {type(segment).__name__}"
            )
    return segments


def normalize_identifier(
    table_identifier: Sequence[str], case_sensitive: bool
) -> TableIdentifier:
    """Canonicalize an identifier according to a case-sensitivity policy.

    Lowercases every segment when the policy is case-insensitive and returns
    the segments unchanged otherwise. Applying it twice gives the same result
    as applying it once.

    Args:
        table_identifier: Qualified identifier to normalize.
        case_sensitive: Whether the owning catalog is case-sensitive.

    Returns:
        The normalized identifier.

    Example:
        >>> normalize_identifier(["DB", "Orders"], case_sensitive=False)
        ('db', 'orders')
        >>> normalize_identifier(["DB", "Orders"], case_sensitive=True)
        ('DB', 'Orders')
    """
    segments = to_identifier(table_identifier)
    if case_sensitive:
        return segments
    return tuple(segment.lower() for segment in segments)


def dotted_key(table_identifier: Sequence[str]) -> str:
    """Derive the dotted key used by SimpleCatalog.

    Identifiers with at most two segments are joined in full; longer ones
    keep only their last two segments.

    Example:
        >>> dotted_key(["orders"])
        'orders'
        >>> dotted_key(["prod", "sales", "orders"])
        'sales.orders'
    """
    segments = to_identifier(table_identifier)
    if len(segments) <= 2:
        return ".".join(segments)
    return ".".join(segments[-2:])


def pair_key(table_identifier: Sequence[str]) -> PairKey:
    """Derive the (schema, table) key used by OverrideCatalog.

    Example:
        >>> pair_key(["orders"])
        (None, 'orders')
        >>> pair_key(["prod", "sales", "orders"])
        ('sales', 'orders')
    """
    segments = to_identifier(table_identifier)
    schema = segments[-2] if len(segments) >= 2 else None
    return (schema, segments[-1])


def format_identifier(table_identifier: Sequence[str]) -> str:
    """Render an identifier in dotted form for messages."""
    return ".".join(to_identifier(table_identifier))


def identifier_from_table(table_node: expressions.Table) -> TableIdentifier:
    """Extract the qualified identifier of a sqlglot table node.

    Args:
        table_node: sqlglot Table expression.

    Returns:
        Identifier made of the catalog, database and table name parts that
        are present, in that order.

    Raises:
        TypeError: If table_node is not a sqlglot Table.
        CatalogError: If the node has no table name.

    Example:
        >>> node = sqlglot.parse_one("SELECT * FROM prod.sales.orders").find(
        ...     expressions.Table
        ... )
        >>> identifier_from_table(node)
        ('prod', 'sales', 'orders')
    """
    if not isinstance(table_node, expressions.Table):
        raise TypeError(
            f"Expected a sqlglot Table expression, got {type(table_node).__name__}"
        )
    if not table_node.name:
        raise CatalogError(f"Table reference has no name: {table_node.sql()}")
    parts = [part for part in (table_node.catalog, table_node.db, table_node.name) if part]
    return tuple(parts)


def parse_table_identifier(name: str, dialect: Optional[str] = None) -> TableIdentifier:
    """Parse a SQL table name into a qualified identifier.

    Quoted parts are honoured, so dots inside quotes do not split segments.

    Args:
        name: SQL table name, e.g. "prod.sales.orders" or '"My Schema".t'.
        dialect: Optional sqlglot dialect used for quoting rules.

    Returns:
        The qualified identifier.

    Raises:
        CatalogError: If the name is empty or cannot be parsed.

    Example:
        >>> parse_table_identifier("sales.orders")
        ('sales', 'orders')
        >>> parse_table_identifier('"a.b".c')
        ('a.b', 'c')
    """
    if not name or not name.strip():
        raise CatalogError("Table name cannot be empty")

    try:
        table_node = expressions.to_table(name.strip(), dialect=dialect)
    except sqlglot.errors.ParseError as e:
        raise CatalogError(f"Invalid table name {name!r}: {str(e)}") from e

    return identifier_from_table(table_node)
