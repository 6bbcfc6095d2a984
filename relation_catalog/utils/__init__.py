"""
Utility functions and helpers for the relation catalog.

This package contains identifier normalization and key derivation, warning
collection, and catalog report formatting.
"""

from relation_catalog.utils.identifier_utils import (
    dotted_key,
    format_identifier,
    identifier_from_table,
    normalize_identifier,
    pair_key,
    parse_table_identifier,
    to_identifier,
)
from relation_catalog.utils.warnings import CatalogWarning, WarningCollector

__all__ = [
    "dotted_key",
    "format_identifier",
    "identifier_from_table",
    "normalize_identifier",
    "pair_key",
    "parse_table_identifier",
    "to_identifier",
    "CatalogWarning",
    "WarningCollector",
]
