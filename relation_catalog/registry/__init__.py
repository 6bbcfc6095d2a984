"""
Registry module for the relation catalog.

This module provides the Catalog interface and its implementations: an
in-memory catalog, an override layer that shadows another catalog, and an
empty catalog that rejects relation lookups.
"""

from relation_catalog.registry.catalog import Catalog
from relation_catalog.registry.empty_catalog import EMPTY_CATALOG, EmptyCatalog
from relation_catalog.registry.override_catalog import OverrideCatalog
from relation_catalog.registry.simple_catalog import SimpleCatalog

__all__ = [
    "Catalog",
    "EMPTY_CATALOG",
    "EmptyCatalog",
    "OverrideCatalog",
    "SimpleCatalog",
]
