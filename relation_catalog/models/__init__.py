"""
Data models for the relation catalog.

This package contains the configuration model and the qualifier-rename
wrapper returned by catalog lookups.
"""

from relation_catalog.models.config import CatalogConfig, ErrorMode
from relation_catalog.models.subquery import Subquery

__all__ = [
    "CatalogConfig",
    "ErrorMode",
    "Subquery",
]
