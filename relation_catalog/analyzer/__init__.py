"""
Analyzer-side helpers for the relation catalog.

This package contains the RelationResolver, which resolves the tables of a
SQL statement through a Catalog.
"""

from relation_catalog.analyzer.relation_resolver import (
    RelationResolver,
    ResolvedRelation,
)

__all__ = [
    "RelationResolver",
    "ResolvedRelation",
]
