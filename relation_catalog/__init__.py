"""
Relation Catalog v1.0

Name resolution for query analyzers: maps qualified table identifiers to
logical plans, with override layers that shadow a shared catalog without
modifying it.

Example:
    >>> from relation_catalog import OverrideCatalog, SimpleCatalog
    >>> shared = SimpleCatalog(case_sensitive=False)
    >>> shared.register_table(["sales", "orders"], plan)
    >>> session = OverrideCatalog(shared)
    >>> session.register_table(["sales", "orders"], cached_plan)
    >>> session.lookup_relation(["sales", "orders"], alias="o").qualifier
    'o'
"""

from relation_catalog.version import __version__, __version_info__

__author__ = "Relation Catalog Contributors"

from relation_catalog.analyzer.relation_resolver import (
    RelationResolver,
    ResolvedRelation,
)
from relation_catalog.exceptions import (
    CatalogError,
    TableNotFoundError,
    UnsupportedOperationError,
)
from relation_catalog.models.config import CatalogConfig, ErrorMode
from relation_catalog.models.subquery import Subquery
from relation_catalog.registry.catalog import Catalog
from relation_catalog.registry.empty_catalog import EMPTY_CATALOG, EmptyCatalog
from relation_catalog.registry.override_catalog import OverrideCatalog
from relation_catalog.registry.simple_catalog import SimpleCatalog
from relation_catalog.utils.formatting import format_catalog
from relation_catalog.utils.identifier_utils import (
    dotted_key,
    normalize_identifier,
    pair_key,
    parse_table_identifier,
)
from relation_catalog.utils.warnings import CatalogWarning, WarningCollector

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Catalogs
    "Catalog",
    "SimpleCatalog",
    "OverrideCatalog",
    "EmptyCatalog",
    "EMPTY_CATALOG",
    # Configuration
    "CatalogConfig",
    "ErrorMode",
    # Models
    "Subquery",
    # Identifiers
    "normalize_identifier",
    "dotted_key",
    "pair_key",
    "parse_table_identifier",
    # Analyzer
    "RelationResolver",
    "ResolvedRelation",
    # Reporting
    "format_catalog",
    "CatalogWarning",
    "WarningCollector",
    # Exceptions
    "CatalogError",
    "TableNotFoundError",
    "UnsupportedOperationError",
]
