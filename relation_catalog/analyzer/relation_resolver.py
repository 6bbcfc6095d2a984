"""
Relation resolver.

This module defines the RelationResolver class, which resolves every table
referenced by a SQL statement against a Catalog, the way an analyzer consults
the catalog while binding relations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import sqlglot
from sqlglot import expressions
from sqlglot.optimizer.scope import traverse_scope

from relation_catalog.exceptions import CatalogError, TableNotFoundError
from relation_catalog.models.config import CatalogConfig, ErrorMode
from relation_catalog.registry.catalog import Catalog
from relation_catalog.utils.identifier_utils import (
    TableIdentifier,
    format_identifier,
    identifier_from_table,
    normalize_identifier,
)
from relation_catalog.utils.warnings import WarningCollector


@dataclass(frozen=True)
class ResolvedRelation:
    """A table reference together with the plan the catalog returned.

    Attributes:
        identifier: Qualified identifier as written in the SQL.
        alias: Alias given to the table in the SQL, if any.
        plan: The qualified plan returned by Catalog.lookup_relation.
    """

    identifier: TableIdentifier
    alias: Optional[str]
    plan: Any


class RelationResolver:
    """Resolves the tables of a SQL statement through a Catalog.

    Attributes:
        catalog: Catalog consulted for every table reference.
        config: CatalogConfig; on_unresolved decides what happens to tables
            the catalog does not know.
        dialect: Optional sqlglot dialect used to parse SQL.
        warnings: WarningCollector recording skipped references.

    Example:
        >>> catalog = SimpleCatalog(case_sensitive=False)
        >>> catalog.register_table(["sales", "orders"], plan)
        >>> resolver = RelationResolver(catalog)
        >>> [r.plan.qualifier for r in resolver.resolve(
        ...     "SELECT o.id FROM sales.orders o"
        ... )]
        ['o']
    """

    def __init__(
        self,
        catalog: Catalog,
        config: Optional[CatalogConfig] = None,
        dialect: Optional[str] = None,
    ) -> None:
        """Initialize a RelationResolver.

        Args:
            catalog: Catalog consulted for every table reference.
            config: Optional configuration; defaults to CatalogConfig().
            dialect: Optional sqlglot dialect name, e.g. "spark".
        """
        self.catalog = catalog
        self.config = config or CatalogConfig()
        self.dialect = dialect
        self.warnings = WarningCollector()

    def resolve(self, sql: str) -> list[ResolvedRelation]:
        """Resolve every table referenced by a SQL statement.

        Tables are collected scope by scope. A reference to a CTE visible in
        its scope is not looked up; CTE names are compared with the
        catalog's case policy.

        Args:
            sql: SQL statement.

        Returns:
            One ResolvedRelation per table reference, in scope
            traversal order (CTE bodies and subqueries before the outer query).
            References skipped under ErrorMode.WARN or ErrorMode.IGNORE are
            left out.

        Raises:
            CatalogError: If the SQL cannot be parsed.
            TableNotFoundError: If a table is not registered and
                on_unresolved is ErrorMode.FAIL.
        """
        ast = self._parse(sql)
        resolved: list[ResolvedRelation] = []

        for table_node in self._table_nodes(ast):
            identifier = identifier_from_table(table_node)
            alias = table_node.alias or None
            try:
                plan = self.catalog.lookup_relation(identifier, alias)
            except TableNotFoundError:
                if self.config.on_unresolved is ErrorMode.FAIL:
                    raise
                if self.config.on_unresolved is ErrorMode.WARN:
                    self.warnings.add_unresolved_warning(
                        format_identifier(identifier), sql
                    )
                continue
            resolved.append(ResolvedRelation(identifier, alias, plan))

        return resolved

    def referenced_tables(self, sql: str) -> list[TableIdentifier]:
        """Return the distinct table identifiers referenced by a statement.

        The catalog is not consulted.

        Raises:
            CatalogError: If the SQL cannot be parsed.
        """
        ast = self._parse(sql)
        identifiers: list[TableIdentifier] = []
        for table_node in self._table_nodes(ast):
            identifier = identifier_from_table(table_node)
            if identifier not in identifiers:
                identifiers.append(identifier)
        return identifiers

    def _parse(self, sql: str) -> expressions.Expression:
        if not sql or not sql.strip():
            raise CatalogError("SQL string cannot be empty")

        try:
            ast = sqlglot.parse_one(sql, read=self.dialect)
        except sqlglot.errors.ParseError as e:
            raise CatalogError(f"SQL parsing error: {str(e)}. SQL: {sql[:200]}") from e

        if ast is None:
            raise CatalogError(f"Failed to parse SQL: {sql[:200]}")
        return ast

    def _table_nodes(self, ast: expressions.Expression) -> list[expressions.Table]:
        """Collect the table references of every scope that name a real table.

        A table is skipped only when its name is a CTE visible in the scope
        that references it, so a CTE body can read a table of the same name.
        """
        nodes = []
        for root in self._query_roots(ast):
            for scope in traverse_scope(root):
                cte_names = {
                    self._fold_name(name) for name in scope.cte_sources
                }
                for table_node in scope.tables:
                    # Table functions and derived tables have no name to look up
                    if not table_node.name:
                        continue
                    if (
                        not table_node.db
                        and self._fold_name(table_node.name) in cte_names
                    ):
                        continue
                    nodes.append(table_node)
        return nodes

    def _fold_name(self, name: str) -> str:
        return normalize_identifier([name], self.catalog.case_sensitive)[0]

    @staticmethod
    def _query_roots(ast: expressions.Expression) -> list[expressions.Expression]:
        # INSERT/CREATE ... AS SELECT: only the query parts are scoped
        if isinstance(ast, expressions.Query):
            return [ast]
        return [
            query
            for query in ast.find_all(expressions.Query)
            if query.find_ancestor(expressions.Query) is None
        ]
