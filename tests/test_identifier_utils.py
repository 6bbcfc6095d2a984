"""
Tests for identifier utilities.

This module contains tests for identifier normalization, key derivation and
SQL table name parsing.
"""

import pytest

import sqlglot
from sqlglot import expressions

from relation_catalog import CatalogError
from relation_catalog.utils.identifier_utils import (
    dotted_key,
    format_identifier,
    identifier_from_table,
    normalize_identifier,
    pair_key,
    parse_table_identifier,
    to_identifier,
)


class TestNormalizeIdentifier:
    """Tests for normalize_identifier."""

    def test_case_insensitive_lowercases_every_segment(self):
        """Test lowercasing when the policy is case-insensitive."""
        assert normalize_identifier(["Prod", "SALES", "Orders"], False) == (
            "prod",
            "sales",
            "orders",
        )

    def test_case_sensitive_keeps_segments(self):
        """Test that a case-sensitive policy leaves segments unchanged."""
        assert normalize_identifier(["SALES", "Orders"], True) == ("SALES", "Orders")

    @pytest.mark.parametrize("case_sensitive", [True, False])
    @pytest.mark.parametrize(
        "identifier",
        [["T"], ["db", "Tbl"], ["Cat", "DB", "tbl"], ["ÄÖ", "x"]],
    )
    def test_idempotent(self, identifier, case_sensitive):
        """Test that normalizing twice equals normalizing once."""
        once = normalize_identifier(identifier, case_sensitive)
        twice = normalize_identifier(once, case_sensitive)
        assert once == twice

    def test_accepts_tuples(self):
        """Test that any sequence of strings is accepted."""
        assert normalize_identifier(("A",), False) == ("a",)

    def test_rejects_bare_string(self):
        """Test that a string is not mistaken for a list of characters."""
        with pytest.raises(TypeError, match="not a string"):
            normalize_identifier("orders", False)

    def test_rejects_empty_identifier(self):
        """Test that an empty identifier is rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            normalize_identifier([], True)

    def test_rejects_non_string_segment(self):
        """Test that segments must be strings."""
        with pytest.raises(TypeError, match="segments must be strings"):
            to_identifier(["db", 1])


class TestKeyDerivation:
    """Tests for dotted_key and pair_key."""

    def test_dotted_key_single_segment(self):
        assert dotted_key(["orders"]) == "orders"

    def test_dotted_key_two_segments(self):
        assert dotted_key(["sales", "orders"]) == "sales.orders"

    def test_dotted_key_drops_leading_qualifiers(self):
        """Test that only the last two segments are kept."""
        assert dotted_key(["prod", "sales", "orders"]) == "sales.orders"
        assert dotted_key(["a", "b", "c", "d"]) == "c.d"

    def test_pair_key_single_segment(self):
        assert pair_key(["orders"]) == (None, "orders")

    def test_pair_key_two_segments(self):
        assert pair_key(["sales", "orders"]) == ("sales", "orders")

    def test_pair_key_uses_last_two_segments(self):
        assert pair_key(["prod", "sales", "orders"]) == ("sales", "orders")

    def test_format_identifier(self):
        assert format_identifier(["prod", "sales", "orders"]) == "prod.sales.orders"


class TestSqlIdentifiers:
    """Tests for parsing SQL table names with sqlglot."""

    def test_parse_simple_name(self):
        assert parse_table_identifier("orders") == ("orders",)

    def test_parse_qualified_name(self):
        assert parse_table_identifier("prod.sales.orders") == (
            "prod",
            "sales",
            "orders",
        )

    def test_parse_quoted_name_keeps_dots(self):
        """Test that dots inside quotes do not split segments."""
        assert parse_table_identifier('"my.schema".orders') == ("my.schema", "orders")

    def test_parse_with_dialect(self):
        """Test dialect-specific quoting."""
        assert parse_table_identifier("`My Db`.orders", dialect="spark") == (
            "My Db",
            "orders",
        )

    def test_parse_empty_name_raises_error(self):
        with pytest.raises(CatalogError, match="cannot be empty"):
            parse_table_identifier("   ")

    def test_identifier_from_table_node(self):
        """Test extracting an identifier from a parsed query."""
        ast = sqlglot.parse_one("SELECT * FROM sales.orders AS o")
        table_node = ast.find(expressions.Table)

        assert identifier_from_table(table_node) == ("sales", "orders")

    def test_identifier_from_non_table_raises_error(self):
        with pytest.raises(TypeError, match="Expected a sqlglot Table"):
            identifier_from_table(sqlglot.parse_one("SELECT 1"))
