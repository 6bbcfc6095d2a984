"""
Tests for configuration, the qualifier wrapper and warning collection.
"""

import pytest

from relation_catalog import (
    CatalogConfig,
    CatalogWarning,
    ErrorMode,
    Subquery,
    TableNotFoundError,
    WarningCollector,
)


class TestCatalogConfig:
    """Tests for CatalogConfig."""

    def test_defaults(self):
        config = CatalogConfig()

        assert config.on_redefinition is ErrorMode.IGNORE
        assert config.on_unresolved is ErrorMode.FAIL

    def test_redefinition_cannot_fail(self):
        """Test that last-write-wins cannot be turned into an error."""
        with pytest.raises(ValueError, match="cannot be ErrorMode.FAIL"):
            CatalogConfig(on_redefinition=ErrorMode.FAIL)

    def test_type_validation(self):
        with pytest.raises(TypeError, match="on_unresolved must be an ErrorMode"):
            CatalogConfig(on_unresolved="warn")

    def test_error_mode_values(self):
        assert ErrorMode.values() == ["fail", "warn", "ignore"]


class TestSubquery:
    """Tests for the qualifier-rename wrapper."""

    def test_qualifier_and_unwrap(self):
        plan = object()
        relation = Subquery("o", Subquery("orders", plan))

        assert relation.qualifier == "o"
        assert relation.qualifiers() == ["o", "orders"]
        assert relation.unwrap() is plan

    def test_equality(self):
        assert Subquery("t", "plan") == Subquery("t", "plan")
        assert Subquery("t", "plan") != Subquery("u", "plan")

    def test_empty_alias_rejected(self):
        with pytest.raises(ValueError, match="alias cannot be empty"):
            Subquery("", "plan")


class TestWarningCollector:
    """Tests for WarningCollector."""

    def test_collect_and_summarize(self):
        collector = WarningCollector()
        collector.add_redefinition_warning("sales.orders")
        collector.add_redefinition_warning("t", level="INFO")
        collector.add("ERROR", "broken")

        assert collector.has_errors()
        assert collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 1}

        collector.clear()
        assert collector.get_all() == []

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid warning level"):
            CatalogWarning(level="DEBUG", message="x")


class TestExceptions:
    """Tests for exception attributes."""

    def test_table_not_found_message(self):
        err = TableNotFoundError("sales.orders")

        assert err.full_name == "sales.orders"
        assert err.message == "Table Not Found: sales.orders"
