"""Tests for module and node handles."""

from __future__ import annotations

import pytest

from mib_to_py.models import NodeKind
from mib_to_py.smi import SchemaLoader, SmiLookupError, SmiModule, split_reference


@pytest.fixture
def status_module(loader: SchemaLoader) -> SmiModule:
    """Return the loaded TEST-STATUS-MIB module."""
    return loader.get_module(loader.load_module("TEST-STATUS-MIB"))


class TestSplitReference:
    """Tests for split_reference."""

    def test_bare(self) -> None:
        """Should return no module for a bare name."""
        assert split_reference("ifIndex") == (None, "ifIndex")

    def test_qualified(self) -> None:
        """Should split a qualified name."""
        assert split_reference("IF-MIB::ifIndex") == ("IF-MIB", "ifIndex")


class TestSmiModule:
    """Tests for SmiModule."""

    def test_fields(self, status_module: SmiModule) -> None:
        """Should expose name, description and imports."""
        assert status_module.name == "TEST-STATUS-MIB"
        assert status_module.description.startswith("Port status")
        assert status_module.imports == ("TEST-TABLE-MIB",)
        assert list(status_module.types) == ["PortStatus"]

    def test_nodes_in_module_order(self, status_module: SmiModule) -> None:
        """Should keep the document's node order."""
        assert [node.name for node in status_module.get_nodes()] == [
            "statusTable",
            "statusEntry",
            "statusOper",
            "statusSpeed",
            "statusLastPort",
            "statusChange",
            "statusGroup",
        ]

    def test_get_node_unknown(self, status_module: SmiModule) -> None:
        """Should raise a lookup error for unknown nodes."""
        with pytest.raises(SmiLookupError, match="noSuchNode"):
            status_module.get_node("noSuchNode")

    def test_resolve_own_node(self, status_module: SmiModule) -> None:
        """Should resolve bare names in the module first."""
        assert status_module.resolve_node("statusOper").module_name == "TEST-STATUS-MIB"

    def test_resolve_imported_node(self, status_module: SmiModule) -> None:
        """Should fall back to imported modules."""
        assert status_module.resolve_node("portIndex").module_name == "TEST-TABLE-MIB"

    def test_resolve_qualified_node(self, status_module: SmiModule) -> None:
        """Should resolve qualified references directly."""
        node = status_module.resolve_node("TEST-TABLE-MIB::portEntry")
        assert node.kind == NodeKind.ROW

    def test_resolve_unknown(self, status_module: SmiModule) -> None:
        """Should raise a lookup error for unresolvable references."""
        with pytest.raises(SmiLookupError, match="Cannot resolve node nowhere"):
            status_module.resolve_node("nowhere")


class TestSmiNode:
    """Tests for SmiNode."""

    def test_identity(self, status_module: SmiModule) -> None:
        """Should expose the OID as given in the document."""
        node = status_module.get_node("statusLastPort")
        assert node.oid == (1, 3, 6, 1, 4, 1, 99999, 3, 2)
        assert node.oid_len == 9
        assert node.render_numeric() == "1.3.6.1.4.1.99999.3.2"
        assert node.kind == NodeKind.SCALAR
        assert node.description == "Port that changed last."

    def test_is_child_of(self, status_module: SmiModule) -> None:
        """Should only accept direct children."""
        table = status_module.get_node("statusTable")
        entry = status_module.get_node("statusEntry")
        column = status_module.get_node("statusOper")
        assert entry.is_child_of(table)
        assert not column.is_child_of(table)
        assert not table.is_child_of(entry)

    def test_row_from_children(self, status_module: SmiModule) -> None:
        """Should find the row below a table without explicit row."""
        assert status_module.get_node("statusTable").get_row().name == "statusEntry"

    def test_explicit_row(self, loader: SchemaLoader) -> None:
        """Should use the explicit row reference."""
        module = loader.get_module(loader.load_module("TEST-TABLE-MIB"))
        assert module.get_node("portTable").get_row().name == "portEntry"

    def test_missing_row(self, status_module: SmiModule) -> None:
        """Should raise a lookup error for a table without row."""
        with pytest.raises(SmiLookupError, match="has no row"):
            status_module.get_node("statusGroup").get_row()

    def test_columns_from_children(self, status_module: SmiModule) -> None:
        """Should list child columns in module order."""
        columns = status_module.get_node("statusEntry").get_columns()
        assert [column.name for column in columns] == ["statusOper", "statusSpeed"]

    def test_index_in_other_module(self, status_module: SmiModule) -> None:
        """Should resolve index columns of imported modules."""
        index = status_module.get_node("statusEntry").get_index()
        assert [(column.module_name, column.name) for column in index] == [
            ("TEST-TABLE-MIB", "portIndex")
        ]

    def test_notification_objects(self, status_module: SmiModule) -> None:
        """Should resolve notification objects in declared order."""
        objects = status_module.get_node("statusChange").get_notification_objects()
        assert [obj.name for obj in objects] == ["statusOper", "portIndex", "statusLastPort"]
