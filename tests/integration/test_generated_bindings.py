"""End-to-end tests: generate bindings, then import and use them."""

from __future__ import annotations

import importlib
import inspect
import io
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from mib_to_py.bindings import BaseType, models
from mib_to_py.generate import GenerateOptions, Generator
from tests.fixtures.sample_mibs import DOC_TEXT, ENTERPRISE, exec_generated


@pytest.fixture
def package_name(tmp_path: Path) -> Iterator[str]:
    """Return a package name unique to the test and unload it afterwards."""
    name = f"generated_{tmp_path.name}".replace("-", "_")
    yield name
    for module_name in list(sys.modules):
        if module_name == name or module_name.startswith(f"{name}."):
            del sys.modules[module_name]


class TestGeneratedPackage:
    """Per-module files imported as a package."""

    def test_cross_module_references(
        self,
        mib_dir: Path,
        tmp_path: Path,
        package_name: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should resolve imported index columns and shared types across files."""
        options = GenerateOptions(
            out_dir=tmp_path / package_name, package=package_name, paths=(mib_dir,)
        )
        Generator(options).run(["TEST-TABLE-MIB", "TEST-STATUS-MIB"])
        monkeypatch.syspath_prepend(str(tmp_path))

        status = importlib.import_module(f"{package_name}.test_status_mib")
        table = importlib.import_module(f"{package_name}.test_table_mib")
        shared = importlib.import_module(f"{package_name}.types")

        entry = status.TestStatusMib().StatusEntry
        assert entry.index == (table.portIndexNode(),)
        assert entry.index[0].type is shared.PortIndexType()
        assert status.statusLastPortNode().type is shared.PortIndexType()
        assert status.TestStatusMib().StatusOper.scalar_node.type is shared.PortStatusType()

    def test_node_values(
        self,
        mib_dir: Path,
        tmp_path: Path,
        package_name: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should carry names, OIDs, descriptions and types of the source nodes."""
        options = GenerateOptions(
            out_dir=tmp_path / package_name, package=package_name, paths=(mib_dir,)
        )
        Generator(options).run(["TEST-TABLE-MIB", "TEST-STATUS-MIB"])
        monkeypatch.syspath_prepend(str(tmp_path))

        generated = importlib.import_module(f"{package_name}.test_status_mib")
        status = generated.TestStatusMib()

        speed = status.StatusSpeed.scalar_node
        assert speed.base_node.oid == (*ENTERPRISE, 3, 1, 1, 2)
        assert speed.base_node.oid_len == len(ENTERPRISE) + 4
        assert inspect.getdoc(generated.statusSpeedNode) == "Speed in bits per second."
        assert speed.type == models.Type(
            base_type=BaseType.Unsigned32, name="Unsigned32", units="bits per second"
        )

        last_port = status.StatusLastPort
        assert last_port.base_node.oid == (*ENTERPRISE, 3, 2, 0)
        assert last_port.base_node.oid_formatted == ".".join(
            str(sub_id) for sub_id in (*ENTERPRISE, 3, 2, 0)
        )

        change = status.StatusChange
        assert isinstance(change, models.NotificationNode)
        assert [obj.name for obj in change.objects] == [
            "statusOper",
            "portIndex",
            "statusLastPort",
        ]

    def test_repeated_calls_share_values(
        self,
        mib_dir: Path,
        tmp_path: Path,
        package_name: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should return the same objects on every call."""
        options = GenerateOptions(
            out_dir=tmp_path / package_name, package=package_name, paths=(mib_dir,)
        )
        Generator(options).run(["TEST-TABLE-MIB"])
        monkeypatch.syspath_prepend(str(tmp_path))

        table = importlib.import_module(f"{package_name}.test_table_mib")
        assert table.TestTableMib() is table.TestTableMib()
        assert table.portTableNode().row is table.portEntryNode()


class TestGeneratedStream:
    """All modules combined into one formatted stream."""

    def test_formatted_docstrings(self, mib_dir: Path) -> None:
        """Should keep awkward descriptions intact after formatting."""
        stdout = io.BytesIO()
        options = GenerateOptions(output="-", paths=(mib_dir,))
        Generator(options, stdout=stdout).run(["TEST-DOC-MIB"])

        module = exec_generated(stdout.getvalue().decode("utf-8"))
        assert inspect.getdoc(module.TestDocMibModule) == inspect.cleandoc(DOC_TEXT)
        assert inspect.getdoc(module.docNoteNode) == inspect.cleandoc(DOC_TEXT)

    def test_all_modules(self, mib_dir: Path) -> None:
        """Should combine every well-formed sample module into one namespace."""
        stdout = io.BytesIO()
        options = GenerateOptions(output="-", paths=(mib_dir,))
        Generator(options, stdout=stdout).run(
            [
                "TEST-SCALAR-MIB",
                "TEST-TABLE-MIB",
                "TEST-STATUS-MIB",
                "TEST-DOC-MIB",
                "TEST-DUP-A-MIB",
                "TEST-DUP-B-MIB",
            ]
        )

        module = exec_generated(stdout.getvalue().decode("utf-8"))
        assert module.TestScalarMib().SysDescr.base_node.name == "sysDescr"
        assert module.TestDupBMib().DupBName.type.format == "255a"
