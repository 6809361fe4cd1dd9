"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from mib_to_py.generate import TypeTable
from mib_to_py.smi import SchemaLoader
from tests.fixtures.sample_mibs import ALL_MIBS, write_module


@pytest.fixture
def mib_dir(tmp_path: Path) -> Path:
    """Return a directory holding every sample module as a YAML file."""
    directory = tmp_path / "compiled"
    directory.mkdir()
    for document in ALL_MIBS:
        write_module(directory, document)
    return directory


@pytest.fixture
def loader(mib_dir: Path) -> Iterator[SchemaLoader]:
    """Return a started schema loader searching the sample module directory."""
    with SchemaLoader() as schema_loader:
        schema_loader.append_path(mib_dir)
        yield schema_loader


@pytest.fixture
def type_table() -> TypeTable:
    """Return an empty type table."""
    return TypeTable()
