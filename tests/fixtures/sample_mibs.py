"""Sample compiled MIB documents for testing.

Each constant is the parsed form of one compiled module file. ``write_module``
stores a document under the module's name so the schema loader can find it.
"""

from __future__ import annotations

import json
import types
from pathlib import Path
from typing import Any

import yaml

from mib_to_py.generate import FILE_HEADER

ENTERPRISE = [1, 3, 6, 1, 4, 1, 99999]

# One scalar of a built-in type, plus an intermediate node that is skipped
SCALAR_MIB: dict[str, Any] = {
    "name": "TEST-SCALAR-MIB",
    "description": "A module with a single scalar.",
    "nodes": [
        {"name": "testScalars", "kind": "node", "oid": [*ENTERPRISE, 1]},
        {
            "name": "sysDescr",
            "kind": "scalar",
            "oid": [*ENTERPRISE, 1, 1],
            "description": "A textual description of the entity.",
            "type": "OctetString",
        },
    ],
}

# A table whose only column is also its index and uses a custom type
TABLE_MIB: dict[str, Any] = {
    "name": "TEST-TABLE-MIB",
    "description": "A module with one table.",
    "types": {
        "PortIndex": {
            "base_type": "Integer32",
            "format": "d",
            "ranges": [{"base_type": "Integer32", "min": 1, "max": 4096}],
        },
    },
    "nodes": [
        {
            "name": "portTable",
            "kind": "table",
            "oid": [*ENTERPRISE, 2, 1],
            "description": "A list of ports.",
            "row": "portEntry",
        },
        {
            "name": "portEntry",
            "kind": "row",
            "oid": [*ENTERPRISE, 2, 1, 1],
            "description": "An entry of the port table.",
            "columns": ["portIndex"],
            "index": ["portIndex"],
        },
        {
            "name": "portIndex",
            "kind": "column",
            "oid": [*ENTERPRISE, 2, 1, 1, 1],
            "description": "A unique port number.",
            "type": "PortIndex",
        },
    ],
}

# Imports TEST-TABLE-MIB: foreign index column, imported type, notification,
# an enumeration listed out of order and a group node that is skipped
STATUS_MIB: dict[str, Any] = {
    "name": "TEST-STATUS-MIB",
    "description": "Port status, indexed by the port table.",
    "imports": ["TEST-TABLE-MIB"],
    "types": {
        "PortStatus": {
            "base_type": "Enum",
            "enum": {"base_type": "Enum", "values": {3: "testing", 1: "up", 2: "down"}},
        },
    },
    "nodes": [
        {
            "name": "statusTable",
            "kind": "table",
            "oid": [*ENTERPRISE, 3, 1],
            "description": "Port status table.",
        },
        {
            "name": "statusEntry",
            "kind": "row",
            "oid": [*ENTERPRISE, 3, 1, 1],
            "description": "Status of one port.",
            "index": ["TEST-TABLE-MIB::portIndex"],
        },
        {
            "name": "statusOper",
            "kind": "column",
            "oid": [*ENTERPRISE, 3, 1, 1, 1],
            "description": "Operational status.",
            "type": "PortStatus",
        },
        {
            "name": "statusSpeed",
            "kind": "column",
            "oid": [*ENTERPRISE, 3, 1, 1, 2],
            "description": "Speed in bits per second.",
            "type": {"base_type": "Unsigned32", "units": "bits per second"},
        },
        {
            "name": "statusLastPort",
            "kind": "scalar",
            "oid": [*ENTERPRISE, 3, 2],
            "description": "Port that changed last.",
            "type": "PortIndex",
        },
        {
            "name": "statusChange",
            "kind": "notification",
            "oid": [*ENTERPRISE, 3, 0, 1],
            "description": "The status of a port changed.",
            "objects": ["statusOper", "portIndex", "statusLastPort"],
        },
        {
            "name": "statusGroup",
            "kind": "group",
            "oid": [*ENTERPRISE, 3, 3],
            "description": "Conformance group.",
        },
    ],
}

# Documentation that would break a naive docstring
DOC_TEXT = 'First line.\nSays """hi""" and uses C:\\temp\\new paths.\n  Indented detail.'

DOC_MIB: dict[str, Any] = {
    "name": "TEST-DOC-MIB",
    "description": DOC_TEXT,
    "nodes": [
        {
            "name": "docNote",
            "kind": "scalar",
            "oid": [*ENTERPRISE, 4, 1],
            "description": DOC_TEXT,
            "type": "OctetString",
        },
    ],
}

# Two modules defining different shapes under the same type name
DUP_A_MIB: dict[str, Any] = {
    "name": "TEST-DUP-A-MIB",
    "types": {"DisplayString": {"base_type": "OctetString", "format": "255a"}},
    "nodes": [
        {
            "name": "dupAName",
            "kind": "scalar",
            "oid": [*ENTERPRISE, 5, 1],
            "type": "DisplayString",
        },
    ],
}

DUP_B_MIB: dict[str, Any] = {
    "name": "TEST-DUP-B-MIB",
    "types": {"DisplayString": {"base_type": "OctetString", "format": "100a"}},
    "nodes": [
        {
            "name": "dupBName",
            "kind": "scalar",
            "oid": [*ENTERPRISE, 6, 1],
            "type": "DisplayString",
        },
    ],
}

# A node claiming two emitted kinds at once
AMBIGUOUS_MIB: dict[str, Any] = {
    "name": "TEST-AMBIGUOUS-MIB",
    "nodes": [
        {
            "name": "confused",
            "kind": ["scalar", "column"],
            "oid": [*ENTERPRISE, 7, 1],
            "type": "Integer32",
        },
    ],
}

# A row whose index names a node that does not exist
BROKEN_REF_MIB: dict[str, Any] = {
    "name": "TEST-BROKEN-MIB",
    "nodes": [
        {
            "name": "brokenEntry",
            "kind": "row",
            "oid": [*ENTERPRISE, 8, 1, 1],
            "index": ["noSuchColumn"],
        },
    ],
}

ALL_MIBS: list[dict[str, Any]] = [
    SCALAR_MIB,
    TABLE_MIB,
    STATUS_MIB,
    DOC_MIB,
    DUP_A_MIB,
    DUP_B_MIB,
    AMBIGUOUS_MIB,
    BROKEN_REF_MIB,
]


def write_module(directory: Path, document: dict[str, Any], suffix: str = ".yaml") -> Path:
    """Write a module document to ``<directory>/<name><suffix>``."""
    path = directory / f"{document['name']}{suffix}"
    if suffix == ".json":
        path.write_text(json.dumps(document, indent=2))
    else:
        path.write_text(yaml.safe_dump(document, sort_keys=False))
    return path


def exec_generated(source: str, module_name: str = "generated_bindings") -> types.ModuleType:
    """Execute generated source and return the resulting module object."""
    module = types.ModuleType(module_name)
    exec(compile(source, f"<{module_name}>", "exec"), module.__dict__)
    return module


def with_header(source: str, package: str = "mibs") -> str:
    """Prefix an emitted block with the generated file header."""
    return FILE_HEADER.format(package=package) + "\n\n" + source
