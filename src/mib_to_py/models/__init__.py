"""Pydantic models for compiled MIB module documents.

A compiled MIB module is a YAML or JSON document produced from MIB source by
an SMI compiler. These models are used for:

- Parsing and validating compiled module files
- Type-safe access to nodes and type definitions

Primary Entry Points:
    load_module_definition(path): Load and validate a YAML/JSON file
    ModuleDefinition: Root model for one module

Model Hierarchy:
    ModuleDefinition (root)
    ├── TypeDefinition - named textual conventions (optional)
    │   ├── EnumDefinition - named values (optional)
    │   └── RangeDefinition - value/size ranges (optional)
    └── NodeDefinition - scalars, tables, rows, columns, notifications, ...
"""

from mib_to_py.models.loader import (
    MODULE_FILE_SUFFIXES,
    LoaderError,
    load_module_definition,
    load_yaml_file,
)
from mib_to_py.models.module import ModuleDefinition
from mib_to_py.models.nodes import (
    EMITTED_NODE_KINDS,
    TYPED_NODE_KINDS,
    NodeDefinition,
    NodeKind,
    parse_node_kind,
)
from mib_to_py.models.types import (
    BUILTIN_BASE_TYPES,
    BUILTIN_TYPE_NAMES,
    EnumDefinition,
    RangeDefinition,
    TypeDefinition,
    default_type_name,
)

__all__ = [
    # Loader
    "MODULE_FILE_SUFFIXES",
    "LoaderError",
    "load_module_definition",
    "load_yaml_file",
    # Module
    "ModuleDefinition",
    # Nodes
    "EMITTED_NODE_KINDS",
    "TYPED_NODE_KINDS",
    "NodeDefinition",
    "NodeKind",
    "parse_node_kind",
    # Types
    "BUILTIN_BASE_TYPES",
    "BUILTIN_TYPE_NAMES",
    "EnumDefinition",
    "RangeDefinition",
    "TypeDefinition",
    "default_type_name",
]
