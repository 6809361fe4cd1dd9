"""Schema loader for compiled MIB modules.

The loader resolves module names against an ordered search path, validates
the module documents, loads imported modules first and exposes the result
through read-only handles:

    SchemaLoader: init/exit lifecycle, search path, load-by-name
    SmiModule: a loaded module and its nodes in module order
    SmiNode: identity fields, resolved type and node references
"""

from mib_to_py.smi.loader import DEFAULT_PATHS, SchemaLoader
from mib_to_py.smi.nodes import (
    REFERENCE_SEPARATOR,
    SmiLookupError,
    SmiModule,
    SmiNode,
    split_reference,
)

__all__ = [
    "DEFAULT_PATHS",
    "REFERENCE_SEPARATOR",
    "SchemaLoader",
    "SmiLookupError",
    "SmiModule",
    "SmiNode",
    "split_reference",
]
