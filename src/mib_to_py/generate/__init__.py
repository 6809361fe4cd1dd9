"""Emission engine: turn loaded MIB modules into Python bindings source.

Primary Entry Points:
    Generator(options).run(module_names): Full run, writing files or a stream
    ModuleEmitter(type_table).emit(module): Source block of one module
    format_source(source): Syntax check and canonical formatting
"""

from mib_to_py.generate.config import STDOUT_SENTINEL, GenerateOptions
from mib_to_py.generate.errors import (
    DestinationError,
    FormattingError,
    GenerationError,
    InvalidInputError,
    ModuleLookupError,
    SchemaLoadError,
)
from mib_to_py.generate.formatter import LINE_LENGTH, format_source
from mib_to_py.generate.generator import FILE_HEADER, SHARED_TYPES_MODULE, Generator
from mib_to_py.generate.module_emitter import EmittedModule, ModuleEmitter
from mib_to_py.generate.node_encoder import NodeEncoder, classify_node_kind
from mib_to_py.generate.type_table import TypeTable

__all__ = [
    # Config
    "STDOUT_SENTINEL",
    "GenerateOptions",
    # Errors
    "DestinationError",
    "FormattingError",
    "GenerationError",
    "InvalidInputError",
    "ModuleLookupError",
    "SchemaLoadError",
    # Pipeline
    "FILE_HEADER",
    "LINE_LENGTH",
    "SHARED_TYPES_MODULE",
    "EmittedModule",
    "Generator",
    "ModuleEmitter",
    "NodeEncoder",
    "TypeTable",
    "classify_node_kind",
    "format_source",
]
