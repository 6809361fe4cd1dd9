"""Drive a generator run: load, emit, format and write."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from mib_to_py.generate.config import GenerateOptions
from mib_to_py.generate.errors import (
    DestinationError,
    FormattingError,
    GenerationError,
    ModuleLookupError,
    SchemaLoadError,
)
from mib_to_py.generate.formatter import format_source
from mib_to_py.generate.module_emitter import EmittedModule, ModuleEmitter
from mib_to_py.generate.naming import format_module_identifier, format_type_var_name
from mib_to_py.generate.type_encoder import encode_shared_type
from mib_to_py.generate.type_table import TypeTable
from mib_to_py.models.loader import LoaderError
from mib_to_py.smi.loader import SchemaLoader
from mib_to_py.smi.nodes import SmiLookupError, SmiModule

logger = logging.getLogger(__name__)

FILE_HEADER = """\
# Code generated by mib-to-py. DO NOT EDIT.
# Package: {package}
from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from mib_to_py.bindings import BaseType, models
"""

# Python module name of the shared types file
SHARED_TYPES_MODULE = "types"

# Separator between blocks written to one stream
BLOCK_SEPARATOR = b"\n\n"


class Generator:
    """Generate Python bindings for a list of MIB modules.

    Modules are processed strictly in the given order. Every module block is
    built and formatted in memory before it is written; the shared types
    block is written last, once every module succeeded. The first error
    aborts the run.

    Usage:
        options = GenerateOptions(out_dir=Path("mibs"), paths=(Path("compiled"),))
        written = Generator(options).run(["IF-MIB", "SNMPv2-MIB"])
    """

    def __init__(
        self,
        options: GenerateOptions,
        loader: SchemaLoader | None = None,
        stdout: BinaryIO | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
        ----
            options: Run options.
            loader: Schema loader to use; a fresh one by default.
            stdout: Stream used for the ``-`` output; the process's standard
                output by default.

        """
        self._options = options
        self._loader = loader or SchemaLoader()
        self._stdout = stdout

    @property
    def options(self) -> GenerateOptions:
        return self._options

    def run(self, module_names: Sequence[str]) -> list[Path]:
        """Generate bindings for the given modules.

        Args:
        ----
            module_names: Module names (or module file paths), in output order.

        Returns:
        -------
            Paths of the files written (empty when writing to standard output).

        Raises:
        ------
            GenerationError: On the first load, lookup, input, formatting or
                destination error.

        """
        options = self._options
        type_table = TypeTable()
        emitter = ModuleEmitter(type_table, qualify_foreign=not options.combined)
        written: list[Path] = []

        with self._loader as loader:
            for path in options.paths:
                loader.append_path(path)

            with self._open_stream() as out:
                for i, arg in enumerate(module_names):
                    module = self._load_module(loader, arg)
                    emitted = self._emit_module(emitter, module)

                    parts: list[str] = []
                    if out is None or i == 0:
                        parts.append(self._header())
                    if out is None:
                        parts.append(self._imports(emitted))
                    parts.append(emitted.source)
                    source = "".join(parts)

                    context = f"Writing module {emitted.name}"
                    if out is None:
                        path = options.out_dir / f"{emitted.identifier}.py"
                        self._write_file(path, source, context)
                        written.append(path)
                    else:
                        self._write_stream(out, source, context, first=i == 0)

                types_parts: list[str] = []
                if out is None:
                    types_parts.append(self._header() + "\n\n")
                types_parts.extend(
                    encode_shared_type(type_def) for type_def in type_table.sorted_types()
                )
                types_source = "".join(types_parts)

                if out is None:
                    path = options.out_dir / f"{SHARED_TYPES_MODULE}.py"
                    self._write_file(path, types_source, "Writing types file")
                    written.append(path)
                else:
                    self._write_stream(
                        out, types_source, "Writing types", first=not module_names
                    )

        return written

    def _header(self) -> str:
        return FILE_HEADER.format(package=self._options.package)

    def _imports(self, emitted: EmittedModule) -> str:
        """Import lines of a per-module file: shared types, then other modules."""
        package = self._options.package
        lines: list[str] = []
        if emitted.shared_types:
            names = ", ".join(format_type_var_name(name) for name in emitted.shared_types)
            lines.append(f"from {package}.{SHARED_TYPES_MODULE} import {names}")
        for module_name in emitted.foreign_modules:
            lines.append(f"from {package} import {format_module_identifier(module_name)}")

        if not lines:
            return "\n\n"
        return "\n" + "\n".join(lines) + "\n\n\n"

    def _load_module(self, loader: SchemaLoader, arg: str) -> SmiModule:
        try:
            module_name = loader.load_module(arg)
        except LoaderError as e:
            raise SchemaLoadError(str(e), context=f"Loading module {arg}") from e

        try:
            return loader.get_module(module_name)
        except SmiLookupError as e:
            raise ModuleLookupError(str(e), context=f"Getting module {module_name}") from e

    def _emit_module(self, emitter: ModuleEmitter, module: SmiModule) -> EmittedModule:
        try:
            return emitter.emit(module)
        except GenerationError as e:
            raise type(e)(str(e), context=f"Generating module {module.name}") from e

    @contextmanager
    def _open_stream(self) -> Iterator[BinaryIO | None]:
        """Open the combined output stream, or yield None for per-module files."""
        options = self._options
        if not options.combined:
            yield None
            return

        if options.to_stdout:
            out = self._stdout or sys.stdout.buffer
            try:
                yield out
            finally:
                out.flush()
            return

        path = Path(options.output or "")
        try:
            if path.parent != Path("."):
                path.parent.mkdir(parents=True, exist_ok=True)
            stream = path.open("wb")
        except OSError as e:
            raise DestinationError(str(e), context=f"Opening file {path}") from e

        logger.info("Outputting to %s", path)
        with stream:
            yield stream

    def _format(self, source: str, context: str) -> bytes:
        try:
            return format_source(source)
        except FormattingError as e:
            raise FormattingError(str(e), context=context) from e

    def _write_file(self, path: Path, source: str, context: str) -> None:
        formatted = self._format(source, context)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as f:
                f.write(formatted)
        except OSError as e:
            raise DestinationError(str(e), context=f"Opening file {path}") from e

        logger.info("Outputting to %s", path)

    def _write_stream(self, out: BinaryIO, source: str, context: str, first: bool) -> None:
        formatted = self._format(source, context)
        if not formatted:
            return

        try:
            if not first:
                out.write(BLOCK_SEPARATOR)
            out.write(formatted)
        except OSError as e:
            raise DestinationError(str(e), context=context) from e
