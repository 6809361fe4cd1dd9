"""Schema loader: finds, validates and links compiled MIB modules."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType

from pydantic import ValidationError

from mib_to_py.models.loader import MODULE_FILE_SUFFIXES, LoaderError, load_module_definition
from mib_to_py.models.module import ModuleDefinition
from mib_to_py.models.nodes import NodeDefinition
from mib_to_py.models.types import BUILTIN_BASE_TYPES, TypeDefinition, default_type_name
from mib_to_py.smi.nodes import SmiLookupError, SmiModule, SmiNode, split_reference

logger = logging.getLogger(__name__)

# Search path used when no directory has been appended
DEFAULT_PATHS: tuple[Path, ...] = (Path("."),)


class SchemaLoader:
    """Load compiled MIB modules by name from an ordered search path.

    Loading a module first loads every module it imports, so type and node
    references across modules can be resolved. Loaded modules are kept until
    ``exit()``.

    Usage:
        with SchemaLoader() as loader:
            loader.append_path("compiled-mibs")
            name = loader.load_module("IF-MIB")
            module = loader.get_module(name)
    """

    def __init__(self) -> None:
        """Initialize an empty, not yet started loader."""
        self._paths: list[Path] = []
        self._modules: dict[str, SmiModule] = {}
        self._aliases: dict[str, str] = {}
        self._loading: set[str] = set()
        self._initialized = False

    def __enter__(self) -> SchemaLoader:
        self.init()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.exit()

    def init(self) -> None:
        """Start the loader with the default search path and no modules."""
        self._paths = list(DEFAULT_PATHS)
        self._modules.clear()
        self._aliases.clear()
        self._loading.clear()
        self._initialized = True

    def exit(self) -> None:
        """Release all loaded modules."""
        self._paths = []
        self._modules.clear()
        self._aliases.clear()
        self._loading.clear()
        self._initialized = False

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(self._paths)

    def append_path(self, path: Path | str) -> None:
        """Append a directory to the module search path."""
        self._paths.append(Path(path))

    def set_paths(self, paths: Iterable[Path | str]) -> None:
        """Replace the module search path."""
        self._paths = [Path(p) for p in paths]

    def find_module_file(self, name: str) -> Path | None:
        """Locate the file of a module.

        A name that is itself the path of a module file is used as-is.
        Otherwise every search directory is tried in order with the name as
        given and lower-cased, bare and with each supported extension.
        """
        direct = Path(name)
        if direct.suffix.lower() in MODULE_FILE_SUFFIXES and direct.is_file():
            return direct

        candidates = [name] if name == name.lower() else [name, name.lower()]
        for directory in self._paths:
            for candidate in candidates:
                bare = directory / candidate
                if bare.suffix.lower() in MODULE_FILE_SUFFIXES and bare.is_file():
                    return bare
                for suffix in MODULE_FILE_SUFFIXES:
                    path = directory / f"{candidate}{suffix}"
                    if path.is_file():
                        return path
        return None

    def load_module(self, name: str) -> str:
        """Load a module (and its imports) and return the module's name.

        Args:
        ----
            name: Module name or path of a module file.

        Returns:
        -------
            The name declared by the loaded module.

        Raises:
        ------
            LoaderError: If the module or one of its imports cannot be found,
                parsed, validated or linked.

        """
        if not self._initialized:
            raise LoaderError("Schema loader is not initialized")

        if name in self._aliases:
            return self._aliases[name]

        if name in self._loading:
            raise LoaderError(f"Circular import of module {name}")

        path = self.find_module_file(name)
        if path is None:
            search = ", ".join(str(p) for p in self._paths) or "<empty>"
            raise LoaderError(f"Module not found: {name} (search path: {search})")

        try:
            definition = load_module_definition(path)
        except ValidationError as e:
            raise LoaderError(
                f"Invalid module definition ({e.error_count()} validation errors)", path
            ) from e

        if definition.name in self._modules:
            self._aliases[name] = definition.name
            return definition.name

        self._loading.add(name)
        try:
            for import_name in definition.imports:
                try:
                    self.load_module(import_name)
                except LoaderError as e:
                    raise LoaderError(
                        f"Loading import {import_name} of {definition.name}: {e}", path
                    ) from e
        finally:
            self._loading.discard(name)

        module = self._build_module(definition, path)
        self._modules[definition.name] = module
        self._aliases[definition.name] = definition.name
        self._aliases[name] = definition.name
        logger.debug("Loaded module %s from %s", definition.name, path)
        return definition.name

    def get_module(self, name: str) -> SmiModule:
        """Return a loaded module by name.

        Raises
        ------
            SmiLookupError: If no module of that name has been loaded.

        """
        key = self._aliases.get(name, name)
        try:
            return self._modules[key]
        except KeyError:
            raise SmiLookupError(f"Module {name} is not loaded") from None

    def get_modules(self) -> list[SmiModule]:
        """Return all loaded modules in load order (imports first)."""
        return list(self._modules.values())

    def _build_module(self, definition: ModuleDefinition, path: Path) -> SmiModule:
        """Link a validated definition into a module handle."""
        types = {name: type_def.named(name) for name, type_def in definition.types.items()}
        module = SmiModule(definition, self, types)

        for node_def in definition.nodes:
            node_type = self._resolve_type(node_def, module, path)
            module.add_node(SmiNode(node_def, module, node_type))

        return module

    def _resolve_type(
        self,
        node_def: NodeDefinition,
        module: SmiModule,
        path: Path,
    ) -> TypeDefinition | None:
        """Resolve the type reference of a node.

        Built-in names win over module types, which win over imported types.
        """
        reference = node_def.type
        if reference is None:
            return None

        if isinstance(reference, TypeDefinition):
            if reference.name:
                return reference
            return reference.named(default_type_name(reference.base_type))

        if reference in BUILTIN_BASE_TYPES:
            return TypeDefinition(name=reference, base_type=BUILTIN_BASE_TYPES[reference])

        module_name, type_name = split_reference(reference)
        if module_name is not None:
            search = [module_name]
        else:
            own = module.get_type(type_name)
            if own is not None:
                return own
            search = list(module.imports)

        for import_name in search:
            try:
                imported = self.get_module(import_name)
            except SmiLookupError as e:
                raise LoaderError(
                    f"Type {reference} of node {node_def.name} refers to an unknown module", path
                ) from e
            found = imported.get_type(type_name)
            if found is not None:
                return found

        raise LoaderError(f"Unknown type {reference} for node {node_def.name}", path)
