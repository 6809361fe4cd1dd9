"""Emit the source block of one loaded module."""

from __future__ import annotations

from dataclasses import dataclass

from mib_to_py.generate.errors import InvalidInputError
from mib_to_py.generate.naming import (
    MODULE_TYPE_SUFFIX,
    format_module_identifier,
    format_module_name,
    format_node_name,
    format_node_var_name,
    render_docstring,
)
from mib_to_py.generate.node_encoder import NodeEncoder, classify_node_kind, node_class_name
from mib_to_py.generate.type_encoder import INDENT
from mib_to_py.generate.type_table import TypeTable
from mib_to_py.models.nodes import NodeKind
from mib_to_py.smi.nodes import SmiModule, SmiNode


@dataclass(frozen=True)
class EmittedModule:
    """Source block of one module and what it refers to.

    Attributes
    ----------
        name: MIB module name.
        identifier: Python module name of the module's own file.
        source: Unformatted source block (no file header).
        foreign_modules: Other MIB modules referenced, sorted.
        shared_types: Shared type names referenced, sorted.

    """

    name: str
    identifier: str
    source: str
    foreign_modules: tuple[str, ...] = ()
    shared_types: tuple[str, ...] = ()


class ModuleEmitter:
    """Emit a module as (a) a dataclass, (b) its aggregate factory, (c) node factories.

    Nodes of kinds other than scalar, table, row, column and notification
    are skipped. All three parts list nodes in module order.

    Usage:
        type_table = TypeTable()
        emitted = ModuleEmitter(type_table).emit(loader.get_module("IF-MIB"))
    """

    def __init__(self, type_table: TypeTable, qualify_foreign: bool = True) -> None:
        """Initialize the emitter.

        Args:
        ----
            type_table: Run-scoped shared type registry.
            qualify_foreign: Qualify references into other modules (set when
                modules are written to separate files).

        """
        self._type_table = type_table
        self._qualify_foreign = qualify_foreign

    def emit(self, module: SmiModule) -> EmittedModule:
        """Emit one module.

        Args:
        ----
            module: The loaded module.

        Returns:
        -------
            EmittedModule with the unformatted source block.

        Raises:
        ------
            InvalidInputError: If an identifier is empty or a kind ambiguous.
            ModuleLookupError: If a node reference cannot be resolved.

        """
        module_name = format_module_name(module.name)
        nodes = self._emitted_nodes(module)

        encoder = NodeEncoder(module.name, self._type_table, self._qualify_foreign)
        parts = [
            self._emit_type_declaration(module, module_name, nodes),
            self._emit_aggregate(module_name, nodes),
        ]
        parts.extend(encoder.encode(node) for node, _ in nodes)

        return EmittedModule(
            name=module.name,
            identifier=format_module_identifier(module.name),
            source="".join(parts),
            foreign_modules=tuple(sorted(encoder.foreign_modules)),
            shared_types=tuple(sorted(encoder.shared_types)),
        )

    def _emitted_nodes(self, module: SmiModule) -> list[tuple[SmiNode, NodeKind]]:
        """Return the emitted nodes with their kind, in module order.

        Raises
        ------
            InvalidInputError: If a name is empty, or two names map to the same
                field (they differ only in the case of the first letter).

        """
        nodes: list[tuple[SmiNode, NodeKind]] = []
        fields: dict[str, str] = {}
        for node in module.get_nodes():
            kind = classify_node_kind(node)
            if kind is None:
                continue
            if not node.name:
                raise InvalidInputError("Empty node name", context=f"Emitting module {module.name}")
            field = format_node_name(node.name)
            if field in fields:
                raise InvalidInputError(
                    f"Nodes {fields[field]} and {node.name} both map to field {field}",
                    context=f"Emitting module {module.name}",
                )
            fields[field] = node.name
            nodes.append((node, kind))
        return nodes

    def _emit_type_declaration(
        self,
        module: SmiModule,
        module_name: str,
        nodes: list[tuple[SmiNode, NodeKind]],
    ) -> str:
        lines = [
            "@dataclass(frozen=True)",
            f"class {module_name}{MODULE_TYPE_SUFFIX}:",
            render_docstring(module.description, INDENT),
        ]
        if nodes:
            lines.append("")
        lines.extend(
            f"{INDENT}{format_node_name(node.name)}: {node_class_name(kind)}"
            for node, kind in nodes
        )
        return "\n".join(lines) + "\n\n\n"

    def _emit_aggregate(self, module_name: str, nodes: list[tuple[SmiNode, NodeKind]]) -> str:
        lines = [
            "@cache",
            f"def {module_name}() -> {module_name}{MODULE_TYPE_SUFFIX}:",
            f"{INDENT}return {module_name}{MODULE_TYPE_SUFFIX}(",
        ]
        lines.extend(
            f"{INDENT * 2}{format_node_name(node.name)}={format_node_var_name(node.name)}(),"
            for node, _ in nodes
        )
        lines.append(f"{INDENT})")
        return "\n".join(lines) + "\n\n\n"
