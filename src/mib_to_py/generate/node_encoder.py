"""Encode nodes as memoized factory declarations."""

from __future__ import annotations

from mib_to_py.generate.errors import InvalidInputError, ModuleLookupError
from mib_to_py.generate.naming import (
    format_module_identifier,
    format_node_var_name,
    render_docstring,
    render_oid,
    render_string,
)
from mib_to_py.generate.type_encoder import (
    INDENT,
    encode_inline_type,
    encode_type_reference,
    indent_lines,
)
from mib_to_py.generate.type_table import TypeTable
from mib_to_py.models.nodes import EMITTED_NODE_KINDS, NodeKind
from mib_to_py.smi.nodes import SmiLookupError, SmiNode

# Class name stem in ``mib_to_py.bindings.models`` per emitted kind
KIND_NAMES: dict[NodeKind, str] = {
    NodeKind.SCALAR: "Scalar",
    NodeKind.TABLE: "Table",
    NodeKind.ROW: "Row",
    NodeKind.COLUMN: "Column",
    NodeKind.NOTIFICATION: "Notification",
}


def classify_node_kind(node: SmiNode) -> NodeKind | None:
    """Return the emitted kind of a node, or None if the node is skipped.

    Only the scalar, table, row, column and notification bits are
    considered.

    Raises
    ------
        InvalidInputError: If more than one of those bits is set.

    """
    kind = NodeKind(node.kind & EMITTED_NODE_KINDS)
    if not kind:
        return None
    if kind not in KIND_NAMES:
        raise InvalidInputError(
            f"Node kind {node.kind!r} sets more than one emitted kind",
            context=f"Encoding node {node.name}",
        )
    return kind


def node_class_name(kind: NodeKind) -> str:
    """Return the bindings class of an emitted kind (``models.ScalarNode``)."""
    return f"models.{KIND_NAMES[kind]}Node"


class NodeEncoder:
    """Encode the nodes of one module.

    Custom types met along the way are registered in the run's type table.
    The encoder also records the other modules and the shared types its
    output refers to, so the caller can import them.

    Usage:
        encoder = NodeEncoder("IF-MIB", type_table)
        source = encoder.encode(node)
    """

    def __init__(
        self,
        module_name: str,
        type_table: TypeTable,
        qualify_foreign: bool = True,
    ) -> None:
        """Initialize the encoder.

        Args:
        ----
            module_name: Name of the module being emitted.
            type_table: Run-scoped shared type registry.
            qualify_foreign: Prefix references to nodes of other modules
                with that module's identifier. Needed when every module
                is written to its own file.

        """
        self._module_name = module_name
        self._type_table = type_table
        self._qualify_foreign = qualify_foreign
        self.foreign_modules: set[str] = set()
        self.shared_types: set[str] = set()

    def encode(self, node: SmiNode) -> str:
        """Encode a node as a ``@cache`` factory returning its bindings object.

        Args:
        ----
            node: Node of an emitted kind.

        Returns:
        -------
            Source text of the factory, followed by two blank lines.

        Raises:
        ------
            InvalidInputError: If the node cannot be emitted.
            ModuleLookupError: If a node reference cannot be resolved.

        """
        kind = classify_node_kind(node)
        if kind is None:
            raise InvalidInputError(
                f"Node kind {node.kind!r} is not emitted", context=f"Encoding node {node.name}"
            )

        try:
            body = self._encode_body(node, kind)
        except SmiLookupError as e:
            raise ModuleLookupError(str(e), context=f"Encoding node {node.name}") from e

        class_name = node_class_name(kind)
        lines = [
            "@cache",
            f"def {format_node_var_name(node.name)}() -> {class_name}:",
            render_docstring(node.description, INDENT),
            f"{INDENT}return {class_name}(",
            *indent_lines(body, 2),
            f"{INDENT})",
        ]
        return "\n".join(lines) + "\n\n\n"

    def _encode_body(self, node: SmiNode, kind: NodeKind) -> list[str]:
        if kind == NodeKind.SCALAR:
            return self._encode_base_node(node, kind) + self._encode_type_content(node)

        if kind == NodeKind.COLUMN:
            return [
                "scalar_node=models.ScalarNode(",
                *indent_lines(self._encode_base_node(node, kind)),
                *indent_lines(self._encode_type_content(node)),
                "),",
            ]

        if kind == NodeKind.TABLE:
            return self._encode_base_node(node, kind) + [
                f"row={self._reference(node.get_row())},"
            ]

        if kind == NodeKind.ROW:
            columns = [f"{self._reference(column)}," for column in node.get_columns()]
            index = [f"{self._reference(column)}," for column in node.get_index()]
            return self._encode_base_node(node, kind) + [
                "columns=(",
                *indent_lines(columns),
                "),",
                "index=(",
                *indent_lines(index),
                "),",
            ]

        objects = [f"{self._object_reference(obj)}," for obj in node.get_notification_objects()]
        return self._encode_base_node(node, kind) + [
            "objects=(",
            *indent_lines(objects),
            "),",
        ]

    def _encode_base_node(self, node: SmiNode, kind: NodeKind) -> list[str]:
        """Encode the identity fields.

        Scalars are addressed through their single instance, so their OID
        gains a trailing ``0``. The node itself is left untouched.
        """
        oid = node.oid
        oid_formatted = node.render_numeric()
        oid_len = node.oid_len
        if kind == NodeKind.SCALAR:
            oid = (*oid, 0)
            oid_formatted += ".0"
            oid_len += 1

        return [
            "base_node=models.BaseNode(",
            f"{INDENT}name={render_string(node.name)},",
            f"{INDENT}oid={render_oid(oid)},",
            f"{INDENT}oid_formatted={render_string(oid_formatted)},",
            f"{INDENT}oid_len={oid_len},",
            "),",
        ]

    def _encode_type_content(self, node: SmiNode) -> list[str]:
        """Encode a built-in type inline, or register and reference a shared one."""
        type_def = node.type
        if type_def is None:
            raise InvalidInputError("Node has no type", context=f"Encoding node {node.name}")

        if type_def.is_builtin:
            return encode_inline_type(type_def)

        reference = encode_type_reference(type_def)
        self._type_table.register(type_def)
        self.shared_types.add(type_def.name or "")
        return [reference]

    def _reference(self, target: SmiNode) -> str:
        """Encode a call to the factory of another node."""
        call = f"{format_node_var_name(target.name)}()"
        if self._qualify_foreign and target.module_name != self._module_name:
            self.foreign_modules.add(target.module_name)
            return f"{format_module_identifier(target.module_name)}.{call}"
        return call

    def _object_reference(self, target: SmiNode) -> str:
        """Encode a notification object as its scalar view."""
        kind = classify_node_kind(target)
        if kind == NodeKind.SCALAR:
            return self._reference(target)
        if kind == NodeKind.COLUMN:
            return f"{self._reference(target)}.scalar_node"
        raise InvalidInputError(
            f"Notification object {target.name} is neither a scalar nor a column",
            context=f"Encoding node {target.name}",
        )
