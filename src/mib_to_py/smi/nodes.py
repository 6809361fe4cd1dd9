"""Read-only handles over loaded modules and their nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mib_to_py.models.nodes import NodeDefinition, NodeKind

if TYPE_CHECKING:
    from mib_to_py.models.module import ModuleDefinition
    from mib_to_py.models.types import TypeDefinition
    from mib_to_py.smi.loader import SchemaLoader

# Separator between module and node name in qualified references
REFERENCE_SEPARATOR = "::"


class SmiLookupError(LookupError):
    """A module, node or reference could not be resolved."""


def split_reference(reference: str) -> tuple[str | None, str]:
    """Split a node reference into its module qualifier and node name.

    Examples
    --------
        >>> split_reference("IF-MIB::ifIndex")
        ('IF-MIB', 'ifIndex')
        >>> split_reference("ifIndex")
        (None, 'ifIndex')

    """
    module_name, sep, name = reference.rpartition(REFERENCE_SEPARATOR)
    if not sep:
        return None, reference
    return module_name, name


class SmiNode:
    """A node of a loaded module.

    Identity fields come straight from the compiled document; references to
    other nodes are resolved on access through the owning module.
    """

    def __init__(
        self,
        definition: NodeDefinition,
        module: SmiModule,
        node_type: TypeDefinition | None,
    ) -> None:
        self._definition = definition
        self._module = module
        self._type = node_type

    def __repr__(self) -> str:
        return f"SmiNode({self.module_name}::{self.name}, kind={self.kind!r})"

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def kind(self) -> NodeKind:
        return self._definition.kind

    @property
    def oid(self) -> tuple[int, ...]:
        return tuple(self._definition.oid)

    @property
    def oid_len(self) -> int:
        return len(self._definition.oid)

    @property
    def description(self) -> str:
        return self._definition.description

    @property
    def type(self) -> TypeDefinition | None:
        """Resolved type of a scalar or column, None for other kinds."""
        return self._type

    @property
    def module(self) -> SmiModule:
        return self._module

    @property
    def module_name(self) -> str:
        return self._module.name

    def render_numeric(self) -> str:
        """Render the OID in dotted numeric form (``1.3.6.1``)."""
        return ".".join(str(sub_id) for sub_id in self._definition.oid)

    def is_child_of(self, parent: SmiNode) -> bool:
        """Check whether this node sits directly below another node."""
        return self.oid_len == parent.oid_len + 1 and self.oid[:-1] == parent.oid

    def get_row(self) -> SmiNode:
        """Return the row of a table.

        Uses the explicit ``row`` reference, or else the first row directly
        below the table.

        Raises
        ------
            SmiLookupError: If no row can be found.

        """
        if self._definition.row is not None:
            return self._module.resolve_node(self._definition.row)

        for node in self._module.get_nodes():
            if node.kind & NodeKind.ROW and node.is_child_of(self):
                return node
        raise SmiLookupError(f"Table {self.name} has no row")

    def get_columns(self) -> list[SmiNode]:
        """Return the columns of a row in declared order.

        Uses the explicit ``columns`` list, or else the columns directly
        below the row in module order.
        """
        if self._definition.columns is not None:
            return [self._module.resolve_node(ref) for ref in self._definition.columns]

        return [
            node
            for node in self._module.get_nodes()
            if node.kind & NodeKind.COLUMN and node.is_child_of(self)
        ]

    def get_index(self) -> list[SmiNode]:
        """Return the index columns of a row in declared order."""
        return [self._module.resolve_node(ref) for ref in self._definition.index]

    def get_notification_objects(self) -> list[SmiNode]:
        """Return the objects of a notification in declared order."""
        return [self._module.resolve_node(ref) for ref in self._definition.objects]


class SmiModule:
    """A loaded module.

    Usage:
        module = loader.get_module("IF-MIB")
        for node in module.get_nodes():
            print(node.name, node.render_numeric())
    """

    def __init__(
        self,
        definition: ModuleDefinition,
        loader: SchemaLoader,
        types: dict[str, TypeDefinition],
    ) -> None:
        self._definition = definition
        self._loader = loader
        self._types = types
        self._nodes: list[SmiNode] = []
        self._nodes_by_name: dict[str, SmiNode] = {}

    def __repr__(self) -> str:
        return f"SmiModule({self.name}, nodes={len(self._nodes)})"

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def description(self) -> str:
        return self._definition.description

    @property
    def imports(self) -> tuple[str, ...]:
        return tuple(self._definition.imports)

    @property
    def types(self) -> dict[str, TypeDefinition]:
        """Named types defined by this module, keyed by name."""
        return dict(self._types)

    def add_node(self, node: SmiNode) -> None:
        """Append a node. Only the loader calls this while building the module."""
        self._nodes.append(node)
        self._nodes_by_name[node.name] = node

    def get_nodes(self) -> list[SmiNode]:
        """Return all nodes in module order."""
        return list(self._nodes)

    def get_node(self, name: str) -> SmiNode:
        """Return a node of this module by name.

        Raises
        ------
            SmiLookupError: If the module has no such node.

        """
        try:
            return self._nodes_by_name[name]
        except KeyError:
            raise SmiLookupError(f"Node {name} not found in module {self.name}") from None

    def get_type(self, name: str) -> TypeDefinition | None:
        """Return a named type of this module, if defined."""
        return self._types.get(name)

    def resolve_node(self, reference: str) -> SmiNode:
        """Resolve a node reference made from within this module.

        Qualified references (``MODULE::name``) go straight to the named
        module. Bare names are looked up in this module first, then in the
        imported modules in import order.

        Raises
        ------
            SmiLookupError: If the reference cannot be resolved.

        """
        module_name, name = split_reference(reference)
        if module_name is not None:
            return self._loader.get_module(module_name).get_node(name)

        if name in self._nodes_by_name:
            return self._nodes_by_name[name]

        for import_name in self._definition.imports:
            try:
                return self._loader.get_module(import_name).get_node(name)
            except SmiLookupError:
                continue

        raise SmiLookupError(f"Cannot resolve node {reference} from module {self.name}")
