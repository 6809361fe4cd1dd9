"""Models for the nodes section of a compiled MIB module."""

from __future__ import annotations

from enum import IntFlag
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, model_validator

from mib_to_py.models.types import TypeDefinition


class NodeKind(IntFlag):
    """Kind of a MIB node.

    Values match the libsmi node kind bits, so a kind can be tested with a
    bitmask (``node.kind & NodeKind.SCALAR``).
    """

    UNKNOWN = 0
    NODE = 1
    SCALAR = 2
    TABLE = 4
    ROW = 8
    COLUMN = 16
    NOTIFICATION = 32
    GROUP = 64
    COMPLIANCE = 128
    CAPABILITIES = 256


# Kinds that produce declarations in generated code
EMITTED_NODE_KINDS = (
    NodeKind.SCALAR | NodeKind.TABLE | NodeKind.ROW | NodeKind.COLUMN | NodeKind.NOTIFICATION
)

# Kinds that carry a type
TYPED_NODE_KINDS = NodeKind.SCALAR | NodeKind.COLUMN


def parse_node_kind(value: Any) -> NodeKind:
    """Parse a node kind given as a name, a list of names or a bitmask.

    Args:
    ----
        value: Input value - str ("scalar"), list of str, int, or NodeKind

    Returns:
    -------
        Parsed NodeKind (possibly with several bits set)

    Raises:
    ------
        ValueError: If a name is unknown or the value has an unsupported type

    Examples:
    --------
        >>> parse_node_kind("scalar")
        <NodeKind.SCALAR: 2>
        >>> parse_node_kind(16)
        <NodeKind.COLUMN: 16>

    """
    if isinstance(value, NodeKind):
        return value

    if isinstance(value, bool):
        raise ValueError(f"Cannot parse bool as node kind: {value}")

    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Node kind must not be negative: {value}")
        return NodeKind(value)

    if isinstance(value, str):
        names: list[Any] = [value]
    elif isinstance(value, (list, tuple)):
        names = list(value)
    else:
        raise ValueError(f"Cannot parse {type(value).__name__} as node kind: {value}")

    kind = NodeKind.UNKNOWN
    for name in names:
        if not isinstance(name, str):
            raise ValueError(f"Node kind names must be strings, got {name!r}")
        try:
            kind |= NodeKind[name.strip().upper()]
        except KeyError as e:
            raise ValueError(f"Unknown node kind: {name}") from e
    return kind


NodeKindField = Annotated[NodeKind, PlainValidator(parse_node_kind)]


class NodeDefinition(BaseModel):
    """A single node of a compiled MIB module.

    References to other nodes (``row``, ``columns``, ``index``, ``objects``)
    are node names, optionally qualified with a module name
    (``IF-MIB::ifIndex``).

    Example:
    -------
        ```yaml
        - name: ifNumber
          kind: scalar
          oid: [1, 3, 6, 1, 2, 1, 2, 1]
          description: The number of network interfaces.
          type: Integer32
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[
        str,
        Field(description="Object descriptor"),
    ]
    kind: NodeKindField
    oid: Annotated[
        list[Annotated[int, Field(ge=0)]],
        Field(
            default_factory=list,
            description="Object identifier sub-identifiers",
        ),
    ]
    description: Annotated[
        str,
        Field(
            default="",
            description="DESCRIPTION clause",
        ),
    ]
    type: Annotated[
        str | TypeDefinition | None,
        Field(
            default=None,
            description="Type reference (name) or inline type definition",
        ),
    ]
    row: Annotated[
        str | None,
        Field(
            default=None,
            description="Row reference of a table (defaults to its child row)",
        ),
    ]
    columns: Annotated[
        list[str] | None,
        Field(
            default=None,
            description="Column references of a row (defaults to its child columns)",
        ),
    ]
    index: Annotated[
        list[str],
        Field(
            default_factory=list,
            description="Index column references of a row",
        ),
    ]
    objects: Annotated[
        list[str],
        Field(
            default_factory=list,
            description="Object references of a notification",
        ),
    ]

    @model_validator(mode="after")
    def validate_type_present(self) -> NodeDefinition:
        """Ensure scalars and columns carry a type."""
        if self.kind & TYPED_NODE_KINDS and self.type is None:
            raise ValueError(f"Node {self.name!r} of kind {self.kind!r} requires a type")
        return self
