"""Runtime models instantiated by generated MIB bindings.

Generated modules only ever construct these frozen dataclasses, so the
bindings have no dependency on the loader or on the generator itself.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field


class BaseType(str, enum.Enum):
    """Primitive representation underlying every SMI type.

    Member names equal their values so generated code reads like the SMI
    source (``BaseType.Integer32``).
    """

    Unknown = "Unknown"
    Integer32 = "Integer32"
    OctetString = "OctetString"
    ObjectIdentifier = "ObjectIdentifier"
    Unsigned32 = "Unsigned32"
    Integer64 = "Integer64"
    Unsigned64 = "Unsigned64"
    Float32 = "Float32"
    Float64 = "Float64"
    Float128 = "Float128"
    Enum = "Enum"
    Bits = "Bits"
    Pointer = "Pointer"


@dataclass(frozen=True)
class Range:
    """An allowed value (or size) range of a type.

    Attributes
    ----------
        base_type: Base type the bounds are expressed in.
        min_value: Lower bound (inclusive).
        max_value: Upper bound (inclusive).

    """

    base_type: BaseType
    min_value: int | float
    max_value: int | float

    def __contains__(self, value: object) -> bool:
        """Check whether a number lies within the bounds."""
        if not isinstance(value, (int, float)):
            return False
        return self.min_value <= value <= self.max_value


@dataclass(frozen=True)
class Enum:
    """Named values of an enumerated or BITS type.

    Attributes
    ----------
        base_type: Base type of the enumeration itself.
        values: Mapping of integer value to its label.

    """

    base_type: BaseType
    values: Mapping[int, str] = field(default_factory=dict)

    def name(self, value: int) -> str | None:
        """Return the label for a value, if defined."""
        return self.values.get(value)

    def value(self, name: str) -> int | None:
        """Return the value carrying a label, if defined."""
        for key, label in self.values.items():
            if label == name:
                return key
        return None


@dataclass(frozen=True)
class Type:
    """An SMI type as seen by a scalar or column.

    Attributes
    ----------
        base_type: Primitive classification.
        name: Type name (built-in or textual convention).
        enum: Named values, for enumerations and BITS.
        ranges: Value or size ranges, in declaration order.
        format: DISPLAY-HINT format string.
        units: UNITS clause.

    """

    base_type: BaseType
    name: str = ""
    enum: Enum | None = None
    ranges: tuple[Range, ...] = ()
    format: str = ""
    units: str = ""


@dataclass(frozen=True)
class BaseNode:
    """Identity fields shared by every node kind."""

    name: str
    oid: tuple[int, ...]
    oid_formatted: str
    oid_len: int


@dataclass(frozen=True)
class ScalarNode:
    """A single-instance object. Its OID addresses the instance (``.0``)."""

    base_node: BaseNode
    type: Type

    @property
    def name(self) -> str:
        return self.base_node.name

    @property
    def oid(self) -> tuple[int, ...]:
        return self.base_node.oid


@dataclass(frozen=True)
class ColumnNode:
    """A column of a conceptual table, carrying a scalar-shaped view."""

    scalar_node: ScalarNode

    @property
    def base_node(self) -> BaseNode:
        return self.scalar_node.base_node

    @property
    def type(self) -> Type:
        return self.scalar_node.type

    @property
    def name(self) -> str:
        return self.scalar_node.name

    @property
    def oid(self) -> tuple[int, ...]:
        return self.scalar_node.oid


@dataclass(frozen=True)
class RowNode:
    """The per-entry template of a table."""

    base_node: BaseNode
    columns: tuple[ColumnNode, ...] = ()
    index: tuple[ColumnNode, ...] = ()

    @property
    def name(self) -> str:
        return self.base_node.name


@dataclass(frozen=True)
class TableNode:
    """A conceptual table."""

    base_node: BaseNode
    row: RowNode

    @property
    def name(self) -> str:
        return self.base_node.name


@dataclass(frozen=True)
class NotificationNode:
    """An event definition and the objects it carries."""

    base_node: BaseNode
    objects: tuple[ScalarNode, ...] = ()

    @property
    def name(self) -> str:
        return self.base_node.name
