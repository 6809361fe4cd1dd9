"""Models for the types section of a compiled MIB module."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mib_to_py.bindings.models import BaseType

# Type names that are rendered inline at every use site and never shared.
BUILTIN_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "Integer32",
        "OctetString",
        "ObjectIdentifier",
        "Unsigned32",
        "Integer64",
        "Unsigned64",
        "Enumeration",
        "Bits",
    }
)

# Base type implied by each built-in type name.
BUILTIN_BASE_TYPES: dict[str, BaseType] = {
    "Integer32": BaseType.Integer32,
    "OctetString": BaseType.OctetString,
    "ObjectIdentifier": BaseType.ObjectIdentifier,
    "Unsigned32": BaseType.Unsigned32,
    "Integer64": BaseType.Integer64,
    "Unsigned64": BaseType.Unsigned64,
    "Enumeration": BaseType.Enum,
    "Bits": BaseType.Bits,
}


def default_type_name(base_type: BaseType) -> str:
    """Return the name given to an anonymous refinement of a base type.

    Examples
    --------
        >>> default_type_name(BaseType.Enum)
        'Enumeration'
        >>> default_type_name(BaseType.OctetString)
        'OctetString'

    """
    if base_type == BaseType.Enum:
        return "Enumeration"
    return base_type.value


class EnumDefinition(BaseModel):
    """Named values of an enumerated type.

    Example:
    -------
        ```yaml
        enum:
          base_type: Enum
          values: {1: up, 2: down, 3: testing}
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_type: Annotated[
        BaseType,
        Field(
            default=BaseType.Enum,
            description="Base type of the enumeration",
        ),
    ]
    values: Annotated[
        dict[int, str],
        Field(
            default_factory=dict,
            description="Mapping of integer value to label",
        ),
    ]


class RangeDefinition(BaseModel):
    """A value or size range.

    Example:
    -------
        ```yaml
        ranges:
          - {base_type: Integer32, min: 1, max: 2147483647}
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    base_type: BaseType
    min_value: Annotated[int | float, Field(alias="min")]
    max_value: Annotated[int | float, Field(alias="max")]

    @model_validator(mode="after")
    def validate_bounds(self) -> RangeDefinition:
        """Ensure the lower bound does not exceed the upper bound."""
        if self.min_value > self.max_value:
            raise ValueError(f"Range minimum {self.min_value} exceeds maximum {self.max_value}")
        return self


class TypeDefinition(BaseModel):
    """A named textual convention or an anonymous refinement.

    Named definitions live in the module's ``types`` mapping and take their
    name from the mapping key. Inline definitions on a node may omit the
    name; the loader then names them after their base type.

    Example:
    -------
        ```yaml
        types:
          InterfaceIndex:
            base_type: Integer32
            format: d
            ranges:
              - {base_type: Integer32, min: 1, max: 2147483647}
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[
        str | None,
        Field(
            default=None,
            description="Type name (set by the loader for named types)",
        ),
    ]
    base_type: Annotated[
        BaseType,
        Field(description="Primitive classification of the type"),
    ]
    enum: Annotated[
        EnumDefinition | None,
        Field(
            default=None,
            description="Named values for enumerations and BITS",
        ),
    ]
    ranges: Annotated[
        list[RangeDefinition],
        Field(
            default_factory=list,
            description="Value or size ranges, in declaration order",
        ),
    ]
    format: Annotated[
        str,
        Field(
            default="",
            description="DISPLAY-HINT format string",
        ),
    ]
    units: Annotated[
        str,
        Field(
            default="",
            description="UNITS clause",
        ),
    ]

    @property
    def is_builtin(self) -> bool:
        """Check whether this type is rendered inline rather than shared."""
        return self.name in BUILTIN_TYPE_NAMES

    def named(self, name: str) -> TypeDefinition:
        """Return a copy of this definition carrying the given name."""
        return self.model_copy(update={"name": name})
