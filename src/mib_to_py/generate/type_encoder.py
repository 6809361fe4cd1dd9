"""Render type definitions as ``models.Type`` literals.

A type is rendered either inline, as the ``type=`` argument of the node
that uses it, or shared, as a memoized factory in the shared types block.
Both modes produce the same field content.
"""

from __future__ import annotations

from collections.abc import Iterable

from mib_to_py.generate.naming import (
    format_type_var_name,
    render_number,
    render_string,
)
from mib_to_py.models.types import EnumDefinition, RangeDefinition, TypeDefinition

INDENT = "    "


def indent_lines(lines: Iterable[str], depth: int = 1) -> list[str]:
    """Indent every line by ``depth`` levels."""
    prefix = INDENT * depth
    return [f"{prefix}{line}" for line in lines]


def encode_enum(enum: EnumDefinition) -> list[str]:
    """Encode an enumeration, with its values in ascending numeric order.

    Args:
    ----
        enum: The enumeration definition.

    Returns:
    -------
        Source lines of the ``enum=`` keyword argument.

    """
    values = [f"{value}: {render_string(enum.values[value])}," for value in sorted(enum.values)]
    return [
        "enum=models.Enum(",
        f"{INDENT}base_type=BaseType.{enum.base_type.value},",
        f"{INDENT}values={{",
        *indent_lines(values, 2),
        f"{INDENT}}},",
        "),",
    ]


def encode_range(type_range: RangeDefinition) -> str:
    """Encode a single range entry."""
    return (
        f"models.Range(base_type=BaseType.{type_range.base_type.value}, "
        f"min_value={render_number(type_range.min_value)}, "
        f"max_value={render_number(type_range.max_value)}),"
    )


def encode_type_fields(type_def: TypeDefinition) -> list[str]:
    """Encode the keyword arguments of a ``models.Type`` literal.

    The base type and name are always present; enum, ranges, format and
    units only when set.

    Args:
    ----
        type_def: The type definition.

    Returns:
    -------
        Source lines, one keyword argument (or part of one) per line.

    """
    lines = [
        f"base_type=BaseType.{type_def.base_type.value},",
        f"name={render_string(type_def.name or '')},",
    ]

    if type_def.enum is not None:
        lines.extend(encode_enum(type_def.enum))

    if type_def.ranges:
        lines.append("ranges=(")
        lines.extend(indent_lines(encode_range(r) for r in type_def.ranges))
        lines.append("),")

    if type_def.format:
        lines.append(f"format={render_string(type_def.format)},")

    if type_def.units:
        lines.append(f"units={render_string(type_def.units)},")

    return lines


def encode_inline_type(type_def: TypeDefinition) -> list[str]:
    """Encode a type as the ``type=`` argument at its use site."""
    return ["type=models.Type(", *indent_lines(encode_type_fields(type_def)), "),"]


def encode_shared_type(type_def: TypeDefinition) -> str:
    """Encode a named type as a shared, memoized factory.

    Raises
    ------
        InvalidInputError: If the type has no name.

    """
    var_name = format_type_var_name(type_def.name or "")
    lines = [
        "@cache",
        f"def {var_name}() -> models.Type:",
        f"{INDENT}return models.Type(",
        *indent_lines(encode_type_fields(type_def), 2),
        f"{INDENT})",
    ]
    return "\n".join(lines) + "\n\n\n"


def encode_type_reference(type_def: TypeDefinition) -> str:
    """Encode a reference to a shared type factory."""
    return f"type={format_type_var_name(type_def.name or '')}(),"
