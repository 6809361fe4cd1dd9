"""Identifier and literal rendering for generated code."""

from __future__ import annotations

from collections.abc import Sequence

from mib_to_py.generate.errors import InvalidInputError

# Suffix of per-node factory names
NODE_VAR_SUFFIX = "Node"

# Suffix of shared type factory names
TYPE_VAR_SUFFIX = "Type"

# Suffix of the per-module dataclass
MODULE_TYPE_SUFFIX = "Module"


def _require_identifier(name: str, what: str) -> None:
    if not name:
        raise InvalidInputError(f"Empty {what} name")


def format_module_name(module_name: str) -> str:
    """Format a MIB module name as a Python type name.

    Each dash-separated part is capitalised and the parts are joined.

    Examples
    --------
        >>> format_module_name("IF-MIB")
        'IfMib'
        >>> format_module_name("SNMPv2-MIB")
        'Snmpv2Mib'

    """
    _require_identifier(module_name, "module")
    parts = module_name.split("-")
    if not all(parts):
        raise InvalidInputError(f"Module name {module_name!r} has an empty part")
    return "".join(part[:1].upper() + part[1:].lower() for part in parts)


def format_module_identifier(module_name: str) -> str:
    """Format a MIB module name as the Python module name of its file.

    Examples
    --------
        >>> format_module_identifier("IF-MIB")
        'if_mib'

    """
    _require_identifier(module_name, "module")
    return module_name.lower().replace("-", "_")


def format_node_name(name: str) -> str:
    """Format a node or type name as a field/type name (first letter upper)."""
    _require_identifier(name, "node")
    return name[0].upper() + name[1:]


def format_node_var_name(name: str) -> str:
    """Format a node name as the name of its factory (first letter lower)."""
    _require_identifier(name, "node")
    return name[0].lower() + name[1:] + NODE_VAR_SUFFIX


def format_type_var_name(name: str) -> str:
    """Format a type name as the name of its shared factory."""
    _require_identifier(name, "type")
    return name[0].upper() + name[1:] + TYPE_VAR_SUFFIX


def format_comment(comment: str) -> str:
    """Escape text for use inside a triple-quoted docstring.

    Backslashes are doubled and every ``\"\"\"`` is split so it can no
    longer close the string.
    """
    return comment.replace("\\", "\\\\").replace('"""', '""\\"')


def render_docstring(comment: str, indent: str = "") -> str:
    """Render text as a docstring framed by newlines.

    Every non-blank line is indented like the quotes, so ``inspect.getdoc``
    returns the original text.
    """
    lines = [
        f"{indent}{line}" if line.strip() else ""
        for line in format_comment(comment).split("\n")
    ]
    body = "\n".join(lines)
    return f'{indent}"""\n{body}\n{indent}"""'


def render_oid(oid: Sequence[int]) -> str:
    """Render an OID as a tuple literal.

    Examples
    --------
        >>> render_oid([1, 3, 6])
        '(1, 3, 6)'
        >>> render_oid([1])
        '(1,)'

    """
    if len(oid) == 1:
        return f"({oid[0]},)"
    return "(" + ", ".join(str(sub_id) for sub_id in oid) + ")"


def render_string(value: str) -> str:
    """Render a Python string literal."""
    return repr(value)


def render_number(value: int | float) -> str:
    """Render a Python number literal, including non-finite floats."""
    if isinstance(value, float) and value != value:  # NaN
        return 'float("nan")'
    if value in (float("inf"), float("-inf")):
        return 'float("inf")' if value > 0 else 'float("-inf")'
    return repr(value)
