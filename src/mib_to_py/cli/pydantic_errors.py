"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This field is not allowed in a module document",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "int_parsing": "Must be an integer",
    "list_type": "Must be a list",
    "dict_type": "Must be a mapping",
    "enum": "Must be one of the allowed values",
    "value_error": "Invalid value",
    "string_pattern_mismatch": "Does not match the required pattern",
    "string_too_short": "String is too short",
    "greater_than_equal": "Value is too small",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    msg = error["msg"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, msg)

    if error_type == "enum":
        expected = ctx.get("expected", "unknown")
        base_msg = f"Must be one of: {expected}"

    elif error_type == "string_pattern_mismatch":
        pattern = ctx.get("pattern", "")
        base_msg = f"Does not match pattern: {pattern}"

    elif error_type == "string_too_short":
        min_length = ctx.get("min_length", 0)
        base_msg = f"Must be at least {min_length} characters"

    elif error_type == "greater_than_equal":
        ge = ctx.get("ge", 0)
        base_msg = f"Must be greater than or equal to {ge}"

    elif error_type == "value_error":
        # Custom validators: keep the validator's own message
        base_msg = msg.removeprefix("Value error, ")

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a document path (``nodes[2].kind``).

    Args:
    ----
        loc: Location tuple from Pydantic error.

    Returns:
    -------
        Formatted path string.

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        Suggestion string or None.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    suggestions: dict[str, str] = {
        "missing": "Add the required field to the module document",
        "extra_forbidden": "Remove this field or check for typos",
        "enum": f"Use one of: {ctx.get('expected', 'see the README')}",
        "int_parsing": "OIDs are lists of non-negative integers",
        "greater_than_equal": "OID sub-identifiers cannot be negative",
    }

    return suggestions.get(error_type)
