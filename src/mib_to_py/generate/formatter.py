"""Canonical formatting of generated source."""

from __future__ import annotations

import black

from mib_to_py.generate.errors import FormattingError

# Line length of generated files
LINE_LENGTH = 100


def format_source(source: str, line_length: int = LINE_LENGTH) -> bytes:
    """Check and format generated Python source.

    Args:
    ----
        source: Raw generated source.
        line_length: Maximum line length passed to black.

    Returns:
    -------
        Formatted source, UTF-8 encoded.

    Raises:
    ------
        FormattingError: If the source is not valid Python.

    """
    try:
        compile(source, "<generated>", "exec")
    except (SyntaxError, ValueError) as e:
        raise FormattingError(str(e), context="Generating formatted source") from e

    try:
        formatted = black.format_str(source, mode=black.Mode(line_length=line_length))
    except black.InvalidInput as e:
        raise FormattingError(str(e), context="Generating formatted source") from e

    return formatted.encode("utf-8")
