"""CLI support for mib-to-py: error presentation and logging setup."""

from mib_to_py.cli.exception_handler import handle_exceptions
from mib_to_py.cli.logging_setup import configure_logging
from mib_to_py.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)

__all__ = [
    "configure_logging",
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
