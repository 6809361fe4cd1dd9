"""Generator error types.

Every failure aborts the run. Errors carry a short context naming the
operation and the module or file involved, e.g.
``Loading module IF-MIB: Module not found: IF-MIB``.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all fatal generator errors."""

    def __init__(self, message: str, context: str | None = None) -> None:
        """Initialize GenerationError.

        Args:
        ----
            message: Error message describing what went wrong.
            context: Optional operation/module/file the error occurred in.

        """
        self.message = message
        self.context = context
        super().__init__(f"{context}: {message}" if context else message)


class SchemaLoadError(GenerationError):
    """A schema module cannot be found, parsed or validated."""


class ModuleLookupError(GenerationError):
    """A loaded module or a node it references cannot be resolved."""


class InvalidInputError(GenerationError):
    """The loaded graph cannot be emitted (empty identifier, ambiguous kind)."""


class FormattingError(GenerationError):
    """Emitted source is not valid Python. Indicates a generator defect."""


class DestinationError(GenerationError):
    """An output file cannot be created, opened or written."""
