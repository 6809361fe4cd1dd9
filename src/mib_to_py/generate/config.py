"""Configuration of a generator run."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Output filename selecting standard output
STDOUT_SENTINEL = "-"


class GenerateOptions(BaseModel):
    """Options of a generator run.

    Example:
    -------
        >>> options = GenerateOptions(out_dir="mibs", package="mibs", paths=["compiled"])
        >>> options.combined
        False

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    out_dir: Annotated[
        Path,
        Field(
            default=Path("."),
            description="Directory receiving one file per module plus types.py",
        ),
    ]
    output: Annotated[
        str | None,
        Field(
            default=None,
            description="Single output file for all modules; '-' for standard output",
        ),
    ]
    package: Annotated[
        str,
        Field(
            default="mibs",
            pattern=r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$",
            description="Python package of the generated files",
        ),
    ]
    paths: Annotated[
        tuple[Path, ...],
        Field(
            default=(),
            description="Additional module search paths, in order",
        ),
    ]

    @property
    def combined(self) -> bool:
        """Check whether all output goes into one stream."""
        return bool(self.output)

    @property
    def to_stdout(self) -> bool:
        """Check whether output goes to standard output."""
        return self.output == STDOUT_SENTINEL
