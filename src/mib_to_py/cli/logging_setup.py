"""Route the package's log records through rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Logger shared by every module of the package
PACKAGE_LOGGER = "mib_to_py"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a RichHandler writing to standard error to the package logger.

    Calling it again replaces the handler, so repeated CLI invocations in one
    process never log twice.

    Args:
    ----
        verbose: Log debug records (loaded modules) as well as info records.
        console: Console to log to; a standard error console by default.

    Returns:
    -------
        The configured package logger.

    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
