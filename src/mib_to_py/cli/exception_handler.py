"""CLI exception handling."""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from mib_to_py.generate.errors import GenerationError

T = TypeVar("T")

console = Console(stderr=True)


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Handle exceptions in CLI commands with formatted output.

    A ``verbose`` keyword argument passed to the command overrides the
    decorator's default, so ``--verbose`` turns on tracebacks.

    Args:
    ----
        verbose: Whether to show full tracebacks.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            show_traceback = bool(kwargs.get("verbose", verbose))
            try:
                return func(*args, **kwargs)
            except GenerationError as e:
                _handle_generation_error(e, show_traceback)
                raise typer.Exit(1) from None
            except PydanticValidationError as e:
                _handle_pydantic_error(e, show_traceback)
                raise typer.Exit(1) from None
            except typer.Exit:
                raise
            except Exception as e:
                _handle_generic_error(e, show_traceback)
                raise typer.Exit(1) from None

        return wrapper

    return decorator


def _find_validation_error(error: BaseException) -> PydanticValidationError | None:
    """Return the pydantic error an exception was raised from, if any."""
    cause = error.__cause__
    while cause is not None:
        if isinstance(cause, PydanticValidationError):
            return cause
        cause = cause.__cause__
    return None


def _handle_generation_error(error: GenerationError, verbose: bool) -> None:
    """Handle generator errors."""
    title = type(error).__name__
    console.print(Panel(f"[red]{escape(str(error))}[/red]", title=title, border_style="red"))

    validation_error = _find_validation_error(error)
    if validation_error is not None:
        _handle_pydantic_error(validation_error, verbose)

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc(), markup=False)


def _handle_pydantic_error(error: PydanticValidationError, verbose: bool) -> None:
    """Handle Pydantic validation errors."""
    from mib_to_py.cli.pydantic_errors import (
        format_pydantic_location,
        get_suggestion_for_error,
        translate_pydantic_error,
    )

    console.print("[red bold]Schema Validation Failed[/red bold]")
    console.print()

    for err in error.errors():
        location = format_pydantic_location(err["loc"])
        msg = translate_pydantic_error(err)
        suggestion = get_suggestion_for_error(err)

        console.print(f"[red]✗[/red] {escape(location)}")
        console.print(f"  {escape(msg)}")
        console.print(f"  [dim]({err['type']})[/dim]")

        if suggestion:
            console.print(f"  [green]💡 {suggestion}[/green]")

        console.print()

    if verbose:
        console.print("[dim]Full error:[/dim]")
        console.print(str(error), markup=False)


def _handle_generic_error(error: Exception, verbose: bool) -> None:
    """Handle unexpected errors."""
    console.print(
        Panel(
            f"[red]An unexpected error occurred:[/red]\n{escape(str(error))}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc(), markup=False)
    else:
        console.print("\n[dim]Use --verbose for full traceback[/dim]")
