"""Command-line interface for the mib-to-py generator."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mib_to_py import __version__
from mib_to_py.cli.exception_handler import handle_exceptions
from mib_to_py.cli.logging_setup import configure_logging
from mib_to_py.generate import (
    GenerateOptions,
    Generator,
    InvalidInputError,
    SchemaLoadError,
    classify_node_kind,
)
from mib_to_py.models import LoaderError, NodeKind
from mib_to_py.smi import SchemaLoader, SmiModule, SmiNode

# Create Typer app
app = typer.Typer(
    name="mib-to-py",
    help="Generate Python bindings from compiled SNMP MIB modules.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich console for user-facing output; logs and errors go to standard error
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"mib-to-py version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate Python bindings from compiled SNMP MIB modules.

    Modules are compiled MIB documents (YAML or JSON) looked up by name on
    the module search path. Every scalar, table, row, column and
    notification becomes a memoized factory returning a frozen dataclass.
    """


@app.command()
@handle_exceptions()
def generate(
    modules: Annotated[
        list[str],
        typer.Argument(help="Module names (or module files) to generate, in output order."),
    ],
    out_dir: Annotated[
        Path,
        typer.Option(
            "--dir",
            "-d",
            help="Output directory for per-module files and types.py.",
            file_okay=False,
        ),
    ] = Path("."),
    output: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help="Write all modules to one file instead; '-' writes to standard output.",
        ),
    ] = None,
    package: Annotated[
        str,
        typer.Option(
            "--package",
            "-p",
            help="Python package of the generated files.",
        ),
    ] = "mibs",
    paths: Annotated[
        list[Path] | None,
        typer.Option(
            "--path",
            "-M",
            help="Additional module search path (repeatable).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Log every loaded module and show tracebacks on errors.",
        ),
    ] = False,
) -> None:
    """Generate Python bindings for MIB modules.

    By default every module is written to its own file in the output
    directory, next to a shared types.py.

    Examples
    --------
        mib-to-py generate IF-MIB -M compiled -d mibs
        mib-to-py generate SNMPv2-MIB IF-MIB -M compiled -o bindings.py
        mib-to-py generate IF-MIB -M compiled -o -

    """
    configure_logging(verbose)

    options = GenerateOptions(
        out_dir=out_dir,
        output=output,
        package=package,
        paths=tuple(paths or ()),
    )
    written = Generator(options).run(modules)

    # Standard output carries the generated source only
    if options.to_stdout:
        return

    if options.combined:
        summary = f"{len(modules)} modules to {options.output}"
    else:
        summary = f"{len(written)} files to {options.out_dir}"
    console.print(f"[bold green]✓ Wrote {escape(summary)}[/bold green]")


@app.command()
@handle_exceptions()
def info(
    modules: Annotated[
        list[str],
        typer.Argument(help="Module names (or module files) to inspect."),
    ],
    paths: Annotated[
        list[Path] | None,
        typer.Option(
            "--path",
            "-M",
            help="Additional module search path (repeatable).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Log every loaded module and show tracebacks on errors.",
        ),
    ] = False,
) -> None:
    """Display the nodes of MIB modules and whether each one is generated.

    Examples
    --------
        mib-to-py info IF-MIB -M compiled

    """
    configure_logging(verbose)

    with SchemaLoader() as loader:
        for path in paths or ():
            loader.append_path(path)

        for arg in modules:
            try:
                name = loader.load_module(arg)
            except LoaderError as e:
                raise SchemaLoadError(str(e), context=f"Loading module {arg}") from e
            _print_module(loader.get_module(name))


def _kind_label(kind: NodeKind) -> str:
    """Render a kind bitmask as ``scalar`` or ``scalar|column``."""
    names = [
        member.name.lower()
        for member in NodeKind
        if member and member.name and (kind & member) == member
    ]
    return "|".join(names) or "unknown"


def _emission_label(node: SmiNode) -> str:
    try:
        kind = classify_node_kind(node)
    except InvalidInputError:
        return "[red]ambiguous[/red]"
    return "[green]yes[/green]" if kind is not None else "[dim]skip[/dim]"


def _print_module(module: SmiModule) -> None:
    """Print a summary of a loaded module and a table of its nodes."""
    description = module.description.strip().splitlines()[0] if module.description.strip() else ""
    if len(description) > 60:
        description = description[:60] + "..."

    imports = ", ".join(module.imports) or "-"
    console.print(
        Panel.fit(
            f"[bold]{escape(module.name)}[/bold]\n"
            f"{escape(description)}\n"
            f"Imports: {escape(imports)}\n"
            f"Types: {len(module.types)}",
            title="Module Info",
        )
    )

    table = Table(title="Nodes", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("OID", style="dim")
    table.add_column("Type")
    table.add_column("Generated")

    for node in module.get_nodes():
        table.add_row(
            escape(node.name),
            _kind_label(node.kind),
            node.render_numeric(),
            escape(node.type.name or "") if node.type is not None else "-",
            _emission_label(node),
        )

    console.print(table)


if __name__ == "__main__":
    app()
