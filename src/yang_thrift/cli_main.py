"""Command-line interface for the yang-to-thrift converter."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from yang_thrift import __version__
from yang_thrift.cli.error_formatter import IssueLayout, print_issues
from yang_thrift.cli.exception_handler import handle_exceptions
from yang_thrift.formatters import available_formatters, get_formatter
from yang_thrift.models import SchemaNode, load_schema_tree, validate_schema_tree
from yang_thrift.transform import StructPlan, flatten, is_placeholder, thrift_type
from yang_thrift.validation import SchemaTreeValidator

app = typer.Typer(
    name="yang-thrift",
    help="Render parsed YANG schema trees as Thrift struct definitions.",
    add_completion=True,
    no_args_is_help=True,
)

# Rich consoles for output
console = Console()
error_console = Console(stderr=True, style="bold red")
log_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=log_console, show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"yang-thrift version {__version__}")
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
    """Render YANG schema trees (YAML/JSON dumps) in another IDL.

    Trees are loaded from files produced by a YANG parser and handed to a
    formatter selected by name. The default formatter emits Thrift structs.
    """


def _load_entries(input_files: list[Path]) -> list[SchemaNode]:
    """Load the root nodes of every input file, in order."""
    entries: list[SchemaNode] = []
    for input_file in input_files:
        entries.extend(load_schema_tree(input_file))
    return entries


@app.command("format")
def format_(
    input_files: Annotated[
        list[Path],
        typer.Argument(
            help="YAML/JSON schema tree dumps to format.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    format_name: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format. See 'yang-thrift formats'.",
        ),
    ] = "thrift",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path. Defaults to stdout.",
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite output file if it exists.",
        ),
    ] = False,
    validate_first: Annotated[
        bool,
        typer.Option(
            "--validate",
            help="Check the tree structure before formatting and stop on errors.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show debug logging and full tracebacks.",
        ),
    ] = False,
) -> None:
    """Format schema trees with the selected formatter.

    Examples
    --------
        yang-thrift format device.yaml
        yang-thrift format device.yaml interfaces.yaml -o device.thrift
        yang-thrift format device.yaml --validate --verbose

    """
    _configure_logging(verbose)

    if output is not None and output.exists() and not force:
        error_console.print(
            f"\n✗ Output file already exists: {output}\nUse --force to overwrite.",
            highlight=False,
        )
        raise typer.Exit(code=1)

    handle_exceptions(verbose)(_run_format)(input_files, format_name, output, validate_first)


def _run_format(
    input_files: list[Path],
    format_name: str,
    output: Path | None,
    validate_first: bool,
) -> None:
    """Load, optionally validate and format the input trees."""
    formatter = get_formatter(format_name)
    entries = _load_entries(input_files)

    if validate_first:
        result = SchemaTreeValidator().validate_and_raise(entries)
        for issue in result.warnings:
            logger.warning("%s", issue)

    if output is None:
        formatter(sys.stdout, entries)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        formatter(f, entries)

    console.print(
        f"\n[bold green]✓ Wrote {format_name} output to {output}[/bold green]\n",
        highlight=False,
    )


@app.command()
def validate(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="YAML/JSON schema tree dump to validate.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Treat warnings as errors.",
        ),
    ] = False,
    layout: Annotated[
        IssueLayout,
        typer.Option(
            "--format",
            "-f",
            help="Layout of the reported issues.",
        ),
    ] = IssueLayout.TEXT,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only output problems, no success messages.",
        ),
    ] = False,
) -> None:
    """Check that a schema tree can be formatted without degraded output.

    Reports nodes that are neither a leaf nor a container as errors, and
    skipped structs, placeholder types and struct name collisions as warnings.

    Examples
    --------
        yang-thrift validate device.yaml
        yang-thrift validate device.yaml --strict
        yang-thrift validate device.yaml --format table

    """
    errors = validate_schema_tree(input_file)

    if errors:
        error_console.print(f"\n✗ Failed to load {input_file.name}\n", highlight=False)

        table = Table(title="Schema Tree Errors", show_header=True)
        table.add_column("#", style="dim", width=4)
        table.add_column("Location", style="cyan")
        table.add_column("Error", style="red")

        for i, error in enumerate(errors, 1):
            if ": " in error:
                loc, msg = error.split(": ", 1)
            else:
                loc, msg = "", error
            table.add_row(str(i), loc, msg)

        console.print(table)
        raise typer.Exit(code=1)

    entries = load_schema_tree(input_file)
    result = SchemaTreeValidator(strict=strict).validate(entries)
    failed = not result.is_valid or (strict and bool(result.warnings))

    if result.issues:
        print_issues(error_console, result, layout, input_file)

    if failed:
        raise typer.Exit(code=1)

    if not quiet:
        if not result.warnings:
            console.print(f"\n[bold green]✓ {input_file.name} is valid[/bold green]\n")
        else:
            console.print(
                f"\n[bold yellow]⚠ {input_file.name} is valid with warnings[/bold yellow]\n"
            )


@app.command()
def formats() -> None:
    """List the available output formats."""
    table = Table(title="Output Formats")
    table.add_column("Name", style="cyan")
    table.add_column("Description")

    for formatter in available_formatters():
        table.add_row(formatter.name, formatter.help)

    console.print(table)


@app.command()
def info(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="YAML/JSON schema tree dump to inspect.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ],
) -> None:
    """Display a summary of a schema tree.

    Examples
    --------
        yang-thrift info device.yaml

    """
    try:
        entries = load_schema_tree(input_file)
    except Exception as e:
        error_console.print(f"\n✗ Failed to read file: {e}\n", highlight=False)
        raise typer.Exit(code=1) from None

    console.print(
        Panel.fit(
            f"[bold]YANG Schema Tree[/bold]\nFile: {input_file}",
            title="File Info",
        )
    )
    _print_summary(entries)


def _print_summary(entries: list[SchemaNode]) -> None:
    """Print node and struct counts for a schema tree."""
    nodes = [node for entry in entries for node in flatten(entry)]
    plan = StructPlan(entries)
    structs = [node for node in nodes if plan.emits_struct(node)]
    leaves = [node for node in nodes if node.is_leaf]
    placeholders = [
        node for node in leaves if node.type and is_placeholder(thrift_type(node.type.kind))
    ]

    table = Table(title="Tree Summary", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Roots", ", ".join(entry.name for entry in entries))
    table.add_row("Nodes", str(len(nodes)))
    table.add_row("", "")  # Spacer
    table.add_row("Structs", str(len(structs)))
    table.add_row("Leaves", str(len(leaves)))
    table.add_row("RPCs", str(sum(1 for node in nodes if node.is_rpc)))
    if placeholders:
        table.add_row("Placeholder types", str(len(placeholders)))

    console.print(table)


if __name__ == "__main__":
    app()
