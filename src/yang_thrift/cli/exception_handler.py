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

from yang_thrift.cli.error_formatter import print_issues
from yang_thrift.cli.pydantic_errors import (
    describe_node_error,
    node_error_hint,
    node_error_location,
)
from yang_thrift.formatters.registry import FormatterRegistryError
from yang_thrift.models.loader import LoaderError
from yang_thrift.validation.validator import TreeValidationError

T = TypeVar("T")

console = Console(stderr=True)

# Known failures get a one-line hint instead of a traceback offer
_HINTS: dict[type[Exception], str] = {
    LoaderError: "Please check that the file is a YAML/JSON tree dump.",
    FormatterRegistryError: "Run 'yang-thrift formats' to list the available formats.",
    PermissionError: "Check file permissions and try again.",
}


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Turn exceptions raised by a CLI command into messages and exit code 1.

    Args:
    ----
        verbose: Whether to show full tracebacks for unexpected errors.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except TreeValidationError as e:
                print_issues(console, e.result)
            except PydanticValidationError as e:
                _print_model_errors(e)
            except Exception as e:
                _print_error(e, verbose)
            raise typer.Exit(1)

        return wrapper

    return decorator


def _print_model_errors(error: PydanticValidationError) -> None:
    console.print("[red bold]Schema Tree Invalid[/red bold]")
    for err in error.errors():
        console.print(f"[red]✗[/red] {escape(node_error_location(err['loc']))}", highlight=False)
        console.print(f"  {escape(describe_node_error(err))}", highlight=False)
        hint = node_error_hint(err)
        if hint:
            console.print(f"  [green]💡 {escape(hint)}[/green]", highlight=False)


def _print_error(error: Exception, verbose: bool) -> None:
    hint = next((text for kind, text in _HINTS.items() if isinstance(error, kind)), None)
    if isinstance(error, PermissionError):
        message = f"Permission denied: {error.filename or 'unknown'}"
    elif hint is None:
        message = f"An unexpected error occurred:\n{error}"
    else:
        message = str(error)

    body = f"[red]{escape(message)}[/red]"
    if hint:
        body += f"\n\n{escape(hint)}"
    console.print(Panel(body, title="Error", border_style="red"))

    if hint is None:
        if verbose:
            console.print("\n[dim]Traceback:[/dim]")
            console.print(traceback.format_exc())
        else:
            console.print("\n[dim]Use --verbose for full traceback[/dim]")
