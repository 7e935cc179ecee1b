"""Rich rendering of schema tree validation results."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from yang_thrift.validation.errors import ValidationSeverity

if TYPE_CHECKING:
    from yang_thrift.validation.errors import ValidationIssue, ValidationResult

_STYLES = {ValidationSeverity.ERROR: "red", ValidationSeverity.WARNING: "yellow"}


class IssueLayout(str, Enum):
    """How ``yang-thrift validate`` lays out the issues it found."""

    TEXT = "text"
    TABLE = "table"
    TREE = "tree"


def print_issues(
    console: Console,
    result: ValidationResult,
    layout: IssueLayout = IssueLayout.TEXT,
    source_path: Path | None = None,
) -> None:
    """Print every issue of ``result`` followed by a one-line tally.

    Args:
    ----
        console: Rich Console for output.
        result: The validation result to show.
        layout: Issue layout; the tally is the same for all of them.
        source_path: File the tree was loaded from, shown in the header.

    """
    if not result.issues:
        console.print("[green]✓ No issues found[/green]")
        return

    if layout is IssueLayout.TABLE:
        console.print(_issue_table(result))
    elif layout is IssueLayout.TREE:
        console.print(_issue_tree(result))
    else:
        if source_path is not None:
            console.print(f"[bold]{escape(str(source_path))}[/bold]", highlight=False)
        for issue in result.issues:
            _print_issue(console, issue)

    console.print(_tally(result))


def _print_issue(console: Console, issue: ValidationIssue) -> None:
    style = _STYLES[issue.severity]
    console.print(
        f"[{style} bold]{issue.severity.value.upper()}[/{style} bold] "
        f"[{style}]\\[{issue.code}][/{style}] {escape(issue.message)}",
        highlight=False,
    )
    console.print(f"  [dim]at {escape(issue.location)}[/dim]", highlight=False)
    if issue.suggestion:
        console.print(f"  [green]💡 {escape(issue.suggestion)}[/green]", highlight=False)


def _issue_table(result: ValidationResult) -> Table:
    table = Table(title="Validation Issues")
    table.add_column("Code", style="cyan", width=6)
    table.add_column("Location", style="dim")
    table.add_column("Message")

    for issue in result.issues:
        style = _STYLES[issue.severity]
        table.add_row(
            f"[{style}]{issue.code}[/{style}]",
            escape(issue.location),
            escape(issue.message),
        )
    return table


def _issue_tree(result: ValidationResult) -> Tree:
    """Nest issues under the root node they were found in."""
    by_root: dict[str, list[ValidationIssue]] = {}
    for issue in result.issues:
        by_root.setdefault(issue.path.split("/", 1)[0], []).append(issue)

    tree = Tree("[bold]Validation Issues[/bold]")
    for root, issues in by_root.items():
        branch = tree.add(f"[cyan]{escape(root)}[/cyan] ({len(issues)})")
        for issue in issues:
            style = _STYLES[issue.severity]
            branch.add(
                f"[{style}]{issue.code}[/{style}] {escape(issue.path)}: {escape(issue.message)}"
            )
    return tree


def _tally(result: ValidationResult) -> str:
    parts = []
    if result.errors:
        parts.append(f"[red bold]✗ {len(result.errors)} error(s)[/red bold]")
    if result.warnings:
        parts.append(f"[yellow]{len(result.warnings)} warning(s)[/yellow]")
    return ", ".join(parts)
