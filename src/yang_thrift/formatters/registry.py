"""Registry of named output formatters."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode

FormatFunc = Callable[[TextIO, Sequence["SchemaNode"]], None]


class FormatterRegistryError(Exception):
    """Raised for unknown or duplicate formatter names."""


@dataclass(frozen=True)
class Formatter:
    """An output format selectable by name."""

    name: str
    """Name used to select the formatter (e.g. 'thrift')."""

    func: FormatFunc
    """Writes the formatted entries to an output stream."""

    help: str
    """One-line description shown in formatter listings."""

    def __call__(self, out: TextIO, entries: Sequence[SchemaNode]) -> None:
        """Format ``entries`` to ``out``."""
        self.func(out, entries)


_FORMATTERS: dict[str, Formatter] = {}


def register(formatter: Formatter) -> Formatter:
    """Add a formatter to the registry.

    Args:
    ----
        formatter: Formatter to register.

    Returns:
    -------
        The registered formatter.

    Raises:
    ------
        FormatterRegistryError: If the name is already taken.

    """
    if formatter.name in _FORMATTERS:
        raise FormatterRegistryError(f"Formatter '{formatter.name}' is already registered")
    _FORMATTERS[formatter.name] = formatter
    return formatter


def unregister(name: str) -> None:
    """Remove a formatter from the registry, if present."""
    _FORMATTERS.pop(name, None)


def get_formatter(name: str) -> Formatter:
    """Look up a formatter by name.

    Raises
    ------
        FormatterRegistryError: If no formatter has that name.

    """
    try:
        return _FORMATTERS[name]
    except KeyError:
        available = ", ".join(sorted(_FORMATTERS)) or "none"
        raise FormatterRegistryError(
            f"Unknown format '{name}'. Available formats: {available}"
        ) from None


def available_formatters() -> list[Formatter]:
    """Return all registered formatters sorted by name."""
    return [_FORMATTERS[name] for name in sorted(_FORMATTERS)]
