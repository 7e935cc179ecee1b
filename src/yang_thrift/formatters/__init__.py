"""Output formatters for schema trees.

Importing this package registers the built-in formatters:
    thrift: Thrift IDL struct definitions

Example:
-------
    >>> import sys
    >>> from yang_thrift.formatters import get_formatter
    >>>
    >>> get_formatter("thrift")(sys.stdout, entries)

"""

from yang_thrift.formatters.registry import (
    Formatter,
    FormatterRegistryError,
    available_formatters,
    get_formatter,
    register,
    unregister,
)
from yang_thrift.formatters.thrift import (
    THRIFT_FORMATTER,
    format_struct,
    format_thrift,
    render_struct,
    render_thrift,
)

__all__ = [
    "THRIFT_FORMATTER",
    "Formatter",
    "FormatterRegistryError",
    "available_formatters",
    "format_struct",
    "format_thrift",
    "get_formatter",
    "register",
    "render_struct",
    "render_thrift",
    "unregister",
]
