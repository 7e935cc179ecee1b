"""Thrift IDL formatter.

Every container with at least one field becomes one ``struct``. Nested
containers are emitted as separate structs and referenced by name from their
parent's field list. Containers without fields are left out of both. Fields
are ordered by their key in the parent and numbered from 1.

Example output:
    ```
    // A network device.
    struct device {
        1: optional string host_name; // device.yang:5:3
        2: list<TODO-uint16> ip_addr; // device.yang:8:3
    }
    ```
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, TextIO

from yang_thrift.formatters.indent import prefix_lines
from yang_thrift.formatters.registry import Formatter, register
from yang_thrift.transform.flatten import flatten
from yang_thrift.transform.naming import normalize_field_name, normalize_struct_name
from yang_thrift.transform.structs import StructPlan
from yang_thrift.transform.type_mapping import is_placeholder, thrift_type

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "// "
FIELD_INDENT = "    "
UNKNOWN_TYPE = "UNKNOWN TYPE"


def field_type(node: SchemaNode) -> str:
    """Return the Thrift type token for a node used as a field.

    Leaves map through the type table, containers reference the struct
    emitted for them. A node with neither children nor a type yields
    ``UNKNOWN TYPE``.
    """
    if node.type is not None and not node.children:
        token = thrift_type(node.type.kind)
        if is_placeholder(token):
            logger.debug("No Thrift type for %s (%s)", node.name, node.type.kind.value)
    elif node.is_container:
        token = normalize_struct_name(node.name)
    else:
        logger.debug("Node %s has neither children nor a type", node.name)
        token = UNKNOWN_TYPE

    if node.is_list:
        return f"list<{token}>"
    return token


def render_field(index: int, key: str, node: SchemaNode) -> str:
    """Render one field line, preceded by its description comment if any.

    Args:
    ----
        index: 1-based field number.
        key: Name the child is stored under in its parent.
        node: The child node the field stands for.

    Returns:
    -------
        Newline-terminated field text.

    """
    lines = ""
    if node.description:
        lines += prefix_lines(node.description, FIELD_INDENT + COMMENT_PREFIX)

    modifier = "" if node.is_list else "optional "
    name = normalize_field_name(key)
    lines += f"{FIELD_INDENT}{index}: {modifier}{field_type(node)} {name}; // {node.source}\n"
    return lines


def render_struct(node: SchemaNode, plan: StructPlan | None = None) -> str:
    """Render the struct definition for one node.

    Args:
    ----
        node: A node from a flattened tree.
        plan: Struct plan covering ``node``. Built from ``node`` when omitted.

    Returns:
    -------
        The struct text starting with a blank line, or an empty string if the
        node is an RPC or has no fields.

    """
    # TODO: render rpc/action input and output as request/response structs
    if node.is_rpc:
        return ""

    if plan is None:
        plan = StructPlan([node])
    if not plan.emits_struct(node):
        if not node.is_leaf:
            logger.debug("Skipping struct %s: no fields", node.name)
        return ""

    fields = plan.fields(node)
    parts = ["\n"]
    if node.description:
        parts.append(prefix_lines(node.description, COMMENT_PREFIX))
    parts.append(f"struct {normalize_struct_name(node.name)} {{\n")

    for index, key in enumerate(sorted(fields), start=1):
        parts.append(render_field(index, key, fields[key]))

    parts.append("}\n")
    return "".join(parts)


def format_struct(out: TextIO, node: SchemaNode, plan: StructPlan | None = None) -> None:
    """Write the struct definition for ``node`` to ``out`` in one write."""
    text = render_struct(node, plan)
    if text:
        out.write(text)


def format_thrift(out: TextIO, entries: Iterable[SchemaNode]) -> None:
    """Write Thrift structs for every container reachable from ``entries``.

    Args:
    ----
        out: Output stream.
        entries: Root nodes, rendered in the given order.

    """
    for entry in entries:
        plan = StructPlan([entry])
        for node in flatten(entry):
            format_struct(out, node, plan)


def render_thrift(entries: Iterable[SchemaNode]) -> str:
    """Return the Thrift text for ``entries`` as a string."""
    out = io.StringIO()
    format_thrift(out, entries)
    return out.getvalue()


THRIFT_FORMATTER = register(
    Formatter(
        name="thrift",
        func=format_thrift,
        help="display tree in a thrift format",
    )
)
