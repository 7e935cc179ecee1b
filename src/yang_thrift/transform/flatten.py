"""Flatten a schema tree into independent struct candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode


def flatten(root: SchemaNode) -> list[SchemaNode]:
    """Return ``root`` and all of its descendants in depth-first pre-order.

    Children are visited in their mapping order. Nothing is filtered out:
    RPC nodes, leaves and empty containers are all part of the result, and
    deciding what produces output is left to the formatter.

    Args:
    ----
        root: Node to start from.

    Returns:
    -------
        Flattened node list, ``root`` first.

    """
    nodes: list[SchemaNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        nodes.append(node)
        # Reversed so the first child is popped next
        stack.extend(reversed(list(node.children.values())))
    return nodes
