"""Decide which nodes emit a struct and which children become fields."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from yang_thrift.models.node import NodeKind
from yang_thrift.transform.flatten import flatten

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode

_STRUCT_KINDS = frozenset({NodeKind.CONTAINER, NodeKind.LIST})


class StructPlan:
    """Struct and field membership for one or more schema trees.

    A node emits a struct when it is not an RPC and at least one of its
    children is a field. A child is a field unless it is an RPC, or a
    container or list that emits no struct itself. Untyped leaves stay
    fields so that they show up as ``UNKNOWN TYPE``.

    Example:
    -------
        >>> plan = StructPlan([root])
        >>> for node in flatten(root):
        ...     if plan.emits_struct(node):
        ...         print(node.name, sorted(plan.fields(node)))

    """

    def __init__(self, roots: Iterable[SchemaNode]) -> None:
        """Compute the plan for every node under ``roots``.

        Args:
        ----
            roots: Root nodes of the trees to plan.

        """
        self._emitting: set[int] = set()
        for root in roots:
            # Reversed pre-order settles every child before its parent
            for node in reversed(flatten(root)):
                if not node.is_rpc and any(map(self.is_field, node.children.values())):
                    self._emitting.add(id(node))

    def emits_struct(self, node: SchemaNode) -> bool:
        """Whether ``node`` produces a struct definition."""
        return id(node) in self._emitting

    def is_field(self, child: SchemaNode) -> bool:
        """Whether ``child`` produces a field in its parent's struct."""
        if child.is_rpc:
            return False
        if child.children:
            return self.emits_struct(child)
        return child.type is not None or child.kind not in _STRUCT_KINDS

    def fields(self, node: SchemaNode) -> dict[str, SchemaNode]:
        """Return the children of ``node`` that become fields, keyed as stored."""
        return {key: child for key, child in node.children.items() if self.is_field(child)}
