"""Validators for the shape of schema tree nodes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from yang_thrift.models.node import NodeKind
from yang_thrift.transform.naming import normalize_struct_name
from yang_thrift.transform.structs import StructPlan
from yang_thrift.transform.type_mapping import is_placeholder, thrift_type
from yang_thrift.validation.base import BaseValidator, walk
from yang_thrift.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode

_LEAF_KINDS = frozenset({NodeKind.LEAF, NodeKind.LEAF_LIST})
_CONTAINER_KINDS = frozenset({NodeKind.CONTAINER, NodeKind.LIST})


class NodeShapeValidator(BaseValidator):
    """Validates that every node is either a leaf or a container."""

    def validate(
        self,
        entries: Sequence[SchemaNode],
        result: ValidationResult,
    ) -> None:
        """Check leaves for types and containers for the absence of one."""
        for path, _, node in walk(entries):
            if node.kind in _LEAF_KINDS and node.type is None:
                result.report(
                    ErrorCodes.E001_LEAF_WITHOUT_TYPE,
                    path,
                    node,
                    f"{node.kind.value} '{node.name}' has no type",
                    suggestion="Add a 'type' to the leaf",
                )
            if node.type is not None and node.children:
                result.report(
                    ErrorCodes.E002_TYPED_CONTAINER,
                    path,
                    node,
                    f"'{node.name}' has both a type ({node.type.kind.value}) "
                    f"and {len(node.children)} child node(s)",
                    suggestion="Remove either the type or the children",
                )


class ChildNameValidator(BaseValidator):
    """Validates that children are stored under their own name."""

    def validate(
        self,
        entries: Sequence[SchemaNode],
        result: ValidationResult,
    ) -> None:
        """Compare each child's mapping key with its name."""
        for path, key, node in walk(entries):
            if key is not None and key != node.name:
                result.report(
                    ErrorCodes.E003_NAME_MISMATCH,
                    path,
                    node,
                    f"Child stored as '{key}' is named '{node.name}'; "
                    "its field is named after the key",
                    key=key,
                    name=node.name,
                )


class RenderabilityValidator(BaseValidator):
    """Reports nodes whose output will be degraded."""

    def validate(
        self,
        entries: Sequence[SchemaNode],
        result: ValidationResult,
    ) -> None:
        """Warn about skipped containers and placeholder types."""
        plan = StructPlan(entries)
        for path, _, node in walk(entries):
            if node.is_rpc:
                continue
            untyped_container = node.kind in _CONTAINER_KINDS and node.type is None
            if (node.children or untyped_container) and not plan.emits_struct(node):
                result.report(
                    ErrorCodes.W001_EMPTY_CONTAINER,
                    path,
                    node,
                    f"{node.kind.value} '{node.name}' has no fields; "
                    "it gets neither a struct nor a field in its parent",
                )
            if node.type is not None and not node.children:
                token = thrift_type(node.type.kind)
                if is_placeholder(token):
                    result.report(
                        ErrorCodes.W002_PLACEHOLDER_TYPE,
                        path,
                        node,
                        f"No Thrift type for {node.type.kind.value}; "
                        f"'{node.name}' is rendered as {token}",
                        token=token,
                    )


class StructNameCollisionValidator(BaseValidator):
    """Validates that emitted structs get distinct names."""

    def validate(
        self,
        entries: Sequence[SchemaNode],
        result: ValidationResult,
    ) -> None:
        """Warn when two emitted structs normalize to the same name."""
        plan = StructPlan(entries)
        seen: dict[str, str] = {}
        for path, _, node in walk(entries):
            if not plan.emits_struct(node):
                continue
            struct_name = normalize_struct_name(node.name)
            first_path = seen.setdefault(struct_name, path)
            if first_path != path:
                result.report(
                    ErrorCodes.W003_STRUCT_NAME_COLLISION,
                    path,
                    node,
                    f"struct {struct_name} is also emitted for {first_path}",
                    suggestion="Rename one of the containers",
                    struct_name=struct_name,
                )
