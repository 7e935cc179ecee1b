"""Models for parsed YANG schema tree nodes."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeKind(str, Enum):
    """Discriminant for schema tree nodes.

    ``list`` and ``leaf-list`` are the repeatable forms of ``container`` and
    ``leaf``. ``rpc`` and ``action`` nodes are carried in the tree but never
    rendered as fields or structs.
    """

    CONTAINER = "container"
    LIST = "list"
    LEAF = "leaf"
    LEAF_LIST = "leaf-list"
    RPC = "rpc"
    ACTION = "action"


_LIST_KINDS = frozenset({NodeKind.LIST, NodeKind.LEAF_LIST})
_RPC_KINDS = frozenset({NodeKind.RPC, NodeKind.ACTION})


class TypeKind(str, Enum):
    """YANG built-in base types.

    ``NONE`` marks a type the parser could not resolve.
    """

    NONE = "none"

    # Signed integers
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"

    # Unsigned integers
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    BINARY = "binary"
    BITS = "bits"
    BOOLEAN = "boolean"
    DECIMAL64 = "decimal64"
    EMPTY = "empty"
    ENUMERATION = "enumeration"
    IDENTITYREF = "identityref"
    INSTANCE_IDENTIFIER = "instance-identifier"
    LEAFREF = "leafref"
    STRING = "string"
    UNION = "union"


class YangType(BaseModel):
    """Resolved type of a leaf.

    Example:
    -------
        ```yaml
        type:
          kind: uint16
          name: port-number
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Annotated[TypeKind, Field(description="Built-in base type")]
    name: Annotated[
        str | None,
        Field(default=None, description="Typedef name the type was derived from"),
    ]


class SchemaNode(BaseModel):
    """One entry of a parsed YANG schema tree.

    A node is either a leaf (has a ``type``, no ``children``) or a container
    (has ``children``, no ``type``). The loader does not enforce this; see
    :mod:`yang_thrift.validation` for the structural checks.

    Example:
    -------
        ```yaml
        name: interface
        kind: list
        description: One network interface.
        source: device.yang:12:5
        children:
          mtu:
            kind: leaf
            type: uint16
        ```

    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1, description="Node identifier")]
    kind: Annotated[NodeKind, Field(default=NodeKind.CONTAINER, description="Node kind tag")]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable documentation"),
    ]
    type: Annotated[
        YangType | None,
        Field(default=None, description="Leaf type, absent on containers"),
    ]
    children: Annotated[
        dict[str, SchemaNode],
        Field(default_factory=dict, description="Child nodes keyed by name"),
    ]
    source: Annotated[
        str,
        Field(default="", description="Source location, e.g. 'device.yang:12:5'"),
    ]

    @field_validator("type", mode="before")
    @classmethod
    def _expand_type_shorthand(cls, value: Any) -> Any:
        """Accept ``type: string`` as shorthand for ``type: {kind: string}``."""
        if isinstance(value, str):
            return {"kind": value}
        return value

    @field_validator("children", mode="before")
    @classmethod
    def _default_child_names(cls, value: Any) -> Any:
        """Take a child's name from its mapping key when not given explicitly."""
        if not isinstance(value, dict):
            return value

        children: dict[Any, Any] = {}
        for key, child in value.items():
            if isinstance(child, dict) and "name" not in child:
                child = {"name": str(key), **child}
            children[key] = child
        return children

    @property
    def is_rpc(self) -> bool:
        """Whether this is an RPC or action node."""
        return self.kind in _RPC_KINDS

    @property
    def is_list(self) -> bool:
        """Whether this node is repeatable (list or leaf-list)."""
        return self.kind in _LIST_KINDS

    @property
    def is_leaf(self) -> bool:
        """Whether this node carries a primitive type and no children."""
        return not self.children and self.type is not None

    @property
    def is_container(self) -> bool:
        """Whether this node has children."""
        return bool(self.children)


SchemaNode.model_rebuild()
