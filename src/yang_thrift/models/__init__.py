"""Pydantic models for parsed YANG schema trees.

These models describe the entry tree handed over by a YANG parser. They are
used for:

- Loading YAML/JSON dumps of parsed trees
- Type-safe access to node kinds, types and children

Primary Entry Points:
    load_schema_tree(path): Load the root nodes from a YAML/JSON file
    validate_schema_tree(path): Load and return list of errors
    SchemaNode: One node of the tree

Model Hierarchy:
    SchemaNode
    ├── kind: NodeKind - container, list, leaf, leaf-list, rpc, action
    ├── type: YangType - leaf type (TypeKind + typedef name)
    └── children: name -> SchemaNode
"""

from yang_thrift.models.loader import (
    LoaderError,
    load_schema_tree,
    load_yaml_file,
    parse_schema_tree,
    validate_schema_tree,
)
from yang_thrift.models.node import NodeKind, SchemaNode, TypeKind, YangType

__all__ = [
    "LoaderError",
    "NodeKind",
    "SchemaNode",
    "TypeKind",
    "YangType",
    "load_schema_tree",
    "load_yaml_file",
    "parse_schema_tree",
    "validate_schema_tree",
]
