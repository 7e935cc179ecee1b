"""Schema tree transformations used by the formatters.

The transformation steps:
    1. Flatten each root into a pre-order list of nodes
    2. Map leaf base types to Thrift type tokens
    3. Decide which containers emit a struct and which children are fields
    4. Normalize node names into Thrift identifiers

Example:
-------
    >>> from yang_thrift.transform import flatten, normalize_struct_name
    >>>
    >>> for node in flatten(root):
    ...     print(normalize_struct_name(node.name))

"""

from yang_thrift.transform.flatten import flatten
from yang_thrift.transform.naming import normalize_field_name, normalize_struct_name
from yang_thrift.transform.structs import StructPlan
from yang_thrift.transform.type_mapping import (
    KIND_TO_THRIFT,
    PLACEHOLDER_PREFIX,
    is_placeholder,
    thrift_type,
)

__all__ = [
    "KIND_TO_THRIFT",
    "PLACEHOLDER_PREFIX",
    "StructPlan",
    "flatten",
    "is_placeholder",
    "normalize_field_name",
    "normalize_struct_name",
    "thrift_type",
]
