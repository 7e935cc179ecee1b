"""Map YANG base types to Thrift type tokens."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from yang_thrift.models.node import TypeKind

PLACEHOLDER_PREFIX = "TODO-"

# Kinds without a Thrift counterpart yet are mapped to "TODO-" placeholders
KIND_TO_THRIFT: Mapping[TypeKind, str] = MappingProxyType(
    {
        TypeKind.INT8: "byte",  # int in range [-128, 127]
        TypeKind.INT16: "i16",  # int in range [-32768, 32767]
        TypeKind.INT32: "i32",  # int in range [-2147483648, 2147483647]
        TypeKind.INT64: "i64",  # int in range [-9223372036854775808, 9223372036854775807]
        TypeKind.UINT8: "TODO-uint8",  # int in range [0, 255]
        TypeKind.UINT16: "TODO-uint16",  # int in range [0, 65535]
        TypeKind.UINT32: "TODO-uint32",  # int in range [0, 4294967295]
        TypeKind.UINT64: "TODO-uint64",  # int in range [0, 18446744073709551615]
        TypeKind.BINARY: "TODO-bytes",  # arbitrary data
        TypeKind.BITS: "TODO-bits",  # set of bits or flags
        TypeKind.BOOLEAN: "bool",
        TypeKind.DECIMAL64: "TODO-decimal64",  # signed decimal number
        TypeKind.ENUMERATION: "enum",
        TypeKind.IDENTITYREF: "string",  # reference to an abstract identity
        TypeKind.INSTANCE_IDENTIFIER: "TODO-ii",  # reference to a data tree node
        TypeKind.LEAFREF: "string",  # reference to a leaf instance
        TypeKind.STRING: "string",
        TypeKind.UNION: "TODO-union",  # choice of types
    }
)


def thrift_type(kind: TypeKind) -> str:
    """Return the Thrift type token for a YANG base type.

    Kinds missing from :data:`KIND_TO_THRIFT` become ``TODO-<kind>``.

    Args:
    ----
        kind: The YANG base type.

    Returns:
    -------
        Non-empty Thrift type token.

    """
    token = KIND_TO_THRIFT.get(kind)
    if token is None:
        token = f"{PLACEHOLDER_PREFIX}{kind.value}"
    return token


def is_placeholder(token: str) -> bool:
    """Check whether a type token stands in for an unimplemented mapping."""
    return token.startswith(PLACEHOLDER_PREFIX)
