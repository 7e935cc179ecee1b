"""Identifier normalization for Thrift output."""

from __future__ import annotations

import re

_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_]")


def normalize_struct_name(raw: str) -> str:
    """Turn a YANG node name into a valid Thrift type identifier.

    Every character outside ``[A-Za-z0-9_]`` becomes an underscore and a
    leading digit is prefixed with one. Applying it twice gives the same
    result as applying it once.

    Examples:
    --------
        >>> normalize_struct_name("interface-config")
        'interface_config'
        >>> normalize_struct_name("ietf:if.stats")
        'ietf_if_stats'
        >>> normalize_struct_name("802-1x")
        '_802_1x'

    """
    name = _NON_IDENTIFIER.sub("_", raw)
    if not name:
        return "_"
    if name[0].isdigit():
        name = "_" + name
    return name


def normalize_field_name(raw: str) -> str:
    """Replace hyphens with underscores in a field name.

    Unlike :func:`normalize_struct_name` no other character is touched.
    """
    return raw.replace("-", "_")
