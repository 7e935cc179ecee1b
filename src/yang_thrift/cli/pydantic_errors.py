"""Readable messages for schema node model errors."""

from __future__ import annotations

from pydantic_core import ErrorDetails

_MESSAGES: dict[str, str] = {
    "missing": "Required field is missing",
    "extra_forbidden": "Unknown field",
    "string_type": "Must be a string",
    "dict_type": "Must be a mapping of child name to node",
    "model_type": "Must be a mapping",
    "string_too_short": "Node names must not be empty",
}

_HINTS: dict[str, str] = {
    "missing": "Root nodes need a 'name'; children take theirs from their key",
    "extra_forbidden": "Nodes accept name, kind, description, type, children and source",
    "enum": "Check the value against the YANG keyword it was dumped from",
}


def node_error_location(loc: tuple[str | int, ...]) -> str:
    """Turn a Pydantic error location into ``<node path>: <field>``.

    Child keys are joined with ``/`` like validation paths and roots from a
    ``modules`` list are shown by index, so
    ``(1, "children", "mtu", "type", "kind")`` becomes ``[1]/mtu: type.kind``.
    """
    nodes: list[str] = []
    fields: list[str] = []
    parts = iter(loc)
    for part in parts:
        if isinstance(part, int):
            nodes.append(f"[{part}]")
            continue
        key = next(parts, None) if part == "children" and not fields else None
        if key is None:
            fields.append(part)
        else:
            nodes.append(str(key))

    path = "/".join(nodes) or "<root>"
    if fields:
        return f"{path}: {'.'.join(fields)}"
    return path


def describe_node_error(error: ErrorDetails) -> str:
    """Return a readable message for one model error."""
    if error["type"] == "enum":
        expected = (error.get("ctx") or {}).get("expected", "a known value")
        return f"Unknown value {error['input']!r}, expected {expected}"
    return _MESSAGES.get(error["type"], error["msg"])


def node_error_hint(error: ErrorDetails) -> str | None:
    """Return a fix suggestion for the error type, if there is one."""
    return _HINTS.get(error["type"])
