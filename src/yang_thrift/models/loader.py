"""YAML/JSON schema tree loading utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from yang_thrift.models.node import SchemaNode

logger = logging.getLogger(__name__)

_ENTRIES_ADAPTER = TypeAdapter(list[SchemaNode])


class LoaderError(Exception):
    """Error during YAML/JSON file loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize LoaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or parsed.

    """
    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .yaml, .yml, or .json",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoaderError(f"YAML parsing error: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def parse_schema_tree(data: dict[str, Any]) -> list[SchemaNode]:
    """Build root schema nodes from raw data.

    ``data`` is either ``{"modules": [node, ...]}`` or a single node mapping.

    Raises
    ------
        ValidationError: If a node does not match the schema node model.

    """
    if "modules" in data:
        return _ENTRIES_ADAPTER.validate_python(data["modules"])
    return [SchemaNode.model_validate(data)]


def load_schema_tree(path: Path) -> list[SchemaNode]:
    """Load the root schema nodes from a YAML/JSON tree dump.

    Args:
    ----
        path: Path to the tree dump.

    Returns:
    -------
        Root nodes in file order.

    Raises:
    ------
        LoaderError: If the file cannot be loaded.
        ValidationError: If the file content is not a valid schema tree.

    """
    data = load_yaml_file(path)
    entries = parse_schema_tree(data)
    logger.debug("Loaded %d root node(s) from %s", len(entries), path)
    return entries


def validate_schema_tree(path: Path) -> list[str]:
    """Check that a file loads as a schema tree and return the problems found.

    This is a non-throwing version of load_schema_tree, useful for
    validation CLI commands.

    Args:
    ----
        path: Path to the tree dump.

    Returns:
    -------
        List of error messages (empty if the file loads).

    """
    errors: list[str] = []

    try:
        data = load_yaml_file(path)
    except LoaderError as e:
        return [str(e)]

    try:
        parse_schema_tree(data)
    except ValidationError as e:
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"{loc}: {msg}")

    return errors
