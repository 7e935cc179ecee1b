"""Base validator class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from yang_thrift.validation.errors import ValidationResult

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode


def walk(entries: Sequence[SchemaNode]) -> Iterator[tuple[str, str | None, SchemaNode]]:
    """Yield ``(path, key, node)`` for every node in pre-order.

    ``key`` is the mapping key the node is stored under in its parent, or
    ``None`` for roots.
    """
    stack: list[tuple[str, str | None, SchemaNode]] = [
        (entry.name, None, entry) for entry in reversed(entries)
    ]
    while stack:
        path, key, node = stack.pop()
        yield path, key, node
        for child_key, child in reversed(list(node.children.items())):
            stack.append((f"{path}/{child_key}", child_key, child))


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        entries: Sequence[SchemaNode],
        result: ValidationResult,
    ) -> None:
        """Validate the tree and add issues to result.

        Args:
        ----
            entries: Root nodes of the schema tree.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: Sequence[BaseValidator]) -> None:
        """Run ``validators`` in the given order."""
        self.validators = list(validators)

    def validate(
        self,
        entries: Sequence[SchemaNode],
        result: ValidationResult,
    ) -> None:
        """Run all validators.

        Args:
        ----
            entries: Root nodes of the schema tree.
            result: The result object to add issues to.

        """
        for validator in self.validators:
            validator.validate(entries, result)
