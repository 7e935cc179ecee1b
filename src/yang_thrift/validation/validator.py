"""Main validator combining all tree checks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from yang_thrift.validation.base import CompositeValidator
from yang_thrift.validation.errors import ValidationResult
from yang_thrift.validation.tree_validators import (
    ChildNameValidator,
    NodeShapeValidator,
    RenderabilityValidator,
    StructNameCollisionValidator,
)

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode


class SchemaTreeValidator:
    """Main validator for loaded schema trees.

    Errors mark trees that break the leaf-or-container rule the formatters
    rely on. Warnings mark output that will be degraded (skipped structs,
    placeholder types, name collisions).
    """

    def __init__(self, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            strict: If True, treat warnings as errors.

        """
        self.strict = strict
        self._validator = CompositeValidator(
            [
                NodeShapeValidator(),
                ChildNameValidator(),
                RenderabilityValidator(),
                StructNameCollisionValidator(),
            ]
        )

    def validate(self, entries: Sequence[SchemaNode]) -> ValidationResult:
        """Validate a schema tree.

        Args:
        ----
            entries: Root nodes to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(entries, result)
        return result

    def validate_and_raise(self, entries: Sequence[SchemaNode]) -> ValidationResult:
        """Validate and raise exception if invalid.

        Args:
        ----
            entries: Root nodes to validate.

        Returns:
        -------
            The result, when it passes.

        Raises:
        ------
            TreeValidationError: If validation fails.

        """
        result = self.validate(entries)

        if not result.is_valid:
            raise TreeValidationError(result)

        if self.strict and result.warnings:
            raise TreeValidationError(result)

        return result


class TreeValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result.

        Args:
        ----
            result: The validation result containing issues.

        """
        self.result = result
        counts = [
            f"{len(issues)} {label}(s)"
            for label, issues in (("error", result.errors), ("warning", result.warnings))
            if issues
        ]
        super().__init__(f"Validation failed: {', '.join(counts)}")
