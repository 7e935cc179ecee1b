"""Validation module for schema trees."""

from yang_thrift.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)
from yang_thrift.validation.validator import (
    SchemaTreeValidator,
    TreeValidationError,
)

__all__ = [
    "ErrorCodes",
    "SchemaTreeValidator",
    "TreeValidationError",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
]
