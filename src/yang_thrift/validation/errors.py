"""Issues found while checking a schema tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from yang_thrift.models.node import SchemaNode


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"


class ErrorCodes:
    """Issue codes. ``E`` codes are errors, ``W`` codes are warnings."""

    # E0xx - Node shape: formatted output would be wrong
    E001_LEAF_WITHOUT_TYPE = "E001"
    E002_TYPED_CONTAINER = "E002"
    E003_NAME_MISMATCH = "E003"

    # W0xx - Degraded output: valid Thrift, but incomplete
    W001_EMPTY_CONTAINER = "W001"
    W002_PLACEHOLDER_TYPE = "W002"
    W003_STRUCT_NAME_COLLISION = "W003"


@dataclass(frozen=True)
class ValidationIssue:
    """A problem found at one node of the tree."""

    code: str
    message: str

    path: str
    """Slash-joined mapping keys from the root, e.g. ``device/interface/mtu``."""

    source: str = ""
    """YANG source position of the node, if the dump carries one."""

    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def severity(self) -> ValidationSeverity:
        """Severity implied by the first letter of the code."""
        if self.code.startswith("E"):
            return ValidationSeverity.ERROR
        return ValidationSeverity.WARNING

    @property
    def location(self) -> str:
        """Tree path, followed by the source position when known."""
        if self.source:
            return f"{self.path} ({self.source})"
        return self.path

    def __str__(self) -> str:
        """Format issue as a single line."""
        text = f"[{self.code}] {self.location}: {self.message}"
        if self.suggestion:
            text += f" (hint: {self.suggestion})"
        return text


@dataclass
class ValidationResult:
    """All issues found in one validation run, in discovery order."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def _of(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        """Issues with an E code."""
        return self._of(ValidationSeverity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Issues with a W code."""
        return self._of(ValidationSeverity.WARNING)

    @property
    def is_valid(self) -> bool:
        """Warnings alone keep a tree valid."""
        return not self.errors

    def report(
        self,
        code: str,
        path: str,
        node: SchemaNode,
        message: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Record an issue for ``node``; the severity follows from ``code``.

        Args:
        ----
            code: One of the :class:`ErrorCodes` values.
            path: Tree path of ``node``.
            node: The offending node, for its source position.
            message: Human-readable description.
            suggestion: Optional fix hint.
            **context: Extra machine-readable details.

        """
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                path=path,
                source=node.source,
                suggestion=suggestion,
                context=context,
            )
        )
