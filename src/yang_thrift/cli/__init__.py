"""Rich output and error handling for the ``yang-thrift`` command."""

from yang_thrift.cli.error_formatter import IssueLayout, print_issues
from yang_thrift.cli.exception_handler import handle_exceptions

__all__ = ["IssueLayout", "handle_exceptions", "print_issues"]
