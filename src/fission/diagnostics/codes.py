"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for loader and cursor failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for Fission errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        IO: Failure while locating, reading or decoding a file buffer
        STATE: Cursor operation invoked in a state that does not allow it
    """

    IO = "io"
    STATE = "state"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: File buffer errors (missing, oversized, undecodable)
        2000-2999: Cursor contract errors (mark state, arguments)
    """

    # File buffer errors (1000-1999)
    SOURCE_NOT_FOUND = 1001
    SOURCE_TOO_LARGE = 1002
    SOURCE_DECODE_FAILED = 1003
    SOURCE_READ_FAILED = 1004

    # Cursor contract errors (2000-2999)
    NO_MARK_SET = 2001
    INVALID_DELIMITER = 2002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the numeric range of the code."""
        return ErrorCategory.IO if self.value < 2000 else ErrorCategory.STATE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        path: Filesystem path involved (file buffer errors)
        position: Cursor position at the time of the error (cursor errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: str | None = None
    position: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[SOURCE_NOT_FOUND]: File not found: config.toml
              --> config.toml
              = help: Check that the path exists and points to a regular file

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
