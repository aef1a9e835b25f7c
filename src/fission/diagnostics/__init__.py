"""Diagnostic system for Fission errors.

Provides structured error diagnostics with codes, hints and locations.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    FileReadError,
    FissionError,
    InvalidStateError,
    SourceDecodeError,
    SourceNotFoundError,
    SourceTooLargeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FileReadError",
    "FissionError",
    "InvalidStateError",
    "OutputFormat",
    "SourceDecodeError",
    "SourceNotFoundError",
    "SourceTooLargeError",
]
