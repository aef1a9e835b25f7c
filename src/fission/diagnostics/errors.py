"""Fission exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information.

Hierarchy:
    FissionError (base)
    ├─ FileReadError (any failure producing a file buffer)
    │  ├─ SourceNotFoundError (path does not exist)
    │  ├─ SourceTooLargeError (file exceeds the buffer limit)
    │  └─ SourceDecodeError (I/O or decoding failure)
    └─ InvalidStateError (reset/commit without a mark)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FileReadError",
    "FissionError",
    "InvalidStateError",
    "SourceDecodeError",
    "SourceNotFoundError",
    "SourceTooLargeError",
]


class FissionError(Exception):
    """Base exception for all Fission errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FissionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class FileReadError(FissionError):
    """A file could not be turned into an in-memory character buffer.

    Raised by the convenience functions for every failure; the loader
    raises one of the subclasses so callers can tell the causes apart.
    """


class SourceNotFoundError(FileReadError):
    """The path does not reference an existing regular file."""


class SourceTooLargeError(FileReadError):
    """The file is larger than the maximum in-memory buffer size.

    Attributes:
        size: File size in bytes
        max_size: Limit that was exceeded
    """

    def __init__(self, message: str | Diagnostic, *, size: int = 0, max_size: int = 0) -> None:
        super().__init__(message)
        self.size = size
        self.max_size = max_size


class SourceDecodeError(FileReadError):
    """A lower-level I/O or decoding failure while loading a file.

    The original OSError or UnicodeDecodeError is available as __cause__.
    """


class InvalidStateError(FissionError):
    """Cursor operation requires a live mark but none is set.

    Signals a contract violation by the caller (reset() or commit()
    without a preceding mark()).
    """
