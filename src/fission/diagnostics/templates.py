"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every failure mode in one place.
    """

    # =========================================================================
    # FILE BUFFER ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def source_not_found(path: str) -> Diagnostic:
        """Path does not reference an existing regular file.

        Args:
            path: The path that was requested

        Returns:
            Diagnostic for SOURCE_NOT_FOUND
        """
        msg = f"File not found: {path}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_NOT_FOUND,
            message=msg,
            hint="Check that the path exists and points to a regular file",
            path=path,
        )

    @staticmethod
    def source_too_large(path: str, size: int, max_size: int) -> Diagnostic:
        """File is larger than the configured buffer limit.

        Args:
            path: The path that was requested
            size: Actual file size in bytes
            max_size: Configured limit in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"File too large: {size} bytes"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint=f"Files must not exceed {max_size} bytes to be loaded into memory",
            path=path,
        )

    @staticmethod
    def source_decode_failed(path: str, encoding: str, reason: str) -> Diagnostic:
        """Bytes could not be decoded with the requested encoding.

        Args:
            path: The path that was read
            encoding: Encoding used for decoding
            reason: Message of the underlying UnicodeDecodeError

        Returns:
            Diagnostic for SOURCE_DECODE_FAILED
        """
        msg = f"Failed to decode file as {encoding}: {path}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_DECODE_FAILED,
            message=msg,
            hint=f"Check the file encoding ({reason})",
            path=path,
        )

    @staticmethod
    def source_read_failed(path: str, reason: str) -> Diagnostic:
        """Lower-level I/O failure while reading a file.

        Args:
            path: The path that was read
            reason: Message of the underlying OSError

        Returns:
            Diagnostic for SOURCE_READ_FAILED
        """
        msg = f"Failed to read file: {path}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_READ_FAILED,
            message=msg,
            hint=reason,
            path=path,
        )

    @staticmethod
    def char_source_failed(path: str, reason: str) -> Diagnostic:
        """File cursor construction failed in the convenience layer."""
        msg = f"Failed to create char source: {path}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_READ_FAILED,
            message=msg,
            hint=reason,
            path=path,
        )

    # =========================================================================
    # CURSOR CONTRACT ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def no_mark_set(operation: str, position: int) -> Diagnostic:
        """reset() or commit() invoked without a live mark.

        Args:
            operation: Name of the operation that required a mark
            position: Cursor position when the operation was invoked

        Returns:
            Diagnostic for NO_MARK_SET
        """
        return Diagnostic(
            code=DiagnosticCode.NO_MARK_SET,
            message="No mark set",
            hint=f"Call mark() before {operation}()",
            position=position,
        )

    @staticmethod
    def invalid_delimiter(delimiter: str) -> Diagnostic:
        """Delimiter is not a single UTF-16 code unit.

        Args:
            delimiter: The rejected delimiter string

        Returns:
            Diagnostic for INVALID_DELIMITER
        """
        msg = f"Delimiter must be a single BMP character, got {delimiter!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DELIMITER,
            message=msg,
            hint="Pass an int code unit or a one-character string",
        )
