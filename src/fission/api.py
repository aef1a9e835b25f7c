"""Convenience functions for reading files and creating character sources.

Every failure that involves a file surfaces as FileReadError (or one of
its subclasses), so callers can handle all I/O problems with a single
``except`` clause:

    >>> try:
    ...     content = read_string("config.toml")
    ... except FileReadError as e:
    ...     print(e.diagnostic.format_error())

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
import re
from typing import overload

from fission.config import BufferConfig
from fission.constants import DEFAULT_ENCODING
from fission.diagnostics import ErrorTemplate, FileReadError
from fission.loading import StrPath, load_buffer
from fission.source import FileCharSource, StringCharSource

__all__ = ["chars", "read_lines", "read_string"]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _buffer_config(path: StrPath, encoding: str) -> BufferConfig:
    try:
        return BufferConfig(encoding=encoding)
    except ValueError as e:
        raise FileReadError(ErrorTemplate.char_source_failed(os.fspath(path), str(e))) from e


def read_string(path: StrPath, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the entire content of a file.

    Args:
        path: File to read
        encoding: Text encoding (default: UTF-8)

    Returns:
        Decoded file content; empty string for an empty file

    Raises:
        FileReadError: If the file does not exist, is too large, or cannot
            be read or decoded
    """
    return load_buffer(path, _buffer_config(path, encoding))


def read_lines(path: StrPath, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Read all lines of a file.

    Lines are split on LF, CR and CRLF; terminators are not included. A
    terminator at the very end of the file does not start another line.

    Args:
        path: File to read
        encoding: Text encoding (default: UTF-8)

    Returns:
        Lines in file order; empty list for an empty file

    Raises:
        FileReadError: If the file cannot be read or decoded

    Example:
        >>> read_lines("three.txt")  # "Line 1\\nLine 2\\r\\nLine 3\\n"
        ['Line 1', 'Line 2', 'Line 3']
    """
    text = load_buffer(path, _buffer_config(path, encoding))
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


@overload
def chars(source: os.PathLike[str], encoding: str = DEFAULT_ENCODING) -> FileCharSource: ...


@overload
def chars(source: str | None, encoding: str = DEFAULT_ENCODING) -> StringCharSource: ...


def chars(
    source: os.PathLike[str] | str | None,
    encoding: str = DEFAULT_ENCODING,
) -> FileCharSource | StringCharSource:
    """Create a character source.

    A ``pathlib.Path`` (any ``os.PathLike``) opens the file it names; a
    ``str`` is the text itself. Pass ``Path("name")`` to read a file named
    by a string.

    Args:
        source: Path of a file to load, or text to read (None for empty)
        encoding: Text encoding for files (default: UTF-8); ignored for text

    Returns:
        FileCharSource for paths, StringCharSource for text

    Raises:
        FileReadError: If the file source cannot be created. Text sources
            never fail.

    Example:
        >>> source = chars(Path("example.txt"))
        >>> while source.has_next():
        ...     ch = source.read_char()
    """
    if source is None or isinstance(source, str):
        return StringCharSource(source)
    return FileCharSource(source, config=_buffer_config(source, encoding))
