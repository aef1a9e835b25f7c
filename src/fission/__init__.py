"""Fission - fast character sources for hand-written parsers.

Reads text from a string or a fully loaded file and exposes it through a
cursor with peek, multi-character lookahead and single-level
backtracking. No exceptions are used for end of input and no locks are
taken; a source belongs to one reader at a time.

Public API:
    read_string - Read a whole file as a string
    read_lines - Read a file as a list of lines
    chars - Create a CharSource from a path or a string
    CharSource - Cursor contract (read, peek, peek_ahead, mark/reset/commit, helpers)
    StringCharSource - Cursor over an in-memory string
    FileCharSource - Cursor over a decoded file buffer
    BufferConfig - Encoding, codec error handler and size limit for files

Exceptions:
    FissionError - Base exception class
    FileReadError - Any failure loading a file
    SourceNotFoundError - File does not exist
    SourceTooLargeError - File exceeds the buffer size limit
    SourceDecodeError - I/O or decoding failure
    InvalidStateError - reset()/commit() without mark()

Submodules:
    fission.source - CharSource implementations and code unit predicates
    fission.diagnostics - Error codes, templates and formatting
    fission.loading - Decoded buffer loader
"""

from .api import chars, read_lines, read_string
from .config import BufferConfig
from .constants import DEFAULT_ENCODING, END_OF_SOURCE
from .diagnostics import (
    FileReadError,
    FissionError,
    InvalidStateError,
    SourceDecodeError,
    SourceNotFoundError,
    SourceTooLargeError,
)
from .source import (
    CharSource,
    ClosableCharSource,
    FileCharSource,
    StringCharSource,
    is_digit,
    is_letter,
    is_letter_or_digit,
    is_whitespace,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("fission")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_ENCODING",
    "END_OF_SOURCE",
    "BufferConfig",
    "CharSource",
    "ClosableCharSource",
    "FileCharSource",
    "FileReadError",
    "FissionError",
    "InvalidStateError",
    "SourceDecodeError",
    "SourceNotFoundError",
    "SourceTooLargeError",
    "StringCharSource",
    "__version__",
    "chars",
    "is_digit",
    "is_letter",
    "is_letter_or_digit",
    "is_whitespace",
    "read_lines",
    "read_string",
]
