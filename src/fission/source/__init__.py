"""Character sources for hand-written parsers.

Exports:
    CharSource: Read/peek/mark-reset contract with derived parsing helpers
    ClosableCharSource: CharSource with close() and context manager support
    StringCharSource: Source over an in-memory string
    FileCharSource: Source over a fully decoded file
    is_whitespace, is_letter, is_digit, is_letter_or_digit: Code unit predicates

Python 3.13+. Zero external dependencies.
"""

from .base import CharSource, ClosableCharSource
from .buffer import BufferCharSource
from .file_source import FileCharSource
from .string_source import StringCharSource
from .units import (
    decode_units,
    encode_units,
    is_digit,
    is_letter,
    is_letter_or_digit,
    is_whitespace,
)

__all__ = [
    "BufferCharSource",
    "CharSource",
    "ClosableCharSource",
    "FileCharSource",
    "StringCharSource",
    "decode_units",
    "encode_units",
    "is_digit",
    "is_letter",
    "is_letter_or_digit",
    "is_whitespace",
]
