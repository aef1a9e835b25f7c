"""UTF-16 code unit helpers.

Every CharSource indexes its text by UTF-16 code unit: one position per
unit, so characters outside the Basic Multilingual Plane occupy two
positions and are read as a surrogate pair. This module converts between
Python strings (indexed by code point) and code unit sequences, and
provides character-class predicates that accept the raw ``int`` values
produced by ``read()`` and ``peek()``.

Predicates return False for END_OF_SOURCE, so they can be passed straight
to ``read_while``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from array import array
from collections.abc import Iterable

from fission.constants import BUFFER_ENCODING, END_OF_SOURCE

__all__ = [
    "decode_units",
    "encode_units",
    "is_digit",
    "is_letter",
    "is_letter_or_digit",
    "is_whitespace",
]

_BUFFER_ERRORS = "surrogatepass"

# isspace() accepts these, but they do not separate tokens.
_NON_BREAKING = frozenset((0x0085, 0x00A0, 0x2007, 0x202F))


def encode_units(text: str) -> memoryview:
    """Return text as a read-only sequence of UTF-16 code units.

    Indexing the result yields ``int`` values in range 0..0xFFFF.

    Example:
        >>> list(encode_units("a\U0001f30d"))
        [97, 55356, 57101]
    """
    data = text.encode(BUFFER_ENCODING, _BUFFER_ERRORS)
    return memoryview(data).cast("H")


def decode_units(units: Iterable[int] | memoryview | array[int]) -> str:
    """Rebuild a string from UTF-16 code units.

    Adjacent surrogate halves combine into one character; unpaired
    halves are kept as lone surrogate code points.

    Example:
        >>> decode_units([104, 105])
        'hi'
    """
    if isinstance(units, (memoryview, array)):
        return units.tobytes().decode(BUFFER_ENCODING, _BUFFER_ERRORS)
    return array("H", units).tobytes().decode(BUFFER_ENCODING, _BUFFER_ERRORS)


def is_whitespace(code: int) -> bool:
    """Check whether a code unit is breaking whitespace.

    Accepts what ``str.isspace`` accepts except the no-break spaces
    (U+00A0, U+2007, U+202F) and NEXT LINE (U+0085), which are content.
    """
    return code != END_OF_SOURCE and code not in _NON_BREAKING and chr(code).isspace()


def is_letter(code: int) -> bool:
    """Check whether a code unit is alphabetic per ``str.isalpha``."""
    return code != END_OF_SOURCE and chr(code).isalpha()


def is_digit(code: int) -> bool:
    """Check whether a code unit is a decimal digit per ``str.isdecimal``."""
    return code != END_OF_SOURCE and chr(code).isdecimal()


def is_letter_or_digit(code: int) -> bool:
    return is_letter(code) or is_digit(code)
