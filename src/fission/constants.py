"""Shared constants for Fission.

This module provides centralized configuration constants used by the
loader, the cursors and the convenience API. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Cursor protocol: Values returned by CharSource primitives
- Decoding defaults: Encoding and error handler used when none is given
- Input limits: Upper bound on the size of a fully-loaded file buffer

Python 3.13+. Zero external dependencies.
"""

import sys

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Cursor protocol
    "END_OF_SOURCE",
    "NULL_CHAR",
    # Decoding defaults
    "DEFAULT_ENCODING",
    "DEFAULT_ERRORS",
    "BUFFER_ENCODING",
    # Input limits
    "MAX_BUFFER_SIZE",
]

# ============================================================================
# CURSOR PROTOCOL
# ============================================================================

# Returned by read(), peek() and inside peek_ahead() past the end of input.
# Code units are always >= 0, so a negative marker can never collide.
END_OF_SOURCE: int = -1

# read_char() result at end of input.
NULL_CHAR: str = "\0"

# ============================================================================
# DECODING DEFAULTS
# ============================================================================

DEFAULT_ENCODING: str = "utf-8"

# Malformed input is a hard failure (SourceDecodeError), never replaced.
DEFAULT_ERRORS: str = "strict"

# Internal representation of every backing sequence: one index per UTF-16
# code unit, in native byte order so memoryview.cast("H") reads units directly.
BUFFER_ENCODING: str = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Largest file accepted by the loader, in bytes. Matches the largest
# single in-memory buffer addressable with a signed 32-bit index.
MAX_BUFFER_SIZE: int = 2**31 - 1
