"""String-backed character source."""

from __future__ import annotations

from fission.source.buffer import BufferCharSource

__all__ = ["StringCharSource"]


class StringCharSource(BufferCharSource):
    """CharSource over an in-memory string.

    The string is indexed by UTF-16 code unit, so a character outside the
    Basic Multilingual Plane takes two positions and is read as a surrogate
    pair. ``None`` is treated as the empty string.

    close() is a no-op; the source stays readable.

    Example:
        >>> source = StringCharSource("abc")
        >>> source.read_char(), source.read_char(), source.read_char()
        ('a', 'b', 'c')
        >>> source.read()
        -1
    """

    __slots__ = ()

    def __init__(self, text: str | None = None) -> None:
        super().__init__(text if text is not None else "")
