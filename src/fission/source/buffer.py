"""Cursor primitives over an in-memory code unit buffer.

BufferCharSource implements every CharSource primitive over a read-only
``memoryview`` of UTF-16 code units. Concrete sources only decide where
the text comes from; cursor semantics live here once.

Cursor state:
    _pos  - index of the next code unit, 0 <= _pos <= _length
    _mark - previously observed _pos, or None

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from fission.constants import END_OF_SOURCE
from fission.diagnostics import ErrorTemplate, InvalidStateError
from fission.source.base import ClosableCharSource
from fission.source.units import encode_units

__all__ = ["BufferCharSource"]

_EMPTY = encode_units("")


class BufferCharSource(ClosableCharSource):
    """CharSource over a fixed buffer of code units.

    The buffer is produced once by the constructor and never modified.
    Mark and reset restore an index; nothing is copied.
    """

    __slots__ = ("_length", "_mark", "_pos", "_units")

    def __init__(self, text: str) -> None:
        self._units = encode_units(text)
        self._length = len(self._units)
        self._pos = 0
        self._mark: int | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._pos}, length={self._length})"

    @property
    def length(self) -> int:
        """Total number of readable code units."""
        return self._length

    def read(self) -> int:
        pos = self._pos
        if pos < self._length:
            self._pos = pos + 1
            return self._units[pos]
        return END_OF_SOURCE

    def peek(self) -> int:
        pos = self._pos
        return self._units[pos] if pos < self._length else END_OF_SOURCE

    def peek_ahead(self, count: int) -> tuple[int, ...]:
        if count <= 0:
            return ()
        pos = self._pos
        end = min(pos + count, self._length)
        ahead = self._units[pos:end].tolist()
        missing = count - len(ahead)
        if missing:
            ahead.extend([END_OF_SOURCE] * missing)
        return tuple(ahead)

    def has_next(self) -> bool:
        return self._pos < self._length

    @property
    def position(self) -> int:
        return self._pos

    def mark(self) -> None:
        self._mark = self._pos

    def reset(self) -> None:
        if self._mark is None:
            raise InvalidStateError(ErrorTemplate.no_mark_set("reset", self._pos))
        self._pos = self._mark

    def commit(self) -> None:
        if self._mark is None:
            raise InvalidStateError(ErrorTemplate.no_mark_set("commit", self._pos))
        self._mark = None

    def close(self) -> None:
        """No resource is held by an in-memory buffer."""

    def _release(self) -> None:
        """Drop the buffer; every later read reports end of input.

        The readable length is cut at the current position so position
        keeps reporting where reading stopped.
        """
        self._units = _EMPTY
        self._length = self._pos
        self._mark = None
