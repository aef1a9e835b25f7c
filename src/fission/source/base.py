"""CharSource contract for sequential character reading.

A CharSource is a mutable cursor over a fixed sequence of UTF-16 code
units. It offers:

    - Sequential reading with read()
    - Look-ahead with peek() and peek_ahead()
    - Single-level backtracking with mark() / reset() / commit()
    - Parsing helpers built only on the primitives above

Design Goals:
    - No exceptions for end of input: END_OF_SOURCE (-1) is a return value
    - No synchronization: a source has exactly one accessor at a time
    - No per-character string allocation in the primitives

Usage:
    >>> source = StringCharSource('key = "value"')
    >>> source.read_while(is_letter)
    'key'
    >>> source.skip_whitespace()
    >>> source.consume("=")
    True
    >>> source.skip_whitespace()
    >>> source.consume('"')
    True
    >>> source.read_until('"')
    'value'

Thread Safety:
    Implementations are NOT thread-safe. Use external synchronization
    if a source must be shared between threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from array import array
from collections.abc import Callable, Iterator
from typing import Self

from fission.constants import END_OF_SOURCE, NULL_CHAR
from fission.diagnostics import ErrorTemplate
from fission.source.units import decode_units, encode_units, is_whitespace

__all__ = ["CharSource", "ClosableCharSource"]

_LF = 0x0A
_CR = "\r"


class CharSource(ABC):
    """Sequential reader over a sequence of UTF-16 code units.

    Subclasses implement the primitives (read, peek, peek_ahead, has_next,
    position, mark, reset, commit). Everything else is derived from them
    here and behaves identically for every backing store.
    """

    __slots__ = ()

    # ========================================================================
    # PRIMITIVES
    # ========================================================================

    @abstractmethod
    def read(self) -> int:
        """Read the next code unit and advance.

        Returns:
            Code unit in range 0..0xFFFF, or END_OF_SOURCE (-1) at end of
            input. Position does not change at end of input.
        """

    @abstractmethod
    def peek(self) -> int:
        """Return the next code unit without advancing.

        Repeated calls return the same value until the position changes.

        Returns:
            Code unit, or END_OF_SOURCE at end of input
        """

    @abstractmethod
    def peek_ahead(self, count: int) -> tuple[int, ...]:
        """Look ahead several code units without advancing.

        Args:
            count: Number of code units to look at

        Returns:
            Exactly ``count`` values; positions past the end hold
            END_OF_SOURCE. Empty tuple when count <= 0.

        Example:
            >>> StringCharSource("hi").peek_ahead(5)
            (104, 105, -1, -1, -1)
        """

    @abstractmethod
    def has_next(self) -> bool:
        """Check whether read() would return a code unit."""

    @property
    @abstractmethod
    def position(self) -> int:
        """Index of the next code unit to be read (0-based)."""

    @abstractmethod
    def mark(self) -> None:
        """Remember the current position, replacing any previous mark."""

    @abstractmethod
    def reset(self) -> None:
        """Return to the marked position. The mark stays set.

        Raises:
            InvalidStateError: If no mark is set
        """

    @abstractmethod
    def commit(self) -> None:
        """Clear the mark and keep the current position.

        Raises:
            InvalidStateError: If no mark is set
        """

    # ========================================================================
    # DERIVED OPERATIONS
    # ========================================================================

    def read_char(self) -> str:
        """Read the next code unit as a one-character string.

        Returns:
            The character, or "\\0" at end of input
        """
        code = self.read()
        return NULL_CHAR if code == END_OF_SOURCE else chr(code)

    def read_while(self, predicate: Callable[[int], bool]) -> str:
        """Read code units while predicate accepts them.

        The first rejected code unit is left unread.

        Args:
            predicate: Called with the raw int code unit

        Returns:
            Accepted characters, empty string if none matched

        Example:
            >>> source = StringCharSource("123abc")
            >>> source.read_while(is_digit)
            '123'
            >>> chr(source.peek())
            'a'
        """
        units = array("H")
        while self.has_next():
            if not predicate(self.peek()):
                break
            units.append(self.read())
        return decode_units(units)

    def read_until(self, delimiter: int | str) -> str:
        """Read up to, but not including, delimiter.

        Reaching the end of input without finding delimiter is not an error.

        Args:
            delimiter: Code unit or one-character string

        Returns:
            Characters before delimiter
        """
        stop = _code_unit(delimiter)
        return self.read_while(lambda code: code != stop)

    def read_line(self) -> str:
        """Read one line and consume its LF terminator.

        A CR directly before the consumed LF is dropped, so LF and CRLF
        endings both yield the bare line. A CR at end of input with no LF
        after it is ordinary content and stays in the result.

        Example:
            >>> source = StringCharSource("line1\\r\\nline2")
            >>> source.read_line(), source.read_line()
            ('line1', 'line2')
        """
        line = self.read_until(_LF)
        if self.peek() == _LF:
            self.read()
            if line.endswith(_CR):
                return line[:-1]
        return line

    def skip_whitespace(self) -> None:
        """Advance past consecutive whitespace (``str.isspace``)."""
        while self.has_next() and is_whitespace(self.peek()):
            self.read()

    def starts_with(self, prefix: str) -> bool:
        """Check whether the input continues with prefix. Never advances.

        Empty prefix always matches.
        """
        return self._matches(encode_units(prefix))

    def consume(self, literal: str) -> bool:
        """Advance past literal if the input continues with it.

        Returns:
            True if literal was consumed, False otherwise (position unchanged)

        Example:
            >>> source = StringCharSource("version = 1.0")
            >>> source.consume("version")
            True
            >>> source.consume("invalid")
            False
            >>> source.position
            7
        """
        units = encode_units(literal)
        if not self._matches(units):
            return False
        for _ in range(len(units)):
            self.read()
        return True

    def _matches(self, units: memoryview) -> bool:
        if not units:
            return True
        return self.peek_ahead(len(units)) == tuple(units.tolist())

    def __iter__(self) -> Iterator[int]:
        """Yield remaining code units, consuming them."""
        while (code := self.read()) != END_OF_SOURCE:
            yield code


class ClosableCharSource(CharSource):
    """A CharSource with an explicit close() and context manager support.

    close() is idempotent and never raises. Sources that hold a loaded
    buffer (FileCharSource) drop it, and every later read behaves as end
    of input. In-memory sources (StringCharSource) may ignore close() and
    stay readable.

    Example:
        >>> with FileCharSource(path) as source:
        ...     header = source.read_line()
    """

    __slots__ = ()

    @abstractmethod
    def close(self) -> None:
        """Release any backing buffer. Safe to call more than once."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Close the source. Does not suppress exceptions."""
        self.close()


def _code_unit(delimiter: int | str) -> int:
    if isinstance(delimiter, str):
        if len(delimiter) != 1 or ord(delimiter) > 0xFFFF:
            raise ValueError(ErrorTemplate.invalid_delimiter(delimiter).message)
        return ord(delimiter)
    return delimiter
