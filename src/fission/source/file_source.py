"""File-backed character source."""

from __future__ import annotations

import logging
from pathlib import Path

from fission.config import BufferConfig
from fission.loading import StrPath, load_buffer
from fission.source.buffer import BufferCharSource

__all__ = ["FileCharSource"]

logger = logging.getLogger(__name__)


class FileCharSource(BufferCharSource):
    """CharSource over the fully decoded content of a file.

    The whole file is read and decoded during construction; the file
    handle is closed before the constructor returns, so reading never
    touches the filesystem. Construction either yields a complete source
    or raises, never a partial one.

    Args:
        path: File to read
        encoding: Text encoding; overrides ``config.encoding`` when given
        config: Decoding and size options (default: BufferConfig())

    Raises:
        SourceNotFoundError: If path does not reference an existing file
        SourceTooLargeError: If the file exceeds the configured size limit
        SourceDecodeError: If reading or decoding fails

    Example:
        >>> with FileCharSource("settings.conf") as source:
        ...     while source.has_next():
        ...         line = source.read_line()
    """

    __slots__ = ("_closed", "_path")

    def __init__(
        self,
        path: StrPath,
        encoding: str | None = None,
        *,
        config: BufferConfig | None = None,
    ) -> None:
        if config is None:
            config = BufferConfig()
        if encoding is not None:
            config = config.with_encoding(encoding)
        self._path = Path(path)
        super().__init__(load_buffer(self._path, config))
        self._closed = False

    def __repr__(self) -> str:
        return (
            f"FileCharSource(path={str(self._path)!r}, position={self._pos}, "
            f"length={self._length}, closed={self._closed})"
        )

    @property
    def path(self) -> Path:
        """Path the source was loaded from."""
        return self._path

    @property
    def closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    def close(self) -> None:
        """Drop the decoded buffer. Subsequent reads report end of input.

        Idempotent: calling close() again has no effect.
        """
        if self._closed:
            return
        self._release()
        self._closed = True
        logger.debug("Closed char source for %s at position %d", self._path, self._pos)
