"""Buffer configuration for file-backed sources.

Provides a single frozen dataclass that encapsulates how a file is turned
into an in-memory character buffer: the text encoding, the codec error
handler and the size limit.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, replace

from fission.constants import DEFAULT_ENCODING, DEFAULT_ERRORS, MAX_BUFFER_SIZE

__all__ = ["BufferConfig"]


@dataclass(frozen=True, slots=True)
class BufferConfig:
    """Immutable configuration for loading a file buffer.

    All fields have sensible defaults; constructing ``BufferConfig()`` with
    no arguments produces UTF-8, strict decoding and the largest supported
    buffer size.

    Attributes:
        encoding: Text encoding name understood by ``codecs`` (default: utf-8).
        errors: Codec error handler (default: strict). Any registered
            handler is accepted, e.g. ``"replace"`` to substitute U+FFFD
            for malformed input instead of failing.
        max_size: Maximum file size in bytes (default: 2**31 - 1).

    Example:
        >>> config = BufferConfig(encoding="latin-1")
        >>> config.encoding
        'latin-1'
        >>> config.with_encoding("utf-16").encoding
        'utf-16'
    """

    encoding: str = DEFAULT_ENCODING
    errors: str = DEFAULT_ERRORS
    max_size: int = MAX_BUFFER_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If the encoding is unknown or not a text encoding,
                if the error handler is unknown, or if max_size is not positive.
        """
        try:
            codec = codecs.lookup(self.encoding)
        except LookupError as e:
            msg = f"Unknown encoding: {self.encoding!r}"
            raise ValueError(msg) from e
        # Binary transforms (hex, base64, rot13) cannot decode bytes to str.
        if not getattr(codec, "_is_text_encoding", True):
            msg = f"Not a text encoding: {self.encoding!r}"
            raise ValueError(msg)
        try:
            codecs.lookup_error(self.errors)
        except LookupError as e:
            msg = f"Unknown codec error handler: {self.errors!r}"
            raise ValueError(msg) from e
        if self.max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)

    def with_encoding(self, encoding: str) -> BufferConfig:
        """Return a copy of this configuration using another encoding."""
        return replace(self, encoding=encoding)
