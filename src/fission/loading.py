"""Decoded buffer loader.

Turns a filesystem path into a fully decoded in-memory string in one
bounded read. Both the file-backed cursor and the convenience API obtain
their text here, so all file failures are classified in one place:

    SourceNotFoundError - path is not an existing regular file
    SourceTooLargeError - file exceeds BufferConfig.max_size
    SourceDecodeError   - OSError while reading, or UnicodeDecodeError

The file handle is always closed before this function returns.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TypeAlias

from fission.config import BufferConfig
from fission.diagnostics import (
    ErrorTemplate,
    SourceDecodeError,
    SourceNotFoundError,
    SourceTooLargeError,
)

__all__ = ["load_buffer"]

logger = logging.getLogger(__name__)

StrPath: TypeAlias = str | os.PathLike[str]


def load_buffer(path: StrPath, config: BufferConfig | None = None) -> str:
    """Read and decode an entire file.

    Args:
        path: File to load
        config: Encoding, error handler and size limit (default: BufferConfig())

    Returns:
        Decoded file content. Empty string for a zero-length file, which is
        never opened.

    Raises:
        SourceNotFoundError: If path does not reference an existing file
        SourceTooLargeError: If the file is larger than config.max_size
        SourceDecodeError: If reading or decoding fails
    """
    if config is None:
        config = BufferConfig()
    file_path = Path(path)

    if not file_path.is_file():
        raise SourceNotFoundError(ErrorTemplate.source_not_found(str(file_path)))

    try:
        size = file_path.stat().st_size
    except OSError as e:
        raise SourceDecodeError(ErrorTemplate.source_read_failed(str(file_path), str(e))) from e

    if size > config.max_size:
        raise SourceTooLargeError(
            ErrorTemplate.source_too_large(str(file_path), size, config.max_size),
            size=size,
            max_size=config.max_size,
        )

    if size == 0:
        logger.debug("Empty file, skipping read: %s", file_path)
        return ""

    try:
        with file_path.open("rb") as handle:
            data = handle.read(size)
    except OSError as e:
        raise SourceDecodeError(ErrorTemplate.source_read_failed(str(file_path), str(e))) from e

    try:
        text = data.decode(config.encoding, config.errors)
    except UnicodeDecodeError as e:
        raise SourceDecodeError(
            ErrorTemplate.source_decode_failed(str(file_path), config.encoding, str(e))
        ) from e

    logger.debug(
        "Loaded %s: %d bytes decoded as %s into %d characters",
        file_path,
        len(data),
        config.encoding,
        len(text),
    )
    return text
