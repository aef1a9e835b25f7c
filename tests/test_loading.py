"""Tests for the decoded buffer loader."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from fission.config import BufferConfig
from fission.diagnostics import (
    DiagnosticCode,
    SourceDecodeError,
    SourceNotFoundError,
    SourceTooLargeError,
)
from fission.loading import load_buffer


class TestLoadBuffer:
    """Test successful loads."""

    def test_load_utf8(self, sample_file: Path) -> None:
        """Default configuration decodes UTF-8."""
        sample_file.write_text("Hello\nWorld\nTest", encoding="utf-8")

        assert load_buffer(sample_file) == "Hello\nWorld\nTest"

    def test_load_keeps_line_endings(self, sample_file: Path) -> None:
        """Bytes are decoded verbatim; no newline translation."""
        sample_file.write_bytes(b"a\r\nb\rc")

        assert load_buffer(sample_file) == "a\r\nb\rc"

    def test_load_empty(self, sample_file: Path) -> None:
        """Empty file yields empty string."""
        sample_file.write_bytes(b"")

        assert load_buffer(sample_file) == ""

    def test_load_utf16(self, sample_file: Path) -> None:
        """Any codec known to Python can be used."""
        sample_file.write_text("grüße", encoding="utf-16")

        assert load_buffer(sample_file, BufferConfig(encoding="utf-16")) == "grüße"

    def test_debug_logging(self, sample_file: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A successful load is logged at DEBUG level."""
        sample_file.write_text("abc", encoding="utf-8")

        with caplog.at_level(logging.DEBUG, logger="fission.loading"):
            load_buffer(sample_file)

        messages = [r.getMessage() for r in caplog.records if r.name == "fission.loading"]
        assert any("3 bytes decoded as utf-8 into 3 characters" in m for m in messages)


class TestLoadBufferErrors:
    """Test failure classification."""

    def test_not_found_diagnostic(self, tmp_path: Path) -> None:
        """Missing file carries a SOURCE_NOT_FOUND diagnostic with the path."""
        missing = tmp_path / "missing.txt"

        with pytest.raises(SourceNotFoundError) as exc_info:
            load_buffer(missing)

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.SOURCE_NOT_FOUND
        assert diagnostic.path == str(missing)
        assert str(exc_info.value) == f"File not found: {missing}"

    def test_too_large_diagnostic(self, sample_file: Path) -> None:
        """Oversized file carries the limit in its hint."""
        sample_file.write_bytes(b"x" * 16)

        with pytest.raises(SourceTooLargeError) as exc_info:
            load_buffer(sample_file, BufferConfig(max_size=8))

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.SOURCE_TOO_LARGE
        assert diagnostic.hint == "Files must not exceed 8 bytes to be loaded into memory"

    def test_decode_error_diagnostic(self, sample_file: Path) -> None:
        """Undecodable bytes carry a SOURCE_DECODE_FAILED diagnostic."""
        sample_file.write_bytes(b"\x80abc")

        with pytest.raises(SourceDecodeError) as exc_info:
            load_buffer(sample_file, BufferConfig(encoding="ascii"))

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.SOURCE_DECODE_FAILED
        assert str(exc_info.value) == f"Failed to decode file as ascii: {sample_file}"

    def test_read_oserror_is_wrapped(
        self, sample_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An OSError while reading becomes SourceDecodeError."""
        sample_file.write_text("abc", encoding="utf-8")

        def broken_open(*_args: object, **_kwargs: object) -> None:
            msg = "disk on fire"
            raise OSError(msg)

        monkeypatch.setattr(Path, "open", broken_open)

        with pytest.raises(SourceDecodeError) as exc_info:
            load_buffer(sample_file)

        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SOURCE_READ_FAILED
        assert exc_info.value.diagnostic.hint == "disk on fire"
