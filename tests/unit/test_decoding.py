"""Unit tests for strict UTF-8 line decoding."""

from __future__ import annotations

import pytest

from astra.errors import InvalidEncodingError, PipelineStageError
from astra.text.decoding import decode_line


def test_decode_line_accepts_multibyte_utf8() -> None:
    """Valid UTF-8 input should decode unchanged."""

    assert decode_line("Montréal ñ".encode("utf-8")) == "Montréal ñ"
    assert decode_line(bytearray(b"abc")) == "abc"
    assert decode_line(memoryview(b"")) == ""


def test_decode_line_rejects_malformed_bytes_with_offset() -> None:
    """Malformed input should raise instead of substituting characters."""

    with pytest.raises(InvalidEncodingError) as exc_info:
        decode_line(b"ok\xffrest")

    error = exc_info.value
    assert isinstance(error, PipelineStageError)
    assert error.stage == "decode"
    assert error.position == 2
    assert "byte 2" in error.detail


def test_decode_line_rejects_truncated_sequence() -> None:
    """A truncated multibyte sequence should not be silently dropped."""

    with pytest.raises(InvalidEncodingError):
        decode_line("é".encode("utf-8")[:1])


def test_invalid_encoding_error_at_line_adds_line_number() -> None:
    """Stream annotation should keep the offset and add the line number."""

    error = InvalidEncodingError(position=4, reason="invalid start byte").at_line(3)

    assert error.line_number == 3
    assert error.position == 4
    assert "line 3, byte 4" in error.detail
