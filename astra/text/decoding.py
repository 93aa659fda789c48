"""Strict UTF-8 decoding for raw line input."""

from __future__ import annotations

from ..errors import InvalidEncodingError


INPUT_ENCODING = "utf-8"


def decode_line(data: bytes | bytearray | memoryview) -> str:
    """Decode raw line bytes as UTF-8 without substituting characters.

    Raises:
        InvalidEncodingError: If `data` contains a malformed sequence.
    """

    try:
        return bytes(data).decode(INPUT_ENCODING, errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(position=exc.start, reason=exc.reason) from exc
