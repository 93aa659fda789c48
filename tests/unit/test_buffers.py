"""Unit tests for the output buffer ownership protocol."""

from __future__ import annotations

import dataclasses

from astra.buffers import ABSENT, OutputRecord, OwnedBuffer, buffer_release
from astra.models.datatypes import OutputStatus


def test_produced_record_owns_independent_copy() -> None:
    """Each produced record should own a freshly allocated block."""

    first = OutputRecord.produced("HOLA")
    second = OutputRecord.produced("HOLA")

    assert first.status is OutputStatus.PRODUCED
    assert first.buffer.data == b"HOLA"
    assert first.buffer is not second.buffer

    buffer_release(first)
    assert second.buffer.data == b"HOLA"
    buffer_release(second)


def test_length_counts_utf8_bytes() -> None:
    """Length should describe the encoded block, not the character count."""

    record = OutputRecord.produced("ñá")

    assert record.buffer.length == 4
    assert record.text == "ñá"
    buffer_release(record)


def test_zero_length_buffer_is_distinct_from_absent() -> None:
    """An empty produced record still carries a buffer to release."""

    empty = OutputRecord.produced("")
    suppressed = OutputRecord.suppressed()

    assert empty.status is OutputStatus.PRODUCED_EMPTY
    assert isinstance(empty.buffer, OwnedBuffer)
    assert empty.buffer.length == 0
    assert suppressed.buffer is ABSENT
    assert not ABSENT
    assert repr(ABSENT) == "ABSENT"
    buffer_release(empty)


def test_release_on_suppressed_record_is_noop() -> None:
    """Releasing a suppressed record must not fail."""

    record = OutputRecord.suppressed()

    buffer_release(record)

    assert record.is_suppressed
    assert record.buffer is ABSENT


def test_release_drops_block() -> None:
    """Release should reset the buffer length after dropping the block."""

    record = OutputRecord.produced("x")

    buffer_release(record)

    assert record.buffer.length == 0


def test_owned_buffer_is_slotted_and_compared_by_identity() -> None:
    """Buffers with equal bytes are still distinct owned blocks."""

    first = OwnedBuffer.from_text("same")
    second = OwnedBuffer.from_text("same")

    assert dataclasses.is_dataclass(first)
    assert not hasattr(first, "__dict__")
    assert first != second
    assert first.data == second.data
