"""Ownership-transfer protocol for text returned by a transform session.

Responsibilities:
- Detach every produced line into an independently allocated block.
- Provide the single legal release path for those blocks.

Contract:
- A produced `OutputRecord` owns exactly one `OwnedBuffer`; the caller must
  pass the record to `buffer_release` exactly once.
- A suppressed record holds the `ABSENT` sentinel; releasing it is a no-op.
- Releasing twice, releasing a buffer built outside this engine, or reading a
  buffer after release are caller contract violations. None of them is
  detected; the consequences are undefined.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .models.datatypes import OutputStatus
from .text.decoding import INPUT_ENCODING


class _AbsentBuffer:
    """Sentinel type marking that a record carries nothing to release."""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _AbsentBuffer()


@dataclass(eq=False, slots=True)
class OwnedBuffer:
    """Detached block of UTF-8 bytes plus its length.

    The block is a private copy; the session that produced it keeps no
    reference. `release` drops the block and is the only way to reclaim it.
    """

    _block: bytearray | None
    length: int

    @classmethod
    def from_text(cls, text: str) -> OwnedBuffer:
        """Allocate a new block holding `text` encoded as UTF-8."""

        block = bytearray(text.encode(INPUT_ENCODING))
        return cls(block, len(block))

    @property
    def data(self) -> bytes:
        """Return a copy of the first `length` bytes of the block."""

        return bytes(self._block[: self.length])

    def decode(self) -> str:
        """Return the block contents as text."""

        return self.data.decode(INPUT_ENCODING)

    def release(self) -> None:
        """Drop the underlying block."""

        self._block = None
        self.length = 0


@dataclass(frozen=True, slots=True)
class OutputRecord:
    """Result of one transform call.

    Attributes:
        status: Tri-state outcome of the call.
        buffer: Owned bytes for produced records, `ABSENT` when suppressed.
    """

    status: OutputStatus
    buffer: OwnedBuffer | _AbsentBuffer = ABSENT

    @classmethod
    def produced(cls, text: str) -> OutputRecord:
        """Build a produced record owning a fresh copy of `text`."""

        status = OutputStatus.PRODUCED if text else OutputStatus.PRODUCED_EMPTY
        return cls(status=status, buffer=OwnedBuffer.from_text(text))

    @classmethod
    def suppressed(cls) -> OutputRecord:
        """Build a record that carries no buffer."""

        return cls(status=OutputStatus.SUPPRESSED, buffer=ABSENT)

    @property
    def is_suppressed(self) -> bool:
        return self.status is OutputStatus.SUPPRESSED

    @property
    def text(self) -> str | None:
        """Return produced text, or `None` for a suppressed record."""

        if isinstance(self.buffer, OwnedBuffer):
            return self.buffer.decode()
        return None


def buffer_release(record: OutputRecord) -> None:
    """Release the buffer owned by `record`.

    No-op for suppressed records. Must be called exactly once for every
    produced record; a second call on the same record is undefined.
    """

    if isinstance(record.buffer, OwnedBuffer):
        record.buffer.release()
