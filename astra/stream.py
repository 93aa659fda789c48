"""Stream processing over binary line readers.

Responsibilities:
- Drive one transform session over every line of a reader.
- Count read, written, and skipped lines and emit phase logs.
"""

from __future__ import annotations

from typing import BinaryIO, Iterable

from .buffers import buffer_release
from .errors import InvalidEncodingError
from .models.datatypes import StreamStats, TransformProfile
from .session import TransformSession
from .telemetry.logger import RunLogger


def _strip_line_terminator(raw: bytes) -> bytes:
    """Remove one trailing `\\n` or `\\r\\n` from a raw line."""

    if raw.endswith(b"\r\n"):
        return raw[:-2]
    if raw.endswith(b"\n"):
        return raw[:-1]
    return raw


def process_stream(
    reader: BinaryIO | Iterable[bytes],
    writer: BinaryIO,
    profile: TransformProfile,
    run_logger: RunLogger | None = None,
) -> StreamStats:
    """Normalize each line of `reader` and write produced lines to `writer`.

    One session is used for the whole stream, so deduplication spans all
    lines. Each produced line is written followed by `\\n`.

    Raises:
        InvalidEncodingError: If a line is not valid UTF-8. The error carries
            the 1-based line number.
    """

    stats = StreamStats()
    session = TransformSession.create(profile)
    if run_logger is not None:
        run_logger.log_stage_start("process")
    try:
        for raw in reader:
            stats.read += 1
            try:
                record = session.transform(_strip_line_terminator(raw))
            except InvalidEncodingError as exc:
                raise exc.at_line(stats.read) from exc

            try:
                if record.is_suppressed:
                    stats.skipped += 1
                    continue
                writer.write(record.buffer.data)
                writer.write(b"\n")
                stats.written += 1
            finally:
                buffer_release(record)
        writer.flush()
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("process", type(exc).__name__)
        raise
    finally:
        session.destroy()

    if run_logger is not None:
        run_logger.log_stage_complete(
            "process",
            read=stats.read,
            written=stats.written,
            skipped=stats.skipped,
        )
    return stats
