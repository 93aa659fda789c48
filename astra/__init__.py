"""Top-level package for astra.

This package provides a stateful line normalization engine. Callers create a
session with a `TransformProfile`, submit one raw UTF-8 line at a time, and
release every produced `OutputRecord` with `buffer_release`.
"""

from .buffers import ABSENT, OutputRecord, OwnedBuffer, buffer_release
from .errors import AllocationFailureError, InvalidEncodingError, PipelineStageError
from .models.datatypes import OutputStatus, StreamStats, TransformProfile
from .pipeline import transform_line
from .session import (
    TransformSession,
    profile_default,
    session_create,
    session_destroy,
    session_transform,
)
from .stream import process_stream

__all__ = [
    "ABSENT",
    "AllocationFailureError",
    "InvalidEncodingError",
    "OutputRecord",
    "OutputStatus",
    "OwnedBuffer",
    "PipelineStageError",
    "StreamStats",
    "TransformProfile",
    "TransformSession",
    "__version__",
    "buffer_release",
    "process_stream",
    "profile_default",
    "session_create",
    "session_destroy",
    "session_transform",
    "transform_line",
]

__version__ = "0.1.0"
