"""Domain exceptions for the transform engine and CLI diagnostics.

Caller-contract violations (using a destroyed session, releasing a buffer
twice, releasing a foreign buffer) are not represented here: they are
undefined behavior by contract and are never detected at runtime.
"""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class InvalidEncodingError(PipelineStageError):
    """Raised when input bytes are not valid UTF-8 text.

    Attributes:
        position: Byte offset of the first malformed sequence.
        reason: Decoder explanation for the failure.
        line_number: Optional 1-based line number when decoding a stream.
    """

    def __init__(
        self,
        *,
        position: int,
        reason: str,
        line_number: int | None = None,
    ) -> None:
        """Initialize a decode failure with its offending byte offset."""

        location = f"byte {position}"
        if line_number is not None:
            location = f"line {line_number}, {location}"
        super().__init__(
            stage="decode",
            detail=f"Input is not valid UTF-8 ({location}): {reason}.",
            hint="Re-encode the input as UTF-8 before submitting it.",
        )
        self.position = position
        self.reason = reason
        self.line_number = line_number

    def at_line(self, line_number: int) -> InvalidEncodingError:
        """Return a copy of this error annotated with a stream line number."""

        return InvalidEncodingError(
            position=self.position,
            reason=self.reason,
            line_number=line_number,
        )


class AllocationFailureError(PipelineStageError):
    """Raised when a session cannot be allocated due to memory exhaustion."""

    def __init__(self, detail: str = "Not enough memory to create a transform session.") -> None:
        """Initialize a session allocation failure."""

        super().__init__(
            stage="session",
            detail=detail,
            hint="Free memory or destroy unused sessions and retry.",
        )
