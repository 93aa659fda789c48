"""Transform sessions and the public engine surface.

A session owns a copy of its profile and a deduplication history. It is an
opaque handle: callers create it, submit lines, and destroy it explicitly.

Caller obligations, none of which are checked at runtime:
- Do not use a session after `destroy`, and do not destroy it twice.
- Do not share one session between threads without external locking.
- Release every produced record exactly once with `buffer_release`.

Independent sessions share no state.
"""

from __future__ import annotations

from .buffers import OutputRecord
from .errors import AllocationFailureError
from .models.datatypes import TransformProfile
from .pipeline import transform_line
from .text.decoding import decode_line
from .text.dedup import DedupHistory
from .text.rules import rules_for_profile


class TransformSession:
    """Long-lived line normalizer bound to one profile."""

    def __init__(self, profile: TransformProfile) -> None:
        """Initialize session state; prefer `create` for allocation errors."""

        self._profile = profile.with_changes()
        self._rules = rules_for_profile(self._profile)
        self._history: DedupHistory | None = DedupHistory()

    @classmethod
    def create(cls, profile: TransformProfile) -> TransformSession:
        """Allocate a session with an empty history.

        Raises:
            AllocationFailureError: If memory is exhausted.
        """

        try:
            return cls(profile)
        except MemoryError as exc:
            raise AllocationFailureError() from exc

    @property
    def profile(self) -> TransformProfile:
        """Profile copied into this session at creation."""

        return self._profile

    def transform(self, data: bytes | bytearray | memoryview) -> OutputRecord:
        """Normalize one raw UTF-8 line.

        Raises:
            InvalidEncodingError: If `data` is not valid UTF-8.
        """

        text = decode_line(data)
        return transform_line(text, self._profile, self._history, self._rules)

    def destroy(self) -> None:
        """Release the history; the handle must not be used afterwards."""

        self._history = None
        self._rules = None


def profile_default() -> TransformProfile:
    """Return the default profile: trim and drop empty lines."""

    return TransformProfile.default()


def session_create(profile: TransformProfile) -> TransformSession:
    """Create a session bound to a copy of `profile`."""

    return TransformSession.create(profile)


def session_transform(
    session: TransformSession, data: bytes | bytearray | memoryview
) -> OutputRecord:
    """Normalize one raw line through `session`."""

    return session.transform(data)


def session_destroy(session: TransformSession) -> None:
    """Destroy `session` and release its history."""

    session.destroy()


__all__ = [
    "TransformSession",
    "profile_default",
    "session_create",
    "session_destroy",
    "session_transform",
]
