"""Deduplication history for one transform session.

The history only grows. There is no eviction, so a long-lived session with
deduplication enabled keeps every distinct normalized line it has produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class DedupHistory:
    """Set of normalized lines already produced by a session."""

    _seen: set[str] = field(default_factory=set)

    def insert(self, value: str) -> bool:
        """Record `value`; return `False` when it was already present."""

        if value in self._seen:
            return False
        self._seen.add(value)
        return True

    def __contains__(self, value: object) -> bool:
        return value in self._seen

    def __len__(self) -> int:
        return len(self._seen)
