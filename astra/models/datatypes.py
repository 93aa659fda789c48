"""Core datatypes shared across astra modules.

Responsibilities:
- Represent the immutable transform profile copied into each session.
- Provide explicit typing for output status and stream counters.

Key types:
- `TransformProfile`, `OutputStatus`, and `StreamStats`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum


@dataclass(frozen=True, slots=True)
class TransformProfile:
    """Normalization switches applied to every line of a session.

    Attributes:
        trim: Remove leading/trailing ASCII whitespace.
        to_upper: Map ASCII letters to uppercase.
        drop_empty: Suppress lines that are empty after trim/upper.
        deduplicate: Suppress lines whose normalized form was already produced.
    """

    trim: bool = True
    to_upper: bool = False
    drop_empty: bool = True
    deduplicate: bool = False

    @classmethod
    def default(cls) -> TransformProfile:
        """Return the default profile: trim and drop empty lines."""

        return cls(trim=True, to_upper=False, drop_empty=True, deduplicate=False)

    def with_changes(self, **changes: bool) -> TransformProfile:
        """Return a new profile with selected switches changed."""

        return replace(self, **changes)

    def as_dict(self) -> dict[str, bool]:
        """Return switches as a plain mapping in declaration order."""

        return asdict(self)


class OutputStatus(Enum):
    """Tri-state outcome of one transform call."""

    PRODUCED = "produced"
    PRODUCED_EMPTY = "produced_empty"
    SUPPRESSED = "suppressed"


@dataclass(slots=True)
class StreamStats:
    """Counters collected while processing a line stream.

    Attributes:
        read: Lines read from the input.
        written: Lines written to the output.
        skipped: Lines suppressed by the profile.
    """

    read: int = 0
    written: int = 0
    skipped: int = 0
