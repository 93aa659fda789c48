"""Line transform pipeline.

Applies profile rules, empty-line dropping, and deduplication in fixed order.
"""

from __future__ import annotations

from .buffers import OutputRecord
from .models.datatypes import TransformProfile
from .text.dedup import DedupHistory
from .text.rules import LineRule, apply_rules, rules_for_profile


def transform_line(
    text: str,
    profile: TransformProfile,
    history: DedupHistory,
    rules: tuple[LineRule, ...] | None = None,
) -> OutputRecord:
    """Normalize one line and decide whether it is produced or suppressed.

    Args:
        text: Decoded input line.
        profile: Switches selecting which steps apply.
        history: Lines already produced; grows on a non-duplicate insert.
        rules: Precomputed rules for `profile`, built on demand when omitted.

    Returns:
        A produced record owning a fresh buffer, or a suppressed record.
    """

    if rules is None:
        rules = rules_for_profile(profile)
    out = apply_rules(text, rules)

    if profile.drop_empty and not out:
        return OutputRecord.suppressed()

    if profile.deduplicate and not history.insert(out):
        return OutputRecord.suppressed()

    return OutputRecord.produced(out)

