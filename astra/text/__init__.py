"""Line decoding, normalization rules, and deduplication history."""

from .decoding import INPUT_ENCODING, decode_line
from .dedup import DedupHistory
from .rules import (
    ASCII_WHITESPACE,
    LineRule,
    TrimAsciiWhitespace,
    UppercaseAscii,
    apply_rules,
    rules_for_profile,
)

__all__ = [
    "ASCII_WHITESPACE",
    "DedupHistory",
    "INPUT_ENCODING",
    "LineRule",
    "TrimAsciiWhitespace",
    "UppercaseAscii",
    "apply_rules",
    "decode_line",
    "rules_for_profile",
]
