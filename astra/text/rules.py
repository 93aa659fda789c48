"""Deterministic line normalization rules.

Responsibilities:
- Provide composable per-line rules selected by a `TransformProfile`.
- Keep whitespace and case handling locale independent.

Whitespace is the ASCII set: space, tab, line feed, vertical tab, form feed
and carriage return. Uppercasing touches ASCII `a-z` only.
"""

from __future__ import annotations

from typing import Protocol

from ..models.datatypes import TransformProfile


ASCII_WHITESPACE = " \t\n\v\f\r"
_ASCII_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)


class LineRule(Protocol):
    """Protocol for single-line normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


class TrimAsciiWhitespace:
    """Strip leading and trailing ASCII whitespace."""

    def apply(self, text: str) -> str:
        """Apply whitespace trimming rule."""

        return text.strip(ASCII_WHITESPACE)


class UppercaseAscii:
    """Map ASCII lowercase letters to uppercase, leaving other characters as-is."""

    def apply(self, text: str) -> str:
        """Apply ASCII uppercase rule."""

        return text.translate(_ASCII_UPPER_TABLE)


def rules_for_profile(profile: TransformProfile) -> tuple[LineRule, ...]:
    """Return the rewriting rules enabled by `profile` in pipeline order."""

    rules: list[LineRule] = []
    if profile.trim:
        rules.append(TrimAsciiWhitespace())
    if profile.to_upper:
        rules.append(UppercaseAscii())
    return tuple(rules)


def apply_rules(text: str, rules: tuple[LineRule, ...]) -> str:
    """Apply all rules in order."""

    current = text
    for rule in rules:
        current = rule.apply(current)
    return current
