"""Shared typed data models for astra.

This package contains dataclasses used across engine modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import OutputStatus, StreamStats, TransformProfile

__all__ = [
    "OutputStatus",
    "StreamStats",
    "TransformProfile",
]
