"""
Pure domain layer.

This module contains the immutable input values for statement
computation with NO dependencies on:
- Files or configuration
- Logging handlers
- Rendering

All domain objects are immutable and deterministic.
"""

from theater_kernel.domain.values import (
    Catalog,
    Invoice,
    Performance,
    Play,
    PlayType,
)

__all__ = [
    "Catalog",
    "Invoice",
    "Performance",
    "Play",
    "PlayType",
]
