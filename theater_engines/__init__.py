"""
Module: theater_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure
    calculation engines.  This is the canonical import surface for the
    renderers and the command-line script.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import theater_kernel and theater_config.schema.

Invariants enforced:
    - Integer-only arithmetic: amounts are minor currency units and
      credits are whole numbers; floats never appear.
    - Determinism: identical inputs always produce identical outputs.

Usage:
    from theater_engines import aggregate, calculate_amount
"""

from theater_engines.pricing import (
    PerformanceCharge,
    calculate_amount,
    calculate_performance,
    calculate_volume_credits,
)
from theater_engines.statement import (
    StatementLine,
    StatementResult,
    aggregate,
    total_amount,
    total_volume_credits,
)
from theater_engines.tracer import compute_input_fingerprint, traced_engine

__all__ = [
    "PerformanceCharge",
    "StatementLine",
    "StatementResult",
    "aggregate",
    "calculate_amount",
    "calculate_performance",
    "calculate_volume_credits",
    "compute_input_fingerprint",
    "total_amount",
    "total_volume_credits",
    "traced_engine",
]
