"""
Pricing configuration schema.

Defines the reviewable rule set that the pricing engine evaluates.
YAML documents are parsed into these types by the loader; the engine
only ever sees the frozen dataclass.

Amounts are integers in minor currency units (cents). Thresholds are
whole seats.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class PricingRules:
    """
    Constants of the tragedy and comedy pricing curves and the
    volume credit formula.
    """

    # Tragedy: flat base, surcharge only for seats over the threshold
    tragedy_base: int = 40000
    tragedy_threshold: int = 30
    tragedy_over_per_person: int = 1000

    # Comedy: flat base, overflow surcharge, plus a per-seat charge
    comedy_base: int = 30000
    comedy_threshold: int = 20
    comedy_over_flat: int = 10000
    comedy_over_per_person: int = 500
    comedy_per_audience: int = 300

    # Volume credits
    volume_credit_threshold: int = 30
    comedy_credit_divisor: int = 5

    def __post_init__(self) -> None:
        for f in fields(self):
            val = getattr(self, f.name)
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(f"{f.name} must be an int, got {type(val).__name__}")
            if val < 0:
                raise ValueError(f"{f.name} must be non-negative")
        if self.comedy_credit_divisor == 0:
            raise ValueError("comedy_credit_divisor must be positive")


DEFAULT_RULES = PricingRules()
