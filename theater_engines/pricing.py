"""
Performance Pricing Engine.

Pure functions with deterministic behavior. No I/O.

This engine prices a single performance and computes the volume
credits it earns.  Pricing dispatches on the play type; each type has
its own curve:

- Tragedy: flat base, plus a per-seat surcharge for seats above the
  threshold only.
- Comedy: flat base, plus a flat and per-seat surcharge above the
  threshold, plus a per-seat charge on every seat.

Any other type raises UnknownPlayTypeError.  Both the amount and the
credit calculation resolve the type through the same check, so a
performance that fails one fails the other.

All amounts are integers in minor currency units (cents).

Usage:
    from theater_engines.pricing import calculate_amount, calculate_volume_credits

    amount = calculate_amount(play, performance)
    credits = calculate_volume_credits(play, performance)
"""

from __future__ import annotations

from dataclasses import dataclass

from theater_config.schema import DEFAULT_RULES, PricingRules
from theater_kernel.domain.values import Performance, Play, PlayType
from theater_kernel.exceptions import UnknownPlayTypeError
from theater_kernel.logging_config import get_logger

logger = get_logger("engines.pricing")


@dataclass(frozen=True)
class PerformanceCharge:
    """
    Amount and volume credits for one performance.

    Attributes:
        play_type: Resolved play type
        amount: Charge in minor currency units
        volume_credits: Loyalty credits earned
    """

    play_type: PlayType
    amount: int
    volume_credits: int


def _resolve_play_type(play: Play, performance: Performance) -> PlayType:
    if isinstance(play.type, PlayType):
        return play.type
    logger.error("unknown_play_type", extra={
        "play_type": str(play.type),
        "play_id": performance.play_id,
    })
    raise UnknownPlayTypeError(str(play.type), performance.play_id)


def _tragedy_amount(audience: int, rules: PricingRules) -> int:
    amount = rules.tragedy_base
    if audience > rules.tragedy_threshold:
        amount += rules.tragedy_over_per_person * (audience - rules.tragedy_threshold)
    return amount


def _comedy_amount(audience: int, rules: PricingRules) -> int:
    amount = rules.comedy_base
    if audience > rules.comedy_threshold:
        amount += (
            rules.comedy_over_flat
            + rules.comedy_over_per_person * (audience - rules.comedy_threshold)
        )
    # Per-seat charge applies on both sides of the threshold
    amount += rules.comedy_per_audience * audience
    return amount


def _amount_for(play_type: PlayType, audience: int, rules: PricingRules) -> int:
    if play_type is PlayType.TRAGEDY:
        return _tragedy_amount(audience, rules)
    if play_type is PlayType.COMEDY:
        return _comedy_amount(audience, rules)
    # Exhaustiveness guard: callers resolve the type through _resolve_play_type first.
    raise UnknownPlayTypeError(str(play_type))


def _credits_for(play_type: PlayType, audience: int, rules: PricingRules) -> int:
    credits = max(audience - rules.volume_credit_threshold, 0)
    if play_type is PlayType.COMEDY:
        credits += audience // rules.comedy_credit_divisor
    return credits


def calculate_amount(
    play: Play,
    performance: Performance,
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """
    Calculate the charge for one performance.

    Pure function.

    Args:
        play: Catalog entry for the performance's play
        performance: Performance being priced
        rules: Pricing constants

    Returns:
        Amount in minor currency units

    Raises:
        UnknownPlayTypeError: If the play type has no pricing formula
    """
    play_type = _resolve_play_type(play, performance)
    return _amount_for(play_type, performance.audience, rules)


def calculate_volume_credits(
    play: Play,
    performance: Performance,
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """
    Calculate the volume credits earned by one performance.

    Pure function.  Never negative for a valid performance.

    Raises:
        UnknownPlayTypeError: If the play type has no credit formula
    """
    play_type = _resolve_play_type(play, performance)
    return _credits_for(play_type, performance.audience, rules)


def calculate_performance(
    play: Play,
    performance: Performance,
    rules: PricingRules = DEFAULT_RULES,
) -> PerformanceCharge:
    """
    Calculate amount and volume credits together after a single type check.

    Raises:
        UnknownPlayTypeError: If the play type is not recognized
    """
    play_type = _resolve_play_type(play, performance)
    charge = PerformanceCharge(
        play_type=play_type,
        amount=_amount_for(play_type, performance.audience, rules),
        volume_credits=_credits_for(play_type, performance.audience, rules),
    )
    logger.debug("performance_priced", extra={
        "play_id": performance.play_id,
        "play_type": play_type.value,
        "audience": performance.audience,
        "amount": charge.amount,
        "volume_credits": charge.volume_credits,
    })
    return charge
