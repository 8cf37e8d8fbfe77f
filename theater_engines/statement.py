"""
Statement Aggregator.

Pure functions with deterministic behavior. No I/O.

Folds per-performance charges from the pricing engine into a
structured StatementResult that the renderers consume.  Lines keep the
invoice's performance order; totals do not depend on it.

Every performance must resolve to a catalog play with a known type.
A single bad performance fails the whole statement: no partial result
is ever returned, since its totals would be wrong.

Usage:
    from theater_engines.statement import aggregate

    result = aggregate(invoice, catalog)
    result.total_amount          # 157500
    result.total_volume_credits  # 40
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass

from theater_config.schema import DEFAULT_RULES, PricingRules
from theater_engines.pricing import calculate_performance
from theater_engines.tracer import traced_engine
from theater_kernel.domain.values import Catalog, Invoice, Play
from theater_kernel.exceptions import UnknownPlayError
from theater_kernel.logging_config import LogContext, get_logger

logger = get_logger("engines.statement")


@dataclass(frozen=True)
class StatementLine:
    """
    One rendered line of a statement.

    Attributes:
        play_id: Catalog key of the play
        play_name: Display name of the play
        amount: Charge in minor currency units
        audience: Seats sold
        volume_credits: Credits earned by this performance
    """

    play_id: str
    play_name: str
    amount: int
    audience: int
    volume_credits: int


@dataclass(frozen=True)
class StatementResult:
    """
    Computed statement for one invoice.

    Derived on every call and never stored.

    Attributes:
        customer: Customer named on the invoice
        lines: One line per performance, in invoice order
        total_amount: Sum of line amounts (minor currency units)
        total_volume_credits: Sum of line credits
    """

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: int
    total_volume_credits: int


def _resolve_play(catalog: Catalog, play_id: str) -> Play:
    play = catalog.lookup(play_id)
    if play is None:
        logger.error("unknown_play", extra={"play_id": play_id})
        raise UnknownPlayError(play_id)
    return play


@traced_engine("statement", "1.0", fingerprint_fields=("invoice", "catalog", "rules"))
def aggregate(
    invoice: Invoice,
    catalog: Catalog | Mapping[str, Play],
    rules: PricingRules = DEFAULT_RULES,
) -> StatementResult:
    """
    Compute the statement for an invoice.

    Pure function - no side effects, no I/O, deterministic output.

    Args:
        invoice: Customer and ordered performances
        catalog: Plays keyed by play id
        rules: Pricing constants

    Returns:
        StatementResult with one line per performance and the totals

    Raises:
        UnknownPlayError: If a performance references a play not in the catalog
        UnknownPlayTypeError: If a referenced play has an unrecognized type
    """
    t0 = time.monotonic()
    catalog = Catalog.of(catalog)

    with LogContext.bind(customer=invoice.customer):
        logger.info("statement_aggregation_started", extra={
            "performance_count": len(invoice.performances),
        })

        lines: list[StatementLine] = []
        amount_due = 0
        credits_earned = 0

        for perf in invoice.performances:
            play = _resolve_play(catalog, perf.play_id)
            charge = calculate_performance(play, perf, rules)

            lines.append(StatementLine(
                play_id=perf.play_id,
                play_name=play.name,
                amount=charge.amount,
                audience=perf.audience,
                volume_credits=charge.volume_credits,
            ))
            amount_due += charge.amount
            credits_earned += charge.volume_credits

        result = StatementResult(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=amount_due,
            total_volume_credits=credits_earned,
        )

        duration_ms = round((time.monotonic() - t0) * 1000, 2)
        logger.info("statement_aggregation_completed", extra={
            "line_count": len(result.lines),
            "total_amount": result.total_amount,
            "total_volume_credits": result.total_volume_credits,
            "duration_ms": duration_ms,
        })

    return result


def total_amount(
    invoice: Invoice,
    catalog: Catalog | Mapping[str, Play],
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """Total amount owed for an invoice, in minor currency units."""
    return aggregate(invoice, catalog, rules).total_amount


def total_volume_credits(
    invoice: Invoice,
    catalog: Catalog | Mapping[str, Play],
    rules: PricingRules = DEFAULT_RULES,
) -> int:
    """Total volume credits earned by an invoice."""
    return aggregate(invoice, catalog, rules).total_volume_credits
