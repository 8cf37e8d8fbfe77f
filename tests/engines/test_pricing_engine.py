"""
Tests for the performance pricing engine.

Covers tragedy and comedy amount curves at and around their thresholds,
volume credits, custom rule sets, and rejection of unknown play types.
"""

import pytest

from theater_config.schema import DEFAULT_RULES, PricingRules
from theater_engines.pricing import (
    PerformanceCharge,
    calculate_amount,
    calculate_performance,
    calculate_volume_credits,
)
from theater_kernel.domain.values import Performance, Play, PlayType
from theater_kernel.exceptions import UnknownPlayTypeError
from tests.conftest import parse_logs


@pytest.fixture
def history():
    """A play whose type has no pricing formula."""
    return Play(name="Henry V", type="history")


# ============================================================================
# Tragedy amounts
# ============================================================================


class TestTragedyAmount:
    """Tragedy: base only, surcharge for seats over the threshold."""

    def test_at_threshold_is_base(self, hamlet):
        assert calculate_amount(hamlet, Performance("hamlet", 30)) == 40000

    def test_one_over_threshold(self, hamlet):
        assert calculate_amount(hamlet, Performance("hamlet", 31)) == 41000

    def test_zero_audience_is_base(self, hamlet):
        assert calculate_amount(hamlet, Performance("hamlet", 0)) == 40000

    def test_fifty_five_seats(self, hamlet):
        """40000 + 1000 * 25"""
        assert calculate_amount(hamlet, Performance("hamlet", 55)) == 65000


# ============================================================================
# Comedy amounts
# ============================================================================


class TestComedyAmount:
    """Comedy: base, overflow surcharge, and per-seat charge."""

    def test_zero_audience_is_base(self, as_like):
        assert calculate_amount(as_like, Performance("as-like", 0)) == 30000

    def test_at_threshold_has_per_seat_charge_only(self, as_like):
        """30000 + 300 * 20"""
        assert calculate_amount(as_like, Performance("as-like", 20)) == 36000

    def test_one_over_threshold(self, as_like):
        """30000 + 10000 + 500 * 1 + 300 * 21"""
        assert calculate_amount(as_like, Performance("as-like", 21)) == 46800

    def test_thirty_five_seats(self, as_like):
        """30000 + 10000 + 500 * 15 + 300 * 35"""
        assert calculate_amount(as_like, Performance("as-like", 35)) == 58000

    def test_fifteen_seats(self, as_like):
        """30000 + 300 * 15"""
        assert calculate_amount(as_like, Performance("as-like", 15)) == 34500


# ============================================================================
# Volume credits
# ============================================================================


class TestVolumeCredits:
    """Credits: seats over the threshold, plus a comedy bonus."""

    @pytest.mark.parametrize("audience, expected", [(0, 0), (30, 0), (31, 1), (55, 25)])
    def test_tragedy(self, hamlet, audience, expected):
        assert calculate_volume_credits(hamlet, Performance("hamlet", audience)) == expected

    @pytest.mark.parametrize(
        "audience, expected",
        [
            (0, 0),
            (4, 0),    # 4 // 5 == 0
            (5, 1),
            (15, 3),
            (35, 12),  # 5 over threshold + 35 // 5
        ],
    )
    def test_comedy(self, as_like, audience, expected):
        assert calculate_volume_credits(as_like, Performance("as-like", audience)) == expected


# ============================================================================
# Unknown play types
# ============================================================================


class TestUnknownPlayType:
    """Unknown types fail; they are never priced with a known formula."""

    def test_amount_raises(self, history):
        with pytest.raises(UnknownPlayTypeError) as exc_info:
            calculate_amount(history, Performance("henry-v", 40))
        assert exc_info.value.play_type == "history"
        assert exc_info.value.play_id == "henry-v"

    def test_credits_raise(self, history):
        with pytest.raises(UnknownPlayTypeError) as exc_info:
            calculate_volume_credits(history, Performance("henry-v", 40))
        assert exc_info.value.play_type == "history"

    def test_combined_raises(self, history):
        with pytest.raises(UnknownPlayTypeError):
            calculate_performance(history, Performance("henry-v", 0))

    def test_error_logged(self, history, log_stream):
        with pytest.raises(UnknownPlayTypeError):
            calculate_amount(history, Performance("henry-v", 40))
        record = parse_logs(log_stream)[0]
        assert record["level"] == "ERROR"
        assert record["message"] == "unknown_play_type"
        assert record["play_type"] == "history"
        assert record["play_id"] == "henry-v"


# ============================================================================
# Combined charge and custom rules
# ============================================================================


class TestCalculatePerformance:
    """Tests for the combined amount-and-credits entry point."""

    def test_matches_individual_functions(self, as_like):
        perf = Performance("as-like", 35)
        charge = calculate_performance(as_like, perf)
        assert charge == PerformanceCharge(
            play_type=PlayType.COMEDY,
            amount=calculate_amount(as_like, perf),
            volume_credits=calculate_volume_credits(as_like, perf),
        )

    def test_default_rules_are_canonical(self):
        assert DEFAULT_RULES == PricingRules()
        assert DEFAULT_RULES.tragedy_base == 40000
        assert DEFAULT_RULES.comedy_credit_divisor == 5

    def test_custom_rules(self, hamlet, as_like):
        rules = PricingRules(tragedy_base=50000, comedy_per_audience=0, comedy_credit_divisor=10)
        assert calculate_amount(hamlet, Performance("hamlet", 30), rules) == 50000
        assert calculate_amount(as_like, Performance("as-like", 10), rules) == 30000
        assert calculate_volume_credits(as_like, Performance("as-like", 35), rules) == 5 + 3


class TestPricingRules:
    """Tests for PricingRules validation."""

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="tragedy_base"):
            PricingRules(tragedy_base=-1)

    def test_zero_divisor_rejected(self):
        with pytest.raises(ValueError, match="comedy_credit_divisor"):
            PricingRules(comedy_credit_divisor=0)

    def test_non_int_rejected(self):
        with pytest.raises(ValueError, match="comedy_base"):
            PricingRules(comedy_base="30000")
