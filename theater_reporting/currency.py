"""
Currency display for statements.

Amounts travel through the engines as integers in minor units. The
conversion to major units happens here and nowhere else, using exact
Decimal division so no float ever touches a monetary value.

The display convention is fixed to US dollars in the en-US style:
``$`` prefix, ``,`` thousands separator, ``.`` decimal separator and
two decimal places.
"""

from __future__ import annotations

from decimal import Decimal

CURRENCY_SYMBOL = "$"
DECIMAL_PLACES = 2
MINOR_UNIT_FACTOR = 10 ** DECIMAL_PLACES


def to_major_units(amount: int) -> Decimal:
    """Convert an amount in minor units to an exact Decimal in major units."""
    return Decimal(amount).scaleb(-DECIMAL_PLACES)


def usd(amount: int) -> str:
    """Format an amount in cents for display (e.g. 147500 -> $1,475.00)."""
    major = to_major_units(amount)
    if major < 0:
        return f"-{CURRENCY_SYMBOL}{-major:,.{DECIMAL_PLACES}f}"
    return f"{CURRENCY_SYMBOL}{major:,.{DECIMAL_PLACES}f}"
