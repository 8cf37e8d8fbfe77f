"""
Typed Exception Hierarchy for the Theater Kernel.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from TheaterError:

    TheaterError (base)
    |
    +-- CatalogError
    |   +-- UnknownPlayError
    |
    +-- PricingError
    |   +-- UnknownPlayTypeError
    |
    +-- ReportingError
        +-- UnknownStatementFormatError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                      | When Raised
-----------|---------------------------|------------------------------------------
Catalog    | UNKNOWN_PLAY              | Performance references a missing play id
-----------|---------------------------|------------------------------------------
Pricing    | UNKNOWN_PLAY_TYPE         | Play type is neither tragedy nor comedy
-----------|---------------------------|------------------------------------------
Reporting  | UNKNOWN_STATEMENT_FORMAT  | Renderer requested for an unsupported format

===============================================================================
HANDLING PATTERNS
===============================================================================

Every failure here is fatal for the statement being computed. There is
no partial statement and nothing to retry: the computation is pure, so
the same inputs fail the same way every time.

    try:
        result = aggregate(invoice, catalog)
    except UnknownPlayError as e:
        report_missing(e.play_id)
    except UnknownPlayTypeError as e:
        report_bad_catalog(e.play_id, e.play_type)

Value-object validation (negative audience, empty play name) raises
ValueError at construction, before any of these can occur.
"""


class TheaterError(Exception):
    """
    Base exception for all theater billing errors.

    All subclasses must have a `code` class attribute for
    machine-readable error identification.
    """

    code: str = "THEATER_ERROR"


# Catalog-related exceptions


class CatalogError(TheaterError):
    """Base exception for catalog lookup errors."""

    code: str = "CATALOG_ERROR"


class UnknownPlayError(CatalogError):
    """Performance references a play id that is absent from the catalog."""

    code: str = "UNKNOWN_PLAY"

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__(f"Unknown play: {play_id}")


# Pricing-related exceptions


class PricingError(TheaterError):
    """Base exception for pricing engine errors."""

    code: str = "PRICING_ERROR"


class UnknownPlayTypeError(PricingError):
    """
    Play type has no pricing or credit formula.

    Raised instead of defaulting to either known formula.
    """

    code: str = "UNKNOWN_PLAY_TYPE"

    def __init__(self, play_type: str, play_id: str | None = None):
        self.play_type = play_type
        self.play_id = play_id
        if play_id is None:
            super().__init__(f"Unknown play type: {play_type}")
        else:
            super().__init__(f"Unknown play type {play_type!r} for play {play_id}")


# Reporting-related exceptions


class ReportingError(TheaterError):
    """Base exception for statement rendering errors."""

    code: str = "REPORTING_ERROR"


class UnknownStatementFormatError(ReportingError):
    """No renderer exists for the requested statement format."""

    code: str = "UNKNOWN_STATEMENT_FORMAT"

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(f"Unknown statement format: {format_name}")
