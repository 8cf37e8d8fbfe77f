"""Tests for the typed exception hierarchy."""

import pytest

from theater_kernel.exceptions import (
    CatalogError,
    PricingError,
    ReportingError,
    TheaterError,
    UnknownPlayError,
    UnknownPlayTypeError,
    UnknownStatementFormatError,
)


class TestErrorCodes:
    """Every exception carries a machine-readable code."""

    @pytest.mark.parametrize(
        "exc_class, code",
        [
            (TheaterError, "THEATER_ERROR"),
            (CatalogError, "CATALOG_ERROR"),
            (UnknownPlayError, "UNKNOWN_PLAY"),
            (PricingError, "PRICING_ERROR"),
            (UnknownPlayTypeError, "UNKNOWN_PLAY_TYPE"),
            (ReportingError, "REPORTING_ERROR"),
            (UnknownStatementFormatError, "UNKNOWN_STATEMENT_FORMAT"),
        ],
    )
    def test_code_is_class_attribute(self, exc_class, code):
        assert exc_class.code == code

    def test_hierarchy(self):
        assert issubclass(UnknownPlayError, CatalogError)
        assert issubclass(UnknownPlayTypeError, PricingError)
        assert issubclass(UnknownStatementFormatError, ReportingError)
        for cls in (CatalogError, PricingError, ReportingError):
            assert issubclass(cls, TheaterError)


class TestStructuredData:
    """Context travels as attributes, not only in the message."""

    def test_unknown_play(self):
        exc = UnknownPlayError("othello")
        assert exc.play_id == "othello"
        assert "othello" in str(exc)

    def test_unknown_play_type_with_play_id(self):
        exc = UnknownPlayTypeError("history", "henry-v")
        assert exc.play_type == "history"
        assert exc.play_id == "henry-v"
        assert "history" in str(exc)
        assert "henry-v" in str(exc)

    def test_unknown_play_type_without_play_id(self):
        exc = UnknownPlayTypeError("history")
        assert exc.play_id is None
        assert str(exc) == "Unknown play type: history"

    def test_unknown_statement_format(self):
        exc = UnknownStatementFormatError("pdf")
        assert exc.format_name == "pdf"
