"""
Pytest fixtures for the theater billing test suite.

Provides:
- The canonical two-play catalog and the BigCo invoice
- Logging state reset between tests
- A JSON log capture helper
"""

import json
import logging
from io import StringIO

import pytest

from theater_kernel.domain.values import Catalog, Invoice, Performance, Play, PlayType
from theater_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def hamlet():
    return Play(name="Hamlet", type=PlayType.TRAGEDY)


@pytest.fixture
def as_like():
    return Play(name="As You Like It", type=PlayType.COMEDY)


@pytest.fixture
def catalog(hamlet, as_like):
    """Catalog with one tragedy and one comedy."""
    return Catalog({"hamlet": hamlet, "as-like": as_like})


@pytest.fixture
def bigco_invoice():
    """BigCo invoice: Hamlet(55), As You Like It(35), As You Like It(15)."""
    return Invoice(
        customer="BigCo",
        performances=(
            Performance("hamlet", 55),
            Performance("as-like", 35),
            Performance("as-like", 15),
        ),
    )


@pytest.fixture
def log_stream():
    """Configure JSON logging at DEBUG into a StringIO and return the stream."""
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    configure_logging(handler=handler, level=logging.DEBUG)
    return stream


def parse_logs(stream: StringIO) -> list[dict]:
    """Parse all JSON log lines from a stream."""
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]
