"""
Statement renderers.

Stateless formatters over ``theater_engines.statement.StatementResult``.
They never recompute amounts or credits, so the text and HTML forms of
a statement always agree on its totals.

Usage:
    from theater_reporting import StatementFormat, render

    print(render(aggregate(invoice, catalog), StatementFormat.HTML))
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from theater_engines.statement import StatementResult
from theater_kernel.exceptions import UnknownStatementFormatError
from theater_kernel.logging_config import get_logger
from theater_reporting.currency import to_major_units, usd
from theater_reporting.html_renderer import render_html
from theater_reporting.text_renderer import render_text

logger = get_logger("reporting")


class StatementFormat(str, Enum):
    """Output formats with a renderer."""

    TEXT = "text"
    HTML = "html"


_RENDERERS: dict[StatementFormat, Callable[[StatementResult], str]] = {
    StatementFormat.TEXT: render_text,
    StatementFormat.HTML: render_html,
}


def render(result: StatementResult, fmt: StatementFormat | str = StatementFormat.TEXT) -> str:
    """
    Render a statement in the requested format.

    Raises:
        UnknownStatementFormatError: If ``fmt`` names no renderer.
    """
    try:
        statement_format = StatementFormat(fmt)
    except ValueError:
        logger.error("unknown_statement_format", extra={"format_name": str(fmt)})
        raise UnknownStatementFormatError(str(fmt)) from None
    logger.debug("statement_rendered", extra={
        "format": statement_format.value,
        "line_count": len(result.lines),
    })
    return _RENDERERS[statement_format](result)


__all__ = [
    "StatementFormat",
    "render",
    "render_html",
    "render_text",
    "to_major_units",
    "usd",
]
