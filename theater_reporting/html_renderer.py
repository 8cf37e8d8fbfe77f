"""
HTML statement renderer.

Customer and play names are escaped for ``&``, ``<`` and ``>``.  Names
containing those characters are the one place the output differs from
plain interpolation; all other statements render byte-for-byte the same.
The document has no trailing newline after ``</html>``.
"""

from __future__ import annotations

from html import escape

from theater_engines.statement import StatementResult
from theater_reporting.currency import usd


def render_html(result: StatementResult) -> str:
    out = [
        "<html>\n",
        f"<h1>Statement for {escape(result.customer, quote=False)}</h1>\n",
        "<ul>\n",
    ]
    for line in result.lines:
        out.append(
            f"<li>{escape(line.play_name, quote=False)}: "
            f"{usd(line.amount)} ({line.audience} seats)</li>\n"
        )
    out.append("</ul>\n")
    out.append(f"<p>Amount owed is {usd(result.total_amount)}</p>\n")
    out.append(f"<p>You earned {result.total_volume_credits} credits</p>\n")
    out.append("</html>")
    return "".join(out)
