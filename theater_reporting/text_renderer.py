"""Plain-text statement renderer."""

from __future__ import annotations

from theater_engines.statement import StatementResult
from theater_reporting.currency import usd


def render_text(result: StatementResult) -> str:
    """Render a statement as plain text, one newline-terminated line per row."""
    out = [f"Statement for {result.customer}\n"]
    for line in result.lines:
        out.append(f"  {line.play_name}: {usd(line.amount)} ({line.audience} seats)\n")
    out.append(f"Amount owed is {usd(result.total_amount)}\n")
    out.append(f"You earned {result.total_volume_credits} credits\n")
    return "".join(out)
