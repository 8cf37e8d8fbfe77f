#!/usr/bin/env python3
"""
Print billing statements for every invoice in a data file.

Loads the play catalog, the invoices and the pricing rules, aggregates
each invoice, and writes the rendered statements to stdout.  Structured
JSON logs go to stderr.

Usage:
    python3 scripts/print_statement.py
    python3 scripts/print_statement.py --format html
    python3 scripts/print_statement.py --plays plays.json --invoices invoices.json
    python3 scripts/print_statement.py --pricing pricing.yaml --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path
from uuid import uuid4

import yaml

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from theater_config import get_active_config  # noqa: E402
from theater_config.loader import load_catalog, load_invoices  # noqa: E402
from theater_engines.statement import aggregate  # noqa: E402
from theater_kernel.exceptions import TheaterError  # noqa: E402
from theater_kernel.logging_config import (  # noqa: E402
    LogContext,
    configure_logging,
    get_logger,
)
from theater_reporting import StatementFormat, render  # noqa: E402

logger = get_logger("scripts.print_statement")

DEFAULT_PLAYS = ROOT / "data" / "plays.json"
DEFAULT_INVOICES = ROOT / "data" / "invoices.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print theater billing statements.")
    parser.add_argument("--plays", type=Path, default=DEFAULT_PLAYS, help="Play catalog (JSON or YAML)")
    parser.add_argument("--invoices", type=Path, default=DEFAULT_INVOICES, help="Invoices (JSON or YAML)")
    parser.add_argument(
        "--format",
        choices=[f.value for f in StatementFormat],
        default=StatementFormat.TEXT.value,
        help="Statement format",
    )
    parser.add_argument("--pricing", type=Path, default=None, help="Pricing rules YAML")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=getattr(logging, args.log_level))

    with LogContext.bind(correlation_id=str(uuid4())):
        try:
            rules = get_active_config(args.pricing)
            catalog = load_catalog(args.plays)
            invoices = load_invoices(args.invoices)
        except (OSError, KeyError, ValueError, yaml.YAMLError) as exc:
            logger.error("statement_input_load_failed", exc_info=True)
            print(f"  ERROR: could not load input: {exc}", file=sys.stderr)
            return 1

        statements = []
        for index, invoice in enumerate(invoices):
            with LogContext.bind(invoice_ref=str(index)):
                try:
                    result = aggregate(invoice, catalog, rules)
                except TheaterError as exc:
                    logger.error("statement_failed", exc_info=True)
                    print(f"  ERROR [{exc.code}]: {exc}", file=sys.stderr)
                    return 1
            statements.append(render(result, args.format))

    separator = "" if args.format == StatementFormat.TEXT.value else "\n"
    sys.stdout.write(separator.join(statements))
    if args.format != StatementFormat.TEXT.value:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
