"""
Structured JSON logging for theater billing.

Every record is one JSON line carrying the event name, any ``extra``
fields, and the statement context currently bound:

- ``correlation_id``: one run of the print_statement script
- ``invoice_ref``: position of the invoice within the input file
- ``customer``: customer of the statement being aggregated

Records for a failing TheaterError also carry its ``code`` and its
structured attributes (``play_id``, ``play_type``, ``format_name``).
"""

__all__ = [
    "CONTEXT_FIELDS",
    "StructuredFormatter",
    "LogContext",
    "get_logger",
    "configure_logging",
    "reset_logging",
]

import json
import logging
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

CONTEXT_FIELDS = ("correlation_id", "invoice_ref", "customer")

_EMPTY: Mapping[str, str] = MappingProxyType({})
_context: ContextVar[Mapping[str, str]] = ContextVar("theater_log_context", default=_EMPTY)


class LogContext:
    """Statement-scoped log fields, safe across threads and tasks."""

    @staticmethod
    def current() -> dict[str, str]:
        return dict(_context.get())

    @staticmethod
    @contextmanager
    def bind(**fields: str | None) -> Iterator[None]:
        """
        Add fields to the context for the duration of a ``with`` block.

        None values are skipped.  Nested binds see the outer fields and
        restore them on exit.

        Raises:
            ValueError: for a name outside CONTEXT_FIELDS.
        """
        unknown = set(fields) - set(CONTEXT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown log context field(s): {sorted(unknown)}")
        merged = dict(_context.get())
        merged.update({k: v for k, v in fields.items() if v is not None})
        token = _context.set(MappingProxyType(merged))
        try:
            yield
        finally:
            _context.reset(token)

    @staticmethod
    def clear() -> None:
        _context.set(_EMPTY)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    return str(obj)


_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "taskName"}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context.get(),
        }
        for key, val in vars(record).items():
            if key not in _RECORD_ATTRS:
                payload.setdefault(key, val)

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            payload["exc_type"] = type(exc).__name__
            payload["exc_message"] = str(exc)
            code = getattr(exc, "code", None)
            if code is not None:
                payload["exc_code"] = code
            for attr, val in vars(exc).items():
                if not attr.startswith("_"):
                    payload[f"exc_{attr}"] = val
            payload["traceback"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=_json_default)


_ROOT = "theater"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``theater.`` namespace."""
    return logging.getLogger(f"{_ROOT}.{name}")


def configure_logging(
    *,
    level: int = logging.INFO,
    handler: logging.Handler | None = None,
) -> None:
    """
    Attach a JSON handler to the ``theater`` logger.

    Only the first call has an effect.  Without a handler, records go
    to stderr so that stdout carries statements only.
    """
    global _configured
    if _configured:
        return
    _configured = True

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())

    root = logging.getLogger(_ROOT)
    root.setLevel(level)
    root.propagate = False
    root.addHandler(handler)


def reset_logging() -> None:
    """Undo configure_logging(). Test use only."""
    global _configured
    _configured = False
    root = logging.getLogger(_ROOT)
    root.handlers.clear()
    root.setLevel(logging.WARNING)
    root.propagate = True
