"""
theater_config -- single public entrypoint for pricing configuration.

Responsibility:
    Provides the runtime pricing rules through ``get_active_config()``.
    Loaders for catalogs and invoices live in ``theater_config.loader``.

Architecture position:
    Configuration -- YAML-driven rule sets.  This package sits above
    ``theater_kernel``; the engines receive the parsed ``PricingRules``
    as an argument and never read configuration themselves.

Failure modes:
    - ``FileNotFoundError`` -- an explicit or environment-provided path
      does not exist.
    - ``ValueError`` -- unknown keys or invalid values in the rule file.
    - ``yaml.YAMLError`` -- malformed YAML.

Every successful ``get_active_config()`` call emits a
``THEATER_CONFIG_TRACE`` log entry with the source path and the rule
set checksum.
"""

from __future__ import annotations

import os
from pathlib import Path

from theater_config.loader import compute_checksum, load_pricing_rules
from theater_config.schema import DEFAULT_RULES, PricingRules
from theater_kernel.logging_config import get_logger

_logger = get_logger("config")

CONFIG_ENV_VAR = "THEATER_PRICING_CONFIG"

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults" / "pricing.yaml"

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_RULES",
    "PricingRules",
    "get_active_config",
]


def get_active_config(path: Path | str | None = None) -> PricingRules:
    """Return the pricing rules in force.

    Resolution order:
        1. ``path`` when given
        2. the ``THEATER_PRICING_CONFIG`` environment variable
        3. the packaged ``defaults/pricing.yaml``

    Raises:
        FileNotFoundError: If the resolved file does not exist.
        ValueError: If the rule file fails validation.
    """
    if path is not None:
        source = Path(path)
    elif os.environ.get(CONFIG_ENV_VAR):
        source = Path(os.environ[CONFIG_ENV_VAR])
    else:
        source = _DEFAULT_CONFIG_PATH

    rules = load_pricing_rules(source)

    _logger.info(
        "THEATER_CONFIG_TRACE",
        extra={
            "trace_type": "THEATER_CONFIG_TRACE",
            "config_path": str(source),
            "checksum": compute_checksum(rules),
            "is_default": rules == DEFAULT_RULES,
        },
    )
    return rules
