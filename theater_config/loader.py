"""
Configuration and data loader (``theater_config.loader``).

Responsibility
--------------
Loads YAML (or JSON, which ``yaml.safe_load`` also accepts) documents and
parses them into typed values: ``PricingRules`` from the schema, and
``Catalog`` / ``Invoice`` from the kernel domain.

Architecture position
---------------------
**Config layer** -- input tooling.  Depends on ``theater_kernel`` value
objects only.  The engines never read files; callers load here and pass
the parsed values in.

Failure modes
-------------
* Missing file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError`` propagates.
* Wrong shapes, unknown pricing keys, invalid values  -> ``ValueError``.

Document shapes
---------------
Pricing rules::

    tragedy:
      base: 40000
      threshold: 30
      over_per_person: 1000
    comedy:
      base: 30000
      threshold: 20
      over_flat: 10000
      over_per_person: 500
      per_audience: 300
      credit_divisor: 5
    volume_credits:
      threshold: 30

Catalog::

    {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}

Invoices::

    [{"customer": "BigCo",
      "performances": [{"playID": "hamlet", "audience": 55}, ...]}]
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from theater_config.schema import PricingRules
from theater_kernel.domain.values import Catalog, Invoice, Performance, Play

# (section, key) -> PricingRules field
_PRICING_KEYS: dict[tuple[str, str], str] = {
    ("tragedy", "base"): "tragedy_base",
    ("tragedy", "threshold"): "tragedy_threshold",
    ("tragedy", "over_per_person"): "tragedy_over_per_person",
    ("comedy", "base"): "comedy_base",
    ("comedy", "threshold"): "comedy_threshold",
    ("comedy", "over_flat"): "comedy_over_flat",
    ("comedy", "over_per_person"): "comedy_over_per_person",
    ("comedy", "per_audience"): "comedy_per_audience",
    ("comedy", "credit_divisor"): "comedy_credit_divisor",
    ("volume_credits", "threshold"): "volume_credit_threshold",
}

_PRICING_SECTIONS = frozenset(section for section, _ in _PRICING_KEYS)


def load_yaml_file(path: Path) -> Any:
    """
    Load a single YAML or JSON file and return its parsed contents.

    Empty documents load as an empty dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return {} if data is None else data


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def parse_pricing_rules(data: dict[str, Any]) -> PricingRules:
    """
    Parse ``PricingRules`` from a nested dict.

    Keys that are absent keep their ``PricingRules`` default.  Unknown
    sections or keys are rejected so that a typo cannot silently leave a
    default in force.

    Raises:
        ValueError: on unknown keys, wrong shapes, or invalid values.
    """
    _require_mapping(data, "pricing rules")
    overrides: dict[str, int] = {}
    for section, section_data in data.items():
        if section not in _PRICING_SECTIONS:
            raise ValueError(f"Unknown pricing section: {section!r}")
        section_data = _require_mapping(section_data or {}, f"pricing section {section!r}")
        for key, value in section_data.items():
            field_name = _PRICING_KEYS.get((section, key))
            if field_name is None:
                raise ValueError(f"Unknown pricing key: {section}.{key}")
            overrides[field_name] = value
    return PricingRules(**overrides)


def _as_text(value: Any, what: str) -> str:
    """
    Return a YAML scalar as text.

    YAML reads bare numbers such as ``1984`` as ints.  Integers are
    converted; any other non-string value is rejected.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"{what} must be a string, got {type(value).__name__}")


def parse_play(data: dict[str, Any]) -> Play:
    """Parse a ``Play`` from ``{name, type}``."""
    _require_mapping(data, "play")
    return Play(name=_as_text(data["name"], "play name"), type=data["type"])


def parse_catalog(data: dict[str, Any]) -> Catalog:
    """
    Parse a ``Catalog`` from ``{play_id: {name, type}}``.

    Raises:
        KeyError: if a play is missing ``name`` or ``type``.
        ValueError: if the document is not a mapping of mappings.
    """
    _require_mapping(data, "catalog")
    return Catalog({
        _as_text(play_id, "play id"): parse_play(play)
        for play_id, play in data.items()
    })


def parse_performance(data: dict[str, Any]) -> Performance:
    """Parse a ``Performance``; accepts ``playID`` or ``play_id``."""
    _require_mapping(data, "performance")
    play_id = data["playID"] if "playID" in data else data["play_id"]
    return Performance(play_id=_as_text(play_id, "play id"), audience=data["audience"])


def parse_invoice(data: dict[str, Any]) -> Invoice:
    """
    Parse an ``Invoice`` from ``{customer, performances: [...]}``.

    Raises:
        KeyError: if ``customer`` is missing.
        ValueError: if ``performances`` is not a list.
    """
    _require_mapping(data, "invoice")
    performances = data.get("performances", [])
    if not isinstance(performances, list):
        raise ValueError("invoice performances must be a list")
    return Invoice(
        customer=_as_text(data["customer"], "customer"),
        performances=tuple(parse_performance(p) for p in performances),
    )


def load_pricing_rules(path: Path) -> PricingRules:
    return parse_pricing_rules(load_yaml_file(path))


def load_catalog(path: Path) -> Catalog:
    return parse_catalog(load_yaml_file(path))


def load_invoices(path: Path) -> list[Invoice]:
    """Load a list of invoices, or a single invoice document, from a file."""
    data = load_yaml_file(path)
    if isinstance(data, dict):
        return [parse_invoice(data)]
    if isinstance(data, list):
        return [parse_invoice(item) for item in data]
    raise ValueError(f"invoices must be a list or a mapping, got {type(data).__name__}")


def compute_checksum(rules: PricingRules) -> str:
    """
    Compute SHA-256 checksum of the canonical JSON serialization of a
    rule set.  Identical rules always produce identical checksums.
    """
    canonical = json.dumps(asdict(rules), sort_keys=True)
    return hashlib.sha256(canonical.encode()).hexdigest()
