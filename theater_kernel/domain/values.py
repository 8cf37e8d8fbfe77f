"""
Values -- Immutable, self-validating statement inputs.

Responsibility:
    Provides the value types that the pricing engine and the statement
    aggregator consume: Play, Performance, Invoice and Catalog.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by the engines, the config loaders and the renderers.
    No outward dependencies except theater_kernel.exceptions.

Invariants enforced:
    - Performance.audience is a non-negative int (zero is legal)
    - PlayType is a closed enum; a play carrying any other type string
      keeps that raw string so pricing can reject it explicitly
    - Catalog keys are unique and the mapping cannot be mutated after
      construction

Failure modes:
    - ValueError on construction with an empty play id, an empty play
      name, a negative audience, or a non-int audience
    - UnknownPlayError from Catalog.require() for a missing play id
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from theater_kernel.exceptions import UnknownPlayError


class PlayType(str, Enum):
    """Play categories that carry a pricing formula."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: PlayType | str) -> PlayType | str:
        """
        Coerce a type string to a PlayType when it names a known variant.

        Unknown strings are returned unchanged so that the pricing engine
        can surface them in UnknownPlayTypeError.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True, slots=True)
class Play:
    """
    A play in the catalog.

    Attributes:
        name: Display name used on statement lines
        type: PlayType, or the raw type string for an unrecognized type
    """

    name: str
    type: PlayType | str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValueError(f"play name must be a string, got {type(self.name).__name__}")
        if not self.name:
            raise ValueError("play name must be non-empty")
        if not isinstance(self.type, str):
            raise ValueError(f"play type must be a string, got {type(self.type).__name__}")
        object.__setattr__(self, "type", PlayType.parse(self.type))

    @property
    def is_known_type(self) -> bool:
        """True when the type is one of the priced variants."""
        return isinstance(self.type, PlayType)


@dataclass(frozen=True, slots=True)
class Performance:
    """
    A single performance on an invoice.

    Attributes:
        play_id: Catalog key of the play performed
        audience: Number of seats sold (non-negative)
    """

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if not isinstance(self.play_id, str):
            raise ValueError(f"play_id must be a string, got {type(self.play_id).__name__}")
        if not self.play_id:
            raise ValueError("play_id must be non-empty")
        # bool is an int subclass; a True audience is a data error.
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise ValueError(
                f"audience must be an int, got {type(self.audience).__name__}"
            )
        if self.audience < 0:
            raise ValueError(f"audience must be non-negative, got {self.audience}")


@dataclass(frozen=True, slots=True)
class Invoice:
    """
    A customer's invoice.

    Performance order is kept for rendering only; totals do not depend on it.
    """

    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.customer, str):
            raise ValueError(f"customer must be a string, got {type(self.customer).__name__}")
        if not self.customer:
            raise ValueError("customer must be non-empty")
        object.__setattr__(self, "performances", tuple(self.performances))
        for perf in self.performances:
            if not isinstance(perf, Performance):
                raise ValueError(
                    f"performances must be Performance objects, got {type(perf).__name__}"
                )


@dataclass(frozen=True)
class Catalog:
    """
    Read-only lookup table from play id to Play.

    Contract:
        lookup() answers "is there such a play" without raising;
        require() is the strict form used by the statement aggregator.
    """

    plays: Mapping[str, Play] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for play_id, play in self.plays.items():
            if not isinstance(play_id, str):
                raise ValueError(
                    f"catalog key {play_id!r} must be a string, got {type(play_id).__name__}"
                )
            if not isinstance(play, Play):
                raise ValueError(
                    f"catalog entry {play_id!r} must be a Play, got {type(play).__name__}"
                )
        object.__setattr__(self, "plays", MappingProxyType(dict(self.plays)))

    @classmethod
    def of(cls, plays: Catalog | Mapping[str, Play]) -> Catalog:
        """Build a Catalog from a mapping, passing existing catalogs through."""
        if isinstance(plays, cls):
            return plays
        return cls(plays=plays)

    def lookup(self, play_id: str) -> Play | None:
        return self.plays.get(play_id)

    def require(self, play_id: str) -> Play:
        play = self.plays.get(play_id)
        if play is None:
            raise UnknownPlayError(play_id)
        return play

    def __contains__(self, play_id: object) -> bool:
        return play_id in self.plays

    def __len__(self) -> int:
        return len(self.plays)

    def __iter__(self) -> Iterator[str]:
        return iter(self.plays)
