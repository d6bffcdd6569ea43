"""Dataclasses shared by the Kentucky geo detection engine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


@dataclass(frozen=True, slots=True)
class MatchRange:
    """Half-open ``[start, end)`` interval over normalized text."""

    start: int
    end: int

    def overlaps(self, other: "MatchRange") -> bool:
        return self.start < other.end and other.start < self.end

    def contains(self, other: "MatchRange") -> bool:
        return self.start <= other.start and other.end <= self.end

    def overlaps_any(self, ranges: Iterable["MatchRange"]) -> bool:
        return any(self.overlaps(item) for item in ranges)


@dataclass(frozen=True, slots=True)
class City:
    """Kentucky city with its primary county first in ``counties``."""

    name: str
    counties: tuple[str, ...]
    noise: bool = False

    @property
    def county(self) -> str:
        return self.counties[0]

    @property
    def is_multi_county(self) -> bool:
        return len(self.counties) > 1


class MatchKind(str, Enum):
    """Shape of a county mention found by the county scanner."""

    SINGLE = "single"
    ENUMERATED = "enumerated"


@dataclass(frozen=True, slots=True)
class CountyMatch:
    """A run of county names closed by a county suffix token.

    ``span`` covers the whole run including the suffix. ``anchor`` covers only
    the county directly in front of the suffix, which is the single mention
    every match carries.
    """

    kind: MatchKind
    counties: tuple[str, ...]
    span: MatchRange
    anchor: MatchRange

    @property
    def anchor_county(self) -> str:
        return self.counties[-1]


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Counties (explicit mentions first), detected city and context flag."""

    counties: tuple[str, ...] = ()
    city: str | None = None
    kentucky_context: bool = False

    @property
    def county(self) -> str | None:
        """Highest-priority county, used as the primary county tag."""

        return self.counties[0] if self.counties else None

    @property
    def is_kentucky(self) -> bool:
        return self.kentucky_context or bool(self.counties) or self.city is not None

    def as_dict(self) -> dict[str, Any]:
        return {
            "counties": list(self.counties),
            "county": self.county,
            "city": self.city,
            "kentucky_context": self.kentucky_context,
            "is_kentucky": self.is_kentucky,
        }


__all__ = [
    "City",
    "CountyMatch",
    "DetectionResult",
    "MatchKind",
    "MatchRange",
]
