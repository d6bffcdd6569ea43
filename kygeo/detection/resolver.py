"""Merge explicit county mentions and city-implied counties into one result."""
from __future__ import annotations

import logging
from typing import Any

from .cities import CityDetector
from .counties import CountyDetector
from .gazetteer import Gazetteer, default_gazetteer
from .models import DetectionResult
from .normalization import analyze

log = logging.getLogger(__name__)


def _join_text(headline: Any, body: Any) -> str:
    parts = []
    for part in (headline, body):
        if part is None:
            continue
        if isinstance(part, bytes):
            part = part.decode("utf-8", errors="ignore")
        text = str(part).strip()
        if text:
            parts.append(text)
    return "\n".join(parts)


class KentuckyGeoResolver:
    """Run both detectors over one normalized text and merge their output.

    Explicit county mentions keep priority; counties implied by the detected
    city are appended after them. The city detector always runs, since a
    multi-county city can add counties nobody named.
    """

    def __init__(self, gazetteer: Gazetteer):
        self._gazetteer = gazetteer
        self._counties = CountyDetector(gazetteer)
        self._cities = CityDetector(gazetteer)

    @property
    def gazetteer(self) -> Gazetteer:
        return self._gazetteer

    def resolve(self, headline: Any, body: Any = None) -> DetectionResult:
        scan = analyze(_join_text(headline, body), self._gazetteer.out_of_state_names)
        matches = list(self._counties.iter_matches(scan))
        counties = self._counties.select(matches, scan)
        # Every county span is claimed, rejected ambiguous ones included.
        city = self._cities.detect_scan(scan, claimed=[match.span for match in matches])

        if city is not None:
            for county in city.counties:
                if county not in counties:
                    counties.append(county)

        result = DetectionResult(
            counties=tuple(counties),
            city=city.name if city is not None else None,
            kentucky_context=scan.kentucky_context,
        )
        log.debug(
            "Geo detection: counties=%s city=%s kentucky_context=%s",
            result.counties,
            result.city,
            result.kentucky_context,
        )
        return result


def detect_kentucky_geo(
    headline: Any, body: Any = None, *, gazetteer: Gazetteer | None = None
) -> DetectionResult:
    """Detect Kentucky counties and city for an article headline and body."""

    return KentuckyGeoResolver(gazetteer or default_gazetteer()).resolve(headline, body)


__all__ = ["KentuckyGeoResolver", "detect_kentucky_geo"]
