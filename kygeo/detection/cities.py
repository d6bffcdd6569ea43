"""City mention detection.

Candidates are tried longest name first so "bowling green" wins over any
shorter name inside it. The first candidate passing every context check is
the detected city; only one city is reported per text.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from .gazetteer import Gazetteer, default_gazetteer
from .models import City, MatchRange
from .normalization import NormalizedText, analyze, find_phrase

log = logging.getLogger(__name__)

LOCATION_SIGNAL_TOKENS = frozenset({"in", "at", "from", "near", "county", "ky", "kentucky"})
LOCATION_SIGNAL_PHRASES = (("city", "of"),)
# Tokens on each side of an occurrence searched for a location signal.
LOCATION_SIGNAL_WINDOW = 5
# Cities followed by this word belong to a court district name
# ("Eastern District of Kentucky") rather than naming a place.
SUPPRESSING_WORD = "district"
MIN_UNSIGNALLED_OCCURRENCES = 2


def has_location_signal(scan: NormalizedText, span: MatchRange) -> bool:
    """True when a location signal appears within the token window of ``span``."""

    first = scan.token_index(span.start)
    last = scan.token_index(span.end)
    window = [
        token.text
        for token in scan.tokens[
            max(0, first - LOCATION_SIGNAL_WINDOW) : last + LOCATION_SIGNAL_WINDOW
        ]
    ]
    if any(word in LOCATION_SIGNAL_TOKENS for word in window):
        return True
    for phrase in LOCATION_SIGNAL_PHRASES:
        size = len(phrase)
        for offset in range(len(window) - size + 1):
            if tuple(window[offset : offset + size]) == phrase:
                return True
    return False


class CityDetector:
    """Detect the single most specific Kentucky city named in a text."""

    def __init__(self, gazetteer: Gazetteer):
        self._gazetteer = gazetteer

    @property
    def gazetteer(self) -> Gazetteer:
        return self._gazetteer

    def detect_scan(
        self, scan: NormalizedText, claimed: Iterable[MatchRange] = ()
    ) -> City | None:
        """Return the accepted city, skipping text inside ``claimed`` ranges.

        Callers pass ranges another detector already used, such as the span
        of "Carlisle County", so a county name is not read again as a city.
        """

        claimed = list(claimed)
        for city in self._gazetteer.detection_candidates():
            occurrences: list[MatchRange] = []
            for span in find_phrase(scan.text, city.name):
                if span.overlaps_any(claimed):
                    continue
                if scan.followed_by(span, SUPPRESSING_WORD):
                    claimed.append(span)
                    log.debug("City %s suppressed by district phrase at %d", city.name, span.start)
                    continue
                occurrences.append(span)
            if not occurrences:
                continue

            signalled = any(has_location_signal(scan, span) for span in occurrences)
            if (
                not signalled
                and not scan.kentucky_context
                and len(occurrences) < MIN_UNSIGNALLED_OCCURRENCES
            ):
                log.debug("City %s rejected: single unsignalled occurrence", city.name)
                continue

            if not scan.kentucky_context and scan.has_out_of_state_name_near(occurrences[0]):
                log.debug("City %s rejected: out-of-state name nearby", city.name)
                continue

            claimed.append(occurrences[0])
            return city
        return None

    def detect(self, text: Any) -> City | None:
        return self.detect_scan(analyze(text, self._gazetteer.out_of_state_names))


def detect_city(text: Any, *, gazetteer: Gazetteer | None = None) -> str | None:
    """Name of the city detected in ``text``, or ``None``."""

    city = CityDetector(gazetteer or default_gazetteer()).detect(text)
    return city.name if city is not None else None


__all__ = [
    "CityDetector",
    "LOCATION_SIGNAL_TOKENS",
    "LOCATION_SIGNAL_WINDOW",
    "detect_city",
    "has_location_signal",
]
