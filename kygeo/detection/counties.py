"""Explicit county mention detection.

A single token scanner recognises one or more county names, optionally joined
by separators, closed by a county suffix token. Punctuation is already turned
into spaces by the normalizer, so "Knox/Laurel", "Knox-Laurel" and
"Knox, Laurel" all reach the scanner as plain token runs.

Every match yields two passes worth of counties:

* pass A, the single mention: the county directly in front of the suffix;
* pass B, the enumeration: every county in a run of two or more names.

Pass A counties come first, in encounter order, then pass B counties not
already present. A list therefore reports the county in front of the suffix
before the counties written ahead of it: "Laurel and Knox County" yields Knox
then Laurel, so the primary county is Knox rather than the first one in the
text.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Iterable, Iterator

from .gazetteer import Gazetteer, default_gazetteer
from .models import CountyMatch, MatchKind, MatchRange
from .normalization import NormalizedText, Token, analyze

log = logging.getLogger(__name__)

COUNTY_SUFFIXES = frozenset({"county", "counties", "cnty", "co"})
LIST_SEPARATORS = frozenset({"and", "or"})


class CountyDetector:
    """Find explicit "<county> County" style mentions in article text."""

    def __init__(self, gazetteer: Gazetteer):
        self._gazetteer = gazetteer
        by_first: dict[str, list[tuple[tuple[str, ...], str]]] = defaultdict(list)
        for key, canonical in gazetteer.county_keys().items():
            words = tuple(key.split(" "))
            by_first[words[0]].append((words, canonical))
        for entries in by_first.values():
            entries.sort(key=lambda entry: -len(entry[0]))
        self._by_first_token = dict(by_first)

    @property
    def gazetteer(self) -> Gazetteer:
        return self._gazetteer

    def _county_at(self, tokens: tuple[Token, ...], index: int) -> tuple[str, int] | None:
        if index >= len(tokens):
            return None
        for words, canonical in self._by_first_token.get(tokens[index].text, ()):
            end = index + len(words)
            if end <= len(tokens) and all(
                tokens[index + offset].text == word for offset, word in enumerate(words)
            ):
                return canonical, len(words)
        return None

    def iter_matches(self, scan: NormalizedText) -> Iterator[CountyMatch]:
        """Yield every county run closed by a suffix, left to right."""

        tokens = scan.tokens
        index = 0
        while index < len(tokens):
            first = self._county_at(tokens, index)
            if first is None:
                index += 1
                continue

            names = [first[0]]
            anchor_start = tokens[index].start
            cursor = index + first[1]
            while True:
                lookahead = cursor
                while lookahead < len(tokens) and tokens[lookahead].text in LIST_SEPARATORS:
                    lookahead += 1
                following = self._county_at(tokens, lookahead)
                if following is None:
                    break
                names.append(following[0])
                anchor_start = tokens[lookahead].start
                cursor = lookahead + following[1]

            if cursor < len(tokens) and tokens[cursor].text in COUNTY_SUFFIXES:
                suffix = tokens[cursor]
                yield CountyMatch(
                    kind=MatchKind.SINGLE if len(names) == 1 else MatchKind.ENUMERATED,
                    counties=tuple(names),
                    span=MatchRange(tokens[index].start, suffix.end),
                    anchor=MatchRange(anchor_start, suffix.end),
                )
                index = cursor + 1
            else:
                index += 1

    def _accepts(self, county: str, window: MatchRange, scan: NormalizedText) -> bool:
        if not self._gazetteer.is_ambiguous(county):
            return True
        if not scan.kentucky_context:
            log.debug("Ambiguous county %s rejected: no Kentucky context", county)
            return False
        if scan.has_out_of_state_name_near(window):
            log.debug("Ambiguous county %s rejected: out-of-state name nearby", county)
            return False
        return True

    def detect_scan(self, scan: NormalizedText) -> list[str]:
        """Return accepted counties for already analyzed text."""

        return self.select(self.iter_matches(scan), scan)

    def select(self, matches: Iterable[CountyMatch], scan: NormalizedText) -> list[str]:
        """Apply ambiguity gating and pass ordering to scanned matches."""

        single: list[str] = []
        enumerated: list[str] = []
        for match in matches:
            anchor = match.anchor_county
            if anchor not in single and self._accepts(anchor, match.anchor, scan):
                single.append(anchor)
            if match.kind is MatchKind.ENUMERATED:
                # One shared window for the whole list.
                for county in match.counties:
                    if county not in enumerated and self._accepts(county, match.span, scan):
                        enumerated.append(county)

        counties = list(single)
        for county in enumerated:
            if county not in counties:
                counties.append(county)
        return counties

    def detect(self, text: Any) -> list[str]:
        return self.detect_scan(analyze(text, self._gazetteer.out_of_state_names))


def detect_counties(text: Any, *, gazetteer: Gazetteer | None = None) -> list[str]:
    """Explicitly mentioned Kentucky counties in ``text``, highest priority first."""

    return CountyDetector(gazetteer or default_gazetteer()).detect(text)


__all__ = [
    "COUNTY_SUFFIXES",
    "CountyDetector",
    "LIST_SEPARATORS",
    "detect_counties",
]
