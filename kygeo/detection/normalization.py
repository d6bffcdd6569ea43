"""Normalization helpers for the geo detection engine.

Every detector works on the same normalized form of the article: lower-cased,
anything outside ``[a-z0-9 ]`` turned into a space, whitespace collapsed and a
single space added on both ends. Word boundaries are therefore always plain
spaces and a phrase can be located by searching for ``" <phrase> "``.
"""
from __future__ import annotations

import re
from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Iterable

from .models import MatchRange

_NON_SEARCH_CHARS = re.compile(r"[^a-z0-9 ]")
_WHITESPACE = re.compile(r"\s+")

KENTUCKY_CONTEXT_TOKENS = frozenset({"kentucky", "ky"})

# Characters on each side of a match inspected for out-of-state names.
OUT_OF_STATE_WINDOW = 150


def normalize(text: Any) -> str:
    """Return the padded, lower-cased search form of ``text``.

    Never fails: ``None`` becomes an empty text, bytes are decoded and any
    other object goes through ``str``.
    """

    if text is None:
        raw = ""
    elif isinstance(text, bytes):
        raw = text.decode("utf-8", errors="ignore")
    else:
        raw = str(text)
    replaced = _NON_SEARCH_CHARS.sub(" ", raw.lower())
    return _WHITESPACE.sub(" ", f" {replaced} ")


def find_phrase(normalized: str, phrase: str) -> list[MatchRange]:
    """Return every word-bounded occurrence of ``phrase`` in ``normalized``.

    ``phrase`` must already be normalized (without the padding spaces).
    """

    key = phrase.strip()
    if not key:
        return []
    needle = f" {key} "
    ranges: list[MatchRange] = []
    index = normalized.find(needle)
    while index != -1:
        start = index + 1
        ranges.append(MatchRange(start, start + len(key)))
        # Continue from the trailing space so adjacent repeats are found.
        index = normalized.find(needle, start + len(key))
    return ranges


@dataclass(frozen=True, slots=True)
class Token:
    text: str
    start: int
    end: int


def tokenize(normalized: str) -> tuple[Token, ...]:
    tokens: list[Token] = []
    position = 0
    for word in normalized.split(" "):
        if word:
            tokens.append(Token(word, position, position + len(word)))
        position += len(word) + 1
    return tuple(tokens)


@dataclass(frozen=True, slots=True)
class NormalizedText:
    """Normalized article text plus everything derived from it once per call."""

    text: str
    tokens: tuple[Token, ...]
    token_starts: tuple[int, ...]
    kentucky_context: bool
    state_ranges: tuple[MatchRange, ...]

    def token_index(self, position: int) -> int:
        """Index of the token that starts at or after ``position``."""

        return bisect_left(self.token_starts, position)

    def followed_by(self, span: MatchRange, word: str) -> bool:
        return self.text.startswith(f" {word} ", span.end)

    def has_out_of_state_name_near(
        self, span: MatchRange, window: int = OUT_OF_STATE_WINDOW
    ) -> bool:
        """True when a non-Kentucky state name sits within ``window`` chars.

        State names lying inside ``span`` itself are ignored so that a county
        sharing its name with a state ("Ohio County") does not disqualify
        itself.
        """

        area = MatchRange(max(0, span.start - window), span.end + window)
        for state in self.state_ranges:
            if span.contains(state):
                continue
            if area.contains(state):
                return True
        return False


def has_kentucky_context(normalized: str) -> bool:
    return any(f" {token} " in normalized for token in KENTUCKY_CONTEXT_TOKENS)


def analyze(text: Any, out_of_state_names: Iterable[str]) -> NormalizedText:
    """Normalize ``text`` once and precompute the shared per-call signals."""

    normalized = normalize(text)
    state_ranges: list[MatchRange] = []
    for name in out_of_state_names:
        state_ranges.extend(find_phrase(normalized, name))
    state_ranges.sort(key=lambda item: (item.start, item.end))
    tokens = tokenize(normalized)
    return NormalizedText(
        text=normalized,
        tokens=tokens,
        token_starts=tuple(token.start for token in tokens),
        kentucky_context=has_kentucky_context(normalized),
        state_ranges=tuple(state_ranges),
    )


__all__ = [
    "KENTUCKY_CONTEXT_TOKENS",
    "NormalizedText",
    "OUT_OF_STATE_WINDOW",
    "Token",
    "analyze",
    "find_phrase",
    "has_kentucky_context",
    "normalize",
    "tokenize",
]
