"""Immutable Kentucky gazetteer used by every detector.

The gazetteer is built once per process, validated up front and shared by
reference afterwards. Integrity problems are reported as a single
:class:`GazetteerError` so a corrupt data file fails at startup instead of
producing silently wrong tags.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from kygeo.settings import get_gazetteer_path

from . import data
from .models import City
from .normalization import normalize

log = logging.getLogger(__name__)


class GazetteerError(ValueError):
    """Raised when gazetteer tables violate a data-integrity precondition."""

    def __init__(self, problems: Iterable[str]):
        self.problems: tuple[str, ...] = tuple(problems)
        super().__init__("Invalid gazetteer: " + "; ".join(self.problems))


def _key(name: str) -> str:
    return normalize(name).strip()


class Gazetteer:
    """Read-only county and city tables with the lookups detectors need."""

    def __init__(
        self,
        counties: tuple[str, ...],
        cities: Mapping[str, City],
        ambiguous_counties: frozenset[str],
        out_of_state_names: tuple[str, ...],
    ):
        self._counties = counties
        self._county_by_key = MappingProxyType({_key(name): name for name in counties})
        self._cities = MappingProxyType(dict(cities))
        self._ambiguous = ambiguous_counties
        self._out_of_state = out_of_state_names
        self._candidates = tuple(
            sorted(
                (city for city in self._cities.values() if not city.noise),
                key=lambda city: (-len(city.name), city.name),
            )
        )

    @classmethod
    def from_tables(
        cls,
        counties: Iterable[str],
        city_counties: Mapping[str, Iterable[str]],
        *,
        noise_cities: Iterable[str] = (),
        ambiguous_counties: Iterable[str] = (),
        out_of_state_names: Iterable[str] = data.OUT_OF_STATE_NAMES,
    ) -> "Gazetteer":
        """Validate raw tables and build a gazetteer from them."""

        problems: list[str] = []

        county_names: list[str] = []
        county_by_key: dict[str, str] = {}
        for raw in counties:
            if not isinstance(raw, str):
                problems.append(f"county name {raw!r} must be a string")
                continue
            name = raw.strip()
            key = _key(name)
            if not key:
                problems.append(f"empty county name {raw!r}")
                continue
            if key in county_by_key:
                problems.append(f"duplicate county {name!r}")
                continue
            county_by_key[key] = name
            county_names.append(name)

        noise_keys = {_key(str(name)) for name in noise_cities}

        cities: dict[str, City] = {}
        for raw_name, raw_counties in city_counties.items():
            name = _key(str(raw_name))
            if not name:
                problems.append(f"empty city name {raw_name!r}")
                continue
            if isinstance(raw_counties, str):
                raw_counties = [raw_counties]
            elif isinstance(raw_counties, (bytes, Mapping)) or not isinstance(
                raw_counties, Iterable
            ):
                problems.append(f"city {name!r} counties must be a list")
                continue
            resolved: list[str] = []
            for raw_county in raw_counties:
                if not isinstance(raw_county, str):
                    problems.append(f"city {name!r} county {raw_county!r} must be a string")
                    continue
                canonical = county_by_key.get(_key(raw_county))
                if canonical is None:
                    problems.append(f"city {name!r} references unknown county {raw_county!r}")
                elif canonical not in resolved:
                    resolved.append(canonical)
            if not resolved:
                problems.append(f"city {name!r} has no county")
                continue
            if name in cities:
                problems.append(f"duplicate city {name!r}")
                continue
            cities[name] = City(name=name, counties=tuple(resolved), noise=name in noise_keys)

        for noise in sorted(noise_keys - set(cities)):
            problems.append(f"noise name {noise!r} is not a known city")

        ambiguous: set[str] = set()
        for raw in ambiguous_counties:
            canonical = county_by_key.get(_key(str(raw)))
            if canonical is None:
                problems.append(f"ambiguous name {raw!r} is not a known county")
            else:
                ambiguous.add(canonical)

        states: list[str] = []
        for raw in out_of_state_names:
            state = _key(str(raw))
            if not state:
                continue
            if state == "kentucky":
                problems.append("out-of-state names must not include kentucky")
                continue
            if state not in states:
                states.append(state)

        if problems:
            raise GazetteerError(problems)

        gazetteer = cls(
            counties=tuple(county_names),
            cities=cities,
            ambiguous_counties=frozenset(ambiguous),
            out_of_state_names=tuple(states),
        )
        log.info(
            "Gazetteer built: %d counties, %d cities (%d noise), %d ambiguous counties",
            len(county_names),
            len(cities),
            sum(1 for city in cities.values() if city.noise),
            len(ambiguous),
        )
        return gazetteer

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Gazetteer":
        """Build a gazetteer from the JSON document layout."""

        if not isinstance(payload, Mapping):
            raise GazetteerError(["gazetteer document must be a JSON object"])
        counties = payload.get("counties")
        cities = payload.get("cities")
        problems = []
        if not isinstance(counties, list) or not counties:
            problems.append("'counties' must be a non-empty list")
        if not isinstance(cities, Mapping):
            problems.append("'cities' must be an object mapping city to counties")
        for key in ("noise_cities", "ambiguous_counties", "out_of_state"):
            if payload.get(key) is not None and not isinstance(payload[key], list):
                problems.append(f"{key!r} must be a list")
        if problems:
            raise GazetteerError(problems)
        return cls.from_tables(
            counties,
            cities,
            noise_cities=payload.get("noise_cities") or (),
            ambiguous_counties=payload.get("ambiguous_counties") or (),
            out_of_state_names=payload.get("out_of_state") or data.OUT_OF_STATE_NAMES,
        )

    @classmethod
    def builtin(cls) -> "Gazetteer":
        return cls.from_tables(
            data.KY_COUNTIES,
            data.KY_CITY_COUNTIES,
            noise_cities=data.NOISE_CITY_NAMES,
            ambiguous_counties=data.AMBIGUOUS_COUNTY_NAMES,
            out_of_state_names=data.OUT_OF_STATE_NAMES,
        )

    @property
    def counties(self) -> tuple[str, ...]:
        return self._counties

    @property
    def cities(self) -> Mapping[str, City]:
        return self._cities

    @property
    def ambiguous_counties(self) -> frozenset[str]:
        return self._ambiguous

    @property
    def out_of_state_names(self) -> tuple[str, ...]:
        return self._out_of_state

    def is_ambiguous(self, county: str) -> bool:
        return county in self._ambiguous

    def canonical_county(self, name: str | None) -> str | None:
        """Return the canonical county for ``name`` ("fayette county" -> "Fayette")."""

        if not name:
            return None
        key = _key(name)
        if key.endswith(" county"):
            key = key[: -len(" county")].strip()
        return self._county_by_key.get(key)

    def county_keys(self) -> Mapping[str, str]:
        """Normalized county name -> canonical county name."""

        return self._county_by_key

    def city(self, name: str | None) -> City | None:
        if not name:
            return None
        return self._cities.get(_key(name))

    def counties_for_city(self, name: str | None) -> tuple[str, ...]:
        city = self.city(name)
        return city.counties if city is not None else ()

    def detection_candidates(self) -> tuple[City, ...]:
        """Non-noise cities, longest name first, alphabetical among equals."""

        return self._candidates

    def normalize_county_list(self, values: Iterable[str]) -> list[str]:
        """Map free-form county labels to canonical names, dropping unknowns."""

        seen: list[str] = []
        for value in values:
            canonical = self.canonical_county(value)
            if canonical and canonical not in seen:
                seen.append(canonical)
        return seen


def load_gazetteer(path: Path | str | None = None) -> Gazetteer:
    """Load a gazetteer from a JSON document, or the built-in tables."""

    if path is None:
        return Gazetteer.builtin()
    source = Path(path)
    with source.open("r", encoding="utf-8") as stream:
        try:
            payload = json.load(stream)
        except json.JSONDecodeError as exc:
            raise GazetteerError([f"{source} is not valid JSON: {exc}"]) from exc
    log.info("Loading gazetteer from %s", source)
    return Gazetteer.from_mapping(payload)


@lru_cache(maxsize=1)
def default_gazetteer() -> Gazetteer:
    """Process-wide gazetteer built on first use."""

    return load_gazetteer(get_gazetteer_path())


__all__ = [
    "Gazetteer",
    "GazetteerError",
    "default_gazetteer",
    "load_gazetteer",
]
