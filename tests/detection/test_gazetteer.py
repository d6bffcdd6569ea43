import json
from pathlib import Path

import pytest

from kygeo import settings
from kygeo.detection import gazetteer as gazetteer_module
from kygeo.detection.gazetteer import Gazetteer, GazetteerError, load_gazetteer


def build_gazetteer() -> Gazetteer:
    return Gazetteer.from_tables(
        ["Knox", "Laurel", "Whitley", "Todd"],
        {"corbin": ["Whitley", "Knox", "Laurel"], "elkton": ["Todd"], "bliss": ["Knox"]},
        noise_cities=["bliss"],
        ambiguous_counties=["todd"],
    )


def test_builtin_gazetteer_has_every_county():
    gazetteer = Gazetteer.builtin()
    assert len(gazetteer.counties) == 120
    assert len(gazetteer.out_of_state_names) == 49
    assert "kentucky" not in gazetteer.out_of_state_names


def test_canonical_county_is_case_insensitive_and_accepts_suffix():
    gazetteer = Gazetteer.builtin()
    assert gazetteer.canonical_county("fayette county") == "Fayette"
    assert gazetteer.canonical_county("  MCCRACKEN ") == "McCracken"
    assert gazetteer.canonical_county("Cook") is None
    assert gazetteer.canonical_county(None) is None


def test_city_lookup_returns_full_county_set():
    gazetteer = Gazetteer.builtin()
    corbin = gazetteer.city("Corbin")
    assert corbin is not None
    assert corbin.counties == ("Whitley", "Knox", "Laurel")
    assert corbin.county == "Whitley"
    assert corbin.is_multi_county
    assert gazetteer.counties_for_city("Lexington") == ("Fayette",)
    assert gazetteer.counties_for_city("Atlantis") == ()


def test_normalize_county_list_drops_unknown_and_duplicates():
    gazetteer = Gazetteer.builtin()
    values = ["Fayette County", " fayette ", "Pike", "Nowhere", ""]
    assert gazetteer.normalize_county_list(values) == ["Fayette", "Pike"]


def test_detection_candidates_skip_noise_and_prefer_longer_names():
    gazetteer = Gazetteer.builtin()
    candidates = gazetteer.detection_candidates()
    names = [city.name for city in candidates]

    assert all(not city.noise for city in candidates)
    assert "union" not in names
    assert names.index("russell springs") < names.index("russell")
    for current, following in zip(candidates, candidates[1:]):
        assert len(current.name) >= len(following.name)
        if len(current.name) == len(following.name):
            assert current.name < following.name


def test_small_gazetteer_marks_noise_and_ambiguous_names():
    gazetteer = build_gazetteer()
    assert gazetteer.city("bliss").noise
    assert gazetteer.is_ambiguous("Todd")
    assert not gazetteer.is_ambiguous("Knox")
    assert [city.name for city in gazetteer.detection_candidates()] == ["corbin", "elkton"]


def test_city_referencing_unknown_county_is_rejected():
    with pytest.raises(GazetteerError) as excinfo:
        Gazetteer.from_tables(["Knox"], {"corbin": ["Knox", "Laurel"]})
    assert "Laurel" in str(excinfo.value)


def test_city_without_county_is_rejected():
    with pytest.raises(GazetteerError, match="has no county"):
        Gazetteer.from_tables(["Knox"], {"nowhere": []})


def test_noise_and_ambiguous_names_must_exist():
    with pytest.raises(GazetteerError) as excinfo:
        Gazetteer.from_tables(
            ["Knox"],
            {"barbourville": ["Knox"]},
            noise_cities=["bliss"],
            ambiguous_counties=["Cook"],
        )
    assert len(excinfo.value.problems) == 2


def test_duplicate_counties_and_kentucky_as_foreign_state_are_rejected():
    with pytest.raises(GazetteerError, match="duplicate county"):
        Gazetteer.from_tables(["Knox", "knox"], {})
    with pytest.raises(GazetteerError, match="kentucky"):
        Gazetteer.from_tables(["Knox"], {}, out_of_state_names=["ohio", "Kentucky"])


def test_badly_shaped_entries_are_collected_as_problems():
    with pytest.raises(GazetteerError) as excinfo:
        Gazetteer.from_tables(["Knox", None], {"corbin": 5, "barbourville": ["Knox", 7]})
    assert excinfo.value.problems == (
        "county name None must be a string",
        "city 'corbin' counties must be a list",
        "city 'barbourville' county 7 must be a string",
    )


def test_from_mapping_rejects_non_list_city_value():
    with pytest.raises(GazetteerError, match="counties must be a list"):
        Gazetteer.from_mapping({"counties": ["Knox"], "cities": {"corbin": 5}})
    with pytest.raises(GazetteerError, match="'noise_cities' must be a list"):
        Gazetteer.from_mapping({"counties": ["Knox"], "cities": {}, "noise_cities": 5})


def test_load_gazetteer_reads_json_document(tmp_path: Path):
    path = tmp_path / "gazetteer.json"
    path.write_text(
        json.dumps(
            {
                "counties": ["Fayette", "Scott"],
                "cities": {"Lexington": ["Fayette"], "Georgetown": "Scott"},
                "ambiguous_counties": ["Scott"],
            }
        ),
        encoding="utf-8",
    )

    gazetteer = load_gazetteer(path)

    assert gazetteer.counties == ("Fayette", "Scott")
    assert gazetteer.counties_for_city("georgetown") == ("Scott",)
    assert gazetteer.ambiguous_counties == frozenset({"Scott"})
    assert "ohio" in gazetteer.out_of_state_names


def test_load_gazetteer_rejects_malformed_documents(tmp_path: Path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(GazetteerError, match="not valid JSON"):
        load_gazetteer(broken)

    incomplete = tmp_path / "incomplete.json"
    incomplete.write_text(json.dumps({"counties": []}), encoding="utf-8")
    with pytest.raises(GazetteerError) as excinfo:
        load_gazetteer(incomplete)
    assert len(excinfo.value.problems) == 2


def test_default_gazetteer_uses_configured_path(monkeypatch, tmp_path: Path):
    path = tmp_path / "gazetteer.json"
    path.write_text(
        json.dumps({"counties": ["Pike"], "cities": {"pikeville": ["Pike"]}}),
        encoding="utf-8",
    )
    monkeypatch.setattr(gazetteer_module, "get_gazetteer_path", lambda: path)
    gazetteer_module.default_gazetteer.cache_clear()
    try:
        assert gazetteer_module.default_gazetteer().counties == ("Pike",)
    finally:
        gazetteer_module.default_gazetteer.cache_clear()


def test_gazetteer_path_setting_reads_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("KYGEO_GAZETTEER_PATH", str(tmp_path / "ky.json"))
    settings.get_gazetteer_path.cache_clear()
    try:
        assert settings.get_gazetteer_path() == tmp_path / "ky.json"
    finally:
        settings.get_gazetteer_path.cache_clear()
