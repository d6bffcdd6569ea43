import pytest

from kygeo.detection import CityDetector, Gazetteer, analyze, detect_city
from kygeo.detection.normalization import find_phrase


@pytest.fixture(scope="module")
def gazetteer() -> Gazetteer:
    return Gazetteer.builtin()


def test_city_with_location_signal_is_detected():
    assert detect_city("Police in Corbin responded to a call") == "corbin"


def test_detector_returns_city_with_its_counties(gazetteer):
    city = CityDetector(gazetteer).detect("Police in Corbin responded to a call")
    assert city is not None
    assert city.counties == ("Whitley", "Knox", "Laurel")


def test_prefers_multi_word_cities_over_substrings():
    text = "Morgan was kidnapped from her apartment complex in Bowling Green, Kentucky"
    assert detect_city(text) == "bowling green"
    assert detect_city("A fire in Russell Springs, Kentucky") == "russell springs"


def test_does_not_match_inside_other_words():
    assert detect_city("Residents of Evergreen celebrate") is None
    assert detect_city("The community of Greenbrier voted") is None


def test_noise_cities_are_never_detected(gazetteer):
    noise = [city.name for city in gazetteer.cities.values() if city.noise]
    assert noise
    for name in noise:
        text = f"Police in {name.title()}, Kentucky said {name.title()} was quiet"
        assert detect_city(text, gazetteer=gazetteer) is None


def test_federal_district_phrase_is_suppressed():
    text = "The U.S. Attorney for the Eastern District of Kentucky spoke"
    assert detect_city(text) is None


def test_single_unsignalled_occurrence_is_rejected():
    assert detect_city("Henderson scored 20 points") is None


def test_repeated_occurrences_are_accepted_without_signal():
    text = "Henderson scored 20 points. Henderson also had 8 rebounds."
    assert detect_city(text) == "henderson"


def test_kentucky_context_replaces_location_signal():
    assert detect_city("Henderson scored 20 points for the Kentucky team") == "henderson"


def test_location_signal_must_be_within_five_tokens():
    assert detect_city("In the end the mayor and several others praised Murray") is None
    assert detect_city("Crews worked near Murray overnight") == "murray"
    assert detect_city("The city of Murray approved the plan") == "murray"


def test_out_of_state_name_disqualifies_without_kentucky_context():
    assert detect_city("Officials in Paris, Texas announced a curfew") is None
    assert detect_city("Officials in Paris, Kentucky met with Ohio leaders") == "paris"


def test_detection_is_deterministic():
    text = "Flooding in Hazard and Pikeville closed roads"
    assert {detect_city(text) for _ in range(5)} == {"pikeville"}


def test_claimed_ranges_are_not_read_as_cities(gazetteer):
    detector = CityDetector(gazetteer)
    scan = analyze("Officials in Corbin met Tuesday", gazetteer.out_of_state_names)
    assert detector.detect_scan(scan).name == "corbin"
    assert detector.detect_scan(scan, claimed=find_phrase(scan.text, "corbin")) is None
