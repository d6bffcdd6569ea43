"""Kentucky geo detection engine."""
from .cities import CityDetector, detect_city
from .counties import CountyDetector, detect_counties
from .gazetteer import Gazetteer, GazetteerError, default_gazetteer, load_gazetteer
from .models import City, CountyMatch, DetectionResult, MatchKind, MatchRange
from .normalization import NormalizedText, analyze, normalize
from .resolver import KentuckyGeoResolver, detect_kentucky_geo

__all__ = [
    "City",
    "CityDetector",
    "CountyDetector",
    "CountyMatch",
    "DetectionResult",
    "Gazetteer",
    "GazetteerError",
    "KentuckyGeoResolver",
    "MatchKind",
    "MatchRange",
    "NormalizedText",
    "analyze",
    "default_gazetteer",
    "detect_city",
    "detect_counties",
    "detect_kentucky_geo",
    "load_gazetteer",
    "normalize",
]
