"""Kentucky county and city detection for news articles."""
from .detection import (
    DetectionResult,
    Gazetteer,
    GazetteerError,
    detect_city,
    detect_counties,
    detect_kentucky_geo,
    normalize,
)

__all__ = [
    "DetectionResult",
    "Gazetteer",
    "GazetteerError",
    "detect_city",
    "detect_counties",
    "detect_kentucky_geo",
    "normalize",
]
