"""
habitat.core - Shared constants for the habitat layout tools.
"""

from .constants import (
    DEFAULT_DECK_HEIGHT_M,
    DEFAULT_ADJACENCY_DISTANCE_M,
    OVER_DENSITY_PCT,
    MIN_COMFORT_AREA_PER_PERSON_M2,
    UNDERSIZED_THRESHOLD_PCT,
    UNDER_UTILIZED_PCT,
    MIN_VOLUME_PER_CREW_M3,
    FULL_COMPLIANCE_PCT,
    DEFAULT_HABITAT_DIMENSIONS,
)

__all__ = [
    "DEFAULT_DECK_HEIGHT_M",
    "DEFAULT_ADJACENCY_DISTANCE_M",
    "OVER_DENSITY_PCT",
    "MIN_COMFORT_AREA_PER_PERSON_M2",
    "UNDERSIZED_THRESHOLD_PCT",
    "UNDER_UTILIZED_PCT",
    "MIN_VOLUME_PER_CREW_M3",
    "FULL_COMPLIANCE_PCT",
    "DEFAULT_HABITAT_DIMENSIONS",
]
