"""
Habitat Layout Constants

Fixed numeric defaults used by the catalog, layout validator and
compliance engine. Outer surfaces may override most of these through
configuration; the core only ever sees explicit parameters.
"""

from typing import Dict

# ==================== Placement Geometry ====================

# Floor-to-ceiling height assumed when deriving volume from footprint area
DEFAULT_DECK_HEIGHT_M = 3.0  # m

# Edge-to-edge distance at or below which two footprints count as adjacent
DEFAULT_ADJACENCY_DISTANCE_M = 1.0  # m

# ==================== Recommendation Thresholds ====================

OVER_DENSITY_PCT = 90.0  # % of habitat surface area in use
MIN_COMFORT_AREA_PER_PERSON_M2 = 15.0  # m² per crew member
UNDERSIZED_THRESHOLD_PCT = 80.0  # % of required area
UNDER_UTILIZED_PCT = 70.0  # % of habitat surface area in use

FULL_COMPLIANCE_PCT = 100.0

# ==================== Mission Readiness ====================

MIN_VOLUME_PER_CREW_M3 = 15.0  # m³ per crew member

# ==================== Habitat Geometry ====================

# Fallback dimensions (m) when a geometry omits one
DEFAULT_HABITAT_DIMENSIONS: Dict[str, float] = {
    "radius": 5.0,
    "height": 10.0,
    "width": 8.0,
    "depth": 8.0,
}
