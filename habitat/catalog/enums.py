"""
Functional Area Catalog Enumerations

Classification values carried by every catalog entry.
"""

from enum import Enum


class AreaCategory(Enum):
    """High-level categories of habitat space."""
    LIFE_SUPPORT = "life_support"
    CREW_SUPPORT = "crew_support"
    OPERATIONS = "operations"
    MAINTENANCE = "maintenance"
    SCIENCE = "science"
    STORAGE = "storage"


class AreaPriority(Enum):
    """Informational weighting of an area type."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class NoiseLevel(Enum):
    """Acoustic classification used by noise separation rules."""
    QUIET = "quiet"
    MODERATE = "moderate"
    LOUD = "loud"


class PrivacyLevel(Enum):
    """Privacy classification used by privacy rules."""
    PRIVATE = "private"
    SEMI_PRIVATE = "semi_private"
    PUBLIC = "public"
