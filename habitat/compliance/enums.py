"""
Compliance Enumerations

Classification values used by compliance metrics and recommendations.
"""

from enum import Enum


class ComplianceLevel(Enum):
    """Per-area compliance band."""
    COMPLIANT = "compliant"            # Meets the requirement
    MARGINAL = "marginal"              # At or above the undersized threshold
    NON_COMPLIANT = "non_compliant"    # Below the undersized threshold


class RecommendationKind(Enum):
    """Qualitative flags derived from utilisation and compliance."""
    OVER_DENSITY = "over_density"
    CREW_COMFORT_RISK = "crew_comfort_risk"
    UNDERSIZED_AREAS = "undersized_areas"
    COMFORTABLE_MARGIN = "comfortable_margin"


class RecommendationSeverity(Enum):
    """How a recommendation should be presented."""
    POSITIVE = "positive"
    ADVISORY = "advisory"
    WARNING = "warning"
