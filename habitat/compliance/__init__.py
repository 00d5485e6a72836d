"""
Compliance Module

Quantitative utilisation and per-area compliance metrics, qualitative
recommendations, mission readiness checks, and the combined layout
assessment.
"""

from .enums import (
    ComplianceLevel,
    RecommendationKind,
    RecommendationSeverity,
)

from .engine import (
    RecommendationThresholds,
    DEFAULT_THRESHOLDS,
    AreaCompliance,
    Recommendation,
    ComplianceMetrics,
    ComplianceEngine,
    compute_metrics,
)

from .mission import (
    MissionCheck,
    MissionAssessment,
    assess_mission_readiness,
)

from .assessment import (
    LayoutAssessment,
    assess_layout,
    assess_layout_data,
)

__all__ = [
    # Enums
    "ComplianceLevel",
    "RecommendationKind",
    "RecommendationSeverity",
    # Engine
    "RecommendationThresholds",
    "DEFAULT_THRESHOLDS",
    "AreaCompliance",
    "Recommendation",
    "ComplianceMetrics",
    "ComplianceEngine",
    "compute_metrics",
    # Mission
    "MissionCheck",
    "MissionAssessment",
    "assess_mission_readiness",
    # Assessment
    "LayoutAssessment",
    "assess_layout",
    "assess_layout_data",
]
