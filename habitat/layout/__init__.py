"""
habitat/layout - Area placements and layout validation.

Provides:
- Area placements in absolute units, with optional footprint
- Percent-of-footprint conversion
- Constraint records and the rule interfaces
- Built-in sizing and arrangement rules
- The layout validator
"""

from habitat.layout.placement import (
    AreaPlacement,
    generate_placement_id,
    placement_from_footprint,
)

from habitat.layout.constraints import (
    ConstraintKind,
    ConstraintSeverity,
    LayoutConstraint,
    PlacementRule,
    LayoutRule,
)

from habitat.layout.rules import (
    MinimumAreaRule,
    MinimumVolumeRule,
    AdjacencyRule,
    NoiseSeparationRule,
    PrivacyRule,
    DEFAULT_PLACEMENT_RULES,
    EXTENDED_LAYOUT_RULES,
    build_layout_rules,
)

from habitat.layout.validator import (
    LayoutValidator,
    validate_layout,
)

__all__ = [
    # Placement
    'AreaPlacement',
    'generate_placement_id',
    'placement_from_footprint',
    # Constraints
    'ConstraintKind',
    'ConstraintSeverity',
    'LayoutConstraint',
    'PlacementRule',
    'LayoutRule',
    # Rules
    'MinimumAreaRule',
    'MinimumVolumeRule',
    'AdjacencyRule',
    'NoiseSeparationRule',
    'PrivacyRule',
    'DEFAULT_PLACEMENT_RULES',
    'EXTENDED_LAYOUT_RULES',
    'build_layout_rules',
    # Validator
    'LayoutValidator',
    'validate_layout',
]
