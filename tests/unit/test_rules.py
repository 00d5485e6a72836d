"""
tests/unit/test_rules.py - Arrangement rule tests
"""

import pytest


def _place(area_type_id, x_m, placement_id=None, y_m=0.0, size=2.0):
    from habitat.layout import AreaPlacement
    return AreaPlacement.create(
        area_type_id, size, size, x_m=x_m, y_m=y_m,
        placement_id=placement_id or f"{area_type_id}-1",
    )


class TestAdjacencyRule:
    """Tests for AdjacencyRule."""

    def test_avoided_neighbour_warns(self, catalog):
        """Test sleep next to galley yields a warning on the first-listed placement."""
        from habitat.layout import AdjacencyRule, ConstraintKind, ConstraintSeverity

        placements = [_place("sleep", 0.0), _place("galley", 2.5)]
        constraints = AdjacencyRule().check(placements, catalog, crew_size=4)

        assert len(constraints) == 1
        warning = constraints[0]
        assert warning.kind == ConstraintKind.ADJACENCY
        assert warning.severity == ConstraintSeverity.WARNING
        assert warning.area_placement_id == "sleep-1"
        assert warning.related_placement_id == "galley-1"
        assert warning.message == "Sleep Quarters should not be adjacent to Food Preparation & Dining"

    def test_distant_pair_not_adjacent(self, catalog):
        """Test pairs beyond the adjacency distance are not flagged."""
        from habitat.layout import AdjacencyRule

        placements = [_place("sleep", 0.0), _place("galley", 3.5)]
        assert AdjacencyRule().check(placements, catalog, crew_size=4) == []

    def test_adjacency_distance_configurable(self, catalog):
        """Test a wider adjacency distance catches the pair."""
        from habitat.layout import AdjacencyRule

        placements = [_place("sleep", 0.0), _place("galley", 3.5)]
        assert len(AdjacencyRule(adjacency_distance_m=2.0).check(placements, catalog, 4)) == 1

    def test_preferred_neighbour_info(self, catalog):
        """Test present-but-distant preferred neighbours yield info."""
        from habitat.layout import AdjacencyRule, ConstraintSeverity

        placements = [_place("hygiene", 0.0), _place("sleep", 10.0)]
        constraints = AdjacencyRule().check(placements, catalog, crew_size=4)

        assert [c.severity for c in constraints] == [ConstraintSeverity.INFO] * 2
        assert constraints[0].message == (
            "Hygiene & Personal Care would be better placed next to Sleep Quarters"
        )
        assert constraints[1].message == (
            "Sleep Quarters would be better placed next to Hygiene & Personal Care"
        )

    def test_preferred_neighbour_satisfied(self, catalog):
        """Test adjacent preferred neighbours yield nothing."""
        from habitat.layout import AdjacencyRule

        placements = [_place("hygiene", 0.0), _place("sleep", 2.0)]
        assert AdjacencyRule().check(placements, catalog, crew_size=4) == []

    def test_placements_without_footprint_ignored(self, catalog, sleep_placement):
        """Test placements with no footprint are skipped."""
        from habitat.layout import AdjacencyRule

        placements = [sleep_placement, _place("galley", 0.0)]
        assert AdjacencyRule().check(placements, catalog, crew_size=4) == []

    def test_unknown_type_ignored(self, catalog):
        """Test placements with unknown type are skipped."""
        from habitat.layout import AdjacencyRule

        placements = [_place("holodeck", 0.0), _place("sleep", 2.0)]
        assert AdjacencyRule().check(placements, catalog, crew_size=4) == []


class TestNoiseSeparationRule:
    """Tests for NoiseSeparationRule."""

    def test_loud_next_to_quiet(self, catalog):
        """Test exercise next to sleep yields a noise warning."""
        from habitat.layout import ConstraintKind, NoiseSeparationRule

        placements = [_place("exercise", 0.0), _place("sleep", 2.0)]
        constraints = NoiseSeparationRule().check(placements, catalog, crew_size=4)

        assert len(constraints) == 1
        assert constraints[0].kind == ConstraintKind.NOISE
        assert constraints[0].message == (
            "Loud area Exercise & Recreation is adjacent to quiet area Sleep Quarters"
        )

    def test_moderate_pairs_allowed(self, catalog):
        """Test moderate next to quiet is fine."""
        from habitat.layout import NoiseSeparationRule

        placements = [_place("galley", 0.0), _place("sleep", 2.0)]
        assert NoiseSeparationRule().check(placements, catalog, crew_size=4) == []


class TestPrivacyRule:
    """Tests for PrivacyRule."""

    def test_private_next_to_public(self, catalog):
        """Test sleep next to storage yields privacy info."""
        from habitat.layout import ConstraintSeverity, PrivacyRule

        placements = [_place("storage", 0.0), _place("sleep", 2.0)]
        constraints = PrivacyRule().check(placements, catalog, crew_size=4)

        assert len(constraints) == 1
        assert constraints[0].severity == ConstraintSeverity.INFO
        assert constraints[0].area_placement_id == "storage-1"
        assert "Private area Sleep Quarters" in constraints[0].message


class TestRuleSets:
    """Tests for rule set construction."""

    def test_build_layout_rules(self):
        """Test built rule set shares one adjacency distance."""
        from habitat.layout import build_layout_rules

        rules = build_layout_rules(2.5)

        assert [r.rule_id for r in rules] == ["adjacency", "noise_separation", "privacy"]
        assert all(r.adjacency_distance_m == 2.5 for r in rules)

    def test_extended_rules_default_distance(self):
        """Test extended rules use the default 1m adjacency distance."""
        from habitat.layout import EXTENDED_LAYOUT_RULES

        assert all(r.adjacency_distance_m == pytest.approx(1.0) for r in EXTENDED_LAYOUT_RULES)
