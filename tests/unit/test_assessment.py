"""
tests/unit/test_assessment.py - Combined layout assessment tests

assess_layout never raises on bad input; problems come back in
LayoutAssessment.errors.
"""

import pytest


class TestAssessLayout:
    """Tests for assess_layout."""

    def test_dict_placements(self):
        """Test placement dictionaries are accepted."""
        from habitat.compliance import assess_layout

        assessment = assess_layout(
            [{"placement_id": "sleep-1", "area_type_id": "sleep", "area_m2": 15.0, "volume_m3": 40.0}],
            crew_size=4,
            habitat_volume=500.0,
            habitat_surface_area=200.0,
        )

        assert len(assessment.constraints) == 2
        assert len(assessment.error_constraints) == 2
        assert assessment.metrics is not None
        assert assessment.mission is not None
        assert assessment.errors == []
        assert not assessment.ok

    def test_geometry_object(self, cylinder, complete_placements):
        """Test habitat totals come from the geometry."""
        from habitat.compliance import assess_layout

        assessment = assess_layout(complete_placements, crew_size=2, geometry=cylinder)

        assert assessment.metrics.habitat_volume == pytest.approx(cylinder.volume())
        assert assessment.metrics.habitat_surface_area == pytest.approx(cylinder.surface_area())
        assert assessment.ok
        assert assessment.mission.passed

    def test_geometry_dict(self, complete_placements):
        """Test a geometry dictionary is accepted."""
        from habitat.compliance import assess_layout

        assessment = assess_layout(
            complete_placements,
            crew_size=2,
            geometry={"shape": "cuboid", "dimensions": {"width": 4, "height": 3, "depth": 5}},
        )

        assert assessment.metrics.habitat_volume == pytest.approx(60.0)

    def test_inputs_not_modified(self, sleep_placement):
        """Test placement objects are copied before use."""
        import copy
        from habitat.compliance import assess_layout

        placements = [sleep_placement]
        before = copy.deepcopy(placements)

        assess_layout(placements, crew_size=4, habitat_volume=100.0, habitat_surface_area=100.0)

        assert placements == before

    def test_unknown_type_is_warning(self):
        """Test unknown area types are reported once as warnings."""
        from habitat.compliance import assess_layout
        from habitat.errors import ErrorCode, ErrorSeverity
        from habitat.layout import AreaPlacement

        placements = [
            AreaPlacement("s", "storage", area_m2=10.0, volume_m3=30.0),
            AreaPlacement("x1", "holodeck", area_m2=5.0, volume_m3=5.0),
            AreaPlacement("x2", "holodeck", area_m2=5.0, volume_m3=5.0),
        ]
        assessment = assess_layout(placements, crew_size=1,
                                   habitat_volume=500.0, habitat_surface_area=200.0)

        assert assessment.unknown_area_types == ["holodeck"]
        assert len(assessment.errors) == 1
        assert assessment.errors[0].code == ErrorCode.CAT_UNKNOWN_AREA_TYPE
        assert assessment.errors[0].severity == ErrorSeverity.WARNING
        assert assessment.ok

    def test_invalid_crew_collected(self, sleep_placement):
        """Test invalid crew size is reported without raising."""
        from habitat.compliance import assess_layout

        assessment = assess_layout([sleep_placement], crew_size=0,
                                   habitat_volume=100.0, habitat_surface_area=100.0)

        assert assessment.constraints == []
        assert assessment.metrics is None
        assert assessment.mission is None
        assert assessment.errors[0].path == "crew_size"
        assert not assessment.ok

    def test_missing_placement_field(self):
        """Test a placement record without area is reported and dropped."""
        from habitat.compliance import assess_layout
        from habitat.errors import ErrorCode

        assessment = assess_layout(
            [{"area_type_id": "galley", "volume_m3": 10.0}],
            crew_size=2, habitat_volume=100.0, habitat_surface_area=100.0,
        )

        assert assessment.errors[0].code == ErrorCode.VAL_MISSING_FIELD
        assert assessment.errors[0].path == "placements[0].area_m2"
        assert assessment.metrics.total_area == 0.0

    def test_invalid_placement_values(self):
        """Test negative area is reported with the placement's errors."""
        from habitat.compliance import assess_layout

        assessment = assess_layout(
            [{"placement_id": "g", "area_type_id": "galley", "area_m2": -1.0, "volume_m3": 10.0}],
            crew_size=2, habitat_volume=100.0, habitat_surface_area=100.0,
        )

        assert len(assessment.errors) == 1
        assert "area_m2" in assessment.errors[0].path
        assert not assessment.ok

    def test_empty_catalog_not_replaced(self, sleep_placement):
        """Test an empty custom catalog reports every placement as unknown."""
        from habitat.catalog import FunctionalAreaCatalog
        from habitat.compliance import assess_layout

        assessment = assess_layout([sleep_placement], crew_size=4,
                                   habitat_volume=500.0, habitat_surface_area=200.0,
                                   catalog=FunctionalAreaCatalog([]))

        assert assessment.unknown_area_types == ["sleep"]
        assert assessment.constraints == []
        assert assessment.metrics.area_compliance == []

    def test_non_string_area_type(self):
        """Test a non-string area type is reported instead of raising."""
        from habitat.compliance import assess_layout_data

        assessment = assess_layout_data({
            "crew_size": 2,
            "habitat": {"volume": 100.0, "surface_area": 100.0},
            "placements": [{"area_type_id": {"x": 1}, "area_m2": 4.0, "volume_m3": 10.0}],
        })

        assert not assessment.ok
        assert assessment.errors[0].path.endswith("area_type_id")
        assert assessment.unknown_area_types == []

    def test_totals_and_footprint_without_volume(self):
        """Test a record with area and footprint but no volume uses the footprint."""
        from habitat.compliance import assess_layout

        assessment = assess_layout(
            [{"area_type_id": "sleep", "area_m2": 20.0, "width_m": 4.0, "length_m": 5.0}],
            crew_size=1, habitat_volume=500.0, habitat_surface_area=200.0, deck_height_m=2.0,
        )

        assert assessment.errors == []
        assert assessment.metrics.total_volume == pytest.approx(40.0)

    def test_missing_totals(self, sleep_placement):
        """Test metrics are skipped when habitat totals are missing."""
        from habitat.compliance import assess_layout

        assessment = assess_layout([sleep_placement], crew_size=4)

        assert assessment.metrics is None
        assert len(assessment.constraints) == 2
        assert assessment.mission is not None
        assert assessment.errors[0].path == "habitat"

    def test_unknown_shape(self, sleep_placement):
        """Test geometry errors are collected."""
        from habitat.compliance import assess_layout
        from habitat.errors import ErrorCode

        assessment = assess_layout([sleep_placement], crew_size=4, geometry={"shape": "torus"})

        assert assessment.metrics is None
        assert assessment.errors[0].code == ErrorCode.GEO_UNKNOWN_SHAPE

    def test_negative_totals(self, sleep_placement):
        """Test negative explicit totals are collected."""
        from habitat.compliance import assess_layout

        assessment = assess_layout([sleep_placement], crew_size=4,
                                   habitat_volume=-5.0, habitat_surface_area=10.0)

        assert assessment.metrics is None
        assert len(assessment.errors) == 1

    def test_to_dict(self, complete_placements, cylinder):
        """Test serialization."""
        from habitat.compliance import assess_layout

        data = assess_layout(complete_placements, crew_size=2, geometry=cylinder).to_dict()

        assert data["ok"] is True
        assert data["constraints"] == []
        assert data["metrics"]["crew_size"] == 2
        assert data["mission"]["passed"] is True
        assert data["errors"] == []


class TestAssessLayoutData:
    """Tests for layout documents."""

    def test_document_with_shape(self):
        """Test a document with shape and footprint placements."""
        from habitat.compliance import assess_layout_data

        assessment = assess_layout_data({
            "crew_size": 1,
            "habitat": {"shape": "cylinder", "dimensions": {"radius": 5, "height": 10}},
            "placements": [
                {"placement_id": "g", "area_type_id": "galley", "width_m": 2.0, "length_m": 2.0},
            ],
        })

        assert assessment.constraints == []
        assert assessment.metrics.total_area == pytest.approx(4.0)
        assert assessment.metrics.total_volume == pytest.approx(12.0)

    def test_document_with_totals(self):
        """Test a document giving explicit volume and surface area."""
        from habitat.compliance import assess_layout_data

        assessment = assess_layout_data({
            "crew_size": 4,
            "habitat": {"volume": 500.0, "surface_area": 200.0},
            "placements": [{"area_type_id": "sleep", "area_m2": 20.0, "volume_m3": 50.0}],
        })

        assert assessment.ok
        assert assessment.metrics.area_utilization_pct == pytest.approx(10.0)

    def test_deck_height(self):
        """Test deck height applies to footprint-only placements."""
        from habitat.compliance import assess_layout_data

        assessment = assess_layout_data({
            "crew_size": 1,
            "habitat": {"volume": 500.0, "surface_area": 200.0},
            "placements": [{"area_type_id": "galley", "width_m": 2.0, "length_m": 2.0}],
        }, deck_height_m=2.0)

        assert assessment.metrics.total_volume == pytest.approx(8.0)

    def test_empty_document(self):
        """Test an empty document reports missing crew size and habitat."""
        from habitat.compliance import assess_layout_data

        assessment = assess_layout_data({})

        paths = {e.path for e in assessment.errors}
        assert paths == {"habitat", "crew_size"}
        assert not assessment.ok
