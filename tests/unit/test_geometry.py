"""
tests/unit/test_geometry.py - Habitat geometry tests
"""

import math

import pytest


class TestHabitatShape:
    """Tests for HabitatShape enum."""

    def test_shape_values(self):
        """Test supported shapes."""
        from habitat.geometry import HabitatShape

        assert HabitatShape.SPHERE.value == "sphere"
        assert HabitatShape.CYLINDER.value == "cylinder"
        assert HabitatShape.CUBOID.value == "cuboid"


class TestHabitatGeometry:
    """Tests for HabitatGeometry."""

    def test_cylinder_totals(self, cylinder):
        """Test cylinder volume and surface area."""
        assert cylinder.volume() == pytest.approx(math.pi * 25 * 10)
        assert cylinder.surface_area() == pytest.approx(2 * math.pi * 25 + 2 * math.pi * 5 * 10)

    def test_sphere_totals(self):
        """Test sphere volume and surface area."""
        from habitat.geometry import HabitatGeometry

        sphere = HabitatGeometry("sphere", {"radius": 3.0})

        assert sphere.volume() == pytest.approx(4.0 / 3.0 * math.pi * 27)
        assert sphere.surface_area() == pytest.approx(4 * math.pi * 9)

    def test_cuboid_totals(self):
        """Test cuboid volume and surface area."""
        from habitat.geometry import HabitatGeometry

        box = HabitatGeometry("cuboid", {"width": 4.0, "height": 3.0, "depth": 5.0})

        assert box.volume() == pytest.approx(60.0)
        assert box.surface_area() == pytest.approx(2 * (12 + 20 + 15))

    def test_default_dimensions(self):
        """Test missing dimensions fall back to defaults."""
        from habitat.geometry import HabitatGeometry

        cylinder = HabitatGeometry("cylinder")

        assert cylinder.dimension("radius") == 5.0
        assert cylinder.dimension("height") == 10.0

    def test_shape_from_string(self):
        """Test string shape is coerced to the enum."""
        from habitat.geometry import HabitatGeometry, HabitatShape

        assert HabitatGeometry("sphere").shape == HabitatShape.SPHERE

    def test_unknown_shape(self):
        """Test unknown shape raises HabitatInputError."""
        from habitat.geometry import HabitatGeometry
        from habitat.errors import ErrorCode, HabitatInputError

        with pytest.raises(HabitatInputError) as exc_info:
            HabitatGeometry("torus")

        assert exc_info.value.errors[0].code == ErrorCode.GEO_UNKNOWN_SHAPE

    def test_non_positive_dimension(self):
        """Test zero radius is rejected."""
        from habitat.geometry import HabitatGeometry
        from habitat.errors import HabitatInputError

        with pytest.raises(HabitatInputError):
            HabitatGeometry("sphere", {"radius": 0.0})

    def test_irrelevant_dimension_ignored(self):
        """Test dimensions the shape does not read are not checked."""
        from habitat.geometry import HabitatGeometry

        sphere = HabitatGeometry("sphere", {"radius": 2.0, "width": -1.0})
        assert sphere.volume() > 0

    def test_footprint(self, cylinder):
        """Test footprint extent for round and box hulls."""
        from habitat.geometry import HabitatGeometry

        assert cylinder.footprint_dimensions() == (10.0, 10.0)

        box = HabitatGeometry("cuboid", {"width": 6.0, "depth": 4.0})
        assert box.footprint_dimensions() == (6.0, 4.0)
        assert box.footprint_area() == pytest.approx(24.0)

    def test_serialization(self, cylinder):
        """Test to_dict and from_dict."""
        from habitat.geometry import HabitatGeometry

        data = cylinder.to_dict()
        restored = HabitatGeometry.from_dict(data)

        assert data["shape"] == "cylinder"
        assert data["volume_m3"] == pytest.approx(cylinder.volume())
        assert restored.shape == cylinder.shape
        assert restored.dimensions == cylinder.dimensions
