"""
Habitat Layout Test Configuration and Fixtures
"""

import json

import pytest


@pytest.fixture
def catalog():
    """The built-in functional area catalog."""
    from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG
    return FUNCTIONAL_AREA_CATALOG


@pytest.fixture
def sleep_placement():
    """Sleep quarters sized just below the minimum for a crew of 4."""
    from habitat.layout.placement import AreaPlacement
    return AreaPlacement(
        placement_id="sleep-1",
        area_type_id="sleep",
        area_m2=15.0,
        volume_m3=40.0,
    )


@pytest.fixture
def cylinder():
    """Default cylindrical habitat (r=5m, h=10m)."""
    from habitat.geometry.habitat import HabitatGeometry
    return HabitatGeometry(shape="cylinder", dimensions={"radius": 5.0, "height": 10.0})


@pytest.fixture
def complete_placements():
    """A crew-of-2 layout containing every system mission checks look for."""
    from habitat.layout.placement import AreaPlacement
    return [
        AreaPlacement("eclss-1", "eclss", area_m2=4.0, volume_m3=16.0),
        AreaPlacement("medical-1", "medical", area_m2=4.0, volume_m3=16.0),
        AreaPlacement("comms-1", "communication", area_m2=3.0, volume_m3=12.0),
    ]


@pytest.fixture
def config():
    """Configuration built from defaults only, independent of the environment."""
    from habitat.bootstrap.config import HabitatConfig
    return HabitatConfig()


@pytest.fixture
def layout_file(tmp_path):
    """Write a layout document to a temp file and return its path."""
    def _write(document, name="layout.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return str(path)
    return _write
