"""
tests/unit/test_catalog.py - Functional area catalog tests

Tests for:
- Built-in catalog contents
- Lookup and query operations
- Integrity checks on construction
- JSON catalog loading
"""

import json

import pytest


# =============================================================================
# BUILT-IN CATALOG
# =============================================================================

class TestBuiltInCatalog:
    """Tests for FUNCTIONAL_AREA_CATALOG."""

    def test_catalog_size(self, catalog):
        """Test built-in catalog has 14 area types."""
        assert len(catalog) == 14

    def test_sleep_minimums(self, catalog):
        """Test sleep quarters minimums."""
        sleep = catalog.lookup("sleep")

        assert sleep.name == "Sleep Quarters"
        assert sleep.min_area_per_person == 4.0
        assert sleep.min_volume_per_person == 12.0

    def test_declaration_order(self, catalog):
        """Test iteration follows declaration order."""
        ids = catalog.ids()
        assert ids[0] == "eclss"
        assert ids[-1] == "food_storage"
        assert [t.id for t in catalog] == ids

    def test_all_minimums_positive(self, catalog):
        """Test every entry has positive minimums."""
        for area_type in catalog:
            assert area_type.min_area_per_person > 0
            assert area_type.min_volume_per_person > 0

    def test_unique_ids(self, catalog):
        """Test ids are unique."""
        ids = catalog.ids()
        assert len(ids) == len(set(ids))

    def test_entries_are_frozen(self, catalog):
        """Test catalog entries cannot be modified."""
        import dataclasses

        sleep = catalog.get("sleep")
        with pytest.raises(dataclasses.FrozenInstanceError):
            sleep.min_area_per_person = 1.0

    def test_adjacency_sets(self, catalog):
        """Test adjacency preferences."""
        sleep = catalog.get("sleep")

        assert sleep.prefers("hygiene")
        assert sleep.avoids("galley")
        assert not sleep.avoids("hygiene")
        assert isinstance(sleep.adjacency.avoided, frozenset)


# =============================================================================
# QUERIES
# =============================================================================

class TestCatalogQueries:
    """Tests for catalog lookup operations."""

    def test_lookup_unknown_returns_none(self, catalog):
        """Test lookup of unknown id returns None."""
        assert catalog.lookup("warp_core") is None

    def test_module_lookup(self):
        """Test module-level lookup uses the built-in catalog."""
        from habitat.catalog import lookup

        assert lookup("galley").name == "Food Preparation & Dining"
        assert lookup("nope") is None

    def test_get_unknown_raises(self, catalog):
        """Test get of unknown id raises KeyError."""
        with pytest.raises(KeyError):
            catalog.get("warp_core")

    def test_contains(self, catalog):
        """Test membership."""
        assert "medical" in catalog
        assert "warp_core" not in catalog

    def test_contains_non_string(self, catalog):
        """Test membership of unhashable or non-string keys is False."""
        assert {"x": 1} not in catalog
        assert 7 not in catalog

    def test_by_category(self, catalog):
        """Test filtering by category."""
        from habitat.catalog.enums import AreaCategory

        life_support = catalog.by_category(AreaCategory.LIFE_SUPPORT)
        assert [t.id for t in life_support] == ["eclss", "waste_management"]

    def test_by_priority(self, catalog):
        """Test filtering by priority."""
        from habitat.catalog.enums import AreaPriority

        medium = catalog.by_priority(AreaPriority.MEDIUM)
        assert [t.id for t in medium] == ["storage"]

    def test_required_scales_with_crew(self, catalog):
        """Test required area/volume are per-person minimum x crew."""
        galley = catalog.get("galley")

        assert galley.required_area(6) == pytest.approx(12.0)
        assert galley.required_volume(6) == pytest.approx(48.0)

    def test_to_list(self, catalog):
        """Test serialization of the whole catalog."""
        records = catalog.to_list()

        assert len(records) == 14
        assert records[0]["id"] == "eclss"
        assert records[0]["category"] == "life_support"


# =============================================================================
# INTEGRITY
# =============================================================================

def _record(area_id, **overrides):
    record = {
        "id": area_id,
        "name": area_id.title(),
        "category": "crew_support",
        "min_area_per_person": 1.0,
        "min_volume_per_person": 2.0,
        "priority": "high",
        "noise_level": "quiet",
        "privacy": "public",
    }
    record.update(overrides)
    return record


class TestCatalogIntegrity:
    """Tests for catalog construction checks."""

    def test_from_records(self):
        """Test building a catalog from plain records."""
        from habitat.catalog.library import FunctionalAreaCatalog

        catalog = FunctionalAreaCatalog.from_records([
            _record("bunk", adjacency={"preferred": ["head"]}),
            _record("head"),
        ])

        assert len(catalog) == 2
        assert catalog.get("bunk").prefers("head")

    def test_duplicate_ids_rejected(self):
        """Test duplicate ids raise CatalogError."""
        from habitat.catalog.library import FunctionalAreaCatalog
        from habitat.errors import CatalogError, ErrorCode

        with pytest.raises(CatalogError) as exc_info:
            FunctionalAreaCatalog.from_records([_record("bunk"), _record("bunk")])

        assert exc_info.value.errors[0].code == ErrorCode.CAT_DUPLICATE_ID

    def test_non_positive_minimum_rejected(self):
        """Test zero minimum is rejected by the record schema."""
        from habitat.catalog.library import FunctionalAreaCatalog
        from habitat.errors import CatalogError

        with pytest.raises(CatalogError):
            FunctionalAreaCatalog.from_records([_record("bunk", min_area_per_person=0)])

    def test_dangling_adjacency_rejected(self):
        """Test adjacency to an unknown id is rejected."""
        from habitat.catalog.library import FunctionalAreaCatalog
        from habitat.errors import CatalogError

        with pytest.raises(CatalogError):
            FunctionalAreaCatalog.from_records([
                _record("bunk", adjacency={"avoided": ["reactor"]}),
            ])

    def test_unknown_enum_rejected(self):
        """Test invalid category is rejected."""
        from habitat.catalog.library import FunctionalAreaCatalog
        from habitat.errors import CatalogError

        with pytest.raises(CatalogError):
            FunctionalAreaCatalog.from_records([_record("bunk", category="lounge")])


class TestLoadCatalog:
    """Tests for load_catalog."""

    def test_load_list(self, tmp_path):
        """Test loading a JSON array."""
        from habitat.catalog.library import load_catalog

        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([_record("bunk"), _record("head")]))

        catalog = load_catalog(path)
        assert catalog.ids() == ["bunk", "head"]

    def test_load_areas_object(self, tmp_path):
        """Test loading an object with an areas array."""
        from habitat.catalog.library import load_catalog

        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"areas": [_record("bunk")]}))

        assert "bunk" in load_catalog(str(path))

    def test_missing_file(self, tmp_path):
        """Test missing file raises CatalogError."""
        from habitat.catalog.library import load_catalog
        from habitat.errors import CatalogError

        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.json")

    @pytest.mark.parametrize("document", [42, "sleep", {"areas": {"id": "bunk"}}])
    def test_not_an_array(self, tmp_path, document):
        """Test a file without an array of records raises CatalogError."""
        from habitat.catalog.library import load_catalog
        from habitat.errors import CatalogError

        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(document))

        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_not_utf8(self, tmp_path):
        """Test undecodable bytes raise CatalogError."""
        from habitat.catalog.library import load_catalog
        from habitat.errors import CatalogError

        path = tmp_path / "catalog.json"
        path.write_bytes(b'[{"id": \xff\xfe}]')

        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_round_trip_builtin(self, tmp_path, catalog):
        """Test the built-in catalog survives a save/load cycle."""
        from habitat.catalog.library import load_catalog

        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(catalog.to_list()))

        loaded = load_catalog(path)
        assert loaded.ids() == catalog.ids()
        assert loaded.get("sleep") == catalog.get("sleep")
