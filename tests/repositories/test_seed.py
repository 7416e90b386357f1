# -*- coding: utf-8 -*-
"""
Tests for the location catalog and its seed data.
"""

import json

from models.location import Location
from repositories.seed import SOUTH_LEBANON_CATALOG, load_catalog


class TestSampleCatalog:
    """Test the seeded sample catalog."""

    def test_sectors(self, catalog):
        """Test the sample catalog lists its sectors in order."""
        assert catalog.sectors() == list(SOUTH_LEBANON_CATALOG)
        assert "صور" in catalog

    def test_cascading_lookups(self, catalog):
        """Test villages and property numbers per parent selection."""
        assert catalog.villages("صور")[:2] == ["صور", "البازورية"]
        assert catalog.property_numbers("صور", "البازورية") == ["201", "202", "203"]

    def test_unknown_parents_are_empty(self, catalog):
        """Test lookups under unknown parents return nothing."""
        assert catalog.villages("بيروت") == []
        assert catalog.property_numbers("صور", "الخيام") == []

    def test_contains_checks_full_chain(self, catalog):
        """Test a location must match sector, village and property number."""
        assert catalog.contains(Location("صور", "البازورية", "202")) is True
        assert catalog.contains(Location("مرجعيون", "البازورية", "202")) is False
        assert catalog.contains(Location("صور", "البازورية", "101")) is False


class TestCatalogFile:
    """Test loading a catalog from JSON."""

    def test_load_from_json(self, tmp_path):
        """Test a catalog file replaces the sample catalog."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({
            "جزين": {"villages": {"جزين": [1, 2]}}
        }, ensure_ascii=False), encoding="utf-8")

        catalog = load_catalog(path)

        assert catalog.sectors() == ["جزين"]
        assert catalog.property_numbers("جزين", "جزين") == ["1", "2"]
        assert len(catalog) == 1
