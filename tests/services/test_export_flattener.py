# -*- coding: utf-8 -*-
"""
Tests for the export flattener.

Tests cover:
- Row expansion per variant
- Registration index numbering
- Uniform column set
- Empty input
"""

import pytest

from models.submission import EntryVariant
from services.exceptions import EmptyInput
from services.export import COLUMN_WIDTHS, EXPORT_COLUMNS, ExportFlattener, column_labels
from services.translation_manager import tr


@pytest.fixture
def flattener():
    """Create flattener instance."""
    return ExportFlattener()


class TestRowExpansion:
    """Test one row per submission or per sub-entry."""

    def test_single_and_my_floors(self, flattener, make_submission):
        """Test one single plus a two-floor submission yields three rows."""
        rows = flattener.flatten([
            make_submission(EntryVariant.SINGLE),
            make_submission(EntryVariant.MY_FLOORS, entry_count=2),
        ])

        assert len(rows) == 3
        assert [row["registration_index"] for row in rows] == ["1", "2.1", "2.2"]
        assert set(rows[0]) == set(rows[1]) == set(rows[2])

    def test_single_row_has_blank_entry_fields(self, flattener, make_submission):
        """Test a single submission leaves sub-entry columns empty."""
        row = flattener.flatten([make_submission(EntryVariant.SINGLE)])[0]

        assert row["entry_type"] == "single"
        assert row["entry_count"] == ""
        assert row["entry_floor_number"] == ""
        assert row["resident_full_name"] == ""

    def test_floor_rows_carry_floor_fields(self, flattener, make_submission):
        """Test floor rows copy the base record and add the floor values."""
        rows = flattener.flatten([make_submission(EntryVariant.MY_FLOORS, entry_count=2)])

        assert rows[0]["entry_type"] == "my floors"
        assert rows[0]["entry_count"] == "2"
        assert rows[1]["entry_floor_number"] == "2"
        assert rows[1]["entry_registrant_name"] == "مسجل 2"
        assert rows[1]["entry_direction"] == "south"
        assert rows[0]["street"] == rows[1]["street"] == "شارع المدارس"

    def test_resident_rows_use_first_resident_as_contact(self, flattener, make_submission):
        """Test full building rows carry resident fields and the primary contact."""
        rows = flattener.flatten([make_submission(EntryVariant.FULL_BUILDING, entry_count=3)])

        assert [row["registration_index"] for row in rows] == ["1.1", "1.2", "1.3"]
        assert all(row["entry_type"] == "full building" for row in rows)
        assert all(row["full_name"] == "ساكن رقم 1" for row in rows)
        assert rows[2]["resident_full_name"] == "ساكن رقم 3"
        assert rows[2]["resident_floor"] == "2"
        assert rows[2]["resident_section_type"] == "shop"

    def test_submission_order_is_preserved(self, flattener, make_submission):
        """Test rows follow the input order of submissions."""
        rows = flattener.flatten([
            make_submission(EntryVariant.FULL_BUILDING, entry_count=1),
            make_submission(EntryVariant.SINGLE),
        ])

        assert [row["registration_index"] for row in rows] == ["1.1", "2"]
        assert rows[1]["entry_type"] == "single"


class TestRowContent:
    """Test base-record values."""

    def test_every_value_is_text(self, flattener, make_submission):
        """Test rows hold strings only."""
        rows = flattener.flatten([make_submission(EntryVariant.MY_FLOORS)])
        assert all(isinstance(value, str) for row in rows for value in row.values())

    def test_columns_match_export_columns(self, flattener, make_submission):
        """Test every row has exactly the export columns, in order."""
        row = flattener.flatten([make_submission()])[0]
        assert list(row) == EXPORT_COLUMNS

    def test_in_building_as_yes_no(self, flattener, make_submission):
        """Test the in-building flag is exported as نعم/لا."""
        row = flattener.flatten([make_submission()])[0]
        assert row["in_building"] == tr("common.no")

    def test_registration_date_formatting(self, flattener, make_submission):
        """Test timestamps are formatted for display."""
        row = flattener.flatten([make_submission()])[0]
        assert row["registration_date"] == "30/11/2024 10:15"

    def test_location_and_contact(self, flattener, make_submission):
        """Test location and contact values are copied."""
        row = flattener.flatten([make_submission()])[0]

        assert row["sector"] == "صور"
        assert row["village"] == "البازورية"
        assert row["property_number"] == "202"
        assert row["phone"] == "70123456"
        assert row["total_floors"] == "3"


class TestEmptyInput:
    """Test empty input handling."""

    def test_flatten_empty_raises(self, flattener):
        """Test flattening nothing raises EmptyInput."""
        with pytest.raises(EmptyInput) as exc_info:
            flattener.flatten([])

        assert str(exc_info.value) == tr("export.empty")


class TestColumnMetadata:
    """Test header labels and widths."""

    def test_every_column_has_arabic_label(self):
        """Test each column maps to a translated header."""
        labels = column_labels()

        assert list(labels) == EXPORT_COLUMNS
        assert labels["registration_index"] == "رقم السجل"
        assert not any(label.startswith("column.") for label in labels.values())

    def test_widths_cover_every_column(self):
        """Test one width per column."""
        assert len(COLUMN_WIDTHS) == len(EXPORT_COLUMNS)
