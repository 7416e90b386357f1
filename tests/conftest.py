# -*- coding: utf-8 -*-
"""
Shared fixtures for the damage survey tests.

Form values below are valid against the seeded sample catalog.
"""

from datetime import datetime

import pytest

from models import (
    Contact, EntryVariant, FloorEntry, Location, PropertyUnit, ResidentEntry, Submission,
)
from repositories.kv_store import SQLiteKeyValueStore
from repositories.seed import load_catalog
from repositories.submission_repository import SubmissionStore


LOCATION_VALUES = {
    "sector": "صور",
    "village": "البازورية",
    "neighborhood": "الحي الشرقي",
    "building_name": "بناية الأمل",
    "street": "شارع المدارس",
}

BUILDING_VALUES = {
    "property_number": "202",
    "section_number": "7",
    "in_building": False,
    "block": "",
    "building_count": "",
    "building_type": "residential",
    "total_floors": "3",
    "floor_number": "1",
    "section_type": "house",
    "direction": "north",
}

CONTACT_VALUES = {
    "full_name": "علي حسن فقيه",
    "mother_name": "زينب",
    "registry": "125",
    "phone": "70123456",
}

FLOOR_VALUES = {
    "floor_number": "2",
    "section_type": "house",
    "direction": "south",
    "registrant_name": "علي فقيه",
}

RESIDENT_VALUES = {
    "full_name": "محمد أحمد سلامة",
    "mother_name": "فاطمة",
    "registry": "880",
    "phone": "03123456",
    "floor": "1",
    "section_type": "house",
    "direction": "east",
}


@pytest.fixture
def catalog():
    """Seeded sample catalog."""
    return load_catalog()


@pytest.fixture
def kv_store(tmp_path):
    """SQLite key-value store in a temporary file."""
    store = SQLiteKeyValueStore(db_path=tmp_path / "test_survey.db")
    yield store
    store.close()


@pytest.fixture
def submission_store(kv_store):
    return SubmissionStore(kv_store)


@pytest.fixture
def form_values():
    """Valid flat form fields for steps 1, 2 and 3."""
    values = {}
    values.update(LOCATION_VALUES)
    values.update(BUILDING_VALUES)
    values.update(CONTACT_VALUES)
    return values


@pytest.fixture
def floor_values():
    return dict(FLOOR_VALUES)


@pytest.fixture
def resident_values():
    return dict(RESIDENT_VALUES)


@pytest.fixture
def make_submission():
    """Factory for valid submissions of each variant."""

    def _make(variant=EntryVariant.SINGLE, entry_count=2, timestamp=None):
        floors = ()
        residents = ()
        if variant is EntryVariant.MY_FLOORS:
            floors = tuple(
                FloorEntry(floor_number=n + 1, section_type="house", direction="south",
                           registrant_name=f"مسجل {n + 1}")
                for n in range(entry_count)
            )
        elif variant is EntryVariant.FULL_BUILDING:
            residents = tuple(
                ResidentEntry(full_name=f"ساكن رقم {n + 1}", mother_name="فاطمة",
                              registry=str(100 + n), phone="71123456", floor=n,
                              section_type="shop", direction="west")
                for n in range(entry_count)
            )

        if residents:
            first = residents[0]
            contact = Contact(first.full_name, first.mother_name, first.registry, first.phone)
        else:
            contact = Contact(**CONTACT_VALUES)

        return Submission(
            location=Location("صور", "البازورية", "202"),
            unit=PropertyUnit(
                neighborhood="الحي الشرقي",
                building_name="بناية الأمل",
                street="شارع المدارس",
                section_number="7",
                building_type="residential",
                total_floors=3,
                floor_number=1,
                section_type="house",
                direction="north",
            ),
            variant=variant,
            contact=contact,
            floors=floors,
            residents=residents,
            timestamp=timestamp or datetime(2024, 11, 30, 10, 15),
        )

    return _make
