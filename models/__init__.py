# -*- coding: utf-8 -*-
"""
Damage Survey Data Models
"""

from .location import Location, LocationCatalog
from .unit import PropertyUnit, BuildingType, SectionType, Direction
from .contact import Contact
from .entries import FloorEntry, ResidentEntry
from .submission import EntryVariant, Submission

__all__ = [
    "Location",
    "LocationCatalog",
    "PropertyUnit",
    "BuildingType",
    "SectionType",
    "Direction",
    "Contact",
    "FloorEntry",
    "ResidentEntry",
    "EntryVariant",
    "Submission",
]
