# -*- coding: utf-8 -*-
"""
Submission entity model.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from .location import Location
from .unit import PropertyUnit
from .contact import Contact
from .entries import FloorEntry, ResidentEntry


class EntryVariant(str, Enum):
    """Shape of a submission, chosen once per form session."""
    SINGLE = "single"
    MY_FLOORS = "my_floors"
    FULL_BUILDING = "full_building"

    @property
    def label(self) -> str:
        """Export label: 'single', 'my floors' or 'full building'."""
        return self.value.replace("_", " ")

    @property
    def has_entries(self) -> bool:
        return self is not EntryVariant.SINGLE


@dataclass(frozen=True)
class Submission:
    """
    A completed survey submission.

    Created at final confirmation and never mutated afterwards. `key` is
    the storage key assigned by the submission store on save.

    Sub-entries keep the order they were authored in:
    - MY_FLOORS: at least one FloorEntry, no residents
    - FULL_BUILDING: at least one ResidentEntry, no floors
    - SINGLE: no sub-entries
    """

    location: Location
    unit: PropertyUnit
    variant: EntryVariant
    contact: Contact
    floors: Tuple[FloorEntry, ...] = ()
    residents: Tuple[ResidentEntry, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)
    key: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "variant", EntryVariant(self.variant))
        object.__setattr__(self, "floors", tuple(self.floors))
        object.__setattr__(self, "residents", tuple(self.residents))

        if self.variant is EntryVariant.MY_FLOORS:
            if not self.floors or self.residents:
                raise ValueError("my floors submission needs floors and no residents")
        elif self.variant is EntryVariant.FULL_BUILDING:
            if not self.residents or self.floors:
                raise ValueError("full building submission needs residents and no floors")
        elif self.floors or self.residents:
            raise ValueError("single submission cannot carry sub-entries")

    @property
    def primary_contact(self) -> Contact:
        return self.contact

    @property
    def entries(self) -> tuple:
        """Sub-entries of the active variant, in authoring order."""
        if self.variant is EntryVariant.MY_FLOORS:
            return self.floors
        if self.variant is EntryVariant.FULL_BUILDING:
            return self.residents
        return ()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (the key is not stored)."""
        return {
            "location": self.location.to_dict(),
            "unit": self.unit.to_dict(),
            "variant": self.variant.value,
            "contact": self.contact.to_dict(),
            "floors": [floor.to_dict() for floor in self.floors],
            "residents": [resident.to_dict() for resident in self.residents],
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict, key: Optional[str] = None) -> "Submission":
        """Create Submission from dictionary."""
        return cls(
            location=Location.from_dict(data["location"]),
            unit=PropertyUnit.from_dict(data["unit"]),
            variant=EntryVariant(data["variant"]),
            contact=Contact.from_dict(data["contact"]),
            floors=tuple(FloorEntry.from_dict(f) for f in data.get("floors", [])),
            residents=tuple(ResidentEntry.from_dict(r) for r in data.get("residents", [])),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            key=key,
        )
