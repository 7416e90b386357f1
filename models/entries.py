# -*- coding: utf-8 -*-
"""
Repeatable sub-entry models: floors (my floors) and residents (full building).
"""

from dataclasses import dataclass
from typing import ClassVar, Tuple

from .unit import SectionType, Direction


@dataclass(frozen=True)
class FloorEntry:
    """A floor registered by the same submitter."""

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "floor_number", "section_type", "direction", "registrant_name",
    )

    floor_number: int = 0
    section_type: SectionType = SectionType.HOUSE
    direction: Direction = Direction.NORTH
    registrant_name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "section_type", SectionType(self.section_type))
        object.__setattr__(self, "direction", Direction(self.direction))
        if self.floor_number < 0:
            raise ValueError(f"floor_number must not be negative: {self.floor_number}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "floor_number": self.floor_number,
            "section_type": self.section_type.value,
            "direction": self.direction.value,
            "registrant_name": self.registrant_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FloorEntry":
        """Create FloorEntry from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass(frozen=True)
class ResidentEntry:
    """A resident of a building registered in full-building mode."""

    FIELDS: ClassVar[Tuple[str, ...]] = (
        "full_name", "mother_name", "registry", "phone",
        "floor", "section_type", "direction",
    )

    full_name: str = ""
    mother_name: str = ""
    registry: str = ""
    phone: str = ""
    floor: int = 0
    section_type: SectionType = SectionType.HOUSE
    direction: Direction = Direction.NORTH

    def __post_init__(self):
        object.__setattr__(self, "section_type", SectionType(self.section_type))
        object.__setattr__(self, "direction", Direction(self.direction))
        if self.floor < 0:
            raise ValueError(f"floor must not be negative: {self.floor}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "full_name": self.full_name,
            "mother_name": self.mother_name,
            "registry": self.registry,
            "phone": self.phone,
            "floor": self.floor,
            "section_type": self.section_type.value,
            "direction": self.direction.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ResidentEntry":
        """Create ResidentEntry from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
