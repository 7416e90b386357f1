# -*- coding: utf-8 -*-
"""
Property Unit entity model.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BuildingType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    MIXED_USE = "mixed_use"
    INDUSTRIAL = "industrial"
    PUBLIC = "public"
    OTHER = "other"


class SectionType(str, Enum):
    HOUSE = "house"
    SHOP = "shop"
    WAREHOUSE = "warehouse"
    OFFICE = "office"
    CLINIC = "clinic"
    FACTORY = "factory"
    OTHER = "other"


class Direction(str, Enum):
    """The eight compass directions a section can face."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"


@dataclass(frozen=True)
class PropertyUnit:
    """
    Property Unit entity: the surveyed section and the building it is in.

    block and building_count are set only when the unit is inside a
    building complex (in_building).
    """

    neighborhood: str = ""
    building_name: str = ""
    street: str = ""
    section_number: str = ""
    building_type: BuildingType = BuildingType.RESIDENTIAL
    total_floors: int = 1
    floor_number: int = 0
    section_type: SectionType = SectionType.HOUSE
    direction: Direction = Direction.NORTH
    in_building: bool = False
    block: Optional[str] = None
    building_count: Optional[int] = None

    def __post_init__(self):
        """Coerce enum fields and check the numeric/block invariants."""
        object.__setattr__(self, "building_type", BuildingType(self.building_type))
        object.__setattr__(self, "section_type", SectionType(self.section_type))
        object.__setattr__(self, "direction", Direction(self.direction))

        if self.total_floors < 1:
            raise ValueError(f"total_floors must be positive: {self.total_floors}")
        if self.floor_number < 0:
            raise ValueError(f"floor_number must not be negative: {self.floor_number}")

        if self.in_building:
            if not self.block:
                raise ValueError("block is required for a unit in a building")
            if self.building_count is None or self.building_count < 1:
                raise ValueError("building_count must be positive for a unit in a building")
        elif self.block is not None or self.building_count is not None:
            raise ValueError("block/building_count are only allowed for a unit in a building")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "neighborhood": self.neighborhood,
            "building_name": self.building_name,
            "street": self.street,
            "section_number": self.section_number,
            "building_type": self.building_type.value,
            "total_floors": self.total_floors,
            "floor_number": self.floor_number,
            "section_type": self.section_type.value,
            "direction": self.direction.value,
            "in_building": self.in_building,
            "block": self.block,
            "building_count": self.building_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PropertyUnit":
        """Create PropertyUnit from dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
