# -*- coding: utf-8 -*-
"""
Location entity model and the sector/village/property catalog.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union


@dataclass(frozen=True)
class Location:
    """
    Cadastral location of a surveyed property.

    sector -> village -> property number, each level chosen from the
    catalog entries of the level above.
    """

    sector: str = ""
    village: str = ""
    property_number: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "sector": self.sector,
            "village": self.village,
            "property_number": self.property_number,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        """Create Location from dictionary."""
        return cls(
            sector=str(data["sector"]),
            village=str(data["village"]),
            property_number=str(data["property_number"]),
        )


class LocationCatalog:
    """
    Read-only catalog: sector -> {"villages": {village -> [property numbers]}}.

    Property numbers keep the order they are listed in.
    """

    def __init__(self, data: Dict[str, dict]):
        self._data: Dict[str, Dict[str, List[str]]] = {}
        for sector, sector_data in data.items():
            villages = sector_data.get("villages", {})
            self._data[str(sector)] = {
                str(village): [str(number) for number in numbers]
                for village, numbers in villages.items()
            }

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "LocationCatalog":
        """Load a catalog from a UTF-8 JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls(json.load(f))

    def sectors(self) -> List[str]:
        return list(self._data.keys())

    def villages(self, sector: str) -> List[str]:
        """Villages of a sector (empty for an unknown sector)."""
        return list(self._data.get(sector, {}).keys())

    def property_numbers(self, sector: str, village: str) -> List[str]:
        """Property numbers of a village (empty for an unknown sector/village)."""
        return list(self._data.get(sector, {}).get(village, []))

    def has_village(self, sector: str, village: str) -> bool:
        return village in self._data.get(sector, {})

    def has_property(self, sector: str, village: str, property_number: str) -> bool:
        return property_number in self._data.get(sector, {}).get(village, [])

    def contains(self, location: Location) -> bool:
        """Check the full sector/village/property chain."""
        return self.has_property(location.sector, location.village, location.property_number)

    def __contains__(self, sector: str) -> bool:
        return sector in self._data

    def __len__(self) -> int:
        return len(self._data)
