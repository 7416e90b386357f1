# -*- coding: utf-8 -*-
"""
Contact entity model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """Person registering the property (or the primary registrant of a building)."""

    full_name: str = ""
    mother_name: str = ""
    registry: str = ""
    phone: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "full_name": self.full_name,
            "mother_name": self.mother_name,
            "registry": self.registry,
            "phone": self.phone,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Contact":
        """Create Contact from dictionary."""
        return cls(**{k: str(v) for k, v in data.items() if k in cls.__dataclass_fields__})
