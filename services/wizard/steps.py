# -*- coding: utf-8 -*-
"""
Step identifiers of the damage survey form.

Flow per entry variant:
- Single:        1 -> 2 -> 3 -> 4
- My floors:     1 -> 2 -> 2a -> 3 -> 4
- Full building: 1 -> 2 -> 2b -> 4
"""

from enum import Enum
from typing import List

from models.submission import EntryVariant


class StepId(str, Enum):
    LOCATION = "1"
    BUILDING = "2"
    MY_FLOORS = "2a"
    FULL_BUILDING = "2b"
    CONTACT = "3"
    REVIEW = "4"
    SUBMITTED = "submitted"

    @property
    def number(self) -> int:
        """Main step number shown in progress (sub-steps count as step 2)."""
        return _STEP_NUMBERS[self]

    @property
    def title_key(self) -> str:
        return _STEP_TITLE_KEYS[self]

    @property
    def is_entry_step(self) -> bool:
        return self in (StepId.MY_FLOORS, StepId.FULL_BUILDING)


_STEP_NUMBERS = {
    StepId.LOCATION: 1,
    StepId.BUILDING: 2,
    StepId.MY_FLOORS: 2,
    StepId.FULL_BUILDING: 2,
    StepId.CONTACT: 3,
    StepId.REVIEW: 4,
    StepId.SUBMITTED: 4,
}

_STEP_TITLE_KEYS = {
    StepId.LOCATION: "step.location",
    StepId.BUILDING: "step.building",
    StepId.MY_FLOORS: "step.my_floors",
    StepId.FULL_BUILDING: "step.full_building",
    StepId.CONTACT: "step.contact",
    StepId.REVIEW: "step.review",
    StepId.SUBMITTED: "step.submitted",
}


def step_path(variant: EntryVariant) -> List[StepId]:
    """Data-entry steps visited before review for a variant, in order."""
    if variant is EntryVariant.MY_FLOORS:
        return [StepId.LOCATION, StepId.BUILDING, StepId.MY_FLOORS, StepId.CONTACT]
    if variant is EntryVariant.FULL_BUILDING:
        return [StepId.LOCATION, StepId.BUILDING, StepId.FULL_BUILDING]
    return [StepId.LOCATION, StepId.BUILDING, StepId.CONTACT]
