# -*- coding: utf-8 -*-
"""
Survey Session - state and data of one damage survey form session.

Holds:
- Flat field values (location, building, contact)
- The navigation FlowState
- Floor and resident entry collections
- Draft auto-save and restore

On confirmation at the review step it builds the Submission and hands it
to the submission store.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from models.contact import Contact
from models.entries import FloorEntry, ResidentEntry
from models.location import Location, LocationCatalog
from models.submission import EntryVariant, Submission
from models.unit import PropertyUnit
from repositories.seed import load_catalog
from repositories.submission_repository import SubmissionStore
from services.display_mappings import (
    get_building_type_display, get_section_type_display,
    get_direction_display, get_variant_display, get_yes_no_display,
)
from services.exceptions import InvalidTransition, ValidationException
from services.translation_manager import tr
from utils.helpers import as_text, parse_int
from utils.logger import get_logger
from .entry_collection import EntryCollectionManager, EntryKind
from .step_flow import FlowState, NavigationResult, Progress, StepFlowController
from .step_validator import StepValidator, ValidationResult, clean_phone
from .steps import StepId

logger = get_logger(__name__)

LOCATION_FIELDS = ("sector", "village", "neighborhood", "building_name", "street")
BUILDING_FIELDS = (
    "property_number", "section_number", "in_building", "block", "building_count",
    "building_type", "total_floors", "floor_number", "section_type", "direction",
)
CONTACT_FIELDS = ("full_name", "mother_name", "registry", "phone")
FORM_FIELDS = LOCATION_FIELDS + BUILDING_FIELDS + CONTACT_FIELDS

# Selecting a value clears the fields that depend on it
_DEPENDENT_FIELDS = {
    "sector": ("village", "property_number"),
    "village": ("property_number",),
}


class SurveySession:
    """One pass through the survey form, from step 1 to submission."""

    def __init__(
        self,
        store: SubmissionStore,
        catalog: Optional[LocationCatalog] = None,
        controller: Optional[StepFlowController] = None,
        autosave: bool = True
    ):
        """
        Args:
            store: Submission and draft storage
            catalog: Location catalog (seeded sample catalog by default)
            controller: Flow controller (built around a catalog-aware validator by default)
            autosave: Save the draft after every change
        """
        self.store = store
        self.catalog = catalog if catalog is not None else load_catalog()
        self.controller = controller or StepFlowController(StepValidator(self.catalog))
        self.autosave = autosave

        self.state: FlowState = self.controller.initial_state()
        self.fields: Dict[str, Any] = self._blank_fields()
        self.floors = EntryCollectionManager(EntryKind.FLOOR)
        self.residents = EntryCollectionManager(EntryKind.RESIDENT)
        self.last_validation = ValidationResult()

    @staticmethod
    def _blank_fields() -> Dict[str, Any]:
        fields: Dict[str, Any] = {name: "" for name in FORM_FIELDS}
        fields["in_building"] = False
        return fields

    @property
    def step(self) -> StepId:
        return self.state.step

    @property
    def variant(self) -> EntryVariant:
        return self.state.variant

    # =========================================================================
    # Field editing
    # =========================================================================

    def set_field(self, field_id: str, value: Any):
        """
        Set a flat form field.

        Changing sector clears village and property number; changing
        village clears property number; switching in_building off clears
        block and building count.
        """
        if field_id not in self.fields:
            raise ValueError(f"Unknown form field: {field_id}")

        if field_id == "in_building":
            value = bool(value)
            if not value:
                self.fields["block"] = ""
                self.fields["building_count"] = ""

        if field_id in _DEPENDENT_FIELDS and value != self.fields[field_id]:
            for dependent in _DEPENDENT_FIELDS[field_id]:
                self.fields[dependent] = ""

        self.fields[field_id] = value
        self._autosave()

    def get_field(self, field_id: str) -> Any:
        return self.fields[field_id]

    def village_options(self) -> List[str]:
        """Villages of the selected sector."""
        return self.catalog.villages(as_text(self.fields["sector"]))

    def property_number_options(self) -> List[str]:
        """Property numbers of the selected village."""
        return self.catalog.property_numbers(
            as_text(self.fields["sector"]), as_text(self.fields["village"])
        )

    def select_variant(self, variant: EntryVariant):
        self.state = self.controller.select_variant(self.state, variant)
        self._autosave()

    # =========================================================================
    # Entries
    # =========================================================================

    def entries(self, kind: EntryKind) -> EntryCollectionManager:
        return self.floors if EntryKind(kind) is EntryKind.FLOOR else self.residents

    def add_entry(self, kind: EntryKind, values: Optional[Dict[str, Any]] = None) -> int:
        handle = self.entries(kind).add(values)
        self._autosave()
        return handle

    def remove_entry(self, kind: EntryKind, handle: int) -> bool:
        removed = self.entries(kind).remove(handle)
        if removed:
            self._autosave()
        return removed

    def update_entry(self, kind: EntryKind, handle: int, field_id: str, value: Any):
        self.entries(kind).update(handle, field_id, value)
        self._autosave()

    # =========================================================================
    # Navigation
    # =========================================================================

    def snapshot(self) -> Dict[str, Any]:
        """Current form values as validated by the step validator."""
        data = dict(self.fields)
        data["variant"] = self.state.variant.value
        data["floors"] = self.floors.records()
        data["residents"] = self.residents.records()
        return data

    def next_step(self) -> NavigationResult:
        result = self.controller.next_step(self.state, self.snapshot())
        self.state = result.state
        self.last_validation = result.validation
        if result.moved:
            self._autosave()
        return result

    def previous_step(self) -> NavigationResult:
        result = self.controller.previous_step(self.state)
        self.state = result.state
        self.last_validation = ValidationResult()
        return result

    def progress(self) -> Progress:
        return self.controller.progress(self.state)

    # =========================================================================
    # Review
    # =========================================================================

    def review_summary(self) -> Dict[str, Any]:
        """Human-readable values for the review step."""
        f = self.fields
        in_building = bool(f["in_building"])

        building = {
            "property_number": as_text(f["property_number"]),
            "section_number": as_text(f["section_number"]),
            "in_building": get_yes_no_display(in_building),
        }
        if in_building:
            building["block"] = as_text(f["block"])
            building["building_count"] = as_text(f["building_count"])
        building.update({
            "building_type": get_building_type_display(as_text(f["building_type"])),
            "total_floors": as_text(f["total_floors"]),
            "floor_number": as_text(f["floor_number"]),
            "section_type": get_section_type_display(as_text(f["section_type"])),
            "direction": get_direction_display(as_text(f["direction"])),
        })

        summary: Dict[str, Any] = {
            "location": {name: as_text(f[name]) for name in LOCATION_FIELDS},
            "building": building,
            "variant": get_variant_display(self.variant),
            "contact": None,
            "floors": [],
            "residents": [],
        }

        if self.variant is not EntryVariant.FULL_BUILDING:
            summary["contact"] = {name: as_text(f[name]) for name in CONTACT_FIELDS}

        if self.variant is EntryVariant.MY_FLOORS:
            for handle in self.floors.handles():
                values = self.floors.get(handle)
                summary["floors"].append({
                    "title": self.floors.display_title(handle),
                    "floor_number": as_text(values["floor_number"]),
                    "section_type": get_section_type_display(as_text(values["section_type"])),
                    "direction": get_direction_display(as_text(values["direction"])),
                    "registrant_name": as_text(values["registrant_name"]),
                })
        elif self.variant is EntryVariant.FULL_BUILDING:
            for handle in self.residents.handles():
                values = self.residents.get(handle)
                summary["residents"].append({
                    "title": self.residents.display_title(handle),
                    "full_name": as_text(values["full_name"]),
                    "mother_name": as_text(values["mother_name"]),
                    "registry": as_text(values["registry"]),
                    "phone": as_text(values["phone"]),
                    "floor": as_text(values["floor"]),
                    "section_type": get_section_type_display(as_text(values["section_type"])),
                    "direction": get_direction_display(as_text(values["direction"])),
                })

        return summary

    # =========================================================================
    # Submission
    # =========================================================================

    def build_submission(self, timestamp: Optional[datetime] = None) -> Submission:
        """
        Build the Submission from the current values.

        Raises:
            ValidationException: if any step on the variant's path is
                invalid or the location is not in the catalog
        """
        snapshot = self.snapshot()
        self.controller.validator.validate_path(snapshot, self.variant).raise_if_invalid()

        f = self.fields
        location = Location(
            sector=as_text(f["sector"]),
            village=as_text(f["village"]),
            property_number=as_text(f["property_number"]),
        )
        if not self.catalog.contains(location):
            raise ValidationException(
                tr("submission.location_mismatch"),
                field_errors={"property_number": tr("submission.location_mismatch")}
            )

        in_building = bool(f["in_building"])
        try:
            unit = PropertyUnit(
                neighborhood=as_text(f["neighborhood"]),
                building_name=as_text(f["building_name"]),
                street=as_text(f["street"]),
                section_number=as_text(f["section_number"]),
                building_type=as_text(f["building_type"]),
                total_floors=parse_int(f["total_floors"]),
                floor_number=parse_int(f["floor_number"]),
                section_type=as_text(f["section_type"]),
                direction=as_text(f["direction"]),
                in_building=in_building,
                block=as_text(f["block"]) if in_building else None,
                building_count=parse_int(f["building_count"]) if in_building else None,
            )

            floors = ()
            residents = ()
            if self.variant is EntryVariant.MY_FLOORS:
                floors = tuple(self._floor_entry(r) for r in self.floors.records())
            elif self.variant is EntryVariant.FULL_BUILDING:
                residents = tuple(self._resident_entry(r) for r in self.residents.records())

            if self.variant is EntryVariant.FULL_BUILDING:
                # Contact step is skipped; the first resident is the primary registrant
                first = residents[0]
                contact = Contact(first.full_name, first.mother_name, first.registry, first.phone)
            else:
                contact = Contact(
                    full_name=as_text(f["full_name"]),
                    mother_name=as_text(f["mother_name"]),
                    registry=as_text(f["registry"]),
                    phone=clean_phone(as_text(f["phone"])),
                )

            return Submission(
                location=location,
                unit=unit,
                variant=self.variant,
                contact=contact,
                floors=floors,
                residents=residents,
                timestamp=timestamp or datetime.now(),
            )
        except (ValueError, TypeError) as e:
            raise ValidationException(tr("submission.invalid"), context=str(e)) from e

    @staticmethod
    def _floor_entry(record: Dict[str, Any]) -> FloorEntry:
        return FloorEntry(
            floor_number=parse_int(record["floor_number"]),
            section_type=as_text(record["section_type"]),
            direction=as_text(record["direction"]),
            registrant_name=as_text(record["registrant_name"]),
        )

    @staticmethod
    def _resident_entry(record: Dict[str, Any]) -> ResidentEntry:
        return ResidentEntry(
            full_name=as_text(record["full_name"]),
            mother_name=as_text(record["mother_name"]),
            registry=as_text(record["registry"]),
            phone=clean_phone(as_text(record["phone"])),
            floor=parse_int(record["floor"]),
            section_type=as_text(record["section_type"]),
            direction=as_text(record["direction"]),
        )

    def submit(self) -> Submission:
        """
        Confirm the review step: build, store, clear the draft.

        Raises:
            InvalidTransition: if not at the review step
            ValidationException: if the form data is incomplete
            CapacityExceeded: if the store is full (state stays at review)
        """
        if self.state.step is not StepId.REVIEW:
            raise InvalidTransition(
                f"Cannot submit from step {self.state.step.value}; review step required"
            )

        submission = self.build_submission()
        stored = self.store.save(submission)
        self.store.clear_draft()
        self.state = self.controller.mark_submitted(self.state, stored)
        return stored

    def reset(self):
        """Start a new form after a submission."""
        self.state = self.controller.reset(self.state)
        self.fields = self._blank_fields()
        self.floors.reset()
        self.residents.reset()
        self.last_validation = ValidationResult()
        self.store.clear_draft()

    def submission_limit_message(self) -> str:
        remaining = self.store.remaining()
        if remaining > 0:
            return tr("submission.remaining", remaining=remaining)
        return tr("submission.limit_reached")

    def can_submit(self) -> bool:
        return not self.store.is_full()

    # =========================================================================
    # Draft
    # =========================================================================

    def to_draft(self) -> Dict[str, Any]:
        return {
            "fields": dict(self.fields),
            "flow": self.state.to_dict(),
            "floors": self.floors.records(),
            "residents": self.residents.records(),
            "saved_at": datetime.now().isoformat(),
        }

    def _autosave(self):
        if self.autosave and self.state.step is not StepId.SUBMITTED:
            self.store.save_draft(self.to_draft())

    def restore_draft(self) -> bool:
        """
        Restore field values, entries and flow state from the saved draft.

        A draft that does not have the saved shape is discarded with a warning.

        Returns:
            True if a draft was restored
        """
        draft = self.store.load_draft()
        if not draft:
            return False

        try:
            state = FlowState.from_dict(draft.get("flow", {}))
            if state.step is StepId.SUBMITTED:
                return False

            fields = self._blank_fields()
            for name, value in draft.get("fields", {}).items():
                if name in fields:
                    fields[name] = value
            fields["in_building"] = bool(fields["in_building"])

            floors = EntryCollectionManager(EntryKind.FLOOR)
            floors.load(draft.get("floors", []))
            residents = EntryCollectionManager(EntryKind.RESIDENT)
            residents.load(draft.get("residents", []))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Discarding draft with unexpected shape: {e}")
            self.store.clear_draft()
            return False

        self.fields = fields
        self.state = state
        self.floors = floors
        self.residents = residents
        logger.info(f"Restored draft at step {state.step.value}")
        return True
