# -*- coding: utf-8 -*-
"""
Step validation service for the damage survey form.

Validates a snapshot of form values for each step without UI coupling.
Steps 1, 2 and 3 report per-field errors; the repeatable-entry steps
(2a, 2b) report one batch alert for the whole collection.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.location import LocationCatalog
from models.submission import EntryVariant
from models.unit import BuildingType, SectionType, Direction
from services.exceptions import ValidationException
from services.translation_manager import tr
from services.validation import (
    ValidationFactory, RuleSetValidator, RequiredRule, MinLengthRule,
    ChoiceRule, IntegerRule, PatternRule, PredicateRule,
)
from utils.helpers import as_text
from .steps import StepId, step_path

PHONE_PATTERN = r"(03|70|71|76|78|79|81)\d{6}"


def clean_phone(phone: str) -> str:
    """Strip spaces and dashes from a phone number."""
    return re.sub(r"[\s-]", "", phone or "")


def validate_phone_number(phone: str) -> bool:
    """Lebanese mobile/landline: known prefix followed by 6 digits."""
    return re.fullmatch(PHONE_PATTERN, clean_phone(phone)) is not None


@dataclass
class ValidationResult:
    """Result of step validation."""
    is_valid: bool = True
    field_errors: Dict[str, str] = field(default_factory=dict)
    alert: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.is_valid

    @property
    def errors(self) -> List[str]:
        """All messages, field errors first then the batch alert."""
        messages = list(self.field_errors.values())
        if self.alert:
            messages.append(self.alert)
        return messages

    def add_error(self, field_id: str, message: str):
        """Add a field error (the first message per field is kept)."""
        self.field_errors.setdefault(field_id, message)
        self.is_valid = False

    def set_alert(self, message: str):
        """Set the batch alert for collection-level failures."""
        self.alert = message
        self.is_valid = False

    def merge(self, other: "ValidationResult"):
        for field_id, message in other.field_errors.items():
            self.add_error(field_id, message)
        if other.alert and not self.alert:
            self.set_alert(other.alert)
        if not other.is_valid:
            self.is_valid = False

    def raise_if_invalid(self):
        if not self.is_valid:
            raise ValidationException(
                tr("submission.invalid"),
                field_errors=dict(self.field_errors),
                alert=self.alert
            )


class StepValidator:
    """Validates form snapshots step by step."""

    def __init__(self, catalog: Optional[LocationCatalog] = None,
                 factory: Optional[ValidationFactory] = None):
        """
        Args:
            catalog: When given, village/property number must belong to the
                selected sector/village
            factory: Validators for the repeatable entry records
        """
        self.catalog = catalog
        self.factory = factory or ValidationFactory()
        self._location_rules = self._build_location_rules()
        self._building_rules = self._build_building_rules()
        self._contact_rules = self._build_contact_rules()

    # =========================================================================
    # Rule sets
    # =========================================================================

    def _build_location_rules(self) -> RuleSetValidator:
        rules = [
            RequiredRule("sector", "validation.sector.required"),
            RequiredRule("village", "validation.village.required"),
            MinLengthRule("neighborhood", "validation.neighborhood.required", 2),
            MinLengthRule("building_name", "validation.building_name.required", 2),
            MinLengthRule("street", "validation.street.required", 2),
        ]
        if self.catalog is not None:
            catalog = self.catalog
            rules.append(PredicateRule(
                "village", "validation.village.not_in_sector",
                lambda r: catalog.has_village(as_text(r.get("sector")), as_text(r.get("village")))
            ))
        return RuleSetValidator(rules)

    def _build_building_rules(self) -> RuleSetValidator:
        rules = [
            RequiredRule("property_number", "validation.property_number.required"),
            RequiredRule("section_number", "validation.section_number.required"),
            RequiredRule("block", "validation.block.required"),
            RequiredRule("building_count", "validation.building_count.required"),
            IntegerRule("building_count", "validation.building_count.invalid", minimum=1),
            RequiredRule("building_type", "validation.building_type.required"),
            ChoiceRule("building_type", "validation.building_type.required",
                       [t.value for t in BuildingType]),
            RequiredRule("total_floors", "validation.total_floors.required"),
            IntegerRule("total_floors", "validation.total_floors.invalid", minimum=1),
            RequiredRule("floor_number", "validation.floor_number.required"),
            IntegerRule("floor_number", "validation.floor_number.invalid", minimum=0),
            RequiredRule("section_type", "validation.section_type.required"),
            ChoiceRule("section_type", "validation.section_type.required",
                       [t.value for t in SectionType]),
            RequiredRule("direction", "validation.direction.required"),
            ChoiceRule("direction", "validation.direction.required",
                       [d.value for d in Direction]),
        ]
        if self.catalog is not None:
            catalog = self.catalog
            rules.append(PredicateRule(
                "property_number", "validation.property_number.not_in_village",
                lambda r: catalog.has_property(
                    as_text(r.get("sector")), as_text(r.get("village")),
                    as_text(r.get("property_number"))
                )
            ))

        def in_building(record: Dict[str, Any]) -> bool:
            return bool(record.get("in_building"))

        return RuleSetValidator(
            rules,
            conditions={"block": in_building, "building_count": in_building}
        )

    def _build_contact_rules(self) -> RuleSetValidator:
        return RuleSetValidator([
            MinLengthRule("full_name", "validation.full_name.required", 5),
            MinLengthRule("mother_name", "validation.mother_name.required", 3),
            MinLengthRule("registry", "validation.registry.required", 3),
            RequiredRule("phone", "validation.phone.required"),
            PatternRule("phone", "validation.phone.invalid", PHONE_PATTERN, cleaner=clean_phone),
        ])

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, step: StepId, snapshot: Dict[str, Any]) -> ValidationResult:
        """
        Validate the snapshot for one step.

        Args:
            step: Step being left
            snapshot: Current form values (flat fields, "variant",
                "floors" and "residents" record lists)

        Returns:
            ValidationResult (never raises, never mutates the snapshot)
        """
        step = StepId(step)
        result = ValidationResult()

        if step is StepId.LOCATION:
            self._apply(result, self._location_rules, snapshot)

        elif step is StepId.BUILDING:
            self._apply(result, self._building_rules, snapshot)

        elif step is StepId.MY_FLOORS:
            if not self._entries_complete(snapshot.get("floors"), "floor"):
                result.set_alert(tr("validation.floors.incomplete"))

        elif step is StepId.FULL_BUILDING:
            residents = snapshot.get("residents")
            if not self._entries_complete(residents, "resident"):
                result.set_alert(tr("validation.residents.incomplete"))
            elif self._contact_rules.validate(residents[0]):
                # The first resident stands in for the skipped contact step
                result.set_alert(tr("validation.residents.primary_contact"))

        elif step is StepId.CONTACT:
            self._apply(result, self._contact_rules, snapshot)

        elif step is StepId.REVIEW:
            variant = EntryVariant(snapshot.get("variant") or EntryVariant.SINGLE)
            result = self.validate_path(snapshot, variant)

        # SUBMITTED has nothing left to validate
        return result

    def validate_path(self, snapshot: Dict[str, Any], variant: EntryVariant) -> ValidationResult:
        """Validate every data-entry step the variant passes through."""
        result = ValidationResult()
        for step in step_path(variant):
            result.merge(self.validate(step, snapshot))
        return result

    def _apply(self, result: ValidationResult, rules: RuleSetValidator, snapshot: Dict[str, Any]):
        for field_id, message in rules.validate(snapshot).items():
            result.add_error(field_id, message)

    def _entries_complete(self, records, record_type: str) -> bool:
        """Every required field of every entry is filled (and there is at least one entry)."""
        if not records:
            return False
        return all(self.factory.is_valid(record, record_type) for record in records)

    @staticmethod
    def get_step_name(step: StepId) -> str:
        """Get Arabic name for step."""
        return tr(StepId(step).title_key)
