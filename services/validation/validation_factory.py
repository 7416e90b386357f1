# -*- coding: utf-8 -*-
"""
Validation Factory - Creates appropriate validators for different record types.

Provides a central point for creating and managing validation strategies.
"""

from typing import Dict, Optional, List

from models.entries import FloorEntry, ResidentEntry
from models.unit import SectionType, Direction
from .validation_strategy import ValidationStrategy, GenericRequiredFieldsValidator

SECTION_TYPE_CHOICES = [t.value for t in SectionType]
DIRECTION_CHOICES = [d.value for d in Direction]


class ValidationFactory:
    """
    Factory for creating validation strategies based on record type.

    This class acts as a registry and factory for different validation strategies,
    allowing easy creation of validators for different record types.
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register built-in validators for the repeatable entry records."""
        # Floor entry (my floors)
        self.register_validator(
            'floor',
            GenericRequiredFieldsValidator(
                required_fields=list(FloorEntry.FIELDS),
                field_labels={
                    'floor_number': 'Floor Number',
                    'section_type': 'Section Type',
                    'direction': 'Direction',
                    'registrant_name': 'Registrant Name'
                },
                choices={
                    'section_type': SECTION_TYPE_CHOICES,
                    'direction': DIRECTION_CHOICES
                },
                integer_minimums={'floor_number': 0}
            )
        )

        # Resident entry (full building)
        self.register_validator(
            'resident',
            GenericRequiredFieldsValidator(
                required_fields=list(ResidentEntry.FIELDS),
                field_labels={
                    'full_name': 'Full Name',
                    'mother_name': 'Mother Name',
                    'registry': 'Registry',
                    'phone': 'Phone',
                    'floor': 'Floor',
                    'section_type': 'Section Type',
                    'direction': 'Direction'
                },
                choices={
                    'section_type': SECTION_TYPE_CHOICES,
                    'direction': DIRECTION_CHOICES
                },
                integer_minimums={'floor': 0}
            )
        )

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a specific record type.

        Args:
            record_type: Type identifier (e.g., 'floor', 'resident')
            validator: ValidationStrategy instance
        """
        self._validators[record_type.lower()] = validator

    def get_validator(self, record_type: str) -> Optional[ValidationStrategy]:
        """
        Get a registered validator by record type.

        Args:
            record_type: Type identifier

        Returns:
            ValidationStrategy instance or None if not found
        """
        return self._validators.get(record_type.lower())

    def validate(self, record: Dict, record_type: str) -> Dict[str, str]:
        """
        Validate a record using the appropriate validator.

        Args:
            record: Dictionary containing record data
            record_type: Type of record to validate

        Returns:
            Mapping of field name to error message (empty if valid)

        Raises:
            KeyError: if no validator is registered for record_type
        """
        validator = self.get_validator(record_type)
        if not validator:
            raise KeyError(f"No validator registered for record type: {record_type}")

        return validator.validate(record)

    def is_valid(self, record: Dict, record_type: str) -> bool:
        """
        Check if a record is valid.

        Args:
            record: Dictionary containing record data
            record_type: Type of record to validate

        Returns:
            True if record passes validation, False otherwise
        """
        return len(self.validate(record, record_type)) == 0

    def get_registered_types(self) -> List[str]:
        """
        Get list of registered record types.

        Returns:
            List of record type identifiers
        """
        return list(self._validators.keys())
