# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for record validation.

Provides a pluggable architecture for different validation rules without
modifying existing validation logic. Strategies return a mapping of
field name -> error message (empty when the record is valid).
"""

import re
from abc import ABC, abstractmethod
from typing import Callable, Collection, Dict, Any, List, Optional, Sequence

from services.translation_manager import tr
from utils.helpers import as_text, parse_int


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements specific validation rules for different record types.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        """
        Validate a record and return error messages keyed by field.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            Mapping of field name to error message (empty if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """
        Check if record is valid.

        Args:
            record: Dictionary containing record data

        Returns:
            True if record passes all validations, False otherwise
        """
        return len(self.validate(record)) == 0


class GenericRequiredFieldsValidator(ValidationStrategy):
    """
    Generic validator for checking required fields.

    Validates that specified fields exist and are not empty. Optionally
    restricts select-style fields to a set of choices and integer fields
    to a minimum value; a value outside those counts as missing.
    """

    def __init__(
        self,
        required_fields: List[str],
        field_labels: Optional[Dict[str, str]] = None,
        choices: Optional[Dict[str, Collection[str]]] = None,
        integer_minimums: Optional[Dict[str, int]] = None
    ):
        """
        Initialize validator with required fields.

        Args:
            required_fields: List of field names that must be present and non-empty
            field_labels: Optional mapping of field names to human-readable labels
            choices: Optional mapping of field names to allowed values
            integer_minimums: Optional mapping of integer field names to minimum value
        """
        self.required_fields = list(required_fields)
        self.field_labels = field_labels or {}
        self.choices = choices or {}
        self.integer_minimums = integer_minimums or {}

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        """
        Validate that all required fields are present and non-empty.

        Args:
            record: Dictionary containing record data

        Returns:
            Mapping of missing/empty field names to error messages
        """
        errors = {}

        for field in self.required_fields:
            # Get human-readable label or use field name
            label = self.field_labels.get(field, field)

            if field not in record:
                errors[field] = f"Missing required field: {label}"
                continue

            text = as_text(record[field])
            if not text:
                errors[field] = f"Required field cannot be empty: {label}"
                continue

            allowed = self.choices.get(field)
            if allowed is not None and text not in allowed:
                errors[field] = f"Invalid choice for {label}: {text}"
                continue

            minimum = self.integer_minimums.get(field)
            if minimum is not None:
                number = parse_int(text)
                if number is None or number < minimum:
                    errors[field] = f"{label} must be an integer >= {minimum}"

        return errors


# =============================================================================
# Field rules (per-field error messages)
# =============================================================================

class FieldRule(ABC):
    """
    One check on one field, reporting a translated message when it fails.

    Rules on the same field run in order; the first failure wins.
    """

    def __init__(self, field: str, message_key: str):
        self.field = field
        self.message_key = message_key

    @abstractmethod
    def check(self, value: Any, record: Dict[str, Any]) -> bool:
        pass

    @property
    def message(self) -> str:
        return tr(self.message_key)


class RequiredRule(FieldRule):
    def check(self, value: Any, record: Dict[str, Any]) -> bool:
        return bool(as_text(value))


class MinLengthRule(FieldRule):
    """Trimmed text must be at least min_length characters."""

    def __init__(self, field: str, message_key: str, min_length: int):
        super().__init__(field, message_key)
        self.min_length = min_length

    def check(self, value: Any, record: Dict[str, Any]) -> bool:
        return len(as_text(value)) >= self.min_length


class ChoiceRule(FieldRule):
    def __init__(self, field: str, message_key: str, choices: Collection[str]):
        super().__init__(field, message_key)
        self.choices = set(choices)

    def check(self, value: Any, record: Dict[str, Any]) -> bool:
        return as_text(value) in self.choices


class IntegerRule(FieldRule):
    """Value must parse as an integer >= minimum."""

    def __init__(self, field: str, message_key: str, minimum: int = 0):
        super().__init__(field, message_key)
        self.minimum = minimum

    def check(self, value: Any, record: Dict[str, Any]) -> bool:
        number = parse_int(value)
        return number is not None and number >= self.minimum


class PatternRule(FieldRule):
    """Value (after an optional cleaner) must fully match a regex."""

    def __init__(self, field: str, message_key: str, pattern: str,
                 cleaner: Optional[Callable[[str], str]] = None):
        super().__init__(field, message_key)
        self.pattern = re.compile(pattern)
        self.cleaner = cleaner

    def check(self, value: Any, record: Dict[str, Any]) -> bool:
        text = as_text(value)
        if self.cleaner:
            text = self.cleaner(text)
        return self.pattern.fullmatch(text) is not None


class PredicateRule(FieldRule):
    """Arbitrary check against the whole record."""

    def __init__(self, field: str, message_key: str,
                 predicate: Callable[[Dict[str, Any]], bool]):
        super().__init__(field, message_key)
        self.predicate = predicate

    def check(self, value: Any, record: Dict[str, Any]) -> bool:
        return self.predicate(record)


class RuleSetValidator(ValidationStrategy):
    """
    Validator built from an ordered list of field rules.

    Only the first failing rule of each field is reported. Rules may be
    guarded by a condition on the record (e.g. fields that are only
    required when a toggle is set).
    """

    def __init__(self, rules: Sequence[FieldRule],
                 conditions: Optional[Dict[str, Callable[[Dict[str, Any]], bool]]] = None):
        self.rules = list(rules)
        self.conditions = conditions or {}

    def validate(self, record: Dict[str, Any]) -> Dict[str, str]:
        errors: Dict[str, str] = {}

        for rule in self.rules:
            if rule.field in errors:
                continue

            condition = self.conditions.get(rule.field)
            if condition is not None and not condition(record):
                continue

            if not rule.check(record.get(rule.field), record):
                errors[rule.field] = rule.message

        return errors
