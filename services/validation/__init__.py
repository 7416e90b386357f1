# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy, GenericRequiredFieldsValidator, RuleSetValidator, FieldRule,
    RequiredRule, MinLengthRule, ChoiceRule, IntegerRule, PatternRule, PredicateRule,
)
from .validation_factory import ValidationFactory

__all__ = [
    'ValidationStrategy', 'GenericRequiredFieldsValidator', 'RuleSetValidator', 'FieldRule',
    'RequiredRule', 'MinLengthRule', 'ChoiceRule', 'IntegerRule', 'PatternRule',
    'PredicateRule', 'ValidationFactory',
]
