# -*- coding: utf-8 -*-
"""Survey form wizard: steps, validation, navigation, entry collections and session."""

from .steps import StepId, step_path
from .step_validator import (
    StepValidator, ValidationResult, PHONE_PATTERN, clean_phone, validate_phone_number,
)
from .entry_collection import EntryCollectionManager, EntryKind, EntryRecord
from .step_flow import FlowState, NavigationResult, Progress, StepFlowController
from .survey_session import SurveySession

__all__ = [
    'StepId', 'step_path',
    'StepValidator', 'ValidationResult', 'PHONE_PATTERN', 'clean_phone', 'validate_phone_number',
    'EntryCollectionManager', 'EntryKind', 'EntryRecord',
    'FlowState', 'NavigationResult', 'Progress', 'StepFlowController',
    'SurveySession',
]
