# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""

from typing import Dict, List, Optional


class SurveyError(Exception):
    """Base class for survey errors."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        return self.message


class ValidationException(SurveyError):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field_errors: Dict[str, str] = None,
                 alert: Optional[str] = None, context: str = None):
        super().__init__(message, context)
        self.field_errors = field_errors or {}
        self.alert = alert

    @property
    def errors(self) -> List[str]:
        """All error messages, field errors first."""
        messages = list(self.field_errors.values())
        if self.alert:
            messages.append(self.alert)
        return messages


class CapacityExceeded(SurveyError):
    """Raised when the submission store already holds its maximum."""

    def __init__(self, message: str, limit: int, count: int):
        super().__init__(message)
        self.limit = limit
        self.count = count


class EmptyInput(SurveyError):
    """Raised when there is nothing to export."""


class MalformedPersistedRecord(SurveyError):
    """Raised when a stored submission cannot be parsed."""

    def __init__(self, message: str, key: str = None, reason: str = None):
        super().__init__(message)
        self.key = key
        self.reason = reason


class InvalidTransition(SurveyError):
    """Raised for a state-machine request that is not allowed in the current state."""


class EntryNotFound(SurveyError, KeyError):
    """Raised when an entry handle does not belong to a collection."""

    def __init__(self, handle: int):
        super().__init__(f"No entry with handle {handle}")
        self.handle = handle


class ExportError(SurveyError):
    """Raised when an export file cannot be written."""
