# -*- coding: utf-8 -*-
"""
Damage Survey Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "SurveySession",
    "StepFlowController",
    "StepValidator",
    "ExportFlattener",
    "SurveyExportService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "SurveySession":
        from .wizard.survey_session import SurveySession
        return SurveySession
    elif name == "StepFlowController":
        from .wizard.step_flow import StepFlowController
        return StepFlowController
    elif name == "StepValidator":
        from .wizard.step_validator import StepValidator
        return StepValidator
    elif name == "ExportFlattener":
        from .export.export_flattener import ExportFlattener
        return ExportFlattener
    elif name == "SurveyExportService":
        from .export_service import SurveyExportService
        return SurveyExportService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
