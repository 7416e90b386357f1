# -*- coding: utf-8 -*-
"""Export services package."""

from .export_strategy import ExportStrategy, CSVExportStrategy, ExcelExportStrategy
from .export_manager import ExportManager
from .export_flattener import ExportFlattener, EXPORT_COLUMNS, COLUMN_WIDTHS, column_labels

__all__ = [
    'ExportStrategy', 'CSVExportStrategy', 'ExcelExportStrategy', 'ExportManager',
    'ExportFlattener', 'EXPORT_COLUMNS', 'COLUMN_WIDTHS', 'column_labels',
]
