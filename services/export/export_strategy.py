# -*- coding: utf-8 -*-
"""
Export Strategy Pattern - Abstract interface for export strategies.

Provides a pluggable architecture for different export formats without
modifying the export service.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any
import csv

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from utils.logger import get_logger

logger = get_logger(__name__)


class ExportStrategy(ABC):
    """
    Abstract base class for export strategies.

    Each strategy implements a specific export format (CSV, Excel).
    """

    @abstractmethod
    def export(self, data: List[Dict[str, Any]], file_path: str, **kwargs) -> bool:
        """
        Export data to a file in the strategy's format.

        Args:
            data: List of dictionaries representing rows to export
            file_path: Target file path for export
            **kwargs: Additional format-specific options

        Returns:
            True if export succeeded, False otherwise
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """
        Get the file extension for this export format.

        Returns:
            File extension including the dot (e.g., '.csv')
        """
        pass


class CSVExportStrategy(ExportStrategy):
    """Strategy for exporting data to CSV format."""

    def export(self, data: List[Dict[str, Any]], file_path: str, **kwargs) -> bool:
        """
        Export data to CSV file.

        Args:
            data: List of dictionaries to export
            file_path: Target CSV file path
            **kwargs: Optional parameters:
                - delimiter: CSV delimiter (default: ',')
                - encoding: File encoding (default: 'utf-8-sig')
                - columns: List of column names to export (default: all keys from first row)
                - headers: Mapping of column name to header text (default: column names)

        Returns:
            True if export succeeded, False otherwise
        """
        if not data:
            return False

        delimiter = kwargs.get('delimiter', ',')
        encoding = kwargs.get('encoding', 'utf-8-sig')
        columns = kwargs.get('columns') or list(data[0].keys())
        headers = kwargs.get('headers') or {}

        try:
            with open(file_path, 'w', newline='', encoding=encoding) as f:
                writer = csv.DictWriter(f, fieldnames=columns, delimiter=delimiter,
                                        extrasaction='ignore')
                writer.writerow({column: headers.get(column, column) for column in columns})
                writer.writerows(data)
        except OSError as e:
            logger.error(f"CSV export failed: {e}")
            return False

        return True

    def get_file_extension(self) -> str:
        """Return CSV file extension."""
        return '.csv'


class ExcelExportStrategy(ExportStrategy):
    """Strategy for exporting data to a single styled Excel sheet."""

    HEADER_COLOR = "0072BC"

    def export(self, data: List[Dict[str, Any]], file_path: str, **kwargs) -> bool:
        """
        Export data to an .xlsx workbook.

        Args:
            data: List of dictionaries to export
            file_path: Target .xlsx file path
            **kwargs: Optional parameters:
                - columns: List of column names (default: keys of first row)
                - headers: Mapping of column name to header text
                - sheet_title: Worksheet title
                - column_widths: Widths in column order
                - right_to_left: Display the sheet right-to-left (default: True)

        Returns:
            True if export succeeded, False otherwise
        """
        if not data:
            return False

        columns = kwargs.get('columns') or list(data[0].keys())
        headers = kwargs.get('headers') or {}
        column_widths = kwargs.get('column_widths') or []

        wb = Workbook()
        ws = wb.active
        # Excel limits sheet titles to 31 characters
        ws.title = (kwargs.get('sheet_title') or "Sheet1")[:31]
        ws.sheet_view.rightToLeft = kwargs.get('right_to_left', True)

        # Define styles
        header_font = Font(bold=True, color="FFFFFF")
        header_fill = PatternFill(start_color=self.HEADER_COLOR, end_color=self.HEADER_COLOR,
                                  fill_type="solid")
        header_alignment = Alignment(horizontal="center", vertical="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin")
        )

        # Headers
        for col, column in enumerate(columns, 1):
            cell = ws.cell(row=1, column=col, value=headers.get(column, column))
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = header_alignment
            cell.border = thin_border

        # Data rows
        for row_num, record in enumerate(data, 2):
            for col, column in enumerate(columns, 1):
                cell = ws.cell(row=row_num, column=col, value=record.get(column, ""))
                cell.border = thin_border

        # Adjust column widths
        for col, width in enumerate(column_widths, 1):
            ws.column_dimensions[get_column_letter(col)].width = width

        ws.freeze_panes = "A2"

        try:
            wb.save(file_path)
        except OSError as e:
            logger.error(f"Excel export failed: {e}")
            return False

        return True

    def get_file_extension(self) -> str:
        """Return Excel file extension."""
        return '.xlsx'
