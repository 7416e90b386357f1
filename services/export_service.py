# -*- coding: utf-8 -*-
"""
Export service for the stored damage survey submissions.

Reads every stored submission (skipping malformed records), flattens
them into one uniform table and writes it as an Excel sheet or CSV file
named with the current date.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from datetime import datetime

from app.config import Config
from repositories.submission_repository import SubmissionStore
from services.exceptions import ExportError
from services.export import ExportFlattener, ExportManager, COLUMN_WIDTHS, column_labels
from services.translation_manager import tr
from utils.helpers import sanitize_filename
from utils.logger import get_logger

logger = get_logger(__name__)


class SurveyExportService:
    """Service for exporting stored submissions."""

    def __init__(
        self,
        store: SubmissionStore,
        export_dir: Optional[Union[str, Path]] = None,
        manager: Optional[ExportManager] = None,
        flattener: Optional[ExportFlattener] = None
    ):
        self.store = store
        self.export_dir = Path(export_dir) if export_dir else Config.EXPORT_DIR
        self.manager = manager or ExportManager()
        self.flattener = flattener or ExportFlattener()

    def build_file_name(self, format_name: str = "xlsx", when: Optional[datetime] = None) -> str:
        """e.g. حصر_الأضرار_2024-05-01.xlsx"""
        extension = self.manager.get_file_extension(format_name)
        if extension is None:
            raise ValueError(f"Unsupported export format: {format_name}")
        stamp = (when or datetime.now()).strftime(Config.EXPORT_DATE_FORMAT)
        return sanitize_filename(f"{Config.EXPORT_FILE_PREFIX}_{stamp}{extension}")

    def get_export_preview(self, limit: int = 10) -> List[Dict[str, str]]:
        """First flattened rows (empty list when nothing is stored)."""
        submissions = self.store.all()
        if not submissions:
            return []
        return self.flattener.flatten(submissions)[:limit]

    def export(
        self,
        format_name: str = "xlsx",
        output_dir: Optional[Union[str, Path]] = None
    ) -> Dict[str, Any]:
        """
        Export all stored submissions.

        Args:
            format_name: 'xlsx' or 'csv'
            output_dir: Target directory (default: Config.EXPORT_DIR)

        Returns:
            Export summary dict

        Raises:
            EmptyInput: if no readable submission is stored
            ExportError: if the file cannot be written
        """
        format_name = format_name.lower()
        file_name = self.build_file_name(format_name)

        loaded = self.store.load_all()
        if loaded.skipped_count:
            logger.warning(tr("export.skipped", count=loaded.skipped_count))

        # Raises EmptyInput before any file is created
        rows = self.flattener.flatten(loaded.submissions)

        target_dir = Path(output_dir) if output_dir else self.export_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        file_path = target_dir / file_name

        ok = self.manager.export(
            rows,
            str(file_path),
            format_name=format_name,
            columns=self.flattener.columns,
            headers=column_labels(),
            sheet_title=Config.EXPORT_SHEET_TITLE,
            column_widths=COLUMN_WIDTHS,
        )
        if not ok:
            raise ExportError(f"Could not write export file {file_path}")

        logger.info(
            f"Exported {len(loaded.submissions)} submissions ({len(rows)} rows) to {file_path}"
        )

        return {
            "file_path": str(file_path),
            "submission_count": len(loaded.submissions),
            "row_count": len(rows),
            "skipped_count": loaded.skipped_count,
            "format": format_name,
            "exported_at": datetime.now().isoformat(),
            "message": tr("export.success", count=len(loaded.submissions), filename=file_name),
        }
