# -*- coding: utf-8 -*-
"""
Export Flattener - turns submissions into one uniform flat table.

Each submission yields a base row (location, unit, primary contact,
variant label). My-floors and full-building submissions yield one row
per sub-entry instead, with the registration index rewritten as "i.j".
Every row carries the same columns; blanks are empty strings.
"""

from typing import Dict, List, Sequence

from app.config import Config
from models.submission import EntryVariant, Submission
from services.exceptions import EmptyInput
from services.translation_manager import tr
from utils.helpers import format_datetime
from utils.logger import get_logger

logger = get_logger(__name__)

BASE_COLUMNS = [
    "registration_index",
    "registration_date",
    "sector",
    "village",
    "neighborhood",
    "building_name",
    "street",
    "property_number",
    "section_number",
    "in_building",
    "block",
    "building_count",
    "building_type",
    "total_floors",
    "floor_number",
    "section_type",
    "direction",
    "full_name",
    "mother_name",
    "registry",
    "phone",
    "entry_type",
    "entry_count",
]

FLOOR_COLUMNS = [
    "entry_floor_number",
    "entry_section_type",
    "entry_direction",
    "entry_registrant_name",
]

RESIDENT_COLUMNS = [
    "resident_full_name",
    "resident_mother_name",
    "resident_registry",
    "resident_phone",
    "resident_floor",
    "resident_section_type",
    "resident_direction",
]

EXPORT_COLUMNS = BASE_COLUMNS + FLOOR_COLUMNS + RESIDENT_COLUMNS

# Excel column widths, same order as EXPORT_COLUMNS
COLUMN_WIDTHS = [
    10, 18, 14, 16, 16, 18, 18, 12, 12, 10, 16, 12,
    14, 12, 10, 12, 12, 22, 18, 12, 14, 14, 12,
    14, 14, 12, 20,
    22, 18, 12, 14, 12, 14, 12,
]


def column_labels() -> Dict[str, str]:
    """Arabic header for every export column."""
    return {column: tr(f"column.{column}") for column in EXPORT_COLUMNS}


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


class ExportFlattener:
    """Flattens submissions for tabular export."""

    def __init__(self, timestamp_format: str = Config.TIMESTAMP_DISPLAY_FORMAT):
        self.timestamp_format = timestamp_format

    @property
    def columns(self) -> List[str]:
        return list(EXPORT_COLUMNS)

    def flatten(self, submissions: Sequence[Submission]) -> List[Dict[str, str]]:
        """
        Flatten submissions in the given order.

        Raises:
            EmptyInput: if there are no submissions
        """
        if not submissions:
            raise EmptyInput(tr("export.empty"))

        rows: List[Dict[str, str]] = []
        for i, submission in enumerate(submissions, 1):
            base = self._base_row(i, submission)

            if submission.variant is EntryVariant.MY_FLOORS:
                for j, floor in enumerate(submission.floors, 1):
                    row = dict(base)
                    row["registration_index"] = f"{i}.{j}"
                    row["entry_floor_number"] = _text(floor.floor_number)
                    row["entry_section_type"] = floor.section_type.value
                    row["entry_direction"] = floor.direction.value
                    row["entry_registrant_name"] = floor.registrant_name
                    rows.append(row)

            elif submission.variant is EntryVariant.FULL_BUILDING:
                for j, resident in enumerate(submission.residents, 1):
                    row = dict(base)
                    row["registration_index"] = f"{i}.{j}"
                    row["resident_full_name"] = resident.full_name
                    row["resident_mother_name"] = resident.mother_name
                    row["resident_registry"] = resident.registry
                    row["resident_phone"] = resident.phone
                    row["resident_floor"] = _text(resident.floor)
                    row["resident_section_type"] = resident.section_type.value
                    row["resident_direction"] = resident.direction.value
                    rows.append(row)

            else:
                rows.append(base)

        logger.debug(f"Flattened {len(submissions)} submissions into {len(rows)} rows")
        return rows

    def _base_row(self, index: int, submission: Submission) -> Dict[str, str]:
        location = submission.location
        unit = submission.unit
        contact = submission.primary_contact

        row = {column: "" for column in EXPORT_COLUMNS}
        row.update({
            "registration_index": str(index),
            "registration_date": format_datetime(submission.timestamp, self.timestamp_format),
            "sector": location.sector,
            "village": location.village,
            "neighborhood": unit.neighborhood,
            "building_name": unit.building_name,
            "street": unit.street,
            "property_number": location.property_number,
            "section_number": unit.section_number,
            "in_building": tr("common.yes") if unit.in_building else tr("common.no"),
            "block": _text(unit.block),
            "building_count": _text(unit.building_count),
            "building_type": unit.building_type.value,
            "total_floors": _text(unit.total_floors),
            "floor_number": _text(unit.floor_number),
            "section_type": unit.section_type.value,
            "direction": unit.direction.value,
            "full_name": contact.full_name,
            "mother_name": contact.mother_name,
            "registry": contact.registry,
            "phone": contact.phone,
            "entry_type": submission.variant.label,
            "entry_count": str(len(submission.entries)) if submission.variant.has_entries else "",
        })
        return row
