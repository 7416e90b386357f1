# -*- coding: utf-8 -*-
"""
Entry Collection Manager - ordered list of repeatable sub-entries.

Entries (floors or residents) are addressed by allocation handles that
increase monotonically and are never reused within a session. The
1-based display number of an entry is its current position and changes
when earlier entries are removed.

The collection never drops below one entry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from models.entries import FloorEntry, ResidentEntry
from services.exceptions import EntryNotFound
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class EntryKind(str, Enum):
    FLOOR = "floor"
    RESIDENT = "resident"

    @property
    def fields(self) -> Tuple[str, ...]:
        if self is EntryKind.FLOOR:
            return FloorEntry.FIELDS
        return ResidentEntry.FIELDS

    @property
    def title_key(self) -> str:
        return f"entry.{self.value}.title"


@dataclass
class EntryRecord:
    """One entry in the collection: its handle and raw field values."""
    handle: int
    values: Dict[str, Any]


class EntryCollectionManager:
    """
    Manages the floors (my floors) or residents (full building) of a form.

    Responsibilities:
    - Allocate handles on add
    - Refuse to remove the last remaining entry
    - Report display numbering after removals
    """

    def __init__(self, kind: EntryKind):
        self.kind = EntryKind(kind)
        self._entries: List[EntryRecord] = []
        self._next_handle = 0
        self.add()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    @property
    def can_remove(self) -> bool:
        """Whether the remove affordance should be offered."""
        return len(self._entries) > 1

    def handles(self) -> List[int]:
        return [entry.handle for entry in self._entries]

    def add(self, values: Optional[Dict[str, Any]] = None) -> int:
        """
        Append a blank (or pre-filled) entry.

        Returns:
            The new entry's handle
        """
        handle = self._next_handle
        self._next_handle += 1

        record = {name: "" for name in self.kind.fields}
        if values:
            record.update({k: v for k, v in values.items() if k in record})

        self._entries.append(EntryRecord(handle=handle, values=record))
        logger.debug(f"Added {self.kind.value} entry {handle} (count={len(self._entries)})")
        return handle

    def remove(self, handle: int) -> bool:
        """
        Remove an entry.

        Returns:
            True if removed, False when it is the only entry left

        Raises:
            EntryNotFound: if the handle is not in the collection
        """
        index = self._index_of(handle)
        if len(self._entries) == 1:
            logger.debug(f"Refusing to remove last {self.kind.value} entry {handle}")
            return False

        del self._entries[index]
        logger.debug(f"Removed {self.kind.value} entry {handle} (count={len(self._entries)})")
        return True

    def update(self, handle: int, field_id: str, value: Any):
        """Set one field of an entry."""
        if field_id not in self.kind.fields:
            raise ValueError(f"Unknown {self.kind.value} field: {field_id}")
        self._entries[self._index_of(handle)].values[field_id] = value

    def get(self, handle: int) -> Dict[str, Any]:
        """Copy of an entry's values."""
        return dict(self._entries[self._index_of(handle)].values)

    def display_number(self, handle: int) -> int:
        """1-based position of the entry."""
        return self._index_of(handle) + 1

    def display_title(self, handle: int) -> str:
        """e.g. "طابق رقم 2"."""
        return tr(self.kind.title_key, number=self.display_number(handle))

    def records(self) -> List[Dict[str, Any]]:
        """Copies of all entry values, in authoring order."""
        return [dict(entry.values) for entry in self._entries]

    def load(self, records: List[Dict[str, Any]]):
        """Replace the collection with the given records (at least one entry is kept)."""
        self._entries = []
        for values in records:
            self.add(values)
        if not self._entries:
            self.add()

    def reset(self):
        """Back to a single blank entry with handle numbering restarted."""
        self._entries = []
        self._next_handle = 0
        self.add()

    def _index_of(self, handle: int) -> int:
        for index, entry in enumerate(self._entries):
            if entry.handle == handle:
                return index
        raise EntryNotFound(handle)
