# -*- coding: utf-8 -*-
"""
Submission repository.

Append-only log of completed submissions plus the single overwritable
draft record, on top of a key-value store. Submissions live under
`submission_<sequence>` keys, the draft under its own key, so listing
submissions never touches the draft.
"""

import json
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from app.config import Config
from models.submission import Submission
from services.exceptions import CapacityExceeded, MalformedPersistedRecord
from services.translation_manager import tr
from utils.logger import get_logger
from .kv_store import KeyValueStore

logger = get_logger(__name__)


@dataclass
class LoadResult:
    """Submissions read back from storage, with the records that failed to parse."""
    submissions: List[Submission] = field(default_factory=list)
    skipped: List[MalformedPersistedRecord] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class SubmissionStore:
    """
    Capped, append-only submission storage.

    The stored count is kept as bookkeeping (one key scan when the store
    is opened) so count() and the capacity check do not rescan storage.
    """

    def __init__(
        self,
        store: KeyValueStore,
        max_submissions: int = Config.MAX_SUBMISSIONS,
        key_prefix: str = Config.SUBMISSION_KEY_PREFIX,
        draft_key: str = Config.DRAFT_KEY
    ):
        if draft_key.startswith(key_prefix):
            raise ValueError("draft key must not share the submission key prefix")

        self._store = store
        self.max_submissions = max_submissions
        self.key_prefix = key_prefix
        self.draft_key = draft_key

        self._keys: List[str] = store.keys(key_prefix)
        self._last_sequence = max(
            (self._sequence_of(key) for key in self._keys), default=0
        )
        logger.debug(f"Opened submission store with {len(self._keys)} submission(s)")

    # =========================================================================
    # Submissions
    # =========================================================================

    def count(self) -> int:
        return len(self._keys)

    def remaining(self) -> int:
        return max(self.max_submissions - self.count(), 0)

    def is_full(self) -> bool:
        return self.count() >= self.max_submissions

    def save(self, submission: Submission) -> Submission:
        """
        Append a submission.

        Args:
            submission: Submission to store

        Returns:
            The stored submission, carrying its storage key

        Raises:
            CapacityExceeded: if the store already holds max_submissions
        """
        count = self.count()
        if count >= self.max_submissions:
            logger.warning(
                f"Submission rejected: store holds {count} of {self.max_submissions}"
            )
            raise CapacityExceeded(
                tr("submission.capacity_exceeded", limit=self.max_submissions),
                limit=self.max_submissions,
                count=count
            )

        key = self._next_key()
        payload = json.dumps(submission.to_dict(), ensure_ascii=False)

        # Single write: either the record is stored or nothing changes
        self._store.set(key, payload)
        self._keys.append(key)
        self._last_sequence = self._sequence_of(key)

        logger.info(f"Saved submission {key} ({submission.variant.label})")
        return replace(submission, key=key)

    def load_all(self) -> LoadResult:
        """
        Read every stored submission in insertion order.

        Records that fail to parse are skipped and reported in the result.
        """
        result = LoadResult()
        for key in self._keys:
            try:
                result.submissions.append(self._load(key))
            except MalformedPersistedRecord as e:
                logger.warning(f"Skipping malformed submission {key}: {e.reason}")
                result.skipped.append(e)
        return result

    def all(self) -> List[Submission]:
        """Stored submissions in insertion order (malformed records skipped)."""
        return self.load_all().submissions

    def keys(self) -> List[str]:
        return list(self._keys)

    def _load(self, key: str) -> Submission:
        raw = self._store.get(key)
        if raw is None:
            raise MalformedPersistedRecord(
                f"Submission {key} is missing", key=key, reason="missing value"
            )
        try:
            return Submission.from_dict(json.loads(raw), key=key)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # json.JSONDecodeError is a ValueError
            raise MalformedPersistedRecord(
                f"Submission {key} cannot be parsed",
                key=key,
                reason=f"{type(e).__name__}: {e}"
            ) from e

    def _next_key(self) -> str:
        """Monotonic, timestamp-derived key."""
        sequence = max(int(time.time() * 1000), self._last_sequence + 1)
        return f"{self.key_prefix}{sequence}"

    def _sequence_of(self, key: str) -> int:
        suffix = key[len(self.key_prefix):]
        return int(suffix) if suffix.isdigit() else 0

    # =========================================================================
    # Draft
    # =========================================================================

    def save_draft(self, partial: Dict[str, Any]) -> None:
        """Overwrite the draft record."""
        self._store.set(self.draft_key, json.dumps(partial, ensure_ascii=False, default=str))
        logger.debug("Draft saved")

    def load_draft(self) -> Optional[Dict[str, Any]]:
        """Return the draft record, or None when there is none (or it is unreadable)."""
        raw = self._store.get(self.draft_key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Discarding unreadable draft: {e}")
            self.clear_draft()
            return None
        if not isinstance(data, dict):
            logger.warning("Discarding draft that is not an object")
            self.clear_draft()
            return None
        return data

    def clear_draft(self) -> None:
        self._store.remove(self.draft_key)
        logger.debug("Draft cleared")

    def has_draft(self) -> bool:
        return self._store.get(self.draft_key) is not None
