# -*- coding: utf-8 -*-
"""
Tests for the submission store.

Tests cover:
- Capacity limit at save time
- Insertion order and keys
- Malformed records
- Draft record
"""

import pytest

from models.submission import EntryVariant
from repositories.kv_store import InMemoryKeyValueStore
from repositories.submission_repository import SubmissionStore
from services.exceptions import CapacityExceeded


class TestCapacity:
    """Test the three-submission limit."""

    def test_fourth_save_fails(self, submission_store, make_submission):
        """Test the store refuses a fourth submission and keeps three."""
        for _ in range(3):
            submission_store.save(make_submission())

        with pytest.raises(CapacityExceeded) as exc_info:
            submission_store.save(make_submission())

        assert exc_info.value.limit == 3
        assert exc_info.value.count == 3
        assert submission_store.count() == 3
        assert len(submission_store.all()) == 3

    def test_remaining(self, submission_store, make_submission):
        """Test remaining capacity decreases with each save."""
        assert submission_store.remaining() == 3
        submission_store.save(make_submission())

        assert submission_store.remaining() == 2
        assert submission_store.is_full() is False

    def test_count_survives_reopen(self, kv_store, make_submission):
        """Test a reopened store still enforces the limit."""
        first = SubmissionStore(kv_store)
        for _ in range(3):
            first.save(make_submission())

        reopened = SubmissionStore(kv_store)

        assert reopened.count() == 3
        with pytest.raises(CapacityExceeded):
            reopened.save(make_submission())

    def test_custom_limit(self, make_submission):
        """Test the limit is configurable."""
        store = SubmissionStore(InMemoryKeyValueStore(), max_submissions=1)
        store.save(make_submission())

        assert store.is_full() is True


class TestOrderingAndKeys:
    """Test keys and enumeration order."""

    def test_save_assigns_prefixed_key(self, submission_store, make_submission):
        """Test saved submissions carry their storage key."""
        stored = submission_store.save(make_submission())

        assert stored.key.startswith("submission_")
        assert submission_store.keys() == [stored.key]

    def test_keys_are_unique_within_same_millisecond(self, submission_store, make_submission):
        """Test rapid saves still get distinct increasing keys."""
        keys = [submission_store.save(make_submission()).key for _ in range(3)]

        sequences = [int(key[len("submission_"):]) for key in keys]
        assert sequences == sorted(set(sequences))

    def test_all_in_insertion_order(self, submission_store, make_submission):
        """Test submissions come back in the order they were saved."""
        variants = [EntryVariant.FULL_BUILDING, EntryVariant.SINGLE, EntryVariant.MY_FLOORS]
        for variant in variants:
            submission_store.save(make_submission(variant))

        assert [s.variant for s in submission_store.all()] == variants

    def test_round_trip_keeps_entries(self, submission_store, make_submission):
        """Test sub-entries are read back in authoring order."""
        original = make_submission(EntryVariant.MY_FLOORS, entry_count=3)
        submission_store.save(original)

        loaded = submission_store.all()[0]

        assert loaded.floors == original.floors
        assert loaded.unit == original.unit
        assert loaded.timestamp == original.timestamp


class TestMalformedRecords:
    """Test corrupt stored submissions."""

    def test_malformed_record_skipped(self, kv_store, make_submission):
        """Test load_all skips a corrupt record and reports it."""
        kv_store.set("submission_5", '{"variant": "single"}')
        store = SubmissionStore(kv_store)
        store.save(make_submission())

        result = store.load_all()

        assert len(result.submissions) == 1
        assert result.skipped_count == 1
        assert result.skipped[0].key == "submission_5"

    def test_malformed_record_counts_toward_limit(self, kv_store, make_submission):
        """Test a corrupt record still occupies a slot."""
        kv_store.set("submission_5", "garbage")
        store = SubmissionStore(kv_store)

        assert store.count() == 1
        assert store.remaining() == 2


class TestDraft:
    """Test the single draft record."""

    def test_save_and_load(self, submission_store):
        """Test the draft is stored and read back."""
        submission_store.save_draft({"fields": {"sector": "صور"}})

        assert submission_store.load_draft() == {"fields": {"sector": "صور"}}
        assert submission_store.has_draft() is True

    def test_overwrite(self, submission_store):
        """Test saving a draft replaces the previous one."""
        submission_store.save_draft({"step": "1"})
        submission_store.save_draft({"step": "2"})

        assert submission_store.load_draft() == {"step": "2"}

    def test_draft_not_counted(self, kv_store):
        """Test the draft is not a submission."""
        SubmissionStore(kv_store).save_draft({"step": "1"})

        assert SubmissionStore(kv_store).count() == 0

    def test_clear(self, submission_store):
        """Test clearing removes the draft."""
        submission_store.save_draft({"step": "1"})
        submission_store.clear_draft()

        assert submission_store.load_draft() is None

    def test_unreadable_draft_is_discarded(self, kv_store):
        """Test a corrupt draft reads as no draft and is removed."""
        kv_store.set("currentFormData", "{oops")
        store = SubmissionStore(kv_store)

        assert store.load_draft() is None
        assert store.has_draft() is False

    def test_draft_key_must_differ_from_prefix(self):
        """Test a draft key inside the submission namespace is refused."""
        with pytest.raises(ValueError):
            SubmissionStore(InMemoryKeyValueStore(), draft_key="submission_draft")
