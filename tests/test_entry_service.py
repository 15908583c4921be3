"""Tests for app.services.entry_service."""

from unittest.mock import MagicMock

import pytest

from app.errors import ErrorKind, InternalError, NotFoundError, ValidationError
from app.services.entry_service import EntryService

from tests.conftest import add_entry

VALID = {"user_id": "u1", "topic_id": "t1", "title": "Day 1", "content": "I went to the park today"}


class TestCreateEntry:
    def test_word_count_derived(self, store):
        entry = EntryService(store).create_entry(**VALID)
        assert entry.word_count == 6
        assert store.list_entries("u1") == [entry]

    def test_whitespace_only_content_counts_one(self, store):
        entry = EntryService(store).create_entry(**{**VALID, "content": "    "})
        assert entry.word_count == 1

    @pytest.mark.parametrize("field", ["user_id", "topic_id", "title", "content"])
    @pytest.mark.parametrize("bad", [None, ""])
    def test_missing_field_rejected_without_write(self, field, bad):
        fake_store = MagicMock()
        with pytest.raises(ValidationError, match="Missing required fields"):
            EntryService(fake_store).create_entry(**{**VALID, field: bad})
        fake_store.create_entry.assert_not_called()

    def test_non_string_field_rejected(self):
        fake_store = MagicMock()
        with pytest.raises(ValidationError):
            EntryService(fake_store).create_entry(**{**VALID, "content": 42})
        fake_store.create_entry.assert_not_called()

    def test_store_fault_becomes_internal_error(self):
        fake_store = MagicMock()
        fake_store.create_entry.side_effect = OSError("disk full")
        with pytest.raises(InternalError, match="Failed to create entry") as exc:
            EntryService(fake_store).create_entry(**VALID)
        assert exc.value.kind is ErrorKind.STORE
        assert isinstance(exc.value.__cause__, OSError)

    def test_draft_passed_to_store(self):
        fake_store = MagicMock()
        EntryService(fake_store).create_entry(**VALID)
        draft = fake_store.create_entry.call_args.args[0]
        assert (draft.user_id, draft.topic_id, draft.title, draft.word_count) == ("u1", "t1", "Day 1", 6)


class TestListEntries:
    def test_requires_user(self, store):
        with pytest.raises(ValidationError, match="User ID is required"):
            EntryService(store).list_entries(None)

    def test_all_topics_when_no_topic(self, seeded_store):
        add_entry(seeded_store, "u1", "t2")
        entries = EntryService(seeded_store).list_entries("u1")
        assert {e.topic_id for e in entries} == {"t1", "t2"}
        assert len(entries) == 4

    def test_scoped_to_topic(self, seeded_store):
        entries = EntryService(seeded_store).list_entries("u1", "t1")
        assert len(entries) == 3
        assert all(e.topic_id == "t1" for e in entries)

    def test_empty_topic_id_means_unscoped(self, seeded_store):
        assert len(EntryService(seeded_store).list_entries("u1", "")) == 3

    def test_store_fault(self):
        fake_store = MagicMock()
        fake_store.list_entries.side_effect = RuntimeError("boom")
        with pytest.raises(InternalError, match="Failed to fetch entries"):
            EntryService(fake_store).list_entries("u1")


class TestListTopicEntries:
    def test_requires_user(self, store):
        with pytest.raises(ValidationError, match="User ID is required"):
            EntryService(store).list_topic_entries("", "t1")

    def test_requires_topic(self, store):
        with pytest.raises(ValidationError, match="Topic ID is required"):
            EntryService(store).list_topic_entries("u1", "")

    def test_same_fetch_as_list_entries(self, seeded_store):
        svc = EntryService(seeded_store)
        assert svc.list_topic_entries("u1", "t1") == svc.list_entries("u1", "t1")


class TestGetEntry:
    def test_found(self, seeded_store):
        first = seeded_store.list_entries("u1")[0]
        assert EntryService(seeded_store).get_entry("u1", first.entry_id) == first

    def test_not_found(self, seeded_store):
        with pytest.raises(NotFoundError):
            EntryService(seeded_store).get_entry("u1", "nope")

    def test_requires_user(self, seeded_store):
        with pytest.raises(ValidationError):
            EntryService(seeded_store).get_entry(None, "x")
