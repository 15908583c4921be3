"""EntryService: create and look up diary entries.

Validates required identifiers, derives the word count on creation and
delegates persistence to the entry store. Store faults are logged at debug
level and re-raised as ``InternalError`` with a generic message; the app's
error handler writes the single error-level record.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from app.errors import ErrorKind, InternalError, NotFoundError, ValidationError
from app.schemas import Entry, EntryDraft
from app.services.store_service import EntryStore
from app.utils.text import count_words

logger = logging.getLogger(__name__)


def _present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class EntryService:
    def __init__(self, store: EntryStore):
        self.store = store

    def create_entry(self, user_id: Any, topic_id: Any, title: Any, content: Any) -> Entry:
        if not all(_present(v) for v in (user_id, topic_id, title, content)):
            raise ValidationError("Missing required fields")

        draft = EntryDraft(
            user_id=user_id,
            topic_id=topic_id,
            title=title,
            content=content,
            word_count=count_words(content),
        )
        logger.info(
            "Creating entry for user=%s topic=%s title=%r wordCount=%d",
            user_id, topic_id, title, draft.word_count,
        )
        try:
            return self.store.create_entry(draft)
        except Exception as e:
            logger.debug("Entry store failed to create entry for user=%s", user_id, exc_info=True)
            raise InternalError("Failed to create entry", ErrorKind.STORE) from e

    def list_entries(self, user_id: Any, topic_id: Optional[str] = None) -> List[Entry]:
        if not _present(user_id):
            raise ValidationError("User ID is required")
        return self._fetch(user_id, topic_id or None)

    def list_topic_entries(self, user_id: Any, topic_id: Any) -> List[Entry]:
        """Topic-scoped lookup; both identifiers are mandatory here."""
        if not _present(user_id):
            raise ValidationError("User ID is required")
        if not _present(topic_id):
            raise ValidationError("Topic ID is required")
        return self._fetch(user_id, topic_id)

    def get_entry(self, user_id: Any, entry_id: Any) -> Entry:
        if not _present(user_id):
            raise ValidationError("User ID is required")
        if not _present(entry_id):
            raise ValidationError("Entry ID is required")
        try:
            entry = self.store.get_entry(user_id, entry_id)
        except Exception as e:
            logger.debug("Entry store failed to fetch entry %s", entry_id, exc_info=True)
            raise InternalError("Failed to fetch entry", ErrorKind.STORE) from e
        if entry is None:
            raise NotFoundError("Entry not found")
        return entry

    def _fetch(self, user_id: str, topic_id: Optional[str]) -> List[Entry]:
        try:
            entries = self.store.list_entries(user_id, topic_id)
        except Exception as e:
            logger.debug("Entry store failed to list entries for user=%s topic=%s", user_id, topic_id, exc_info=True)
            raise InternalError("Failed to fetch entries", ErrorKind.STORE) from e
        logger.info("Fetched %d entries for user=%s topic=%s", len(entries), user_id, topic_id)
        return entries
