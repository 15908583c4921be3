"""Store clients for diary entries and user topics.

``EntryStore`` and ``TopicStore`` are the contracts the services depend on.
``JsonStore`` implements both on top of two JSON documents under the data
directory, keyed by user id the way a key-value table would be:

- ``entries.json``: ``{user_id: {entry_id: entry}}``
- ``topics.json``: ``{user_id: {topic_id: topic}}``
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from app.config import Config
from app.schemas import Entry, EntryDraft, Topic
from app.utils.ids import new_id
from app.utils.io_utils import ensure_dir, read_json, write_json
from app.utils.text import utc_now_iso

logger = logging.getLogger(__name__)


@runtime_checkable
class EntryStore(Protocol):
    def list_entries(self, user_id: str, topic_id: Optional[str] = None) -> List[Entry]:
        """Return the user's entries, optionally scoped to one topic."""
        ...

    def create_entry(self, draft: EntryDraft) -> Entry:
        """Persist a new entry and return it with server-assigned fields."""
        ...

    def get_entry(self, user_id: str, entry_id: str) -> Optional[Entry]:
        ...


@runtime_checkable
class TopicStore(Protocol):
    def list_topics(self, user_id: str) -> List[Topic]:
        """Return the user's topics, oldest first."""
        ...


class JsonStore:
    """JSON-file backed entry and topic store.

    Writes are serialised with a lock and land via atomic replace, so
    concurrent readers always see a complete document.
    """

    def __init__(self, db_dir: Optional[str] = None):
        self.db_dir = db_dir or Config.DB_DIR
        ensure_dir(self.db_dir)
        self.entries_path = os.path.join(self.db_dir, "entries.json")
        self.topics_path = os.path.join(self.db_dir, "topics.json")
        self._write_lock = threading.Lock()

    def _load_db(self, path: str) -> Dict[str, Any]:
        data = read_json(path, default=None)
        if not isinstance(data, dict):
            return {}
        return data

    # Entries

    def list_entries(self, user_id: str, topic_id: Optional[str] = None) -> List[Entry]:
        rows = self._load_db(self.entries_path).get(user_id) or {}
        entries = [Entry.model_validate(r) for r in rows.values()]
        if topic_id:
            entries = [e for e in entries if e.topic_id == topic_id]
        logger.debug("Loaded %d entries for user=%s topic=%s", len(entries), user_id, topic_id)
        return entries

    def get_entry(self, user_id: str, entry_id: str) -> Optional[Entry]:
        rows = self._load_db(self.entries_path).get(user_id) or {}
        row = rows.get(entry_id)
        return Entry.model_validate(row) if row else None

    def create_entry(self, draft: EntryDraft) -> Entry:
        entry_id = new_id("entry")
        now = utc_now_iso()
        entry = Entry(
            id=entry_id,
            entry_id=entry_id,
            user_id=draft.user_id,
            topic_id=draft.topic_id,
            title=draft.title,
            content=draft.content,
            word_count=draft.word_count,
            created_at=now,
            updated_at=now,
        )
        with self._write_lock:
            db = self._load_db(self.entries_path)
            db.setdefault(draft.user_id, {})[entry_id] = entry.to_json()
            write_json(self.entries_path, db)
        logger.info("Stored entry %s for user=%s topic=%s", entry_id, draft.user_id, draft.topic_id)
        return entry

    # Topics

    def list_topics(self, user_id: str) -> List[Topic]:
        rows = self._load_db(self.topics_path).get(user_id) or {}
        topics = [Topic.model_validate(r) for r in rows.values()]
        return sorted(topics, key=lambda t: t.created_at or "")

    def put_topic(self, topic: Topic) -> Topic:
        """Insert or replace a topic. Used for seeding; topics are read-only over HTTP."""
        if not topic.created_at:
            topic = topic.model_copy(update={"created_at": utc_now_iso()})
        with self._write_lock:
            db = self._load_db(self.topics_path)
            db.setdefault(topic.user_id, {})[topic.topic_id] = topic.to_json()
            write_json(self.topics_path, db)
        return topic
