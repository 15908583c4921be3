"""Shared test fixtures for the diary backend."""

import pytest

from app import create_app
from app.schemas import EntryDraft, Topic, WritingSuggestion
from app.services.store_service import JsonStore


class FakeEngine:
    """Records calls and returns a canned suggestion."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def generate_suggestions(self, user_id, topic_title, topic_description, recent_entries, language):
        self.calls.append((user_id, topic_title, topic_description, recent_entries, language))
        if self.error is not None:
            raise self.error
        return [
            WritingSuggestion(
                id="s-1",
                title=f"Write about {topic_title}",
                description="Describe one moment in detail",
                prompt="Describe one moment in detail",
                tags=["detail"],
                confidence=0.9,
                reasoning="test",
            )
        ]


def add_entry(store, user_id, topic_id, content="some words here", title="Title"):
    return store.create_entry(
        EntryDraft(
            user_id=user_id,
            topic_id=topic_id,
            title=title,
            content=content,
            word_count=len(content.split()),
        )
    )


@pytest.fixture
def store(tmp_path):
    return JsonStore(str(tmp_path / "db"))


@pytest.fixture
def seeded_store(store):
    """u1 owns t1 (3 entries) and t2 (0 entries); u2 owns t3 (1 entry)."""
    store.put_topic(Topic(user_id="u1", topic_id="t1", title="Travel", created_at="2026-01-01T00:00:00.000Z"))
    store.put_topic(Topic(user_id="u1", topic_id="t2", title="Work", created_at="2026-01-02T00:00:00.000Z"))
    store.put_topic(Topic(user_id="u2", topic_id="t3", title="Health", created_at="2026-01-01T00:00:00.000Z"))
    for i in range(3):
        add_entry(store, "u1", "t1", title=f"Day {i}")
    add_entry(store, "u2", "t3")
    return store


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def app(seeded_store, engine):
    app = create_app(
        config_overrides={"TESTING": True, "STATS_MAX_WORKERS": 4},
        store=seeded_store,
        engine=engine,
        env_validator=lambda: None,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()
