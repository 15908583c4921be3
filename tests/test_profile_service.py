"""Tests for app.services.profile_service."""

from datetime import date
from unittest.mock import MagicMock

from app.schemas import Entry
from app.services.profile_service import (
    WritingProfile,
    analyze_writing_history,
    build_profile,
    common_themes,
    length_category,
    streaks,
    writing_style,
)


def _entry(i, topic_id="t1", content="plain words", created_at="2026-01-01T10:00:00.000Z", word_count=None):
    return Entry(
        id=f"e{i}",
        entry_id=f"e{i}",
        user_id="u1",
        topic_id=topic_id,
        title=f"Entry {i}",
        content=content,
        word_count=word_count if word_count is not None else len(content.split()),
        created_at=created_at,
        updated_at=created_at,
    )


class TestStreaks:
    def test_empty(self):
        assert streaks([]) == (0, 0)

    def test_current_run_ending_today(self):
        days = [date(2026, 3, 10), date(2026, 3, 9), date(2026, 3, 8), date(2026, 3, 1)]
        assert streaks(days, today=date(2026, 3, 10)) == (3, 3)

    def test_current_run_ending_yesterday(self):
        days = [date(2026, 3, 9), date(2026, 3, 8)]
        assert streaks(days, today=date(2026, 3, 10)) == (2, 2)

    def test_stale_run_is_not_current(self):
        days = [date(2026, 3, 1), date(2026, 3, 2), date(2026, 3, 3), date(2026, 3, 4)]
        assert streaks(days, today=date(2026, 3, 20)) == (0, 4)

    def test_same_day_counted_once(self):
        days = [date(2026, 3, 10), date(2026, 3, 10), date(2026, 3, 9)]
        assert streaks(days, today=date(2026, 3, 10)) == (2, 2)


def test_length_category():
    assert length_category(50) == "short"
    assert length_category(100) == "medium"
    assert length_category(299) == "medium"
    assert length_category(300) == "long"


def test_themes_ranked():
    entries = [
        _entry(1, content="work project meeting with my boss at work"),
        _entry(2, content="I feel happy"),
    ]
    assert common_themes(entries) == ["work", "emotions"]


def test_style_defaults_to_reflective():
    assert writing_style([_entry(1, content="nothing notable")]) == "reflective"
    assert writing_style([_entry(1, content="the data and research and evidence")]) == "analytical"


def test_build_profile():
    entries = [
        _entry(1, "t1", word_count=100, created_at="2026-03-09T08:00:00.000Z"),
        _entry(2, "t1", word_count=200, created_at="2026-03-10T08:00:00.000Z"),
        _entry(3, "t2", word_count=300, created_at="2026-03-01T08:00:00.000Z"),
    ]
    profile = build_profile("u1", entries, today=date(2026, 3, 10))
    assert profile.total_entries == 3
    assert profile.total_words == 600
    assert profile.average_words_per_entry == 200
    assert profile.average_entry_length == "medium"
    assert [t.topic_id for t in profile.most_active_topics] == ["t1", "t2"]
    assert profile.most_active_topics[0].total_words == 300
    assert (profile.current_streak, profile.longest_streak) == (2, 2)
    assert profile.last_entry_date.startswith("2026-03-10T08:00:00")


def test_build_profile_no_entries():
    assert build_profile("u1", []) == WritingProfile(user_id="u1")


def test_analyze_store_failure_gives_default():
    store = MagicMock()
    store.list_entries.side_effect = RuntimeError("down")
    assert analyze_writing_history(store, "u1") == WritingProfile(user_id="u1")


def test_analyze_unparseable_timestamp_gives_default():
    store = MagicMock()
    store.list_entries.return_value = [_entry(1), _entry(2, created_at="not-a-date")]
    assert analyze_writing_history(store, "u1") == WritingProfile(user_id="u1")
