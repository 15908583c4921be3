"""Writing profile derived from a user's stored entries.

The suggestion engine feeds this profile to the model so prompts can be
pitched at the user's usual length, themes and style. Everything here is
keyword counting over entry text; nothing is persisted.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional

from app.schemas import Entry
from app.services.store_service import EntryStore
from app.utils.text import parse_iso

logger = logging.getLogger(__name__)

THEME_KEYWORDS: Dict[str, List[str]] = {
    "relationships": ["friend", "family", "relationship", "love", "partner", "parent", "child"],
    "work": ["work", "job", "career", "project", "meeting", "colleague", "boss"],
    "health": ["health", "exercise", "workout", "diet", "sleep", "energy", "stress"],
    "learning": ["learn", "study", "course", "book", "knowledge", "skill", "education"],
    "creativity": ["creative", "art", "music", "write", "design", "imagine", "inspire"],
    "emotions": ["feel", "emotion", "happy", "sad", "angry", "anxious", "excited"],
    "goals": ["goal", "plan", "achieve", "success", "progress", "target", "dream"],
}

STYLE_KEYWORDS: Dict[str, List[str]] = {
    "reflective": ["think", "reflect", "consider", "realize", "understand", "learned"],
    "creative": ["imagine", "story", "character", "scene", "creative", "artistic"],
    "analytical": ["analyze", "data", "research", "evidence", "conclusion", "because"],
    "emotional": ["feel", "emotion", "heart", "love", "hate", "fear", "joy", "sad"],
}


@dataclass
class ActiveTopic:
    topic_id: str
    entry_count: int
    total_words: int


@dataclass
class WritingProfile:
    """Aggregate view of a user's writing history.

    Attributes:
        average_entry_length: ``short`` (<100 words), ``medium`` (<300) or ``long``.
        writing_style: Dominant style bucket by keyword hits.
        common_themes: Up to three theme buckets, most frequent first.
        most_active_topics: Up to five topics by entry count.
    """

    user_id: str
    total_entries: int = 0
    total_words: int = 0
    average_words_per_entry: int = 0
    most_active_topics: List[ActiveTopic] = field(default_factory=list)
    average_entry_length: str = "medium"
    common_themes: List[str] = field(default_factory=list)
    writing_style: str = "reflective"
    current_streak: int = 0
    longest_streak: int = 0
    last_entry_date: Optional[str] = None


def _keyword_hits(text: str, keywords: List[str]) -> int:
    return sum(len(re.findall(rf"\b{re.escape(k)}\w*", text)) for k in keywords)


def common_themes(entries: List[Entry], limit: int = 3) -> List[str]:
    text = " ".join(e.content for e in entries).lower()
    counts = {theme: _keyword_hits(text, kws) for theme, kws in THEME_KEYWORDS.items()}
    ranked = sorted(((c, t) for t, c in counts.items() if c > 0), key=lambda x: -x[0])
    return [t for _, t in ranked[:limit]]


def writing_style(entries: List[Entry]) -> str:
    text = " ".join(e.content for e in entries).lower()
    best, best_score = "reflective", 0
    for style, kws in STYLE_KEYWORDS.items():
        score = _keyword_hits(text, kws)
        if score > best_score:
            best, best_score = style, score
    return best


def length_category(average_words: float) -> str:
    if average_words < 100:
        return "short"
    if average_words < 300:
        return "medium"
    return "long"


def streaks(days: List[date], today: Optional[date] = None) -> tuple[int, int]:
    """Return ``(current, longest)`` runs of consecutive writing days.

    The current streak only counts if the latest day is today or yesterday.
    """
    if not days:
        return 0, 0
    today = today or datetime.now(timezone.utc).date()
    ordered = sorted(set(days), reverse=True)

    longest = run = 1
    for newer, older in zip(ordered, ordered[1:]):
        if newer - older == timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)

    current = 0
    if today - ordered[0] <= timedelta(days=1):
        current = 1
        for newer, older in zip(ordered, ordered[1:]):
            if newer - older != timedelta(days=1):
                break
            current += 1
    return current, longest


def build_profile(user_id: str, entries: List[Entry], today: Optional[date] = None) -> WritingProfile:
    if not entries:
        return WritingProfile(user_id=user_id)

    total_words = sum(e.word_count for e in entries)
    average = total_words / len(entries)

    per_topic: Dict[str, ActiveTopic] = {}
    for e in entries:
        t = per_topic.setdefault(e.topic_id, ActiveTopic(e.topic_id, 0, 0))
        t.entry_count += 1
        t.total_words += e.word_count
    top = Counter({tid: t.entry_count for tid, t in per_topic.items()}).most_common(5)

    created = [parse_iso(e.created_at) for e in entries]
    current, longest = streaks([c.date() for c in created], today)

    return WritingProfile(
        user_id=user_id,
        total_entries=len(entries),
        total_words=total_words,
        average_words_per_entry=round(average),
        most_active_topics=[per_topic[tid] for tid, _ in top],
        average_entry_length=length_category(average),
        common_themes=common_themes(entries),
        writing_style=writing_style(entries),
        current_streak=current,
        longest_streak=longest,
        last_entry_date=max(created).isoformat(),
    )


def analyze_writing_history(store: EntryStore, user_id: str) -> WritingProfile:
    """Build the profile from the store; any failure yields an empty profile."""
    try:
        entries = store.list_entries(user_id)
    except Exception:
        logger.exception("Could not load writing history for user=%s; using default profile", user_id)
        return WritingProfile(user_id=user_id)
    try:
        return build_profile(user_id, entries)
    except ValueError:
        logger.exception("Could not analyse writing history for user=%s; using default profile", user_id)
        return WritingProfile(user_id=user_id)
