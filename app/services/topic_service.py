"""TopicService: topic listing and per-topic entry statistics.

``get_topic_stats`` fetches the user's topics, then fans out one entry
lookup per topic on a thread pool capped at ``max_workers``. The fan-out
is all-or-nothing: the first failed lookup fails the whole call and
cancels lookups that have not started yet.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from app.config import Config
from app.errors import ErrorKind, InternalError, ValidationError
from app.schemas import Category, Topic, TopicStat
from app.services.store_service import EntryStore, TopicStore

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY_COLOR = "from-gray-500 to-gray-600"
DEFAULT_CATEGORY_ICON = "📝"


class TopicService:
    def __init__(
        self,
        topics: TopicStore,
        entries: EntryStore,
        max_workers: Optional[int] = None,
    ):
        self.topics = topics
        self.entries = entries
        self.max_workers = max(1, max_workers or Config.STATS_MAX_WORKERS)

    def list_topics(self, user_id: Any) -> List[Topic]:
        if not isinstance(user_id, str) or not user_id:
            raise ValidationError("User ID is required")
        try:
            return self.topics.list_topics(user_id)
        except Exception as e:
            logger.debug("Topic store failed to list topics for user=%s", user_id, exc_info=True)
            raise InternalError("Failed to fetch topics", ErrorKind.STORE) from e

    def list_categories(self, user_id: Any) -> List[Category]:
        """Distinct categories across the user's topics, sorted by display name.

        Colour and icon come from the first topic seen with that category.
        """
        if not isinstance(user_id, str) or not user_id:
            raise ValidationError("User ID is required")
        try:
            topics = self.topics.list_topics(user_id)
        except Exception as e:
            logger.debug("Topic store failed to list categories for user=%s", user_id, exc_info=True)
            raise InternalError("Failed to fetch categories", ErrorKind.STORE) from e

        seen: Dict[str, Category] = {}
        for t in topics:
            if not t.category or t.category in seen:
                continue
            seen[t.category] = Category(
                id=t.category,
                name=t.category[0].upper() + t.category[1:],
                color=t.color or DEFAULT_CATEGORY_COLOR,
                icon=t.icon or DEFAULT_CATEGORY_ICON,
            )
        return sorted(seen.values(), key=lambda c: c.name)

    def _count_entries(self, user_id: str, topic_id: str) -> int:
        return len(self.entries.list_entries(user_id, topic_id))

    def get_topic_stats(self, user_id: Any) -> List[TopicStat]:
        if not isinstance(user_id, str) or not user_id:
            raise ValidationError("User ID is required")

        try:
            topics = self.topics.list_topics(user_id)
            if not topics:
                return []

            workers = min(self.max_workers, len(topics))
            logger.info("Counting entries for %d topics (user=%s, workers=%d)", len(topics), user_id, workers)
            with ThreadPoolExecutor(max_workers=workers) as ex:
                futures: List[Future] = [
                    ex.submit(self._count_entries, user_id, t.topic_id) for t in topics
                ]
                try:
                    counts = [f.result() for f in futures]
                except Exception:
                    for f in futures:
                        f.cancel()
                    raise
        except Exception as e:
            logger.debug("Failed to compute topic stats for user=%s", user_id, exc_info=True)
            raise InternalError("Failed to fetch topic stats", ErrorKind.STORE) from e

        return [TopicStat(topic_id=t.topic_id, entry_count=n) for t, n in zip(topics, counts)]

    @staticmethod
    def summarize(stats: List[TopicStat]) -> Dict[str, int]:
        return {
            "totalTopics": len(stats),
            "totalEntries": sum(s.entry_count for s in stats),
        }
