"""LLMService: AI writing suggestions for a journaling topic.

Builds the user's writing profile from stored entries, renders the coaching
prompt and asks the chat model for a JSON array of suggestions.
Unparseable model output degrades to a single fallback suggestion;
errors raised by the model call itself propagate to the caller.
"""

from __future__ import annotations

import json
import logging
import re
import time
import uuid
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from app.config import Config
from app.schemas import Entry, WritingSuggestion
from app.services.profile_service import WritingProfile, analyze_writing_history
from app.services.store_service import EntryStore
from app.utils.text import utc_now_iso
from prompts.suggestion_template import HUMAN_TEMPLATE, SYSTEM_TEMPLATE, language_name

load_dotenv()

logger = logging.getLogger(__name__)


def fallback_suggestions(topic_title: str) -> List[WritingSuggestion]:
    return [
        WritingSuggestion(
            id="fallback-reflection",
            title="Deep Reflection",
            description="Take a deeper look at your experiences with this topic",
            prompt=(
                f"Reflect on your journey with {topic_title.lower()}. What patterns do you notice? "
                "What has changed over time? What insights have you gained?"
            ),
            tags=["reflection", "insights", "patterns"],
            confidence=0.7,
            reasoning="Fallback suggestion based on topic analysis",
        )
    ]


def _recent_context(recent_entries: List[Entry]) -> str:
    parts = [f"{e.title}: {e.content[:200]}..." for e in recent_entries[:3]]
    return "\n\n".join(parts) or "No recent entries"


def _load_json(text: str) -> Any:
    """Whole text first, then the first array or object that decodes cleanly."""
    try:
        return json.loads(text)
    except ValueError:
        pass
    decoder = json.JSONDecoder()
    for m in re.finditer(r"[\[{]", text):
        try:
            value, _ = decoder.raw_decode(text, m.start())
        except ValueError:
            continue
        if isinstance(value, dict) or (isinstance(value, list) and any(isinstance(v, dict) for v in value)):
            return value
    return None


def _tags(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    return [str(t) for t in value or []]


def parse_suggestions(text: str) -> Optional[List[WritingSuggestion]]:
    """Extract the JSON array from model output; None if it cannot be read."""
    items = _load_json(text)
    if items is None:
        return None
    if isinstance(items, dict):
        items = [items]
    if not isinstance(items, list):
        return None

    stamp = int(time.time() * 1000)
    out: List[WritingSuggestion] = []
    for i, raw in enumerate(items):
        if not isinstance(raw, dict) or not raw.get("title"):
            continue
        description = raw.get("description") or ""
        try:
            out.append(
                WritingSuggestion(
                    id=f"ai-suggestion-{stamp}-{i}",
                    title=str(raw["title"]),
                    description=str(description),
                    prompt=str(raw.get("prompt") or description or raw.get("reasoning") or ""),
                    tags=_tags(raw.get("tags")),
                    confidence=float(raw.get("confidence") or 0.8),
                    reasoning=str(raw.get("reasoning") or "AI-generated suggestion based on your writing patterns"),
                )
            )
        except (TypeError, ValueError):
            logger.debug("Skipping malformed suggestion item %d", i)
    return out or None


class LLMService:
    def __init__(
        self,
        store: EntryStore,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        llm: Any = None,
    ):
        self.store = store
        self.model_name = model_name or Config.LLM_MODEL
        self.temperature = Config.LLM_TEMPERATURE if temperature is None else temperature
        self._llm = llm
        self.prompt = ChatPromptTemplate.from_messages(
            [("system", SYSTEM_TEMPLATE), ("human", HUMAN_TEMPLATE)]
        )

    @property
    def llm(self):
        # Built on first use so the app starts without GOOGLE_API_KEY set
        if self._llm is None:
            self._llm = ChatGoogleGenerativeAI(
                model=self.model_name,
                temperature=self.temperature,
            )
        return self._llm

    def _prompt_inputs(
        self,
        profile: WritingProfile,
        topic_title: str,
        topic_description: str,
        recent_entries: List[Entry],
        language: str,
    ) -> Dict[str, Any]:
        return {
            "total_entries": profile.total_entries,
            "total_words": profile.total_words,
            "average_words": profile.average_words_per_entry,
            "writing_style": profile.writing_style,
            "average_length": profile.average_entry_length,
            "themes": ", ".join(profile.common_themes),
            "current_streak": profile.current_streak,
            "longest_streak": profile.longest_streak,
            "topic_title": topic_title,
            "topic_description": topic_description,
            "language": language,
            "language_name": language_name(language),
            "recent": _recent_context(recent_entries),
            "timestamp": utc_now_iso(),
            "seed": uuid.uuid4().hex[:13],
        }

    def generate_suggestions(
        self,
        user_id: str,
        topic_title: str,
        topic_description: str,
        recent_entries: List[Entry],
        language: str,
    ) -> List[WritingSuggestion]:
        profile = analyze_writing_history(self.store, user_id)
        inputs = self._prompt_inputs(profile, topic_title, topic_description, recent_entries, language)

        chain = self.prompt | self.llm
        result = chain.invoke(inputs)
        text = result.content if hasattr(result, "content") else str(result)
        if not isinstance(text, str):
            text = str(text)

        suggestions = parse_suggestions(text)
        if suggestions is None:
            logger.warning("Could not parse suggestions from %s output; using fallback", self.model_name)
            return fallback_suggestions(topic_title)
        logger.info("Generated %d suggestions for user=%s topic=%r", len(suggestions), user_id, topic_title)
        return suggestions
