"""Request/response schemas for API endpoints.

Holds Pydantic models for the stored records (entries, topics), derived
views (topic stats) and AI suggestions. Python attributes are snake_case;
JSON on the wire and in the store is camelCase via the alias generator.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class EntryDraft(CamelModel):
    """Validated creation payload handed to the entry store."""

    user_id: str
    topic_id: str
    title: str
    content: str
    word_count: int = Field(ge=0)


class Entry(CamelModel):
    id: str
    entry_id: str
    user_id: str
    topic_id: str
    title: str
    content: str
    word_count: int = Field(ge=0)
    created_at: str
    updated_at: str


class Topic(CamelModel):
    user_id: str
    topic_id: str
    title: str
    description: str = ""
    icon: Optional[str] = None
    color: Optional[str] = None
    category: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None


class TopicStat(CamelModel):
    topic_id: str
    entry_count: int


class Category(CamelModel):
    """A distinct topic category; ``id`` is the raw category value."""

    id: str
    name: str
    color: str
    icon: str


class WritingSuggestion(CamelModel):
    id: str
    title: str
    description: str
    prompt: str
    tags: List[str] = Field(default_factory=list)
    confidence: float = 0.8
    reasoning: str = ""


class SuggestionsResponse(CamelModel):
    suggestions: List[WritingSuggestion]
    generated_at: str
    language: str
