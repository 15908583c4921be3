"""SuggestionService: request-level wrapper around the suggestion engine.

Applies input defaults, runs the environment check, calls the engine and
stamps the result with the generation time and resolved language.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Protocol

from app.config import Config, validate_environment
from app.errors import ConfigurationError, ErrorKind, InternalError, ValidationError
from app.schemas import Entry, SuggestionsResponse, WritingSuggestion
from app.utils.text import utc_now_iso

logger = logging.getLogger(__name__)


class SuggestionEngine(Protocol):
    def generate_suggestions(
        self,
        user_id: str,
        topic_title: str,
        topic_description: str,
        recent_entries: List[Entry],
        language: str,
    ) -> List[WritingSuggestion]:
        ...


class SuggestionService:
    def __init__(
        self,
        engine: SuggestionEngine,
        env_validator: Callable[[], None] = validate_environment,
        default_language: Optional[str] = None,
    ):
        self.engine = engine
        self.env_validator = env_validator
        self.default_language = default_language or Config.DEFAULT_LANGUAGE

    def get_suggestions(
        self,
        user_id: Any,
        topic_title: Any,
        topic_description: Optional[str] = None,
        language: Optional[str] = None,
    ) -> SuggestionsResponse:
        if not user_id or not topic_title:
            raise ValidationError("User ID and topic title are required")

        topic_description = topic_description or ""
        language = language or self.default_language

        try:
            self.env_validator()
            # TODO: pass the user's latest entries once the product decides whether
            # entry text may be sent to the model; the engine already accepts them.
            suggestions = self.engine.generate_suggestions(
                user_id, topic_title, topic_description, [], language
            )
        except ConfigurationError as e:
            logger.debug("Suggestion request rejected: environment is misconfigured", exc_info=True)
            raise InternalError("Failed to generate AI suggestions", ErrorKind.CONFIGURATION) from e
        except Exception as e:
            logger.debug("Error generating AI suggestions for user=%s topic=%r", user_id, topic_title, exc_info=True)
            raise InternalError("Failed to generate AI suggestions", ErrorKind.ENGINE) from e

        return SuggestionsResponse(
            suggestions=suggestions,
            generated_at=utc_now_iso(),
            language=language,
        )
