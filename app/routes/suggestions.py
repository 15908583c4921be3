"""AI suggestions route: GET /api/ai-suggestions

Query: userId, topicTitle (required), topicDescription, language (default DEFAULT_LANGUAGE).
Response: { suggestions, generatedAt, language }
"""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.routes import collaborators
from app.services.suggestion_service import SuggestionService

suggestions_bp = Blueprint("suggestions", __name__)


@suggestions_bp.get("/api/ai-suggestions")
def ai_suggestions():
    c = collaborators()
    svc = SuggestionService(
        c["engine"],
        env_validator=c["env_validator"],
        default_language=c["default_language"],
    )
    out = svc.get_suggestions(
        request.args.get("userId"),
        request.args.get("topicTitle"),
        request.args.get("topicDescription"),
        request.args.get("language"),
    )
    return jsonify(out.to_json())
