"""Categories route: GET /api/categories?userId= -> { categories }"""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.routes import collaborators
from app.services.topic_service import TopicService

categories_bp = Blueprint("categories", __name__, url_prefix="/api/categories")


@categories_bp.get("")
def list_categories():
    c = collaborators()
    svc = TopicService(c["store"], c["store"], max_workers=c["stats_max_workers"])
    categories = svc.list_categories(request.args.get("userId"))
    return jsonify({"categories": [cat.to_json() for cat in categories]})
